"""Tests for decks."""

import zipfile
from pathlib import Path

from ankipack import Deck, Model, Note


class TestDeck:
    """Tests for deck contents and serialization."""

    def test_models_deduplicated(
        self, simple_model: Model, two_sided_model: Model
    ) -> None:
        """Test that each model is listed once in first-seen order."""
        deck = Deck(2059400110, "Country Capitals")
        deck.add_note(Note(two_sided_model, ["q1", "a1"]))
        deck.add_note(Note(simple_model, ["q2"]))
        deck.add_note(Note(two_sided_model, ["q3", "a3"]))

        assert deck.models() == [two_sided_model, simple_model]

    def test_registered_model_without_notes(self, simple_model: Model) -> None:
        """Test that an explicitly added model is listed."""
        deck = Deck(1, "Empty")
        deck.add_model(simple_model)
        assert deck.models() == [simple_model]

    def test_notes_from_constructor(self, simple_model: Model) -> None:
        """Test passing notes at construction."""
        notes = [Note(simple_model, ["a"]), Note(simple_model, ["b"])]
        deck = Deck(1, "Deck", notes=notes)
        assert deck.notes == notes

    def test_entry(self) -> None:
        """Test the JSON record stored in col.decks."""
        deck = Deck(2059400110, "Country Capitals", description="Capitals of the world")
        data = deck.to_entry(1700000000.9).to_json_dict()

        assert data["id"] == 2059400110
        assert data["name"] == "Country Capitals"
        assert data["desc"] == "Capitals of the world"
        assert data["mod"] == 1700000000
        assert data["conf"] == 1
        assert data["extendRev"] == 50
        assert data["newToday"] == [0, 0]

    def test_write_to_file(self, tmp_path: Path, simple_model: Model) -> None:
        """Test the single-deck convenience writer."""
        deck = Deck(1234, "Solo")
        deck.add_note(Note(simple_model, ["only question"]))
        output_path = tmp_path / "solo.apkg"

        result_path = deck.write_to_file(output_path, timestamp=1700000000)

        assert result_path == output_path
        with zipfile.ZipFile(output_path) as archive:
            assert "collection.anki2" in archive.namelist()
