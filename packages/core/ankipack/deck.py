"""Decks: named collections of notes."""

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ankipack.model import Model
from ankipack.note import Note
from ankipack.schemas.entries import DeckEntry

if TYPE_CHECKING:
    from ankipack.config import Settings


class Deck:
    """A named, identified collection of notes importable as a unit."""

    def __init__(
        self,
        deck_id: int,
        name: str,
        description: str = "",
        notes: Iterable[Note] = (),
    ) -> None:
        self.deck_id = deck_id
        self.name = name
        self.description = description
        self.notes: list[Note] = list(notes)
        self._models: list[Model] = []

    def __repr__(self) -> str:
        return f"Deck(deck_id={self.deck_id!r}, name={self.name!r}, notes={len(self.notes)})"

    def add_note(self, note: Note) -> None:
        self.notes.append(note)

    def add_model(self, model: Model) -> None:
        """Register a model so it is exported even if no note uses it."""
        self._models.append(model)

    def models(self) -> list[Model]:
        """Models used by this deck, each once, in first-seen order."""
        seen: list[Model] = []
        for model in [*self._models, *(note.model for note in self.notes)]:
            if not any(model is existing for existing in seen):
                seen.append(model)
        return seen

    def to_entry(self, timestamp: float) -> DeckEntry:
        return DeckEntry(
            id=self.deck_id,
            name=self.name,
            desc=self.description,
            mod=int(timestamp),
        )

    def write_to_file(
        self,
        destination: str | Path,
        media_files: Sequence[str | Path] | None = None,
        timestamp: float | None = None,
        settings: "Settings | None" = None,
    ) -> Path:
        """Write this deck alone as an ``.apkg`` file."""
        from ankipack.exporters.apkg import Package

        return Package(self, media_files=media_files, settings=settings).write(
            destination, timestamp=timestamp
        )
