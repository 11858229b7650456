"""APKG export: assembling decks, models and media into an Anki package."""

import itertools
import json
import os
import tempfile
import time
import zipfile
from collections.abc import Iterable, Sequence
from pathlib import Path

from ankipack.config import Settings
from ankipack.config import settings as default_settings
from ankipack.db.collection import (
    CollectionWriter,
    build_card_row,
    build_col_row,
    build_note_row,
)
from ankipack.db.tables import CardRow, NoteRow
from ankipack.deck import Deck
from ankipack.errors import DuplicateId, DuplicateMediaName, IoFailure
from ankipack.model import Model
from ankipack.schemas.entries import (
    DEFAULT_DECK_CONFIG_ID,
    DEFAULT_DECK_ID,
    CollectionConfig,
    DeckConfigEntry,
    DeckEntry,
    ModelEntry,
    default_deck_entry,
)
from ankipack.utils.logging import get_logger

logger = get_logger(__name__)

_COMPRESSION = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


class Package:
    """One ``.apkg`` file: decks, the models their notes use, and media.

    A package holds no state between builds; every call to :meth:`write`
    recomputes ids, ordinals and rows from the decks as they are.
    """

    def __init__(
        self,
        decks: Deck | Iterable[Deck],
        media_files: Sequence[str | Path] | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a package.

        Args:
            decks: A deck or decks to include
            media_files: Paths of media files referenced by the notes
            settings: Optional settings override
        """
        if isinstance(decks, Deck):
            decks = [decks]
        self.decks = list(decks)
        self.media_files = [Path(path) for path in media_files or []]
        self.settings = settings or default_settings

    def write(self, destination: str | Path, timestamp: float | None = None) -> Path:
        """Build the package and write it to ``destination``.

        The archive is assembled in a scratch file next to the destination and
        moved into place only once every step succeeded.

        Args:
            destination: Output ``.apkg`` path
            timestamp: Build time in seconds; defaults to now

        Returns:
            Path to the written package

        Raises:
            DuplicateId: If two decks or two different models share an id
            DuplicateMediaName: If two media files share a base name
            EmptyTemplateSet: If a used model has no templates
            InvalidFieldCount: If a note no longer matches its model's fields
            EncodingFailure: If a note value or tag cannot be stored
            IoFailure: If the database or archive cannot be written
        """
        destination = Path(destination)
        if timestamp is None:
            timestamp = time.time()

        self._check_deck_ids()
        self._check_media_names()
        model_entries = self._model_entries(timestamp)
        deck_entries = self._deck_entries(timestamp)

        note_rows, card_rows = self._note_and_card_rows(timestamp)

        config = CollectionConfig(
            cur_model=str(min(model_entries)) if model_entries else None,
        )
        col = build_col_row(
            timestamp,
            models=model_entries,
            decks=deck_entries,
            deck_configs={DEFAULT_DECK_CONFIG_ID: DeckConfigEntry()},
            config=config,
        )

        logger.info(
            f"Building package {destination.name}: {len(self.decks)} deck(s), "
            f"{len(model_entries)} model(s), {len(note_rows)} note(s), "
            f"{len(card_rows)} card(s), {len(self.media_files)} media file(s)"
        )

        with tempfile.TemporaryDirectory(prefix="ankipack_") as scratch_dir:
            db_path = Path(scratch_dir) / self.settings.collection_filename
            CollectionWriter(db_path).write(col, note_rows, card_rows)
            self._write_archive(db_path, destination)

        logger.info(f"Created APKG at {destination}")
        return destination

    write_to_file = write

    def models(self) -> dict[int, tuple[Model, int]]:
        """Distinct models used by the package with the deck that first uses them.

        Raises:
            DuplicateId: If two different models share an id
        """
        found: dict[int, tuple[Model, int]] = {}
        for deck in self.decks:
            for model in deck.models():
                existing = found.get(model.model_id)
                if existing is None:
                    found[model.model_id] = (model, deck.deck_id)
                elif existing[0] is not model and existing[0] != model:
                    raise DuplicateId("model", model.model_id)
        return found

    def _check_deck_ids(self) -> None:
        seen: set[int] = set()
        for deck in self.decks:
            if deck.deck_id in seen:
                raise DuplicateId("deck", deck.deck_id)
            seen.add(deck.deck_id)

    def _check_media_names(self) -> None:
        seen: dict[str, Path] = {}
        for path in self.media_files:
            if path.name in seen:
                raise DuplicateMediaName(path.name, str(seen[path.name]), str(path))
            seen[path.name] = path

    def _model_entries(self, timestamp: float) -> dict[int, ModelEntry]:
        return {
            model_id: model.to_entry(timestamp, deck_id)
            for model_id, (model, deck_id) in sorted(self.models().items())
        }

    def _deck_entries(self, timestamp: float) -> dict[int, DeckEntry]:
        entries = {DEFAULT_DECK_ID: default_deck_entry(timestamp)}
        for deck in self.decks:
            entries[deck.deck_id] = deck.to_entry(timestamp)
        return entries

    def _note_and_card_rows(
        self, timestamp: float
    ) -> tuple[list[NoteRow], list[CardRow]]:
        # Note and card ids share one counter seeded from the build time.
        ids = itertools.count(int(timestamp * 1000))
        note_rows: list[NoteRow] = []
        card_rows: list[CardRow] = []

        for deck in self.decks:
            for note in deck.notes:
                note.validate()
                note_id = next(ids)
                note_rows.append(build_note_row(note, note_id, timestamp))
                for card in note.cards():
                    card_rows.append(
                        build_card_row(card, next(ids), note_id, deck.deck_id, timestamp)
                    )

        return note_rows, card_rows

    def _write_archive(self, db_path: Path, destination: Path) -> None:
        compression = _COMPRESSION[self.settings.compression]
        media_manifest = {
            str(index): path.name for index, path in enumerate(self.media_files)
        }

        try:
            fd, scratch_name = tempfile.mkstemp(
                prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
            )
        except OSError as e:
            raise IoFailure(f"Cannot create package in {destination.parent}: {e}") from e
        os.close(fd)
        scratch = Path(scratch_name)

        try:
            with zipfile.ZipFile(
                scratch, "w", compression=compression, strict_timestamps=False
            ) as archive:
                archive.write(db_path, self.settings.collection_filename)
                archive.writestr(
                    self.settings.media_manifest_filename, json.dumps(media_manifest)
                )
                for index, path in enumerate(self.media_files):
                    archive.write(path, str(index))
            # mkstemp creates the file with mode 0600; apply the umask as open() does.
            os.chmod(scratch, 0o666 & ~_current_umask())
            os.replace(scratch, destination)
        except (OSError, ValueError, zipfile.BadZipFile) as e:
            scratch.unlink(missing_ok=True)
            raise IoFailure(f"Failed to write package {destination}: {e}") from e
        except BaseException:
            scratch.unlink(missing_ok=True)
            raise
