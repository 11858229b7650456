"""Building and writing the collection database."""

import json
from collections.abc import Mapping
from pathlib import Path

from sqlalchemy import URL, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ankipack.db.tables import Base, CardRow, ColRow, NoteRow
from ankipack.errors import IoFailure
from ankipack.note import Card, Note
from ankipack.schemas.entries import (
    CollectionConfig,
    DeckConfigEntry,
    DeckEntry,
    ModelEntry,
)
from ankipack.utils.logging import get_logger

logger = get_logger(__name__)

SCHEMA_VERSION = 11
COLLECTION_ROW_ID = 1

# Card state for a freshly created card.
CARD_TYPE_NEW = 0
CARD_QUEUE_NEW = 0


def _dump(entries: Mapping[int, ModelEntry | DeckEntry | DeckConfigEntry]) -> str:
    return json.dumps(
        {str(key): entries[key].to_json_dict() for key in sorted(entries)}
    )


def build_col_row(
    timestamp: float,
    models: Mapping[int, ModelEntry],
    decks: Mapping[int, DeckEntry],
    deck_configs: Mapping[int, DeckConfigEntry],
    config: CollectionConfig,
) -> ColRow:
    """Build the single ``col`` row.

    Args:
        timestamp: Package build time in seconds
        models: Model records keyed by model id
        decks: Deck records keyed by deck id
        deck_configs: Deck option groups keyed by id
        config: Collection configuration

    Returns:
        ColRow ready for insertion
    """
    millis = int(timestamp * 1000)
    return ColRow(
        id=COLLECTION_ROW_ID,
        crt=int(timestamp),
        mod=millis,
        scm=millis,
        ver=SCHEMA_VERSION,
        dty=0,
        usn=0,
        ls=0,
        conf=json.dumps(config.to_json_dict()),
        models=_dump(models),
        decks=_dump(decks),
        dconf=_dump(deck_configs),
        tags=json.dumps({}),
    )


def build_note_row(note: Note, note_id: int, timestamp: float) -> NoteRow:
    return NoteRow(
        id=note_id,
        guid=note.guid,
        mid=note.model.model_id,
        mod=int(timestamp),
        usn=-1,
        tags=note.format_tags(),
        flds=note.format_fields(),
        sfld=note.sort_field,
        csum=note.checksum,
        flags=0,
        data="",
    )


def build_card_row(
    card: Card, card_id: int, note_id: int, deck_id: int, timestamp: float
) -> CardRow:
    return CardRow(
        id=card_id,
        nid=note_id,
        did=deck_id,
        ord=card.ord,
        mod=int(timestamp),
        usn=-1,
        type=CARD_TYPE_NEW,
        queue=CARD_QUEUE_NEW,
        due=0,
        ivl=0,
        factor=0,
        reps=0,
        lapses=0,
        left=0,
        odue=0,
        odid=0,
        flags=0,
        data="",
    )


class CollectionWriter:
    """Writes a new ``collection.anki2`` SQLite file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(
        self,
        col: ColRow,
        notes: list[NoteRow],
        cards: list[CardRow],
    ) -> None:
        """Create the schema and insert all rows in one transaction.

        Raises:
            IoFailure: If the database cannot be created or written
        """
        engine = create_engine(URL.create("sqlite", database=str(self.path)))
        try:
            Base.metadata.create_all(engine)
            with Session(engine) as session, session.begin():
                session.add(col)
                session.add_all(notes)
                session.flush()
                session.add_all(cards)
        except SQLAlchemyError as e:
            raise IoFailure(f"Failed to write collection database {self.path}: {e}") from e
        finally:
            engine.dispose()

        logger.debug(f"Wrote collection {self.path} ({len(notes)} notes, {len(cards)} cards)")
