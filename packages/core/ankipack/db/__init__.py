"""Anki collection database."""

from ankipack.db.collection import (
    CollectionWriter,
    build_card_row,
    build_col_row,
    build_note_row,
)
from ankipack.db.tables import Base, CardRow, ColRow, NoteRow, RevlogRow, graves

__all__ = [
    "Base",
    "CardRow",
    "ColRow",
    "CollectionWriter",
    "NoteRow",
    "RevlogRow",
    "build_card_row",
    "build_col_row",
    "build_note_row",
    "graves",
]
