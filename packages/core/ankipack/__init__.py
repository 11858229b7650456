"""ankipack: build Anki ``.apkg`` packages from declarative notes.

Describe a note type with fields and templates, bind field values to it as
notes, collect notes in decks and write the decks as a package:

    >>> from ankipack import Deck, Field, Model, Note, Package, Template
    >>> model = Model(
    ...     1607392319,
    ...     "Simple Model",
    ...     fields=[Field("Question"), Field("Answer")],
    ...     templates=[Template("Card 1", qfmt="{{Question}}", afmt="{{Answer}}")],
    ... )
    >>> deck = Deck(2059400110, "Country Capitals")
    >>> deck.add_note(Note(model, ["Capital of Argentina", "Buenos Aires"]))
    >>> Package(deck).write("output.apkg")

Notes of a cloze model produce one card per cloze number found in their
field values; see ``ankipack.note``.
"""

from ankipack.builtin_models import (
    basic_and_reversed_card_model,
    basic_model,
    basic_optional_reversed_card_model,
    basic_type_in_the_answer_model,
    cloze_model,
)
from ankipack.deck import Deck
from ankipack.errors import (
    AnkiPackError,
    DuplicateId,
    DuplicateMediaName,
    EmptyTemplateSet,
    EncodingFailure,
    InvalidFieldCount,
    InvalidSortField,
    IoFailure,
)
from ankipack.exporters.apkg import Package
from ankipack.model import Model
from ankipack.note import Card, Note
from ankipack.schemas.descriptors import Field, ModelOptions, ModelType, Template
from ankipack.utils.hashing import field_checksum, guid_for

__version__ = "0.1.0"

__all__ = [
    # Building blocks
    "Card",
    "Deck",
    "Field",
    "Model",
    "ModelOptions",
    "ModelType",
    "Note",
    "Package",
    "Template",
    # Stock models
    "basic_model",
    "basic_and_reversed_card_model",
    "basic_optional_reversed_card_model",
    "basic_type_in_the_answer_model",
    "cloze_model",
    # Identity helpers
    "field_checksum",
    "guid_for",
    # Errors
    "AnkiPackError",
    "DuplicateId",
    "DuplicateMediaName",
    "EmptyTemplateSet",
    "EncodingFailure",
    "InvalidFieldCount",
    "InvalidSortField",
    "IoFailure",
]
