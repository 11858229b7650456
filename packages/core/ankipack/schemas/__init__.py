"""Data schemas.

Descriptors describe a model's shape as the caller declares it; entries are
the JSON records written into the collection database.
"""

from ankipack.schemas.descriptors import (
    DEFAULT_LATEX_POST,
    DEFAULT_LATEX_PRE,
    Field,
    ModelOptions,
    ModelType,
    Template,
)
from ankipack.schemas.entries import (
    CollectionConfig,
    DeckConfigEntry,
    DeckEntry,
    FieldEntry,
    ModelEntry,
    TemplateEntry,
)

__all__ = [
    # Descriptors
    "DEFAULT_LATEX_POST",
    "DEFAULT_LATEX_PRE",
    "Field",
    "ModelOptions",
    "ModelType",
    "Template",
    # Collection entries
    "CollectionConfig",
    "DeckConfigEntry",
    "DeckEntry",
    "FieldEntry",
    "ModelEntry",
    "TemplateEntry",
]
