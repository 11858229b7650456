"""Exceptions raised while building Anki packages."""


class AnkiPackError(Exception):
    """Base class for all ankipack errors."""

    pass


class InvalidFieldCount(AnkiPackError):
    """A note's field values do not match its model's fields."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Note has {actual} field value(s) but its model defines {expected} field(s)"
        )
        self.expected = expected
        self.actual = actual


class DuplicateId(AnkiPackError):
    """Two models or two decks in one package share an id."""

    def __init__(self, kind: str, object_id: int):
        super().__init__(f"Duplicate {kind} id {object_id} in package")
        self.kind = kind
        self.object_id = object_id


class DuplicateMediaName(AnkiPackError):
    """Two media files share a base name, which Anki uses as their identity."""

    def __init__(self, name: str, first: str, second: str):
        super().__init__(
            f"Media files {first!r} and {second!r} share the name {name!r}"
        )
        self.name = name


class EmptyTemplateSet(AnkiPackError):
    """A model has no templates, so its notes cannot produce cards."""

    def __init__(self, model_id: int, name: str):
        super().__init__(f"Model {name!r} ({model_id}) has no templates")
        self.model_id = model_id
        self.name = name


class InvalidSortField(AnkiPackError):
    """A model's sort field index does not point at one of its fields."""

    def __init__(self, index: int, field_count: int):
        super().__init__(
            f"Sort field index {index} is out of range for {field_count} field(s)"
        )
        self.index = index
        self.field_count = field_count


class EncodingFailure(AnkiPackError):
    """A field value or tag cannot be stored in the collection database."""

    pass


class IoFailure(AnkiPackError):
    """Writing the database or the archive failed.

    The underlying exception is available as ``__cause__``.
    """

    pass
