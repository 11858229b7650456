"""Notes and the cards they expand into."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from ankipack.errors import EmptyTemplateSet, EncodingFailure, InvalidFieldCount
from ankipack.model import Model
from ankipack.utils.hashing import FIELD_SEPARATOR, field_checksum, guid_for

# {{c1::text}}, {{C2::text::hint}}; the deleted text may span lines.
CLOZE_PATTERN = re.compile(r"\{\{c(\d+)::.+?\}\}", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class Card:
    """One reviewable item: a note under a single template or cloze ordinal."""

    note: "Note"
    ord: int

    @property
    def template_ord(self) -> int:
        return self.ord


def cloze_numbers(values: Iterable[str]) -> set[int]:
    """Collect the distinct cloze numbers referenced across field values.

    Args:
        values: Field values to scan

    Returns:
        Set of cloze numbers (1-based); zero is ignored
    """
    numbers: set[int] = set()
    for value in values:
        numbers.update(
            number
            for number in map(int, CLOZE_PATTERN.findall(value))
            if number > 0
        )
    return numbers


def _check_encodable(value: str, what: str) -> None:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingFailure(f"{what} is not valid UTF-8 text: {e}") from e


class Note:
    """Field values bound to a model.

    The note holds a reference to its model; the model may be shared by any
    number of notes and decks.
    """

    def __init__(
        self,
        model: Model,
        fields: Iterable[str],
        *,
        tags: Iterable[str] | None = None,
        guid: str | None = None,
        sort_field: str | None = None,
    ) -> None:
        """Create a note.

        Args:
            model: Model the note conforms to
            fields: One value per model field, in model order
            tags: Optional tags; duplicates are dropped, order is kept
            guid: Explicit GUID; derived from the field values when omitted
            sort_field: Explicit sort text; defaults to the model's sort field

        Raises:
            InvalidFieldCount: If the value count differs from the model's fields
            EncodingFailure: If a value or tag cannot be stored
        """
        self.model = model
        self.fields = [str(value) for value in fields]
        self.tags = list(dict.fromkeys(tags or []))
        self._guid = guid
        self._sort_field = sort_field

        self.validate()

    def __repr__(self) -> str:
        return f"Note(model={self.model!r}, guid={self.guid!r})"

    def validate(self) -> None:
        """Check the values against the model as it is now.

        Both the model's fields and ``self.fields`` may change after the note
        is created, so this runs again when the note is packaged.

        Raises:
            InvalidFieldCount: If the value count differs from the model's fields
            EncodingFailure: If a value or tag cannot be stored
        """
        expected = len(self.model.fields)
        if len(self.fields) != expected:
            raise InvalidFieldCount(expected, len(self.fields))

        for index, value in enumerate(self.fields):
            if not isinstance(value, str):
                raise EncodingFailure(f"Field {index} is not text: {value!r}")
            _check_encodable(value, f"Field {index}")
            if FIELD_SEPARATOR in value:
                raise EncodingFailure(
                    f"Field {index} contains the field separator character U+001F"
                )

        for tag in self.tags:
            if not isinstance(tag, str):
                raise EncodingFailure(f"Tag {tag!r} is not text")
            _check_encodable(tag, f"Tag {tag!r}")
            if not tag or any(char.isspace() for char in tag):
                raise EncodingFailure(f"Tag {tag!r} is empty or contains whitespace")

    @property
    def guid(self) -> str:
        if self._guid is not None:
            return self._guid
        return guid_for(*self.fields)

    @guid.setter
    def guid(self, value: str | None) -> None:
        self._guid = value

    @property
    def sort_field(self) -> str:
        if self._sort_field is not None:
            return self._sort_field
        return self.fields[self.model.sort_field_index]

    @property
    def checksum(self) -> int:
        """Duplicate-detection checksum of the first field."""
        return field_checksum(self.fields[0] if self.fields else "")

    def format_fields(self) -> str:
        return FIELD_SEPARATOR.join(self.fields)

    def format_tags(self) -> str:
        """Tags in Anki's space-padded form, e.g. ``" a b "``."""
        if not self.tags:
            return ""
        return " " + " ".join(self.tags) + " "

    def cards(self) -> list[Card]:
        """Expand the note into cards according to its model's type.

        Returns:
            Cards sorted by ordinal

        Raises:
            EmptyTemplateSet: If the model has no templates
        """
        template_count = len(self.model.templates)
        if template_count == 0:
            raise EmptyTemplateSet(self.model.model_id, self.model.name)

        if self.model.is_cloze:
            return self._cloze_cards(template_count)
        return [Card(self, ord_) for ord_ in range(template_count)]

    def _cloze_cards(self, template_count: int) -> list[Card]:
        numbers = cloze_numbers(self.fields)
        if not numbers:
            # A cloze note always produces at least one card.
            return [Card(self, 0)]

        stride = max(numbers)
        ords = sorted(
            template_index * stride + number - 1
            for template_index in range(template_count)
            for number in numbers
        )
        return [Card(self, ord_) for ord_ in ords]
