"""Models: the field layout and templates shared by a family of notes."""

from collections.abc import Iterable
from typing import Any

from ankipack.errors import EmptyTemplateSet, InvalidSortField
from ankipack.schemas.descriptors import Field, ModelOptions, ModelType, Template
from ankipack.schemas.entries import FieldEntry, ModelEntry, TemplateEntry

# Requirement kind meaning "every listed field must be non-empty".
REQUIREMENT_ALL = "all"

Requirement = tuple[int, str, list[int]]


class Model:
    """Structure of a note: ordered fields, ordered templates and options.

    The ``model_id`` must be unique across every package the user imports,
    since Anki identifies note types by id.

    Example:
        >>> model = Model(
        ...     1607392319,
        ...     "Simple Model",
        ...     fields=[Field("Question"), Field("Answer")],
        ...     templates=[
        ...         Template(
        ...             "Card 1",
        ...             qfmt="{{Question}}",
        ...             afmt='{{FrontSide}}<hr id="answer">{{Answer}}',
        ...         )
        ...     ],
        ... )
    """

    def __init__(
        self,
        model_id: int,
        name: str,
        fields: Iterable[Field] = (),
        templates: Iterable[Template] = (),
        options: ModelOptions | None = None,
        **overrides: Any,
    ) -> None:
        """Create a model.

        Args:
            model_id: Unique model id
            name: Display name of the note type
            fields: Fields in order
            templates: Templates in order
            options: Optional settings; defaults are documented on ModelOptions
            **overrides: Individual ModelOptions values, applied on top of options
        """
        self.model_id = model_id
        self.name = name
        self._fields = list(fields)
        self._templates = list(templates)

        options = options or ModelOptions()
        if overrides:
            # Re-validate so unknown or ill-typed overrides are rejected.
            options = ModelOptions(**{**options.model_dump(), **overrides})
        self.options = options

        if self._fields:
            self._check_sort_field()

    def __repr__(self) -> str:
        return f"Model(model_id={self.model_id!r}, name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self.model_id == other.model_id
            and self.name == other.name
            and self._fields == other._fields
            and self._templates == other._templates
            and self.options == other.options
        )

    def __hash__(self) -> int:
        # Equal models share an id, so hashing the id agrees with __eq__.
        return hash(self.model_id)

    @property
    def fields(self) -> list[Field]:
        return list(self._fields)

    @property
    def templates(self) -> list[Template]:
        return list(self._templates)

    @property
    def model_type(self) -> ModelType:
        return self.options.model_type

    @property
    def css(self) -> str:
        return self.options.css

    @property
    def sort_field_index(self) -> int:
        return self.options.sort_field_index

    @property
    def is_cloze(self) -> bool:
        return self.options.model_type == ModelType.CLOZE

    def add_field(self, field: Field) -> "Model":
        """Append a field after the existing ones."""
        self._fields.append(field)
        return self

    def add_template(self, template: Template) -> "Model":
        """Append a template after the existing ones."""
        self._templates.append(template)
        return self

    def requirements(self) -> list[Requirement]:
        """Fields each template needs before Anki generates its card.

        Every template is reported as requiring all fields. This never
        suppresses a card Anki would render, at the cost of not suppressing
        some blank ones.

        Returns:
            One ``(template_ord, "all", field_ords)`` tuple per template
        """
        field_ords = list(range(len(self._fields)))
        return [
            (template_ord, REQUIREMENT_ALL, list(field_ords))
            for template_ord in range(len(self._templates))
        ]

    def validate(self) -> None:
        """Check the model can be serialized.

        Raises:
            EmptyTemplateSet: If the model has no templates
            InvalidSortField: If the sort field index is out of range
        """
        if not self._templates:
            raise EmptyTemplateSet(self.model_id, self.name)
        self._check_sort_field()

    def to_entry(self, timestamp: float, deck_id: int) -> ModelEntry:
        """Serialize into the record stored in ``col.models``.

        Ordinals are recomputed from list positions on every call, so
        serializing the same model repeatedly yields the same ordinals.

        Args:
            timestamp: Package build time in seconds
            deck_id: Deck new notes of this type are added to

        Returns:
            ModelEntry for this model
        """
        self.validate()

        flds = [
            FieldEntry(ord=ord_, **field.model_dump(mode="json"))
            for ord_, field in enumerate(self._fields)
        ]
        tmpls = [
            TemplateEntry(ord=ord_, **template.model_dump())
            for ord_, template in enumerate(self._templates)
        ]

        return ModelEntry(
            id=str(self.model_id),
            name=self.name,
            type=int(self.options.model_type),
            mod=int(timestamp),
            sortf=self.options.sort_field_index,
            did=deck_id,
            tmpls=tmpls,
            flds=flds,
            css=self.options.css,
            latex_pre=self.options.latex_pre,
            latex_post=self.options.latex_post,
            req=self.requirements(),
        )

    def _check_sort_field(self) -> None:
        index = self.options.sort_field_index
        if not 0 <= index < len(self._fields):
            raise InvalidSortField(index, len(self._fields))
