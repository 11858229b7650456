"""Tests for models and their serialized form."""

import pydantic
import pytest

from ankipack import (
    EmptyTemplateSet,
    Field,
    InvalidSortField,
    Model,
    ModelOptions,
    ModelType,
    Template,
)
from ankipack.schemas.descriptors import DEFAULT_LATEX_POST, DEFAULT_LATEX_PRE


class TestModelOptions:
    """Tests for option defaults and overrides."""

    def test_defaults(self, simple_model: Model) -> None:
        """Test that a model without options gets documented defaults."""
        assert simple_model.css == ""
        assert simple_model.model_type == ModelType.FRONT_BACK
        assert simple_model.options.latex_pre == DEFAULT_LATEX_PRE
        assert simple_model.options.latex_post == DEFAULT_LATEX_POST
        assert simple_model.sort_field_index == 0

    def test_keyword_overrides_options(self) -> None:
        """Test that keyword overrides apply on top of an options record."""
        options = ModelOptions(css=".card {}", latex_post="")
        model = Model(
            1,
            "m",
            fields=[Field("a")],
            templates=[Template("t")],
            options=options,
            model_type=ModelType.CLOZE,
        )
        assert model.css == ".card {}"
        assert model.options.latex_post == ""
        assert model.is_cloze

    def test_unknown_override_rejected(self) -> None:
        """Test that misspelled options are not silently ignored."""
        with pytest.raises(pydantic.ValidationError):
            Model(1, "m", fields=[Field("a")], templates=[Template("t")], csss="x")

    def test_sort_field_out_of_range(self) -> None:
        """Test that the sort field must index into the fields."""
        with pytest.raises(InvalidSortField):
            Model(
                1,
                "m",
                fields=[Field("a"), Field("b")],
                templates=[Template("t")],
                sort_field_index=2,
            )


class TestRequirements:
    """Tests for the per-template field requirements."""

    def test_all_fields_for_every_template(self, two_sided_model: Model) -> None:
        """Test that every template requires every field."""
        assert two_sided_model.requirements() == [
            (0, "all", [0, 1]),
            (1, "all", [0, 1]),
        ]

    @pytest.mark.parametrize("field_count,template_count", [(1, 1), (3, 2), (5, 4)])
    def test_shape(self, field_count: int, template_count: int) -> None:
        """Test T entries each listing all F field indices."""
        model = Model(
            42,
            "m",
            fields=[Field(f"f{i}") for i in range(field_count)],
            templates=[Template(f"t{i}") for i in range(template_count)],
        )
        requirements = model.requirements()

        assert len(requirements) == template_count
        for template_ord, (ord_, kind, field_ords) in enumerate(requirements):
            assert ord_ == template_ord
            assert kind == "all"
            assert field_ords == list(range(field_count))


class TestModelEntry:
    """Tests for serialization into col.models."""

    def test_ordinals_follow_positions(self, two_sided_model: Model) -> None:
        """Test that fields and templates are numbered by position."""
        entry = two_sided_model.to_entry(1700000000.5, deck_id=7)

        assert [f.ord for f in entry.flds] == [0, 1]
        assert [f.name for f in entry.flds] == ["Question", "Answer"]
        assert [t.ord for t in entry.tmpls] == [0, 1]
        assert entry.tmpls[1].qfmt == "{{Answer}}"
        assert entry.mod == 1700000000
        assert entry.did == 7
        assert entry.id == "1091735104"

    def test_renumbering_is_idempotent(self, two_sided_model: Model) -> None:
        """Test that serializing twice gives the same ordinals."""
        first = two_sided_model.to_entry(0, deck_id=1)
        second = two_sided_model.to_entry(0, deck_id=1)
        assert first == second

    def test_appended_template_extends_order(self, simple_model: Model) -> None:
        """Test that appended fields and templates get the next ordinals."""
        simple_model.add_field(Field("Extra"))
        simple_model.add_template(Template("Card 2", qfmt="{{Extra}}"))

        entry = simple_model.to_entry(0, deck_id=1)

        assert [(f.name, f.ord) for f in entry.flds] == [("Question", 0), ("Extra", 1)]
        assert [(t.name, t.ord) for t in entry.tmpls] == [("Card 1", 0), ("Card 2", 1)]
        assert entry.req == [(0, "all", [0, 1]), (1, "all", [0, 1])]

    def test_json_keys(self, two_sided_model: Model) -> None:
        """Test the key names Anki's importer reads."""
        data = two_sided_model.to_entry(0, deck_id=1).to_json_dict()

        assert data["type"] == 0
        assert data["latexPre"] == DEFAULT_LATEX_PRE
        assert data["latexPost"] == DEFAULT_LATEX_POST
        assert data["sortf"] == 0
        assert data["usn"] == -1
        assert data["req"] == [[0, "all", [0, 1]], [1, "all", [0, 1]]]
        assert data["flds"][0]["font"] == "Liberation Sans"
        assert data["tmpls"][0]["did"] is None

    def test_cloze_type_flag(self, multi_field_cloze_model: Model) -> None:
        """Test that cloze models are flagged with type 1."""
        assert multi_field_cloze_model.to_entry(0, deck_id=1).type == 1

    def test_empty_template_set(self) -> None:
        """Test that a model without templates cannot be serialized."""
        model = Model(12345, "test model", fields=[Field("front")])
        with pytest.raises(EmptyTemplateSet):
            model.to_entry(0, deck_id=1)

    def test_late_template_makes_model_valid(self) -> None:
        """Test that a template appended after construction is enough."""
        model = Model(12345, "test model", fields=[Field("front")])
        model.add_template(Template("template"))
        model.validate()


class TestEquality:
    """Tests for model comparison."""

    def test_equal_definitions(self) -> None:
        """Test that identically defined models compare equal."""
        def make() -> Model:
            return Model(5, "m", fields=[Field("a")], templates=[Template("t")])

        assert make() == make()

    def test_different_definitions(self) -> None:
        """Test that models differing in name are not equal."""
        a = Model(5, "m", fields=[Field("a")], templates=[Template("t")])
        b = Model(5, "n", fields=[Field("a")], templates=[Template("t")])
        assert a != b

    def test_hashable(self) -> None:
        """Test that models work in sets and equal models hash alike."""
        def make() -> Model:
            return Model(5, "m", fields=[Field("a")], templates=[Template("t")])

        first, second = make(), make()
        assert hash(first) == hash(second)
        assert {first, second} == {first}
        assert len({first, Model(6, "m")}) == 2


class TestDescriptors:
    """Tests for field and template records."""

    def test_positional_or_keyword_name(self) -> None:
        """Test both constructor forms."""
        assert Field("Front") == Field(name="Front")
        assert Template("Card 1") == Template(name="Card 1")

    def test_immutable(self) -> None:
        """Test that descriptors are frozen."""
        field = Field("Front")
        with pytest.raises(pydantic.ValidationError):
            field.name = "Back"  # type: ignore[misc]

    def test_format_aliases(self) -> None:
        """Test the question/answer format accessors."""
        template = Template("t", qfmt="{{Q}}", afmt="{{A}}")
        assert template.question_format == "{{Q}}"
        assert template.answer_format == "{{A}}"
