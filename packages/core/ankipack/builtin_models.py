"""Ready-made models mirroring Anki's stock note types.

Each factory returns a new Model, so callers may extend one without
affecting others.
"""

from ankipack.model import Model
from ankipack.schemas.descriptors import Field, ModelType, Template

BASIC_CSS = """.card {
 font-family: arial;
 font-size: 20px;
 text-align: center;
 color: black;
 background-color: white;
}
"""

CLOZE_CSS = (
    BASIC_CSS
    + """
.cloze {
 font-weight: bold;
 color: blue;
}
.nightMode .cloze {
 color: lightblue;
}
"""
)

_ANSWER_SEPARATOR = "\n\n<hr id=answer>\n\n"


def basic_model(
    model_id: int = 1559383000,
    name: str = "Basic (ankipack)",
    css: str = BASIC_CSS,
) -> Model:
    """Front/Back note with one card."""
    return Model(
        model_id,
        name,
        fields=[Field("Front"), Field("Back")],
        templates=[
            Template(
                "Card 1",
                qfmt="{{Front}}",
                afmt="{{FrontSide}}" + _ANSWER_SEPARATOR + "{{Back}}",
            )
        ],
        css=css,
    )


def basic_and_reversed_card_model(
    model_id: int = 1485830179,
    name: str = "Basic (and reversed card) (ankipack)",
    css: str = BASIC_CSS,
) -> Model:
    """Front/Back note with a forward and a reverse card."""
    return Model(
        model_id,
        name,
        fields=[Field("Front"), Field("Back")],
        templates=[
            Template(
                "Card 1",
                qfmt="{{Front}}",
                afmt="{{FrontSide}}" + _ANSWER_SEPARATOR + "{{Back}}",
            ),
            Template(
                "Card 2",
                qfmt="{{Back}}",
                afmt="{{FrontSide}}" + _ANSWER_SEPARATOR + "{{Front}}",
            ),
        ],
        css=css,
    )


def basic_optional_reversed_card_model(
    model_id: int = 1382232460,
    name: str = "Basic (optional reversed card) (ankipack)",
    css: str = BASIC_CSS,
) -> Model:
    """Reverse card shown only when the ``Add Reverse`` field is filled."""
    return Model(
        model_id,
        name,
        fields=[Field("Front"), Field("Back"), Field("Add Reverse")],
        templates=[
            Template(
                "Card 1",
                qfmt="{{Front}}",
                afmt="{{FrontSide}}" + _ANSWER_SEPARATOR + "{{Back}}",
            ),
            Template(
                "Card 2",
                qfmt="{{#Add Reverse}}{{Back}}{{/Add Reverse}}",
                afmt="{{FrontSide}}" + _ANSWER_SEPARATOR + "{{Front}}",
            ),
        ],
        css=css,
    )


def basic_type_in_the_answer_model(
    model_id: int = 1305534440,
    name: str = "Basic (type in the answer) (ankipack)",
    css: str = BASIC_CSS,
) -> Model:
    return Model(
        model_id,
        name,
        fields=[Field("Front"), Field("Back")],
        templates=[
            Template(
                "Card 1",
                qfmt="{{Front}}\n\n{{type:Back}}",
                afmt="{{Front}}" + _ANSWER_SEPARATOR + "{{type:Back}}",
            )
        ],
        css=css,
    )


def cloze_model(
    model_id: int = 1550428389,
    name: str = "Cloze (ankipack)",
    css: str = CLOZE_CSS,
) -> Model:
    """Cloze note: one card per cloze number in ``Text``."""
    return Model(
        model_id,
        name,
        fields=[Field("Text"), Field("Back Extra")],
        templates=[
            Template(
                "Cloze",
                qfmt="{{cloze:Text}}",
                afmt="{{cloze:Text}}<br>\n{{Back Extra}}",
            )
        ],
        css=css,
        model_type=ModelType.CLOZE,
    )
