"""Field, template and model option records.

These are immutable value records describing the shape of a model. Ordinals
are not stored here: a field's or template's ``ord`` is its position in the
owning model and is assigned when the model is serialized.
"""

from enum import Enum

import pydantic
from pydantic import BaseModel, ConfigDict

DEFAULT_LATEX_PRE = r"""
\documentclass[12pt]{article}
\special{papersize=3in,5in}
\usepackage[utf8]{inputenc}
\usepackage{amssymb,amsmath}
\pagestyle{empty}
\setlength{\parindent}{0in}
\begin{document}

"""
DEFAULT_LATEX_POST = r"\end{document}"


class ModelType(int, Enum):
    """Rendering mode of a model, stored as the model's ``type`` flag."""

    FRONT_BACK = 0
    CLOZE = 1


class Field(BaseModel):
    """A named field of a model."""

    model_config = ConfigDict(frozen=True)

    name: str = pydantic.Field(..., description="Field name used in templates")
    font: str = pydantic.Field("Liberation Sans", description="Editor font")
    size: int = pydantic.Field(20, description="Editor font size")
    rtl: bool = pydantic.Field(False, description="Right-to-left text")
    sticky: bool = pydantic.Field(False, description="Keep value between adds")
    media: tuple[str, ...] = pydantic.Field((), description="Unused by Anki")

    def __init__(self, name: str | None = None, /, **data) -> None:
        if name is not None:
            data["name"] = name
        super().__init__(**data)


class Template(BaseModel):
    """A card template: a question format and an answer format."""

    model_config = ConfigDict(frozen=True)

    name: str = pydantic.Field(..., description="Template name")
    qfmt: str = pydantic.Field("", description="Question format")
    afmt: str = pydantic.Field("", description="Answer format")
    bqfmt: str = pydantic.Field("", description="Browser question format")
    bafmt: str = pydantic.Field("", description="Browser answer format")
    bfont: str = pydantic.Field("", description="Browser font")
    bsize: int = pydantic.Field(0, description="Browser font size")
    did: int | None = pydantic.Field(None, description="Deck override")

    def __init__(self, name: str | None = None, /, **data) -> None:
        if name is not None:
            data["name"] = name
        super().__init__(**data)

    @property
    def question_format(self) -> str:
        return self.qfmt

    @property
    def answer_format(self) -> str:
        return self.afmt


class ModelOptions(BaseModel):
    """Optional model settings with their defaults."""

    model_config = ConfigDict(frozen=True, protected_namespaces=(), extra="forbid")

    css: str = pydantic.Field("", description="Styling applied to every card")
    model_type: ModelType = pydantic.Field(
        ModelType.FRONT_BACK, description="Plain front/back or cloze"
    )
    latex_pre: str = pydantic.Field(
        DEFAULT_LATEX_PRE, description="LaTeX emitted before card content"
    )
    latex_post: str = pydantic.Field(
        DEFAULT_LATEX_POST, description="LaTeX emitted after card content"
    )
    sort_field_index: int = pydantic.Field(
        0, ge=0, description="Index of the field used for sorting"
    )
