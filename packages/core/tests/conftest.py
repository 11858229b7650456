"""Shared fixtures for ankipack tests."""

import sqlite3
import zipfile
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path

import pytest

from ankipack import Field, Model, ModelType, Template

CSS = """.card {
 font-family: arial;
 font-size: 20px;
 text-align: center;
 color: black;
 background-color: white;
}

.cloze {
 font-weight: bold;
 color: blue;
}
"""


@pytest.fixture
def simple_model() -> Model:
    """A one-field, one-template model."""
    return Model(
        1607392319,
        "Simple Model",
        fields=[Field("Question")],
        templates=[Template("Card 1", qfmt="{{Question}}", afmt="{{Question}}")],
    )


@pytest.fixture
def two_sided_model() -> Model:
    """A Question/Answer model with a forward and a reverse template."""
    return Model(
        1091735104,
        "Two Sided Model",
        fields=[Field("Question"), Field("Answer")],
        templates=[
            Template(
                "Card 1",
                qfmt="{{Question}}",
                afmt='{{FrontSide}}<hr id="answer">{{Answer}}',
            ),
            Template(
                "Card 2",
                qfmt="{{Answer}}",
                afmt='{{FrontSide}}<hr id="answer">{{Question}}',
            ),
        ],
        css=CSS,
    )


@pytest.fixture
def multi_field_cloze_model() -> Model:
    """A cloze model whose template references two cloze fields."""
    return Model(
        1047194615,
        "Multi Field Cloze Model",
        fields=[Field("Text1"), Field("Text2")],
        templates=[
            Template(
                "Cloze",
                qfmt="{{cloze:Text1}} and {{cloze:Text2}}",
                afmt="{{cloze:Text1}} and {{cloze:Text2}}",
            )
        ],
        css=CSS,
        model_type=ModelType.CLOZE,
    )


@pytest.fixture
def open_package(tmp_path: Path) -> Callable[[Path], AbstractContextManager[sqlite3.Connection]]:
    """Open a written package's collection database for inspection."""

    @contextmanager
    def _open(package_path: Path) -> Iterator[sqlite3.Connection]:
        extract_dir = tmp_path / f"extracted_{package_path.stem}"
        with zipfile.ZipFile(package_path) as archive:
            archive.extract("collection.anki2", extract_dir)
        conn = sqlite3.connect(extract_dir / "collection.anki2")
        try:
            yield conn
        finally:
            conn.close()

    return _open
