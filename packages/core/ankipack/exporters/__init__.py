"""Export formats for decks."""

from ankipack.exporters.apkg import Package

__all__ = ["Package"]
