"""Orthography: punctuation, capitalization and text assembly."""

from polish_realizer.orthography.conjunctions import CONJUNCTIONS_COMMA
from polish_realizer.orthography.processor import (
    OrthographyConfig,
    OrthographyProcessor,
    RealisationContext,
    remove_punct_space,
)

__all__ = [
    "CONJUNCTIONS_COMMA",
    "OrthographyConfig",
    "OrthographyProcessor",
    "RealisationContext",
    "remove_punct_space",
]
