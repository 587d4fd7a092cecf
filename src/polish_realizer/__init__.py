"""
Polish Realizer - Rule-based surface realisation of Polish sentences.
"""

__version__ = "0.1.0"

from polish_realizer.framework.elements import (
    CoordinatedPhraseElement,
    DocumentElement,
    InflectedWordElement,
    ListElement,
    StringElement,
)
from polish_realizer.lexicon.lexicon import Lexicon
from polish_realizer.lexicon.word_entry import WordElement
from polish_realizer.morphology.processor import MorphologyProcessor
from polish_realizer.orthography.processor import OrthographyConfig, OrthographyProcessor
from polish_realizer.realiser.realiser import Realiser, RealiserConfig

__all__ = [
    "CoordinatedPhraseElement",
    "DocumentElement",
    "InflectedWordElement",
    "ListElement",
    "StringElement",
    "Lexicon",
    "WordElement",
    "MorphologyProcessor",
    "OrthographyConfig",
    "OrthographyProcessor",
    "Realiser",
    "RealiserConfig",
]
