"""Polish morphology: inflection keys, per-category rules and the tree processor."""

from polish_realizer.morphology.rules import (
    MODAL_VERBS,
    MissingLexicalEntryError,
    do_adjective_morphology,
    do_adverb_morphology,
    do_noun_morphology,
    do_verb_morphology,
    number_of_syllables,
)
from polish_realizer.morphology.processor import MorphologyProcessor

__all__ = [
    "MODAL_VERBS",
    "MissingLexicalEntryError",
    "do_adjective_morphology",
    "do_adverb_morphology",
    "do_noun_morphology",
    "do_verb_morphology",
    "number_of_syllables",
    "MorphologyProcessor",
]
