"""Lexical entries and the in-memory lexicon."""

from polish_realizer.lexicon.word_entry import WordElement, is_sentinel
from polish_realizer.lexicon.lexicon import Lexicon

__all__ = ["WordElement", "is_sentinel", "Lexicon"]
