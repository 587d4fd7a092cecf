"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest
import structlog

from polish_realizer.framework.elements import InflectedWordElement
from polish_realizer.framework.features import Feature, LexicalCategory
from polish_realizer.lexicon.lexicon import Lexicon


DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def lexicon_path():
    """Path to the test lexicon document."""
    return DATA_DIR / "lexicon.json"


@pytest.fixture
def lexicon(lexicon_path):
    """Lexicon with a handful of nouns, verbs, adjectives, pronouns and an adverb."""
    return Lexicon.from_json(lexicon_path)


@pytest.fixture
def make_word(lexicon):
    """
    Factory for inflectable words backed by the test lexicon.

    Keyword arguments name features, e.g. ``make_word("dobry",
    LexicalCategory.ADJECTIVE, case=DiscourseFunction.LOCATIVE)``.
    """
    def _make(base: str, category: LexicalCategory, **features) -> InflectedWordElement:
        entry = lexicon.lookup(base, category)
        if entry is not None:
            word = InflectedWordElement.from_word(entry)
        else:
            word = InflectedWordElement(base, category)
        for name, value in features.items():
            word.set_feature(Feature[name.upper()], value)
        return word
    return _make
