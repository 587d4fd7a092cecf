"""
In-memory lexicon.

Indexes ``WordElement`` records by (base form, category). This is the
supplier interface the morphology stage consumes; building the records from
a full dictionary dump happens elsewhere.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

import structlog

from polish_realizer.framework.features import LexicalCategory
from polish_realizer.lexicon.word_entry import WordElement
from polish_realizer.utils.file_handlers import load_json

logger = structlog.get_logger(__name__)


class Lexicon:
    """Lookup of lexical entries by base form and category."""

    def __init__(self, words: Optional[Iterable[WordElement]] = None) -> None:
        self._index: Dict[Tuple[str, LexicalCategory], WordElement] = {}
        for word in words or []:
            self.add(word)

    def add(self, word: WordElement) -> None:
        self._index[(word.base_form, word.category)] = word

    def lookup(self, base_form: str, category: LexicalCategory) -> Optional[WordElement]:
        """Return the entry, or None when the word is unknown."""
        return self._index.get((base_form, category))

    def __contains__(self, key: Tuple[str, LexicalCategory]) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[WordElement]:
        return iter(self._index.values())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Lexicon":
        """
        Build a lexicon from ``{"words": [{"base", "category", "forms", "attributes"}]}``.

        Raises:
            ValueError: if the document does not have that shape
        """
        if not isinstance(data, dict) or not isinstance(data.get("words"), list):
            raise ValueError("Lexicon document must be an object with a 'words' list")

        lexicon = cls()
        for position, raw in enumerate(data["words"]):
            lexicon.add(_word_from_dict(raw, position))
        return lexicon

    @classmethod
    def from_json(cls, filepath: Union[str, Path]) -> "Lexicon":
        """Load a lexicon document from a JSON file."""
        lexicon = cls.from_dict(load_json(filepath))
        logger.info("lexicon_loaded", path=str(filepath), words=len(lexicon))
        return lexicon


def _word_from_dict(raw: Any, position: int) -> WordElement:
    if not isinstance(raw, dict) or "base" not in raw or "category" not in raw:
        raise ValueError(f"Lexicon word #{position} needs 'base' and 'category'")

    try:
        category = LexicalCategory(raw["category"])
    except ValueError:
        raise ValueError(
            f"Lexicon word #{position} ({raw['base']}) has unknown category {raw['category']!r}"
        ) from None

    forms = raw.get("forms", {})
    attributes = raw.get("attributes", {})
    if not isinstance(forms, dict) or not isinstance(attributes, dict):
        raise ValueError(f"Lexicon word #{position} ({raw['base']}): 'forms' and 'attributes' must be objects")

    return WordElement(
        base_form=raw["base"],
        category=category,
        forms={str(k): str(v) for k, v in forms.items()},
        attributes={str(k): bool(v) for k, v in attributes.items()},
        spelling_variant=raw.get("spelling"),
    )
