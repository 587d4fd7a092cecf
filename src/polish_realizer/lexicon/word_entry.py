"""
Lexical word entries.

A ``WordElement`` is the immutable, dictionary-sourced record of one word:
its base form, category and a table of pre-computed inflected forms keyed
by inflection keys such as ``"msc_sin"`` or ``"past_pl_3_f"``.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Set

from polish_realizer.framework.features import LexicalCategory


# Markers the lexicon uses for "no distinct form exists".
SENTINELS = frozenset({"—", "-"})


def is_sentinel(value: Optional[str]) -> bool:
    """True when a form-table value means "no form" rather than a word."""
    if value is None:
        return True
    return value in SENTINELS or len(value) < 2


@dataclass(frozen=True)
class WordElement:
    """Immutable lexicon record of one word."""
    base_form: str
    category: LexicalCategory
    forms: Mapping[str, str] = field(default_factory=dict, hash=False, compare=True)
    attributes: Mapping[str, bool] = field(default_factory=dict, hash=False, compare=True)
    spelling_variant: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "forms", MappingProxyType(dict(self.forms)))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def default_spelling_variant(self) -> str:
        return self.spelling_variant or self.base_form

    def get_form(self, key: str) -> Optional[str]:
        """Raw form-table value, or None when the key is not defined."""
        return self.forms.get(key)

    def has_form(self, key: str) -> bool:
        return key in self.forms

    def usable_form(self, key: Optional[str]) -> Optional[str]:
        """The form stored under ``key`` unless it is missing or a sentinel."""
        if key is None:
            return None
        value = self.forms.get(key)
        if is_sentinel(value):
            return None
        return value

    def attribute(self, name: str) -> bool:
        return bool(self.attributes.get(name, False))

    @property
    def is_proper(self) -> bool:
        return self.attribute("proper")

    @property
    def is_perfective(self) -> bool:
        # Only perfective verbs have an anterior adverbial participle ("ipu").
        return self.attribute("perfective") or "ipu" in self.forms

    def feature_names(self) -> Set[str]:
        return set(self.forms) | set(self.attributes)
