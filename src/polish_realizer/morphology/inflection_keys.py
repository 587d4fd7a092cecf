"""
Inflection keys.

The lexicon stores inflected forms under composite string keys
(``"m_sin"``, ``"b_sin_m_p"``, ``"past_pl_3_f"``, ...). This module is the
only place that knows how those strings are spelled: callers describe the
wanted form with a small typed key and render it here.

A key that cannot be built for a combination renders to ``None``; the
morphology rules treat that exactly like a form missing from the lexicon.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from polish_realizer.framework.features import DiscourseFunction, Gender, Person


class Degree(Enum):
    """Degree of comparison."""
    POSITIVE = ""
    COMPARATIVE = "_comp"
    SUPERLATIVE = "_sup"


CASE_PREFIXES: Dict[DiscourseFunction, str] = {
    DiscourseFunction.SUBJECT: "m",
    DiscourseFunction.INDIRECT_OBJECT: "c",
    DiscourseFunction.GENITIVE: "d",
    DiscourseFunction.OBJECT: "b",
    DiscourseFunction.LOCATIVE: "msc",
    DiscourseFunction.INSTRUMENTAL: "n",
    DiscourseFunction.VOCATIVE: "w",
}

PERSON_DIGITS: Dict[Person, str] = {
    Person.FIRST: "1",
    Person.SECOND: "2",
    Person.THIRD: "3",
}

# Periphrastic future auxiliary of "być", by (plural, person).
FUTURE_AUXILIARIES: Dict[Tuple[bool, Person], str] = {
    (False, Person.FIRST): "będę",
    (False, Person.SECOND): "będziesz",
    (False, Person.THIRD): "będzie",
    (True, Person.FIRST): "będziemy",
    (True, Person.SECOND): "będziecie",
    (True, Person.THIRD): "będą",
}

# Conditional enclitic appended to the past form, by (plural, person).
CONDITIONAL_ENCLITICS: Dict[Tuple[bool, Person], str] = {
    (False, Person.FIRST): "bym",
    (False, Person.SECOND): "byś",
    (False, Person.THIRD): "by",
    (True, Person.FIRST): "byśmy",
    (True, Person.SECOND): "byście",
    (True, Person.THIRD): "by",
}


def case_prefix(case: DiscourseFunction) -> Optional[str]:
    """Key prefix of a grammatical case, None for non-case functions."""
    return CASE_PREFIXES.get(case)


def number_segment(plural: bool) -> str:
    return "pl" if plural else "sin"


@dataclass(frozen=True)
class NounKey:
    """Case and number of a noun or personal pronoun form."""
    case: DiscourseFunction
    plural: bool = False
    after_preposition: bool = False

    def render(self) -> Optional[str]:
        prefix = case_prefix(self.case)
        if prefix is None:
            return None
        key = f"{prefix}_{number_segment(self.plural)}"
        if self.after_preposition:
            key += "_p"
        return key


@dataclass(frozen=True)
class AdjectiveKey:
    """
    Case, number, gender and degree of an adjective form.

    Plural forms distinguish gender only in the nominative, accusative and
    vocative; the singular accusative separates masculine-personal and
    masculine-animate ("m_p") from masculine-inanimate ("m_o").
    """
    case: DiscourseFunction
    plural: bool
    gender: Gender
    degree: Degree = Degree.POSITIVE

    def render(self) -> Optional[str]:
        prefix = case_prefix(self.case)
        if prefix is None:
            return None
        if self.plural:
            key = f"{prefix}_pl"
            if self.case in (DiscourseFunction.SUBJECT, DiscourseFunction.OBJECT,
                             DiscourseFunction.VOCATIVE):
                key += "_f" if self.gender is Gender.FEMININE else "_m"
        else:
            key = f"{prefix}_sin_{self._singular_gender()}"
        return key + self.degree.value

    def _singular_gender(self) -> str:
        if self.gender in (Gender.MASC_PERSON, Gender.MASC_ANIMAL):
            return "m_p" if self.case is DiscourseFunction.OBJECT else "m"
        if self.gender is Gender.MASC_OBJECT:
            return "m_o" if self.case is DiscourseFunction.OBJECT else "m"
        if self.gender is Gender.FEMININE:
            return "f"
        return "n"


def participle_gender(plural: bool, gender: Gender) -> str:
    """Gender segment of participle keys; plural neuter shares the masculine form."""
    if gender.is_masculine:
        return "m"
    if gender is Gender.FEMININE:
        return "f"
    return "m" if plural else "n"


def participle_key(prefix: str, plural: bool, gender: Gender) -> str:
    """Keys like ``ipc_sin_f`` (active) or ``ipb_pl_m`` (passive)."""
    return f"{prefix}_{number_segment(plural)}_{participle_gender(plural, gender)}"


def past_gender(plural: bool, person: Person, gender: Gender) -> str:
    """
    Gender segment of past-tense keys. Neuter has its own form only in the
    third person singular; elsewhere it shares the masculine one.
    """
    if gender.is_masculine:
        return "m"
    if gender is Gender.FEMININE:
        return "f"
    if not plural and person is Person.THIRD:
        return "n"
    return "m"


def past_key(plural: bool, person: Optional[Person], gender: Gender) -> Optional[str]:
    """Keys like ``past_sin_2_f``."""
    if person is None:
        return None
    return (
        f"past_{number_segment(plural)}_{PERSON_DIGITS[person]}"
        f"_{past_gender(plural, person, gender)}"
    )


def present_key(plural: bool, person: Optional[Person]) -> Optional[str]:
    """Keys like ``present_sin_3``."""
    if person is None:
        return None
    return f"present_{number_segment(plural)}_{PERSON_DIGITS[person]}"


def imperative_key(plural: bool, person: Optional[Person]) -> Optional[str]:
    """Keys like ``command_pl_2``."""
    if person is None:
        return None
    return f"command_{number_segment(plural)}_{PERSON_DIGITS[person]}"
