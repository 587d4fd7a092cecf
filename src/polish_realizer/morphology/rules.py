"""
Polish inflection rules.

One function per lexical category. Each takes an ``InflectedWordElement``
and its lexicon entry and returns a ``StringElement`` with the inflected
surface form, carrying the input's discourse function.

A form that is missing from the entry, or stored as a "no form" sentinel,
degrades to the base form. The only hard failure is a verb or adjective
without any entry to consult.
"""

import re
from typing import Optional

import structlog

from polish_realizer.framework.elements import InflectedWordElement, StringElement
from polish_realizer.framework.features import (
    DiscourseFunction,
    Feature,
    Form,
    Gender,
    LexicalCategory,
    Person,
    Tense,
)
from polish_realizer.lexicon.word_entry import WordElement
from polish_realizer.morphology.inflection_keys import (
    CONDITIONAL_ENCLITICS,
    FUTURE_AUXILIARIES,
    AdjectiveKey,
    Degree,
    NounKey,
    imperative_key,
    participle_key,
    past_key,
    present_key,
)

logger = structlog.get_logger(__name__)


# A verb governed by one of these stays in the infinitive.
MODAL_VERBS = frozenset({
    "mieć", "musieć", "móc", "potrafić", "chcieć", "zechcieć", "raczyć",
    "pragnąć", "zapragnąć", "zamierzać", "postanawiać", "postanowić",
    "usiłować", "woleć", "lubić", "polubić", "pozwalać", "pozwolić",
    "zachcieć",
})

REFLEXIVE_SUFFIX = " się"

_VOWEL_RUNS = re.compile("[aeiouyąęó]+")


class MissingLexicalEntryError(RuntimeError):
    """A verb or adjective reached morphology without a lexicon entry."""

    def __init__(self, base_form: Optional[str], category: LexicalCategory) -> None:
        super().__init__(
            f"No lexicon entry for {category.value.lower()} '{base_form}'; "
            "verb and adjective morphology need the entry's form table"
        )
        self.base_form = base_form
        self.category = category


def resolve_case(element: InflectedWordElement) -> DiscourseFunction:
    """The element's own CASE, else the inherited CASE_PARENT, else SUBJECT."""
    case = element.get_enum(Feature.CASE)
    if case is not None:
        return case
    return element.get_enum(Feature.CASE_PARENT, DiscourseFunction.SUBJECT)


def get_base_form(element: InflectedWordElement, base_word: Optional[WordElement]) -> Optional[str]:
    """
    Base form to inflect from. Verbs prefer the entry's spelling; every
    other category prefers the element's own base form.
    """
    if element.category is LexicalCategory.VERB:
        if base_word is not None:
            return base_word.default_spelling_variant
        return element.base_form
    if element.base_form is not None:
        return element.base_form
    if base_word is None:
        return None
    return base_word.default_spelling_variant


def _realised(text: Optional[str], element: InflectedWordElement) -> StringElement:
    return StringElement(text or "", discourse_function=element.discourse_function)


def _lookup(base_word: Optional[WordElement], key: Optional[str], base_form: Optional[str]) -> Optional[str]:
    form = base_word.usable_form(key) if base_word is not None else None
    if form is None:
        logger.debug("morphology_form_missing", base_form=base_form, key=key)
        return base_form
    return form


def _degree(element: InflectedWordElement) -> Degree:
    if element.get_bool(Feature.IS_COMPARATIVE):
        return Degree.COMPARATIVE
    if element.get_bool(Feature.IS_SUPERLATIVE):
        return Degree.SUPERLATIVE
    return Degree.POSITIVE


# --- nouns and personal pronouns ---

def do_noun_morphology(element: InflectedWordElement, base_word: Optional[WordElement] = None) -> StringElement:
    """
    Inflect a noun (or personal pronoun) for case and number.

    Proper nouns are never inflected. Pronouns after a preposition use the
    entry's ``_p`` forms when it has them ("ja" -> "mnie", not "mię").
    An explicit PLURAL feature replaces the lexicon's nominative plural and
    is the fallback for other plural cases.
    """
    base_form = get_base_form(element, base_word)
    if element.get_bool(Feature.PROPER) or (base_word is not None and base_word.is_proper):
        return _realised(base_form, element)

    case = resolve_case(element)
    plural = element.is_plural
    key = NounKey(case, plural).render()

    if element.category is LexicalCategory.PRONOUN and element.get_bool(Feature.HAS_PREP):
        prep_key = NounKey(case, plural, after_preposition=True).render()
        if base_word is not None and base_word.has_form(prep_key):
            key = prep_key

    override = element.get_string(Feature.PLURAL) if plural else None
    if override is not None and case is DiscourseFunction.SUBJECT:
        return _realised(override, element)

    form = base_word.usable_form(key) if base_word is not None else None
    if form is None:
        logger.debug("morphology_form_missing", base_form=base_form, key=key)
        form = override or base_form
    return _realised(form, element)


# --- verbs ---

def _with_enclitic(past_form: str, enclitic: str) -> str:
    # "modlił się" + "bym" -> "modliłbym się"
    if past_form.endswith(REFLEXIVE_SUFFIX):
        return past_form[:-len(REFLEXIVE_SUFFIX)] + enclitic + REFLEXIVE_SUFFIX
    return past_form + enclitic


def do_verb_morphology(element: InflectedWordElement, base_word: Optional[WordElement] = None) -> StringElement:
    """
    Inflect a verb for form, tense, number, person and gender.

    Raises:
        MissingLexicalEntryError: if the verb has to be looked up but has no entry
    """
    plural = element.is_plural
    person = element.get_enum(Feature.PERSON)
    form = element.get_enum(Feature.FORM, Form.NORMAL)
    tense = element.get_enum(Feature.TENSE, Tense.PRESENT)
    gender = element.get_enum(Feature.GENDER, Gender.FEMININE)

    perfective = element.get_bool(Feature.PERFECTIVE) or (
        base_word is not None and base_word.is_perfective
    )
    if tense is Tense.FUTURE and perfective:
        # the present conjugation of a perfective verb already means future
        tense = Tense.PRESENT

    base_form = get_base_form(element, base_word)

    if (element.get_bool(Feature.CONTAINS_MODAL)
            and base_form not in MODAL_VERBS
            and tense is Tense.PRESENT):
        return _realised(base_form, element)

    if base_word is None:
        raise MissingLexicalEntryError(base_form, LexicalCategory.VERB)

    if form is Form.PARTICIPLE_ACTIVE:
        key = participle_key("ipc", plural, gender)
    elif form is Form.PARTICIPLE_PASSIVE:
        key = participle_key("ipb", plural, gender)
    elif form is Form.PAST_PARTICIPLE:
        key = "ipu"
    elif form is Form.TRANSGRESSIVE:
        key = "transgressive"
    elif form is Form.IMPERATIVE:
        key = imperative_key(plural, person)
    elif form is Form.CONDITIONAL:
        # the enclitic carries the person; the stem is the bare third person past
        past_form = None
        if person is not None:
            past_form = base_word.usable_form(past_key(plural, Person.THIRD, gender))
        if past_form is None:
            logger.debug("morphology_form_missing", base_form=base_form, form=form.value)
            return _realised(base_form, element)
        return _realised(_with_enclitic(past_form, CONDITIONAL_ENCLITICS[(plural, person)]), element)
    elif tense is Tense.PAST:
        key = past_key(plural, person, gender)
    elif tense is Tense.FUTURE:
        auxiliary = FUTURE_AUXILIARIES[(plural, person or Person.THIRD)]
        return _realised(f"{auxiliary} {base_form}", element)
    else:
        key = present_key(plural, person)

    return _realised(_lookup(base_word, key, base_form), element)


# --- adjectives and possessive pronouns ---

def do_adjective_morphology(element: InflectedWordElement, base_word: Optional[WordElement] = None) -> StringElement:
    """
    Inflect an adjective for case, number, gender and degree. Gender
    defaults to feminine.

    Raises:
        MissingLexicalEntryError: if the adjective has no entry
    """
    base_form = get_base_form(element, base_word)
    if base_word is None:
        raise MissingLexicalEntryError(base_form, element.category or LexicalCategory.ADJECTIVE)

    key = AdjectiveKey(
        case=resolve_case(element),
        plural=element.is_plural,
        gender=element.get_enum(Feature.GENDER, Gender.FEMININE),
        degree=_degree(element),
    ).render()
    return _realised(_lookup(base_word, key, base_form), element)


# --- adverbs ---

def do_adverb_morphology(element: InflectedWordElement, base_word: Optional[WordElement] = None) -> StringElement:
    """Only comparison inflects an adverb; the superlative wins over the comparative."""
    base_form = get_base_form(element, base_word)
    key = None
    if element.get_bool(Feature.IS_SUPERLATIVE):
        key = "sup"
    elif element.get_bool(Feature.IS_COMPARATIVE):
        key = "comp"
    if key is None:
        return _realised(base_form, element)
    return _realised(_lookup(base_word, key, base_form), element)


def number_of_syllables(word: str) -> int:
    """
    Approximate syllable count: each run of vowels is one syllable and
    words of up to three letters count as one.
    """
    word = word.strip()
    if len(word) <= 3:
        return 1
    return len(_VOWEL_RUNS.findall(word.lower()))
