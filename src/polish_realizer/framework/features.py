"""
Feature domains for the Polish realizer.

Every grammatical dimension an element can carry is a closed enumeration,
and every feature an element can hold is named by a member of ``Feature``.
The element feature store maps ``Feature`` members to values of these
enumerations (or to strings, booleans and child elements).
"""

from enum import Enum


class LexicalCategory(Enum):
    """Word classes known to the lexicon."""
    NOUN = "NOUN"
    VERB = "VERB"
    ADJECTIVE = "ADJECTIVE"
    ADVERB = "ADVERB"
    PRONOUN = "PRONOUN"
    POSSESSIVE_PRONOUN = "POSSESSIVE_PRONOUN"
    CONJUNCTION = "CONJUNCTION"
    PREPOSITION = "PREPOSITION"
    DETERMINER = "DETERMINER"
    ANY = "ANY"


class PhraseCategory(Enum):
    """Phrase-level categories."""
    CLAUSE = "CLAUSE"
    NOUN_PHRASE = "NOUN_PHRASE"
    VERB_PHRASE = "VERB_PHRASE"
    ADJECTIVE_PHRASE = "ADJECTIVE_PHRASE"
    ADVERB_PHRASE = "ADVERB_PHRASE"
    PREPOSITIONAL_PHRASE = "PREPOSITIONAL_PHRASE"
    CANNED_TEXT = "CANNED_TEXT"


class DocumentCategory(Enum):
    """Structural categories of document elements."""
    DOCUMENT = "DOCUMENT"
    SECTION = "SECTION"
    PARAGRAPH = "PARAGRAPH"
    SENTENCE = "SENTENCE"
    LIST = "LIST"
    ENUMERATED_LIST = "ENUMERATED_LIST"
    LIST_ITEM = "LIST_ITEM"


class DiscourseFunction(Enum):
    """
    Role of an element within its parent.

    The first seven members double as grammatical cases: SUBJECT is the
    nominative, OBJECT the accusative, INDIRECT_OBJECT the dative.
    """
    SUBJECT = "SUBJECT"
    OBJECT = "OBJECT"
    INDIRECT_OBJECT = "INDIRECT_OBJECT"
    GENITIVE = "GENITIVE"
    LOCATIVE = "LOCATIVE"
    INSTRUMENTAL = "INSTRUMENTAL"
    VOCATIVE = "VOCATIVE"
    COMPLEMENT = "COMPLEMENT"
    CONJUNCTION = "CONJUNCTION"
    CUE_PHRASE = "CUE_PHRASE"
    FRONT_MODIFIER = "FRONT_MODIFIER"
    PRE_MODIFIER = "PRE_MODIFIER"
    POST_MODIFIER = "POST_MODIFIER"
    MODIFIER = "MODIFIER"
    HEAD = "HEAD"
    SPECIFIER = "SPECIFIER"
    VERB_PHRASE = "VERB_PHRASE"
    AUXILIARY = "AUXILIARY"


class Gender(Enum):
    """Polish grammatical genders (three masculine subgenders)."""
    MASC_PERSON = "MASC_PERSON"
    MASC_OBJECT = "MASC_OBJECT"
    MASC_ANIMAL = "MASC_ANIMAL"
    FEMININE = "FEMININE"
    NEUTER = "NEUTER"

    @property
    def is_masculine(self) -> bool:
        return self in (Gender.MASC_PERSON, Gender.MASC_OBJECT, Gender.MASC_ANIMAL)


class Form(Enum):
    """Verb forms."""
    BARE_INFINITIVE = "BARE_INFINITIVE"
    GERUND = "GERUND"
    IMPERATIVE = "IMPERATIVE"
    INFINITIVE = "INFINITIVE"
    NORMAL = "NORMAL"
    PAST_PARTICIPLE = "PAST_PARTICIPLE"
    PARTICIPLE_ACTIVE = "PARTICIPLE_ACTIVE"
    PARTICIPLE_PASSIVE = "PARTICIPLE_PASSIVE"
    TRANSGRESSIVE = "TRANSGRESSIVE"
    PERSONLESS = "PERSONLESS"
    CONDITIONAL = "CONDITIONAL"


class Tense(Enum):
    PAST = "PAST"
    PRESENT = "PRESENT"
    FUTURE = "FUTURE"


class NumberAgreement(Enum):
    SINGULAR = "SINGULAR"
    PLURAL = "PLURAL"


class Person(Enum):
    FIRST = "FIRST"
    SECOND = "SECOND"
    THIRD = "THIRD"


class ClauseStatus(Enum):
    """Whether a clause is the matrix sentence or embedded in another."""
    MATRIX = "MATRIX"
    SUBORDINATE = "SUBORDINATE"


class InterrogativeType(Enum):
    """Question types and the Polish question word each one introduces."""
    HOW = "HOW"
    HOW_PREDICATE = "HOW_PREDICATE"
    WHAT_INDIRECT_OBJECT = "WHAT_INDIRECT_OBJECT"
    WHAT_SUBJECT = "WHAT_SUBJECT"
    WHERE = "WHERE"
    WHO_INDIRECT_OBJECT = "WHO_INDIRECT_OBJECT"
    WHO_OBJECT = "WHO_OBJECT"
    WHO_SUBJECT = "WHO_SUBJECT"
    WHY = "WHY"
    YES_NO = "YES_NO"
    HOW_MANY = "HOW_MANY"
    WHAT_OBJECT = "WHAT_OBJECT"
    WHAT_INSTRUMENT = "WHAT_INSTRUMENT"  # with what?
    WHO_INSTRUMENT = "WHO_INSTRUMENT"  # with whom?
    WHAT_LOCATIVE = "WHAT_LOCATIVE"  # about/at what?
    WHO_LOCATIVE = "WHO_LOCATIVE"  # about/at whom?

    @property
    def polish_word(self) -> str:
        return _INTERROGATIVE_WORDS[self]

    @property
    def is_object(self) -> bool:
        return self in (InterrogativeType.WHO_OBJECT, InterrogativeType.WHAT_OBJECT)

    @property
    def is_indirect_object(self) -> bool:
        return self is InterrogativeType.WHO_INDIRECT_OBJECT


# The locative entries keep the word list's mapping: WHAT_LOCATIVE -> "kim",
# WHO_LOCATIVE -> "czym".
_INTERROGATIVE_WORDS = {
    InterrogativeType.HOW: "jak",
    InterrogativeType.HOW_PREDICATE: "jak",
    InterrogativeType.WHAT_INDIRECT_OBJECT: "czemu",
    InterrogativeType.WHAT_OBJECT: "co",
    InterrogativeType.WHAT_SUBJECT: "co",
    InterrogativeType.WHERE: "gdzie",
    InterrogativeType.WHO_INDIRECT_OBJECT: "komu",
    InterrogativeType.WHO_OBJECT: "kogo",
    InterrogativeType.WHO_SUBJECT: "kto",
    InterrogativeType.WHY: "dlaczego",
    InterrogativeType.HOW_MANY: "ile",
    InterrogativeType.YES_NO: "tak/nie",
    InterrogativeType.WHAT_INSTRUMENT: "czym",
    InterrogativeType.WHO_INSTRUMENT: "kim",
    InterrogativeType.WHAT_LOCATIVE: "kim",
    InterrogativeType.WHO_LOCATIVE: "czym",
}


class Feature(Enum):
    """Identifiers of every feature an element may carry."""
    BASE_FORM = "base_form"
    CASE = "case"
    CASE_PARENT = "case_parent"
    DISCOURSE_FUNCTION = "discourse_function"
    NUMBER = "number"
    PERSON = "person"
    GENDER = "gender"
    TENSE = "tense"
    FORM = "form"
    IS_COMPARATIVE = "is_comparative"
    IS_SUPERLATIVE = "is_superlative"
    HAS_PREP = "has_prep"
    CONTAINS_MODAL = "contains_modal"
    PROPER = "proper"
    PLURAL = "plural"
    APPOSITIVE = "appositive"
    CLAUSE_STATUS = "clause_status"
    INTERROGATIVE = "interrogative"
    INTERROGATIVE_TYPE = "interrogative_type"
    ELIDED = "elided"
    SEPARABLE = "separable"
    SENTENCE_MODIFIER = "sentence_modifier"
    PERFECTIVE = "perfective"


# Enumerated type expected for each enum-valued feature.
FEATURE_VALUE_TYPES = {
    Feature.CASE: DiscourseFunction,
    Feature.CASE_PARENT: DiscourseFunction,
    Feature.DISCOURSE_FUNCTION: DiscourseFunction,
    Feature.NUMBER: NumberAgreement,
    Feature.PERSON: Person,
    Feature.GENDER: Gender,
    Feature.TENSE: Tense,
    Feature.FORM: Form,
    Feature.CLAUSE_STATUS: ClauseStatus,
    Feature.INTERROGATIVE_TYPE: InterrogativeType,
}

# Boolean-valued features.
BOOLEAN_FEATURES = frozenset({
    Feature.IS_COMPARATIVE,
    Feature.IS_SUPERLATIVE,
    Feature.HAS_PREP,
    Feature.CONTAINS_MODAL,
    Feature.PROPER,
    Feature.APPOSITIVE,
    Feature.INTERROGATIVE,
    Feature.ELIDED,
    Feature.SEPARABLE,
    Feature.SENTENCE_MODIFIER,
    Feature.PERFECTIVE,
})
