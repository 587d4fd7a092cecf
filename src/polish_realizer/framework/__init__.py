"""Element tree and feature model."""

from polish_realizer.framework.features import (
    ClauseStatus,
    DiscourseFunction,
    DocumentCategory,
    Feature,
    Form,
    Gender,
    InterrogativeType,
    LexicalCategory,
    NumberAgreement,
    Person,
    PhraseCategory,
    Tense,
)
from polish_realizer.framework.elements import (
    CoordinatedPhraseElement,
    DocumentElement,
    Element,
    ElementArena,
    ElementKind,
    InflectedWordElement,
    ListElement,
    StringElement,
)

__all__ = [
    # Feature domains
    "ClauseStatus",
    "DiscourseFunction",
    "DocumentCategory",
    "Feature",
    "Form",
    "Gender",
    "InterrogativeType",
    "LexicalCategory",
    "NumberAgreement",
    "Person",
    "PhraseCategory",
    "Tense",
    # Elements
    "CoordinatedPhraseElement",
    "DocumentElement",
    "Element",
    "ElementArena",
    "ElementKind",
    "InflectedWordElement",
    "ListElement",
    "StringElement",
]
