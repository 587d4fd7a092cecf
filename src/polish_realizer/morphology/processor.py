"""
Morphology processor.

Walks an element tree produced by the syntax stage and replaces every
``InflectedWordElement`` with the ``StringElement`` its category's rule
produces. Structural nodes are kept (documents) or rebuilt around their
realised children (lists and coordinations).
"""

from typing import Callable, Dict, List, Optional

import structlog

from polish_realizer.framework.elements import (
    CoordinatedPhraseElement,
    Element,
    ElementKind,
    InflectedWordElement,
    ListElement,
    StringElement,
)
from polish_realizer.framework.features import Feature, LexicalCategory
from polish_realizer.lexicon.lexicon import Lexicon
from polish_realizer.lexicon.word_entry import WordElement
from polish_realizer.morphology.rules import (
    do_adjective_morphology,
    do_adverb_morphology,
    do_noun_morphology,
    do_verb_morphology,
)

logger = structlog.get_logger(__name__)

Rule = Callable[[InflectedWordElement, Optional[WordElement]], StringElement]


class MorphologyProcessor:
    """
    Inflects every word of a tree.

    Words built without a lexicon entry are looked up in ``lexicon`` by base
    form and category. Categories without inflection rules (prepositions,
    conjunctions, determiners) are realised as their base form.
    """

    RULES: Dict[LexicalCategory, Rule] = {
        LexicalCategory.NOUN: do_noun_morphology,
        LexicalCategory.PRONOUN: do_noun_morphology,
        LexicalCategory.VERB: do_verb_morphology,
        LexicalCategory.ADJECTIVE: do_adjective_morphology,
        LexicalCategory.POSSESSIVE_PRONOUN: do_adjective_morphology,
        LexicalCategory.ADVERB: do_adverb_morphology,
    }

    def __init__(self, lexicon: Optional[Lexicon] = None):
        """
        Initialize the processor.

        Args:
            lexicon: Supplier of entries for words that were built from a bare base form
        """
        self.lexicon = lexicon

    def realise(self, element: Optional[Element]) -> Optional[Element]:
        """
        Realise one element and everything below it.

        Args:
            element: Root of the (sub)tree, may be None

        Returns:
            The realised element; documents are updated in place

        Raises:
            TypeError: if the tree contains a node kind the walker does not know
            MissingLexicalEntryError: if a verb or adjective has no lexicon entry
        """
        if element is None:
            return None

        kind = getattr(element, "kind", None)
        if kind is ElementKind.INFLECTED_WORD:
            return self.realise_word(element)
        if kind is ElementKind.STRING:
            return element
        if kind is ElementKind.DOCUMENT:
            element.set_components(self.realise_list(element.components))
            return element
        if kind is ElementKind.LIST:
            return _rebuilt(ListElement(self.realise_list(element.children), element.category), element)
        if kind is ElementKind.COORDINATED:
            return _rebuilt(
                CoordinatedPhraseElement(self.realise_list(element.children), element.category),
                element,
            )
        raise TypeError(f"Cannot realise element of type {type(element).__name__}")

    def realise_list(self, elements: List[Element]) -> List[Element]:
        """Realise elements left to right."""
        return [self.realise(element) for element in elements]

    def realise_word(self, word: InflectedWordElement) -> StringElement:
        """Inflect a single word."""
        if word.get_bool(Feature.ELIDED):
            realised = StringElement("", discourse_function=word.discourse_function)
        else:
            base_word = word.base_word
            if base_word is None and self.lexicon is not None and word.base_form is not None:
                base_word = self.lexicon.lookup(word.base_form, word.category)

            rule = self.RULES.get(word.category)
            if rule is None:
                realised = StringElement(word.base_form or "", discourse_function=word.discourse_function)
            else:
                realised = rule(word, base_word)

        if word.get_bool(Feature.APPOSITIVE):
            realised.set_feature(Feature.APPOSITIVE, True)
        realised.parent_index = word.parent_index

        logger.debug(
            "morphology_word_realised",
            base_form=word.base_form,
            category=word.category.value if word.category else None,
            text=realised.realisation,
        )
        return realised


def _rebuilt(new: Element, source: Element) -> Element:
    new.features = dict(source.features)
    new.parent_index = source.parent_index
    return new
