"""
Orthography processor.

Walks the tree left by morphology bottom-up and assembles the text of every
sentence, list and coordination: enumeration conjunctions, appositive and
subordinate-clause commas, capitalization and the final full stop or
question mark.

The processor itself is stateless. The one piece of state a sentence needs
(whether its subordinate-clause comma was already placed) lives in a
``RealisationContext`` that is threaded through the walk and reset at every
sentence.
"""

import re
import string
from dataclasses import dataclass
from typing import List, Optional

from polish_realizer.framework.elements import (
    DocumentElement,
    Element,
    ElementKind,
    ListElement,
    StringElement,
)
from polish_realizer.framework.features import (
    ClauseStatus,
    DiscourseFunction,
    DocumentCategory,
    Feature,
)
from polish_realizer.orthography.conjunctions import needs_comma, starts_with_coordinator


_SPACES_BEFORE_COMMA = re.compile(r" +,")
_REPEATED_COMMAS = re.compile(r",,+")
_REPEATED_SPACES = re.compile(r"  +")

_LOWERCASE_INITIALS = frozenset(string.ascii_lowercase + "ąćęłńóśżź")
_TERMINATORS = (".", "?")

_ENUMERATING = (DiscourseFunction.POST_MODIFIER, DiscourseFunction.MODIFIER, None)
_CUE_FUNCTIONS = (DiscourseFunction.CUE_PHRASE, DiscourseFunction.FRONT_MODIFIER)


def remove_punct_space(text: str) -> str:
    """Drop spaces before commas, then collapse repeated commas and spaces."""
    text = _SPACES_BEFORE_COMMA.sub(",", text)
    text = _REPEATED_COMMAS.sub(",", text)
    return _REPEATED_SPACES.sub(" ", text)


@dataclass
class OrthographyConfig:
    """Punctuation options."""
    comma_sep_premodifiers: bool = False
    comma_sep_cuephrase: bool = False


@dataclass
class RealisationContext:
    """Per-sentence state of one realisation."""
    subordinate_comma_set: bool = False
    inside_cue_phrase: bool = False


class OrthographyProcessor:
    """
    Assembles realised text for every structural node of a tree.
    """

    def __init__(self, config: Optional[OrthographyConfig] = None):
        self.config = config or OrthographyConfig()

    def realise(self, element: Optional[Element],
                context: Optional[RealisationContext] = None) -> Optional[Element]:
        """
        Realise an element and its subtree.

        Args:
            element: Post-morphology element
            context: State shared by the calls of one realisation; a fresh one
                is created when omitted

        Returns:
            A realised element with the original element's category. Sentences
            and other document nodes are updated in place.

        Raises:
            TypeError: for a node kind the walker does not know
        """
        if element is None:
            return None
        if context is None:
            context = RealisationContext()

        kind = getattr(element, "kind", None)
        function = _function_of(element)

        if kind is ElementKind.DOCUMENT:
            realised = self._realise_document(element, context)
        elif kind is ElementKind.LIST:
            realised = StringElement(self._realise_list_element(element, function, context),
                                     category=element.category)
        elif kind is ElementKind.COORDINATED:
            realised = StringElement(self._realise_coordinated(element.children, context),
                                     category=element.category)
        elif kind in (ElementKind.STRING, ElementKind.INFLECTED_WORD):
            realised = element
        else:
            raise TypeError(f"Cannot realise element of type {type(element).__name__}")

        text = realised.realisation
        if text is None:
            return realised

        if (function in _CUE_FUNCTIONS and self.config.comma_sep_cuephrase
                and not context.inside_cue_phrase and not text.endswith(",")):
            text += ","
        return _with_realisation(realised, remove_punct_space(text))

    def realise_list(self, elements: List[Element],
                     context: Optional[RealisationContext] = None) -> List[Element]:
        """Realise elements left to right, sharing one context."""
        if context is None:
            context = RealisationContext()
        return [self.realise(element, context) for element in elements]

    # --- document nodes ---

    def _realise_document(self, element: DocumentElement, context: RealisationContext) -> Element:
        category = element.category
        if category is DocumentCategory.SENTENCE:
            context.subordinate_comma_set = False
            return self._realise_sentence(element, context)
        if category is DocumentCategory.LIST_ITEM:
            item = ListElement(self.realise_list(element.components, context), category=category)
            item.parent_index = element.parent_index
            return item
        element.set_components(self.realise_list(element.components, context))
        return element

    def _realise_sentence(self, element: DocumentElement, context: RealisationContext) -> Element:
        text = self._join(element.components, "", context)
        text = text.lstrip(", ").rstrip(", ")

        if text:
            if text[0] in _LOWERCASE_INITIALS:
                text = text[0].upper() + text[1:]
            if not text.endswith(_TERMINATORS):
                text += "?" if element.get_bool(Feature.INTERROGATIVE) else "."

        element.clear_components()
        element.realisation = text
        return element

    # --- list nodes ---

    def _realise_list_element(self, element: ListElement, function: Optional[DiscourseFunction],
                              context: RealisationContext) -> str:
        children = element.children

        if function is DiscourseFunction.PRE_MODIFIER:
            separator = "," if self.config.comma_sep_premodifiers else ""
            text = self._join(children, separator, context)
            if all(child.get_bool(Feature.APPOSITIVE) for child in children):
                return f", {text}, "
            return text

        subordinate = element.get_enum(Feature.CLAUSE_STATUS) is ClauseStatus.SUBORDINATE
        if function in _ENUMERATING and not (function is None and subordinate):
            return self._realise_enumeration(children, context)

        if function in _CUE_FUNCTIONS and self.config.comma_sep_cuephrase:
            # one comma after the whole phrase, added by realise() for the list
            outer = context.inside_cue_phrase
            context.inside_cue_phrase = True
            try:
                return self._join(children, "", context)
            finally:
                context.inside_cue_phrase = outer

        prefix = ""
        if subordinate and not context.subordinate_comma_set:
            if not starts_with_coordinator(_leading_text(element)):
                prefix = ", "
            context.subordinate_comma_set = True
        return prefix + self._join(children, "", context)

    def _realise_enumeration(self, children: List[Element], context: RealisationContext) -> str:
        """
        Join "a i b" or "a, b oraz c". A list holding an appositive instead
        keeps its children apart, the appositive set off by commas.
        """
        if len(children) > 1 and not any(child.get_bool(Feature.APPOSITIVE) for child in children):
            texts = [
                _comma_before_subordinator(text)
                for text in (self._child_text(child, context) for child in children)
                if not _is_blank(text)
            ]
            if len(texts) <= 2:
                return " i ".join(texts)
            return ", ".join(texts[:-1]) + " oraz " + texts[-1]

        parts = []
        for child in children:
            text = self._child_text(child, context)
            if _is_blank(text):
                continue
            if child.get_bool(Feature.APPOSITIVE):
                parts.append(f", {text}, ")
            else:
                parts.append(f" {_comma_before_subordinator(text)} ")
        return "".join(parts).strip()

    def _join(self, children: List[Element], separator: str, context: RealisationContext) -> str:
        """
        Join realised children with spaces, ``separator`` after every child
        but the last. Blank children are skipped.
        """
        last = len(children) - 1
        buffer = []
        for position, child in enumerate(children):
            text = self._child_text(child, context)
            if _is_blank(text):
                continue
            piece = _comma_before_subordinator(text)
            if position < last:
                piece += separator
            buffer.append(piece)
        return " ".join(buffer)

    def _child_text(self, child: Element, context: RealisationContext) -> str:
        realised = self.realise(child, context)
        if realised is None or realised.realisation is None:
            return ""
        return realised.realisation

    # --- coordinated phrases ---

    def _realise_coordinated(self, children: List[Element], context: RealisationContext) -> str:
        """
        Join coordinates with spaces; every conjunction but the last becomes
        a comma ("A, B i C", not "A i B i C").
        """
        length = len(children)
        pieces = []
        for position, child in enumerate(children):
            if position < length - 2 and child.discourse_function is DiscourseFunction.CONJUNCTION:
                pieces.append(",")
            else:
                pieces.append(self._child_text(child, context))
        return " ".join(pieces).replace(" ,", ",")


def _function_of(element: Element) -> Optional[DiscourseFunction]:
    # a list takes the function of its first child
    if getattr(element, "kind", None) is ElementKind.LIST:
        first = element.first
        return first.discourse_function if first is not None else None
    return element.discourse_function


def _leading_text(element: ListElement) -> str:
    """
    Text of the first leaf of a list, looking one nested list deep, read
    before the list is realised.
    """
    first = element.first
    if first is not None and first.kind is ElementKind.LIST:
        first = first.first
    if first is not None and first.kind is ElementKind.STRING:
        return first.realisation
    return ""


def _comma_before_subordinator(text: str) -> str:
    return ", " + text if needs_comma(text) else text


def _is_blank(text: str) -> bool:
    return not text or text.isspace()


def _with_realisation(element: Element, text: str) -> Element:
    if element.realisation == text:
        return element
    if element.kind is ElementKind.STRING:
        return element.with_text(text)
    element.realisation = text
    return element
