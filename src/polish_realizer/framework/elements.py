"""
Element tree for the Polish realizer.

Every node of the tree handed from the syntax stage to morphology and
orthography is an ``Element``. The set of node kinds is closed
(``ElementKind``); the tree walkers dispatch on ``element.kind`` and
reject anything else.

Parent links are lookup-only: an element stores the arena index of its
parent, never a reference to it. ``ElementArena`` resolves the index.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from polish_realizer.framework.features import (
    BOOLEAN_FEATURES,
    FEATURE_VALUE_TYPES,
    Feature,
    LexicalCategory,
    NumberAgreement,
    PhraseCategory,
    DocumentCategory,
    DiscourseFunction,
)
from polish_realizer.lexicon.word_entry import WordElement


Category = Union[LexicalCategory, PhraseCategory, DocumentCategory]
FeatureValue = Union[str, bool, Enum, "Element", List["Element"]]


class ElementKind(Enum):
    """The closed set of node kinds."""
    INFLECTED_WORD = "INFLECTED_WORD"
    STRING = "STRING"
    LIST = "LIST"
    DOCUMENT = "DOCUMENT"
    COORDINATED = "COORDINATED"


class Element:
    """
    Base class for all tree nodes.

    Holds a category, a typed feature store, an optional realisation and
    the lookup-only parent index.
    """

    kind: ElementKind

    def __init__(self, category: Optional[Category] = None) -> None:
        self.category: Optional[Category] = category
        self.features: Dict[Feature, FeatureValue] = {}
        self._realisation: Optional[str] = None
        self.index: Optional[int] = None
        self.parent_index: Optional[int] = None

    # --- realisation ---

    @property
    def realisation(self) -> Optional[str]:
        return self._realisation

    @realisation.setter
    def realisation(self, value: Optional[str]) -> None:
        self._realisation = value

    # --- feature store ---

    def set_feature(self, feature: Feature, value: FeatureValue) -> None:
        """
        Set a feature, checking the value against the feature's domain.

        Raises:
            TypeError: if the value does not belong to the feature's domain
        """
        if value is not None:
            expected = FEATURE_VALUE_TYPES.get(feature)
            if expected is not None and not isinstance(value, expected):
                raise TypeError(
                    f"Feature {feature.name} expects {expected.__name__}, got {value!r}"
                )
            if feature in BOOLEAN_FEATURES and not isinstance(value, bool):
                raise TypeError(f"Feature {feature.name} expects a bool, got {value!r}")
        self.features[feature] = value

    def get_feature(self, feature: Feature, default: Any = None) -> Any:
        return self.features.get(feature, default)

    def has_feature(self, feature: Feature) -> bool:
        return self.features.get(feature) is not None

    def remove_feature(self, feature: Feature) -> None:
        self.features.pop(feature, None)

    def get_bool(self, feature: Feature) -> bool:
        """Boolean view of a feature; absent means False."""
        return self.features.get(feature) is True

    def get_string(self, feature: Feature) -> Optional[str]:
        value = self.features.get(feature)
        return value if isinstance(value, str) else None

    def get_enum(self, feature: Feature, default: Any = None) -> Any:
        """Return the feature if it holds a member of its domain, else default."""
        value = self.features.get(feature)
        expected = FEATURE_VALUE_TYPES.get(feature)
        if expected is not None and isinstance(value, expected):
            return value
        return default

    @property
    def discourse_function(self) -> Optional[DiscourseFunction]:
        return self.get_enum(Feature.DISCOURSE_FUNCTION)

    @property
    def is_plural(self) -> bool:
        return self.features.get(Feature.NUMBER) is NumberAgreement.PLURAL

    def set_plural(self, plural: bool) -> None:
        self.features[Feature.NUMBER] = (
            NumberAgreement.PLURAL if plural else NumberAgreement.SINGULAR
        )

    # --- tree ---

    @property
    def children(self) -> List["Element"]:
        return []

    def print_tree(self, indent: str = "") -> str:
        """Render this subtree, one node per line."""
        lines = [f"{indent}{self._describe()}"]
        for child in self.children:
            lines.append(child.print_tree(indent + "  ").rstrip("\n"))
        return "\n".join(lines) + "\n"

    def _describe(self) -> str:
        category = self.category.value if self.category is not None else "None"
        feats = ", ".join(
            f"{f.value}={_feature_repr(v)}" for f, v in self.features.items()
        )
        return f"{type(self).__name__}: category={category}, features={{{feats}}}"

    def __str__(self) -> str:
        return self._realisation or ""


def _feature_repr(value: FeatureValue) -> str:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Element):
        return type(value).__name__
    if isinstance(value, list):
        return f"[{len(value)} elements]"
    return repr(value)


class InflectedWordElement(Element):
    """
    A word awaiting inflection.

    Created from a base-form string, or from a lexical entry whose boolean
    attributes become features and whose form table drives the inflection.
    """

    kind = ElementKind.INFLECTED_WORD

    def __init__(
        self,
        base_form: str,
        category: LexicalCategory,
        base_word: Optional[WordElement] = None,
    ) -> None:
        super().__init__(category)
        self.set_feature(Feature.BASE_FORM, base_form)
        self.base_word: Optional[WordElement] = base_word

    @classmethod
    def from_word(cls, word: WordElement) -> "InflectedWordElement":
        """Build an inflectable element inheriting the entry's attributes."""
        element = cls(word.default_spelling_variant, word.category, base_word=word)
        for name, value in word.attributes.items():
            try:
                feature = Feature(name)
            except ValueError:
                continue
            if feature in BOOLEAN_FEATURES:
                element.set_feature(feature, bool(value))
        return element

    @property
    def base_form(self) -> Optional[str]:
        return self.get_string(Feature.BASE_FORM)

    def _describe(self) -> str:
        return f"InflectedWordElement: base={self.base_form}, " + super()._describe().split(": ", 1)[1]


class StringElement(Element):
    """
    A realised leaf. Its text never changes once built; ``with_text``
    returns a new element.
    """

    kind = ElementKind.STRING

    def __init__(
        self,
        text: str,
        category: Optional[Category] = PhraseCategory.CANNED_TEXT,
        discourse_function: Optional[DiscourseFunction] = None,
    ) -> None:
        super().__init__(category)
        self._realisation = text
        self.set_feature(Feature.ELIDED, False)
        if discourse_function is not None:
            self.set_feature(Feature.DISCOURSE_FUNCTION, discourse_function)

    @property
    def realisation(self) -> str:
        return self._realisation

    @realisation.setter
    def realisation(self, value: Optional[str]) -> None:
        raise AttributeError("StringElement text is immutable; use with_text()")

    def with_text(self, text: str) -> "StringElement":
        copy = StringElement(text, self.category)
        copy.features = dict(self.features)
        copy.parent_index = self.parent_index
        return copy

    def with_category(self, category: Optional[Category]) -> "StringElement":
        copy = self.with_text(self._realisation)
        copy.category = category
        return copy

    def _describe(self) -> str:
        return f"StringElement: {self._realisation!r}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StringElement) and self._realisation == other._realisation

    def __hash__(self) -> int:
        return hash(self._realisation)


class ListElement(Element):
    """An ordered sequence of children sharing a discourse function."""

    kind = ElementKind.LIST

    def __init__(
        self,
        children: Optional[Iterable[Element]] = None,
        category: Optional[Category] = None,
    ) -> None:
        super().__init__(category)
        self._children: List[Element] = list(children or [])

    @property
    def children(self) -> List[Element]:
        return self._children

    def add_component(self, element: Element) -> None:
        self._children.append(element)

    @property
    def first(self) -> Optional[Element]:
        return self._children[0] if self._children else None


class DocumentElement(Element):
    """
    A structural node: document, section, paragraph, sentence, list or
    list item. Orthography mutates it in place.
    """

    kind = ElementKind.DOCUMENT

    def __init__(
        self,
        category: DocumentCategory,
        title: Optional[str] = None,
        components: Optional[Iterable[Element]] = None,
    ) -> None:
        super().__init__(category)
        self.title = title
        self._components: List[Element] = list(components or [])

    @property
    def components(self) -> List[Element]:
        return self._components

    @property
    def children(self) -> List[Element]:
        return self._components

    def add_component(self, element: Element) -> None:
        self._components.append(element)

    def set_components(self, components: Iterable[Element]) -> None:
        self._components = list(components)

    def clear_components(self) -> None:
        self._components = []

    def _describe(self) -> str:
        described = super()._describe()
        if self.title:
            described += f", title={self.title!r}"
        if self._realisation is not None:
            described += f", realisation={self._realisation!r}"
        return described


class CoordinatedPhraseElement(Element):
    """Coordinates interleaved with conjunction-tagged elements."""

    kind = ElementKind.COORDINATED

    def __init__(
        self,
        children: Optional[Iterable[Element]] = None,
        category: Optional[Category] = None,
    ) -> None:
        super().__init__(category)
        self._children: List[Element] = list(children or [])

    @classmethod
    def from_coordinates(
        cls, coordinates: Iterable[Element], conjunction: str = "i"
    ) -> "CoordinatedPhraseElement":
        """Interleave ``conjunction`` between the coordinates."""
        children: List[Element] = []
        for coordinate in coordinates:
            if children:
                children.append(StringElement(
                    conjunction,
                    category=LexicalCategory.CONJUNCTION,
                    discourse_function=DiscourseFunction.CONJUNCTION,
                ))
            children.append(coordinate)
        return cls(children)

    @property
    def children(self) -> List[Element]:
        return self._children


class ElementArena:
    """
    Flat registry of elements. Parent relations are stored as indices into
    the arena and resolved here.
    """

    def __init__(self) -> None:
        self._nodes: List[Element] = []

    def add(self, element: Element, parent: Optional[Element] = None) -> int:
        """
        Register an element under an already registered parent.

        Raises:
            ValueError: if the parent is not registered in this arena
        """
        if parent is not None and not self._owns(parent):
            raise ValueError("Parent element is not registered in this arena")
        element.index = len(self._nodes)
        element.parent_index = parent.index if parent is not None else None
        self._nodes.append(element)
        return element.index

    def add_tree(self, root: Element, parent: Optional[Element] = None) -> int:
        """Register a whole subtree, parents before children."""
        index = self.add(root, parent)
        for child in root.children:
            self.add_tree(child, root)
        return index

    def get(self, index: int) -> Element:
        return self._nodes[index]

    def parent_of(self, element: Element) -> Optional[Element]:
        if element.parent_index is None:
            return None
        return self._nodes[element.parent_index]

    def _owns(self, element: Element) -> bool:
        index = element.index
        return index is not None and index < len(self._nodes) and self._nodes[index] is element

    def __len__(self) -> int:
        return len(self._nodes)
