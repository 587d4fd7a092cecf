"""
JSON tree format.

Builds element trees from plain dictionaries, so that trees produced by an
external syntax stage can be fed to the realiser from files::

    {"type": "sentence", "features": {"interrogative": false}, "components": [
        {"type": "word", "base": "człowiek", "category": "NOUN",
         "features": {"case": "LOCATIVE"}},
        {"type": "list", "children": [...]},
        {"type": "coordinated", "conjunction": "i", "coordinates": [...]},
        {"type": "string", "text": "wczoraj"}
    ]}

Feature names are the lowercase ``Feature`` values; enumerated feature
values are member names (``"LOCATIVE"``, ``"PLURAL"``, ...).
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

from polish_realizer.framework.elements import (
    Category,
    CoordinatedPhraseElement,
    DocumentElement,
    Element,
    FeatureValue,
    InflectedWordElement,
    ListElement,
    StringElement,
)
from polish_realizer.framework.features import (
    BOOLEAN_FEATURES,
    FEATURE_VALUE_TYPES,
    DocumentCategory,
    Feature,
    LexicalCategory,
    PhraseCategory,
)
from polish_realizer.lexicon.lexicon import Lexicon
from polish_realizer.utils.file_handlers import load_json


_TRUE_STRINGS = ("true", "yes", "1")
_FALSE_STRINGS = ("false", "no", "0")


def parse_feature(name: str, value: Any) -> Tuple[Feature, FeatureValue]:
    """
    Convert a feature name and a JSON (or command line) value to a typed pair.

    Raises:
        ValueError: if the name or the value is not valid for the feature
    """
    try:
        feature = Feature(name.lower())
    except ValueError:
        raise ValueError(f"Unknown feature '{name}'") from None

    expected = FEATURE_VALUE_TYPES.get(feature)
    if expected is not None:
        try:
            return feature, expected[str(value).upper()]
        except KeyError:
            allowed = ", ".join(member.name for member in expected)
            raise ValueError(f"Invalid value {value!r} for feature '{name}' (expected one of {allowed})") from None

    if feature in BOOLEAN_FEATURES:
        if isinstance(value, bool):
            return feature, value
        lowered = str(value).lower()
        if lowered in _TRUE_STRINGS:
            return feature, True
        if lowered in _FALSE_STRINGS:
            return feature, False
        raise ValueError(f"Feature '{name}' expects a boolean, got {value!r}")

    if not isinstance(value, str):
        raise ValueError(f"Feature '{name}' expects a string, got {value!r}")
    return feature, value


def parse_category(name: str) -> Category:
    """Resolve a lexical, phrase or document category by name."""
    if not isinstance(name, str):
        raise ValueError(f"Category must be a string, got {name!r}")
    for enum_type in (LexicalCategory, PhraseCategory, DocumentCategory):
        try:
            return enum_type[name.upper()]
        except KeyError:
            continue
    raise ValueError(f"Unknown category '{name}'")


def element_from_dict(data: Dict[str, Any], lexicon: Optional[Lexicon] = None) -> Element:
    """
    Build an element tree from its dictionary form.

    Args:
        data: Node dictionary with a "type" key
        lexicon: Used to attach entries to word nodes

    Returns:
        Root element of the tree

    Raises:
        ValueError: if the document is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"Tree node must be an object, got {type(data).__name__}")

    node_type = data.get("type")
    builder = _BUILDERS.get(node_type) if isinstance(node_type, str) else None
    if builder is None:
        raise ValueError(f"Unknown tree node type {node_type!r}")

    element = builder(data, lexicon)
    features = data.get("features", {})
    if not isinstance(features, dict):
        raise ValueError(f"'features' of a {node_type} node must be an object")
    for name, value in features.items():
        feature, typed = parse_feature(name, value)
        element.set_feature(feature, typed)
    return element


def tree_from_json(filepath: Union[str, Path], lexicon: Optional[Lexicon] = None) -> Element:
    """Load an element tree from a JSON file."""
    return element_from_dict(load_json(filepath), lexicon)


def _children(data: Dict[str, Any], key: str, lexicon: Optional[Lexicon]):
    raw = data.get(key, [])
    if not isinstance(raw, list):
        raise ValueError(f"'{key}' of a {data.get('type')} node must be a list")
    return [element_from_dict(child, lexicon) for child in raw]


def _build_word(data: Dict[str, Any], lexicon: Optional[Lexicon]) -> Element:
    base = data.get("base")
    if not isinstance(base, str):
        raise ValueError("A word node needs a string 'base'")
    category = parse_category(data.get("category", "ANY"))
    if not isinstance(category, LexicalCategory):
        raise ValueError(f"Word '{base}' needs a lexical category, got {category.name}")

    entry = lexicon.lookup(base, category) if lexicon is not None else None
    if entry is not None:
        return InflectedWordElement.from_word(entry)
    return InflectedWordElement(base, category)


def _build_string(data: Dict[str, Any], lexicon: Optional[Lexicon]) -> Element:
    text = data.get("text")
    if not isinstance(text, str):
        raise ValueError("A string node needs a string 'text'")
    if "category" in data:
        return StringElement(text, category=parse_category(data["category"]))
    return StringElement(text)


def _build_list(data: Dict[str, Any], lexicon: Optional[Lexicon]) -> Element:
    category = parse_category(data["category"]) if "category" in data else None
    return ListElement(_children(data, "children", lexicon), category)


def _build_coordinated(data: Dict[str, Any], lexicon: Optional[Lexicon]) -> Element:
    if "coordinates" in data:
        return CoordinatedPhraseElement.from_coordinates(
            _children(data, "coordinates", lexicon),
            conjunction=data.get("conjunction", "i"),
        )
    return CoordinatedPhraseElement(_children(data, "children", lexicon))


def _build_document(data: Dict[str, Any], lexicon: Optional[Lexicon]) -> Element:
    category = parse_category(data.get("category", "DOCUMENT"))
    if not isinstance(category, DocumentCategory):
        raise ValueError(f"A document node needs a document category, got {category.name}")
    return DocumentElement(category, title=data.get("title"),
                           components=_children(data, "components", lexicon))


def _build_sentence(data: Dict[str, Any], lexicon: Optional[Lexicon]) -> Element:
    return DocumentElement(DocumentCategory.SENTENCE, components=_children(data, "components", lexicon))


_BUILDERS: Dict[str, Callable[[Dict[str, Any], Optional[Lexicon]], Element]] = {
    "word": _build_word,
    "string": _build_string,
    "list": _build_list,
    "coordinated": _build_coordinated,
    "document": _build_document,
    "sentence": _build_sentence,
}
