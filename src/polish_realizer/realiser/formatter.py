"""
Plain-text formatter.

Turns the realised document tree into a single string: titles, paragraphs,
bulleted lists and numbered (optionally nested) lists.
"""

from typing import List, Optional

from polish_realizer.framework.elements import Element, ElementKind
from polish_realizer.framework.features import DocumentCategory


class NumberedPrefix:
    """
    Hierarchical counter for enumerated lists: "1", "2", then "2.1", "2.2"
    one level down, and back to "2" one level up.
    """

    def __init__(self):
        self.prefix = "0"

    def increment(self) -> None:
        head, dot, last = self.prefix.rpartition(".")
        self.prefix = f"{head}{dot}{int(last) + 1}"

    def up_a_level(self) -> None:
        """Start a nested level (or the first level)."""
        self.prefix = "1" if self.prefix == "0" else self.prefix + ".1"

    def down_a_level(self) -> None:
        """Leave the current level."""
        head, dot, _ = self.prefix.rpartition(".")
        self.prefix = head if dot else "0"


class TextFormatter:
    """Plain-text formatter for realised trees."""

    def format(self, element: Optional[Element]) -> str:
        if element is None:
            return ""
        return self._format(element, None)

    def _format(self, element: Element, numbering: Optional[NumberedPrefix]) -> str:
        category = element.category

        if category is DocumentCategory.DOCUMENT:
            body = self._format_all(element.children, numbering)
            return f"{element.title}\n\n{body}" if getattr(element, "title", None) else body

        if category is DocumentCategory.SECTION:
            body = self._format_all(element.children, numbering)
            return f"{element.title}\n{body}" if getattr(element, "title", None) else body

        if category is DocumentCategory.PARAGRAPH:
            sentences = [self._format(child, numbering) for child in element.children]
            return " ".join(text for text in sentences if text) + "\n\n"

        if category is DocumentCategory.LIST:
            return self._format_all(element.children, None)

        if category is DocumentCategory.ENUMERATED_LIST:
            numbering = numbering or NumberedPrefix()
            numbering.up_a_level()
            items = []
            for position, child in enumerate(element.children):
                if position:
                    numbering.increment()
                items.append(self._format(child, numbering))
            numbering.down_a_level()
            return "".join(items)

        if category is DocumentCategory.LIST_ITEM:
            if numbering is not None:
                marker = f"{numbering.prefix}. "
            else:
                marker = "* "
            parts = [self._format(child, numbering) for child in element.children]
            return marker + " ".join(part for part in parts if part) + "\n"

        if element.realisation is not None:
            return element.realisation
        if element.kind is ElementKind.STRING:
            return ""
        return self._format_all(element.children, numbering)

    def _format_all(self, children: List[Element], numbering: Optional[NumberedPrefix]) -> str:
        return "".join(self._format(child, numbering) for child in children)
