"""
Realiser - syntax, morphology, orthography and formatting in sequence.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import structlog

from polish_realizer.framework.elements import DocumentElement, Element, ElementKind
from polish_realizer.framework.features import DocumentCategory
from polish_realizer.lexicon.lexicon import Lexicon
from polish_realizer.morphology.processor import MorphologyProcessor
from polish_realizer.orthography.processor import OrthographyConfig, OrthographyProcessor
from polish_realizer.realiser.formatter import TextFormatter

logger = structlog.get_logger(__name__)

SyntaxStage = Callable[[Element], Element]


@dataclass
class RealiserConfig:
    """Configuration for the realisation pipeline."""
    debug: bool = False
    use_formatter: bool = True
    orthography: OrthographyConfig = field(default_factory=OrthographyConfig)


def _identity(element: Element) -> Element:
    return element


class Realiser:
    """
    Realise element trees into Polish text.

    The syntax stage is pluggable; by default the input tree is assumed to
    already be the ordered list of inflectable words it would produce.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        syntax: Optional[SyntaxStage] = None,
        formatter: Optional[TextFormatter] = None,
        config: Optional[RealiserConfig] = None,
    ):
        """
        Initialize the realiser.

        Args:
            lexicon: Lexicon consulted for words without an attached entry
            syntax: Callable applied to the tree before morphology
            formatter: Formatter for the final text; a ``TextFormatter`` when
                omitted and ``config.use_formatter`` is set
            config: Pipeline configuration
        """
        self.config = config or RealiserConfig()
        self.syntax = syntax or _identity
        self.morphology = MorphologyProcessor(lexicon)
        self.orthography = OrthographyProcessor(self.config.orthography)
        if formatter is None and self.config.use_formatter:
            formatter = TextFormatter()
        self.formatter = formatter

    @property
    def lexicon(self) -> Optional[Lexicon]:
        return self.morphology.lexicon

    def set_lexicon(self, lexicon: Optional[Lexicon]) -> None:
        self.morphology.lexicon = lexicon

    def set_formatter(self, formatter: Optional[TextFormatter]) -> None:
        self.formatter = formatter

    def set_debug_mode(self, debug: bool) -> None:
        """Log the tree after every stage (at debug level)."""
        self.config.debug = debug

    def realise(self, element: Optional[Element]) -> Optional[Element]:
        """
        Run the whole pipeline on a tree.

        Args:
            element: Root of the tree

        Returns:
            The realised root. With a formatter, its realisation holds the
            formatted text.
        """
        if element is None:
            return None

        self._trace("initial", element)
        post_syntax = self.syntax(element)
        self._trace("syntax", post_syntax)
        post_morphology = self.morphology.realise(post_syntax)
        self._trace("morphology", post_morphology)
        post_orthography = self.orthography.realise(post_morphology)
        self._trace("orthography", post_orthography)

        if self.formatter is None:
            return post_orthography

        text = self.formatter.format(post_orthography)
        if post_orthography.kind is ElementKind.STRING:
            realised = post_orthography.with_text(text)
        else:
            post_orthography.realisation = text
            realised = post_orthography
        self._trace("formatter", realised)
        return realised

    def realise_list(self, elements: List[Element]) -> List[Optional[Element]]:
        return [self.realise(element) for element in elements]

    def realise_sentence(self, element: Element) -> Optional[str]:
        """
        Realise an element as a sentence and return its text. Anything that
        is not a document node is wrapped in a sentence first.
        """
        if element.kind is not ElementKind.DOCUMENT:
            element = DocumentElement(DocumentCategory.SENTENCE, components=[element])
        realised = self.realise(element)
        if realised is None:
            return None
        return realised.realisation

    def _trace(self, stage: str, element: Optional[Element]) -> None:
        if self.config.debug and element is not None:
            logger.debug("realiser_stage", stage=stage, tree=element.print_tree())
