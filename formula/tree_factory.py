import logging
from typing import Generic, List, Optional, Sequence, TypeVar

from core import InfixReorderer, RPNReducer, SymbolTable, TokenClassifier, NodeFactory

logger = logging.getLogger(__name__)

T = TypeVar('T')


class FormulaTreeFactory(Generic[T]):
    """Parses infix word sequences into trees built by a caller-supplied NodeFactory.

    Both capabilities are injected here and shared by every ``parse`` call;
    nothing else is kept between calls.
    """

    def __init__(self, classifier: TokenClassifier, factory: NodeFactory[T]):
        self.classifier = classifier
        self.factory = factory

    @classmethod
    def with_default_symbols(cls, factory: NodeFactory[T]) -> 'FormulaTreeFactory[T]':
        return cls(SymbolTable.from_config(), factory)

    def to_postfix(self, words: Sequence[str]) -> List[str]:
        return InfixReorderer.to_postfix(words, self.classifier)

    def parse(self, words: Sequence[str]) -> T:
        """
        Args:
            words: infix word sequence
        Returns:
            the tree the NodeFactory built for the whole expression
        Raises:
            FormulaError: the words do not form a well-formed expression.
                Errors raised by the classifier or factory propagate unchanged.
        """
        postfix = self.to_postfix(words)
        logger.debug(f"Parsing {len(words)} words, postfix length {len(postfix)}")
        return RPNReducer.reduce(postfix, self.classifier, self.factory)

    def parse_string(self, text: str, sep: Optional[str] = None) -> T:
        """Split ``text`` with ``str.split`` and parse the resulting words"""
        return self.parse(text.split(sep))
