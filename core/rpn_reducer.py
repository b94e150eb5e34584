"""RPN reducer - builds one tree from a postfix sequence via the caller's NodeFactory"""
import logging

from core.exceptions import (
    MalformedExpressionError, MissingOperandError, UnexpectedGroupingTokenError
)
from core.symbol import SymbolType

logger = logging.getLogger(__name__)


class RPNReducer:
    """Reduces a postfix word sequence into a single tree value"""

    @staticmethod
    def reduce(postfix, classifier, factory):
        """
        Args:
            postfix: word sequence in postfix order
            classifier: TokenClassifier used to re-classify each word
            factory: NodeFactory producing the tree values
        Returns:
            the single tree value left on the operand stack
        """
        stack = []

        for word in postfix:
            symbol = classifier.classify(word)

            if symbol.type == SymbolType.OPERAND:
                stack.append(factory.make_operand(word))

            elif symbol.type == SymbolType.OPERATOR:
                if len(stack) < symbol.arity:
                    raise MissingOperandError(word, symbol.arity, len(stack))
                # popping yields last operand first; restore source order
                operands = [stack.pop() for _ in range(symbol.arity)][::-1]
                stack.append(factory.make_operator(word, operands))

            else:
                raise UnexpectedGroupingTokenError(word)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after reduction, expected 1")
            raise MalformedExpressionError(len(stack))
        return stack.pop()
