"""Infix -> postfix (RPN) reordering, a shunting-yard variant"""
import logging

from core.exceptions import UnbalancedParenthesisError
from core.symbol import SymbolType

logger = logging.getLogger(__name__)


class InfixReorderer:
    """Reorders infix words into postfix order"""

    @staticmethod
    def to_postfix(words, classifier):
        """
        Args:
            words: infix word sequence, already split by the caller
            classifier: TokenClassifier consulted for every word
        Returns:
            list of the same words in postfix order, grouping words removed
        Raises:
            UnbalancedParenthesisError: a closing word has no opening word
                below it on the operator stack, or an opening word is never closed
        """
        output = []
        operator_stack = []

        for word in words:
            symbol = classifier.classify(word)

            if symbol.type == SymbolType.OPERAND:
                output.append(word)

            elif symbol.type == SymbolType.OPERATOR:
                # equal precedence flushes first: left-associative
                while operator_stack and \
                        classifier.classify(operator_stack[-1]).precedence >= symbol.precedence:
                    output.append(operator_stack.pop())
                operator_stack.append(word)

            elif symbol.type == SymbolType.OPENING_PARENTHESIS:
                operator_stack.append(word)

            elif symbol.type == SymbolType.CLOSING_PARENTHESIS:
                while True:
                    if not operator_stack:
                        raise UnbalancedParenthesisError(
                            f"there is an uneven amount of parentheses: "
                            f"{word!r} has no matching opening word"
                        )
                    popped = operator_stack.pop()
                    if classifier.classify(popped).type == SymbolType.OPENING_PARENTHESIS:
                        break
                    output.append(popped)

        while operator_stack:
            popped = operator_stack.pop()
            if classifier.classify(popped).type == SymbolType.OPENING_PARENTHESIS:
                raise UnbalancedParenthesisError(
                    f"there is an uneven amount of parentheses: "
                    f"{popped!r} is never closed"
                )
            output.append(popped)

        logger.debug(f"Reordered {len(output)} words into postfix: {' '.join(output)}")
        return output
