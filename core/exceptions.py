"""core/exceptions.py"""


class FormulaError(ValueError):
    """Base class for every failure raised while building a formula tree."""


class UnbalancedParenthesisError(FormulaError):
    """A closing word has no opening word left to match it."""


class UnexpectedGroupingTokenError(UnbalancedParenthesisError):
    """A grouping word survived reordering and reached the reducer.

    Happens when the classifier answers differently for the same word
    across calls.
    """

    def __init__(self, word):
        self.word = word
        super().__init__(
            f"unexpected grouping token {word!r}: a postfix sequence "
            f"should not contain any parentheses"
        )


class MissingOperandError(FormulaError):

    def __init__(self, word, arity, available):
        self.word = word
        self.arity = arity
        self.available = available
        super().__init__(
            f"missing operand for operator: {word} "
            f"(needs {arity}, {available} available)"
        )


class MalformedExpressionError(FormulaError):
    """Reduction did not leave exactly one tree on the stack."""

    def __init__(self, stack_size):
        self.stack_size = stack_size
        if stack_size == 0:
            message = "empty expression: nothing left to build a tree from"
        else:
            message = f"too many operands for operators: {stack_size} trees left after reduction"
        super().__init__(message)
