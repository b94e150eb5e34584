"""Core module - symbols, infix reorderer and RPN reducer"""
from .symbol import (
    SymbolType, Symbol, SymbolTable, PostfixValidator,
    OPERAND, OPENING_PARENTHESIS, CLOSING_PARENTHESIS
)
from .capabilities import TokenClassifier, NodeFactory
from .exceptions import (
    FormulaError, UnbalancedParenthesisError, UnexpectedGroupingTokenError,
    MissingOperandError, MalformedExpressionError
)
from .reorderer import InfixReorderer
from .rpn_reducer import RPNReducer

__all__ = [
    'SymbolType', 'Symbol', 'SymbolTable', 'PostfixValidator',
    'OPERAND', 'OPENING_PARENTHESIS', 'CLOSING_PARENTHESIS',
    'TokenClassifier', 'NodeFactory',
    'FormulaError', 'UnbalancedParenthesisError', 'UnexpectedGroupingTokenError',
    'MissingOperandError', 'MalformedExpressionError',
    'InfixReorderer', 'RPNReducer'
]
