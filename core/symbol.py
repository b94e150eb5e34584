"""core/symbol.py"""
from enum import Enum

from config.config import SYMBOL_CONFIG


class SymbolType(Enum):
    OPERAND = "operand"
    OPERATOR = "operator"
    OPENING_PARENTHESIS = "opening_parenthesis"
    CLOSING_PARENTHESIS = "closing_parenthesis"


GROUPING_TYPES = (SymbolType.OPENING_PARENTHESIS, SymbolType.CLOSING_PARENTHESIS)


class Symbol:
    """Classification of a single word.

    ``arity`` and ``precedence`` are only read for operators; higher
    precedence binds tighter.
    """

    __slots__ = ('type', 'arity', 'precedence')

    def __init__(self, symbol_type, arity=0, precedence=0):
        if arity < 0:
            raise ValueError(f"arity must be non-negative, got {arity}")
        object.__setattr__(self, 'type', symbol_type)
        object.__setattr__(self, 'arity', arity)
        object.__setattr__(self, 'precedence', precedence)

    def __setattr__(self, name, value):
        raise AttributeError(f"Symbol is immutable, cannot set {name}")

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self.type, self.arity, self.precedence) == (other.type, other.arity, other.precedence)

    def __hash__(self):
        return hash((self.type, self.arity, self.precedence))

    def __repr__(self):
        return f"Symbol({self.type.name}, arity={self.arity}, precedence={self.precedence})"

    @property
    def is_operator(self):
        return self.type == SymbolType.OPERATOR

    @property
    def is_grouping(self):
        return self.type in GROUPING_TYPES


OPERAND = Symbol(SymbolType.OPERAND)
OPENING_PARENTHESIS = Symbol(SymbolType.OPENING_PARENTHESIS)
CLOSING_PARENTHESIS = Symbol(SymbolType.CLOSING_PARENTHESIS)


class SymbolTable:
    """Table-driven token classifier.

    Operators and the two grouping words are looked up by exact match;
    every other word is an operand.
    """

    def __init__(self, operators=None, opening='(', closing=')'):
        if opening == closing:
            raise ValueError(f"opening and closing words must differ, both are {opening!r}")
        self.opening = opening
        self.closing = closing
        self._definitions = {
            opening: OPENING_PARENTHESIS,
            closing: CLOSING_PARENTHESIS,
        }
        for word, definition in (operators or {}).items():
            self.add_operator(word, definition['arity'], definition['precedence'])

    @classmethod
    def from_config(cls, config=None):
        """Build the table described by a ``SYMBOL_CONFIG``-shaped dict."""
        config = SYMBOL_CONFIG if config is None else config
        return cls(
            operators=config['operators'],
            opening=config['opening_parenthesis'],
            closing=config['closing_parenthesis'],
        )

    def add_operator(self, word, arity, precedence):
        if word in (self.opening, self.closing):
            raise ValueError(f"{word!r} is already a grouping word")
        # grouping words sit on the operator stack with precedence 0
        if precedence < 1:
            raise ValueError(f"{word!r} must have precedence >= 1, got {precedence}")
        self._definitions[word] = Symbol(SymbolType.OPERATOR, arity, precedence)

    def classify(self, word):
        return self._definitions.get(word, OPERAND)

    def __contains__(self, word):
        return word in self._definitions

    def __len__(self):
        return len(self._definitions)

    @property
    def operators(self):
        return {word: symbol for word, symbol in self._definitions.items() if symbol.is_operator}


class PostfixValidator:
    """Static checks over a postfix word sequence, without building a tree."""

    @staticmethod
    def calculate_stack_size(postfix, classifier):
        """Net operand-stack depth after the whole sequence.

        Grouping words are ignored. Malformed input can give a negative
        depth.
        """
        stack_size = 0
        for word in postfix:
            symbol = classifier.classify(word)
            if symbol.type == SymbolType.OPERAND:
                stack_size += 1
            elif symbol.type == SymbolType.OPERATOR:
                stack_size = stack_size - symbol.arity + 1
        return stack_size

    @staticmethod
    def is_valid_partial_expression(postfix, classifier):
        """True when no prefix of ``postfix`` would underflow the operand stack."""
        stack_size = 0
        for word in postfix:
            symbol = classifier.classify(word)
            if symbol.is_grouping:
                return False
            if symbol.type == SymbolType.OPERAND:
                stack_size += 1
            else:
                if stack_size < symbol.arity:
                    return False
                stack_size = stack_size - symbol.arity + 1
        return True

    @staticmethod
    def can_terminate(postfix, classifier):
        """True when reducing ``postfix`` would yield exactly one tree."""
        if not PostfixValidator.is_valid_partial_expression(postfix, classifier):
            return False
        return PostfixValidator.calculate_stack_size(postfix, classifier) == 1
