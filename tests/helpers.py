"""Shared fixtures: the arithmetic classifier and a call-recording factory"""
from core import SymbolTable

ARITHMETIC_OPERATORS = {
    "+": {"arity": 2, "precedence": 1},
    "-": {"arity": 2, "precedence": 1},
    "*": {"arity": 2, "precedence": 2},
    "/": {"arity": 2, "precedence": 2},
}


def arithmetic_table():
    return SymbolTable(ARITHMETIC_OPERATORS)


class RecordingFactory:
    """Builds nested tuples and records every make_operator call"""

    def __init__(self):
        self.calls = []

    def make_operand(self, word):
        return word

    def make_operator(self, word, operands):
        self.calls.append((word, list(operands)))
        return (word,) + tuple(operands)
