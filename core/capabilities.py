"""core/capabilities.py - caller-supplied capabilities"""
from typing import Protocol, Sequence, TypeVar

from core.symbol import Symbol

T = TypeVar('T')


class TokenClassifier(Protocol):
    """Maps a word to its Symbol. Must be pure, total and deterministic."""

    def classify(self, word: str) -> Symbol:
        ...


class NodeFactory(Protocol[T]):
    """Builds tree values from operand words and reduced operator applications."""

    def make_operand(self, word: str) -> T:
        ...

    def make_operator(self, word: str, operands: Sequence[T]) -> T:
        ...
