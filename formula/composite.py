"""String-rendering formula trees and the NodeFactory that builds them"""


class Composite:
    """Base of the immutable rendering tree"""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        raise NotImplementedError


class AtomicComposite(Composite):
    """Leaf holding an operand word"""

    __slots__ = ('word',)

    def __init__(self, word):
        object.__setattr__(self, 'word', word)

    def _key(self):
        return (self.word,)

    def __str__(self):
        return self.word

    def __repr__(self):
        return f"AtomicComposite({self.word!r})"


class CompositeComposite(Composite):
    """Operator node: binary operators render infix ``(LopR)``, others ``op(a,b,...)``"""

    __slots__ = ('word', 'children')

    def __init__(self, word, children):
        object.__setattr__(self, 'word', word)
        object.__setattr__(self, 'children', tuple(children))

    def _key(self):
        return (self.word, self.children)

    def __str__(self):
        if len(self.children) == 2:
            left, right = self.children
            return f"({left}{self.word}{right})"
        return f"{self.word}({','.join(str(child) for child in self.children)})"

    def __repr__(self):
        return f"CompositeComposite({self.word!r}, {list(self.children)!r})"


class CompositeFactory:
    """NodeFactory producing Composite trees"""

    def make_operand(self, word):
        return AtomicComposite(word)

    def make_operator(self, word, operands):
        return CompositeComposite(word, operands)
