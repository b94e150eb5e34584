import unittest

from core import (
    FormulaError, MalformedExpressionError, MissingOperandError, RPNReducer,
    SymbolTable, UnbalancedParenthesisError, UnexpectedGroupingTokenError
)
from tests.helpers import RecordingFactory, arithmetic_table


class RPNReducerTest(unittest.TestCase):

    def setUp(self):
        self.table = arithmetic_table()
        self.factory = RecordingFactory()

    def reduce(self, postfix):
        return RPNReducer.reduce(postfix.split(), self.table, self.factory)

    def test_single_operand(self):
        self.assertEqual(self.reduce("7"), "7")

    def test_operands_in_source_order(self):
        self.assertEqual(self.reduce("9 4 -"), ("-", "9", "4"))
        self.assertEqual(self.factory.calls, [("-", ["9", "4"])])

    def test_nested(self):
        self.assertEqual(self.reduce("3 7 * 6 4 - +"),
                         ("+", ("*", "3", "7"), ("-", "6", "4")))

    def test_ternary_children_order(self):
        table = SymbolTable({"if": {"arity": 3, "precedence": 3}})
        tree = RPNReducer.reduce("c t e if".split(), table, self.factory)
        self.assertEqual(tree, ("if", "c", "t", "e"))
        self.assertEqual(self.factory.calls, [("if", ["c", "t", "e"])])

    def test_nullary_operator(self):
        table = SymbolTable({"pi": {"arity": 0, "precedence": 1}})
        self.assertEqual(RPNReducer.reduce(["pi"], table, self.factory), ("pi",))

    def test_missing_operand(self):
        with self.assertRaises(MissingOperandError) as ctx:
            self.reduce("+")
        self.assertEqual(ctx.exception.word, "+")
        self.assertEqual(ctx.exception.arity, 2)
        self.assertEqual(ctx.exception.available, 0)
        self.assertIn("+", str(ctx.exception))

    def test_missing_operand_after_partial_reduction(self):
        with self.assertRaises(MissingOperandError) as ctx:
            self.reduce("1 2 + *")
        self.assertEqual(ctx.exception.word, "*")
        self.assertEqual(ctx.exception.available, 1)

    def test_grouping_token(self):
        with self.assertRaises(UnexpectedGroupingTokenError) as ctx:
            self.reduce("1 2 + (")
        self.assertEqual(ctx.exception.word, "(")
        with self.assertRaises(UnbalancedParenthesisError):
            self.reduce(")")

    def test_too_many_operands(self):
        with self.assertRaises(MalformedExpressionError) as ctx:
            self.reduce("1 2")
        self.assertEqual(ctx.exception.stack_size, 2)

    def test_empty_sequence(self):
        with self.assertRaises(MalformedExpressionError) as ctx:
            RPNReducer.reduce([], self.table, self.factory)
        self.assertEqual(ctx.exception.stack_size, 0)

    def test_errors_share_a_base(self):
        for postfix in ("+", "1 (", "1 2"):
            with self.assertRaises(FormulaError):
                self.reduce(postfix)

    def test_factory_errors_propagate_unchanged(self):
        class FailingFactory(RecordingFactory):
            def make_operator(self, word, operands):
                raise KeyError(word)

        with self.assertRaises(KeyError):
            RPNReducer.reduce("1 2 +".split(), self.table, FailingFactory())


if __name__ == "__main__":
    unittest.main()
