"""Entry point - parse an infix formula into a tree and print it"""
import argparse
import logging
import sys

from config.config import CLI_CONFIG, SYMBOL_CONFIG, validate_config
from core import FormulaError, SymbolTable
from formula import CompositeFactory, FormulaTreeFactory

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Parse a whitespace-separated infix formula into a tree"
    )
    parser.add_argument("expression", type=str,
                        help="Formula words separated by whitespace, e.g. '3 * ( 1 + 2 )'")
    parser.add_argument("--sep", type=str, default=CLI_CONFIG["separator"],
                        help="Word separator (default: any whitespace)")
    parser.add_argument("--postfix", action="store_true",
                        help="Print the postfix (RPN) sequence instead of the tree")
    parser.add_argument("--log-level", type=str, default=CLI_CONFIG["log_level"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=CLI_CONFIG["log_format"]
    )
    validate_config(SYMBOL_CONFIG)

    tree_factory = FormulaTreeFactory(SymbolTable.from_config(SYMBOL_CONFIG), CompositeFactory())
    words = args.expression.split(args.sep)
    logger.debug(f"Parsing {len(words)} words")

    try:
        if args.postfix:
            print(" ".join(tree_factory.to_postfix(words)))
        else:
            print(tree_factory.parse(words))
    except FormulaError as e:
        logger.debug(f"Failed words: {words}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
