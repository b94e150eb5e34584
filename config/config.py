"""Default symbol table and command line settings"""
import logging

logger = logging.getLogger(__name__)

# Default arithmetic symbol table
SYMBOL_CONFIG = {
    "opening_parenthesis": "(",
    "closing_parenthesis": ")",
    "operators": {
        "+": {"arity": 2, "precedence": 1},
        "-": {"arity": 2, "precedence": 1},
        "*": {"arity": 2, "precedence": 2},
        "/": {"arity": 2, "precedence": 2},
        "%": {"arity": 2, "precedence": 2},
        "if": {"arity": 3, "precedence": 3},  # cond then else, operands written first
    },
}

# Command line defaults
CLI_CONFIG = {
    "log_level": "WARNING",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "separator": None,  # None: split on any whitespace
}


def validate_config(config=None):
    """Sanity-check a SYMBOL_CONFIG-shaped dict"""
    config = SYMBOL_CONFIG if config is None else config
    opening = config["opening_parenthesis"]
    closing = config["closing_parenthesis"]
    assert opening != closing, "opening and closing parenthesis must differ"
    for word, definition in config["operators"].items():
        assert word not in (opening, closing), f"{word!r} is both a grouping word and an operator"
        assert definition["arity"] >= 0, f"{word!r} has negative arity"
        # grouping words sit on the operator stack with precedence 0
        assert definition["precedence"] >= 1, f"{word!r} must have precedence >= 1"
    logger.info("Configuration validated successfully!")
