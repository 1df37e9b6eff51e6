"""Dice notation engine.

Provides tokenizing, parsing and rolling of dice notation.

Usage:
    >>> from rollkit.dice import roll, parse_dice
    >>> expr = parse_dice("4d6dl1")
    >>> result = roll("2d20kh1+5")
    >>> result.total == result.subtotal + result.modifier
    True
"""

# Types
from rollkit.dice.types import (
    DiceExpression,
    DiceGroup,
    DropSpec,
    KeepSpec,
    RollEntry,
    RollResult,
    SelectMode,
    Token,
    TokenType,
)

# Errors
from rollkit.dice.errors import DiceLexError, DiceParseError, DiceSyntaxError

# Tokenizer / Parser
from rollkit.dice.tokenizer import tokenize
from rollkit.dice.parser import is_valid_notation, parse_dice

# Randomness
from rollkit.dice.random_source import RandomSource, SeededRandomSource, SystemRandomSource

# Roller
from rollkit.dice.roller import MAX_EXPLOSIONS, roll, roll_dice

# Formatting
from rollkit.dice.formatting import format_entry, format_result, format_timestamp

__all__ = [
    # Types
    "DiceExpression",
    "DiceGroup",
    "DropSpec",
    "KeepSpec",
    "RollEntry",
    "RollResult",
    "SelectMode",
    "Token",
    "TokenType",
    # Errors
    "DiceParseError",
    "DiceLexError",
    "DiceSyntaxError",
    # Tokenizer / Parser
    "tokenize",
    "parse_dice",
    "is_valid_notation",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    # Roller
    "MAX_EXPLOSIONS",
    "roll",
    "roll_dice",
    # Formatting
    "format_entry",
    "format_result",
    "format_timestamp",
]
