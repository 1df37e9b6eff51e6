"""Dice notation tokenizer.

Turns notation like 4d6dl1+2 into a flat tuple of tokens ending in END.
"""

import logging
import string

from rollkit.dice.errors import DiceLexError
from rollkit.dice.types import Token, TokenType

logger = logging.getLogger(__name__)


# Longer keywords are matched before single characters
TWO_CHAR_TOKENS = {
    "kh": TokenType.KEEP_HIGH,
    "kl": TokenType.KEEP_LOW,
    "dh": TokenType.DROP_HIGH,
    "dl": TokenType.DROP_LOW,
}

SINGLE_CHAR_TOKENS = {
    "d": TokenType.D,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.EXPLODE,
    "r": TokenType.REROLL,
    "%": TokenType.PERCENT,
}


def normalize(notation: str) -> str:
    """Lower-case the notation and remove all whitespace."""
    return "".join(notation.lower().split())


def tokenize(notation: str) -> tuple[Token, ...]:
    """Split dice notation into tokens.

    Args:
        notation: Raw notation string (case and whitespace insensitive).

    Returns:
        Tuple of tokens, always terminated by an END token.

    Raises:
        DiceLexError: If a character is not part of the notation alphabet.

    Examples:
        >>> [t.type.value for t in tokenize("2d20kh")]
        ['NUMBER', 'D', 'NUMBER', 'KEEP_HIGH', 'END']
    """
    text = normalize(notation)
    tokens: list[Token] = []
    pos = 0

    while pos < len(text):
        char = text[pos]

        if char in string.digits:
            start = pos
            while pos < len(text) and text[pos] in string.digits:
                pos += 1
            tokens.append(Token(TokenType.NUMBER, int(text[start:pos]), start))
            continue

        pair = text[pos : pos + 2]
        if pair in TWO_CHAR_TOKENS:
            tokens.append(Token(TWO_CHAR_TOKENS[pair], pair, pos))
            pos += 2
            continue

        if char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[char], char, pos))
            pos += 1
            continue

        raise DiceLexError(char, pos)

    tokens.append(Token(TokenType.END, None, len(text)))
    logger.debug(f"Tokenized {notation!r} into {len(tokens)} tokens")
    return tuple(tokens)
