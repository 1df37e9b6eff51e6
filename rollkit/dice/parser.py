"""Dice notation parser.

Recursive-descent parser for notation like 1d20, 2d6+3, 4d6dl1, 2d20kh1+5,
1d6!, 2d6r1 and d%.

Grammar:
    expression := term (('+' | '-') term)*
    term       := dice | NUMBER
    dice       := [NUMBER] 'd' (NUMBER | '%') modifier*
    modifier   := ('kh' | 'kl') [NUMBER]
                | ('dh' | 'dl') [NUMBER]
                | '!'
                | 'r' NUMBER

Every parse function takes the token tuple and a cursor index and returns
its result together with the index of the next unconsumed token.
"""

import logging
from dataclasses import replace

from rollkit.dice.errors import DiceParseError, DiceSyntaxError
from rollkit.dice.tokenizer import tokenize
from rollkit.dice.types import (
    DiceExpression,
    DiceGroup,
    DropSpec,
    KeepSpec,
    SelectMode,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)


# d% is shorthand for a hundred-sided die
PERCENTILE_SIDES = 100

KEEP_MODES = {
    TokenType.KEEP_HIGH: SelectMode.HIGHEST,
    TokenType.KEEP_LOW: SelectMode.LOWEST,
}

DROP_MODES = {
    TokenType.DROP_HIGH: SelectMode.HIGHEST,
    TokenType.DROP_LOW: SelectMode.LOWEST,
}


def parse_dice(notation: str) -> DiceExpression:
    """Parse dice notation into a DiceExpression.

    Args:
        notation: Dice notation string (e.g., "2d6+3", "4d6dl1", "d%").

    Returns:
        DiceExpression with dice groups in source order and the net modifier.

    Raises:
        DiceLexError: If the notation contains an unknown character.
        DiceSyntaxError: If the tokens do not form a valid expression.

    Examples:
        >>> parse_dice("2d6+3").modifier
        3
        >>> parse_dice("d%").dice_groups[0].sides
        100
    """
    if not notation or not notation.strip():
        raise DiceSyntaxError("Dice notation cannot be empty")

    tokens = tokenize(notation)
    expression, pos = _parse_expression(tokens, 0)

    if tokens[pos].type != TokenType.END:
        raise DiceSyntaxError(
            f"Unexpected trailing token {_describe(tokens[pos])} at position {tokens[pos].position}",
            tokens[pos].position,
        )

    logger.debug(
        f"Parsed {notation!r}: {len(expression.dice_groups)} dice group(s), "
        f"modifier {expression.modifier}"
    )
    return expression


def is_valid_notation(notation: str) -> bool:
    """Check whether notation parses without error.

    Args:
        notation: Dice notation string.

    Returns:
        True if parse_dice accepts the notation.
    """
    try:
        parse_dice(notation)
    except DiceParseError:
        return False
    return True


def _describe(token: Token) -> str:
    if token.type == TokenType.END:
        return "end of input"
    return f"'{token.value}'"


def _parse_expression(tokens: tuple[Token, ...], pos: int) -> tuple[DiceExpression, int]:
    """expression := term (('+' | '-') term)*"""
    groups: list[DiceGroup] = []
    modifier = 0
    sign = 1

    while True:
        term, pos = _parse_term(tokens, pos)
        if isinstance(term, DiceGroup):
            groups.append(term)
        else:
            modifier += sign * term

        if tokens[pos].type == TokenType.PLUS:
            sign = 1
        elif tokens[pos].type == TokenType.MINUS:
            sign = -1
        else:
            break
        pos += 1

    return DiceExpression(dice_groups=tuple(groups), modifier=modifier), pos


def _parse_term(tokens: tuple[Token, ...], pos: int) -> tuple[DiceGroup | int, int]:
    """term := dice | NUMBER"""
    token = tokens[pos]

    if token.type == TokenType.D:
        return _parse_dice_group(tokens, pos, 1)

    if token.type == TokenType.NUMBER:
        if tokens[pos + 1].type == TokenType.D:
            return _parse_dice_group(tokens, pos + 1, token.value)
        return token.value, pos + 1

    raise DiceSyntaxError(
        f"Unexpected token {_describe(token)} at position {token.position}, "
        "expected a number or 'd'",
        token.position,
    )


def _parse_dice_group(
    tokens: tuple[Token, ...], pos: int, count: int
) -> tuple[DiceGroup, int]:
    """dice := [NUMBER] 'd' (NUMBER | '%') modifier*

    The cursor points at the 'd' token; any count has already been consumed.
    """
    d_token = tokens[pos]
    pos += 1

    sides_token = tokens[pos]
    if sides_token.type == TokenType.PERCENT:
        sides = PERCENTILE_SIDES
    elif sides_token.type == TokenType.NUMBER:
        sides = sides_token.value
    else:
        raise DiceSyntaxError(
            f"Expected number or '%' after 'd' at position {sides_token.position}",
            sides_token.position,
        )
    pos += 1

    try:
        group = DiceGroup(count=count, sides=sides)
    except ValueError as e:
        raise DiceSyntaxError(str(e), d_token.position) from e

    return _parse_modifiers(tokens, pos, group)


def _parse_modifiers(
    tokens: tuple[Token, ...], pos: int, group: DiceGroup
) -> tuple[DiceGroup, int]:
    """modifier* -- a later modifier of the same kind replaces an earlier one."""
    while True:
        token = tokens[pos]

        if token.type in KEEP_MODES or token.type in DROP_MODES:
            count, pos = _parse_optional_count(tokens, pos + 1)
            try:
                if token.type in KEEP_MODES:
                    group = replace(group, keep=KeepSpec(KEEP_MODES[token.type], count))
                else:
                    group = replace(group, drop=DropSpec(DROP_MODES[token.type], count))
            except ValueError as e:
                raise DiceSyntaxError(str(e), token.position) from e
        elif token.type == TokenType.EXPLODE:
            group = replace(group, exploding=True)
            pos += 1
        elif token.type == TokenType.REROLL:
            target = tokens[pos + 1]
            if target.type != TokenType.NUMBER:
                raise DiceSyntaxError(
                    f"Expected number after reroll operator at position {target.position}",
                    target.position,
                )
            group = replace(group, reroll=target.value)
            pos += 2
        else:
            return group, pos


def _parse_optional_count(tokens: tuple[Token, ...], pos: int) -> tuple[int, int]:
    """Count following kh/kl/dh/dl, defaulting to 1."""
    if tokens[pos].type == TokenType.NUMBER:
        return tokens[pos].value, pos + 1
    return 1, pos
