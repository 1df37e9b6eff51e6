"""Core dice rolling engine.

Executes a parsed DiceExpression against a random source and returns a
RollResult recording every die, including which were kept, dropped,
exploded or rerolled.

Order of operations per dice group:
1. Generation - roll each die, reroll a matching face once, then chain
   explosion bonus dice while the maximum face comes up.
2. Selection - apply drop, then keep, each to the dice still kept.
"""

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from rollkit.dice.parser import parse_dice
from rollkit.dice.random_source import RandomSource, SystemRandomSource
from rollkit.dice.types import (
    DiceExpression,
    DiceGroup,
    DropSpec,
    KeepSpec,
    RollEntry,
    RollResult,
    SelectMode,
)

logger = logging.getLogger(__name__)


# Maximum explosion bonus rolls per dice group
MAX_EXPLOSIONS = 100


def roll_dice(
    expression: DiceExpression,
    input_text: str = "",
    *,
    rng: RandomSource | None = None,
    max_explosions: int = MAX_EXPLOSIONS,
) -> RollResult:
    """Roll dice according to the expression.

    The expression is trusted to be well formed; no notation checks are
    repeated here.

    Args:
        expression: The parsed expression to roll.
        input_text: Notation as typed by the user, copied onto the result.
        rng: Random source; defaults to a SystemRandomSource.
        max_explosions: Cap on explosion bonus rolls per dice group.

    Returns:
        RollResult with every die and the computed totals.

    Examples:
        >>> from rollkit.dice.types import DiceGroup
        >>> expr = DiceExpression(dice_groups=(DiceGroup(count=2, sides=6),), modifier=3)
        >>> result = roll_dice(expr)
        >>> len(result.rolls)
        2
    """
    if rng is None:
        rng = SystemRandomSource()

    rolls: list[RollEntry] = []
    for group in expression.dice_groups:
        entries = _generate(group, rng, max_explosions)
        if group.drop is not None:
            entries = _apply_drop(entries, group.drop)
        if group.keep is not None:
            entries = _apply_keep(entries, group.keep)
        rolls.extend(entries)

    subtotal = sum(entry.value for entry in rolls if entry.kept)
    total = subtotal + expression.modifier

    return RollResult(
        id=str(uuid.uuid4()),
        timestamp=datetime.now(timezone.utc),
        input=input_text,
        parsed=expression,
        rolls=tuple(rolls),
        subtotal=subtotal,
        modifier=expression.modifier,
        total=total,
    )


def roll(notation: str, *, rng: RandomSource | None = None) -> RollResult:
    """Parse dice notation and roll.

    Convenience function combining parse_dice and roll_dice.

    Args:
        notation: Dice notation string (e.g., "4d6dl1+2").
        rng: Random source; defaults to a SystemRandomSource.

    Returns:
        RollResult with individual dice and total.

    Raises:
        DiceParseError: If notation is invalid.

    Examples:
        >>> result = roll("1d20+5")
        >>> result.parsed.dice_groups[0].sides
        20
    """
    expression = parse_dice(notation)
    return roll_dice(expression, notation, rng=rng)


def _generate(group: DiceGroup, rng: RandomSource, max_explosions: int) -> list[RollEntry]:
    """Roll the dice of one group, handling reroll and explosions."""
    label = group.label
    entries: list[RollEntry] = []
    explosions = 0

    for _ in range(group.count):
        value = rng.next_int(1, group.sides)

        if group.reroll is not None and value == group.reroll:
            # Single reroll; the new value is final even if it matches again
            original = value
            value = rng.next_int(1, group.sides)
            entries.append(
                RollEntry(die_label=label, value=value, rerolled=True, original_value=original)
            )
        else:
            entries.append(RollEntry(die_label=label, value=value))

        if not group.exploding:
            continue

        while value == group.sides and explosions < max_explosions:
            value = rng.next_int(1, group.sides)
            explosions += 1
            entries.append(RollEntry(die_label=label, value=value, exploded=True))

    if group.exploding and explosions >= max_explosions > 0:
        logger.warning(f"Explosion cap of {max_explosions} reached for {group.notation}")

    return entries


def _ranked_kept(entries: list[RollEntry], mode: SelectMode) -> list[int]:
    """Indices of kept entries, best first for the mode.

    The sort is stable, so among equal values the earlier roll ranks first.
    """
    indices = [i for i, entry in enumerate(entries) if entry.kept]
    return sorted(
        indices,
        key=lambda i: entries[i].value,
        reverse=mode == SelectMode.HIGHEST,
    )


def _apply_drop(entries: list[RollEntry], drop: DropSpec) -> list[RollEntry]:
    """Mark the first drop.count ranked kept dice as dropped."""
    result = list(entries)
    for i in _ranked_kept(entries, drop.mode)[: drop.count]:
        result[i] = replace(result[i], kept=False, dropped=True)
    return result


def _apply_keep(entries: list[RollEntry], keep: KeepSpec) -> list[RollEntry]:
    """Keep only the top keep.count ranked kept dice.

    Excluded dice are un-kept but not marked dropped.
    """
    result = list(entries)
    for i in _ranked_kept(entries, keep.mode)[keep.count :]:
        result[i] = replace(result[i], kept=False)
    return result
