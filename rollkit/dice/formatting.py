"""Plain-text summaries of roll results.

Used by the CLI and by anything that keeps a text history of rolls.
"""

from datetime import datetime

from rollkit.dice.types import RollEntry, RollResult


def format_entry(entry: RollEntry) -> str:
    """Format a single die.

    Dice not counted in the subtotal are prefixed with '~', explosion bonus
    dice are suffixed with '!', rerolled dice show the original face.

    Examples:
        >>> format_entry(RollEntry(die_label="d6", value=1, kept=False, dropped=True))
        '~1'
        >>> format_entry(RollEntry(die_label="d6", value=4, rerolled=True, original_value=1))
        '4(r1)'
    """
    text = str(entry.value)
    if entry.rerolled:
        text += f"(r{entry.original_value})"
    if entry.exploded:
        text += "!"
    if not entry.kept:
        text = "~" + text
    return text


def format_modifier(modifier: int) -> str:
    """Format a flat modifier as ' + 3' / ' - 2', or '' for zero."""
    if modifier > 0:
        return f" + {modifier}"
    if modifier < 0:
        return f" - {abs(modifier)}"
    return ""


def format_result(result: RollResult) -> str:
    """One-line summary of a roll.

    Examples:
        '4d6dl1+2: [6, 4, 3, ~1] + 2 = 15'
    """
    notation = result.input or result.parsed.notation
    dice = ", ".join(format_entry(entry) for entry in result.rolls)
    return f"{notation}: [{dice}]{format_modifier(result.modifier)} = {result.total}"


def format_timestamp(timestamp: datetime) -> str:
    """Local clock time of a roll, e.g. '14:30:45'."""
    return timestamp.astimezone().strftime("%H:%M:%S")
