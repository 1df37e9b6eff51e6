"""Dice engine type definitions.

Immutable dataclasses for tokens, parsed expressions and roll results.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class TokenType(str, Enum):
    """Kind of a notation token."""

    NUMBER = "NUMBER"
    D = "D"
    PLUS = "PLUS"
    MINUS = "MINUS"
    KEEP_HIGH = "KEEP_HIGH"
    KEEP_LOW = "KEEP_LOW"
    DROP_HIGH = "DROP_HIGH"
    DROP_LOW = "DROP_LOW"
    EXPLODE = "EXPLODE"
    REROLL = "REROLL"
    PERCENT = "PERCENT"
    END = "END"


class SelectMode(str, Enum):
    """Which end of the sorted dice a keep/drop modifier selects."""

    HIGHEST = "highest"
    LOWEST = "lowest"


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        type: Kind of token.
        value: Integer for NUMBER, the lexeme for keywords, None for END.
        position: Zero-based offset in the normalized input.
    """

    type: TokenType
    value: int | str | None = None
    position: int = 0


@dataclass(frozen=True)
class KeepSpec:
    """Keep the N highest or lowest dice of a group."""

    mode: SelectMode
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Keep count must be at least 1, got {self.count}")

    @property
    def notation(self) -> str:
        prefix = "kh" if self.mode == SelectMode.HIGHEST else "kl"
        return f"{prefix}{self.count}"


@dataclass(frozen=True)
class DropSpec:
    """Drop the N highest or lowest dice of a group."""

    mode: SelectMode
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Drop count must be at least 1, got {self.count}")

    @property
    def notation(self) -> str:
        prefix = "dh" if self.mode == SelectMode.HIGHEST else "dl"
        return f"{prefix}{self.count}"


@dataclass(frozen=True)
class DiceGroup:
    """One NdX clause together with its modifiers.

    Attributes:
        count: Number of dice to roll.
        sides: Faces per die (100 for d%).
        keep: Keep highest/lowest modifier, if any.
        drop: Drop highest/lowest modifier, if any.
        exploding: Whether a maximum face triggers bonus rolls.
        reroll: Face value that is rerolled once, if any.
    """

    count: int
    sides: int
    keep: KeepSpec | None = None
    drop: DropSpec | None = None
    exploding: bool = False
    reroll: int | None = None

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Number of dice must be at least 1, got {self.count}")
        if self.sides < 1:
            raise ValueError(f"Die size must be at least 1, got {self.sides}")

    @property
    def label(self) -> str:
        """Die label used on roll entries, e.g. 'd6'."""
        return f"d{self.sides}"

    @property
    def notation(self) -> str:
        """Canonical notation for this group, e.g. '4d6dl1'."""
        parts = [f"{self.count}d{self.sides}"]
        if self.keep is not None:
            parts.append(self.keep.notation)
        if self.drop is not None:
            parts.append(self.drop.notation)
        if self.exploding:
            parts.append("!")
        if self.reroll is not None:
            parts.append(f"r{self.reroll}")
        return "".join(parts)


@dataclass(frozen=True)
class DiceExpression:
    """A parsed notation: dice groups in source order plus a flat modifier.

    Attributes:
        dice_groups: Groups in the order they appear in the notation.
        modifier: Signed sum of all bare-number terms.
    """

    dice_groups: tuple[DiceGroup, ...] = ()
    modifier: int = 0

    @property
    def notation(self) -> str:
        """Canonical notation, e.g. '2d20kh1+5'."""
        text = "+".join(group.notation for group in self.dice_groups)
        if self.modifier > 0:
            text = f"{text}+{self.modifier}" if text else str(self.modifier)
        elif self.modifier < 0:
            text = f"{text}{self.modifier}"
        return text or "0"

    def __str__(self) -> str:
        return self.notation


@dataclass(frozen=True)
class RollEntry:
    """Outcome of a single die.

    Attributes:
        die_label: Label of the die, e.g. 'd6'.
        value: Final face value.
        kept: Whether the value counts toward the subtotal.
        dropped: Excluded by an explicit drop modifier (never by keep).
        exploded: Bonus die generated by an exploding maximum.
        rerolled: The first value matched the reroll target.
        original_value: Value before the reroll, when rerolled.
    """

    die_label: str
    value: int
    kept: bool = True
    dropped: bool = False
    exploded: bool = False
    rerolled: bool = False
    original_value: int | None = None

    def __post_init__(self) -> None:
        if self.dropped and self.kept:
            raise ValueError("A dropped die cannot be kept")
        if self.rerolled and self.original_value is None:
            raise ValueError("A rerolled die must record its original value")

    def to_dict(self) -> dict[str, Any]:
        return {
            "die": self.die_label,
            "value": self.value,
            "kept": self.kept,
            "dropped": self.dropped,
            "exploded": self.exploded,
            "rerolled": self.rerolled,
            "original_value": self.original_value,
        }


@dataclass(frozen=True)
class RollResult:
    """Result of executing a dice expression.

    Attributes:
        id: Unique identifier of this roll.
        timestamp: When the roll was made (UTC).
        input: Notation text as supplied by the caller.
        parsed: The expression that was rolled.
        rolls: Every die, in group order then generation order.
        subtotal: Sum of kept dice.
        modifier: Flat modifier from the expression.
        total: Subtotal plus modifier.
    """

    id: str
    timestamp: datetime
    input: str
    parsed: DiceExpression
    rolls: tuple[RollEntry, ...]
    subtotal: int
    modifier: int
    total: int

    @property
    def kept_rolls(self) -> tuple[RollEntry, ...]:
        """Entries that count toward the subtotal."""
        return tuple(entry for entry in self.rolls if entry.kept)

    @property
    def dropped_rolls(self) -> tuple[RollEntry, ...]:
        """Entries removed by an explicit drop modifier."""
        return tuple(entry for entry in self.rolls if entry.dropped)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready mapping of this result."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "input": self.input,
            "notation": self.parsed.notation,
            "rolls": [entry.to_dict() for entry in self.rolls],
            "subtotal": self.subtotal,
            "modifier": self.modifier,
            "total": self.total,
        }
