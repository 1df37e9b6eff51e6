"""Tests for roll result formatting."""

from datetime import datetime, timezone

from rollkit.dice.formatting import (
    format_entry,
    format_modifier,
    format_result,
    format_timestamp,
)
from rollkit.dice.roller import roll
from rollkit.dice.types import RollEntry


class TestFormatEntry:
    """Tests for format_entry."""

    def test_kept(self):
        assert format_entry(RollEntry(die_label="d6", value=5)) == "5"

    def test_dropped(self):
        assert format_entry(RollEntry(die_label="d6", value=1, kept=False, dropped=True)) == "~1"

    def test_not_kept(self):
        assert format_entry(RollEntry(die_label="d20", value=3, kept=False)) == "~3"

    def test_exploded(self):
        assert format_entry(RollEntry(die_label="d6", value=2, exploded=True)) == "2!"

    def test_rerolled(self):
        entry = RollEntry(die_label="d6", value=4, rerolled=True, original_value=1)
        assert format_entry(entry) == "4(r1)"


class TestFormatModifier:
    """Tests for format_modifier."""

    def test_positive(self):
        assert format_modifier(3) == " + 3"

    def test_negative(self):
        assert format_modifier(-2) == " - 2"

    def test_zero(self):
        assert format_modifier(0) == ""


class TestFormatResult:
    """Tests for format_result."""

    def test_drop_lowest_summary(self, scripted_rng):
        result = roll("4d6dl1+2", rng=scripted_rng([6, 4, 3, 1]))
        assert format_result(result) == "4d6dl1+2: [6, 4, 3, ~1] + 2 = 15"

    def test_uses_canonical_notation_without_input(self, scripted_rng):
        from rollkit.dice.parser import parse_dice
        from rollkit.dice.roller import roll_dice

        result = roll_dice(parse_dice("d20"), rng=scripted_rng([7]))
        assert format_result(result) == "1d20: [7] = 7"


def test_format_timestamp():
    """Test timestamps render as clock time."""
    ts = datetime(2024, 5, 1, 14, 30, 45, tzinfo=timezone.utc)
    expected = ts.astimezone().strftime("%H:%M:%S")
    assert format_timestamp(ts) == expected
    assert len(format_timestamp(ts)) == 8
