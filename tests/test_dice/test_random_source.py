"""Tests for random sources."""

from rollkit.dice.random_source import RandomSource, SeededRandomSource, SystemRandomSource


class TestSystemRandomSource:
    """Tests for SystemRandomSource."""

    def test_values_in_range(self):
        rng = SystemRandomSource()
        for _ in range(200):
            assert 1 <= rng.next_int(1, 6) <= 6

    def test_single_value_range(self):
        assert SystemRandomSource().next_int(1, 1) == 1


class TestSeededRandomSource:
    """Tests for SeededRandomSource."""

    def test_same_seed_same_sequence(self):
        a = SeededRandomSource(42)
        b = SeededRandomSource(42)
        assert [a.next_int(1, 20) for _ in range(10)] == [b.next_int(1, 20) for _ in range(10)]

    def test_instances_independent(self):
        """Test draws on one instance do not affect another."""
        a = SeededRandomSource(5)
        b = SeededRandomSource(5)
        for _ in range(5):
            a.next_int(1, 100)
        first_b = b.next_int(1, 100)
        assert first_b == SeededRandomSource(5).next_int(1, 100)

    def test_records_seed(self):
        assert SeededRandomSource(9).seed == 9


def test_scripted_source_satisfies_protocol(scripted_rng):
    """Test any object with next_int works as a RandomSource."""
    rng: RandomSource = scripted_rng([3])
    assert rng.next_int(1, 6) == 3
