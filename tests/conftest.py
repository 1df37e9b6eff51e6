"""Core test fixtures for rollkit tests."""

import pytest


class ScriptedRandomSource:
    """Random source that returns pre-set values in order.

    Once the script is exhausted the last value repeats, so a single-value
    script forces every draw.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def next_int(self, minimum: int, maximum: int) -> int:
        self.calls.append((minimum, maximum))
        index = min(len(self.calls) - 1, len(self.values) - 1)
        return self.values[index]


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources.

    Usage:
        rng = scripted_rng([6, 4, 3, 1])
    """
    return ScriptedRandomSource


@pytest.fixture
def max_face_rng():
    """Factory for a source that always returns the maximum face."""

    class MaxFaceRandomSource:
        def __init__(self):
            self.calls = 0

        def next_int(self, minimum: int, maximum: int) -> int:
            self.calls += 1
            return maximum

    return MaxFaceRandomSource
