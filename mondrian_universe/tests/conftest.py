"""
Shared pytest fixtures.
"""

import pytest


class ScriptedRandom:
    """
    RandomSource that replays a fixed list of draws.

    Records every requested bound so tests can check how many draws were made
    and over which ranges.
    """

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def next_int(self, bound: int) -> int:
        self.bounds.append(bound)
        assert self.values, f"ScriptedRandom exhausted (draw #{len(self.bounds)} with bound {bound})"
        value = self.values.pop(0)
        assert 0 <= value < bound, f"Scripted value {value} outside [0, {bound})"
        return value


@pytest.fixture
def scripted():
    """Factory: scripted([3, 1, 0]) -> ScriptedRandom."""
    return ScriptedRandom
