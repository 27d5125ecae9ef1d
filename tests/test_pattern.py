"""Tests for pattern generation."""

import pytest

from covergen.render.pattern import PATTERN_LENGTH, make_pattern


@pytest.mark.parametrize(
    "seed, expected",
    [
        (131, "1000001111000001"),
        (100, "1101000110001011"),
        (18, "1001011001101001"),
        (5, "1011100111010000"),
        (0, "0" * 16),
        (2**20 + 1, "1" + "0" * 15),
    ],
)
def test_known_patterns(seed, expected):
    """Patterns follow the recombine, mirror and trim steps exactly."""
    assert make_pattern(seed) == expected


def test_patterns_are_always_sixteen_bits():
    """Every seed yields 16 characters of 0 and 1."""
    for seed in range(0, 5000, 7):
        pattern = make_pattern(seed)
        assert len(pattern) == PATTERN_LENGTH
        assert set(pattern) <= {"0", "1"}
