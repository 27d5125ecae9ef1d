"""Tests for HSB to RGB conversion."""

import pytest

from covergen.render.hsb import hsb_to_rgb


@pytest.mark.parametrize("hue", [0, 37, 128, 255])
def test_zero_saturation_is_gray(hue):
    """Without saturation the result is the brightness on every channel."""
    assert hsb_to_rgb(hue, 0, 200) == (200, 200, 200)


def test_pure_red_at_hue_zero():
    """Hue 0 at full saturation is pure red."""
    assert hsb_to_rgb(0, 100, 255) == (255, 0, 0)


def test_second_sector():
    """A hue in the second sector keeps green at full brightness."""
    assert hsb_to_rgb(64, 100, 255) == (127, 255, 0)


def test_channels_stay_in_range():
    """Every hue yields channels between 0 and the brightness."""
    for hue in range(256):
        rgb = hsb_to_rgb(hue, 80, 220)
        assert all(0 <= channel <= 220 for channel in rgb)
        assert max(rgb) == 220


@pytest.mark.parametrize(
    "hue, expected",
    [
        (20, (255, 119, 0)),
        (64, (127, 255, 0)),
        (100, (0, 255, 87)),
        (140, (0, 183, 255)),
        (180, (55, 0, 255)),
        (230, (255, 0, 155)),
    ],
)
def test_each_sector(hue, expected):
    """Every sector of the hue wheel picks its own channel order."""
    assert hsb_to_rgb(hue, 100, 255) == expected
