"""Tests for shared numeric helpers."""

import pytest

from repo_pulse.numeric import clamp, round_half_up, safe_div


@pytest.mark.parametrize(
    "value,expected",
    [(0.0, 0), (0.49, 0), (0.5, 1), (2.5, 3), (3.5, 4), (99.5, 100), (7.0, 7)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_clamp():
    assert clamp(-5) == 0.0
    assert clamp(150) == 100.0
    assert clamp(42.5) == 42.5
    assert clamp(5, low=10, high=20) == 10


def test_safe_div_floors_denominator():
    assert safe_div(10, 0) == 10
    assert safe_div(10, 4) == 2.5
