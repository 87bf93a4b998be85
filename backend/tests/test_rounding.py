"""
test_rounding.py — Output precision helpers.

Exact halves round up, unlike the built-in round() which rounds them to
the even neighbour (round(0.25, 1) == 0.2, round(24.5) == 24).
"""

import pytest

from itemspec.services.rounding import round_cm, round_weight


class TestRoundWeight:
    @pytest.mark.parametrize("raw, expected", [
        (0.25, 0.3),
        (1.25, 1.3),
        (5.25, 5.3),
        (2.42, 2.4),
        (1.8, 1.8),
        (20.0, 20.0),
        (0.04, 0.0),
    ])
    def test_one_decimal_halves_up(self, raw, expected):
        assert round_weight(raw) == expected


class TestRoundCm:
    @pytest.mark.parametrize("raw, expected", [
        (32.5, 33),
        (24.5, 25),
        (52.5, 53),
        (30.48, 30),
        (60.96, 61),
        (914.4, 914),
        (10.0, 10),
    ])
    def test_whole_cm_halves_up(self, raw, expected):
        assert round_cm(raw) == expected
