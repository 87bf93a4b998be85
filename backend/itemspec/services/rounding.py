"""
rounding.py — Output precision for estimates.

Weights are reported to 0.1 kg and dimensions to whole cm, with exact
halves rounded up (32.5 cm → 33, 0.25 kg → 0.3).  The built-in round()
rounds halves to even and must not be used for estimate values.
"""

import math


def round_weight(kg: float) -> float:
    """Weight to 0.1 kg, halves up."""
    return math.floor(kg * 10 + 0.5) / 10


def round_cm(cm: float) -> int:
    """Dimension to the nearest whole cm, halves up."""
    return math.floor(cm + 0.5)
