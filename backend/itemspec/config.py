"""
Estimator configuration — single source of truth for density thresholds,
volume adjustments and runtime settings.

Import from here in services and routes rather than hardcoding values.
Engine constants are fixed; runtime settings come from the environment
and are only read by the HTTP layer at start-up.
"""
from __future__ import annotations

import os

# ── Density plausibility (validator) ──────────────────────────────────────────
# Lead is ~11 kg/L, water ~1 kg/L, air ~0.001 kg/L.
MAX_PLAUSIBLE_DENSITY_KG_L: float = 10.0
MIN_PLAUSIBLE_DENSITY_KG_L: float = 0.01

# The "too light" check only applies above this volume.
MIN_VOLUME_FOR_LIGHTNESS_CHECK_L: float = 10.0


# ── Feel-based volumetric estimate ───────────────────────────────────────────
LARGE_VOLUME_L: float = 50.0
SMALL_VOLUME_L: float = 5.0
LARGE_VOLUME_FACTOR: float = 0.9    # voids / packaging
SMALL_VOLUME_FACTOR: float = 1.1    # small items are mostly solid


# ── Category fallback ────────────────────────────────────────────────────────
GENERIC_DIMENSIONS_CM: tuple[int, int, int] = (30, 20, 20)


# ── Runtime settings (HTTP layer) ────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json").lower()
CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
MAX_TEXT_LENGTH: int = int(os.getenv("MAX_TEXT_LENGTH", "2000"))
# Level for the itemspec.* loggers only; empty means inherit LOG_LEVEL
ENGINE_LOG_LEVEL: str = os.getenv("ENGINE_LOG_LEVEL", "")
