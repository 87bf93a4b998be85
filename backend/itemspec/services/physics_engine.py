"""
physics_engine.py — Density checks and feel-based volumetric weight.

Two independent helpers for the listing form:

  validate_weight_against_dimensions
      Flags a weight/dimension pair whose bulk density is physically
      implausible (denser than lead, or lighter than packing foam for a
      large parcel).  Incomplete input cannot be validated and is
      reported as valid.

  estimate_weight_from_feel
      Weight from packed dimensions and a qualitative heaviness bucket:
        volume [L]   = L × W × H / 1000            (cm³ → L)
        density      = bucket typical, ×0.9 above 50 L, ×1.1 below 5 L,
                       clamped to the bucket band
        weight [kg]  = volume × density, rounded to 0.1 kg (halves up)

Reference densities:
  - Lead ~11 kg/L, steel ~7.9 kg/L, water 1.0 kg/L, foam ~0.03 kg/L
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Union

from itemspec.config import (
    LARGE_VOLUME_FACTOR,
    LARGE_VOLUME_L,
    MAX_PLAUSIBLE_DENSITY_KG_L,
    MIN_PLAUSIBLE_DENSITY_KG_L,
    MIN_VOLUME_FOR_LIGHTNESS_CHECK_L,
    SMALL_VOLUME_FACTOR,
    SMALL_VOLUME_L,
)
from itemspec.models.spec_schema import DensityBand, FeelBucket, WeightValidation
from itemspec.services.rounding import round_weight

logger = logging.getLogger("itemspec.physics")


# ---------------------------------------------------------------------------
# Feel bucket density bands [kg/L]
# ---------------------------------------------------------------------------

FEEL_DENSITIES: Mapping[FeelBucket, DensityBand] = MappingProxyType({
    FeelBucket.VERY_LIGHT: DensityBand(min=0.01, max=0.1, typical=0.05),   # foam, fabric, air-filled
    FeelBucket.LIGHT:      DensityBand(min=0.1, max=0.5, typical=0.3),     # electronics, plastic, wood
    FeelBucket.MEDIUM:     DensityBand(min=0.5, max=1.5, typical=1.0),     # water, most common items
    FeelBucket.HEAVY:      DensityBand(min=1.5, max=3.0, typical=2.2),     # metal, dense materials
    FeelBucket.VERY_HEAVY: DensityBand(min=3.0, max=10.0, typical=5.0),    # lead, very dense metals
})

TOO_HEAVY_WARNING = "This seems very heavy (denser than lead). Please double-check the weight."
TOO_LIGHT_WARNING = "This seems very light for this size. Please double-check the weight."


def volume_liters(length: float, width: float, height: float) -> float:
    """Packed volume in litres from cm dimensions."""
    return (length * width * height) / 1000.0


class PhysicsEngine:
    """
    Stateless numeric helpers; safe to share across request handlers.
    """

    # ------------------------------------------------------------------
    # 1. Density plausibility
    # ------------------------------------------------------------------

    def validate_weight_against_dimensions(
        self,
        weight: Optional[float],
        length: Optional[float],
        width: Optional[float],
        height: Optional[float],
    ) -> WeightValidation:
        """
        Check bulk density = weight / volume.

        Invalid when density > 10 kg/L, or density < 0.01 kg/L on a parcel
        larger than 10 L.  Any missing or non-positive value → valid
        (cannot validate).
        """
        values = (weight, length, width, height)
        if any(v is None or v <= 0 for v in values):
            return WeightValidation(valid=True)

        volume = volume_liters(length, width, height)
        density = weight / volume

        if density > MAX_PLAUSIBLE_DENSITY_KG_L:
            logger.debug("density check failed: %.3f kg/L (too heavy)", density)
            return WeightValidation(valid=False, warning=TOO_HEAVY_WARNING)

        if density < MIN_PLAUSIBLE_DENSITY_KG_L and volume > MIN_VOLUME_FOR_LIGHTNESS_CHECK_L:
            logger.debug("density check failed: %.4f kg/L over %.1f L (too light)", density, volume)
            return WeightValidation(valid=False, warning=TOO_LIGHT_WARNING)

        return WeightValidation(valid=True)

    # ------------------------------------------------------------------
    # 2. Feel-based volumetric estimate
    # ------------------------------------------------------------------

    def adjusted_density(self, volume: float, feel: Union[FeelBucket, str]) -> float:
        """Bucket typical density with the size adjustment, clamped to the band."""
        band = FEEL_DENSITIES[FeelBucket(feel)]
        density = band.typical
        if volume > LARGE_VOLUME_L:
            density *= LARGE_VOLUME_FACTOR
        elif volume < SMALL_VOLUME_L:
            density *= SMALL_VOLUME_FACTOR
        return min(band.max, max(band.min, density))

    def estimate_weight_from_feel(
        self,
        length: float,
        width: float,
        height: float,
        feel: Union[FeelBucket, str],
    ) -> float:
        """
        Weight [kg] = volume [L] × adjusted density [kg/L], rounded to 0.1 kg.

        Example: 10×10×10 cm "heavy" → 1 L × min(3.0, 2.2×1.1) = 2.42 → 2.4 kg.
        An unknown feel value raises ValueError (caller contract).
        """
        volume = volume_liters(length, width, height)
        return round_weight(volume * self.adjusted_density(volume, feel))


_physics = PhysicsEngine()


def validate_weight_against_dimensions(
    weight: Optional[float],
    length: Optional[float],
    width: Optional[float],
    height: Optional[float],
) -> WeightValidation:
    return _physics.validate_weight_against_dimensions(weight, length, width, height)


def estimate_weight_from_feel(
    length: float,
    width: float,
    height: float,
    feel: Union[FeelBucket, str],
) -> float:
    return _physics.estimate_weight_from_feel(length, width, height, feel)
