"""
family_formulas.py — Closed-form size/weight scaling for item families.

An item family (battery, propeller, tank, ...) is resolved from a single
numeric attribute found in the listing text.  Each rule declares:

  name       — family name used in logs
  attribute  — ExtractedAttributes field the formula needs
  anchors    — substrings, at least one of which must be in the text
  formula    — (value, text) → FamilyEstimate

FAMILY_RULES is evaluated in declaration order and the first rule whose
attribute is present and whose anchor is found wins.  The order is part
of the contract: "battery charger 20 amp" must reach the charger rule
only because the battery rule needs amp-hours.

Dimensions are L × W × H in cm; weights in kg.  Values are rounded here
(weight 0.1 kg, dimensions 1 cm, halves up) so every rule honours the same output
precision.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from itemspec.models.spec_schema import Dimensions, ExtractedAttributes
from itemspec.services.rounding import round_cm, round_weight

logger = logging.getLogger("itemspec.families")


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CM_PER_INCH: float = 2.54
CM_PER_FOOT: float = 30.48

# Battery mass per amp-hour [kg/Ah]
LEAD_ACID_KG_PER_AH: float = 0.10
LITHIUM_KG_PER_AH: float = 0.05

# Tank shell mass per gallon of capacity [kg/gal] + fittings tare [kg]
METAL_TANK_KG_PER_GAL: float = 1.2
PLASTIC_TANK_KG_PER_GAL: float = 0.6
TANK_TARE_KG: float = 2.0

# Linear mass [kg/ft]; chain is 12.5x rope
ROPE_KG_PER_FT: float = 0.08
CHAIN_KG_PER_FT: float = 1.0

# Aluminium mast section [kg/ft]
MAST_KG_PER_FT: float = 1.5

LITHIUM_MARKERS: Tuple[str, ...] = ("lithium", "lifepo4", "li-ion")
METAL_TANK_MARKERS: Tuple[str, ...] = ("aluminum", "aluminium", "stainless", "steel")


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FamilyEstimate:
    weight: float
    dimensions: Dimensions
    category: str
    label: str                  # e.g. "Battery 200Ah"

    @property
    def source(self) -> str:
        return f"{self.label} (estimated)"


@dataclass(frozen=True)
class FamilyRule:
    name: str
    attribute: str
    anchors: Tuple[str, ...]
    formula: Callable[[int, str], FamilyEstimate]

    def matches(self, attributes: ExtractedAttributes, text: str) -> bool:
        if getattr(attributes, self.attribute) is None:
            return False
        return any(anchor in text for anchor in self.anchors)


def _estimate(
    weight: float,
    length: float,
    width: float,
    height: float,
    category: str,
    label: str,
) -> FamilyEstimate:
    return FamilyEstimate(
        weight=round_weight(weight),
        dimensions=Dimensions(
            length=round_cm(length),
            width=round_cm(width),
            height=round_cm(height),
        ),
        category=category,
        label=label,
    )


def _has_any(text: str, markers: Tuple[str, ...]) -> bool:
    return any(marker in text for marker in markers)


# ---------------------------------------------------------------------------
# Formulas (v = attribute value)
# ---------------------------------------------------------------------------

def _battery(ah: int, text: str) -> FamilyEstimate:
    lithium = _has_any(text, LITHIUM_MARKERS)
    per_ah = LITHIUM_KG_PER_AH if lithium else LEAD_ACID_KG_PER_AH
    return _estimate(
        ah * per_ah,
        25 + ah * 0.25, 20 + ah * 0.15, 20 + ah * 0.15,
        "electronics" if lithium else "marine",
        f"{'Lithium Battery' if lithium else 'Battery'} {ah}Ah",
    )


def _propeller(diameter: int, text: str) -> FamilyEstimate:
    return _estimate(
        (diameter / 10) * 1.5,
        diameter * CM_PER_INCH, diameter * CM_PER_INCH, max(10, diameter * 0.6),
        "marine",
        f'Propeller {diameter}"',
    )


def _solar_panel(watts: int, text: str) -> FamilyEstimate:
    return _estimate(
        (watts / 100) * 8,
        60 + watts * 0.4, 40 + watts * 0.1, 4,
        "electronics",
        f"Solar Panel {watts}W",
    )


def _inverter(watts: int, text: str) -> FamilyEstimate:
    return _estimate(
        2 + (watts / 1000) * 4,
        30 + watts / 100, 20 + watts / 200, 10 + watts / 500,
        "electronics",
        f"Inverter {watts}W",
    )


def _wind_generator(watts: int, text: str) -> FamilyEstimate:
    # Rotor blades dominate the packed length
    return _estimate(
        10 + (watts / 100) * 2,
        100 + watts / 10, 40, 40,
        "marine",
        f"Wind Generator {watts}W",
    )


def _tank(gallons: int, text: str) -> FamilyEstimate:
    metal = _has_any(text, METAL_TANK_MARKERS)
    per_gal = METAL_TANK_KG_PER_GAL if metal else PLASTIC_TANK_KG_PER_GAL
    if "fuel" in text:
        label = "Fuel Tank"
    elif "water" in text:
        label = "Water Tank"
    else:
        label = "Tank"
    return _estimate(
        gallons * per_gal + TANK_TARE_KG,
        40 + gallons * 1.2, 30 + gallons * 0.6, 25 + gallons * 0.4,
        "marine",
        f"{label} {gallons} gal",
    )


def _rope_or_chain(feet: int, text: str) -> FamilyEstimate:
    chain = "chain" in text
    per_ft = CHAIN_KG_PER_FT if chain else ROPE_KG_PER_FT
    # Shipped coiled
    return _estimate(
        feet * per_ft,
        30 + feet * 0.1, 30 + feet * 0.1, 10 + feet * 0.05,
        "marine",
        f"{'Chain' if chain else 'Rope'} {feet}ft",
    )


def _mast(feet: int, text: str) -> FamilyEstimate:
    return _estimate(
        feet * MAST_KG_PER_FT,
        feet * CM_PER_FOOT, 20, 15,
        "marine",
        f"Mast {feet}ft",
    )


def _bilge_pump(gph: int, text: str) -> FamilyEstimate:
    return _estimate(
        0.5 + gph / 1000,
        15 + gph / 200, 10 + gph / 500, 10 + gph / 500,
        "marine",
        f"Bilge Pump {gph}gph",
    )


def _watermaker(gph: int, text: str) -> FamilyEstimate:
    return _estimate(
        15 + gph * 2,
        50 + gph * 2, 35 + gph, 30,
        "marine",
        f"Watermaker {gph}gph",
    )


def _battery_charger(amps: int, text: str) -> FamilyEstimate:
    return _estimate(
        1 + amps * 0.1,
        20 + amps * 0.3, 15 + amps * 0.2, 8 + amps * 0.1,
        "electronics",
        f"Battery Charger {amps}A",
    )


def _refrigerator(cubic_feet: int, text: str) -> FamilyEstimate:
    return _estimate(
        10 + cubic_feet * 6,
        45 + cubic_feet * 5, 45 + cubic_feet * 3, 50 + cubic_feet * 8,
        "marine",
        f"Refrigerator {cubic_feet} cu ft",
    )


def _life_raft(persons: int, text: str) -> FamilyEstimate:
    return _estimate(
        10 + persons * 5,
        60 + persons * 5, 40 + persons * 2.5, 25 + persons * 2.5,
        "marine",
        f"Life Raft {persons}-person",
    )


def _fire_extinguisher(pounds: int, text: str) -> FamilyEstimate:
    # Agent charge plus cylinder; length is the standing height
    return _estimate(
        pounds * 0.8,
        30 + pounds * 3, 8 + pounds, 8 + pounds,
        "marine",
        f"Fire Extinguisher {pounds}lb",
    )


def _fender(diameter: int, text: str) -> FamilyEstimate:
    return _estimate(
        0.3 + diameter * 0.15,
        diameter * CM_PER_INCH * 3, diameter * CM_PER_INCH, diameter * CM_PER_INCH,
        "marine",
        f'Fender {diameter}"',
    )


def _radar(diameter: int, text: str) -> FamilyEstimate:
    return _estimate(
        diameter * 0.3,
        diameter * CM_PER_INCH, diameter * CM_PER_INCH, 25,
        "electronics",
        f'Radar {diameter}"',
    )


# ---------------------------------------------------------------------------
# Rule table: ORDER IS SIGNIFICANT
# ---------------------------------------------------------------------------

FAMILY_RULES: Tuple[FamilyRule, ...] = (
    FamilyRule("battery", "amp_hours", ("battery",), _battery),
    FamilyRule("propeller", "diameter_inches", ("propeller",), _propeller),
    FamilyRule("solar panel", "wattage", ("solar",), _solar_panel),
    FamilyRule("inverter", "wattage", ("inverter",), _inverter),
    FamilyRule("wind generator", "wattage", ("wind generator", "wind turbine"), _wind_generator),
    FamilyRule("tank", "gallons", ("tank",), _tank),
    FamilyRule("rope", "feet", ("rope", "line", "chain", "rode"), _rope_or_chain),
    FamilyRule("mast", "feet", ("mast",), _mast),
    FamilyRule("bilge pump", "gph", ("bilge",), _bilge_pump),
    FamilyRule("watermaker", "gph", ("watermaker", "water maker", "desalinat"), _watermaker),
    FamilyRule("battery charger", "amperage", ("charger",), _battery_charger),
    FamilyRule("refrigerator", "cubic_feet", ("refrigerator", "fridge", "freezer"), _refrigerator),
    FamilyRule("life raft", "person_capacity", ("life raft", "liferaft"), _life_raft),
    FamilyRule("fire extinguisher", "pounds", ("extinguisher",), _fire_extinguisher),
    FamilyRule("fender", "diameter_inches", ("fender",), _fender),
    FamilyRule("radar", "diameter_inches", ("radar",), _radar),
)


def match_family(attributes: ExtractedAttributes, text: str) -> Optional[FamilyEstimate]:
    """Apply the first matching family rule, or return None."""
    for rule in FAMILY_RULES:
        if rule.matches(attributes, text):
            value = getattr(attributes, rule.attribute)
            logger.debug("family rule matched: %s (%s=%s)", rule.name, rule.attribute, value)
            return rule.formula(value, text)
    return None
