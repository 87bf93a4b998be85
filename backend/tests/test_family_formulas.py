"""
test_family_formulas.py — Unit tests for the item family scaling rules.

Tests cover every family formula (weight, L×W×H, category, label), the
lithium / metal-tank / chain branches, rounding precision, and the
first-declared-rule-wins precedence.

Values are computed directly from the documented formulas, e.g.
  battery:   weight = Ah × 0.10 (× 0.05 lithium), L = 25 + 0.25·Ah, W = H = 20 + 0.15·Ah
  propeller: weight = (d / 10) × 1.5, L = W = 2.54·d, H = max(10, 0.6·d)
"""

import pytest

from itemspec.services.attribute_extractor import extract_attributes
from itemspec.services.family_formulas import (
    CHAIN_KG_PER_FT,
    FAMILY_RULES,
    ROPE_KG_PER_FT,
    match_family,
)


def _resolve(text):
    text = text.lower()
    return match_family(extract_attributes(text), text)


def _dims(estimate):
    d = estimate.dimensions
    return (d.length, d.width, d.height)


# ===========================================================================
# Class 1: Table shape
# ===========================================================================

class TestRuleTable:
    def test_sixteen_families_in_declared_order(self):
        names = [rule.name for rule in FAMILY_RULES]
        assert names == [
            "battery", "propeller", "solar panel", "inverter", "wind generator",
            "tank", "rope", "mast", "bilge pump", "watermaker", "battery charger",
            "refrigerator", "life raft", "fire extinguisher", "fender", "radar",
        ]

    def test_rules_are_immutable(self):
        with pytest.raises(Exception):
            FAMILY_RULES[0].name = "changed"


# ===========================================================================
# Class 2: Battery
# ===========================================================================

class TestBattery:
    def test_marine_battery_200ah(self):
        """200 Ah × 0.10 = 20.0 kg; 25+50=75, 20+30=50, 50."""
        estimate = _resolve("Marine Battery 200Ah")
        assert estimate.weight == 20.0
        assert _dims(estimate) == (75, 50, 50)
        assert estimate.category == "marine"
        assert estimate.source == "Battery 200Ah (estimated)"

    @pytest.mark.parametrize("ah, weight", [
        (35, 3.5), (80, 8.0), (100, 10.0), (150, 15.0), (225, 22.5), (400, 40.0),
    ])
    def test_lead_acid_weight_scales_linearly(self, ah, weight):
        estimate = _resolve(f"deep cycle battery {ah}ah")
        assert estimate.weight == weight
        assert estimate.category == "marine"

    @pytest.mark.parametrize("ah, weight", [(5, 0.3), (25, 1.3), (50, 2.5), (100, 5.0), (120, 6.0), (280, 14.0)])
    def test_lithium_uses_half_density_and_electronics(self, ah, weight):
        """5 Ah × 0.05 = 0.25 and 25 Ah × 0.05 = 1.25 round half up."""
        estimate = _resolve(f"lithium battery {ah}ah")
        assert estimate.weight == weight
        assert estimate.category == "electronics"
        assert "Lithium" in estimate.source

    def test_battery_30ah_dimensions_round_half_up(self):
        """25 + 0.25×30 = 32.5 → 33; 20 + 0.15×30 = 24.5 → 25."""
        assert _dims(_resolve("Battery 30Ah")) == (33, 25, 25)

    def test_lifepo4_counts_as_lithium(self):
        assert _resolve("LiFePO4 battery 100Ah").category == "electronics"


# ===========================================================================
# Class 3: Remaining families
# ===========================================================================

class TestFamilyFormulas:
    def test_propeller_12_inch(self):
        """(12/10)×1.5 = 1.8 kg; 12×2.54 = 30.48 → 30; H = max(10, 7.2) = 10."""
        estimate = _resolve("12 inch propeller")
        assert estimate.weight == 1.8
        assert _dims(estimate) == (30, 30, 10)
        assert estimate.category == "marine"

    def test_large_propeller_height_grows(self):
        """20 in: H = 0.6×20 = 12 cm."""
        assert _dims(_resolve("20 inch propeller"))[2] == 12

    def test_solar_panel_100w(self):
        """(100/100)×8 = 8.0 kg; 60+40=100, 40+10=50, 4."""
        estimate = _resolve("Solar Panel 100W")
        assert estimate.weight == 8.0
        assert _dims(estimate) == (100, 50, 4)
        assert estimate.category == "electronics"

    def test_inverter_1000w(self):
        """2 + 1×4 = 6.0 kg; 30+10=40, 20+5=25, 10+2=12."""
        estimate = _resolve("1000 watt power inverter")
        assert estimate.weight == 6.0
        assert _dims(estimate) == (40, 25, 12)
        assert estimate.category == "electronics"

    def test_wind_generator_400w(self):
        """10 + 4×2 = 18.0 kg; 100+40=140, 40, 40."""
        estimate = _resolve("Wind Generator 400W")
        assert estimate.weight == 18.0
        assert _dims(estimate) == (140, 40, 40)

    def test_plastic_fuel_tank_20_gal(self):
        """20×0.6 + 2 = 14.0 kg; 40+24=64, 30+12=42, 25+8=33."""
        estimate = _resolve("20 gallon fuel tank")
        assert estimate.weight == 14.0
        assert _dims(estimate) == (64, 42, 33)
        assert estimate.source == "Fuel Tank 20 gal (estimated)"

    def test_aluminum_tank_is_heavier(self):
        """20×1.2 + 2 = 26.0 kg."""
        assert _resolve("aluminum water tank 20 gal").weight == 26.0

    def test_rope_100ft(self):
        """100×0.08 = 8.0 kg; 30+10=40, 40, 10+5=15."""
        estimate = _resolve("100ft mooring rope")
        assert estimate.weight == 8.0
        assert _dims(estimate) == (40, 40, 15)

    def test_chain_is_12_5_times_rope(self):
        chain = _resolve("anchor chain 100ft")
        rope = _resolve("anchor rode 100ft")
        assert CHAIN_KG_PER_FT / ROPE_KG_PER_FT == pytest.approx(12.5)
        assert chain.weight == 100.0
        assert chain.weight / rope.weight == pytest.approx(12.5)

    def test_mast_30ft(self):
        """30×1.5 = 45.0 kg; 30×30.48 = 914.4 → 914."""
        estimate = _resolve("Mast 30ft")
        assert estimate.weight == 45.0
        assert _dims(estimate) == (914, 20, 15)

    def test_bilge_pump_1000gph(self):
        """0.5 + 1.0 = 1.5 kg; 15+5=20, 10+2=12, 12."""
        estimate = _resolve("bilge pump 1000gph")
        assert estimate.weight == 1.5
        assert _dims(estimate) == (20, 12, 12)

    def test_watermaker_6gph(self):
        """15 + 12 = 27.0 kg; 50+12=62, 35+6=41, 30."""
        estimate = _resolve("Watermaker 6gph")
        assert estimate.weight == 27.0
        assert _dims(estimate) == (62, 41, 30)

    def test_battery_charger_20a(self):
        """1 + 2 = 3.0 kg; 20+6=26, 15+4=19, 8+2=10."""
        estimate = _resolve("battery charger 20 amp")
        assert estimate.weight == 3.0
        assert _dims(estimate) == (26, 19, 10)
        assert estimate.category == "electronics"

    def test_refrigerator_3cuft(self):
        """10 + 18 = 28.0 kg; 45+15=60, 45+9=54, 50+24=74."""
        estimate = _resolve("Marine Refrigerator 3cuft")
        assert estimate.weight == 28.0
        assert _dims(estimate) == (60, 54, 74)

    def test_life_raft_4_person(self):
        """10 + 20 = 30.0 kg; 60+20=80, 40+10=50, 25+10=35."""
        estimate = _resolve("4-person life raft")
        assert estimate.weight == 30.0
        assert _dims(estimate) == (80, 50, 35)

    def test_fire_extinguisher_5lb(self):
        """5×0.8 = 4.0 kg; 30+15=45, 8+5=13, 13."""
        estimate = _resolve("fire extinguisher 5lb")
        assert estimate.weight == 4.0
        assert _dims(estimate) == (45, 13, 13)

    def test_fender_8_inch(self):
        """0.3 + 1.2 = 1.5 kg; 8×2.54×3 = 60.96 → 61, 20.32 → 20."""
        estimate = _resolve("8 inch fender")
        assert estimate.weight == 1.5
        assert _dims(estimate) == (61, 20, 20)

    def test_radar_24_inch(self):
        """24×0.3 = 7.2 kg; 24×2.54 = 60.96 → 61, 61, 25."""
        estimate = _resolve("radar 24 inch")
        assert estimate.weight == 7.2
        assert _dims(estimate) == (61, 61, 25)
        assert estimate.category == "electronics"


# ===========================================================================
# Class 4: Precedence
# ===========================================================================

class TestPrecedence:
    def test_attribute_without_anchor_does_not_fire(self):
        assert _resolve("12 inch brass compass") is None

    def test_anchor_without_attribute_does_not_fire(self):
        assert _resolve("used propeller") is None

    def test_solar_declared_before_inverter(self):
        estimate = _resolve("solar panel with built-in inverter 100w")
        assert estimate.source.startswith("Solar Panel")

    def test_propeller_declared_before_fender(self):
        estimate = _resolve("propeller and fender 12 inch")
        assert estimate.source.startswith("Propeller")

    def test_rope_declared_before_mast(self):
        estimate = _resolve("mast halyard line 50ft")
        assert estimate.source == "Rope 50ft (estimated)"

    def test_battery_beats_charger_when_amp_hours_present(self):
        estimate = _resolve("battery charger for 100ah battery")
        assert estimate.source == "Battery 100Ah (estimated)"

    def test_charger_reached_without_amp_hours(self):
        estimate = _resolve("battery charger 40 amp")
        assert estimate.source == "Battery Charger 40A (estimated)"
