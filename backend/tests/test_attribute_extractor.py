"""
test_attribute_extractor.py — Unit tests for listing-text attribute extraction.

Tests cover:
  - one detection per attribute kind, including alternate spellings
  - first-alternative-wins ordering within a kind
  - amperage suppression when amp-hours are present
  - empty / unmatched text → empty record
  - text normalization (title + description, lower-cased)
"""

import pytest

from itemspec.services.attribute_extractor import extract_attributes, normalize_text


class TestNormalizeText:
    def test_concatenates_and_lowercases(self):
        assert normalize_text("Marine Battery", "200Ah AGM") == "marine battery 200ah agm"

    def test_none_parts_become_empty(self):
        assert normalize_text(None, None) == " "
        assert normalize_text("Anchor", None) == "anchor "


class TestSingleKinds:
    """Each attribute kind detected from a typical listing phrase."""

    @pytest.mark.parametrize("text, field, expected", [
        ("marine battery 200ah", "amp_hours", 200),
        ("deep cycle battery, 100 amp hours", "amp_hours", 100),
        ("12 inch propeller", "diameter_inches", 12),
        ('bronze prop 14"', "diameter_inches", 14),
        ("solar panel 100w", "wattage", 100),
        ("1000 watt power inverter", "wattage", 1000),
        ("20 gallon fuel tank", "gallons", 20),
        ("water tank 50gal", "gallons", 50),
        ("anchor chain 50ft", "feet", 50),
        ("100 foot rope", "feet", 100),
        ("bilge pump 500gph", "gph", 500),
        ("watermaker, 6 gallons per hour", "gph", 6),
        ("battery charger 20 amp", "amperage", 20),
        ("charger 10a", "amperage", 10),
        ("marine refrigerator 3cuft", "cubic_feet", 3),
        ("fridge 5 cu ft", "cubic_feet", 5),
        ("4-person life raft", "person_capacity", 4),
        ("6 person liferaft", "person_capacity", 6),
        ("fire extinguisher 5lb", "pounds", 5),
        ("2 pound extinguisher", "pounds", 2),
    ])
    def test_detects_value(self, text, field, expected):
        attributes = extract_attributes(text)
        assert getattr(attributes, field) == expected

    def test_unmentioned_kinds_stay_none(self):
        """Only the mentioned kind is populated; absence is None, not zero."""
        attributes = extract_attributes("12 inch propeller")
        assert attributes.diameter_inches == 12
        assert attributes.wattage is None
        assert attributes.feet is None
        assert attributes.amp_hours is None


class TestOrderingRules:
    def test_first_alternative_wins_over_earlier_position(self):
        """
        '12 inch' matches the first diameter alternative; the '14"' alternative
        is never tried even though it appears earlier in the text.
        """
        attributes = extract_attributes('prop 14" replaces old 12 inch')
        assert attributes.diameter_inches == 12

    def test_amperage_skipped_when_amp_hours_present(self):
        """'100 amp hours' would also satisfy the generic amp pattern."""
        attributes = extract_attributes("100 amp hours battery")
        assert attributes.amp_hours == 100
        assert attributes.amperage is None

    def test_amperage_detected_without_amp_hours(self):
        attributes = extract_attributes("10 amp battery charger")
        assert attributes.amp_hours is None
        assert attributes.amperage == 10

    def test_all_kinds_attempted_every_call(self):
        """Independent kinds are all extracted from the same text."""
        attributes = extract_attributes("20 gallon tank, 50ft hose, 12v 40 amp")
        assert attributes.gallons == 20
        assert attributes.feet == 50
        assert attributes.amperage == 40

    def test_gph_text_also_reports_gallons(self):
        attributes = extract_attributes("6 gallons per hour")
        assert attributes.gph == 6
        assert attributes.gallons == 6

    def test_cubic_feet_not_read_as_feet(self):
        attributes = extract_attributes("3 cubic foot marine refrigerator 3cuft")
        assert attributes.cubic_feet == 3
        assert attributes.feet is None


class TestEmptyInput:
    def test_empty_text_returns_empty_record(self):
        assert extract_attributes("").is_empty()

    def test_plain_words_return_empty_record(self):
        assert extract_attributes("lovely vintage brass compass").is_empty()
