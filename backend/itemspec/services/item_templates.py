"""
item_templates.py — Quick-pick listing templates for common boat items.

Templates pre-fill the listing form; their title and description are
written so the inference engine resolves them (family formula or
catalog archetype) without the user typing anything else.
"""
from typing import List, Optional

from itemspec.models.spec_schema import ItemSpecification, ItemTemplate
from itemspec.services.inference_engine import infer_item_specification


def _t(template_id: str, title: str, description: str, category: str, *keywords: str) -> ItemTemplate:
    return ItemTemplate(
        id=template_id,
        title=title,
        description=description,
        category=category,
        keywords=keywords,
    )


ITEM_TEMPLATES: tuple[ItemTemplate, ...] = (
    # electrical systems
    _t("battery-marine-100ah", "Marine Battery 100Ah", "Deep cycle marine battery, 100 amp hours", "electrical_systems", "battery", "marine", "100ah", "100 ah", "deep cycle"),
    _t("battery-marine-200ah", "Marine Battery 200Ah", "Deep cycle marine battery, 200 amp hours", "electrical_systems", "battery", "marine", "200ah", "200 ah", "deep cycle"),
    _t("battery-lithium-100ah", "Lithium Battery 100Ah", "Lithium marine battery, 100 amp hours", "electrical_systems", "battery", "lithium", "100ah", "100 ah", "li-ion"),
    _t("battery-agm-100ah", "AGM Battery 100Ah", "AGM (Absorbent Glass Mat) marine battery, 100 amp hours", "electrical_systems", "battery", "agm", "100ah", "100 ah"),
    _t("solar-panel-100w", "Solar Panel 100W", "100 watt solar panel for marine use", "electrical_systems", "solar", "panel", "100w", "100 w", "photovoltaic"),
    _t("solar-panel-200w", "Solar Panel 200W", "200 watt solar panel for marine use", "electrical_systems", "solar", "panel", "200w", "200 w", "photovoltaic"),
    _t("solar-panel-300w", "Solar Panel 300W", "300 watt solar panel for marine use", "electrical_systems", "solar", "panel", "300w", "300 w", "photovoltaic"),
    _t("wind-generator-400w", "Wind Generator 400W", "400 watt wind generator for marine use", "electrical_systems", "wind", "generator", "400w", "400 w", "turbine"),
    _t("wind-generator-600w", "Wind Generator 600W", "600 watt wind generator for marine use", "electrical_systems", "wind", "generator", "600w", "600 w", "turbine"),
    _t("inverter-1000w", "Inverter 1000W", "1000 watt power inverter", "electrical_systems", "inverter", "1000w", "1000 w", "power"),
    _t("inverter-2000w", "Inverter 2000W", "2000 watt power inverter", "electrical_systems", "inverter", "2000w", "2000 w", "power"),
    _t("inverter-3000w", "Inverter 3000W", "3000 watt power inverter", "electrical_systems", "inverter", "3000w", "3000 w", "power"),
    _t("battery-charger-10a", "Battery Charger 10A", "10 amp battery charger", "electrical_systems", "charger", "battery", "10amp", "10 amp"),
    _t("battery-charger-20a", "Battery Charger 20A", "20 amp battery charger", "electrical_systems", "charger", "battery", "20amp", "20 amp"),
    _t("battery-charger-40a", "Battery Charger 40A", "40 amp battery charger", "electrical_systems", "charger", "battery", "40amp", "40 amp"),
    _t("shore-power-25ft", "Shore Power Cord 25ft", "25 foot shore power cord", "electrical_systems", "shore", "power", "cord", "cable", "25ft", "25 ft"),
    _t("shore-power-50ft", "Shore Power Cord 50ft", "50 foot shore power cord", "electrical_systems", "shore", "power", "cord", "cable", "50ft", "50 ft"),
    # anchoring
    _t("anchor-5kg", "Anchor 5kg", "5 kilogram anchor", "anchoring", "anchor", "5kg", "5 kg"),
    _t("anchor-10kg", "Anchor 10kg", "10 kilogram anchor", "anchoring", "anchor", "10kg", "10 kg"),
    _t("anchor-15kg", "Anchor 15kg", "15 kilogram anchor", "anchoring", "anchor", "15kg", "15 kg"),
    _t("anchor-20kg", "Anchor 20kg", "20 kilogram anchor", "anchoring", "anchor", "20kg", "20 kg"),
    _t("anchor-25kg", "Anchor 25kg", "25 kilogram anchor", "anchoring", "anchor", "25kg", "25 kg"),
    _t("anchor-chain-50ft", "Anchor Chain 50ft", "50 foot anchor chain", "anchoring", "chain", "anchor", "50ft", "50 ft"),
    _t("anchor-chain-100ft", "Anchor Chain 100ft", "100 foot anchor chain", "anchoring", "chain", "anchor", "100ft", "100 ft"),
    _t("anchor-chain-200ft", "Anchor Chain 200ft", "200 foot anchor chain", "anchoring", "chain", "anchor", "200ft", "200 ft"),
    _t("anchor-rode-200ft", "Anchor Rode 200ft", "200 foot anchor rode", "anchoring", "rode", "anchor", "200ft", "200 ft", "line"),
    _t("windlass", "Windlass", "Electric or manual anchor windlass", "anchoring", "windlass", "anchor", "winch"),
    _t("dock-lines-25ft", "Dock Lines 25ft", "25 foot dock lines (set of 4)", "anchoring", "dock", "line", "lines", "25ft", "25 ft", "mooring"),
    _t("dock-lines-50ft", "Dock Lines 50ft", "50 foot dock lines (set of 4)", "anchoring", "dock", "line", "lines", "50ft", "50 ft", "mooring"),
    # engine parts
    _t("outboard-15hp", "Outboard Motor 15hp", "15 horsepower outboard motor", "engine_parts", "outboard", "motor", "engine", "15hp", "15 hp"),
    _t("outboard-40hp", "Outboard Motor 40hp", "40 horsepower outboard motor", "engine_parts", "outboard", "motor", "engine", "40hp", "40 hp"),
    _t("outboard-60hp", "Outboard Motor 60hp", "60 horsepower outboard motor", "engine_parts", "outboard", "motor", "engine", "60hp", "60 hp"),
    _t("propeller-10inch", "Propeller 10 inch", "10 inch diameter propeller", "engine_parts", "propeller", "prop", "10inch", "10 inch", "10\""),
    _t("propeller-12inch", "Propeller 12 inch", "12 inch diameter propeller", "engine_parts", "propeller", "prop", "12inch", "12 inch", "12\""),
    _t("propeller-14inch", "Propeller 14 inch", "14 inch diameter propeller", "engine_parts", "propeller", "prop", "14inch", "14 inch", "14\""),
    _t("propeller-16inch", "Propeller 16 inch", "16 inch diameter propeller", "engine_parts", "propeller", "prop", "16inch", "16 inch", "16\""),
    _t("prop-shaft", "Propeller Shaft", "Propeller shaft", "engine_parts", "prop", "shaft", "propeller", "driveshaft"),
    _t("impeller", "Impeller", "Water pump impeller", "engine_parts", "impeller", "pump", "water"),
    # sails rigging
    _t("mainsail", "Mainsail", "Main sail", "sails_rigging", "sail", "main", "mainsail"),
    _t("genoa", "Genoa", "Genoa jib sail", "sails_rigging", "sail", "genoa", "jib"),
    _t("jib", "Jib", "Jib sail", "sails_rigging", "sail", "jib"),
    _t("spinnaker", "Spinnaker", "Spinnaker sail", "sails_rigging", "sail", "spinnaker", "chute"),
    _t("mast-30ft", "Mast 30ft", "30 foot mast", "sails_rigging", "mast", "30ft", "30 ft"),
    _t("mast-40ft", "Mast 40ft", "40 foot mast", "sails_rigging", "mast", "40ft", "40 ft"),
    _t("mast-50ft", "Mast 50ft", "50 foot mast", "sails_rigging", "mast", "50ft", "50 ft"),
    _t("boom", "Boom", "Boom for mainsail", "sails_rigging", "boom", "sail"),
    _t("rigging", "Rigging", "Running rigging lines", "sails_rigging", "rigging", "line", "rope"),
    _t("standing-rigging", "Standing Rigging", "Standing rigging (stays and shrouds)", "sails_rigging", "rigging", "standing", "stay", "shroud"),
    _t("winch", "Winch", "Sail winch", "sails_rigging", "winch", "sail"),
    _t("blocks", "Blocks", "Rigging blocks (set)", "sails_rigging", "block", "blocks", "pulley"),
    _t("rope-50ft", "Rope/Line 50ft", "50 foot rope or line", "sails_rigging", "rope", "line", "50ft", "50 ft"),
    _t("rope-100ft", "Rope/Line 100ft", "100 foot rope or line", "sails_rigging", "rope", "line", "100ft", "100 ft"),
    _t("rope-200ft", "Rope/Line 200ft", "200 foot rope or line", "sails_rigging", "rope", "line", "200ft", "200 ft"),
    # hull parts
    _t("rudder", "Rudder", "Boat rudder", "hull_parts", "rudder", "steering"),
    _t("keel", "Keel", "Sailboat keel", "hull_parts", "keel", "ballast"),
    # deck hardware
    _t("fender-4inch", "Fender 4 inch", "4 inch diameter fender", "deck_hardware", "fender", "4inch", "4 inch", "4\""),
    _t("fender-6inch", "Fender 6 inch", "6 inch diameter fender", "deck_hardware", "fender", "6inch", "6 inch", "6\""),
    _t("fender-8inch", "Fender 8 inch", "8 inch diameter fender", "deck_hardware", "fender", "8inch", "8 inch", "8\""),
    _t("chainplates", "Chainplates", "Chainplates (set)", "sails_rigging", "chainplate", "chainplates", "rigging"),
    _t("turnbuckles", "Turnbuckles", "Turnbuckles for rigging (set)", "sails_rigging", "turnbuckle", "turnbuckles", "rigging"),
    # marine electronics
    _t("chartplotter", "Chartplotter", "Marine chartplotter/GPS", "marine_electronics", "chartplotter", "chart", "plotter", "gps"),
    _t("gps", "GPS", "Marine GPS unit", "marine_electronics", "gps", "navigator"),
    _t("vhf-radio", "VHF Radio", "VHF marine radio", "marine_electronics", "vhf", "radio", "marine"),
    _t("radar-18inch", "Radar 18 inch", "18 inch marine radar", "marine_electronics", "radar", "18inch", "18 inch", "18\""),
    _t("radar-24inch", "Radar 24 inch", "24 inch marine radar", "marine_electronics", "radar", "24inch", "24 inch", "24\""),
    _t("ais", "AIS Transponder", "AIS (Automatic Identification System) transponder", "marine_electronics", "ais", "transponder"),
    # safety equipment
    _t("epirb", "EPIRB", "Emergency Position Indicating Radio Beacon", "safety_equipment", "epirb", "emergency", "beacon"),
    _t("autopilot", "Autopilot", "Marine autopilot system", "marine_electronics", "autopilot", "auto", "pilot"),
    _t("depth-sounder", "Depth Sounder", "Depth sounder / fish finder", "marine_electronics", "depth", "sounder", "fish", "finder"),
    _t("navigation-lights", "Navigation Lights", "Marine navigation lights (set)", "marine_electronics", "navigation", "light", "lights", "nav"),
    _t("life-raft-4person", "Life Raft 4-person", "4-person life raft", "safety_equipment", "life", "raft", "4person", "4 person"),
    _t("life-raft-6person", "Life Raft 6-person", "6-person life raft", "safety_equipment", "life", "raft", "6person", "6 person"),
    _t("life-jacket", "PFD / Life Jacket", "Personal Flotation Device (PFD) / Life jacket", "safety_equipment", "pfd", "life", "jacket", "vest"),
    _t("fire-extinguisher-2lb", "Fire Extinguisher 2lb", "2 pound fire extinguisher", "safety_equipment", "fire", "extinguisher", "2lb", "2 lb"),
    _t("fire-extinguisher-5lb", "Fire Extinguisher 5lb", "5 pound fire extinguisher", "safety_equipment", "fire", "extinguisher", "5lb", "5 lb"),
    _t("plb", "PLB", "Personal Locator Beacon", "safety_equipment", "plb", "beacon", "personal", "locator"),
    # plumbing systems
    _t("watermaker-6gph", "Watermaker 6gph", "Watermaker / desalination unit, 6 gallons per hour", "plumbing_systems", "watermaker", "desalination", "6gph", "6 gph"),
    _t("watermaker-12gph", "Watermaker 12gph", "Watermaker / desalination unit, 12 gallons per hour", "plumbing_systems", "watermaker", "desalination", "12gph", "12 gph"),
    _t("bilge-pump-500gph", "Bilge Pump 500gph", "Bilge pump, 500 gallons per hour", "plumbing_systems", "bilge", "pump", "500gph", "500 gph"),
    _t("bilge-pump-1000gph", "Bilge Pump 1000gph", "Bilge pump, 1000 gallons per hour", "plumbing_systems", "bilge", "pump", "1000gph", "1000 gph"),
    _t("bilge-pump-2000gph", "Bilge Pump 2000gph", "Bilge pump, 2000 gallons per hour", "plumbing_systems", "bilge", "pump", "2000gph", "2000 gph"),
    _t("fuel-tank-10gal", "Fuel Tank 10gal", "10 gallon fuel tank", "plumbing_systems", "fuel", "tank", "10gal", "10 gal"),
    _t("fuel-tank-20gal", "Fuel Tank 20gal", "20 gallon fuel tank", "plumbing_systems", "fuel", "tank", "20gal", "20 gal"),
    _t("fuel-tank-50gal", "Fuel Tank 50gal", "50 gallon fuel tank", "plumbing_systems", "fuel", "tank", "50gal", "50 gal"),
    _t("water-tank-20gal", "Water Tank 20gal", "20 gallon water tank", "plumbing_systems", "water", "tank", "20gal", "20 gal"),
    _t("water-tank-50gal", "Water Tank 50gal", "50 gallon water tank", "plumbing_systems", "water", "tank", "50gal", "50 gal"),
    _t("water-tank-100gal", "Water Tank 100gal", "100 gallon water tank", "plumbing_systems", "water", "tank", "100gal", "100 gal"),
    _t("marine-toilet", "Marine Toilet", "Marine head / toilet", "plumbing_systems", "toilet", "head", "marine"),
    # galley equipment
    _t("marine-refrigerator-3cuft", "Marine Refrigerator 3cuft", "3 cubic foot marine refrigerator", "galley_equipment", "refrigerator", "fridge", "3cuft", "3 cu ft"),
    _t("marine-refrigerator-5cuft", "Marine Refrigerator 5cuft", "5 cubic foot marine refrigerator", "galley_equipment", "refrigerator", "fridge", "5cuft", "5 cu ft"),
    _t("marine-stove", "Marine Stove", "Marine galley stove", "galley_equipment", "stove", "cooktop", "galley"),
    _t("marine-sink", "Marine Sink", "Marine galley sink", "galley_equipment", "sink", "galley"),
    _t("winch-deck", "Deck Winch", "Deck winch for lines", "deck_hardware", "winch", "deck"),
    _t("shackles", "Shackles", "Shackles (set)", "deck_hardware", "shackle", "shackles"),
    _t("snap-shackles", "Snap Shackles", "Snap shackles (set)", "deck_hardware", "snap", "shackle", "shackles"),
)

_TEMPLATES_BY_ID = {template.id: template for template in ITEM_TEMPLATES}


def get_templates_by_category(category: Optional[str] = None) -> List[ItemTemplate]:
    if not category:
        return list(ITEM_TEMPLATES)
    return [template for template in ITEM_TEMPLATES if template.category == category]


def search_templates(query: str) -> List[ItemTemplate]:
    """Case-insensitive substring search over title, description and keywords."""
    needle = (query or "").lower()
    return [
        template for template in ITEM_TEMPLATES
        if needle in f"{template.title} {template.description} {' '.join(template.keywords)}".lower()
    ]


def get_template_categories() -> List[str]:
    return sorted({template.category for template in ITEM_TEMPLATES})


def get_template(template_id: str) -> Optional[ItemTemplate]:
    return _TEMPLATES_BY_ID.get(template_id)


def infer_from_template(template_id: str) -> Optional[ItemSpecification]:
    """Run a template's text through the inference pipeline; None for unknown ids."""
    template = get_template(template_id)
    if template is None:
        return None
    return infer_item_specification(template.title, template.description, template.category)
