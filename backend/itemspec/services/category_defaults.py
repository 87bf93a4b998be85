"""Category fallback weights and reference items for listing forms."""
from types import MappingProxyType
from typing import List, Mapping, Optional

from itemspec.models.spec_schema import CategoryDefault, ReferenceItem


def _band(category: str, min_kg: float, max_kg: float, typical_kg: float) -> CategoryDefault:
    return CategoryDefault(category=category, min=min_kg, max=max_kg, typical=typical_kg)


# Weight band per category (kg), used only when nothing in the text matched
CATEGORY_DEFAULTS: Mapping[str, CategoryDefault] = MappingProxyType({
    band.category: band
    for band in (
        # Broad marketplace categories
        _band("electronics", 0.5, 5, 1),
        _band("marine", 5, 30, 15),
        _band("food", 0.5, 10, 2),
        _band("clothing", 0.1, 3, 0.5),
        _band("tools", 1, 20, 3),
        _band("medical", 0.5, 5, 1.5),
        _band("automotive", 5, 50, 15),
        _band("sports", 1, 15, 5),
        _band("books", 0.5, 3, 1),
        # Boat-part categories used by item templates
        _band("electrical_systems", 1, 40, 10),
        _band("anchoring", 2, 60, 12),
        _band("engine_parts", 0.2, 120, 8),
        _band("sails_rigging", 1, 80, 5),
        _band("hull_parts", 5, 300, 20),
        _band("deck_hardware", 0.2, 20, 2),
        _band("marine_electronics", 0.3, 10, 1.5),
        _band("safety_equipment", 0.3, 50, 2),
        _band("plumbing_systems", 1, 50, 8),
        _band("galley_equipment", 2, 60, 12),
    )
})


REFERENCE_ITEMS: tuple[ReferenceItem, ...] = (
    ReferenceItem(name="Laptop", weight=2, dimensions="35×25×2 cm", category="electronics"),
    ReferenceItem(name="Car Battery", weight=15, dimensions="30×20×20 cm", category="automotive"),
    ReferenceItem(name="Suitcase (empty)", weight=3, dimensions="70×45×25 cm", category="clothing"),
    ReferenceItem(name="Suitcase (packed)", weight=20, dimensions="70×45×25 cm", category="clothing"),
    ReferenceItem(name="Marine Battery 100Ah", weight=12, dimensions="30×20×20 cm", category="marine"),
    ReferenceItem(name="Marine Battery 200Ah", weight=24, dimensions="35×25×25 cm", category="marine"),
    ReferenceItem(name="Anchor (typical)", weight=12, dimensions="40×30×10 cm", category="marine"),
    ReferenceItem(name="Sail (Genoa)", weight=3, dimensions="Rolls up small", category="marine"),
    ReferenceItem(name="Sail (Mainsail)", weight=5, dimensions="Rolls up small", category="marine"),
    ReferenceItem(name="Chartplotter", weight=1.5, dimensions="25×15×5 cm", category="electronics"),
    ReferenceItem(name="VHF Radio", weight=1, dimensions="20×10×5 cm", category="electronics"),
    ReferenceItem(name="Winch", weight=5, dimensions="15×15×15 cm", category="tools"),
    ReferenceItem(name="Windlass", weight=15, dimensions="30×25×20 cm", category="tools"),
)


def get_category_weight_range(category: Optional[str]) -> Optional[CategoryDefault]:
    if not category:
        return None
    return CATEGORY_DEFAULTS.get(category)


def get_reference_items(category: Optional[str] = None) -> List[ReferenceItem]:
    """Reference items, optionally limited to one category."""
    if category:
        return [item for item in REFERENCE_ITEMS if item.category == category]
    return list(REFERENCE_ITEMS)
