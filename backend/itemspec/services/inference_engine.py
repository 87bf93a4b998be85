"""
inference_engine.py — Item specification resolution pipeline.

Turns a listing's free-text title/description (plus an optional category
hint) into an estimated weight, packed dimensions and category.

Resolution order (first stage that produces a result wins):
  1. Family formula  — numeric attribute + family anchor ("200Ah battery")
  2. Catalog         — archetype anchor, then variant or archetype default
  3. Category default — typical weight for the hinted category, 30×20×20 cm
  4. None            — no estimate available (not an error)

The pipeline is pure: no I/O, no caches, no mutable module state.  Calling
it twice with the same input returns equal results.
"""

import logging
from typing import Optional

from itemspec.config import GENERIC_DIMENSIONS_CM
from itemspec.models.spec_schema import Confidence, Dimensions, ItemSpecification
from itemspec.services.attribute_extractor import extract_attributes, normalize_text
from itemspec.services.catalog_engine import CatalogEngine
from itemspec.services.category_defaults import get_category_weight_range
from itemspec.services.family_formulas import match_family
from itemspec.services.rounding import round_weight

logger = logging.getLogger("itemspec.inference")


class InferenceEngine:
    """Ordered fallback chain over family formulas, catalog and category defaults."""

    def __init__(self, catalog_engine: Optional[CatalogEngine] = None):
        self.catalog_engine = catalog_engine or CatalogEngine()

    def infer(
        self,
        title: Optional[str],
        description: Optional[str],
        category_hint: Optional[str] = None,
    ) -> Optional[ItemSpecification]:
        text = normalize_text(title, description)

        # 1. Family formula
        attributes = extract_attributes(text)
        if not attributes.is_empty():
            family = match_family(attributes, text)
            if family is not None:
                return ItemSpecification(
                    weight=family.weight,
                    dimensions=family.dimensions,
                    category=family.category,
                    source=family.source,
                    confidence=Confidence.MEDIUM,
                )

        # 2. Catalog archetype
        matched = self.catalog_engine.match(text)
        if matched is not None:
            return matched

        # 3. Category default
        band = get_category_weight_range(category_hint)
        if band is not None:
            length, width, height = GENERIC_DIMENSIONS_CM
            logger.debug("category default used: %s", category_hint)
            return ItemSpecification(
                weight=round_weight(band.typical),
                dimensions=Dimensions(length=length, width=width, height=height),
                category=category_hint,
                source=f"Category default: {category_hint}",
                confidence=Confidence.LOW,
            )

        logger.debug("no estimate available")
        return None


_default_engine = InferenceEngine()


def infer_item_specification(
    title: Optional[str],
    description: Optional[str],
    category_hint: Optional[str] = None,
) -> Optional[ItemSpecification]:
    """Module-level entry point used by routes and templates."""
    return _default_engine.infer(title, description, category_hint)
