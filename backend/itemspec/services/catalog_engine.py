from typing import Optional
import logging

from itemspec.models.spec_schema import Confidence, ItemSpecification
from itemspec.services.catalog_data import CATALOG, CatalogArchetype, CatalogEntry
from itemspec.services.rounding import round_weight

logger = logging.getLogger("itemspec.catalog")


class CatalogEngine:
    """
    Resolves listing text against the archetype catalog.
    First archetype whose anchor is in the text is the only one tried.
    """
    def __init__(self, catalog: tuple[CatalogArchetype, ...] = CATALOG):
        self.catalog = catalog

    def find_archetype(self, text: str) -> Optional[CatalogArchetype]:
        for archetype in self.catalog:
            if archetype.anchor in text:
                return archetype
        return None

    def match(self, text: str) -> Optional[ItemSpecification]:
        archetype = self.find_archetype(text)
        if archetype is None:
            return None

        for variant, entry in archetype.variants:
            if variant in text:
                logger.debug("catalog variant matched: %s (%s)", archetype.anchor, variant)
                return self._to_specification(
                    entry, f"Matched: {archetype.anchor} ({variant})", Confidence.HIGH
                )

        logger.debug("catalog default used: %s", archetype.anchor)
        return self._to_specification(
            archetype.default, f"Matched: {archetype.anchor} (typical)", Confidence.MEDIUM
        )

    @staticmethod
    def _to_specification(entry: CatalogEntry, source: str, confidence: Confidence) -> ItemSpecification:
        return ItemSpecification(
            weight=round_weight(entry.weight),
            dimensions=entry.dimensions,
            category=entry.category,
            source=source,
            confidence=confidence,
        )
