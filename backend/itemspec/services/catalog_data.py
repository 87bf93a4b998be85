"""
catalog_data.py — Static archetype table for keyword catalog matching.

Schema per archetype:
  anchor    — lower-case substring that selects the archetype
  variants  — ordered (substring, CatalogEntry) pairs; first hit wins
  default   — CatalogEntry used when no variant substring is present

CATALOG is scanned in declaration order and only the first archetype
whose anchor appears in the text is ever tried.  The first five groups
(battery, anchor, sail, electronics, tools) keep their reference order
and variant lists; the boat-part archetypes after them only pick up text
none of those five anchors matched.  Within an archetype a variant that
contains a shorter one is declared before it ("15kg" before "5kg",
"2.5hp" before "5hp").

Entries are L × W × H in cm as packed for delivery; weights in kg.
"""

from dataclasses import dataclass
from typing import Tuple

from itemspec.models.spec_schema import Dimensions


@dataclass(frozen=True)
class CatalogEntry:
    weight: float
    dimensions: Dimensions
    category: str


@dataclass(frozen=True)
class CatalogArchetype:
    anchor: str
    variants: Tuple[Tuple[str, CatalogEntry], ...]
    default: CatalogEntry


def _e(weight: float, length: int, width: int, height: int, category: str = "marine") -> CatalogEntry:
    return CatalogEntry(
        weight=weight,
        dimensions=Dimensions(length=length, width=width, height=height),
        category=category,
    )


# ---------------------------------------------------------------------------
# Archetype table: ORDER IS SIGNIFICANT
# ---------------------------------------------------------------------------

CATALOG: Tuple[CatalogArchetype, ...] = (
    # ── Reference groups ─────────────────────────────────────────────────────
    CatalogArchetype("battery", (
        ("100ah",  _e(12, 30, 20, 20)),
        ("100 ah", _e(12, 30, 20, 20)),
        ("150ah",  _e(18, 33, 22, 23)),
        ("150 ah", _e(18, 33, 22, 23)),
        ("200ah",  _e(24, 35, 25, 25)),
        ("200 ah", _e(24, 35, 25, 25)),
        ("300ah",  _e(35, 52, 24, 25)),
        ("300 ah", _e(35, 52, 24, 25)),
    ), _e(20, 33, 22, 23)),
    CatalogArchetype("anchor", (
        ("25kg",  _e(25, 60, 45, 30)),
        ("25 kg", _e(25, 60, 45, 30)),
        ("20kg",  _e(20, 55, 40, 25)),
        ("20 kg", _e(20, 55, 40, 25)),
        ("15kg",  _e(15, 50, 35, 25)),
        ("15 kg", _e(15, 50, 35, 25)),
        ("10kg",  _e(10, 45, 30, 20)),
        ("10 kg", _e(10, 45, 30, 20)),
        ("5kg",   _e(5, 35, 25, 15)),
        ("5 kg",  _e(5, 35, 25, 15)),
    ), _e(12, 40, 30, 10)),
    CatalogArchetype("sail", (
        ("genoa",     _e(3, 70, 35, 25)),
        ("jib",       _e(2, 60, 30, 20)),
        ("mainsail",  _e(5, 80, 40, 30)),
        ("main sail", _e(5, 80, 40, 30)),
        ("spinnaker", _e(2, 60, 40, 30)),
    ), _e(4, 70, 40, 30)),
    CatalogArchetype("electronics", (
        ("chartplotter",  _e(1.5, 25, 15, 5, "electronics")),
        ("chart plotter", _e(1.5, 25, 15, 5, "electronics")),
        ("gps",           _e(0.5, 15, 10, 5, "electronics")),
        ("vhf",           _e(1, 20, 10, 5, "electronics")),
        ("radio",         _e(1, 20, 10, 5, "electronics")),
        ("autopilot",     _e(3, 40, 30, 20, "electronics")),
        ("auto pilot",    _e(3, 40, 30, 20, "electronics")),
    ), _e(1, 25, 20, 10, "electronics")),
    CatalogArchetype("tools", (
        ("winch",    _e(5, 15, 15, 15, "tools")),
        ("windlass", _e(15, 30, 25, 20, "tools")),
    ), _e(3, 40, 30, 15, "tools")),

    # ── Engine ───────────────────────────────────────────────────────────────
    CatalogArchetype("outboard", (
        ("2.5hp",  _e(13, 100, 35, 30)),
        ("2.5 hp", _e(13, 100, 35, 30)),
        ("9.9hp",  _e(40, 110, 40, 35)),
        ("9.9 hp", _e(40, 110, 40, 35)),
        ("60hp",   _e(110, 140, 55, 50)),
        ("60 hp",  _e(110, 140, 55, 50)),
        ("40hp",   _e(80, 130, 50, 45)),
        ("40 hp",  _e(80, 130, 50, 45)),
        ("25hp",   _e(55, 120, 45, 40)),
        ("25 hp",  _e(55, 120, 45, 40)),
        ("15hp",   _e(45, 110, 40, 35)),
        ("15 hp",  _e(45, 110, 40, 35)),
        ("5hp",    _e(25, 105, 35, 30)),
        ("5 hp",   _e(25, 105, 35, 30)),
    ), _e(40, 120, 45, 40)),
    CatalogArchetype("propeller", (
        ("shaft", _e(8, 150, 6, 6)),
    ), _e(4, 35, 35, 12)),
    CatalogArchetype("impeller", (), _e(0.2, 10, 10, 5)),

    # ── Hull ─────────────────────────────────────────────────────────────────
    CatalogArchetype("keel", (), _e(200, 200, 30, 60)),
    CatalogArchetype("rudder", (), _e(12, 120, 40, 8)),

    # ── Deck & rigging ───────────────────────────────────────────────────────
    CatalogArchetype("windlass", (
        ("electric", _e(18, 35, 25, 25)),
        ("manual",   _e(12, 30, 25, 20)),
    ), _e(15, 30, 25, 20)),
    CatalogArchetype("winch", (
        ("electric",     _e(12, 25, 25, 25)),
        ("self-tailing", _e(7, 20, 20, 20)),
    ), _e(5, 15, 15, 15)),
    CatalogArchetype("boom", (), _e(15, 400, 15, 10)),
    CatalogArchetype("mast", (
        ("carbon", _e(40, 1000, 25, 15)),
        ("dinghy", _e(8, 500, 10, 10)),
    ), _e(60, 1200, 25, 20)),
    CatalogArchetype("block", (), _e(1, 20, 15, 10)),
    CatalogArchetype("chainplate", (), _e(3, 40, 15, 10)),
    CatalogArchetype("turnbuckle", (), _e(2, 30, 20, 10)),
    CatalogArchetype("rigging", (
        ("standing", _e(25, 100, 50, 20)),
        ("running",  _e(6, 50, 40, 20)),
    ), _e(8, 50, 40, 20)),
    CatalogArchetype("shackle", (
        ("snap", _e(0.5, 15, 10, 5)),
    ), _e(0.3, 10, 6, 3)),
    CatalogArchetype("rope", (
        ("dyneema", _e(2, 40, 40, 15)),
        ("halyard", _e(3, 40, 40, 15)),
    ), _e(5, 40, 40, 15)),
    CatalogArchetype("chain", (), _e(25, 40, 30, 20)),
    CatalogArchetype("fender", (), _e(1.5, 60, 20, 20)),

    # ── Electrical ───────────────────────────────────────────────────────────
    CatalogArchetype("charger", (), _e(3, 25, 20, 10, "electronics")),
    CatalogArchetype("inverter", (), _e(5, 35, 25, 12, "electronics")),
    CatalogArchetype("solar", (
        ("flexible", _e(2, 120, 55, 1, "electronics")),
    ), _e(8, 100, 50, 4, "electronics")),
    CatalogArchetype("wind generator", (), _e(18, 140, 40, 40)),
    CatalogArchetype("shore power", (), _e(5, 40, 40, 15)),

    # ── Plumbing & galley ────────────────────────────────────────────────────
    CatalogArchetype("tank", (
        ("fuel",  _e(8, 60, 40, 30)),
        ("water", _e(6, 60, 40, 30)),
    ), _e(7, 60, 40, 30)),
    CatalogArchetype("bilge", (), _e(1.5, 20, 12, 12)),
    CatalogArchetype("watermaker", (), _e(30, 60, 40, 30)),
    CatalogArchetype("refrigerator", (), _e(30, 55, 50, 70)),
    CatalogArchetype("fridge", (), _e(30, 55, 50, 70)),
    CatalogArchetype("toilet", (
        ("electric", _e(18, 50, 40, 40)),
        ("manual",   _e(12, 50, 40, 40)),
    ), _e(14, 50, 40, 40)),
    CatalogArchetype("stove", (), _e(12, 60, 45, 30)),
    CatalogArchetype("sink", (), _e(3, 45, 35, 20)),

    # ── Safety ───────────────────────────────────────────────────────────────
    CatalogArchetype("life raft", (
        ("offshore", _e(40, 75, 55, 35)),
    ), _e(35, 70, 50, 35)),
    CatalogArchetype("life jacket", (
        ("inflatable", _e(1, 30, 25, 8)),
    ), _e(1, 45, 35, 10)),
    CatalogArchetype("pfd", (), _e(1, 45, 35, 10)),
    CatalogArchetype("extinguisher", (), _e(2.5, 40, 13, 13)),
    CatalogArchetype("epirb", (), _e(1, 25, 12, 10, "electronics")),
    CatalogArchetype("plb", (), _e(0.3, 15, 8, 5, "electronics")),

    # ── Navigation electronics listed without the word "electronics" ─────────
    CatalogArchetype("chartplotter", (), _e(1.5, 25, 15, 5, "electronics")),
    CatalogArchetype("chart plotter", (), _e(1.5, 25, 15, 5, "electronics")),
    CatalogArchetype("gps", (), _e(0.5, 15, 10, 5, "electronics")),
    CatalogArchetype("vhf", (
        ("handheld", _e(0.4, 20, 8, 5, "electronics")),
    ), _e(1, 20, 10, 5, "electronics")),
    CatalogArchetype("autopilot", (
        ("tiller", _e(2, 60, 12, 12, "electronics")),
    ), _e(3, 40, 30, 20, "electronics")),
    CatalogArchetype("auto pilot", (), _e(3, 40, 30, 20, "electronics")),
    CatalogArchetype("radar", (), _e(6, 60, 60, 25, "electronics")),
    CatalogArchetype("transponder", (), _e(0.8, 20, 15, 6, "electronics")),
    CatalogArchetype("sounder", (), _e(1, 20, 15, 10, "electronics")),
    CatalogArchetype("fish finder", (), _e(1, 20, 15, 10, "electronics")),
    CatalogArchetype("navigation light", (), _e(0.5, 20, 10, 10)),
)
