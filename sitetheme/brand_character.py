"""
brand_character.py — Closed registries for the brand-character intake answers.

Emotional goals, voice tones, brand archetypes and anti-references are plain
string ids at every boundary. The records here carry the display data that
goes with each id.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

EMOTIONAL_GOAL_IDS = (
    "trust", "luxury", "curious", "calm", "energized",
    "inspired", "safe", "playful", "authoritative", "welcomed",
)
VOICE_TONES = ("warm", "polished", "direct")
ARCHETYPE_IDS = ("guide", "expert", "creative", "caretaker", "rebel", "artisan")

# The intake screen lets users pick at most this many goals.
MAX_EMOTIONAL_GOALS = 2


@dataclass(frozen=True)
class EmotionalOutcome:
    id: str
    label: str
    description: str
    accent: str


@dataclass(frozen=True)
class BrandArchetype:
    id: str
    label: str
    tagline: str
    description: str
    accent: str


@dataclass(frozen=True)
class AntiReference:
    id: str
    label: str
    description: str


EMOTIONAL_OUTCOMES: Tuple[EmotionalOutcome, ...] = (
    EmotionalOutcome("trust", "Trust", "They feel confident and reassured", "#3b82f6"),
    EmotionalOutcome("luxury", "Luxury", "They feel like they're in good hands", "#d4a853"),
    EmotionalOutcome("curious", "Curiosity", "They want to explore and learn more", "#8b5cf6"),
    EmotionalOutcome("calm", "Calm", "They feel at ease and relaxed", "#6aa67e"),
    EmotionalOutcome("energized", "Energy", "They feel motivated to act now", "#f97316"),
    EmotionalOutcome("inspired", "Inspiration", "They feel moved and excited", "#ec4899"),
    EmotionalOutcome("safe", "Safety", "They know they're in the right place", "#0ea5e9"),
    EmotionalOutcome("playful", "Delight", "They smile, it feels fun and fresh", "#f59e0b"),
    EmotionalOutcome("authoritative", "Authority", "They see you as the clear expert", "#1e293b"),
    EmotionalOutcome("welcomed", "Welcome", "They feel personally invited in", "#e8a849"),
)

BRAND_ARCHETYPES: Tuple[BrandArchetype, ...] = (
    BrandArchetype(
        "guide", "The Guide", "Walk beside your customer",
        "You lead people through a process with patience and clarity.", "#3b82f6",
    ),
    BrandArchetype(
        "expert", "The Expert", "Authority through mastery",
        "You lead with knowledge and credentials.", "#1e293b",
    ),
    BrandArchetype(
        "creative", "The Creative", "Make something nobody's seen",
        "You break conventions and surprise people.", "#ec4899",
    ),
    BrandArchetype(
        "caretaker", "The Caretaker", "You're in the best hands",
        "You nurture, support and protect.", "#ef4444",
    ),
    BrandArchetype(
        "rebel", "The Rebel", "Challenge the status quo",
        "You question norms and do things differently.", "#f97316",
    ),
    BrandArchetype(
        "artisan", "The Artisan", "Craftsmanship in every detail",
        "You take pride in quality and process.", "#8b5cf6",
    ),
)

ANTI_REFERENCES: Tuple[AntiReference, ...] = (
    AntiReference("corporate", "Corporate", "Stiff, suit-and-tie, forgettable"),
    AntiReference("cheap", "Cheap", "Discount-bin, bargain-basement feel"),
    AntiReference("clinical", "Clinical", "Cold, sterile, impersonal"),
    AntiReference("salesy", "Salesy", "Pushy, infomercial energy"),
    AntiReference("cluttered", "Cluttered", "Too much going on, overwhelming"),
    AntiReference("boring", "Boring", "Forgettable, seen-it-a-million-times"),
    AntiReference("aggressive", "Aggressive", "In-your-face, confrontational"),
    AntiReference("generic", "Generic", "Template-y, could be any business"),
)

# ── Industry anti-references ─────────────────────────────────────────────────
# Offered on top of the general list for specific site types. Ids never
# collide with ANTI_REFERENCES; the same id may appear under two site types.

_A = AntiReference

INDUSTRY_ANTI_REFERENCES: Mapping[str, Tuple[AntiReference, ...]] = MappingProxyType({
    "restaurant": (
        _A("fast-food", "Fast food", "Bright plastic, tray-and-counter feel"),
        _A("cafeteria", "Cafeteria", "Institutional, utilitarian dining"),
        _A("chain-restaurant", "Chain restaurant", "Laminated-menu sameness"),
    ),
    "spa": (
        _A("budget-salon", "Budget salon", "Walk-in discount beauty"),
        _A("medical-clinic", "Medical clinic", "Waiting-room sterility"),
    ),
    "photography": (
        _A("stock-agency", "Stock agency", "Watermarked, generic imagery"),
        _A("snapshot-studio", "Snapshot studio", "Mall portrait booth"),
    ),
    "ecommerce": (
        _A("flea-market", "Flea market", "Jumbled, haggle-table clutter"),
        _A("dropship", "Dropship store", "Anonymous bulk-import shop"),
        _A("mega-retailer", "Mega retailer", "Faceless big-box catalogue"),
    ),
    "portfolio": (
        _A("student-project", "Student project", "Unfinished coursework look"),
        _A("stock-agency", "Stock agency", "Watermarked, generic imagery"),
    ),
    "blog": (
        _A("content-farm", "Content farm", "Keyword-stuffed filler pages"),
        _A("news-wire", "News wire", "Dense, impersonal headline feed"),
    ),
    "nonprofit": (
        _A("government-agency", "Government agency", "Bureaucratic form-filling"),
        _A("charity-guilt", "Guilt appeal", "Heavy, guilt-driven fundraising"),
    ),
    "educational": (
        _A("textbook", "Textbook", "Dry, dense, required reading"),
        _A("children-site", "Kids' site", "Cartoonish, primary-colour overload"),
    ),
    "event": (
        _A("ticket-booth", "Ticket booth", "Transactional box-office feel"),
        _A("flyer", "Flyer", "Loud, photocopied handbill"),
    ),
    "booking": (
        _A("call-center", "Call center", "Hold-music, scripted service"),
        _A("waiting-room", "Waiting room", "Queue-number impersonality"),
    ),
})

del _A

_GOALS = {g.id: g for g in EMOTIONAL_OUTCOMES}
_ARCHETYPES = {a.id: a for a in BRAND_ARCHETYPES}
_ANTI_REFS = {a.id: a for a in ANTI_REFERENCES}
for _refs in INDUSTRY_ANTI_REFERENCES.values():
    for _ref in _refs:
        _ANTI_REFS.setdefault(_ref.id, _ref)


def get_emotional_outcome(goal_id: str) -> Optional[EmotionalOutcome]:
    return _GOALS.get(goal_id)


def get_archetype(archetype_id: Optional[str]) -> Optional[BrandArchetype]:
    return _ARCHETYPES.get(archetype_id or "")


def get_anti_reference(ref_id: str) -> Optional[AntiReference]:
    """Look up a general or industry anti-reference by id."""
    return _ANTI_REFS.get(ref_id)


def get_industry_anti_references(site_type: Optional[str]) -> Tuple[AntiReference, ...]:
    return INDUSTRY_ANTI_REFERENCES.get(site_type or "", ())


def industry_anti_reference_ids() -> frozenset:
    return frozenset(ref.id for refs in INDUSTRY_ANTI_REFERENCES.values() for ref in refs)
