"""Supply recommendations for an emergency, most urgent first."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .matcher import KeywordTable, matching_keys, normalize_text
from .schema import URGENCY_RANK, SupplyRecommendation, SupplyRule, Urgency

logger = logging.getLogger(__name__)

FIRST_AID_KIT = SupplyRecommendation(
    id="basic-first-aid",
    name="Basic First Aid Kit",
    description="Essential supplies for treating minor injuries and emergencies",
    price=29.99,
    category="first-aid",
    urgency="recommended",
)
PAIN_RELIEF = SupplyRecommendation(
    id="pain-relief",
    name="Pain Relief Medication",
    description="Fast-acting pain relief for headaches, muscle pain, and minor injuries",
    price=8.99,
    category="medication",
    urgency="normal",
)

DEFAULT_SUPPLIES: List[SupplyRecommendation] = [FIRST_AID_KIT, PAIN_RELIEF]

BURN_SUPPLIES = [
    SupplyRecommendation(
        id="burn-treatment",
        name="Burn Treatment Gel",
        description="Cooling gel with aloe vera for treating minor burns",
        price=12.99,
        category="medication",
        urgency="critical",
    ),
    SupplyRecommendation(
        id="gauze-pads",
        name="Sterile Gauze Pads",
        description="For covering burn wounds after applying medication",
        price=6.49,
        category="first-aid",
        urgency="recommended",
    ),
    *DEFAULT_SUPPLIES,
]

WOUND_SUPPLIES = [
    SupplyRecommendation(
        id="antiseptic",
        name="Antiseptic Solution",
        description="Prevents infection in cuts and wounds",
        price=7.99,
        category="medication",
        urgency="critical",
    ),
    SupplyRecommendation(
        id="bandages",
        name="Adhesive Bandages (Assorted)",
        description="Various sizes for covering cuts and scrapes",
        price=5.49,
        category="first-aid",
        urgency="recommended",
    ),
    *DEFAULT_SUPPLIES,
]

SPRAIN_SUPPLIES = [
    SupplyRecommendation(
        id="cold-pack",
        name="Instant Cold Pack",
        description="Reduces swelling and pain for sprains and strains",
        price=4.99,
        category="first-aid",
        urgency="critical",
    ),
    SupplyRecommendation(
        id="elastic-bandage",
        name="Elastic Bandage Wrap",
        description="Provides compression and support for sprains",
        price=8.99,
        category="first-aid",
        urgency="recommended",
    ),
    *DEFAULT_SUPPLIES,
]

ALLERGY_SUPPLIES = [
    SupplyRecommendation(
        id="antihistamine",
        name="Antihistamine Tablets",
        description="Relieves allergy symptoms",
        price=11.99,
        category="medication",
        urgency="critical",
    ),
    *DEFAULT_SUPPLIES,
]

# Authored order is priority: a rule matches on its hint keys in the caller's
# hint or on its guidance keys in the resolved guidance text.
SUPPLY_RULES: List[SupplyRule] = [
    SupplyRule(category="burn", hint_keys=["burn"], guidance_keys=["burn"], items=BURN_SUPPLIES),
    SupplyRule(category="wound", hint_keys=["cut", "bleeding"], guidance_keys=["bleeding"], items=WOUND_SUPPLIES),
    SupplyRule(category="sprain", hint_keys=["sprain"], guidance_keys=["sprain", "swelling"], items=SPRAIN_SUPPLIES),
    SupplyRule(
        category="allergy",
        hint_keys=["allergy"],
        guidance_keys=["allergy", "allergic"],
        items=ALLERGY_SUPPLIES,
    ),
]

SUPPLY_TABLE: KeywordTable[List[SupplyRecommendation]] = KeywordTable(
    [(rule.category, rule.items) for rule in SUPPLY_RULES],
    DEFAULT_SUPPLIES,
    name="supplies",
)


def rule_applies(rule: SupplyRule, hint: str, guidance: str) -> bool:
    return bool(matching_keys(hint, rule.hint_keys) or matching_keys(guidance, rule.guidance_keys))


def classify_supplies(
    emergency_category_hint: Optional[str],
    guidance_text: Optional[str] = None,
) -> Tuple[str, List[SupplyRecommendation]]:
    """Return the matched category (``"default"`` if none) and its items."""
    hint = normalize_text(emergency_category_hint)
    guidance = normalize_text(guidance_text)
    for rule in SUPPLY_RULES:
        if rule_applies(rule, hint, guidance):
            logger.debug("supplies: matched %r", rule.category)
            return rule.category, list(rule.items)
    logger.debug("supplies: no match, using default items")
    return "default", list(SUPPLY_TABLE.default)


def get_supply_recommendations(
    emergency_category_hint: Optional[str],
    guidance_text: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[SupplyRecommendation]:
    """Recommended supplies in authored order; ``limit`` keeps the top N."""
    _, items = classify_supplies(emergency_category_hint, guidance_text)
    if limit is not None:
        items = items[: max(limit, 0)]
    return items


def at_least(items: List[SupplyRecommendation], urgency: Urgency) -> List[SupplyRecommendation]:
    floor = URGENCY_RANK[urgency]
    return [i for i in items if URGENCY_RANK[i.urgency] >= floor]
