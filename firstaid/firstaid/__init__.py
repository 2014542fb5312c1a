"""Emergency first-aid guidance matching."""

from .followup import append_answers, get_contextual_suggestions, get_follow_up_questions
from .resolver import resolve_guidance, resolve_guidance_detailed
from .schema import PersonalizationContext, SupplyRecommendation
from .supplies import get_supply_recommendations

__version__ = "0.1.0"

__all__ = [
    "PersonalizationContext",
    "SupplyRecommendation",
    "append_answers",
    "get_contextual_suggestions",
    "get_follow_up_questions",
    "get_supply_recommendations",
    "resolve_guidance",
    "resolve_guidance_detailed",
]
