from __future__ import annotations

import logging
from typing import Optional

from .knowledge_base import GUIDANCE_TABLE, SAFE_FALLBACK_GUIDANCE
from .matcher import KeywordTable, classify
from .personalization import compose_prefix
from .schema import GuidanceResult, PersonalizationContext

logger = logging.getLogger(__name__)


def resolve_guidance_detailed(
    emergency_text: Optional[str],
    context: Optional[PersonalizationContext] = None,
    table: Optional[KeywordTable[str]] = None,
) -> GuidanceResult:
    """Resolve guidance and report how it was reached.

    Never raises: any internal failure yields ``SAFE_FALLBACK_GUIDANCE`` with
    ``failed`` set.
    """
    try:
        result = classify(emergency_text, table or GUIDANCE_TABLE, fallback_scoring=True)
        prefix, disclosed = compose_prefix(emergency_text, context)
        guidance = str(result.payload)
        return GuidanceResult(
            output=prefix + guidance,
            guidance=guidance,
            key=result.key,
            phase=result.phase,
            prefix=prefix,
            personalized=bool(prefix),
            disclosed=disclosed,
        )
    except Exception:
        logger.exception("guidance resolution failed; returning safe fallback")
        return GuidanceResult(output=SAFE_FALLBACK_GUIDANCE, guidance=SAFE_FALLBACK_GUIDANCE, failed=True)


def resolve_guidance(emergency_text: Optional[str], context: Optional[PersonalizationContext] = None) -> str:
    return resolve_guidance_detailed(emergency_text, context).output
