"""
Personal medical context composed ahead of matched guidance.

Nothing from a record is disclosed unless the emergency text refers to the
user's own information (``SELF_REFERENCE_PHRASES``). Once opted in, each
field is disclosed only when its rule's keywords occur in the text; the
demographic summary and the emergency contact have no keyword gate.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from .matcher import matching_keys, normalize_text
from .schema import PersonalizationContext

logger = logging.getLogger(__name__)


SELF_REFERENCE_PHRASES: Tuple[str, ...] = (
    "my info",
    "my medical",
    "my record",
    "my health",
    "my condition",
    "my allerg",
    "my medication",
    "my meds",
    "my profile",
    "about me",
    "based on me",
)

CARDIAC_TEXT = ("chest", "heart")
ALLERGY_TEXT = ("allerg", "rash", "swelling", "breathing")
RESPIRATORY_TEXT = ("breath", "asthma", "wheez", "inhaler")
DIABETES_TEXT = ("sugar", "diabet", "insulin", "hypoglyc")
SEIZURE_TEXT = ("seizure", "convuls", "epilep", "fitting")
BLEEDING_TEXT = ("bleed", "blood", "wound", "transfusion")


@dataclass(frozen=True)
class Disclosure:
    rule: str
    line: str
    label: Optional[str] = None


@dataclass(frozen=True)
class DisclosureRule:
    """Discloses one piece of a record when ``triggers`` occur in the text.

    An empty ``triggers`` tuple means the rule always applies once the
    request is personal. ``label`` is listed in the record header.
    """
    name: str
    render: Callable[[PersonalizationContext], Optional[str]]
    triggers: Tuple[str, ...] = field(default_factory=tuple)
    label: Optional[str] = None

    def applies(self, text: str) -> bool:
        if not self.triggers:
            return True
        return bool(matching_keys(text, self.triggers))

    def disclose(self, text: str, context: PersonalizationContext) -> Optional[Disclosure]:
        if not self.applies(text):
            return None
        line = self.render(context)
        if not line:
            return None
        return Disclosure(rule=self.name, line=line, label=self.label)


def is_personal_request(text: Optional[str]) -> bool:
    return bool(matching_keys(text, SELF_REFERENCE_PHRASES))


def _sex_word(sex: str) -> str:
    s = sex.strip().lower()
    if s in ("m", "male", "man"):
        return "male"
    if s in ("f", "female", "woman"):
        return "female"
    return s


def render_demographics(ctx: PersonalizationContext) -> Optional[str]:
    parts: List[str] = []
    if ctx.age:
        parts.append(f"{ctx.age}-year-old" if ctx.age.isdigit() else f"age {ctx.age}")
    if ctx.sex:
        parts.append(_sex_word(ctx.sex))
    if not parts:
        return None
    return f"Patient: {' '.join(parts)}."


def _conditions_matching(ctx: PersonalizationContext, needles: Sequence[str]) -> List[str]:
    return [c for c in ctx.conditions if matching_keys(c, needles)]


def condition_renderer(needles: Sequence[str]) -> Callable[[PersonalizationContext], Optional[str]]:
    def render(ctx: PersonalizationContext) -> Optional[str]:
        found = _conditions_matching(ctx, needles)
        if not found:
            return None
        return f"ALERT - Relevant condition: {', '.join(found)}."

    return render


def render_allergies(ctx: PersonalizationContext) -> Optional[str]:
    if not ctx.allergies:
        return None
    return f"ALERT - Known allergies: {ctx.allergies}."


def render_medications(ctx: PersonalizationContext) -> Optional[str]:
    if not ctx.medications:
        return None
    return f"ALERT - Current medications: {ctx.medications}. Inform emergency services."


def render_blood_group(ctx: PersonalizationContext) -> Optional[str]:
    if not ctx.blood_group:
        return None
    return f"Blood group: {ctx.blood_group}."


def render_contact(ctx: PersonalizationContext) -> Optional[str]:
    if ctx.emergency_contact and ctx.emergency_phone:
        return f"Emergency contact: {ctx.emergency_contact} at {ctx.emergency_phone}."
    if ctx.emergency_contact or ctx.emergency_phone:
        return f"Emergency contact: {ctx.emergency_contact or ctx.emergency_phone}."
    return None


DEMOGRAPHICS_RULE = DisclosureRule("demographics", render_demographics)
CONTACT_RULE = DisclosureRule("emergency_contact", render_contact)

# Order is output order for the ALERT lines between header and contact.
DISCLOSURE_RULES: Tuple[DisclosureRule, ...] = (
    DisclosureRule(
        "heart_condition",
        condition_renderer(("heart", "cardiac", "coronary", "angina", "arrhythmia", "atrial")),
        CARDIAC_TEXT,
        "heart condition",
    ),
    DisclosureRule("respiratory_condition", condition_renderer(("asthma", "copd", "emphysema")), RESPIRATORY_TEXT, "respiratory condition"),
    DisclosureRule("diabetes", condition_renderer(("diabet",)), DIABETES_TEXT, "diabetes"),
    DisclosureRule("epilepsy", condition_renderer(("epilep", "seizure")), SEIZURE_TEXT, "epilepsy"),
    DisclosureRule("allergies", render_allergies, ALLERGY_TEXT, "allergies"),
    DisclosureRule("medications", render_medications, CARDIAC_TEXT, "medications"),
    DisclosureRule("blood_group", render_blood_group, BLEEDING_TEXT, "blood group"),
)


def collect_disclosures(
    text: Optional[str],
    context: PersonalizationContext,
    rules: Sequence[DisclosureRule] = DISCLOSURE_RULES,
) -> List[Disclosure]:
    lowered = normalize_text(text)
    found: List[Disclosure] = []
    for rule in rules:
        d = rule.disclose(lowered, context)
        if d is not None:
            found.append(d)
    return found


def compose_prefix(text: Optional[str], context: Optional[PersonalizationContext]) -> Tuple[str, List[str]]:
    """Return the personal prefix and the names of the rules that fired.

    The prefix is empty unless the text is a personal request and a context
    is available.
    """
    if context is None or not is_personal_request(text):
        return "", []

    lowered = normalize_text(text)
    lines: List[str] = []
    fired: List[str] = []

    demo = DEMOGRAPHICS_RULE.disclose(lowered, context)
    if demo:
        lines.append(demo.line)
        fired.append(demo.rule)

    alerts = collect_disclosures(lowered, context)
    labels = [d.label for d in alerts if d.label]
    if labels:
        lines.append(f"Based on your medical record ({', '.join(labels)}):")
    else:
        lines.append("General guidance:")
    for d in alerts:
        lines.append(d.line)
        fired.append(d.rule)

    contact = CONTACT_RULE.disclose(lowered, context)
    if contact:
        lines.append(contact.line)
        fired.append(contact.rule)

    logger.debug("personalization rules fired: %s", fired)
    return "\n".join(lines) + "\n\n", fired
