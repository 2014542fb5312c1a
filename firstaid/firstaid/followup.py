"""Clarifying questions asked before guidance is finalised."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .matcher import KeywordTable, classify, match
from .schema import FollowUpQuestionSet

# Within each list, order is triage priority: airway and breathing first.
FOLLOW_UP_QUESTIONS: List[Tuple[str, List[str]]] = [
    ("unconscious", [
        "Is the person breathing?",
        "Did you see what happened?",
        "How long have they been unconscious?",
        "Are they responding to voice or touch at all?",
    ]),
    ("fall", [
        "Is there any visible bleeding?",
        "Can the person move all limbs?",
        "Did they hit their head?",
        "Is there any deformity or swelling?",
    ]),
    ("chest pain", [
        "Is the pain radiating to arms, jaw, or back?",
        "Is the person experiencing shortness of breath?",
        "Is the person sweating or nauseous?",
        "Does the pain increase with movement or breathing?",
    ]),
    ("choking", [
        "Can the person speak or cough?",
        "Is the person still conscious?",
        "What were they eating/doing when choking started?",
        "Has any foreign object been expelled?",
    ]),
    ("bleeding", [
        "Where is the bleeding coming from?",
        "Is the bleeding pulsating or steady?",
        "How much blood has been lost?",
        "Is there any foreign object in the wound?",
    ]),
    ("burn", [
        "What caused the burn?",
        "What is the size of the burned area?",
        "What does the burn look like (red, blistered, charred)?",
        "Has the burn been cooled with running water?",
    ]),
]

DEFAULT_FOLLOW_UP_QUESTIONS: List[str] = [
    "Is the person conscious and breathing normally?",
    "When did the symptoms start?",
    "Has this happened before?",
    "Are there any known medical conditions?",
]

CHEST_QUESTIONS = [
    "Is the pain radiating to the arm or jaw?",
    "Are they experiencing shortness of breath?",
    "Do they have a history of heart problems?",
    "Have they taken any medication for this?",
]
BREATHING_QUESTIONS = [
    "Do they have an inhaler available?",
    "Are their lips turning blue?",
    "How long have they been having trouble breathing?",
    "Have they been exposed to any allergens?",
]
FALL_QUESTIONS = [
    "Did they hit their head?",
    "Can they move all limbs?",
    "Is there any visible bleeding?",
    "Did they lose consciousness at any point?",
]
BURN_QUESTIONS = [
    "What caused the burn?",
    "How large is the affected area?",
    "Is the skin red, blistered, or charred?",
    "Has cold water been applied to the area?",
]
BLEEDING_QUESTIONS = [
    "Where is the bleeding coming from?",
    "Is the bleeding severe or pulsing?",
    "Has direct pressure been applied?",
    "Has the bleeding been going on for more than 15 minutes?",
]
DIABETIC_QUESTIONS = [
    "When did they last eat?",
    "Have they taken their insulin?",
    "Are they conscious and able to swallow?",
    "Do they have glucose tablets or juice available?",
]
SEIZURE_QUESTIONS = [
    "How long has the seizure lasted?",
    "Has the person had seizures before?",
    "Are they on medication for seizures?",
    "Did they have any warning signs before the seizure?",
]

DEFAULT_SUGGESTIONS: List[str] = [
    "When did the symptoms start?",
    "Is the person conscious and responsive?",
    "Are there any known medical conditions?",
    "Has this happened before?",
]

FOLLOW_UP_TABLE: KeywordTable[List[str]] = KeywordTable(
    FOLLOW_UP_QUESTIONS, DEFAULT_FOLLOW_UP_QUESTIONS, name="follow_up"
)

SUGGESTION_TABLE: KeywordTable[List[str]] = KeywordTable(
    [
        ("chest pain", CHEST_QUESTIONS),
        ("heart", CHEST_QUESTIONS),
        ("breathing", BREATHING_QUESTIONS),
        ("asthma", BREATHING_QUESTIONS),
        ("fall", FALL_QUESTIONS),
        ("fell", FALL_QUESTIONS),
        ("burn", BURN_QUESTIONS),
        ("fire", BURN_QUESTIONS),
        ("bleed", BLEEDING_QUESTIONS),
        ("blood", BLEEDING_QUESTIONS),
        ("diabetic", DIABETIC_QUESTIONS),
        ("sugar", DIABETIC_QUESTIONS),
        ("seizure", SEIZURE_QUESTIONS),
        ("convulsion", SEIZURE_QUESTIONS),
    ],
    DEFAULT_SUGGESTIONS,
    name="suggestions",
)


def classify_follow_up(emergency_text: Optional[str]) -> FollowUpQuestionSet:
    result = classify(emergency_text, FOLLOW_UP_TABLE)
    return FollowUpQuestionSet(category=result.key or "default", questions=list(result.payload))


def get_follow_up_questions(emergency_text: Optional[str]) -> List[str]:
    return classify_follow_up(emergency_text).questions


def get_contextual_suggestions(emergency_text: Optional[str]) -> List[str]:
    """Broader suggestion list shown while the user is still typing."""
    if not emergency_text:
        return []
    return list(match(emergency_text, SUGGESTION_TABLE))


def append_answers(emergency_text: str, answers: Dict[str, str]) -> str:
    """Append answered follow-up questions to the emergency text.

    The header is added for any non-empty ``answers``; blank answers are
    skipped and the rest are kept as typed.
    """
    if not answers:
        return emergency_text
    out = emergency_text + "\n\nAdditional Information:"
    for question, answer in answers.items():
        if answer and answer.strip():
            out += f"\n- {question}: {answer}"
    return out
