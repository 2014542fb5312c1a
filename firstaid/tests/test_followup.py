from firstaid.followup import (
    DEFAULT_FOLLOW_UP_QUESTIONS,
    DEFAULT_SUGGESTIONS,
    append_answers,
    get_contextual_suggestions,
    get_follow_up_questions,
)
from firstaid.resolver import resolve_guidance_detailed


def test_unconscious_questions_start_with_breathing():
    questions = get_follow_up_questions("unconscious person not breathing")
    assert questions[0] == "Is the person breathing?"
    assert len(questions) == 4


def test_default_questions():
    questions = get_follow_up_questions("my arm itches")
    assert questions == DEFAULT_FOLLOW_UP_QUESTIONS
    assert len(questions) == 4
    assert get_follow_up_questions("") == DEFAULT_FOLLOW_UP_QUESTIONS


def test_follow_up_uses_exact_match_only():
    # "bleed" is inside the "bleeding" key, which only frequency scoring would count.
    assert get_follow_up_questions("started to bleed") == DEFAULT_FOLLOW_UP_QUESTIONS
    assert get_follow_up_questions("burned hand")[0] == "What caused the burn?"


def test_returned_list_is_a_copy():
    questions = get_follow_up_questions("choking")
    questions.append("extra")
    assert "extra" not in get_follow_up_questions("choking")


def test_contextual_suggestions():
    assert get_contextual_suggestions("") == []
    assert get_contextual_suggestions(None) == []
    assert get_contextual_suggestions("   ") == DEFAULT_SUGGESTIONS
    assert get_contextual_suggestions("he fell off a ladder")[0] == "Did they hit their head?"
    assert get_contextual_suggestions("heart racing")[0] == "Is the pain radiating to the arm or jaw?"
    assert get_contextual_suggestions("toothache") == DEFAULT_SUGGESTIONS


def test_append_answers_formats_and_skips_blank():
    text = append_answers(
        "person collapsed",
        {"Is the person breathing?": "yes", "Did you see what happened?": "  "},
    )
    assert text == "person collapsed\n\nAdditional Information:\n- Is the person breathing?: yes"
    assert append_answers("person collapsed", {}) == "person collapsed"


def test_append_answers_keeps_header_when_all_blank():
    assert append_answers("x", {"q?": " "}) == "x\n\nAdditional Information:"


def test_append_answers_keeps_answer_as_typed():
    assert append_answers("x", {"q?": " yes "}) == "x\n\nAdditional Information:\n- q?:  yes "


def test_answered_text_still_resolves_on_original_complaint():
    text = append_answers("someone is choking", {"Can the person speak or cough?": "no"})
    assert resolve_guidance_detailed(text).key == "choking"


def test_follow_up_set_carries_category():
    from firstaid.followup import classify_follow_up

    assert classify_follow_up("bad burn on arm").category == "burn"
    assert classify_follow_up("dizzy").category == "default"
