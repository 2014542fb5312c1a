import pytest

from firstaid import resolver
from firstaid.knowledge_base import (
    CHOKING,
    DEFAULT_GUIDANCE,
    GUIDANCE_TABLE,
    HYPOTHERMIA,
    NOSEBLEED,
    SAFE_FALLBACK_GUIDANCE,
)
from firstaid.resolver import resolve_guidance, resolve_guidance_detailed


@pytest.mark.parametrize("text", ["", "   ", "xqzv blorpt fnargh", "12345 67890", "ñññ ✨✨"])
def test_unmatched_input_returns_generic_guidance(text):
    out = resolve_guidance(text)
    assert out == DEFAULT_GUIDANCE
    assert "emergency services" in out


def test_none_input_is_treated_as_empty():
    assert resolve_guidance(None) == DEFAULT_GUIDANCE


@pytest.mark.parametrize(
    "text",
    [
        "choking",
        "CHOKING",
        "my kid is choking on a grape",
        "man choking at dinner and bleeding from a cut",
        "someone fell\n\nAdditional Information:\n- Is the person choking?: yes",
    ],
)
def test_choking_always_gets_choking_protocol(text):
    out = resolve_guidance(text)
    assert out.startswith(CHOKING.splitlines()[0])


def test_resolution_is_repeatable():
    first = resolve_guidance("nosebleed")
    second = resolve_guidance("nosebleed")
    assert first == second
    assert first == NOSEBLEED


def test_fall_with_head_injury_scenario():
    res = resolve_guidance_detailed("person fell and hit their head, not responding")
    assert res.phase == "exact"
    assert res.key in ("fell", "hit head", "hit their head")
    assert res.output.startswith("1. Call emergency services for serious injury.")


def test_guidance_is_numbered_steps():
    for key, guidance in GUIDANCE_TABLE:
        lines = guidance.splitlines()
        assert lines[0].startswith("1. "), key
        assert all(line.startswith(f"{i}. ") for i, line in enumerate(lines, start=1)), key


def test_fallback_scoring_on_knowledge_base():
    res = resolve_guidance_detailed("person has low body temperature after swim")
    assert res.phase == "scored"
    assert res.key == "body temperature drop"
    assert res.output == HYPOTHERMIA


def test_compound_keys_win_over_contained_keys():
    assert resolve_guidance_detailed("collapsed from heat stroke").key == "heat stroke"
    assert resolve_guidance_detailed("bad sunburn on shoulders").key == "sunburn"
    assert resolve_guidance_detailed("low blood sugar, shaky").key == "low blood sugar"


def test_no_personal_prefix_without_context():
    res = resolve_guidance_detailed("check my medical info, chest pain")
    assert res.prefix == ""
    assert res.personalized is False


def test_internal_failure_returns_safe_fallback(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("table corrupted")

    monkeypatch.setattr(resolver, "classify", boom)
    res = resolve_guidance_detailed("choking")
    assert res.failed is True
    assert res.output == SAFE_FALLBACK_GUIDANCE
    assert "emergency services" in resolve_guidance("choking")


def test_custom_table_is_used():
    from firstaid.matcher import KeywordTable

    table = KeywordTable([("zebra", "1. Back away slowly.")], "1. Call emergency services.", name="custom")
    assert resolve_guidance_detailed("a zebra kicked me", table=table).output == "1. Back away slowly."
    assert resolve_guidance_detailed("nosebleed", table=table).output == "1. Call emergency services."
