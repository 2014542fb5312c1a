import pytest
from pydantic import ValidationError

from firstaid.knowledge_base import ANAPHYLAXIS
from firstaid.schema import SupplyRule
from firstaid.supplies import DEFAULT_SUPPLIES, at_least, classify_supplies, get_supply_recommendations


def test_burn_supplies_critical_first():
    items = get_supply_recommendations("burn")
    assert items[0].name == "Burn Treatment Gel"
    assert items[0].urgency == "critical"
    assert [i.id for i in items[-2:]] == ["basic-first-aid", "pain-relief"]


def test_default_supplies_when_nothing_matches():
    items = get_supply_recommendations("headache")
    assert items == DEFAULT_SUPPLIES
    assert len(items) == 2
    assert get_supply_recommendations(None) == DEFAULT_SUPPLIES


def test_guidance_text_used_when_hint_has_no_match():
    items = get_supply_recommendations("bad reaction", "Give an antihistamine for the allergic rash.")
    assert items[0].id == "antihistamine"


def test_categories_checked_in_authored_order_across_hint_and_guidance():
    # burn outranks the cut hint whichever input mentions it
    assert get_supply_recommendations("cut finger", "apply burn gel")[0].id == "burn-treatment"
    # swelling (sprain) is checked before allergy
    assert get_supply_recommendations("bad reaction", ANAPHYLAXIS)[0].id == "cold-pack"
    assert get_supply_recommendations("allergy", "reduce the swelling")[0].id == "cold-pack"


def test_hint_only_keys_do_not_match_guidance_text():
    assert get_supply_recommendations("", "cut the tape to size") == DEFAULT_SUPPLIES
    assert get_supply_recommendations("cut finger")[0].id == "antiseptic"


def test_classify_supplies_reports_category():
    assert classify_supplies("sprain")[0] == "sprain"
    assert classify_supplies(None, None) == ("default", DEFAULT_SUPPLIES)


def test_supply_rule_needs_lowercase_keys():
    with pytest.raises(ValidationError):
        SupplyRule(category="x", hint_keys=["Burn"], items=DEFAULT_SUPPLIES)
    with pytest.raises(ValidationError):
        SupplyRule(category="x", items=DEFAULT_SUPPLIES)


def test_limit_keeps_top_items():
    items = get_supply_recommendations("sprain", limit=1)
    assert [i.id for i in items] == ["cold-pack"]
    assert get_supply_recommendations("sprain", limit=0) == []


def test_at_least_filters_by_urgency():
    items = get_supply_recommendations("bleeding")
    assert [i.id for i in at_least(items, "critical")] == ["antiseptic"]
    assert [i.id for i in at_least(items, "recommended")] == ["antiseptic", "bandages", "basic-first-aid"]
    assert at_least(items, "normal") == items
