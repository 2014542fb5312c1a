from firstaid.matcher import (
    KeywordTable,
    classify,
    exact_match,
    exact_only,
    exact_then_scored,
    first_success,
    match,
    score_match,
)


def _table(*pairs, default="default"):
    return KeywordTable(pairs, default, name="test")


def test_earlier_key_wins_over_later_overlapping_key():
    table = _table(("bleed", "A"), ("nose bleed", "B"))
    assert match("my nose bleed will not stop", table) == "A"

    reversed_table = _table(("nose bleed", "B"), ("bleed", "A"))
    assert match("my nose bleed will not stop", reversed_table) == "B"


def test_exact_match_is_case_insensitive():
    table = _table(("chest pain", "A"))
    res = exact_match("Sudden CHEST PAIN at rest", table)
    assert res is not None
    assert res.key == "chest pain" and res.phase == "exact"


def test_keys_are_normalised_on_construction():
    table = _table(("  Chest Pain ", "A"))
    assert table.keys() == ["chest pain"]


def test_empty_input_falls_through_to_default():
    table = _table(("burn", "A"))
    res = classify("", table, fallback_scoring=True)
    assert res.phase == "default"
    assert res.key is None
    assert res.payload == "default"
    assert classify(None, table).payload == "default"


def test_scoring_picks_highest_token_overlap():
    table = _table(("hot water burn", "A"), ("cold water shock", "B"))
    res = score_match("cold water", table)
    assert res is not None
    assert res.key == "cold water shock"
    assert res.score == 2


def test_scoring_tie_goes_to_first_key_seen():
    table = _table(("hot water burn", "A"), ("cold water shock", "B"))
    res = classify("water everywhere", table, fallback_scoring=True)
    assert res.phase == "scored"
    assert res.payload == "A"


def test_scoring_tie_goes_to_key_that_reached_max_first():
    table = _table(("hot water burn", "A"), ("cold water shock", "B"))
    # "shock" scores B first; "burn" only brings A level with it.
    res = score_match("shock then burn", table)
    assert res is not None
    assert res.payload == "B"


def test_scoring_ignores_short_tokens():
    table = _table(("hot water burn", "A"))
    assert score_match("hot", table) is None
    assert classify("hot", table, fallback_scoring=True).phase == "default"


def test_scoring_counts_token_inside_key_not_key_inside_token():
    table = _table(("water", "A"))
    # "waterfall" contains the key, but phase 1 already handles that case.
    assert score_match("waterfall", table) is None
    assert exact_match("waterfall", table).payload == "A"


def test_satellite_mode_skips_scoring():
    table = _table(("hot water burn", "A"))
    assert classify("water", table).phase == "default"
    assert classify("water", table, fallback_scoring=True).phase == "scored"


def test_first_success_returns_first_non_empty_phase():
    calls = []

    def never(text, table):
        calls.append("never")
        return None

    def always(text, table):
        calls.append("always")
        return exact_match("burn", table)

    def unreachable(text, table):
        calls.append("unreachable")
        return None

    pipeline = first_success(never, always, unreachable)
    res = pipeline("anything", _table(("burn", "A")))
    assert res.payload == "A"
    assert calls == ["never", "always"]


def test_prebuilt_pipelines():
    table = _table(("hot water burn", "A"))
    assert exact_only("water", table) is None
    assert exact_then_scored("water", table).payload == "A"


def test_extend_front_gives_new_pairs_priority():
    table = _table(("burn", "A"))
    extended = table.extend_front([("burn", "B")])
    assert match("burn", extended) == "B"
    assert match("burn", table) == "A"
    assert extended.default == table.default
