import random

import pytest

import settings
from metrics import aggregate, category_breakdown
from models import Entry


def _e(quoted, final, category=""):
    return Entry(supplier="S", quoted_value=quoted, final_value=final, account_category=category)


def test_two_entry_scenario(sample_entries):
    agg = aggregate(sample_entries)

    assert agg.total_quoted == 1500
    assert agg.total_final == 1300
    assert agg.absolute_savings == 200
    assert agg.savings_percent == pytest.approx(13.333, abs=1e-3)
    assert agg.top_category == "X"
    assert agg.top_category_value == 1300


def test_empty_entries():
    agg = aggregate([])

    assert agg.total_quoted == 0
    assert agg.total_final == 0
    assert agg.absolute_savings == 0
    assert agg.savings_percent == 0
    assert agg.per_category_final_sum == {}
    assert agg.top_category == settings.NO_CATEGORY
    assert agg.top_category_value == 0


def test_tie_goes_to_first_seen_category():
    entries = [_e(100, 50, "A"), _e(100, 30, "B"), _e(100, 20, "B")]
    agg = aggregate(entries)
    assert agg.per_category_final_sum == {"A": 50, "B": 50}
    assert agg.top_category == "A"

    reversed_order = [_e(100, 30, "B"), _e(100, 50, "A"), _e(100, 20, "B")]
    assert aggregate(reversed_order).top_category == "B"


def test_strictly_greater_later_category_wins():
    agg = aggregate([_e(100, 50, "A"), _e(100, 50.01, "B")])
    assert agg.top_category == "B"
    assert agg.top_category_value == 50.01


def test_zero_sum_categories_still_pick_first():
    agg = aggregate([_e(0, 0, "A"), _e(0, 0, "B")])
    assert agg.top_category == "A"
    assert agg.top_category_value == 0


def test_missing_category_uses_unspecified_key():
    agg = aggregate([_e(10, 5), _e(10, 4, "A")])
    assert list(agg.per_category_final_sum) == [settings.UNSPECIFIED_CATEGORY, "A"]
    assert agg.top_category == settings.UNSPECIFIED_CATEGORY


def test_negative_savings_percent():
    agg = aggregate([_e(100, 150)])
    assert agg.absolute_savings == -50
    assert agg.savings_percent == pytest.approx(-50.0)


def test_zero_quoted_gives_zero_percent():
    agg = aggregate([_e(0, 100)])
    assert agg.absolute_savings == -100
    assert agg.savings_percent == 0


def test_savings_identity_holds_exactly():
    rng = random.Random(7)
    for _ in range(50):
        entries = [_e(rng.uniform(0, 1e6), rng.uniform(0, 1e6), rng.choice("ABC")) for _ in range(rng.randint(0, 20))]
        agg = aggregate(entries)
        assert agg.absolute_savings == agg.total_quoted - agg.total_final
        if agg.total_quoted > 0:
            assert agg.savings_percent == agg.absolute_savings / agg.total_quoted * 100
        else:
            assert agg.savings_percent == 0


def test_category_breakdown_keeps_first_seen_order():
    grp = category_breakdown([_e(10, 8, "Z"), _e(20, 15, "A"), _e(5, 5, "Z")])

    assert list(grp["category"]) == ["Z", "A"]
    assert list(grp["quoted"]) == [15, 20]
    assert list(grp["final"]) == [13, 15]
    assert list(grp["savings"]) == [2, 5]


def test_category_breakdown_empty():
    grp = category_breakdown([])
    assert grp.empty
    assert list(grp.columns) == ["category", "quoted", "final", "savings"]
