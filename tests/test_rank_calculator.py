import pytest

from trophy_card.domain.entities import RankTier, RawStats
from trophy_card.domain.value_objects import RankThresholds
from trophy_card.services.rank_calculator import (
    COMMIT_THRESHOLDS,
    FOLLOWER_THRESHOLDS,
    STAR_THRESHOLDS,
    rank,
)
from trophy_card.services.trophies import build_trophies

ALL_TABLES = [STAR_THRESHOLDS, COMMIT_THRESHOLDS, FOLLOWER_THRESHOLDS]


@pytest.mark.parametrize("thresholds", ALL_TABLES)
def test_zero_is_lowest_tier(thresholds):
    assert rank(0, thresholds) is RankTier.D


@pytest.mark.parametrize("thresholds", ALL_TABLES)
def test_cutoffs_are_inclusive(thresholds):
    assert rank(thresholds.c, thresholds) is RankTier.C
    assert rank(thresholds.b - 1, thresholds) is RankTier.C
    assert rank(thresholds.b, thresholds) is RankTier.B
    assert rank(thresholds.sss - 1, thresholds) is RankTier.SS
    assert rank(thresholds.sss, thresholds) is RankTier.SSS


@pytest.mark.parametrize("thresholds", ALL_TABLES)
def test_rank_is_monotonic(thresholds):
    values = sorted({0, 1, 2, 19, 20, 49, 50, 99, 100, 499, 500, 999, 1000, 4999, 5000, 9999, 10_000, 10**7})
    orders = [rank(v, thresholds).order for v in values]
    assert orders == sorted(orders)


def test_star_table():
    assert [rank(v, STAR_THRESHOLDS).value for v in (1, 20, 50, 100, 500, 2000)] == [
        "C", "B", "A", "S", "SS", "SSS",
    ]


def test_commit_table():
    assert [rank(v, COMMIT_THRESHOLDS).value for v in (1, 100, 500, 1000, 5000, 10_000)] == [
        "C", "B", "A", "S", "SS", "SSS",
    ]


def test_follower_table():
    assert [rank(v, FOLLOWER_THRESHOLDS).value for v in (1, 20, 50, 100, 500, 1000)] == [
        "C", "B", "A", "S", "SS", "SSS",
    ]


def test_tier_order():
    assert [t.value for t in sorted(RankTier, key=lambda t: t.order)] == [
        "D", "C", "B", "A", "S", "SS", "SSS",
    ]


def test_thresholds_must_ascend():
    with pytest.raises(ValueError):
        RankThresholds(c=1, b=50, a=20, s=100, ss=500, sss=1000)


def test_thresholds_must_be_non_negative():
    with pytest.raises(ValueError):
        RankThresholds(c=-1, b=20, a=50, s=100, ss=500, sss=1000)


def test_build_trophies_top_tier():
    trophies = build_trophies(RawStats(total_stars=2500, total_commits=12_000, total_followers=1200))
    assert [(t.name, t.value, t.rank) for t in trophies] == [
        ("Stars", 2500, RankTier.SSS),
        ("Commits", 12_000, RankTier.SSS),
        ("Followers", 1200, RankTier.SSS),
    ]


def test_build_trophies_empty_account():
    trophies = build_trophies(RawStats(total_stars=0, total_commits=0, total_followers=0))
    assert [t.name for t in trophies] == ["Stars", "Commits", "Followers"]
    assert [t.rank for t in trophies] == [RankTier.D, RankTier.D, RankTier.D]
