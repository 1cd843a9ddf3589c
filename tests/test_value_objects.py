import pytest

from trophy_card.domain.entities import RawStats
from trophy_card.domain.exceptions import MissingUsernameError, TrophyCardError
from trophy_card.domain.value_objects import StatRequest


def test_from_query_strips_username():
    request = StatRequest.from_query("  octocat ", "light")
    assert request == StatRequest(username="octocat", theme="light")


def test_theme_is_optional():
    assert StatRequest.from_query("octocat").theme is None


@pytest.mark.parametrize("username", [None, "", "   "])
def test_missing_username_rejected(username):
    with pytest.raises(MissingUsernameError) as excinfo:
        StatRequest.from_query(username)
    assert isinstance(excinfo.value, TrophyCardError)
    assert excinfo.value.public_message == "Error: Username is required"


@pytest.mark.parametrize(
    "field", ["total_stars", "total_commits", "total_followers", "total_issues", "repository_count"]
)
def test_raw_stats_rejects_negative_counts(field):
    counts = {"total_stars": 1, "total_commits": 1, "total_followers": 1, field: -5}
    with pytest.raises(ValueError, match="non-negative"):
        RawStats(**counts)


def test_raw_stats_accepts_zero():
    assert RawStats(total_stars=0, total_commits=0, total_followers=0).total_stars == 0
