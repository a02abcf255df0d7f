"""Property-style checks: analytics never raise and never emit non-finite numbers."""

import math
import random

import pytest

from journal.sentiment import analyze_entry, analyze_timeline
from mood.correlation import analyze_activity_correlations, generate_insights
from mood.summary import TodaysSummary, calculate_todays_summary
from shared_types import ACTIVITY_TAGS, MoodType

TODAY = "2024-01-15"

WEIRD_INTENSITIES = [
    float("nan"),
    float("inf"),
    float("-inf"),
    None,
    "0.5",
    True,
    -3,
    42,
    0,
    1,
    0.37,
    10**400,
    -(10**400),
    10**300,
    1e306,
    1.7e308,
]
WEIRD_MOODS = [*MoodType, "happy", "sad", "stress", "", None, 7, "JOY", "🙂"]
WEIRD_TIMESTAMPS = [f"{TODAY}T08:00:00Z", f"{TODAY}T23:59:59.999Z", "2024-01-14T10:00:00Z", "", "garbage", None]


def _numbers(value):
    """Yield every numeric leaf in a nested structure of dicts/lists/dataclass dicts."""
    if isinstance(value, bool):
        return
    if isinstance(value, (int, float)):
        yield value
    elif isinstance(value, dict):
        for v in value.values():
            yield from _numbers(v)
    elif isinstance(value, (list, tuple)):
        for v in value:
            yield from _numbers(v)


def _random_moods(make_mood, rng, n):
    return [
        make_mood(
            rng.choice(WEIRD_MOODS),
            rng.choice(WEIRD_INTENSITIES),
            rng.sample(ACTIVITY_TAGS, rng.randint(0, 3)) + rng.choice([[], ["Exercise"]]),
            rng.choice(WEIRD_TIMESTAMPS) or "x",
        )
        for _ in range(n)
    ]


@pytest.mark.parametrize("seed", range(20))
def test_correlation_outputs_are_finite(seed, mood_entry):
    rng = random.Random(seed)
    correlations = analyze_activity_correlations(_random_moods(mood_entry, rng, rng.randint(0, 40)))
    insights = generate_insights(correlations)

    for number in _numbers([c.to_dict() for c in correlations] + [i.to_dict() for i in insights]):
        assert math.isfinite(number)


@pytest.mark.parametrize("seed", range(20))
def test_summary_outputs_are_finite(seed, mood_entry, journal_entry, fixed_now):
    rng = random.Random(seed)
    moods = _random_moods(mood_entry, rng, rng.randint(0, 20))
    for entry in moods:
        entry.timestamp = rng.choice(WEIRD_TIMESTAMPS)
    journals = [journal_entry("x", mood=rng.choice(WEIRD_MOODS), created_at=f"{TODAY}T09:00:00Z")] * rng.randint(0, 3)

    summary = calculate_todays_summary(moods, journals, now=fixed_now)

    for number in _numbers(summary.to_dict()):
        assert math.isfinite(number)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "Good day.",
        "happy " * 20000,
        "😀🙃 \x00\x07\x1b[31m ünïcödé sad!!!",
        "   \n\t  ",
        "a" * 50000,
    ],
)
def test_analyze_entry_never_raises(content, journal_entry):
    result = analyze_entry(journal_entry(content, created_at="definitely not a date"))

    assert sum(result.emotion_distribution.values()) == pytest.approx(100)
    assert 0 <= result.mood_alignment <= 1
    for number in _numbers(result.emotion_distribution):
        assert math.isfinite(number)


def test_analyze_entry_tolerates_missing_fields():
    class Bare:
        pass

    result = analyze_entry(Bare())
    assert result.emotion_distribution["neutral"] == 100


def test_timeline_with_odd_dates(journal_entry):
    entries = [journal_entry("happy", created_at=value) for value in ("garbage", "", "2024-01-01")]
    assert len(analyze_timeline(entries, "week").emotion_trends) == 3


class TestEmptyStateEquivalence:
    """Clearing the stores gives the same results as never populating them."""

    def test_cleared_stores_match_empty(self, mood_store, populated_journal, sample_mood_entries, mood_entry, fixed_now):
        never_correlations = analyze_activity_correlations(mood_store.list_all())
        never_summary = calculate_todays_summary(mood_store.list_all(), [], now=fixed_now)

        for entry in sample_mood_entries:
            mood_store.save(mood_entry(entry.mood, entry.intensity, entry.activities, f"{TODAY}T10:00:00Z"))
        assert analyze_activity_correlations(mood_store.list_all())

        mood_store.clear()
        populated_journal.clear()

        assert analyze_activity_correlations(mood_store.list_all()) == never_correlations == []
        summary = calculate_todays_summary(mood_store.list_all(), populated_journal.list_all(), now=fixed_now)
        assert summary == never_summary == TodaysSummary()
        assert generate_insights([]) == []
