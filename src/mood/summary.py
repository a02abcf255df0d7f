"""Today's rollup for the dashboard: counts, dominant mood, top activities, trend."""

import math
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Optional

from dates import chronological_key, date_part
from shared_types import MoodType, SummaryTrend, normalize_mood

# 1-7 scale, distinct from the 1-10 table in mood.correlation
SUMMARY_MOOD_SCORES = {
    MoodType.SADNESS: 1,
    MoodType.ANGER: 2,
    MoodType.FEAR: 3,
    MoodType.NEUTRAL: 4,
    MoodType.SURPRISE: 5,
    MoodType.CALM: 6,
    MoodType.JOY: 7,
}
DEFAULT_SUMMARY_SCORE = 4
TREND_THRESHOLD = 0.5
MIN_TREND_ENTRIES = 2
TOP_ACTIVITY_COUNT = 3

MOOD_LABELS = {
    MoodType.JOY: "Joyful",
    MoodType.SADNESS: "Reflective",
    MoodType.ANGER: "Intense",
    MoodType.FEAR: "Cautious",
    MoodType.SURPRISE: "Surprised",
    MoodType.CALM: "Peaceful",
    MoodType.NEUTRAL: "Balanced",
}

TREND_LABELS = {
    SummaryTrend.IMPROVING: "Mood improving throughout the day",
    SummaryTrend.DECLINING: "Mood declining throughout the day",
    SummaryTrend.STABLE: "Consistent mood today",
    SummaryTrend.INSUFFICIENT_DATA: "Not enough data for trend",
}


@dataclass
class TodaysSummary:
    mood_count: int = 0
    journal_count: int = 0
    dominant_mood: Optional[MoodType] = None
    top_activities: list[str] = field(default_factory=list)
    mood_trend: SummaryTrend = SummaryTrend.INSUFFICIENT_DATA
    average_intensity: float = 0.0
    has_data: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SummaryText:
    mood_text: str
    activity_text: str
    trend_text: str
    intensity_text: str


def _finite_intensity(entry) -> Optional[float]:
    value = getattr(entry, "intensity", None)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def _mean(values: list[float]) -> float:
    mean = sum(values) / len(values)
    if not math.isfinite(mean):
        # Intermediate sum overflowed
        mean = sum(v / len(values) for v in values)
    return mean


def _activities(entry) -> list:
    activities = getattr(entry, "activities", None)
    return list(activities) if isinstance(activities, (list, tuple)) else []


class TodaySummaryService:
    """Stateless: every method is a pure function of its inputs and the clock."""

    @staticmethod
    def calculate_todays_summary(mood_entries, journal_entries, now: Optional[datetime] = None) -> TodaysSummary:
        """Summarize mood and journal entries logged today (UTC date).

        Args:
            mood_entries: MoodEntry records, filtered on ``timestamp``
            journal_entries: JournalEntry records, filtered on ``created_at``
            now: Override for the current moment

        Returns:
            TodaysSummary; the empty default when nothing was logged today.
        """
        now = now or datetime.now(timezone.utc)
        if now.tzinfo:
            now = now.astimezone(timezone.utc)
        today = now.date().isoformat()

        todays_moods = [e for e in mood_entries or [] if date_part(getattr(e, "timestamp", None)) == today]
        todays_journals = [
            e for e in journal_entries or [] if date_part(getattr(e, "created_at", None)) == today
        ]

        if not todays_moods and not todays_journals:
            return TodaysSummary()

        return TodaysSummary(
            mood_count=len(todays_moods),
            journal_count=len(todays_journals),
            dominant_mood=TodaySummaryService._dominant_mood(todays_moods, todays_journals),
            top_activities=TodaySummaryService._top_activities(todays_moods, todays_journals),
            mood_trend=TodaySummaryService._mood_trend(todays_moods),
            average_intensity=TodaySummaryService._average_intensity(todays_moods),
            has_data=True,
        )

    @staticmethod
    def _dominant_mood(mood_entries, journal_entries) -> Optional[MoodType]:
        counts = {mood: 0 for mood in MoodType}
        for entry in [*mood_entries, *journal_entries]:
            counts[normalize_mood(getattr(entry, "mood", None))] += 1

        dominant = None
        best = 0
        for mood, count in counts.items():
            if count > best:
                dominant, best = mood, count
        return dominant

    @staticmethod
    def _top_activities(mood_entries, journal_entries) -> list[str]:
        counts: dict[str, int] = {}
        for entry in [*mood_entries, *journal_entries]:
            for activity in _activities(entry):
                counts[activity] = counts.get(activity, 0) + 1

        ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        return [activity for activity, _ in ranked[:TOP_ACTIVITY_COUNT]]

    @staticmethod
    def _mood_trend(mood_entries) -> SummaryTrend:
        """Second-half vs first-half mean of mood score x intensity.

        Odd-length samples give the extra entry to the first half.
        """
        scored = [(e, _finite_intensity(e)) for e in mood_entries]
        scored = [(e, i) for e, i in scored if i is not None]
        scored.sort(key=lambda pair: chronological_key(getattr(pair[0], "timestamp", None)))
        values = [
            SUMMARY_MOOD_SCORES.get(normalize_mood(e.mood), DEFAULT_SUMMARY_SCORE) * intensity
            for e, intensity in scored
        ]
        values = [v for v in values if math.isfinite(v)]
        if len(values) < MIN_TREND_ENTRIES:
            return SummaryTrend.INSUFFICIENT_DATA

        mid = math.ceil(len(values) / 2)
        first = _mean(values[:mid])
        second = _mean(values[mid:])

        difference = second - first
        if abs(difference) < TREND_THRESHOLD:
            return SummaryTrend.STABLE
        return SummaryTrend.IMPROVING if difference > 0 else SummaryTrend.DECLINING

    @staticmethod
    def _average_intensity(mood_entries) -> float:
        values = [i for i in (_finite_intensity(e) for e in mood_entries) if i is not None]
        if not values:
            return 0.0
        return _mean(values)

    @staticmethod
    def format_summary_text(summary: TodaysSummary) -> SummaryText:
        """Render the summary as four short display strings."""
        total = summary.mood_count + summary.journal_count
        if summary.dominant_mood:
            mood_text = f"Mostly feeling {MOOD_LABELS[MoodType(summary.dominant_mood)].lower()}"
        else:
            mood_text = f"{total} {'entry' if total == 1 else 'entries'} today"

        if summary.top_activities:
            activity_text = f"Top activities: {', '.join(summary.top_activities[:2])}"
        else:
            activity_text = "No activities logged yet"

        intensity_text = ""
        if summary.average_intensity > 0:
            intensity_text = f"Average intensity: {summary.average_intensity * 10:.1f}/10"

        return SummaryText(
            mood_text=mood_text,
            activity_text=activity_text,
            trend_text=TREND_LABELS[SummaryTrend(summary.mood_trend)],
            intensity_text=intensity_text,
        )


def calculate_todays_summary(mood_entries, journal_entries, now: Optional[datetime] = None) -> TodaysSummary:
    return TodaySummaryService.calculate_todays_summary(mood_entries, journal_entries, now=now)


def format_summary_text(summary: TodaysSummary) -> SummaryText:
    return TodaySummaryService.format_summary_text(summary)
