"""Shared enums and types for mood journey."""

from enum import StrEnum


class MoodType(StrEnum):
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    SURPRISE = "surprise"
    CALM = "calm"
    NEUTRAL = "neutral"


class EmotionCategory(StrEnum):
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    SURPRISE = "surprise"
    NEUTRAL = "neutral"


class Confidence(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ActivityTrend(StrEnum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class SummaryTrend(StrEnum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


class InsightType(StrEnum):
    BOOST = "boost"
    CHALLENGE = "challenge"
    COMBINATION = "combination"
    TREND = "trend"


class TimelinePeriod(StrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


ACTIVITY_TAGS = (
    "Exercise",
    "Work",
    "Social",
    "Family",
    "Hobby",
    "Rest",
    "Entertainment",
    "Learning",
    "Chores",
    "Nature",
    "Travel",
    "Shopping",
    "Health",
    "Food",
    "Sleep",
    "Friends",
    "Study",
    "Meditation",
    "Reading",
    "Music",
)

_ACTIVITY_LOOKUP = {tag.lower(): tag for tag in ACTIVITY_TAGS}


def canonical_activity(tag: str) -> str:
    """Standard spelling of a known activity tag, else the stripped input."""
    tag = str(tag).strip()
    return _ACTIVITY_LOOKUP.get(tag.lower(), tag)


# Five-value vocabulary of older app versions, plus a few free-form labels
LEGACY_MOOD_ALIASES = {
    "happy": MoodType.JOY,
    "sad": MoodType.SADNESS,
    "angry": MoodType.ANGER,
    "stress": MoodType.ANGER,
    "excited": MoodType.JOY,
    "anxious": MoodType.FEAR,
    "peaceful": MoodType.CALM,
}


def normalize_mood(mood) -> MoodType:
    """Map a raw mood value onto the 7-value vocabulary. Unknown -> neutral."""
    if not isinstance(mood, str):
        return MoodType.NEUTRAL
    try:
        return MoodType(mood)
    except ValueError:
        return LEGACY_MOOD_ALIASES.get(mood, MoodType.NEUTRAL)
