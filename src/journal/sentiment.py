"""Lexicon-based emotion analysis for journal entries."""

import re
from collections import Counter
from dataclasses import asdict, dataclass, field

from dates import date_part
from shared_types import EmotionCategory, MoodType, TimelinePeriod, normalize_mood

from .lexicon import EMOTION_ACTIVITY_SUGGESTIONS, EmotionWord, lookup

_PUNCTUATION = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")

# Fixed iteration order; earlier categories win ties
EMOTION_ORDER = tuple(EmotionCategory)

MOOD_TO_EMOTION = {
    MoodType.JOY: EmotionCategory.JOY,
    MoodType.SADNESS: EmotionCategory.SADNESS,
    MoodType.ANGER: EmotionCategory.ANGER,
    MoodType.FEAR: EmotionCategory.FEAR,
    MoodType.SURPRISE: EmotionCategory.SURPRISE,
    MoodType.CALM: EmotionCategory.NEUTRAL,
    MoodType.NEUTRAL: EmotionCategory.NEUTRAL,
}

HIGH_ALIGNMENT = 0.7
LOW_ALIGNMENT = 0.3


@dataclass
class SemanticAnalysisResult:
    dominant_emotion: EmotionCategory
    emotion_distribution: dict[EmotionCategory, float]
    highlighted_words: list[EmotionWord]
    mood_alignment: float  # 0-1 share of the distribution matching the selected mood
    suggested_tags: list[str]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class EmotionTrend:
    date: str
    emotions: dict[EmotionCategory, float]


@dataclass
class TimelineAnalysis:
    period: TimelinePeriod
    emotion_trends: list[EmotionTrend] = field(default_factory=list)


def tokenize(text) -> list[str]:
    """Lowercase, strip punctuation, split on whitespace."""
    if not isinstance(text, str):
        return []
    return _PUNCTUATION.sub("", text.lower()).split()


def find_emotion_words(tokens: list[str]) -> list[EmotionWord]:
    """Lexicon matches in token order, duplicates kept."""
    return [w for w in (lookup(t) for t in tokens) if w is not None]


def emotion_distribution(words: list[EmotionWord]) -> dict[EmotionCategory, float]:
    """Intensity-weighted share per category, summing to 100.

    No matches yields 100% neutral.
    """
    distribution = {category: 0.0 for category in EMOTION_ORDER}
    for word in words:
        distribution[word.category] += word.intensity

    total = sum(distribution.values())
    if total <= 0:
        distribution[EmotionCategory.NEUTRAL] = 100.0
        return distribution

    return {category: value / total * 100 for category, value in distribution.items()}


def dominant_emotion(distribution: dict[EmotionCategory, float]) -> EmotionCategory:
    dominant = EmotionCategory.NEUTRAL
    best = 0.0
    for category in EMOTION_ORDER:
        value = distribution.get(category, 0.0)
        if value > best:
            dominant, best = category, value
    return dominant


def mood_alignment(selected_mood, distribution: dict[EmotionCategory, float]) -> float:
    """Share (0-1) of the detected emotion that matches the user's own mood."""
    emotion = MOOD_TO_EMOTION[normalize_mood(selected_mood)]
    return distribution.get(emotion, 0.0) / 100


def suggest_tags(emotion: EmotionCategory) -> list[str]:
    return list(EMOTION_ACTIVITY_SUGGESTIONS.get(emotion, ()))


def analyze_entry(entry) -> SemanticAnalysisResult:
    """Analyze the emotional content of a journal entry.

    Only ``content`` and ``mood`` are read; dates are ignored here.
    """
    words = find_emotion_words(tokenize(getattr(entry, "content", "")))
    distribution = emotion_distribution(words)
    dominant = dominant_emotion(distribution)

    return SemanticAnalysisResult(
        dominant_emotion=dominant,
        emotion_distribution=distribution,
        highlighted_words=words,
        mood_alignment=mood_alignment(getattr(entry, "mood", None), distribution),
        suggested_tags=suggest_tags(dominant),
    )


def _period_label(period) -> TimelinePeriod:
    try:
        return TimelinePeriod(period)
    except (ValueError, TypeError):
        return TimelinePeriod.DAY


def analyze_timeline(entries, period: str = TimelinePeriod.DAY) -> TimelineAnalysis:
    """Emotion distribution per calendar date, in first-seen date order.

    The first entry seen for a date determines that date's distribution;
    later same-day entries are not merged in. ``period`` is only a label;
    unknown values fall back to day.
    """
    by_date: dict[str, dict[EmotionCategory, float]] = {}
    for entry in entries or []:
        day = date_part(getattr(entry, "created_at", None))
        if day not in by_date:
            by_date[day] = emotion_distribution(
                find_emotion_words(tokenize(getattr(entry, "content", "")))
            )

    return TimelineAnalysis(
        period=_period_label(period),
        emotion_trends=[EmotionTrend(date=day, emotions=emotions) for day, emotions in by_date.items()],
    )


def get_insights(results: list[SemanticAnalysisResult]) -> list[str]:
    """Short observations across several analyzed entries."""
    if not results:
        return []

    most_common = Counter(r.dominant_emotion for r in results).most_common(1)[0][0]
    insights = [f"Your entries often express {most_common}"]

    average = sum(r.mood_alignment for r in results) / len(results)
    if average > HIGH_ALIGNMENT:
        insights.append("Your mood selections closely match your written emotions")
    elif average < LOW_ALIGNMENT:
        insights.append(
            "Consider reflecting on how you rate your moods versus how you express them in writing"
        )

    return insights
