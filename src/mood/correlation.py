"""Activity-to-mood correlation analysis over mood entries."""

import math
from dataclasses import asdict, dataclass, field
from typing import NamedTuple, Optional

import structlog

from dates import chronological_key
from shared_types import ActivityTrend, Confidence, InsightType, normalize_mood

from .models import MoodEntry

logger = structlog.get_logger()

# 1-10 scale. Legacy labels are scored directly, not through normalize_mood.
MOOD_TO_SCORE = {
    "sadness": 2,
    "anger": 3,
    "fear": 3,
    "neutral": 5,
    "surprise": 6,
    "calm": 7,
    "joy": 9,
    "sad": 2,
    "happy": 9,
    "stress": 3,
    "excited": 8,
    "anxious": 3,
    "peaceful": 7,
}
DEFAULT_MOOD_SCORE = 5
DEFAULT_BASELINE = 5.0

TREND_THRESHOLD = 0.2
MIN_TREND_SAMPLES = 3
BOOST_THRESHOLD = 0.2
COMBINATION_THRESHOLD = 0.1
MAX_INSIGHTS = 4
INVALID_SCORE_SORT_VALUE = -999


@dataclass
class ActivityCorrelation:
    activity: str
    total_entries: int
    average_mood_score: float  # combined mood + intensity, 1-10
    average_intensity: float  # intensity x 10
    mood_distribution: dict[str, float]
    improvement_score: float  # average_mood_score - baseline
    frequency: float  # share of activity-bearing entries; >1 with duplicate tags
    confidence: Confidence
    trend: Optional[ActivityTrend] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ActivityInsight:
    type: InsightType
    message: str
    activities: list[str] = field(default_factory=list)
    score: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)


class _Sample(NamedTuple):
    mood: str
    mood_score: float
    intensity: float
    combined_score: float
    timestamp: str


def _as_float(value) -> float:
    """Float value of a numeric input. NaN when not numeric or too large for a float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return math.nan
    try:
        return float(value)
    except OverflowError:
        return math.nan


def _is_finite(value) -> bool:
    return math.isfinite(_as_float(value))


def _round_half_up(value: float, digits: int) -> float:
    factor = 10**digits
    scaled = value * factor
    if not math.isfinite(scaled):
        # Too large to carry a fractional part
        return value
    return math.floor(scaled + 0.5) / factor


def _mean(values: list[float]) -> float:
    mean = sum(values) / len(values)
    if not math.isfinite(mean):
        # Intermediate sum overflowed
        mean = sum(v / len(values) for v in values)
    return mean


def mood_score(mood) -> int:
    """Numeric 1-10 score for a raw mood label."""
    if not isinstance(mood, str):
        return DEFAULT_MOOD_SCORE
    return MOOD_TO_SCORE.get(mood, DEFAULT_MOOD_SCORE)


def _scaled_intensity(intensity) -> float:
    return _as_float(intensity) * 10


def combined_score(entry: MoodEntry) -> float:
    """(mood score + intensity x 10) / 2. NaN when intensity is not numeric."""
    return (mood_score(entry.mood) + _scaled_intensity(entry.intensity)) / 2


def _activities(entry: MoodEntry) -> list:
    activities = getattr(entry, "activities", None)
    return list(activities) if isinstance(activities, (list, tuple)) else []


class ActivityCorrelationAnalyzer:
    """Score each activity's effect on mood relative to a baseline."""

    def analyze_activity_correlations(self, mood_entries: list[MoodEntry]) -> list[ActivityCorrelation]:
        """Correlate activities with mood, best first.

        Entries without activities are excluded from both the groups and the
        baseline population.
        """
        if not mood_entries:
            return []

        groups: dict[str, list[_Sample]] = {}
        with_activities = []
        for entry in mood_entries:
            activities = _activities(entry)
            if not activities:
                continue
            with_activities.append(entry)

            sample = _Sample(
                mood=entry.mood,
                mood_score=mood_score(entry.mood),
                intensity=_scaled_intensity(entry.intensity),
                combined_score=combined_score(entry),
                timestamp=entry.timestamp,
            )
            for activity in activities:
                groups.setdefault(activity, []).append(sample)

        baseline = self.calculate_baseline(with_activities)

        results = []
        for activity, samples in groups.items():
            valid_scores = [s.combined_score for s in samples if _is_finite(s.combined_score)]
            if not valid_scores:
                logger.debug("activity_skipped_no_valid_scores", activity=activity)
                continue
            valid_intensities = [s.intensity for s in samples if _is_finite(s.intensity)]

            average_score = _mean(valid_scores)
            average_intensity = _mean(valid_intensities) if valid_intensities else 0.0
            improvement = average_score - baseline if _is_finite(baseline) else 0.0
            if not _is_finite(improvement):
                improvement = 0.0

            results.append(
                ActivityCorrelation(
                    activity=activity,
                    total_entries=len(samples),
                    average_mood_score=_round_half_up(average_score, 1),
                    average_intensity=_round_half_up(average_intensity, 1),
                    mood_distribution=self._mood_distribution(samples),
                    improvement_score=_round_half_up(improvement, 2),
                    frequency=_round_half_up(len(samples) / len(with_activities), 2),
                    confidence=self.calculate_confidence(len(samples)),
                    trend=self.calculate_trend(samples),
                )
            )

        results.sort(
            key=lambda c: c.improvement_score
            if _is_finite(c.improvement_score)
            else INVALID_SCORE_SORT_VALUE,
            reverse=True,
        )
        logger.debug(
            "activity_correlations_computed",
            entries=len(mood_entries),
            activities=len(results),
            baseline=round(baseline, 2),
        )
        return results

    def generate_insights(
        self, correlations: list[ActivityCorrelation], limit: int = MAX_INSIGHTS
    ) -> list[ActivityInsight]:
        """Turn sorted correlations into up to four ranked insights.

        Order: boost, challenge, trend, combination. Only qualifying ones
        are included.
        """
        valid = [c for c in correlations if _is_finite(c.improvement_score)]
        if not valid:
            return []

        insights = []

        best = valid[0]
        if best.improvement_score > BOOST_THRESHOLD and best.confidence != Confidence.LOW:
            insights.append(
                ActivityInsight(
                    type=InsightType.BOOST,
                    message=(
                        f"{best.activity} consistently boosts your mood by "
                        f"{abs(best.improvement_score * 10):.0f}%"
                    ),
                    activities=[best.activity],
                    score=best.improvement_score,
                )
            )

        worst = valid[-1]
        if worst.improvement_score < -BOOST_THRESHOLD and worst.confidence != Confidence.LOW:
            insights.append(
                ActivityInsight(
                    type=InsightType.CHALLENGE,
                    message=f"Consider balancing {worst.activity} with mood-boosting activities",
                    activities=[worst.activity],
                    score=worst.improvement_score,
                )
            )

        improving = [
            c
            for c in valid
            if c.trend == ActivityTrend.IMPROVING and c.confidence != Confidence.LOW
        ]
        if improving:
            insights.append(
                ActivityInsight(
                    type=InsightType.TREND,
                    message=f"{improving[0].activity} is becoming more effective for your mood over time",
                    activities=[improving[0].activity],
                )
            )

        combination = self._best_combination(valid)
        if combination:
            activities, score = combination
            insights.append(
                ActivityInsight(
                    type=InsightType.COMBINATION,
                    message=f"{' + '.join(activities)} work great together",
                    activities=activities,
                    score=score,
                )
            )

        return insights[: min(limit, MAX_INSIGHTS)]

    @staticmethod
    def calculate_baseline(entries: list[MoodEntry]) -> float:
        """Mean combined score over entries, ignoring non-finite values."""
        scores = [s for s in (combined_score(e) for e in entries) if _is_finite(s)]
        if not scores:
            return DEFAULT_BASELINE
        return _mean(scores)

    @staticmethod
    def calculate_confidence(sample_size: int) -> Confidence:
        if sample_size < 3:
            return Confidence.LOW
        if sample_size < 8:
            return Confidence.MEDIUM
        return Confidence.HIGH

    @staticmethod
    def calculate_trend(samples: list[_Sample]) -> ActivityTrend:
        """Compare first-half and second-half averages in time order.

        Fewer than three valid samples is reported as stable.
        """
        valid = [s for s in samples if _is_finite(s.combined_score)]
        if len(valid) < MIN_TREND_SAMPLES:
            return ActivityTrend.STABLE

        ordered = sorted(valid, key=lambda s: chronological_key(s.timestamp))
        mid = len(ordered) // 2
        first = _mean([s.combined_score for s in ordered[:mid]])
        second = _mean([s.combined_score for s in ordered[mid:]])

        difference = second - first
        if difference > TREND_THRESHOLD:
            return ActivityTrend.IMPROVING
        if difference < -TREND_THRESHOLD:
            return ActivityTrend.DECLINING
        return ActivityTrend.STABLE

    @staticmethod
    def _mood_distribution(samples: list[_Sample]) -> dict[str, float]:
        counts: dict[str, int] = {}
        for sample in samples:
            mood = normalize_mood(sample.mood).value
            counts[mood] = counts.get(mood, 0) + 1
        return {mood: count / len(samples) * 100 for mood, count in counts.items()}

    @staticmethod
    def _best_combination(correlations: list[ActivityCorrelation]) -> Optional[tuple[list[str], float]]:
        top_two = correlations[:2]
        if len(top_two) == 2 and all(c.improvement_score > COMBINATION_THRESHOLD for c in top_two):
            score = top_two[0].improvement_score / 2 + top_two[1].improvement_score / 2
            return [c.activity for c in top_two], score
        return None


_default_analyzer = ActivityCorrelationAnalyzer()


def analyze_activity_correlations(mood_entries: list[MoodEntry]) -> list[ActivityCorrelation]:
    """Module-level shortcut for ActivityCorrelationAnalyzer.analyze_activity_correlations."""
    return _default_analyzer.analyze_activity_correlations(mood_entries)


def generate_insights(correlations: list[ActivityCorrelation], limit: int = MAX_INSIGHTS) -> list[ActivityInsight]:
    """Module-level shortcut for ActivityCorrelationAnalyzer.generate_insights."""
    return _default_analyzer.generate_insights(correlations, limit=limit)
