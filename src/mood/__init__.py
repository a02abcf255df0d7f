from .correlation import ActivityCorrelation, ActivityCorrelationAnalyzer, ActivityInsight
from .models import MoodEntry
from .store import MoodStore
from .summary import TodaysSummary, TodaySummaryService

__all__ = [
    "MoodEntry",
    "MoodStore",
    "ActivityCorrelation",
    "ActivityCorrelationAnalyzer",
    "ActivityInsight",
    "TodaysSummary",
    "TodaySummaryService",
]
