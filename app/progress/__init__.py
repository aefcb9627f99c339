"""Progress analytics engine: progression, streaks, records, volume, summaries."""

from app.progress.config import DEFAULT_CONFIG, ProgressConfig
from app.progress.frequency import current_streak, frequency_chart, longest_streak, workout_frequency
from app.progress.progression import metcon_progression, strength_chart, strength_progression
from app.progress.records import personal_records, volume_series, volume_trends
from app.progress.summary import dashboard_summary, progress_overview, recent_achievements

__all__ = [
    "DEFAULT_CONFIG",
    "ProgressConfig",
    "current_streak",
    "dashboard_summary",
    "frequency_chart",
    "longest_streak",
    "metcon_progression",
    "personal_records",
    "progress_overview",
    "recent_achievements",
    "strength_chart",
    "strength_progression",
    "volume_series",
    "volume_trends",
    "workout_frequency",
]
