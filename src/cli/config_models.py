"""Pydantic configuration models for mood journey."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

MAX_INSIGHTS = 4


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/moodjourney/journal")
    mood_db: Path = Path("~/moodjourney/moods.db")
    log_file: Path = Path("~/moodjourney/moodjourney.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        self.mood_db = self.mood_db.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file_level: str = "DEBUG"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class AnalyticsConfig(BaseModel):
    """Caller-side limits applied before entries reach the analytics engines."""

    max_entries: int = 5000
    history_days: int = 30
    insight_limit: int = MAX_INSIGHTS

    @field_validator("max_entries", "history_days")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Must be >= 1, got {v}")
        return v

    @field_validator("insight_limit")
    @classmethod
    def validate_insight_limit(cls, v: int) -> int:
        if not 0 <= v <= MAX_INSIGHTS:
            raise ValueError(f"insight_limit must be 0-{MAX_INSIGHTS}, got {v}")
        return v


class AppConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create config from dict, accepting string paths."""
        if isinstance(data.get("paths"), dict):
            for key in ["journal_dir", "mood_db", "log_file"]:
                if isinstance(data["paths"].get(key), str):
                    data["paths"][key] = Path(data["paths"][key])
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
