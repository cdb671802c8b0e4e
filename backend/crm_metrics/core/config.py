from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ignore unknown env vars so the dashboard's shared .env can carry front-end and
    # API settings without breaking the metrics engine.
    # Load both backend/.env and repo-root/.env (backend first).
    model_config = SettingsConfigDict(env_file=(".env", "../.env"), case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = "CRM Dashboard Metrics"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Calendar used to turn range tokens ("this_month", ...) into concrete dates.
    REPORT_TIMEZONE: str = "UTC"
    # 0 = Monday ... 6 = Sunday (datetime.weekday() numbering).
    WEEK_STARTS_ON: int = 0

    # Reminder panel shows at most this many upcoming follow-ups.
    UPCOMING_REMINDER_LIMIT: int = 5

    # Allowed gap (percentage points) between a supplied conversion_rate and
    # 100 * conversions / leads before a data warning is raised.
    CONVERSION_RATE_TOLERANCE: float = 1.0

    @model_validator(mode="after")
    def _sanity_checks(self):
        if self.UPCOMING_REMINDER_LIMIT < 0:
            raise ValueError("UPCOMING_REMINDER_LIMIT must be >= 0")
        if self.CONVERSION_RATE_TOLERANCE < 0:
            raise ValueError("CONVERSION_RATE_TOLERANCE must be >= 0")
        if not 0 <= self.WEEK_STARTS_ON <= 6:
            raise ValueError("WEEK_STARTS_ON must be between 0 (Monday) and 6 (Sunday)")
        try:
            ZoneInfo(self.REPORT_TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown REPORT_TIMEZONE: {self.REPORT_TIMEZONE!r}")
        return self

    @property
    def report_tz(self) -> ZoneInfo:
        return ZoneInfo(self.REPORT_TIMEZONE)


@lru_cache
def get_settings() -> Settings:
    return Settings()
