from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tui_booking_e2e.config.paths import env_file_path

DEFAULT_BASE_URL_UI = "https://www.tui.nl"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(env_file_path()),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    base_url_ui: str = Field(default=DEFAULT_BASE_URL_UI, alias="BASE_URL_UI")
    ci: bool = Field(default=False, alias="CI")
    github_actions: bool = Field(default=False, alias="GITHUB_ACTIONS")
    headless: bool | None = Field(default=None, alias="HEADLESS")
    tag: str = Field(default="@smoke", alias="TAG")

    action_timeout_ms: int = Field(default=30_000, alias="ACTION_TIMEOUT_MS")
    navigation_timeout_ms: int = Field(default=30_000, alias="NAVIGATION_TIMEOUT_MS")
    timezone_id: str = Field(default="Europe/Kyiv", alias="TIMEZONE_ID")
    viewport_width: int = Field(default=1920, alias="VIEWPORT_WIDTH")
    viewport_height: int = Field(default=1080, alias="VIEWPORT_HEIGHT")
    artifacts_dir: str = Field(default="artifacts", alias="ARTIFACTS_DIR")

    # None keeps the destination re-roll loop unbounded
    month_retry_limit: int | None = Field(default=None, alias="MONTH_RETRY_LIMIT")

    run_e2e: bool = Field(default=False, alias="RUN_E2E")

    def is_ci(self) -> bool:
        return self.ci and self.github_actions

    def tag_markers(self) -> set[str]:
        """
        Pytest marker names selected by TAG, e.g. "@smoke" or "@smoke|@regression".
        """
        return {t.strip().lstrip("@") for t in self.tag.split("|") if t.strip().lstrip("@")}

    def resolved_headless(self) -> bool:
        """Explicit HEADLESS wins; otherwise the browser is headless on CI only."""
        if self.headless is not None:
            return self.headless
        return self.ci


def base_url_ui(value: str | None = None) -> str:
    """
    Returns the UI base URL.

    `value` overrides the configured setting, which keeps this unit-testable.
    Blank values fall back to the public site.
    """
    url = settings.base_url_ui if value is None else value
    if not url or not url.strip():
        return DEFAULT_BASE_URL_UI
    return url.strip()


settings = Settings()
