import pytest

from tui_booking_e2e.config.settings import DEFAULT_BASE_URL_UI, Settings, base_url_ui
from tui_booking_e2e.utils.strings import build_page_url, create_url_regex

pytestmark = pytest.mark.unit


def _settings(monkeypatch, **env):
    for name in ("CI", "GITHUB_ACTIONS", "HEADLESS", "BASE_URL_UI", "TAG", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return Settings(_env_file=None)


def test_base_url_falls_back_to_public_site(monkeypatch):
    assert _settings(monkeypatch).base_url_ui == DEFAULT_BASE_URL_UI
    assert base_url_ui("") == DEFAULT_BASE_URL_UI
    assert base_url_ui("  ") == DEFAULT_BASE_URL_UI


def test_base_url_from_environment(monkeypatch):
    assert _settings(monkeypatch, BASE_URL_UI="https://acc.tui.nl").base_url_ui == "https://acc.tui.nl"
    assert base_url_ui("https://acc.tui.nl ") == "https://acc.tui.nl"


def test_ci_requires_both_flags(monkeypatch):
    assert _settings(monkeypatch, CI="true").is_ci() is False
    assert _settings(monkeypatch, CI="true", GITHUB_ACTIONS="true").is_ci() is True


def test_headless_defaults_to_ci_and_can_be_overridden(monkeypatch):
    assert _settings(monkeypatch).resolved_headless() is False
    assert _settings(monkeypatch, CI="true").resolved_headless() is True
    assert _settings(monkeypatch, CI="true", HEADLESS="false").resolved_headless() is False


def test_month_retry_limit_is_unbounded_by_default(monkeypatch):
    monkeypatch.delenv("MONTH_RETRY_LIMIT", raising=False)
    assert Settings(_env_file=None).month_retry_limit is None


def test_url_regex_matches_prefix_literally():
    pattern = create_url_regex("/h/nl/book/flow/summary")
    assert pattern.search("https://www.tui.nl/h/nl/book/flow/summary?id=1")
    assert not pattern.search("https://www.tui.nl/h/nl/packages")
    assert create_url_regex("/a.b").search("/a.b/c")
    assert not create_url_regex("/a.b").search("/axb/c")


def test_build_page_url_joins_without_double_slash():
    assert build_page_url("https://www.tui.nl/", "/h/nl") == "https://www.tui.nl/h/nl"
    assert build_page_url("https://www.tui.nl", "h/nl") == "https://www.tui.nl/h/nl"


@pytest.mark.parametrize(
    "tag, expected",
    [
        (None, {"smoke"}),
        ("@regression", {"regression"}),
        ("@smoke|@regression", {"smoke", "regression"}),
        (" @smoke | ", {"smoke"}),
    ],
)
def test_tag_selects_marker_names(monkeypatch, tag, expected):
    env = {} if tag is None else {"TAG": tag}
    assert _settings(monkeypatch, **env).tag_markers() == expected


def test_logging_renders_json_on_ci(monkeypatch):
    import structlog

    from tui_booking_e2e.config.logging import configure_logging

    try:
        configure_logging(_settings(monkeypatch, CI="true", GITHUB_ACTIONS="true"))
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
        assert "Filtering" in structlog.get_config()["wrapper_class"].__name__

        configure_logging(_settings(monkeypatch))
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()
