from __future__ import annotations

import random

import pytest
import pytest_asyncio

from tui_booking_e2e.config.settings import Settings, settings
from tui_booking_e2e.testing.fake_site import BASE_URL, FakeTuiSite
from tui_booking_e2e.testing.fakes import FakeDriver
from tui_booking_e2e.testing.tags import split_by_tag


def pytest_collection_modifyitems(config, items):
    """TAG (default @smoke) picks which e2e tests run; unit tests are never filtered."""
    selected, deselected = split_by_tag(items, settings.tag_markers())
    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected


@pytest.fixture()
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture()
def site(driver) -> FakeTuiSite:
    return FakeTuiSite(driver)


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    """Settings isolated from the local .env and environment overrides that matter."""
    return Settings(
        _env_file=None,
        base_url_ui=BASE_URL,
        artifacts_dir=str(tmp_path / "artifacts"),
        month_retry_limit=None,
    )


# ============================================================================
# Real browser fixtures (tests/e2e)
# ============================================================================

@pytest_asyncio.fixture()
async def user_main_page():
    """Launches Chromium and yields a loaded MainPage. Only used when RUN_E2E=true."""
    from tui_booking_e2e.browser.session import browser_session
    from tui_booking_e2e.pages.main_page import MainPage

    async with browser_session(settings) as ui:
        yield await MainPage(ui, settings=settings).navigate()
