from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from playwright.async_api import async_playwright

from tui_booking_e2e.browser.ui_elements import UiElements
from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.config.settings import Settings, base_url_ui

log = get_logger(__name__)

CHROMIUM_ARGS = [
    "--start-maximized",
    "--disable-web-security",
    "--disable-features=VizDisplayCompositor",
]


@asynccontextmanager
async def browser_session(settings: Settings) -> AsyncIterator[UiElements]:
    """
    What it does:
    - Starts Playwright, launches Chromium, opens one page and yields it wrapped in UiElements.

    Behavior:
    - Headless follows HEADLESS, or CI when HEADLESS is unset.
    - Context uses the configured viewport, timezone and base URL.
    - Browser and Playwright are always shut down on exit, even if the journey failed.
    - If Chromium isn't installed, run: playwright install chromium
    """
    headless = settings.resolved_headless()
    base_url = base_url_ui(settings.base_url_ui)
    async with async_playwright() as pw:
        try:
            browser = await pw.chromium.launch(headless=headless, args=CHROMIUM_ARGS)
        except Exception as e:
            raise RuntimeError(
                "Failed to launch Playwright Chromium.\n"
                "If this is the first time on this machine, run:\n\n"
                "  playwright install chromium\n"
            ) from e

        log.info("browser_launched", headless=headless, base_url=base_url)
        try:
            context = await browser.new_context(
                base_url=base_url,
                viewport={"width": settings.viewport_width, "height": settings.viewport_height},
                timezone_id=settings.timezone_id,
            )
            page = await context.new_page()
            page.set_default_timeout(settings.action_timeout_ms)
            page.set_default_navigation_timeout(settings.navigation_timeout_ms)

            yield UiElements(page, default_timeout_ms=settings.action_timeout_ms)
        finally:
            await browser.close()
            log.info("browser_closed")
