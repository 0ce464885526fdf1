from __future__ import annotations

from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.config.settings import Settings, base_url_ui
from tui_booking_e2e.config.settings import settings as default_settings
from tui_booking_e2e.pages.base import Landmark, PageSignature, wait_for_signature
from tui_booking_e2e.pages.components.main_filter import MainFilterComponent
from tui_booking_e2e.pages.search_result_page import SearchResultPage
from tui_booking_e2e.services.candidates import Candidate
from tui_booking_e2e.services.driver import ElementRef, UiDriver
from tui_booking_e2e.utils.strings import build_page_url

log = get_logger(__name__)

NAVIGATION_TIMEOUT_MS = 60_000


@dataclass(frozen=True)
class MainPageSelectors:
    cookie_banner: str = '[id="cmBannerDescription"]'
    accept_cookies_button: str = "Accepteer cookies"


class MainPage:
    """
    Landing page, the only entry point of the booking flow.

    Behavior:
    - navigate() opens <base>/h/nl (optionally /<slug>) and waits for the page signature.
    - search() submits the filters and returns a loaded SearchResultPage.
    """

    path_prefix = "/h/nl"
    title = "TUI - Live Happy - volledig verzorgde reizen"

    def __init__(
        self,
        driver: UiDriver,
        *,
        settings: Settings | None = None,
        main_filter: MainFilterComponent | None = None,
    ) -> None:
        self.driver = driver
        self.settings = settings or default_settings
        self.sel = MainPageSelectors()
        self.main_filter = main_filter or MainFilterComponent(
            driver, max_month_attempts=self.settings.month_retry_limit
        )
        self.signature = PageSignature(
            path_prefix=self.path_prefix,
            url_timeout_ms=10_000,
            title=self.title,
            landmarks=(Landmark(self.sel.cookie_banner),),
        )

    @property
    def cookie_banner(self) -> ElementRef:
        return self.driver.locate(self.sel.cookie_banner)

    async def navigate(self, slug: str | None = None) -> MainPage:
        path = self.path_prefix if not slug else f"{self.path_prefix}/{slug.lstrip('/')}"
        url = build_page_url(base_url_ui(self.settings.base_url_ui), path)
        log.info("navigate", url=url)
        await self.driver.navigate_to(url, timeout_ms=NAVIGATION_TIMEOUT_MS)
        return await self.page_loaded()

    async def page_loaded(self) -> MainPage:
        await wait_for_signature(self.driver, self.signature)
        return self

    async def accept_cookies(self) -> None:
        banner = self.cookie_banner
        await self.driver.click(
            self.driver.get_by_role("button", self.sel.accept_cookies_button, within=banner)
        )
        await self.driver.wait_visible(banner, visible=False)

    async def select_random_departure_airport(self) -> Candidate:
        return await self.main_filter.departure_airport_filter.set_departure_airport()

    async def search(self) -> SearchResultPage:
        await self.main_filter.search()
        return await SearchResultPage(self.driver).page_loaded()
