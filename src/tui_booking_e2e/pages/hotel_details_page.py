from __future__ import annotations

from dataclasses import dataclass

from tui_booking_e2e.pages.base import (
    Landmark,
    PageSignature,
    reject_direct_navigation,
    wait_for_signature,
)
from tui_booking_e2e.pages.summary_booking_page import SummaryBookingPage
from tui_booking_e2e.services.driver import UiDriver


@dataclass(frozen=True)
class HotelDetailsSelectors:
    # "nanner" is the site's own aria-label
    hero_banner: str = '[aria-label="unit details hero nanner"]'
    progress_bar: str = '[id="progressBarNavigation__component"]'
    overview: str = '[id="OverviewComponentContainer"]'
    summary_button: str = ".ProgressbarNavigation__summaryButton"


class HotelDetailsPage:
    path_prefix = "/h/nl/bookaccommodation"

    def __init__(self, driver: UiDriver) -> None:
        self.driver = driver
        self.sel = HotelDetailsSelectors()
        self.signature = PageSignature(
            path_prefix=self.path_prefix,
            url_timeout_ms=30_000,
            landmarks=(
                Landmark(self.sel.hero_banner),
                Landmark(self.sel.progress_bar),
                Landmark(self.sel.overview),
            ),
        )

    async def navigate(self, slug: str | None = None) -> HotelDetailsPage:
        raise reject_direct_navigation("HotelDetailsPage")

    async def page_loaded(self) -> HotelDetailsPage:
        await wait_for_signature(self.driver, self.signature)
        return self

    async def proceed_booking(self) -> SummaryBookingPage:
        await self.driver.click(self.driver.locate(self.sel.summary_button))
        return await SummaryBookingPage(self.driver).page_loaded()
