from __future__ import annotations

from dataclasses import dataclass

from tui_booking_e2e.pages.base import (
    Landmark,
    PageSignature,
    reject_direct_navigation,
    wait_for_signature,
)
from tui_booking_e2e.pages.passenger_details_page import PassengerDetailsPage
from tui_booking_e2e.services.driver import UiDriver


@dataclass(frozen=True)
class SummaryBookingSelectors:
    heading: str = "h1"
    heading_text: str = "Vakantie samenstellen"
    summary_button: str = ".ProgressbarNavigation__summaryButton button"


class SummaryBookingPage:
    path_prefix = "/h/nl/book/flow/summary"

    def __init__(self, driver: UiDriver) -> None:
        self.driver = driver
        self.sel = SummaryBookingSelectors()
        self.signature = PageSignature(
            path_prefix=self.path_prefix,
            url_timeout_ms=10_000,
            landmarks=(Landmark(self.sel.heading, has_text=self.sel.heading_text),),
        )

    async def navigate(self, slug: str | None = None) -> SummaryBookingPage:
        raise reject_direct_navigation("SummaryBookingPage")

    async def page_loaded(self) -> SummaryBookingPage:
        await wait_for_signature(self.driver, self.signature)
        return self

    async def proceed_booking(self) -> PassengerDetailsPage:
        await self.driver.click(self.driver.locate(self.sel.summary_button))
        return await PassengerDetailsPage(self.driver).page_loaded()
