from __future__ import annotations

from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.pages.base import (
    Landmark,
    PageSignature,
    reject_direct_navigation,
    wait_for_signature,
)
from tui_booking_e2e.pages.hotel_details_page import HotelDetailsPage
from tui_booking_e2e.services.driver import UiDriver

log = get_logger(__name__)


@dataclass(frozen=True)
class SearchResultSelectors:
    results_list: str = '[data-test-id="search-results-list"]'
    # the site really spells it "fliters"
    filter_panel: str = ".flitersPanel"
    result_item: str = "section[data-test-result-item-uniq-id]"
    result_title_link: str = ".ResultListItemV2__details h5 a"


class SearchResultPage:
    path_prefix = "/h/nl/packages"

    def __init__(self, driver: UiDriver) -> None:
        self.driver = driver
        self.sel = SearchResultSelectors()
        self.signature = PageSignature(
            path_prefix=self.path_prefix,
            url_timeout_ms=10_000,
            landmarks=(Landmark(self.sel.results_list), Landmark(self.sel.filter_panel)),
        )

    async def navigate(self, slug: str | None = None) -> SearchResultPage:
        raise reject_direct_navigation("SearchResultPage")

    async def page_loaded(self) -> SearchResultPage:
        await wait_for_signature(self.driver, self.signature)
        return self

    async def pick_search_result(self, result_index: int = 0) -> HotelDetailsPage:
        items = self.driver.locate(self.sel.result_item)
        link = self.driver.nth(self.driver.locate(self.sel.result_title_link, within=items), result_index)
        log.info("search_result_picked", index=result_index)
        await self.driver.click(link)
        return await HotelDetailsPage(self.driver).page_loaded()
