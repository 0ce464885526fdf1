from __future__ import annotations

from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.domain.enums import (
    SAVE_BUTTON_LABELS,
    FilterDayTolerance,
    ResetFormName,
    SaveFormName,
)
from tui_booking_e2e.domain.models import SearchCriteria
from tui_booking_e2e.pages.components.departure_airport_filter import DepartureAirportFilter
from tui_booking_e2e.pages.components.departure_date_filter import DepartureDateFilter
from tui_booking_e2e.pages.components.destination_airport_filter import DestinationAirportFilter
from tui_booking_e2e.pages.components.travelers_filter import TravelersFilter
from tui_booking_e2e.services.candidates import Candidate
from tui_booking_e2e.services.driver import UiDriver
from tui_booking_e2e.utils.errors import ElementTimeout, RetryExhausted, SelectionNotApplied

log = get_logger(__name__)


@dataclass(frozen=True)
class MainFilterSelectors:
    destinations_clear: str = '.dropModalScope_destinations [class="DropModal__clear"]'
    airports_clear: str = '.dropModalScope_airports [class="DropModal__clear"]'
    search_button: str = '[data-test-id="search-button"]'

    def save_button(self, button_label: str) -> str:
        return f'footer span[aria-label="{button_label}"] button'


class MainFilterComponent:
    """
    What it does:
    - Composes the four search filters into one "search criteria" workflow.

    Why it matters:
    - Date availability depends on the destination, so an empty month is recovered
      by re-rolling the destination instead of retrying the date picker.

    Behavior:
    - Every filter selection is committed with save_form().
    - The destination re-roll loop is unbounded unless `max_month_attempts` is set.
    """

    def __init__(
        self,
        driver: UiDriver,
        *,
        departure_airport_filter: DepartureAirportFilter | None = None,
        destination_airport_filter: DestinationAirportFilter | None = None,
        departure_date_filter: DepartureDateFilter | None = None,
        travelers_filter: TravelersFilter | None = None,
        max_month_attempts: int | None = None,
    ) -> None:
        self.driver = driver
        self.sel = MainFilterSelectors()
        self.departure_airport_filter = departure_airport_filter or DepartureAirportFilter(driver)
        self.destination_airport_filter = destination_airport_filter or DestinationAirportFilter(driver)
        self.departure_date_filter = departure_date_filter or DepartureDateFilter(driver)
        self.travelers_filter = travelers_filter or TravelersFilter(driver)
        self.max_month_attempts = max_month_attempts

    async def apply_search_criteria(self, criteria: SearchCriteria) -> None:
        await self.departure_airport_filter.set_departure_airport(criteria.departure_airport)
        await self.save_form(SaveFormName.DEPARTURE)

        await self.destination_airport_filter.set_destination_airport(
            criteria.destination.country, criteria.destination.city
        )
        await self.save_form(SaveFormName.DESTINATION)

        await self.select_departure_date(criteria.date.tolerance, criteria.date.day)
        await self.save_form(SaveFormName.DATE)

        await self.travelers_filter.set_travelers(
            criteria.travelers.adults, criteria.travelers.children_ages
        )
        await self.save_form(SaveFormName.TRAVELERS)

    async def select_departure_date(
        self, tolerance: FilterDayTolerance | str = FilterDayTolerance.EXACT, day: str | None = None
    ) -> Candidate:
        """
        Re-rolls the destination until the date picker offers a bookable month,
        then sets the tolerance and picks a day.
        """
        rerolls = 0
        while not await self.departure_date_filter.is_month_available():
            if self.max_month_attempts is not None and rerolls >= self.max_month_attempts:
                raise RetryExhausted(
                    f"No departure month available after {rerolls} destination re-selections"
                )
            rerolls += 1
            log.warning("departure_month_unavailable_reselecting_destination", attempt=rerolls)

            await self.reset_form_settings(ResetFormName.DESTINATION)
            await self.destination_airport_filter.close()
            await self.destination_airport_filter.set_destination_airport()
            await self.save_form(SaveFormName.DESTINATION)

        return await self.departure_date_filter.set_departure_date(tolerance, day)

    async def reset_form_settings(self, form_name: ResetFormName | str) -> None:
        form_name = ResetFormName(form_name)
        if form_name == ResetFormName.DESTINATION:
            await self.destination_airport_filter.open()
            clear_button = self.driver.locate(self.sel.destinations_clear)
        else:
            await self.departure_airport_filter.open()
            clear_button = self.driver.locate(self.sel.airports_clear)

        await self.driver.click(clear_button)
        log.info("form_reset", form=form_name.value)

    async def save_form(self, form_name: SaveFormName | str) -> None:
        """Clicks the form's save button and requires it to disappear (panel closed)."""
        button_label = SAVE_BUTTON_LABELS[SaveFormName(form_name)]
        save_button = self.driver.locate(self.sel.save_button(button_label))

        await self.driver.wait_visible(save_button)
        await self.driver.click(save_button)
        try:
            await self.driver.wait_visible(save_button, visible=False)
        except ElementTimeout as e:
            raise SelectionNotApplied(f"Form {form_name} did not close after saving") from e

    async def search(self) -> None:
        await self.driver.click(self.driver.locate(self.sel.search_button))
