from __future__ import annotations

import random
from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.domain.enums import FilterDayTolerance, tolerance_label
from tui_booking_e2e.services.candidates import Candidate, select_candidate
from tui_booking_e2e.services.driver import UiDriver
from tui_booking_e2e.utils.errors import ElementTimeout, SelectionNotApplied

log = get_logger(__name__)

MONTH_PROBE_TIMEOUT_MS = 2_000


@dataclass(frozen=True)
class DepartureDateSelectors:
    input: str = '[data-test-id="departure-date-input"]'
    modal: str = ".DropModal__dropModalContent.dropModalScope_Departuredate"
    month_selector: str = ".dropModalScope_Departuredate .SelectLegacyDate__monthSelector"
    month_selector_text: str = "EERDER VERTREKKEN"
    close_button: str = '[aria-label="Departure date close"]'
    tolerance_area: str = ".SelectLegacyDate__flexibilityOnly"
    tolerance_item: str = "li"
    calendar: str = ".SelectLegacyDate__calendar"
    available_day: str = "td.SelectLegacyDate__available"

    def tolerance_radio(self, label: str) -> str:
        return f'li input[aria-label="{label}"]'


class DepartureDateFilter:
    """
    What it does:
    - Probes whether the destination has a bookable month.
    - Sets the date tolerance and picks an available departure day.
    """

    def __init__(self, driver: UiDriver, *, rng: random.Random | None = None) -> None:
        self.driver = driver
        self.sel = DepartureDateSelectors()
        self._rng = rng

    async def is_month_available(self, timeout_ms: int = MONTH_PROBE_TIMEOUT_MS) -> bool:
        """
        Opens the picker, looks for the month selector for at most `timeout_ms`
        and closes the picker again whatever the answer is.
        """
        await self.open()
        month_selector = self.driver.locate(
            self.sel.month_selector, has_text=self.sel.month_selector_text
        )
        available = await self.driver.is_visible(month_selector, timeout_ms)
        await self.close()

        log.info("departure_month_probed", available=available)
        return available

    async def set_departure_date(
        self, tolerance: FilterDayTolerance | str = FilterDayTolerance.EXACT, day: str | None = None
    ) -> Candidate:
        await self.open()
        await self.set_tolerance(tolerance)
        return await self.select_day(day)

    async def open(self) -> None:
        await self.driver.click(self.driver.locate(self.sel.input))
        await self.driver.wait_visible(self.driver.locate(self.sel.modal))

    async def close(self) -> None:
        close_button = self.driver.locate(self.sel.close_button)
        await self.driver.click(close_button)
        try:
            await self.driver.wait_visible(close_button, visible=False)
        except ElementTimeout as e:
            raise SelectionNotApplied("Departure date picker did not close") from e

    async def set_tolerance(self, tolerance: FilterDayTolerance | str) -> str:
        area = self.driver.locate(self.sel.tolerance_area)
        await self.driver.wait_visible(area)

        label = tolerance_label(tolerance)
        item = self.driver.locate(self.sel.tolerance_item, within=area)
        await self.driver.click(self.driver.get_by_text(label, within=item))

        radio = self.driver.locate(self.sel.tolerance_radio(label), within=area)
        if not await self.driver.is_checked(radio):
            raise SelectionNotApplied(f"Failed to select date tolerance: {label}")

        log.info("date_tolerance_selected", tolerance=label)
        return label

    async def available_days(self) -> list[Candidate]:
        calendar = self.driver.locate(self.sel.calendar)
        await self.driver.wait_visible(calendar)

        candidates = []
        for cell in await self.driver.all(self.driver.locate(self.sel.available_day, within=calendar)):
            await self.driver.wait_visible(cell)
            candidates.append(Candidate(handle=cell, label=await self.driver.read_text(cell)))
        return candidates

    async def select_day(self, day: str | None = None) -> Candidate:
        selected = select_candidate(await self.available_days(), day, self._rng)
        log.info("departure_date_selected", day=selected.label)
        await self.driver.click(selected.handle)
        return selected
