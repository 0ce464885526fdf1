from __future__ import annotations

import random
from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.services.candidates import Candidate, select_candidate
from tui_booking_e2e.services.driver import UiDriver

log = get_logger(__name__)


@dataclass(frozen=True)
class DepartureAirportSelectors:
    search_panel: str = ".UI__choiceSearchPanel"
    input: str = 'input[name="Departure Airport"]'
    droplist: str = ".SelectAirports__droplistContainer"
    option: str = '[role="checkbox"]'
    option_input: str = "input"


class DepartureAirportFilter:
    """
    What it does:
    - Opens the departure airport dropdown and ticks one airport.

    Behavior:
    - An airport is a candidate only if its checkbox input is not disabled.
    - Saving the form is left to MainFilterComponent.
    """

    def __init__(self, driver: UiDriver, *, rng: random.Random | None = None) -> None:
        self.driver = driver
        self.sel = DepartureAirportSelectors()
        self._rng = rng

    async def set_departure_airport(self, airport_name: str | None = None) -> Candidate:
        await self.open()
        return await self.select(airport_name)

    async def open(self) -> None:
        panel = self.driver.locate(self.sel.search_panel)
        await self.driver.click(self.driver.locate(self.sel.input, within=panel))

    async def available_airports(self) -> list[Candidate]:
        area = self.driver.locate(self.sel.droplist)
        await self.driver.wait_visible(area)

        candidates = []
        for airport in await self.driver.all(self.driver.locate(self.sel.option, within=area)):
            await self.driver.wait_visible(airport)
            disabled = await self.driver.is_disabled(
                self.driver.locate(self.sel.option_input, within=airport)
            )
            label = await self.driver.read_text(airport)
            candidates.append(Candidate(handle=airport, label=label, enabled=not disabled))

        log.debug("departure_airports_enumerated", total=len(candidates))
        return [c for c in candidates if c.enabled]

    async def select(self, airport_name: str | None = None) -> Candidate:
        airport = select_candidate(await self.available_airports(), airport_name, self._rng)
        log.info("departure_airport_selected", airport=airport.label)
        await self.driver.click(airport.handle)
        return airport
