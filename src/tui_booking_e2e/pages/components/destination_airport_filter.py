from __future__ import annotations

import random
from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.services.candidates import Candidate, select_candidate
from tui_booking_e2e.services.driver import UiDriver
from tui_booking_e2e.utils.errors import ElementTimeout, SelectionNotApplied

log = get_logger(__name__)


@dataclass(frozen=True)
class DestinationAirportSelectors:
    list_toggle: str = "[data-test-id='destination-input']~span"
    list_toggle_text: str = "Lijst"
    destination_list: str = ".dropModalScope_destinations .DestinationsList__destinationListContainer ul"
    close_button: str = '[aria-label="destinations close"]'
    modal_content: str = ".dropModalScope_destinations .DropModal__content"
    country_item: str = "li>a"
    sub_item_area: str = ".DestinationsList__droplistContainer"
    unchecked_sub_item: str = '[aria-checked="false"]'


class DestinationAirportFilter:
    """
    What it does:
    - Two-stage destination pick: a country first, then a city/airport inside it.

    Behavior:
    - Countries whose link carries a `disabled` class are never picked.
    - Clicking a country must hide its node; otherwise SelectionNotApplied.
    - Cities are the sub-items that are still unchecked.
    """

    def __init__(self, driver: UiDriver, *, rng: random.Random | None = None) -> None:
        self.driver = driver
        self.sel = DestinationAirportSelectors()
        self._rng = rng

    async def set_destination_airport(
        self, country_name: str | None = None, city_name: str | None = None
    ) -> tuple[Candidate, Candidate]:
        await self.open()
        country = await self.select_country(country_name)
        city = await self.select_city(city_name)
        return country, city

    async def open(self) -> None:
        toggle = self.driver.get_by_text(
            self.sel.list_toggle_text, within=self.driver.locate(self.sel.list_toggle)
        )
        await self.driver.click(toggle)
        await self.driver.wait_visible(self.driver.locate(self.sel.destination_list))

    async def close(self) -> None:
        close_button = self.driver.locate(self.sel.close_button)
        await self.driver.click(close_button)
        try:
            await self.driver.wait_visible(close_button, visible=False)
        except ElementTimeout as e:
            raise SelectionNotApplied("Destination airport dropdown did not close") from e

    async def available_countries(self) -> list[Candidate]:
        content = self.driver.locate(self.sel.modal_content)
        await self.driver.wait_visible(content)

        candidates = []
        for item in await self.driver.all(self.driver.locate(self.sel.country_item, within=content)):
            await self.driver.wait_visible(item)
            class_name = await self.driver.read_attribute(item, "class") or ""
            label = await self.driver.read_text(item)
            candidates.append(Candidate(handle=item, label=label, enabled="disabled" not in class_name))

        return [c for c in candidates if c.enabled]

    async def available_cities(self) -> list[Candidate]:
        area = self.driver.locate(self.sel.sub_item_area)
        await self.driver.wait_visible(area)

        candidates = []
        for item in await self.driver.all(self.driver.locate(self.sel.unchecked_sub_item, within=area)):
            await self.driver.wait_visible(item)
            candidates.append(Candidate(handle=item, label=await self.driver.read_text(item)))
        return candidates

    async def select_country(self, country_name: str | None = None) -> Candidate:
        country = select_candidate(await self.available_countries(), country_name, self._rng)
        log.info("destination_country_selected", country=country.label)
        await self.driver.click(country.handle)
        try:
            await self.driver.wait_visible(country.handle, visible=False)
        except ElementTimeout as e:
            raise SelectionNotApplied(f"Failed to select destination country: {country.label}") from e
        return country

    async def select_city(self, city_name: str | None = None) -> Candidate:
        city = select_candidate(await self.available_cities(), city_name, self._rng)
        log.info("destination_city_selected", city=city.label)
        await self.driver.click(city.handle)
        return city
