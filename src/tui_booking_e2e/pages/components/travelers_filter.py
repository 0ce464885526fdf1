from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.domain.models import MAX_CHILD_AGE, MIN_CHILD_AGE
from tui_booking_e2e.services.candidates import get_random_int
from tui_booking_e2e.services.driver import UiDriver
from tui_booking_e2e.utils.errors import SelectionNotApplied

log = get_logger(__name__)


@dataclass(frozen=True)
class TravelersSelectors:
    input: str = '[data-test-id="rooms-and-guest-input"]'
    content: str = ".dropModalScope_roomandguest"
    adults_select: str = ".AdultSelector__adultSelector select"
    children_select: str = ".ChildrenSelector__childrenSelector select"
    child_age_select: str = ".ChildrenAge__childAgeSelector select"


class TravelersFilter:
    """
    What it does:
    - Sets the number of adults and, when requested, each child's age.

    Behavior:
    - Counts and ages are chosen by option label ("2", "7", ...).
    - children_ages=None means no children; an empty list still requests children
      and gets one random age in [0, 17].
    """

    def __init__(self, driver: UiDriver, *, rng: random.Random | None = None) -> None:
        self.driver = driver
        self.sel = TravelersSelectors()
        self._rng = rng

    async def set_travelers(
        self, adults_count: int = 2, children_ages: Sequence[int] | None = None
    ) -> list[int]:
        """Returns the children ages actually applied."""
        await self.open()
        await self.select_adults_count(adults_count)
        if children_ages is None:
            return []
        return await self.select_children(children_ages)

    async def open(self) -> None:
        await self.driver.click(self.driver.locate(self.sel.input))
        await self.driver.wait_visible(self.driver.locate(self.sel.content))

    async def select_adults_count(self, adults_count: int = 2) -> None:
        if adults_count < 1:
            raise ValueError(f"At least one adult is required, got {adults_count}")
        await self.driver.select_option(
            self.driver.locate(self.sel.adults_select), label=str(adults_count)
        )
        log.info("adults_selected", adults=adults_count)

    async def select_children(self, children_ages: Sequence[int]) -> list[int]:
        ages = list(children_ages)
        if not ages:
            # TODO: confirm with product whether an empty age list should stay an auto-fill
            ages = [get_random_int(MIN_CHILD_AGE, MAX_CHILD_AGE, self._rng)]
            log.warning("child_age_substituted", age=ages[0])

        for age in ages:
            if not MIN_CHILD_AGE <= age <= MAX_CHILD_AGE:
                raise ValueError(
                    f"Child age must be between {MIN_CHILD_AGE} and {MAX_CHILD_AGE}, got {age}"
                )

        await self.driver.select_option(
            self.driver.locate(self.sel.children_select), label=str(len(ages))
        )

        age_selects = await self.driver.all(self.driver.locate(self.sel.child_age_select))
        if len(age_selects) < len(ages):
            raise SelectionNotApplied(
                f"Expected {len(ages)} child age selectors, found {len(age_selects)}"
            )
        for age_select, age in zip(age_selects, ages):
            await self.driver.select_option(age_select, label=str(age))

        log.info("children_selected", ages=ages)
        return ages
