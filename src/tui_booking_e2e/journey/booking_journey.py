from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.config.paths import artifacts_path
from tui_booking_e2e.config.settings import Settings, settings as default_settings
from tui_booking_e2e.domain.models import SearchCriteria, ValidationCase
from tui_booking_e2e.pages.main_page import MainPage
from tui_booking_e2e.services.driver import UiDriver

log = get_logger(__name__)


@dataclass(frozen=True)
class JourneyOutcome:
    visited_pages: tuple[str, ...]
    validated_cases: int


class BookingJourney:
    """
    What it does:
    - Drives landing page -> filters -> results -> hotel -> summary -> passenger details,
      then runs the passenger validation cases.

    Behavior:
    - Steps run strictly in order; each one is logged by name.
    - A failing step writes ./artifacts/<step>.png and re-raises: there is no partial success.
    """

    def __init__(self, driver: UiDriver, *, settings: Settings | None = None) -> None:
        self.driver = driver
        self.settings = settings or default_settings

    async def run(
        self,
        criteria: SearchCriteria,
        cases: Sequence[ValidationCase] = (),
        *,
        result_index: int = 0,
    ) -> JourneyOutcome:
        visited: list[str] = []

        async with self.step("open_main_page"):
            main_page = await MainPage(self.driver, settings=self.settings).navigate()
            visited.append(main_page.path_prefix)

        async with self.step("accept_cookies"):
            await main_page.accept_cookies()

        async with self.step("apply_search_criteria"):
            await main_page.main_filter.apply_search_criteria(criteria)

        async with self.step("search"):
            results_page = await main_page.search()
            visited.append(results_page.path_prefix)

        async with self.step("pick_search_result"):
            hotel_page = await results_page.pick_search_result(result_index)
            visited.append(hotel_page.path_prefix)

        async with self.step("open_booking_summary"):
            summary_page = await hotel_page.proceed_booking()
            visited.append(summary_page.path_prefix)

        async with self.step("open_passenger_details"):
            passenger_page = await summary_page.proceed_booking()
            visited.append(passenger_page.path_prefix)

        for i, case in enumerate(cases, start=1):
            async with self.step(f"validate_{case.group_key}_{case.field_key}_{i}"):
                await passenger_page.validate_case(case)

        return JourneyOutcome(visited_pages=tuple(visited), validated_cases=len(cases))

    @asynccontextmanager
    async def step(self, name: str) -> AsyncIterator[None]:
        log.info("step_started", step=name)
        try:
            yield
        except Exception:
            log.error("step_failed", step=name, url=self.driver.current_url)
            await self._debug_dump(name)
            raise
        log.info("step_finished", step=name)

    async def _debug_dump(self, tag: str) -> None:
        """Best-effort full-page screenshot; a failing screenshot never hides the real error."""
        out_dir = artifacts_path(self.settings.artifacts_dir)
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            await self.driver.screenshot(str(out_dir / f"{tag}.png"))
        except Exception as e:
            log.warning("screenshot_failed", step=tag, error=str(e))
