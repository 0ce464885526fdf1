from __future__ import annotations

from dataclasses import dataclass

from tui_booking_e2e.domain.models import PassengerDetailsData, ValidationCase
from tui_booking_e2e.pages.base import (
    Landmark,
    PageSignature,
    reject_direct_navigation,
    wait_for_signature,
)
from tui_booking_e2e.pages.passenger_details_validator import PassengerDetailsValidator
from tui_booking_e2e.services.driver import UiDriver


@dataclass(frozen=True)
class PassengerDetailsSelectors:
    heading: str = "h1"
    heading_text: str = "Persoonsgegevens"


class PassengerDetailsPage:
    """Last step of the flow: passenger form with per-field validation messages."""

    path_prefix = "/h/nl/book/passengerdetails"

    def __init__(self, driver: UiDriver) -> None:
        self.driver = driver
        self.sel = PassengerDetailsSelectors()
        self.validator = PassengerDetailsValidator(driver)
        self.signature = PageSignature(
            path_prefix=self.path_prefix,
            url_timeout_ms=40_000,
            landmarks=(Landmark(self.sel.heading, has_text=self.sel.heading_text),),
        )

    async def navigate(self, slug: str | None = None) -> PassengerDetailsPage:
        raise reject_direct_navigation("PassengerDetailsPage")

    async def page_loaded(self) -> PassengerDetailsPage:
        await wait_for_signature(self.driver, self.signature)
        return self

    async def personal_details_validating(
        self, details: PassengerDetailsData, error_text: str | None = None
    ) -> int:
        return await self.validator.validate(details, error_text)

    async def validate_case(self, case: ValidationCase) -> None:
        await self.validator.run_case(case)
