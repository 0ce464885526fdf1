from __future__ import annotations

from dataclasses import dataclass

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.domain.enums import Gender
from tui_booking_e2e.domain.models import PassengerDetailsData, ValidationCase
from tui_booking_e2e.services.driver import ElementRef, UiDriver
from tui_booking_e2e.utils.errors import ElementTimeout, ValidationMessageMismatch

log = get_logger(__name__)

GENDER_FIELD = "gender"


@dataclass(frozen=True)
class PassengerDetailsValidatorSelectors:
    page_heading: str = '[aria-label="page heading"]'
    error_suffix: str = "__errorMessage"


class PassengerDetailsValidator:
    """
    What it does:
    - Sweeps a nested {group: {field: value}} map through fill -> blur -> read error.

    Behavior:
    - Field ids follow FIELD + GROUP upper-cased, e.g. ("Adult1", "firstName") -> FIRSTNAMEADULT1.
    - `gender` is a select: the value must be a Gender and no message is checked.
    - The message is re-read until it matches, so a previous message still on
      screen is not mistaken for the new one.
    - expected_error=None only requires that some message is shown.
    - Stops at the first message that differs from the expected text.
    """

    def __init__(self, driver: UiDriver) -> None:
        self.driver = driver
        self.sel = PassengerDetailsValidatorSelectors()

    def field_id(self, group_key: str, field_key: str) -> str:
        return f"{field_key.upper()}{group_key.upper()}"

    def input_locator(self, group_key: str, field_key: str) -> ElementRef:
        return self.driver.locate(f'[id="{self.field_id(group_key, field_key)}"]')

    def error_locator(self, group_key: str, field_key: str) -> ElementRef:
        return self.driver.locate(
            f'[id="{self.field_id(group_key, field_key)}{self.sel.error_suffix}"]'
        )

    async def validate(self, details: PassengerDetailsData, expected_error: str | None = None) -> int:
        """Returns the number of messages checked."""
        checked = 0
        for group_key, fields in details.items():
            for field_key, value in fields.items():
                field_input = self.input_locator(group_key, field_key)
                await self.driver.wait_visible(field_input)

                if field_key == GENDER_FIELD:
                    await self.driver.select_option(field_input, Gender(value).value)
                    continue

                await self.driver.fill(field_input, value)
                await self.driver.click(self.driver.locate(self.sel.page_heading))

                error = self.error_locator(group_key, field_key)
                await self.driver.wait_visible(error)
                if expected_error is not None:
                    try:
                        await self.driver.wait_text(error, expected_error)
                    except ElementTimeout as e:
                        actual = await self.driver.read_text(error)
                        raise ValidationMessageMismatch(
                            f"{group_key}.{field_key}={value!r}: expected error {expected_error!r}, got {actual!r}"
                        ) from e

                log.info("validation_message_matched", group=group_key, field=field_key)
                checked += 1
        return checked

    async def run_case(self, case: ValidationCase) -> None:
        await self.validate(case.as_passenger_data(), case.expected_error_text)
