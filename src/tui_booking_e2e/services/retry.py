from __future__ import annotations

from tui_booking_e2e.config.logging import get_logger
from tui_booking_e2e.services.driver import ElementRef, UiDriver
from tui_booking_e2e.utils.errors import RetryExhausted

log = get_logger(__name__)


async def wait_for_element_with_retries(
    driver: UiDriver,
    ref: ElementRef,
    max_retries: int = 10,
    interval_s: float = 1.0,
) -> int:
    """
    What it does:
    - Reloads the page until `ref` shows up.

    Behavior:
    - Each attempt: reload, sleep `interval_s`, probe visibility without waiting.
    - Returns the 1-based attempt number on success.
    - Raises RetryExhausted after `max_retries` failed attempts.
    """
    for attempt in range(1, max_retries + 1):
        await driver.reload()
        await driver.sleep(interval_s)

        if await driver.is_visible(ref):
            log.info("element_appeared", attempt=attempt)
            return attempt

        log.info("element_not_visible_retrying", attempt=attempt, max_retries=max_retries)

    raise RetryExhausted(f"Element did not appear after {max_retries} attempts.")
