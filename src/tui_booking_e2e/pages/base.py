"""
base.py

What this module does
- Defines the contract every journey page implements (`BookingPage`).
- Implements the shared "page is ready" wait (`wait_for_signature`).

Behavior summary
- A page is loaded once its URL contains its path prefix and all signature
  elements (title, landmarks) are visible.
- Any timeout while loading is reported as NavigationTimeout and is not retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

from tui_booking_e2e.services.driver import UiDriver
from tui_booking_e2e.utils.errors import DirectNavigationError, ElementTimeout, NavigationTimeout
from tui_booking_e2e.utils.strings import create_url_regex

P = TypeVar("P", bound="BookingPage")


@dataclass(frozen=True)
class Landmark:
    selector: str
    has_text: str | None = None


@dataclass(frozen=True)
class PageSignature:
    path_prefix: str
    url_timeout_ms: int
    landmarks: tuple[Landmark, ...] = ()
    title: str | None = None
    wait_until: str = "domcontentloaded"


class BookingPage(Protocol):
    driver: UiDriver
    path_prefix: str

    async def navigate(self: P, slug: str | None = None) -> P: ...

    async def page_loaded(self: P) -> P: ...


async def wait_for_signature(driver: UiDriver, signature: PageSignature) -> None:
    """
    What it does:
    - Waits for the URL, then the title, then each landmark, in that order.

    Behavior:
    - URL wait uses the page-specific timeout; element waits use the driver default.
    - Raises NavigationTimeout naming the path prefix on any timeout.
    """
    await driver.wait_url(
        create_url_regex(signature.path_prefix),
        timeout_ms=signature.url_timeout_ms,
        wait_until=signature.wait_until,
    )
    try:
        if signature.title is not None:
            await driver.wait_title(signature.title)
        for landmark in signature.landmarks:
            await driver.wait_visible(driver.locate(landmark.selector, has_text=landmark.has_text))
    except ElementTimeout as e:
        raise NavigationTimeout(
            f"Page {signature.path_prefix} did not finish loading: {e}"
        ) from e


def reject_direct_navigation(page_name: str) -> DirectNavigationError:
    return DirectNavigationError(
        f"{page_name} is only reachable through the booking flow, not by direct navigation"
    )
