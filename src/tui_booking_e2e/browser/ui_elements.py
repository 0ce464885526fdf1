"""
ui_elements.py

What this module does
- Implements the `UiDriver` capabilities on top of a Playwright async `Page`.
- Converts Playwright timeouts into the journey's own error types.

Behavior summary
- Locator builders (`locate`, `get_by_text`, `get_by_role`, `nth`) are lazy and never wait.
- `click`/`fill`/`select_option` wait for visibility first (30s default).
- URL waits default to `networkidle`, navigation to `domcontentloaded`.
"""

from __future__ import annotations

import re
from collections.abc import Awaitable
from typing import TypeVar

from playwright.async_api import Locator, Page, expect
from playwright.async_api import TimeoutError as PWTimeoutError

from tui_booking_e2e.services import retry
from tui_booking_e2e.services.driver import DEFAULT_TIMEOUT_MS
from tui_booking_e2e.utils.errors import ElementTimeout, NavigationTimeout

T = TypeVar("T")


class UiElements:
    """
    Playwright implementation of UiDriver.

    Element references handed out by this class are Playwright Locators, so they are
    re-resolved against the live DOM on every use.
    """

    def __init__(self, page: Page, *, default_timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
        self.page = page
        self.default_timeout_ms = default_timeout_ms

    @property
    def current_url(self) -> str:
        return self.page.url

    # -------------------- Locators --------------------

    def locate(
        self,
        selector: str,
        *,
        within: Locator | None = None,
        has_text: str | None = None,
    ) -> Locator:
        scope = within if within is not None else self.page
        loc = scope.locator(selector)
        if has_text is not None:
            loc = loc.filter(has_text=has_text)
        return loc

    def get_by_text(
        self, text: str, *, within: Locator | None = None, exact: bool = False
    ) -> Locator:
        scope = within if within is not None else self.page
        return scope.get_by_text(text, exact=exact)

    def get_by_role(self, role: str, name: str, *, within: Locator | None = None) -> Locator:
        scope = within if within is not None else self.page
        return scope.get_by_role(role, name=name)

    def nth(self, ref: Locator, index: int) -> Locator:
        return ref.nth(index)

    async def all(self, ref: Locator) -> list[Locator]:
        return await ref.all()

    # -------------------- Actions --------------------

    async def click(self, ref: Locator, timeout_ms: int | None = None) -> None:
        timeout_ms = timeout_ms or self.default_timeout_ms
        await self.wait_visible(ref, timeout_ms)
        try:
            await ref.click(timeout=timeout_ms)
        except PWTimeoutError as e:
            raise ElementTimeout(f"Element not clickable within {timeout_ms}ms: {ref}") from e

    async def fill(self, ref: Locator, value: str) -> None:
        await self.wait_visible(ref)
        await self._bounded(ref.fill(value), "fill", ref)

    async def select_option(
        self, ref: Locator, value: str | None = None, *, label: str | None = None
    ) -> None:
        await self.wait_visible(ref)
        if label is not None:
            await self._bounded(ref.select_option(label=label), "select", ref)
        else:
            await self._bounded(ref.select_option(value), "select", ref)

    async def press_key(self, key: str) -> None:
        await self.page.keyboard.press(key)

    async def reload(self) -> None:
        await self.page.reload()

    async def sleep(self, seconds: float) -> None:
        await self.page.wait_for_timeout(seconds * 1000)

    async def screenshot(self, path: str) -> None:
        await self.page.screenshot(path=path, full_page=True)

    # -------------------- Waits --------------------

    async def wait_visible(
        self, ref: Locator, timeout_ms: int | None = None, visible: bool = True
    ) -> None:
        timeout_ms = timeout_ms or self.default_timeout_ms
        state = "visible" if visible else "hidden"
        try:
            await ref.wait_for(state=state, timeout=timeout_ms)
        except PWTimeoutError as e:
            raise ElementTimeout(f"Element not {state} within {timeout_ms}ms: {ref}") from e

    async def is_visible(self, ref: Locator, timeout_ms: int = 0) -> bool:
        """Visibility probe: never raises, waits at most `timeout_ms`."""
        if timeout_ms <= 0:
            return await ref.is_visible()
        try:
            await ref.wait_for(state="visible", timeout=timeout_ms)
        except PWTimeoutError:
            return False
        return True

    async def wait_url(
        self,
        pattern: str | re.Pattern[str],
        timeout_ms: int | None = None,
        wait_until: str = "networkidle",
    ) -> None:
        timeout_ms = timeout_ms or self.default_timeout_ms
        try:
            await self.page.wait_for_url(pattern, timeout=timeout_ms, wait_until=wait_until)
        except PWTimeoutError as e:
            raise NavigationTimeout(
                f"URL did not match {pattern!r} within {timeout_ms}ms (at {self.page.url})"
            ) from e

    async def wait_title(self, title: str, timeout_ms: int | None = None) -> None:
        timeout_ms = timeout_ms or self.default_timeout_ms
        try:
            await expect(self.page).to_have_title(title, timeout=timeout_ms)
        except AssertionError as e:
            raise ElementTimeout(f"Expected title {title!r} did not match actual") from e

    async def wait_text(self, ref: Locator, expected: str, timeout_ms: int | None = None) -> None:
        """Retries until the element's text equals `expected` (whitespace-normalized)."""
        timeout_ms = timeout_ms or self.default_timeout_ms
        try:
            await expect(ref).to_have_text(expected, timeout=timeout_ms)
        except AssertionError as e:
            raise ElementTimeout(
                f"Element text did not become {expected!r} within {timeout_ms}ms: {ref}"
            ) from e

    async def navigate_to(
        self,
        url: str,
        timeout_ms: int | None = None,
        wait_until: str = "domcontentloaded",
    ) -> None:
        timeout_ms = timeout_ms or self.default_timeout_ms
        try:
            await self.page.goto(url, timeout=timeout_ms, wait_until=wait_until)
        except PWTimeoutError as e:
            raise NavigationTimeout(f"Navigation to {url} timed out after {timeout_ms}ms") from e

    async def wait_for_element_with_retries(
        self, ref: Locator, max_retries: int = 10, interval_s: float = 1.0
    ) -> int:
        return await retry.wait_for_element_with_retries(self, ref, max_retries, interval_s)

    # -------------------- Reads --------------------

    async def read_text(self, ref: Locator) -> str:
        return await self._bounded(ref.inner_text(), "read text of", ref)

    async def read_attribute(self, ref: Locator, name: str) -> str | None:
        return await self._bounded(ref.get_attribute(name), f"read {name} of", ref)

    async def is_disabled(self, ref: Locator) -> bool:
        return await self._bounded(ref.is_disabled(), "read disabled state of", ref)

    async def is_checked(self, ref: Locator) -> bool:
        return await self._bounded(ref.is_checked(), "read checked state of", ref)

    async def _bounded(self, action: Awaitable[T], what: str, ref: Locator) -> T:
        try:
            return await action
        except PWTimeoutError as e:
            raise ElementTimeout(f"Timed out trying to {what}: {ref}") from e
