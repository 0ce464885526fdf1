from __future__ import annotations

import re
from typing import Any, Protocol

# Opaque element handle: a Playwright Locator for the real driver, a key for the fake one.
ElementRef = Any

DEFAULT_TIMEOUT_MS = 30_000


class UiDriver(Protocol):
    """
    What it does:
    - Defines the browser capabilities pages and filters are allowed to use.

    Why it matters:
    - Pages stay independent of the automation backend
      (UiElements over Playwright for real runs, FakeDriver for unit tests).

    Behavior:
    - locate/get_by_text/get_by_role/nth build lazy references and never wait.
    - Every other call is awaited and fails with ElementTimeout or NavigationTimeout
      when its wait point is not reached in time.
    """

    @property
    def current_url(self) -> str: ...

    def locate(
        self,
        selector: str,
        *,
        within: ElementRef | None = None,
        has_text: str | None = None,
    ) -> ElementRef: ...

    def get_by_text(
        self, text: str, *, within: ElementRef | None = None, exact: bool = False
    ) -> ElementRef: ...

    def get_by_role(
        self, role: str, name: str, *, within: ElementRef | None = None
    ) -> ElementRef: ...

    def nth(self, ref: ElementRef, index: int) -> ElementRef: ...

    async def all(self, ref: ElementRef) -> list[ElementRef]: ...

    async def click(self, ref: ElementRef, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None: ...

    async def fill(self, ref: ElementRef, value: str) -> None: ...

    async def select_option(
        self, ref: ElementRef, value: str | None = None, *, label: str | None = None
    ) -> None: ...

    async def wait_visible(
        self, ref: ElementRef, timeout_ms: int = DEFAULT_TIMEOUT_MS, visible: bool = True
    ) -> None: ...

    async def is_visible(self, ref: ElementRef, timeout_ms: int = 0) -> bool: ...

    async def wait_url(
        self,
        pattern: str | re.Pattern[str],
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        wait_until: str = "networkidle",
    ) -> None: ...

    async def wait_title(self, title: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None: ...

    async def wait_text(
        self, ref: ElementRef, expected: str, timeout_ms: int = DEFAULT_TIMEOUT_MS
    ) -> None: ...

    async def navigate_to(
        self,
        url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        wait_until: str = "domcontentloaded",
    ) -> None: ...

    async def read_text(self, ref: ElementRef) -> str: ...

    async def read_attribute(self, ref: ElementRef, name: str) -> str | None: ...

    async def is_disabled(self, ref: ElementRef) -> bool: ...

    async def is_checked(self, ref: ElementRef) -> bool: ...

    async def press_key(self, key: str) -> None: ...

    async def reload(self) -> None: ...

    async def sleep(self, seconds: float) -> None: ...

    async def screenshot(self, path: str) -> None: ...

    async def wait_for_element_with_retries(
        self, ref: ElementRef, max_retries: int = 10, interval_s: float = 1.0
    ) -> int: ...
