from __future__ import annotations

import re


def escape_regex(value: str) -> str:
    return re.escape(value)


def create_url_regex(page_prefix: str) -> re.Pattern[str]:
    """Matches any URL that contains `page_prefix` literally."""
    return re.compile(f".*{escape_regex(page_prefix)}.*")


def build_page_url(base_url: str, page_prefix: str) -> str:
    return f"{base_url.rstrip('/')}/{page_prefix.lstrip('/')}"
