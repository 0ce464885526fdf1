from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from tui_booking_e2e.services.driver import ElementRef
from tui_booking_e2e.utils.errors import CandidateNotFound, EmptyCandidateSet

T = TypeVar("T")


@dataclass(frozen=True)
class Candidate:
    """One option surfaced by a dropdown/list enumeration."""

    handle: ElementRef
    label: str
    enabled: bool = True


def get_random_int(min_value: float, max_value: float, rng: random.Random | None = None) -> int:
    """
    Returns a random integer in [min_value, max_value], both bounds inclusive.

    Non-integer bounds are narrowed inwards (ceil of min, floor of max).
    Not suitable for anything security related.
    """
    source = rng or random
    lo = math.ceil(min_value)
    hi = math.floor(max_value)
    return math.floor(source.random() * (hi - lo + 1)) + lo


def get_random_element(items: Sequence[T], rng: random.Random | None = None) -> T:
    if len(items) == 0:
        raise EmptyCandidateSet("Cannot pick a random element from an empty sequence")
    return items[get_random_int(0, len(items) - 1, rng)]


def select_candidate(
    candidates: Sequence[Candidate],
    wanted_label: str | None = None,
    rng: random.Random | None = None,
) -> Candidate:
    """
    What it does:
    - Picks one enabled candidate, by label or uniformly at random.

    Behavior:
    - Disabled candidates are ignored.
    - No enabled candidate -> EmptyCandidateSet.
    - wanted_label -> first candidate (enumeration order) whose label contains it,
      case-sensitive; CandidateNotFound if none does.
    - Otherwise a uniform pick over the enabled candidates.
    """
    enabled = [c for c in candidates if c.enabled]
    if not enabled:
        raise EmptyCandidateSet("No available options to choose from")

    if wanted_label:
        for candidate in enabled:
            if wanted_label in candidate.label:
                return candidate
        labels = ", ".join(c.label for c in enabled)
        raise CandidateNotFound(
            f"Option with name {wanted_label!r} not found among available options: {labels}"
        )

    return get_random_element(enabled, rng)
