from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from tui_booking_e2e.domain.enums import FilterDayTolerance

MIN_CHILD_AGE = 0
MAX_CHILD_AGE = 17

# {"Adult1": {"firstName": "...", "sureName": "...", "gender": "Male", "mobileNumber": "..."}}
PassengerDetailsData = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class DestinationSelection:
    country: str | None = None
    city: str | None = None


@dataclass(frozen=True)
class DateSelection:
    tolerance: FilterDayTolerance = FilterDayTolerance.EXACT
    day: str | None = None


@dataclass(frozen=True)
class TravelersSelection:
    """
    `children_ages=None` means no children are requested.
    An empty tuple requests children without specifying ages.
    """

    adults: int = 2
    children_ages: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if self.adults < 1:
            raise ValueError(f"At least one adult is required, got {self.adults}")
        for age in self.children_ages or ():
            if not MIN_CHILD_AGE <= age <= MAX_CHILD_AGE:
                raise ValueError(
                    f"Child age must be between {MIN_CHILD_AGE} and {MAX_CHILD_AGE}, got {age}"
                )


@dataclass(frozen=True)
class SearchCriteria:
    departure_airport: str | None = None
    destination: DestinationSelection = field(default_factory=DestinationSelection)
    date: DateSelection = field(default_factory=DateSelection)
    travelers: TravelersSelection = field(default_factory=TravelersSelection)


@dataclass(frozen=True)
class ValidationCase:
    group_key: str
    field_key: str
    value: str
    expected_error_text: str

    @property
    def field_path(self) -> tuple[str, str]:
        return (self.group_key, self.field_key)

    def as_passenger_data(self) -> dict[str, dict[str, str]]:
        return {self.group_key: {self.field_key: self.value}}
