from __future__ import annotations

from enum import StrEnum


class FilterDayTolerance(StrEnum):
    EXACT = "0"
    THREE_DAYS = "3"
    SEVEN_DAYS = "7"
    FOURTEEN_DAYS = "14"


TOLERANCE_LABELS: dict[FilterDayTolerance, str] = {
    FilterDayTolerance.EXACT: "Niet flexibel",
    FilterDayTolerance.THREE_DAYS: "+/- 3 dagen",
    FilterDayTolerance.SEVEN_DAYS: "+/- 7 dagen",
    FilterDayTolerance.FOURTEEN_DAYS: "+/- 14 dagen",
}


def tolerance_label(value: object) -> str:
    """
    Maps a tolerance (enum, "7", 7, ...) to the radio label shown in the date picker.

    Unknown values map to the label of FilterDayTolerance.EXACT.
    """
    try:
        tolerance = FilterDayTolerance(str(value))
    except ValueError:
        tolerance = FilterDayTolerance.EXACT
    return TOLERANCE_LABELS[tolerance]


class SaveFormName(StrEnum):
    DESTINATION = "Destination"
    DEPARTURE = "Departure"
    DATE = "Date"
    TRAVELERS = "Travelers"


SAVE_BUTTON_LABELS: dict[SaveFormName, str] = {
    SaveFormName.DESTINATION: "Opslaan destinations",
    SaveFormName.DEPARTURE: "Opslaan airports",
    SaveFormName.DATE: "Opslaan Departure date",
    SaveFormName.TRAVELERS: "Opslaan room and guest",
}


class ResetFormName(StrEnum):
    DEPARTURE = "Departure"
    DESTINATION = "Destination"


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"
