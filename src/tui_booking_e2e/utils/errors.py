class BookingFlowError(Exception):
    """Base class for every failure raised by the booking journey."""


class NavigationTimeout(BookingFlowError):
    """Raised when a page URL or its signature elements do not appear in time."""


class ElementTimeout(BookingFlowError):
    """Raised when an element does not reach the expected visibility in time."""


class CandidateNotFound(BookingFlowError):
    """Raised when no available option matches the requested label."""


class EmptyCandidateSet(BookingFlowError):
    """Raised when a dropdown or list offers no selectable option at all."""


class SelectionNotApplied(BookingFlowError):
    """Raised when a click did not produce the expected UI state change."""


class RetryExhausted(BookingFlowError):
    """Raised when a bounded retry loop gives up."""


class DirectNavigationError(BookingFlowError):
    """Raised when a page that is only reachable through the flow is opened directly."""


class ValidationMessageMismatch(BookingFlowError, AssertionError):
    """Raised when a field validation message differs from the expected text."""
