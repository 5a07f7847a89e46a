"""Exceptions raised by the generator and rater core."""


class LotteryError(Exception):
    """Base class for all core errors."""


class NoDrawingsError(LotteryError):
    """The historical data produced no valid drawings at all."""

    def __init__(self, message: str = "The data contains no valid drawings.", errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


class DataNotReadyError(LotteryError):
    """Frequency data was requested before any drawings were loaded."""

    def __init__(self, message: str = "Data not loaded. Please wait or refresh the page."):
        super().__init__(message)


class InvalidDrawingError(LotteryError, ValueError):
    """A manually submitted drawing failed validation."""


class InvalidTicketError(LotteryError, ValueError):
    """A user-supplied combination could not be rated."""


class NoCandidatesError(LotteryError, RuntimeError):
    """Weighted selection ran out of candidate numbers."""

    def __init__(self, message: str = "No numbers available for selection"):
        super().__init__(message)


class DuplicateDrawingError(InvalidDrawingError):
    """A drawing for the submitted date already exists."""
