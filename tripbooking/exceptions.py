class TripBookingError(Exception):
    """Base class for errors raised by the trip booking service."""


class StorageError(TripBookingError):
    """Any failure coming from the backing store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
