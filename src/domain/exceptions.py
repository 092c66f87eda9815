

class SeatSelectionError(Exception):
    """
    Base exception for all domain-level errors
    inside the seat selection engine.
    """


class InvalidStateTransitionError(SeatSelectionError):
    """
    Raised when an illegal seat state transition is attempted.
    """

    def __init__(self, from_state: str, to_state: str):
        self.from_state = from_state
        self.to_state = to_state

        message = (
            f"Illegal seat state transition attempted: "
            f"{from_state} -> {to_state}"
        )
        super().__init__(message)


class SeatNotFoundError(SeatSelectionError):
    """Raised when a seat id does not match any catalog entry."""

    def __init__(self, seat_id: str):
        self.seat_id = seat_id
        super().__init__(f"Seat not found: {seat_id!r}")


class InvalidSeatIdentifierError(SeatSelectionError):
    """
    Raised when a string does not follow the {Row}{Column} grammar,
    e.g. "A1" or "F10".
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid seat identifier: {value!r}")


class CatalogIntegrityError(SeatSelectionError):
    """Raised when the seat catalog is built in an inconsistent shape."""
