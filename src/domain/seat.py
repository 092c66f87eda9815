# src/domain/seat.py

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from src.domain.exceptions import InvalidSeatIdentifierError
from src.domain.state_machine import SeatState


class SeatType(str, Enum):
    STANDARD = "standard"
    VIP = "vip"


SEAT_ROWS: Tuple[str, ...] = ("A", "B", "C", "D", "E", "F")
SEAT_COLUMNS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)

VIP_ROWS = frozenset({"E", "F"})

# Prices are whole VND, no subunits.
SEAT_PRICES: Dict[SeatType, int] = {
    SeatType.STANDARD: 50000,
    SeatType.VIP: 80000,
}

# Pre-sold seats for the demo session.
OCCUPIED_SEATS: Tuple[str, ...] = (
    "A3",
    "B5",
    "C7",
    "D2",
    "E8",
    "F4",
)

_SEAT_ID_PATTERN = re.compile(r"([A-F])([1-9]|10)")


@dataclass(frozen=True)
class Seat:
    id: str
    row: str
    column: int
    type: SeatType
    price: int
    state: SeatState

    @property
    def is_selected(self) -> bool:
        return self.state is SeatState.SELECTED

    @property
    def is_occupied(self) -> bool:
        return self.state is SeatState.OCCUPIED


def format_seat_identifier(row: str, column: int) -> str:
    return f"{row}{column}"


def parse_seat_identifier(value: str) -> Tuple[str, int]:
    """
    Split a seat id into (row, column).

    Accepts exactly Row in A-F followed by Column in 1-10 with no leading
    zero. Anything else, including lowercase rows and surrounding
    whitespace, raises InvalidSeatIdentifierError.
    """
    if not isinstance(value, str):
        raise InvalidSeatIdentifierError(value)

    match = _SEAT_ID_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidSeatIdentifierError(value)

    return match.group(1), int(match.group(2))


def is_valid_seat_identifier(value: str) -> bool:
    try:
        parse_seat_identifier(value)
    except InvalidSeatIdentifierError:
        return False
    return True


def seat_type_for_row(row: str) -> SeatType:
    if row not in SEAT_ROWS:
        raise InvalidSeatIdentifierError(row)
    return SeatType.VIP if row in VIP_ROWS else SeatType.STANDARD


def price_for_type(seat_type: SeatType) -> int:
    return SEAT_PRICES[seat_type]


def is_seat_in_state(seat: Seat, state: SeatState) -> bool:
    return seat.state is state


def is_seat_selectable(seat: Seat) -> bool:
    return seat.state is not SeatState.OCCUPIED
