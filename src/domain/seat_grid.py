# src/domain/seat_grid.py

from enum import Enum
from typing import Iterable, List, Sequence

from src.domain.exceptions import CatalogIntegrityError
from src.domain.seat import (
    OCCUPIED_SEATS,
    SEAT_COLUMNS,
    SEAT_ROWS,
    Seat,
    format_seat_identifier,
    parse_seat_identifier,
    price_for_type,
    seat_type_for_row,
)
from src.domain.state_machine import SeatState


CATALOG_SIZE = len(SEAT_ROWS) * len(SEAT_COLUMNS)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def build_seat_catalog(
    occupied_ids: Iterable[str] = OCCUPIED_SEATS,
) -> List[Seat]:
    """
    Build the full seat catalog in row-major order (A1..A10, ..., F10).

    Every pre-occupied id must be a well-formed seat id; a malformed one
    raises InvalidSeatIdentifierError instead of being skipped.
    """
    occupied = set()
    for seat_id in occupied_ids:
        parse_seat_identifier(seat_id)
        occupied.add(seat_id)

    seats: List[Seat] = []
    for row in SEAT_ROWS:
        seat_type = seat_type_for_row(row)
        for column in SEAT_COLUMNS:
            seat_id = format_seat_identifier(row, column)
            seats.append(
                Seat(
                    id=seat_id,
                    row=row,
                    column=column,
                    type=seat_type,
                    price=price_for_type(seat_type),
                    state=(
                        SeatState.OCCUPIED
                        if seat_id in occupied
                        else SeatState.AVAILABLE
                    ),
                )
            )

    validate_catalog(seats)
    return seats


def validate_catalog(seats: Sequence[Seat]) -> None:
    """
    Raises CatalogIntegrityError if the catalog is not exactly one seat
    per grid cell in row-major order with type and price derived from row.
    """
    if len(seats) != CATALOG_SIZE:
        raise CatalogIntegrityError(
            f"Expected {CATALOG_SIZE} seats, got {len(seats)}"
        )

    seen = set()
    for index, seat in enumerate(seats):
        if seat.id in seen:
            raise CatalogIntegrityError(f"Duplicate seat id: {seat.id}")
        seen.add(seat.id)

        expected_row = SEAT_ROWS[index // len(SEAT_COLUMNS)]
        expected_column = SEAT_COLUMNS[index % len(SEAT_COLUMNS)]
        if (seat.row, seat.column) != (expected_row, expected_column):
            raise CatalogIntegrityError(
                f"Seat {seat.id} out of row-major order at position {index}"
            )
        if seat.id != format_seat_identifier(seat.row, seat.column):
            raise CatalogIntegrityError(
                f"Seat id {seat.id} does not match row {seat.row} "
                f"and column {seat.column}"
            )

        expected_type = seat_type_for_row(seat.row)
        if seat.type is not expected_type:
            raise CatalogIntegrityError(
                f"Seat {seat.id} has type {seat.type.value}, "
                f"expected {expected_type.value}"
            )
        if seat.price != price_for_type(expected_type):
            raise CatalogIntegrityError(
                f"Seat {seat.id} has price {seat.price}, "
                f"expected {price_for_type(expected_type)}"
            )
        if not isinstance(seat.state, SeatState):
            raise CatalogIntegrityError(
                f"Seat {seat.id} has unknown state {seat.state!r}"
            )


def adjacent_seat_id(seat_id: str, direction: Direction) -> str:
    """
    Id of the grid neighbour in the given direction, clamped at the edges.
    Occupied seats stay focusable, so availability is not considered.
    """
    row, column = parse_seat_identifier(seat_id)
    row_index = SEAT_ROWS.index(row)
    column_index = SEAT_COLUMNS.index(column)

    if direction is Direction.UP:
        row_index = max(row_index - 1, 0)
    elif direction is Direction.DOWN:
        row_index = min(row_index + 1, len(SEAT_ROWS) - 1)
    elif direction is Direction.LEFT:
        column_index = max(column_index - 1, 0)
    elif direction is Direction.RIGHT:
        column_index = min(column_index + 1, len(SEAT_COLUMNS) - 1)
    else:
        raise TypeError(f"Expected Direction, got {type(direction)}")

    return format_seat_identifier(
        SEAT_ROWS[row_index], SEAT_COLUMNS[column_index]
    )
