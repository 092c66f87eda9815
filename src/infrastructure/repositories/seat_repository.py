# src/infrastructure/repositories/seat_repository.py

from dataclasses import replace
from typing import Dict, Iterable, Optional, Tuple

from src.domain.seat import Seat
from src.domain.state_machine import SeatState


class SeatRepository:
    """
    In-memory seat catalog keyed by id.
    Dict insertion order is the catalog's row-major order.
    """

    def __init__(self, seats: Iterable[Seat]):
        self._seats: Dict[str, Seat] = {}
        self.load(seats)

    def load(self, seats: Iterable[Seat]) -> None:
        self._seats = {seat.id: seat for seat in seats}

    def get_by_id(self, seat_id: str) -> Optional[Seat]:
        return self._seats.get(seat_id)

    def list_all(self) -> Tuple[Seat, ...]:
        return tuple(self._seats.values())

    def list_by_state(self, state: SeatState) -> Tuple[Seat, ...]:
        return tuple(
            seat for seat in self._seats.values() if seat.state is state
        )

    def update_state(self, seat: Seat, state: SeatState) -> Seat:
        """
        Replace the stored record with a copy in the new state.
        Seats are frozen, so callers holding the old record keep a
        consistent snapshot.
        """
        if seat.id not in self._seats:
            raise KeyError(seat.id)

        updated = replace(seat, state=state)
        self._seats[seat.id] = updated
        return updated

    def __len__(self) -> int:
        return len(self._seats)
