import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from src.domain.exceptions import SeatNotFoundError
from src.domain.seat import OCCUPIED_SEATS, Seat
from src.domain.seat_grid import build_seat_catalog
from src.domain.state_machine import SeatState, SeatStateMachine
from src.infrastructure.repositories.seat_repository import SeatRepository


logger = logging.getLogger(__name__)


class SelectionOutcome(str, Enum):
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class BookingSession:
    selected_seats: Tuple[Seat, ...]
    total_price: int
    seat_count: int

    @property
    def selected_seat_ids(self) -> List[str]:
        return [seat.id for seat in self.selected_seats]

    @property
    def booking_enabled(self) -> bool:
        return self.seat_count > 0


class SelectionStore:
    """
    Owns the seat catalog for one booking session.

    All state changes go through toggle/select/deselect/clear. Derived
    values (total, count, selected ids) are recomputed from the catalog on
    every read, so they can never drift from seat state. Unknown seat ids
    make an action a logged no-op; occupied seats are silently left alone.
    """

    def __init__(self, occupied_ids: Iterable[str] = OCCUPIED_SEATS):
        self._occupied_ids = tuple(occupied_ids)
        self.seat_repository = SeatRepository(
            build_seat_catalog(self._occupied_ids)
        )
        # Route handlers run in a thread pool; actions must not interleave.
        self._lock = threading.Lock()

    # -----------------------------
    # Actions
    # -----------------------------
    def toggle_seat(self, seat_id: str) -> SelectionOutcome:
        with self._lock:
            seat = self._lookup(seat_id, action="toggle")
            if seat is None:
                return SelectionOutcome.NOT_FOUND

            return self._transition(
                seat, SeatStateMachine.toggled(seat.state)
            )

    def select_seat(self, seat_id: str) -> SelectionOutcome:
        with self._lock:
            seat = self._lookup(seat_id, action="select")
            if seat is None:
                return SelectionOutcome.NOT_FOUND

            return self._transition(seat, SeatState.SELECTED)

    def deselect_seat(self, seat_id: str) -> SelectionOutcome:
        with self._lock:
            seat = self._lookup(seat_id, action="deselect")
            if seat is None:
                return SelectionOutcome.NOT_FOUND

            return self._transition(seat, SeatState.AVAILABLE)

    def clear_selection(self) -> int:
        """Release every selected seat. Returns how many were released."""
        with self._lock:
            selected = self.seat_repository.list_by_state(SeatState.SELECTED)
            for seat in selected:
                self._transition(seat, SeatState.AVAILABLE)

        if selected:
            logger.info("Cleared selection of %s seat(s).", len(selected))
        return len(selected)

    def reset(self) -> None:
        """Discard the session and rebuild the initial catalog."""
        with self._lock:
            self.seat_repository.load(build_seat_catalog(self._occupied_ids))
        logger.info("Seat selection session reset.")

    # -----------------------------
    # Selectors
    # -----------------------------
    @property
    def seats(self) -> Tuple[Seat, ...]:
        return self.seat_repository.list_all()

    @property
    def selected_seats(self) -> Tuple[Seat, ...]:
        return self.seat_repository.list_by_state(SeatState.SELECTED)

    def get_total_price(self) -> int:
        return sum(seat.price for seat in self.selected_seats)

    def get_selected_seat_count(self) -> int:
        return len(self.selected_seats)

    def get_seat_by_id(self, seat_id: str) -> Optional[Seat]:
        return self.seat_repository.get_by_id(seat_id)

    def require_seat(self, seat_id: str) -> Seat:
        seat = self.seat_repository.get_by_id(seat_id)
        if seat is None:
            raise SeatNotFoundError(seat_id)
        return seat

    def get_selected_seat_ids(self) -> List[str]:
        # Catalog (row-major) order, not the order seats were picked in.
        return [seat.id for seat in self.selected_seats]

    def is_booking_enabled(self) -> bool:
        return self.get_selected_seat_count() > 0

    def get_booking_session(self) -> BookingSession:
        with self._lock:
            selected = self.selected_seats
        return BookingSession(
            selected_seats=selected,
            total_price=sum(seat.price for seat in selected),
            seat_count=len(selected),
        )

    # -----------------------------
    # Internals
    # -----------------------------
    def _lookup(self, seat_id: str, action: str) -> Optional[Seat]:
        seat = self.seat_repository.get_by_id(seat_id)
        if seat is None:
            logger.warning(
                "Ignoring %s for unknown seat %r.", action, seat_id
            )
        return seat

    def _transition(
        self, seat: Seat, to_state: SeatState
    ) -> SelectionOutcome:
        if seat.state is to_state or SeatStateMachine.is_terminal(seat.state):
            return SelectionOutcome.UNCHANGED

        SeatStateMachine.validate_transition(seat.state, to_state)
        self.seat_repository.update_state(seat, to_state)
        logger.debug(
            "Seat %s: %s -> %s", seat.id, seat.state.value, to_state.value
        )
        return SelectionOutcome.CHANGED
