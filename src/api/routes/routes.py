import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas.schemas import (
    AdjacentSeatResponse,
    BookingSessionResponse,
    ClearSelectionResponse,
    MovieResponse,
    SeatActionResponse,
    SeatListResponse,
    SeatResponse,
)
from src.application.selection_store import SelectionOutcome, SelectionStore
from src.domain.exceptions import InvalidSeatIdentifierError
from src.domain.movie import MOCK_MOVIE
from src.domain.seat import SEAT_COLUMNS, SEAT_ROWS, parse_seat_identifier
from src.domain.seat_grid import Direction, adjacent_seat_id
from src.infrastructure.settings import CURRENCY


router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(request: Request) -> SelectionStore:
    return request.app.state.selection_store


def _validated_seat_id(seat_id: str) -> str:
    try:
        parse_seat_identifier(seat_id)
    except InvalidSeatIdentifierError as exc:
        logger.info("Rejected seat id %r.", seat_id)
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from exc
    return seat_id


def _session_response(store: SelectionStore) -> BookingSessionResponse:
    return BookingSessionResponse.from_session(
        store.get_booking_session(), currency=CURRENCY
    )


def _run_seat_action(
    store: SelectionStore,
    seat_id: str,
    action: Callable[[str], SelectionOutcome],
) -> SeatActionResponse:
    # seat_id already passed validation, so it is always in the catalog.
    outcome = action(seat_id)

    return SeatActionResponse(
        outcome=outcome.value,
        seat=SeatResponse.from_seat(store.require_seat(seat_id)),
        session=_session_response(store),
    )


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/movie", response_model=MovieResponse)
def get_movie():
    return MovieResponse.from_movie(MOCK_MOVIE)


@router.get("/seats", response_model=SeatListResponse)
def list_seats(store: SelectionStore = Depends(get_store)):
    return SeatListResponse(
        rows=len(SEAT_ROWS),
        columns=len(SEAT_COLUMNS),
        seats=[SeatResponse.from_seat(seat) for seat in store.seats],
    )


@router.get("/seats/{seat_id}", response_model=SeatResponse)
def get_seat(seat_id: str, store: SelectionStore = Depends(get_store)):
    seat_id = _validated_seat_id(seat_id)
    return SeatResponse.from_seat(store.require_seat(seat_id))


@router.get("/seats/{seat_id}/adjacent", response_model=AdjacentSeatResponse)
def get_adjacent_seat(seat_id: str, direction: Direction):
    seat_id = _validated_seat_id(seat_id)
    return AdjacentSeatResponse(
        from_seat_id=seat_id,
        direction=direction.value,
        seat_id=adjacent_seat_id(seat_id, direction),
    )


@router.post("/seats/{seat_id}/toggle", response_model=SeatActionResponse)
def toggle_seat(seat_id: str, store: SelectionStore = Depends(get_store)):
    seat_id = _validated_seat_id(seat_id)
    return _run_seat_action(store, seat_id, store.toggle_seat)


@router.post("/seats/{seat_id}/select", response_model=SeatActionResponse)
def select_seat(seat_id: str, store: SelectionStore = Depends(get_store)):
    seat_id = _validated_seat_id(seat_id)
    return _run_seat_action(store, seat_id, store.select_seat)


@router.post("/seats/{seat_id}/deselect", response_model=SeatActionResponse)
def deselect_seat(seat_id: str, store: SelectionStore = Depends(get_store)):
    seat_id = _validated_seat_id(seat_id)
    return _run_seat_action(store, seat_id, store.deselect_seat)


@router.post("/selection/clear", response_model=ClearSelectionResponse)
def clear_selection(store: SelectionStore = Depends(get_store)):
    released = store.clear_selection()
    return ClearSelectionResponse(
        released=released,
        session=_session_response(store),
    )


@router.get("/session", response_model=BookingSessionResponse)
def get_session(store: SelectionStore = Depends(get_store)):
    return _session_response(store)


@router.post("/session/reset", response_model=BookingSessionResponse)
def reset_session(store: SelectionStore = Depends(get_store)):
    store.reset()
    return _session_response(store)
