from typing import Literal

from pydantic import BaseModel

from src.application.selection_store import BookingSession
from src.domain.movie import Movie
from src.domain.seat import Seat


class SeatResponse(BaseModel):
    id: str
    row: str
    column: int
    type: Literal["standard", "vip"]
    price: int
    state: Literal["available", "selected", "occupied"]

    @classmethod
    def from_seat(cls, seat: Seat) -> "SeatResponse":
        return cls(
            id=seat.id,
            row=seat.row,
            column=seat.column,
            type=seat.type.value,
            price=seat.price,
            state=seat.state.value,
        )


class SeatListResponse(BaseModel):
    rows: int
    columns: int
    seats: list[SeatResponse]


class BookingSessionResponse(BaseModel):
    selected_seat_ids: list[str]
    selected_seats: list[SeatResponse]
    total_price: int
    seat_count: int
    booking_enabled: bool
    currency: str

    @classmethod
    def from_session(
        cls, session: BookingSession, currency: str
    ) -> "BookingSessionResponse":
        return cls(
            selected_seat_ids=session.selected_seat_ids,
            selected_seats=[
                SeatResponse.from_seat(seat) for seat in session.selected_seats
            ],
            total_price=session.total_price,
            seat_count=session.seat_count,
            booking_enabled=session.booking_enabled,
            currency=currency,
        )


class SeatActionResponse(BaseModel):
    outcome: Literal["changed", "unchanged", "not_found"]
    seat: SeatResponse
    session: BookingSessionResponse


class ClearSelectionResponse(BaseModel):
    released: int
    session: BookingSessionResponse


class AdjacentSeatResponse(BaseModel):
    from_seat_id: str
    direction: str
    seat_id: str


class MovieResponse(BaseModel):
    id: str
    title: str
    duration: int

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(id=movie.id, title=movie.title, duration=movie.duration)
