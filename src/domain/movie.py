from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    id: str
    title: str
    duration: int  # minutes


MOCK_MOVIE = Movie(
    id="avengers-001",
    title="Avengers",
    duration=142,
)
