"""Seats and teams."""

from enum import Enum


class Team(str, Enum):
    """One of the two fixed teams. A holds the first half of the seats."""

    A = "A"
    B = "B"

    @property
    def opponent(self) -> "Team":
        return Team.B if self is Team.A else Team.A

    def __str__(self) -> str:
        return f"Team {self.value}"


def is_seat(seat: int, seat_count: int) -> bool:
    return 0 <= seat < seat_count


def team_of(seat: int, seat_count: int) -> Team:
    """Get the team of a seat.

    Raises:
        ValueError: If the seat does not exist.
    """
    if not is_seat(seat, seat_count):
        raise ValueError(f"Seat {seat} does not exist in a {seat_count}-seat game")
    return Team.A if seat < seat_count // 2 else Team.B


def seats_of(team: Team, seat_count: int) -> list[int]:
    """Get the seats of a team in seat order."""
    half = seat_count // 2
    start = 0 if team is Team.A else half
    return list(range(start, start + half))
