"""Turn state: a seat must act, or a team must nominate a seat."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .seat import Team


class SeatTurn(BaseModel, frozen=True):
    """The given seat must act next."""

    kind: Literal["seat"] = "seat"
    seat: int

    def __str__(self) -> str:
        return f"Seat {self.seat}"


class TeamPending(BaseModel, frozen=True):
    """The team must nominate one of its seats before any action."""

    kind: Literal["team_pending"] = "team_pending"
    team: Team

    def __str__(self) -> str:
        return f"{self.team} (seat undecided)"


TurnState = Annotated[Union[SeatTurn, TeamPending], Field(discriminator="kind")]
