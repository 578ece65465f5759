"""Outcome records returned by the call resolver."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .card import Card
from .pit import Pit
from .seat import Team


class BurnReason(str, Enum):
    """Why a pit was burnt."""

    BAD_ASK = "bad_ask"  # asked without holding the pit, or for an owned card
    NO_CARD_OF_PIT = "no_card_of_pit"  # declared a pit without holding any of it
    COUNT_MISMATCH = "count_mismatch"  # claims plus own cards are not six
    WRONG_CLAIM = "wrong_claim"


class DropKind(str, Enum):
    """How a pit was dropped."""

    SELF = "self"  # declarer held all six cards
    COLLECTIVE = "collective"


class CardAskSuccess(BaseModel, frozen=True):
    kind: Literal["CARD_ASK_SUCCESS"] = "CARD_ASK_SUCCESS"
    card: Card
    source: int
    recipient: int


class CardAskFailure(BaseModel, frozen=True):
    kind: Literal["CARD_ASK_FAILURE"] = "CARD_ASK_FAILURE"
    card: Card
    asker: int
    target: int


class SetBurn(BaseModel, frozen=True):
    kind: Literal["SET_BURN"] = "SET_BURN"
    pit: Pit
    offending_team: Team
    credited_team: Team
    reason: BurnReason
    seat: int


class SetDrop(BaseModel, frozen=True):
    kind: Literal["SET_DROP"] = "SET_DROP"
    pit: Pit
    dropping_team: Team
    drop_kind: DropKind
    seat: int


Outcome = Annotated[
    Union[CardAskSuccess, CardAskFailure, SetBurn, SetDrop],
    Field(discriminator="kind"),
]


class SeatNominated(BaseModel, frozen=True):
    """A pending team handed the turn to one of its seats."""

    kind: Literal["SEAT_NOMINATED"] = "SEAT_NOMINATED"
    team: Team
    seat: int
