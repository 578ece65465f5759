"""Game models."""

from .action import Action, CardAsk, Claim, SetDeclaration, parse_action
from .card import Card, CardIndex, JokerColor, Rank, Suit, Variant
from .outcome import (
    BurnReason,
    CardAskFailure,
    CardAskSuccess,
    DropKind,
    Outcome,
    SeatNominated,
    SetBurn,
    SetDrop,
)
from .pit import Pit, cards_of, deck_for, pit_of, pits_for
from .seat import Team, seats_of, team_of
from .turn import SeatTurn, TeamPending, TurnState

__all__ = [
    "Action",
    "BurnReason",
    "Card",
    "CardAsk",
    "CardAskFailure",
    "CardAskSuccess",
    "CardIndex",
    "Claim",
    "DropKind",
    "JokerColor",
    "Outcome",
    "Pit",
    "Rank",
    "SeatNominated",
    "SeatTurn",
    "SetBurn",
    "SetDeclaration",
    "SetDrop",
    "Suit",
    "Team",
    "TeamPending",
    "TurnState",
    "Variant",
    "cards_of",
    "deck_for",
    "parse_action",
    "pit_of",
    "pits_for",
    "seats_of",
    "team_of",
]
