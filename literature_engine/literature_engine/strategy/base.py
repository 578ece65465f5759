"""Base strategy class for self-play bots.

Defines the interface that every bot must implement and the view of the
game a single seat is allowed to see.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from literature_engine.game.engine import LiteratureGame
from literature_engine.models.action import CardAsk, SetDeclaration
from literature_engine.models.card import Card, Variant
from literature_engine.models.pit import Pit, pit_of
from literature_engine.models.seat import Team


@dataclass
class SeatView:
    """What one seat can see of the game.

    Fields:
    - seat / team: who is looking
    - hand: own cards
    - hand_sizes: card count of every seat (public)
    - teammates / opponents: other seats of each team
    - resolved: pits already out of play
    """

    seat: int
    team: Team
    variant: Variant
    hand: list[Card] = field(default_factory=list)
    hand_sizes: list[int] = field(default_factory=list)
    teammates: list[int] = field(default_factory=list)
    opponents: list[int] = field(default_factory=list)
    resolved: list[Pit] = field(default_factory=list)

    @classmethod
    def from_game(cls, game: LiteratureGame, seat: int) -> "SeatView":
        """Build the view of one seat.

        Args:
            game: Game being played
            seat: Seat looking at the game

        Returns:
            SeatView for that seat
        """
        team = game.team_of(seat)
        return cls(
            seat=seat,
            team=team,
            variant=game.variant,
            hand=game.hand_of(seat),
            hand_sizes=[game.registry.hand_size(s) for s in range(game.seat_count)],
            teammates=[s for s in game.seats_of(team) if s != seat],
            opponents=game.seats_of(team.opponent),
            resolved=game.ledger.pits_of(Team.A) + game.ledger.pits_of(Team.B),
        )

    def pits_in_hand(self) -> dict[Pit, list[Card]]:
        """Group own cards by pit."""
        pits: dict[Pit, list[Card]] = {}
        for card in self.hand:
            pits.setdefault(pit_of(card), []).append(card)
        return pits

    def seats_with_cards(self, seats: list[int]) -> list[int]:
        return [s for s in seats if self.hand_sizes[s] > 0]


class Strategy(ABC):
    """Abstract base class for bot strategies."""

    name = "base"

    @abstractmethod
    def select_action(self, view: SeatView) -> CardAsk | SetDeclaration:
        """Select the action to take while holding the turn.

        Args:
            view: What the acting seat can see

        Returns:
            A card ask or a set declaration
        """

    @abstractmethod
    def select_nominee(self, view: SeatView) -> int:
        """Select which seat of the own team takes a pending turn.

        Args:
            view: View of the seat deciding for its team

        Returns:
            Seat to nominate
        """
