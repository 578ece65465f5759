"""Random strategy implementation.

Strategy:
- Drop any pit held completely
- Otherwise ask a random opponent holding cards for a random missing card
  of a pit in hand
- Now and then (declare_rate), or when no opponent has cards left,
  declare a pit and guess which teammates hold the missing cards
"""

import random

from literature_engine.models.action import CardAsk, Claim, SetDeclaration
from literature_engine.models.pit import PIT_SIZE, Pit, cards_of

from .base import SeatView, Strategy


class RandomStrategy(Strategy):
    """Plays legal but uninformed moves."""

    name = "random"

    def __init__(self, declare_rate: float = 0.05, rng: random.Random | None = None):
        """Initialize strategy.

        Args:
            declare_rate: Chance of declaring a pit that is not fully held
            rng: Random source (a fresh unseeded one if not provided)
        """
        self.declare_rate = declare_rate
        self.rng = rng or random.Random()

    def select_action(self, view: SeatView) -> CardAsk | SetDeclaration:
        pits = view.pits_in_hand()

        for pit, cards in pits.items():
            if len(cards) == PIT_SIZE:
                return SetDeclaration(pit=pit)

        opponents = view.seats_with_cards(view.opponents)
        pit = self.rng.choice(sorted(pits))

        if not opponents or self.rng.random() < self.declare_rate:
            return self._guess_declaration(view, pit)

        missing = [c for c in cards_of(pit) if c not in pits[pit]]
        return CardAsk(target=self.rng.choice(opponents), card=self.rng.choice(missing))

    def _guess_declaration(self, view: SeatView, pit: Pit) -> SetDeclaration:
        held = view.pits_in_hand()[pit]
        candidates = view.seats_with_cards(view.teammates) or view.teammates
        claims = tuple(
            Claim(seat=self.rng.choice(candidates), card=card)
            for card in cards_of(pit)
            if card not in held
        )
        return SetDeclaration(pit=pit, claims=claims)

    def select_nominee(self, view: SeatView) -> int:
        team_seats = sorted([view.seat] + view.teammates)
        return self.rng.choice(view.seats_with_cards(team_seats))
