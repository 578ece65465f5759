"""Game engine for Literature."""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Any, Sequence

from literature_engine.errors import ActionRejected, InvariantViolation
from literature_engine.models.action import CardAsk, SetDeclaration
from literature_engine.models.card import Card, CardIndex, Variant
from literature_engine.models.outcome import (
    CardAskFailure,
    CardAskSuccess,
    SeatNominated,
    SetBurn,
    SetDrop,
)
from literature_engine.models.pit import deck_for
from literature_engine.models.seat import Team, seats_of, team_of
from literature_engine.models.turn import SeatTurn, TeamPending

from .ledger import ScoreLedger
from .registry import CardRegistry
from .resolver import CallResolver
from .validator import ActionValidator, ValidationResult

logger = logging.getLogger(__name__)

OutcomeRecord = CardAskSuccess | CardAskFailure | SetBurn | SetDrop
HistoryRecord = OutcomeRecord | SeatNominated


def shuffled_deck(variant: Variant, rng: random.Random | None = None) -> list[Card]:
    """Get the variant's cards in a uniformly random order."""
    cards = deck_for(variant)
    (rng or random).shuffle(cards)
    return cards


def validate_deck(deck: Sequence[Card], variant: Variant) -> None:
    """Check that a deck is exactly a permutation of the variant's cards.

    Raises:
        InvariantViolation: If the length or the card multiset differs.
    """
    expected = deck_for(variant)
    if len(deck) != len(expected):
        raise InvariantViolation(
            f"Deck has {len(deck)} cards, {variant.value} needs {len(expected)}"
        )
    if Counter(deck) != Counter(expected):
        raise InvariantViolation(f"Deck is not a permutation of the {variant.value} deck")


class LiteratureGame:
    """One game instance: hands, scores and the turn state machine.

    Every action is validated first and then resolved atomically; a rejected
    action raises ActionRejected and leaves the game untouched.
    """

    def __init__(
        self,
        variant: Variant,
        registry: CardRegistry,
        ledger: ScoreLedger | None = None,
    ):
        """Initialize a game from a dealt registry.

        Args:
            variant: Game variant
            registry: Registry holding the initial deal
            ledger: Score ledger (a fresh one if not provided)
        """
        if registry.seat_count != variant.seat_count:
            raise InvariantViolation(
                f"{variant.value} needs {variant.seat_count} seats, "
                f"registry has {registry.seat_count}"
            )
        self.variant = variant
        self.registry = registry
        self.ledger = ledger or ScoreLedger(variant)
        self.validator = ActionValidator(registry, self.ledger, variant)
        self.resolver = CallResolver(registry, self.ledger)

        self._turn: SeatTurn | TeamPending = SeatTurn(seat=0)
        self.history: list[HistoryRecord] = []

    @classmethod
    def deal_hands(
        cls,
        seat_count: int,
        variant: Variant | None = None,
        deck: Sequence[Card] | None = None,
        rng: random.Random | None = None,
    ) -> LiteratureGame:
        """Deal a new game.

        Args:
            seat_count: Number of seats (6 or 8)
            variant: Game variant (inferred from seat_count if not provided)
            deck: Custom deck order; a fresh shuffle if not provided
            rng: Random source for the shuffle

        Returns:
            A game with seat 0 to act

        Raises:
            InvariantViolation: If the seat count does not fit the variant or
                the custom deck is not a permutation of the variant's cards.
        """
        if variant is None:
            try:
                variant = Variant.for_seats(seat_count)
            except ValueError as e:
                raise InvariantViolation(str(e)) from e
        if seat_count != variant.seat_count:
            raise InvariantViolation(
                f"{variant.value} is played with {variant.seat_count} seats, not {seat_count}"
            )

        if deck is None:
            deck = shuffled_deck(variant, rng)
        else:
            validate_deck(deck, variant)

        index = CardIndex(deck_for(variant))
        registry = CardRegistry.from_deal(index, seat_count, deck)
        logger.debug(f"Dealt {len(deck)} cards to {seat_count} seats ({variant.value})")
        return cls(variant, registry)

    @property
    def seat_count(self) -> int:
        return self.registry.seat_count

    def current_turn(self) -> SeatTurn | TeamPending:
        return self._turn

    def hand_of(self, seat: int) -> list[Card]:
        return self.registry.hand_of(seat)

    def owner_of(self, card: Card) -> int | None:
        return self.registry.owner_of(card)

    def score_of(self, team: Team) -> int:
        return self.ledger.score_of(team)

    def team_of(self, seat: int) -> Team:
        return team_of(seat, self.seat_count)

    def seats_of(self, team: Team) -> list[int]:
        return seats_of(team, self.seat_count)

    def is_game_over(self) -> bool:
        return self.ledger.is_game_over()

    def winner(self) -> Team | None:
        """Get the winning team, or None for a draw or an unfinished game."""
        return self.ledger.winner()

    def act(self, action: CardAsk | SetDeclaration) -> OutcomeRecord:
        """Resolve an action for the seat holding the turn.

        Returns:
            The outcome record

        Raises:
            ActionRejected: If the action is illegal; nothing is changed.
        """
        self._check(self.validator.validate(action, self._turn, self.is_game_over()))

        seat = self._turn.seat
        resolution = self.resolver.resolve(seat, action)
        self._turn = resolution.next_turn
        self.history.append(resolution.outcome)

        if self.is_game_over():
            logger.info(f"Game over: {self.ledger.as_dict()}")
        return resolution.outcome

    def nominate(self, seat: int) -> SeatTurn:
        """Hand a pending team turn to one of its seats.

        Raises:
            ActionRejected: If no team turn is pending, or the seat is not on
                the pending team or has no cards.
        """
        self._check(
            self.validator.validate_nomination(seat, self._turn, self.is_game_over())
        )
        team = self._turn.team
        logger.debug(f"{team} nominated seat {seat}")
        self._turn = SeatTurn(seat=seat)
        self.history.append(SeatNominated(team=team, seat=seat))
        return self._turn

    def _check(self, result: ValidationResult) -> None:
        if not result.is_valid:
            logger.debug(f"Rejected: {result.error_message}")
            raise ActionRejected(result.reason, result.error_message)

    def snapshot(self) -> dict[str, Any]:
        """Get a JSON-safe view of the whole game."""
        return {
            "variant": self.variant.value,
            "turn": self._turn.model_dump(mode="json"),
            "hands": {
                str(seat): [c.model_dump(mode="json") for c in self.hand_of(seat)]
                for seat in range(self.seat_count)
            },
            "scores": self.ledger.as_dict(),
            "history": [o.model_dump(mode="json") for o in self.history],
            "game_over": self.is_game_over(),
        }
