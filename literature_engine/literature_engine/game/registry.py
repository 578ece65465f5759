"""Card location registry: who holds which card."""

import logging
from typing import Sequence

from literature_engine.errors import InvariantViolation
from literature_engine.models.card import Card, CardIndex, sort_cards
from literature_engine.models.pit import Pit, cards_of

logger = logging.getLogger(__name__)


class CardRegistry:
    """Maps every in-play card to the seat holding it.

    Ownership is a flat list indexed by the card's dense id. A card whose pit
    has been resolved has no owner.
    """

    def __init__(self, index: CardIndex, seat_count: int):
        """Initialize an empty registry.

        Args:
            index: Dense ids for the variant's deck
            seat_count: Number of seats at the table
        """
        self.index = index
        self.seat_count = seat_count
        self._owners: list[int | None] = [None] * len(index)

    @classmethod
    def from_deal(
        cls,
        index: CardIndex,
        seat_count: int,
        deck: Sequence[Card],
    ) -> "CardRegistry":
        """Deal a deck round-robin, card i going to seat i % seat_count."""
        registry = cls(index, seat_count)
        for i, card in enumerate(deck):
            registry._owners[index.id_of(card)] = i % seat_count
        return registry

    def owner_of(self, card: Card) -> int | None:
        """Get the seat holding a card, or None if it is out of play."""
        if card not in self.index:
            return None
        return self._owners[self.index.id_of(card)]

    def holds(self, seat: int, card: Card) -> bool:
        return self.owner_of(card) == seat

    def hand_of(self, seat: int) -> list[Card]:
        """Get the cards a seat holds, sorted."""
        return sort_cards(
            self.index.card_at(card_id)
            for card_id, owner in enumerate(self._owners)
            if owner == seat
        )

    def hand_size(self, seat: int) -> int:
        return sum(1 for owner in self._owners if owner == seat)

    def cards_held_of(self, seat: int, pit: Pit) -> list[Card]:
        """Get the cards of a pit held by a seat."""
        return [card for card in cards_of(pit) if self.owner_of(card) == seat]

    def holds_any_of(self, seat: int, pit: Pit) -> bool:
        return any(self.owner_of(card) == seat for card in cards_of(pit))

    def in_play(self) -> list[Card]:
        """Get every card that still has an owner."""
        return [
            self.index.card_at(card_id)
            for card_id, owner in enumerate(self._owners)
            if owner is not None
        ]

    def transfer(self, card: Card, from_seat: int, to_seat: int) -> None:
        """Move one card between two hands.

        Raises:
            InvariantViolation: If from_seat does not hold the card.
        """
        owner = self.owner_of(card)
        if owner is None or owner != from_seat:
            raise InvariantViolation(
                f"Cannot transfer {card} from seat {from_seat}: owner is {owner}"
            )
        self._owners[self.index.id_of(card)] = to_seat
        logger.debug(f"{card} moved from seat {from_seat} to seat {to_seat}")

    def remove_pit(self, pit: Pit) -> None:
        """Take every card of a resolved pit out of play."""
        for card in cards_of(pit):
            if card in self.index:
                self._owners[self.index.id_of(card)] = None
        logger.debug(f"Pit {pit} removed from play")
