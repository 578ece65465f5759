"""Card model and dense card identities."""

from enum import Enum, IntEnum
from typing import Iterable, Iterator

from pydantic import BaseModel, model_validator


class Suit(IntEnum):
    """Card suit. JOKER is used only by the two jokers."""

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3
    JOKER = 4


class Rank(IntEnum):
    """Card rank, valued by face (ace high)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class JokerColor(str, Enum):
    """Tells the two jokers apart."""

    BLACK = "black"
    RED = "red"


class Variant(str, Enum):
    """Game variant, named by seat count."""

    SIX_PLAYER = "six_player"
    EIGHT_PLAYER = "eight_player"

    @property
    def seat_count(self) -> int:
        return 6 if self is Variant.SIX_PLAYER else 8

    @classmethod
    def for_seats(cls, seat_count: int) -> "Variant":
        """Get the variant played with the given number of seats."""
        for variant in cls:
            if variant.seat_count == seat_count:
                return variant
        raise ValueError(f"No variant is played with {seat_count} seats")


RANK_NAMES = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}

SUITS = (Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB)


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: Suit
    rank: Rank | None = None  # None for jokers
    joker: JokerColor | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> "Card":
        if self.suit == Suit.JOKER:
            if self.rank is not None or self.joker is None:
                raise ValueError("A joker needs a color and no rank")
        elif self.rank is None or self.joker is not None:
            raise ValueError("A suited card needs a rank and no joker color")
        return self

    @classmethod
    def of(cls, rank: Rank, suit: Suit) -> "Card":
        return cls(suit=suit, rank=rank)

    @classmethod
    def joker_of(cls, color: JokerColor) -> "Card":
        return cls(suit=Suit.JOKER, joker=color)

    @property
    def is_joker(self) -> bool:
        """Check if this card is a joker."""
        return self.suit == Suit.JOKER

    def sort_key(self) -> tuple[int, int]:
        if self.is_joker:
            return (Suit.JOKER, 0 if self.joker == JokerColor.BLACK else 1)
        return (self.suit, self.rank)

    def __str__(self) -> str:
        if self.is_joker:
            return f"{self.joker.value.capitalize()} Joker"
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"


BLACK_JOKER = Card.joker_of(JokerColor.BLACK)
RED_JOKER = Card.joker_of(JokerColor.RED)


def create_full_deck() -> list[Card]:
    """Create the 54-card deck (52 + 2 jokers) in a fixed order."""
    cards = [Card.of(rank, suit) for suit in SUITS for rank in Rank]
    cards.extend([BLACK_JOKER, RED_JOKER])
    return cards


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Return cards ordered by suit then rank, jokers last."""
    return sorted(cards, key=Card.sort_key)


class CardIndex:
    """Dense integer identity for every card of one deck.

    Ids are assigned in deck order when the index is built, so a registry
    can keep card ownership in a flat list.
    """

    def __init__(self, cards: Iterable[Card]):
        self._cards: tuple[Card, ...] = tuple(cards)
        self._ids: dict[Card, int] = {}
        for card_id, card in enumerate(self._cards):
            if card in self._ids:
                raise ValueError(f"Duplicate card in index: {card}")
            self._ids[card] = card_id

    def id_of(self, card: Card) -> int:
        """Get the dense id of a card.

        Raises:
            KeyError: If the card is not part of this deck.
        """
        return self._ids[card]

    def card_at(self, card_id: int) -> Card:
        return self._cards[card_id]

    def __contains__(self, card: object) -> bool:
        return card in self._ids

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
