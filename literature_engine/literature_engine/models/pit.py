"""Pit (set) taxonomy.

Every card of a variant belongs to exactly one pit of six cards:

- LOW pits: 2 to 7 of one suit
- HIGH pits: 9 to A of one suit
- SPECIAL: both jokers and the four 8s (six-player variant only)

The eight-player variant drops the eights and jokers, leaving 48 cards in
eight pits.
"""

from enum import Enum

from .card import BLACK_JOKER, RED_JOKER, SUITS, Card, Rank, Suit, Variant

PIT_SIZE = 6

LOW_RANKS = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN)
HIGH_RANKS = (Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE)


class Pit(str, Enum):
    """One indivisible group of six cards."""

    LOW_SPADES = "low_spades"
    HIGH_SPADES = "high_spades"
    LOW_HEARTS = "low_hearts"
    HIGH_HEARTS = "high_hearts"
    LOW_DIAMONDS = "low_diamonds"
    HIGH_DIAMONDS = "high_diamonds"
    LOW_CLUBS = "low_clubs"
    HIGH_CLUBS = "high_clubs"
    SPECIAL = "special"

    def __str__(self) -> str:
        return self.value


_SUIT_PITS: dict[Suit, tuple[Pit, Pit]] = {
    Suit.SPADE: (Pit.LOW_SPADES, Pit.HIGH_SPADES),
    Suit.HEART: (Pit.LOW_HEARTS, Pit.HIGH_HEARTS),
    Suit.DIAMOND: (Pit.LOW_DIAMONDS, Pit.HIGH_DIAMONDS),
    Suit.CLUB: (Pit.LOW_CLUBS, Pit.HIGH_CLUBS),
}


def _build_tables() -> tuple[dict[Pit, tuple[Card, ...]], dict[Card, Pit]]:
    pit_cards: dict[Pit, tuple[Card, ...]] = {}
    for suit in SUITS:
        low, high = _SUIT_PITS[suit]
        pit_cards[low] = tuple(Card.of(rank, suit) for rank in LOW_RANKS)
        pit_cards[high] = tuple(Card.of(rank, suit) for rank in HIGH_RANKS)
    pit_cards[Pit.SPECIAL] = (BLACK_JOKER, RED_JOKER) + tuple(
        Card.of(Rank.EIGHT, suit) for suit in SUITS
    )

    card_pits = {card: pit for pit, cards in pit_cards.items() for card in cards}
    return pit_cards, card_pits


PIT_CARDS, CARD_PITS = _build_tables()

VARIANT_PITS: dict[Variant, tuple[Pit, ...]] = {
    Variant.SIX_PLAYER: tuple(Pit),
    Variant.EIGHT_PLAYER: tuple(p for p in Pit if p is not Pit.SPECIAL),
}


def pit_of(card: Card) -> Pit:
    """Get the pit a card belongs to."""
    return CARD_PITS[card]


def cards_of(pit: Pit) -> tuple[Card, ...]:
    """Get the six cards of a pit."""
    return PIT_CARDS[pit]


def pits_for(variant: Variant) -> tuple[Pit, ...]:
    """Get the pits played in a variant."""
    return VARIANT_PITS[variant]


def in_variant(pit: Pit, variant: Variant) -> bool:
    return pit in VARIANT_PITS[variant]


def deck_for(variant: Variant) -> list[Card]:
    """Get the card universe of a variant, pit by pit."""
    return [card for pit in pits_for(variant) for card in cards_of(pit)]
