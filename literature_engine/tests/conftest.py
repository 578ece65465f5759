"""Shared fixtures.

The ``game`` fixture deals the six-player deck in pit order, so seat s
starts with the s-th card of every pit (seat 0 holds 2♣, seat 5 holds 7♣).
"""

import pytest

from literature_engine.game.engine import LiteratureGame
from literature_engine.models.card import Card, Rank, Suit, Variant
from literature_engine.models.pit import deck_for


def clubs(*ranks: Rank) -> list[Card]:
    return [Card.of(rank, Suit.CLUB) for rank in ranks]


def place(game: LiteratureGame, seat: int, *cards: Card) -> None:
    """Move cards into a seat's hand, wherever they are."""
    for card in cards:
        owner = game.owner_of(card)
        if owner != seat:
            game.registry.transfer(card, owner, seat)


def clear_seat(game: LiteratureGame, seat: int, to: int, keep: tuple[Card, ...] = ()) -> None:
    """Move every card of a seat except ``keep`` to another seat."""
    for card in game.hand_of(seat):
        if card not in keep:
            game.registry.transfer(card, seat, to)


@pytest.fixture
def game() -> LiteratureGame:
    return LiteratureGame.deal_hands(6, Variant.SIX_PLAYER, deck=deck_for(Variant.SIX_PLAYER))


@pytest.fixture
def eight_game() -> LiteratureGame:
    return LiteratureGame.deal_hands(
        8, Variant.EIGHT_PLAYER, deck=deck_for(Variant.EIGHT_PLAYER)
    )
