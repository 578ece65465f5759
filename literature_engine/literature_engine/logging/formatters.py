"""Formatters for game log output."""

from literature_engine.models.card import Card, JokerColor, Rank, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADE: "S",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
}

RANK_CODES: dict[Rank, str] = {
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

JOKER_CODES: dict[JokerColor, str] = {
    JokerColor.BLACK: "JB",
    JokerColor.RED: "JR",
}

_SUITS_BY_CODE = {code: suit for suit, code in SUIT_CODES.items()}
_RANKS_BY_CODE = {code: rank for rank, code in RANK_CODES.items()}
_JOKERS_BY_CODE = {code: color for color, code in JOKER_CODES.items()}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S3" for Spade 3, "JR" for the red joker).
    """
    if card.is_joker:
        return JOKER_CODES[card.joker]
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to a comma-separated string.

    Args:
        cards: Cards to format, in the order given.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,D8").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(hands: list[list[Card]]) -> dict[str, str]:
    """Format all seats' hands to dict.

    Args:
        hands: Hands indexed by seat.

    Returns:
        Dict mapping seat (as string) to formatted hand string.
    """
    return {str(i): format_cards(h) for i, h in enumerate(hands)}


def parse_card(code: str) -> Card:
    """Parse a card code produced by format_card.

    Raises:
        ValueError: If the code names no card.
    """
    code = code.strip().upper()
    if code in _JOKERS_BY_CODE:
        return Card.joker_of(_JOKERS_BY_CODE[code])

    suit = _SUITS_BY_CODE.get(code[:1])
    rank = _RANKS_BY_CODE.get(code[1:])
    if suit is None or rank is None:
        raise ValueError(f"Invalid card code: {code!r}")
    return Card.of(rank, suit)


def parse_cards(codes: str) -> list[Card]:
    """Parse a comma-separated list of card codes."""
    return [parse_card(c) for c in codes.split(",") if c.strip()]
