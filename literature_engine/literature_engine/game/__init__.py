"""Game logic."""

from .engine import LiteratureGame, shuffled_deck, validate_deck
from .ledger import ScoreLedger
from .registry import CardRegistry
from .resolver import CallResolver, Resolution
from .validator import ActionValidator, ValidationResult

__all__ = [
    "ActionValidator",
    "CallResolver",
    "CardRegistry",
    "LiteratureGame",
    "Resolution",
    "ScoreLedger",
    "ValidationResult",
    "shuffled_deck",
    "validate_deck",
]
