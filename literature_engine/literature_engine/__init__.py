"""Literature (Canadian Fish) rule engine."""

from literature_engine.errors import (
    ActionRejected,
    InvariantViolation,
    LiteratureError,
    RejectReason,
)
from literature_engine.game.engine import LiteratureGame

__version__ = "0.1.0"

__all__ = [
    "ActionRejected",
    "InvariantViolation",
    "LiteratureError",
    "LiteratureGame",
    "RejectReason",
]
