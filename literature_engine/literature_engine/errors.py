"""Engine exceptions."""

from enum import Enum


class RejectReason(str, Enum):
    """Why an action or nomination was rejected."""

    GAME_OVER = "game_over"
    SEAT_UNDECIDED = "seat_undecided"
    UNKNOWN_SEAT = "unknown_seat"
    SAME_TEAM = "same_team"
    EMPTY_TARGET = "empty_target"
    PIT_NOT_IN_VARIANT = "pit_not_in_variant"
    PIT_RESOLVED = "pit_resolved"
    NOT_PENDING = "not_pending"
    WRONG_TEAM = "wrong_team"
    EMPTY_HAND = "empty_hand"


class LiteratureError(Exception):
    """Base class for engine errors."""


class ActionRejected(LiteratureError):
    """Illegal input from a client. Nothing was changed."""

    def __init__(self, reason: RejectReason, message: str = ""):
        self.reason = reason
        self.message = message or reason.value
        super().__init__(f"{reason.value}: {self.message}")


class InvariantViolation(LiteratureError):
    """Bookkeeping is inconsistent; the offending call or setup is aborted."""
