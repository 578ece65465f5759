"""Action validation, run before any state change."""

from dataclasses import dataclass

from literature_engine.errors import RejectReason
from literature_engine.models.action import CardAsk, SetDeclaration
from literature_engine.models.card import Variant
from literature_engine.models.pit import CARD_PITS, in_variant
from literature_engine.models.seat import is_seat, team_of
from literature_engine.models.turn import SeatTurn, TeamPending

from .ledger import ScoreLedger
from .registry import CardRegistry


@dataclass
class ValidationResult:
    """Result of action validation."""

    is_valid: bool
    reason: RejectReason | None = None
    error_message: str = ""


def _reject(reason: RejectReason, message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, reason=reason, error_message=message)


class ActionValidator:
    """Rejects malformed or out-of-turn actions and nominations.

    Burns are not rejections: an action that passes here is always resolved.
    """

    def __init__(self, registry: CardRegistry, ledger: ScoreLedger, variant: Variant):
        self.registry = registry
        self.ledger = ledger
        self.variant = variant
        self.seat_count = registry.seat_count

    def validate(
        self,
        action: CardAsk | SetDeclaration,
        turn: SeatTurn | TeamPending,
        game_over: bool = False,
    ) -> ValidationResult:
        """Validate an action for the seat holding the turn.

        Args:
            action: The submitted action
            turn: Current turn state
            game_over: Whether every pit has been resolved

        Returns:
            ValidationResult
        """
        if game_over:
            return _reject(RejectReason.GAME_OVER, "Every pit has been resolved")

        if isinstance(turn, TeamPending):
            return _reject(
                RejectReason.SEAT_UNDECIDED,
                f"{turn.team} must nominate a seat first",
            )

        if isinstance(action, CardAsk):
            return self._validate_ask(action, turn.seat)
        return self._validate_declaration(action)

    def _validate_ask(self, ask: CardAsk, asker: int) -> ValidationResult:
        if not is_seat(ask.target, self.seat_count):
            return _reject(RejectReason.UNKNOWN_SEAT, f"Seat {ask.target} does not exist")

        if team_of(ask.target, self.seat_count) == team_of(asker, self.seat_count):
            return _reject(
                RejectReason.SAME_TEAM,
                f"Seat {asker} cannot ask seat {ask.target} on its own team",
            )

        if self.registry.hand_size(ask.target) == 0:
            return _reject(
                RejectReason.EMPTY_TARGET,
                f"Seat {ask.target} has no cards and cannot be asked",
            )

        pit = CARD_PITS.get(ask.card)
        if pit is None or not in_variant(pit, self.variant):
            return _reject(
                RejectReason.PIT_NOT_IN_VARIANT,
                f"{ask.card} is not played in {self.variant.value}",
            )

        if self.ledger.is_resolved(pit):
            return _reject(
                RejectReason.PIT_RESOLVED,
                f"{ask.card} belongs to pit {pit}, which is out of play",
            )

        return ValidationResult(is_valid=True)

    def _validate_declaration(self, declaration: SetDeclaration) -> ValidationResult:
        if not in_variant(declaration.pit, self.variant):
            return _reject(
                RejectReason.PIT_NOT_IN_VARIANT,
                f"Pit {declaration.pit} is not played in {self.variant.value}",
            )

        if self.ledger.is_resolved(declaration.pit):
            return _reject(
                RejectReason.PIT_RESOLVED,
                f"Pit {declaration.pit} has already been resolved",
            )

        for claim in declaration.claims:
            if not is_seat(claim.seat, self.seat_count):
                return _reject(
                    RejectReason.UNKNOWN_SEAT,
                    f"Claim names seat {claim.seat}, which does not exist",
                )

        return ValidationResult(is_valid=True)

    def validate_nomination(
        self,
        seat: int,
        turn: SeatTurn | TeamPending,
        game_over: bool = False,
    ) -> ValidationResult:
        """Validate the nomination of a seat to take the turn.

        Args:
            seat: Nominated seat
            turn: Current turn state
            game_over: Whether every pit has been resolved

        Returns:
            ValidationResult
        """
        if game_over:
            return _reject(RejectReason.GAME_OVER, "Every pit has been resolved")

        if not isinstance(turn, TeamPending):
            return _reject(
                RejectReason.NOT_PENDING,
                f"Seat {turn.seat} already holds the turn",
            )

        if not is_seat(seat, self.seat_count):
            return _reject(RejectReason.UNKNOWN_SEAT, f"Seat {seat} does not exist")

        if team_of(seat, self.seat_count) != turn.team:
            return _reject(
                RejectReason.WRONG_TEAM,
                f"Seat {seat} is not on {turn.team}",
            )

        if self.registry.hand_size(seat) == 0:
            return _reject(
                RejectReason.EMPTY_HAND,
                f"Seat {seat} is out of cards and cannot take the turn",
            )

        return ValidationResult(is_valid=True)
