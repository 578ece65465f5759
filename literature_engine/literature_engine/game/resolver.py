"""Call resolution: the outcome of a validated action.

The resolver decides whether an ask succeeds, fails or burns, and whether a
declaration drops or burns. All checks run before the registry or ledger is
touched, so each action mutates state once or not at all.
"""

import logging
from dataclasses import dataclass

from literature_engine.models.action import CardAsk, Claim, SetDeclaration
from literature_engine.models.card import Card
from literature_engine.models.outcome import (
    BurnReason,
    CardAskFailure,
    CardAskSuccess,
    DropKind,
    SetBurn,
    SetDrop,
)
from literature_engine.models.pit import PIT_SIZE, Pit, cards_of, pit_of
from literature_engine.models.seat import Team, seats_of, team_of
from literature_engine.models.turn import SeatTurn, TeamPending

from .ledger import ScoreLedger
from .registry import CardRegistry

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Outcome of one action and the turn state that follows it."""

    outcome: CardAskSuccess | CardAskFailure | SetBurn | SetDrop
    next_turn: SeatTurn | TeamPending


class CallResolver:
    """Resolves asks and declarations against the registry and ledger."""

    def __init__(self, registry: CardRegistry, ledger: ScoreLedger):
        self.registry = registry
        self.ledger = ledger
        self.seat_count = registry.seat_count

    def resolve(self, seat: int, action: CardAsk | SetDeclaration) -> Resolution:
        """Resolve an action taken by the seat holding the turn.

        The action must already have passed validation.
        """
        match action:
            case CardAsk(target=target, card=card):
                resolution = self._resolve_ask(seat, target, card)
            case SetDeclaration(pit=pit, claims=claims):
                resolution = self._resolve_declaration(seat, pit, claims)
            case _:
                raise TypeError(f"Unknown action type: {type(action).__name__}")

        resolution.next_turn = self.settle_turn(resolution.next_turn)
        logger.info(f"Seat {seat}: {resolution.outcome.kind} -> {resolution.next_turn}")
        return resolution

    def _resolve_ask(self, asker: int, target: int, card: Card) -> Resolution:
        pit = pit_of(card)

        if not self.registry.holds_any_of(asker, pit) or self.registry.holds(asker, card):
            return self._burn(asker, pit, BurnReason.BAD_ASK)

        if self.registry.holds(target, card):
            self.registry.transfer(card, target, asker)
            return Resolution(
                outcome=CardAskSuccess(card=card, source=target, recipient=asker),
                next_turn=SeatTurn(seat=asker),
            )

        return Resolution(
            outcome=CardAskFailure(card=card, asker=asker, target=target),
            next_turn=SeatTurn(seat=target),
        )

    def _resolve_declaration(
        self,
        declarer: int,
        pit: Pit,
        claims: tuple[Claim, ...],
    ) -> Resolution:
        own_cards = self.registry.cards_held_of(declarer, pit)

        # 1. Declarer must hold part of the pit
        if not own_cards:
            return self._burn(declarer, pit, BurnReason.NO_CARD_OF_PIT)

        # 2. Claims on other seats must cover exactly what the declarer lacks
        other_claims = [c for c in claims if c.seat != declarer]
        if len(other_claims) + len(own_cards) != PIT_SIZE:
            return self._burn(declarer, pit, BurnReason.COUNT_MISMATCH)

        # 3. Every claim must be right, no partial credit
        pit_cards = set(cards_of(pit))
        seen: set[Card] = set()
        for claim in claims:
            if claim.card not in pit_cards or claim.card in seen:
                return self._burn(declarer, pit, BurnReason.WRONG_CLAIM)
            seen.add(claim.card)
            if not self.registry.holds(claim.seat, claim.card):
                logger.debug(f"Wrong claim: seat {claim.seat} does not hold {claim.card}")
                return self._burn(declarer, pit, BurnReason.WRONG_CLAIM)

        return self._drop(declarer, pit, self_drop=len(own_cards) == PIT_SIZE)

    def _burn(self, seat: int, pit: Pit, reason: BurnReason) -> Resolution:
        offending = team_of(seat, self.seat_count)
        credited = offending.opponent
        self.ledger.credit(credited, pit)
        self.registry.remove_pit(pit)
        return Resolution(
            outcome=SetBurn(
                pit=pit,
                offending_team=offending,
                credited_team=credited,
                reason=reason,
                seat=seat,
            ),
            next_turn=TeamPending(team=credited),
        )

    def _drop(self, seat: int, pit: Pit, self_drop: bool) -> Resolution:
        team = team_of(seat, self.seat_count)
        self.ledger.credit(team, pit)
        self.registry.remove_pit(pit)
        return Resolution(
            outcome=SetDrop(
                pit=pit,
                dropping_team=team,
                drop_kind=DropKind.SELF if self_drop else DropKind.COLLECTIVE,
                seat=seat,
            ),
            next_turn=SeatTurn(seat=seat),
        )

    def settle_turn(self, turn: SeatTurn | TeamPending) -> SeatTurn | TeamPending:
        """Adjust a turn state to the hands left on the table.

        A seat with no cards cannot act, so its team must nominate instead.
        A team with no cards cannot nominate, so the other team does.
        """
        if self.ledger.is_game_over():
            return turn

        if isinstance(turn, SeatTurn):
            if self.registry.hand_size(turn.seat) > 0:
                return turn
            turn = TeamPending(team=team_of(turn.seat, self.seat_count))

        if not self._team_has_cards(turn.team):
            logger.debug(f"{turn.team} is out of cards, passing the call")
            return TeamPending(team=turn.team.opponent)
        return turn

    def _team_has_cards(self, team: Team) -> bool:
        return any(self.registry.hand_size(s) > 0 for s in seats_of(team, self.seat_count))
