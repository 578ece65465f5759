"""Tests for the game engine and call resolution."""

import json
import random

import pytest
from pydantic import ValidationError

from conftest import clear_seat, clubs, place
from literature_engine.errors import ActionRejected, InvariantViolation, RejectReason
from literature_engine.game.engine import LiteratureGame
from literature_engine.models.action import CardAsk, Claim, SetDeclaration, parse_action
from literature_engine.models.card import RED_JOKER, Card, Rank, Suit, Variant
from literature_engine.models.outcome import (
    BurnReason,
    CardAskFailure,
    CardAskSuccess,
    DropKind,
    SeatNominated,
    SetBurn,
    SetDrop,
)
from literature_engine.models.pit import Pit, cards_of, deck_for, pits_for
from literature_engine.models.seat import Team
from literature_engine.models.turn import SeatTurn, TeamPending

TWO, THREE, FOUR, FIVE, SIX, SEVEN = clubs(
    Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN
)


def assert_rejected(game: LiteratureGame, call, reason: RejectReason) -> None:
    """Assert a call is rejected and leaves the game untouched."""
    before = game.snapshot()
    with pytest.raises(ActionRejected) as exc_info:
        call()
    assert exc_info.value.reason == reason
    assert game.snapshot() == before


@pytest.fixture
def low_clubs_split(game):
    """Seat 0 holds 2-4♣, seat 1 holds 5♣ and 6♣, seat 2 holds 7♣."""
    place(game, 0, TWO, THREE, FOUR)
    place(game, 1, FIVE, SIX)
    place(game, 2, SEVEN)
    return game


class TestDealHands:
    """Tests for dealing a new game."""

    def test_fresh_shuffle(self):
        game = LiteratureGame.deal_hands(6)
        assert game.variant is Variant.SIX_PLAYER
        assert all(len(game.hand_of(s)) == 9 for s in range(6))
        assert game.current_turn() == SeatTurn(seat=0)

    def test_eight_player(self):
        game = LiteratureGame.deal_hands(8)
        assert game.variant is Variant.EIGHT_PLAYER
        assert all(len(game.hand_of(s)) == 6 for s in range(8))

    def test_seeded_shuffle_is_reproducible(self):
        game1 = LiteratureGame.deal_hands(6, rng=random.Random(7))
        game2 = LiteratureGame.deal_hands(6, rng=random.Random(7))
        assert [game1.hand_of(s) for s in range(6)] == [game2.hand_of(s) for s in range(6)]

    def test_custom_deck(self):
        deck = deck_for(Variant.SIX_PLAYER)
        deck.reverse()
        game = LiteratureGame.deal_hands(6, deck=deck)
        assert game.owner_of(deck[0]) == 0
        assert game.owner_of(deck[7]) == 1

    def test_custom_deck_wrong_length(self):
        deck = deck_for(Variant.SIX_PLAYER)[:-1]
        with pytest.raises(InvariantViolation):
            LiteratureGame.deal_hands(6, deck=deck)

    def test_custom_deck_with_duplicate(self):
        deck = deck_for(Variant.SIX_PLAYER)
        deck[-1] = deck[0]
        with pytest.raises(InvariantViolation):
            LiteratureGame.deal_hands(6, deck=deck)

    def test_custom_deck_from_other_variant(self):
        deck = deck_for(Variant.EIGHT_PLAYER)
        with pytest.raises(InvariantViolation):
            LiteratureGame.deal_hands(6, deck=deck)

    def test_seat_count_mismatch(self):
        with pytest.raises(InvariantViolation):
            LiteratureGame.deal_hands(6, Variant.EIGHT_PLAYER)
        with pytest.raises(InvariantViolation):
            LiteratureGame.deal_hands(5)


class TestCardAsk:
    """Tests for card ask resolution."""

    def test_success_keeps_turn(self, game):
        outcome = game.act(CardAsk(target=3, card=FIVE))

        assert outcome == CardAskSuccess(card=FIVE, source=3, recipient=0)
        assert game.owner_of(FIVE) == 0
        assert game.current_turn() == SeatTurn(seat=0)

    def test_failure_passes_turn_to_target(self, game):
        outcome = game.act(CardAsk(target=3, card=THREE))

        assert outcome == CardAskFailure(card=THREE, asker=0, target=3)
        assert game.owner_of(THREE) == 1
        assert game.current_turn() == SeatTurn(seat=3)
        assert game.score_of(Team.A) == game.score_of(Team.B) == 0

    def test_failure_hand_off_between_seats(self, game):
        """Seat 1 asking seat 5 for a card it lacks hands the turn to seat 5."""
        game.act(CardAsk(target=3, card=THREE))  # seat 0 misses, seat 3 to act
        game.act(CardAsk(target=1, card=TWO))  # seat 3 misses, seat 1 to act
        assert game.current_turn() == SeatTurn(seat=1)

        game.act(CardAsk(target=5, card=FOUR))

        assert game.current_turn() == SeatTurn(seat=5)

    def test_burn_without_card_of_pit(self, game):
        place(game, 1, TWO)

        outcome = game.act(CardAsk(target=3, card=FIVE))

        assert isinstance(outcome, SetBurn)
        assert outcome.pit == Pit.LOW_CLUBS
        assert outcome.offending_team == Team.A
        assert outcome.credited_team == Team.B
        assert outcome.reason == BurnReason.BAD_ASK
        assert all(game.owner_of(c) is None for c in cards_of(Pit.LOW_CLUBS))
        assert game.score_of(Team.B) == 1
        assert game.current_turn() == TeamPending(team=Team.B)

    def test_burn_when_asking_for_own_card(self, game):
        outcome = game.act(CardAsk(target=3, card=TWO))

        assert isinstance(outcome, SetBurn)
        assert outcome.credited_team == Team.B

    def test_same_team_rejected(self, game):
        assert_rejected(
            game, lambda: game.act(CardAsk(target=1, card=THREE)), RejectReason.SAME_TEAM
        )

    def test_asking_self_rejected(self, game):
        assert_rejected(
            game, lambda: game.act(CardAsk(target=0, card=THREE)), RejectReason.SAME_TEAM
        )

    def test_unknown_target_rejected(self, game):
        assert_rejected(
            game, lambda: game.act(CardAsk(target=6, card=THREE)), RejectReason.UNKNOWN_SEAT
        )

    def test_empty_target_rejected(self, game):
        clear_seat(game, 3, to=4)
        assert_rejected(
            game, lambda: game.act(CardAsk(target=3, card=FIVE)), RejectReason.EMPTY_TARGET
        )

    def test_card_outside_variant_rejected(self, eight_game):
        assert_rejected(
            eight_game,
            lambda: eight_game.act(CardAsk(target=4, card=RED_JOKER)),
            RejectReason.PIT_NOT_IN_VARIANT,
        )

    def test_card_of_resolved_pit_rejected(self, game):
        game.act(CardAsk(target=3, card=TWO))  # burns low clubs for Team B
        game.nominate(3)

        assert_rejected(
            game, lambda: game.act(CardAsk(target=0, card=THREE)), RejectReason.PIT_RESOLVED
        )
        assert game.current_turn() == SeatTurn(seat=3)
        assert [h.kind for h in game.history] == ["SET_BURN", "SEAT_NOMINATED"]


class TestSetDeclaration:
    """Tests for set declaration resolution."""

    def test_collective_drop(self, low_clubs_split):
        game = low_clubs_split
        claims = (
            Claim(seat=1, card=FIVE),
            Claim(seat=1, card=SIX),
            Claim(seat=2, card=SEVEN),
        )

        outcome = game.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert outcome == SetDrop(
            pit=Pit.LOW_CLUBS,
            dropping_team=Team.A,
            drop_kind=DropKind.COLLECTIVE,
            seat=0,
        )
        assert all(game.owner_of(c) is None for c in cards_of(Pit.LOW_CLUBS))
        assert game.score_of(Team.A) == 1
        assert game.current_turn() == SeatTurn(seat=0)

    def test_explicit_self_claims(self, low_clubs_split):
        game = low_clubs_split
        claims = tuple(Claim(seat=0, card=c) for c in (TWO, THREE, FOUR)) + (
            Claim(seat=1, card=FIVE),
            Claim(seat=1, card=SIX),
            Claim(seat=2, card=SEVEN),
        )

        outcome = game.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert isinstance(outcome, SetDrop)

    def test_single_wrong_claim_burns(self, low_clubs_split):
        game = low_clubs_split
        claims = (
            Claim(seat=1, card=FIVE),
            Claim(seat=1, card=SIX),
            Claim(seat=3, card=SEVEN),
        )

        outcome = game.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert isinstance(outcome, SetBurn)
        assert outcome.reason == BurnReason.WRONG_CLAIM
        assert outcome.credited_team == Team.B
        assert all(game.owner_of(c) is None for c in cards_of(Pit.LOW_CLUBS))
        assert game.score_of(Team.A) == 0
        assert game.current_turn() == TeamPending(team=Team.B)

    def test_wrong_self_claim_burns(self, low_clubs_split):
        game = low_clubs_split
        claims = (
            Claim(seat=0, card=SEVEN),
            Claim(seat=1, card=FIVE),
            Claim(seat=1, card=SIX),
            Claim(seat=2, card=SEVEN),
        )

        outcome = game.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert isinstance(outcome, SetBurn)

    def test_no_card_of_pit_burns(self, game):
        place(game, 1, TWO)

        outcome = game.act(SetDeclaration(pit=Pit.LOW_CLUBS))

        assert isinstance(outcome, SetBurn)
        assert outcome.reason == BurnReason.NO_CARD_OF_PIT

    def test_count_mismatch_burns(self, low_clubs_split):
        claims = (Claim(seat=1, card=FIVE), Claim(seat=1, card=SIX))

        outcome = low_clubs_split.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert isinstance(outcome, SetBurn)
        assert outcome.reason == BurnReason.COUNT_MISMATCH

    def test_duplicate_claim_burns(self, low_clubs_split):
        claims = (
            Claim(seat=1, card=FIVE),
            Claim(seat=1, card=FIVE),
            Claim(seat=2, card=SEVEN),
        )

        outcome = low_clubs_split.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert isinstance(outcome, SetBurn)
        assert outcome.reason == BurnReason.WRONG_CLAIM

    def test_claim_outside_pit_burns(self, low_clubs_split):
        king = Card.of(Rank.KING, Suit.CLUB)
        claims = (
            Claim(seat=1, card=FIVE),
            Claim(seat=1, card=SIX),
            Claim(seat=low_clubs_split.owner_of(king), card=king),
        )

        outcome = low_clubs_split.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert isinstance(outcome, SetBurn)
        assert outcome.reason == BurnReason.WRONG_CLAIM

    def test_self_drop_emptying_hand(self, game):
        six_clubs = (TWO, THREE, FOUR, FIVE, SIX, SEVEN)
        place(game, 0, *six_clubs)
        clear_seat(game, 0, to=1, keep=six_clubs)

        outcome = game.act(SetDeclaration(pit=Pit.LOW_CLUBS))

        assert outcome.drop_kind == DropKind.SELF
        assert game.hand_of(0) == []
        assert game.current_turn() == TeamPending(team=Team.A)

    def test_team_out_of_cards_passes_call(self, game):
        six_clubs = (TWO, THREE, FOUR, FIVE, SIX, SEVEN)
        place(game, 0, *six_clubs)
        clear_seat(game, 0, to=3, keep=six_clubs)
        clear_seat(game, 1, to=4)
        clear_seat(game, 2, to=5)

        game.act(SetDeclaration(pit=Pit.LOW_CLUBS))

        assert game.score_of(Team.A) == 1
        assert game.current_turn() == TeamPending(team=Team.B)

    def test_unknown_claim_seat_rejected(self, low_clubs_split):
        game = low_clubs_split
        declaration = SetDeclaration(
            pit=Pit.LOW_CLUBS, claims=(Claim(seat=9, card=FIVE),)
        )
        assert_rejected(game, lambda: game.act(declaration), RejectReason.UNKNOWN_SEAT)

    def test_pit_outside_variant_rejected(self, eight_game):
        assert_rejected(
            eight_game,
            lambda: eight_game.act(SetDeclaration(pit=Pit.SPECIAL)),
            RejectReason.PIT_NOT_IN_VARIANT,
        )

    def test_resolved_pit_rejected(self, low_clubs_split):
        game = low_clubs_split
        claims = (
            Claim(seat=1, card=FIVE),
            Claim(seat=1, card=SIX),
            Claim(seat=2, card=SEVEN),
        )
        game.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims))

        assert_rejected(
            game,
            lambda: game.act(SetDeclaration(pit=Pit.LOW_CLUBS, claims=claims)),
            RejectReason.PIT_RESOLVED,
        )
        assert game.current_turn() == SeatTurn(seat=0)
        assert len(game.history) == 1


class TestNomination:
    """Tests for the pending team turn."""

    @pytest.fixture
    def burnt(self, game):
        game.act(CardAsk(target=3, card=TWO))  # burns low clubs for Team B
        return game

    def test_actions_gated_until_nomination(self, burnt):
        assert_rejected(
            burnt,
            lambda: burnt.act(CardAsk(target=0, card=Card.of(Rank.NINE, Suit.SPADE))),
            RejectReason.SEAT_UNDECIDED,
        )
        assert_rejected(
            burnt,
            lambda: burnt.act(SetDeclaration(pit=Pit.HIGH_SPADES)),
            RejectReason.SEAT_UNDECIDED,
        )

    def test_nominate_then_act(self, burnt):
        assert burnt.nominate(4) == SeatTurn(seat=4)
        assert burnt.current_turn() == SeatTurn(seat=4)

        outcome = burnt.act(CardAsk(target=0, card=Card.of(Rank.NINE, Suit.SPADE)))
        assert isinstance(outcome, CardAskSuccess)

    def test_nomination_recorded_in_history(self, burnt):
        burnt.nominate(4)

        assert burnt.history[-1] == SeatNominated(team=Team.B, seat=4)
        kinds = [h["kind"] for h in burnt.snapshot()["history"]]
        assert kinds == ["SET_BURN", "SEAT_NOMINATED"]

    def test_nominate_wrong_team(self, burnt):
        assert_rejected(burnt, lambda: burnt.nominate(1), RejectReason.WRONG_TEAM)

    def test_nominate_empty_seat(self, burnt):
        clear_seat(burnt, 5, to=4)
        assert_rejected(burnt, lambda: burnt.nominate(5), RejectReason.EMPTY_HAND)

    def test_nominate_unknown_seat(self, burnt):
        assert_rejected(burnt, lambda: burnt.nominate(11), RejectReason.UNKNOWN_SEAT)

    def test_nominate_without_pending_turn(self, game):
        assert_rejected(game, lambda: game.nominate(1), RejectReason.NOT_PENDING)


class TestGameOver:
    """Tests for the end of the game."""

    def test_all_pits_dropped(self, game):
        for pit in pits_for(Variant.SIX_PLAYER):
            cards = cards_of(pit)
            place(game, 0, *cards[3:])
            claims = (Claim(seat=1, card=cards[1]), Claim(seat=2, card=cards[2]))
            outcome = game.act(SetDeclaration(pit=pit, claims=claims))
            assert isinstance(outcome, SetDrop)

        assert game.is_game_over()
        assert game.score_of(Team.A) == 9
        assert game.winner() is Team.A
        assert all(game.hand_of(s) == [] for s in range(6))

        assert_rejected(game, lambda: game.act(SetDeclaration(pit=Pit.SPECIAL)), RejectReason.GAME_OVER)
        assert_rejected(game, lambda: game.nominate(1), RejectReason.GAME_OVER)

    def test_score_never_exceeds_pits(self, game):
        game.act(CardAsk(target=3, card=TWO))
        total = game.score_of(Team.A) + game.score_of(Team.B)
        assert total == 1 <= len(pits_for(game.variant))
        assert not game.is_game_over()


class TestSnapshot:
    """Tests for the JSON view of a game."""

    def test_snapshot_is_json_safe(self, game):
        game.act(CardAsk(target=3, card=FIVE))
        game.act(CardAsk(target=4, card=THREE))

        data = json.loads(json.dumps(game.snapshot()))

        assert data["variant"] == "six_player"
        assert data["turn"] == {"kind": "seat", "seat": 4}
        assert [h["kind"] for h in data["history"]] == ["CARD_ASK_SUCCESS", "CARD_ASK_FAILURE"]
        assert len(data["hands"]["0"]) == 10


class TestParseAction:
    """Tests for building actions from JSON."""

    def test_card_ask_from_dict(self, game):
        action = parse_action({"kind": "card_ask", "target": 3, "card": {"suit": 3, "rank": 5}})

        assert action == CardAsk(target=3, card=FIVE)
        assert isinstance(game.act(action), CardAskSuccess)

    def test_declaration_from_json(self):
        action = parse_action(
            '{"kind": "set_declaration", "pit": "low_clubs",'
            ' "claims": [{"seat": 1, "card": {"suit": 3, "rank": 5}}]}'
        )

        assert action == SetDeclaration(pit=Pit.LOW_CLUBS, claims=(Claim(seat=1, card=FIVE),))

    def test_round_trip_through_json(self):
        action = CardAsk(target=4, card=RED_JOKER)
        assert parse_action(action.model_dump_json()) == action

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            parse_action({"kind": "pass"})
