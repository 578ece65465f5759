"""Self-play runner: bots play full games through the engine."""

from __future__ import annotations

import logging
import random
from typing import Callable

from literature_engine.config import Config
from literature_engine.errors import ActionRejected
from literature_engine.logging import GameLogger
from literature_engine.models.card import Card
from literature_engine.models.seat import Team
from literature_engine.models.turn import TeamPending
from literature_engine.strategy.base import SeatView, Strategy

from .engine import LiteratureGame

logger = logging.getLogger(__name__)


class GameRunner:
    """Plays games between one strategy per seat."""

    def __init__(
        self,
        strategies: list[Strategy],
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize runner.

        Args:
            strategies: One strategy per seat
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for dealing
        """
        self.config = config or Config()
        self.variant = self.config.game.variant
        if len(strategies) != self.variant.seat_count:
            raise ValueError(
                f"{self.variant.value} needs {self.variant.seat_count} strategies, "
                f"got {len(strategies)}"
            )
        self.strategies = strategies
        self.game_logger = game_logger
        self.rng = rng or random.Random(self.config.game.seed)

        self._on_action: Callable[[int, LiteratureGame], None] | None = None
        self._on_game_end: Callable[[int, LiteratureGame], None] | None = None

    def set_callbacks(
        self,
        on_action: Callable[[int, LiteratureGame], None] | None = None,
        on_game_end: Callable[[int, LiteratureGame], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_action: Called after each resolved action (turn_number, game)
            on_game_end: Called when a game ends (game_number, game)
        """
        self._on_action = on_action
        self._on_game_end = on_game_end

    def run_games(self, num_games: int | None = None) -> dict[str, int]:
        """Run multiple games.

        Returns:
            Games won per team, plus "draw" and "unfinished" counts
        """
        num_games = num_games or self.config.game.num_games
        results = {Team.A.value: 0, Team.B.value: 0, "draw": 0, "unfinished": 0}

        if self.game_logger:
            self.game_logger.log_session_start(
                self.variant.value, [s.name for s in self.strategies]
            )

        for game_num in range(1, num_games + 1):
            logger.info(f"Starting game {game_num}/{num_games}")
            game = self.run_game(game_num)

            if not game.is_game_over():
                results["unfinished"] += 1
            elif game.winner() is None:
                results["draw"] += 1
            else:
                results[game.winner().value] += 1

        if self.game_logger:
            self.game_logger.log_session_end(num_games, results)

        return results

    def run_game(self, game_num: int = 1) -> LiteratureGame:
        """Run a single game until every pit is resolved or max_turns is hit."""
        game = LiteratureGame.deal_hands(self.variant.seat_count, self.variant, rng=self.rng)

        if self.game_logger:
            self.game_logger.log_game_start(game_num, self._hands(game))

        turn_num = 0
        while not game.is_game_over() and turn_num < self.config.game.max_turns:
            turn = game.current_turn()

            if isinstance(turn, TeamPending):
                self._nominate(game, game_num, turn_num, turn.team)
                continue

            turn_num += 1
            seat = turn.seat
            action = self.strategies[seat].select_action(self._view(game, seat))
            try:
                outcome = game.act(action)
            except ActionRejected as e:
                # A bot broke the rules; the seat loses nothing, try again
                logger.warning(f"Seat {seat} action rejected: {e}")
                if self.game_logger:
                    self.game_logger.log_rejected(
                        game_num, turn_num, e.reason.value, {"seat": seat}
                    )
                continue

            if self.game_logger:
                self.game_logger.log_action(
                    game_num,
                    turn_num,
                    seat,
                    action,
                    outcome,
                    self._hands(game),
                    game.ledger.as_dict(),
                    str(game.current_turn()),
                )
            if self._on_action:
                self._on_action(turn_num, game)

        if not game.is_game_over():
            logger.warning(
                f"Game {game_num} stopped after {turn_num} actions with "
                f"{game.ledger.resolved}/{game.ledger.total_pits} pits resolved"
            )

        if self.game_logger:
            winner = game.winner()
            self.game_logger.log_game_end(
                game_num,
                game.ledger.as_dict(),
                {t.value: [p.value for p in game.ledger.pits_of(t)] for t in Team},
                winner.value if winner else None,
                finished=game.is_game_over(),
            )
        if self._on_game_end:
            self._on_game_end(game_num, game)

        return game

    def _nominate(self, game: LiteratureGame, game_num: int, turn_num: int, team: Team) -> None:
        # The lowest seat still holding cards decides for its team
        captain = next(s for s in game.seats_of(team) if game.registry.hand_size(s) > 0)
        seat = self.strategies[captain].select_nominee(self._view(game, captain))
        game.nominate(seat)
        if self.game_logger:
            self.game_logger.log_nomination(game_num, turn_num, team, seat)

    def _view(self, game: LiteratureGame, seat: int) -> SeatView:
        return SeatView.from_game(game, seat)

    def _hands(self, game: LiteratureGame) -> list[list[Card]]:
        return [game.hand_of(s) for s in range(game.seat_count)]
