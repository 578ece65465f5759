"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from literature_engine.models.action import CardAsk, SetDeclaration
from literature_engine.models.card import Card
from literature_engine.models.outcome import CardAskFailure, CardAskSuccess, SetBurn, SetDrop
from literature_engine.models.seat import Team

from .formatters import format_card, format_hands


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


def _action_record(action: CardAsk | SetDeclaration) -> dict[str, Any]:
    if isinstance(action, CardAsk):
        return {"kind": action.kind, "target": action.target, "card": format_card(action.card)}
    return {
        "kind": action.kind,
        "pit": action.pit.value,
        "claims": [{"seat": c.seat, "card": format_card(c.card)} for c in action.claims],
    }


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, variant: str, strategies: list[str]) -> None:
        """Log session start with the bot seated at each seat.

        Args:
            variant: Variant played in this session.
            strategies: Strategy name for each seat.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "variant": variant,
            "seats": [{"seat": i, "strategy": s} for i, s in enumerate(strategies)],
        })

    def log_game_start(self, game_num: int, hands: list[list[Card]]) -> None:
        """Log game start with initial hands.

        Args:
            game_num: Game number.
            hands: Initial hands indexed by seat.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "hands": format_hands(hands),
        })

    def log_action(
        self,
        game_num: int,
        turn_num: int,
        seat: int,
        action: CardAsk | SetDeclaration,
        outcome: CardAskSuccess | CardAskFailure | SetBurn | SetDrop,
        hands: list[list[Card]],
        scores: dict[str, int],
        next_turn: str,
    ) -> None:
        """Log one resolved action.

        Args:
            game_num: Game number.
            turn_num: Action number within the game.
            seat: Seat that acted.
            action: The action taken.
            outcome: Resolved outcome.
            hands: All hands after the action.
            scores: Team scores after the action.
            next_turn: Description of the turn state that follows.
        """
        self._write({
            "type": "action",
            "game": game_num,
            "turn": turn_num,
            "seat": seat,
            "action": _action_record(action),
            "outcome": outcome.model_dump(mode="json"),
            "hands": format_hands(hands),
            "scores": scores,
            "next_turn": next_turn,
        })

    def log_nomination(self, game_num: int, turn_num: int, team: Team, seat: int) -> None:
        """Log a team handing its turn to a seat."""
        self._write({
            "type": "nominate",
            "game": game_num,
            "turn": turn_num,
            "team": team.value,
            "seat": seat,
        })

    def log_rejected(
        self,
        game_num: int,
        turn_num: int,
        reason: str,
        detail: dict[str, Any] | None = None,
    ) -> None:
        """Log an action or nomination rejected by the engine.

        Args:
            game_num: Game number.
            turn_num: Action number when the rejection happened.
            reason: Reject reason code.
            detail: Additional details.
        """
        record: dict[str, Any] = {
            "type": "rejected",
            "game": game_num,
            "turn": turn_num,
            "reason": reason,
        }
        if detail:
            record["detail"] = detail
        self._write(record)

    def log_game_end(
        self,
        game_num: int,
        scores: dict[str, int],
        pits: dict[str, list[str]],
        winner: str | None,
        finished: bool = True,
    ) -> None:
        """Log game end with results.

        Args:
            game_num: Game number.
            scores: Final pit count per team.
            pits: Pits won by each team.
            winner: Winning team, None for a draw or unfinished game.
            finished: False if the game was stopped before every pit resolved.
        """
        self._write({
            "type": "game_end",
            "game": game_num,
            "scores": scores,
            "pits": pits,
            "winner": winner,
            "finished": finished,
        })

    def log_session_end(self, total_games: int, wins: dict[str, int]) -> None:
        """Log session end with final results.

        Args:
            total_games: Total number of games played.
            wins: Games won per team, plus draws under "draw".
        """
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "wins": wins,
        })
