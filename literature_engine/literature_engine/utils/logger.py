"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from literature_engine.models.seat import Team

if TYPE_CHECKING:
    from literature_engine.game.engine import HistoryRecord, LiteratureGame


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show every seat's hand
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_action(self, turn_number: int, game: "LiteratureGame") -> None:
        """Print the last resolved action and the turn that follows."""
        outcome = game.history[-1]
        print(f"\nTurn {turn_number}: {self._describe(outcome)}")
        print(f"  Next: {game.current_turn()}")
        if self.show_hands:
            self.print_hands(game)
        else:
            self.print_hand_counts(game)

    def _describe(self, outcome: "HistoryRecord") -> str:
        match outcome.kind:
            case "CARD_ASK_SUCCESS":
                return f"Seat {outcome.recipient} took {outcome.card} from seat {outcome.source}"
            case "CARD_ASK_FAILURE":
                return f"Seat {outcome.asker} asked seat {outcome.target} for {outcome.card}: miss"
            case "SET_BURN":
                return (
                    f"Seat {outcome.seat} burnt {outcome.pit} ({outcome.reason.value}), "
                    f"point to {outcome.credited_team}"
                )
            case "SEAT_NOMINATED":
                return f"{outcome.team} nominated seat {outcome.seat}"
            case _:
                return f"Seat {outcome.seat} dropped {outcome.pit} for {outcome.dropping_team}"

    def print_hand_counts(self, game: "LiteratureGame") -> None:
        """Print hand counts for all seats."""
        counts = [f"S{s}:{game.registry.hand_size(s)}" for s in range(game.seat_count)]
        print(f"Hand counts: {' | '.join(counts)}")

    def print_hands(self, game: "LiteratureGame") -> None:
        """Print hands for all seats (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("Hands:")
        for seat in range(game.seat_count):
            hand = game.hand_of(seat)
            cards = ", ".join(str(c) for c in hand) if hand else "[OUT]"
            print(f"  S{seat} ({game.team_of(seat)}): {cards}")

    def print_game_end(self, game_number: int, game: "LiteratureGame") -> None:
        """Print game end results."""
        print(f"\nGame {game_number} finished!")
        for team in Team:
            pits = ", ".join(str(p) for p in game.ledger.pits_of(team)) or "-"
            print(f"  {team}: {game.score_of(team)} ({pits})")

        if not game.is_game_over():
            print("  Result: stopped before every pit was resolved")
        elif game.winner() is None:
            print("  Result: draw")
        else:
            print(f"  Result: {game.winner()} wins")

    def print_final_results(self, results: dict[str, int]) -> None:
        """Print final session results."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        for key, count in results.items():
            label = f"Team {key}" if key in (Team.A.value, Team.B.value) else key.capitalize()
            print(f"  {label}: {count}")
