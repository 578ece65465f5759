"""Main entry point: self-play games between bots."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from literature_engine.config import load_config
from literature_engine.game.runner import GameRunner
from literature_engine.logging import GameLogConfig, GameLogger
from literature_engine.models.card import Variant
from literature_engine.strategy import create_strategy
from literature_engine.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, variant: Variant) -> str:
    """Generate log filename with timestamp and variant.

    Format: {ISO timestamp}_{variant}.jsonl

    Args:
        log_dir: Directory for log files.
        variant: Variant being played.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_{variant.value}.jsonl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Literature (Canadian Fish) rule engine: bot self-play"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        help="Game variant (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for deals and bots (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show every hand after each action",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.num_games:
        config.game.num_games = args.num_games
    if args.variant:
        config.game.variant = Variant(args.variant)
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    variant = config.game.variant
    print("Literature self-play starting...")
    print(f"Variant: {variant.value} ({variant.seat_count} seats)")
    print(f"Games: {config.game.num_games}")
    print(f"Strategy: {config.bots.strategy}")
    print()

    rng = random.Random(config.game.seed)

    try:
        strategies = [
            create_strategy(
                config.bots.strategy,
                declare_rate=config.bots.declare_rate,
                rng=random.Random(rng.getrandbits(32)),
            )
            for _ in range(variant.seat_count)
        ]

        if game_log_enabled:
            log_path = generate_log_filename(game_log_dir, variant)
            game_log_config = GameLogConfig(enabled=True, output_path=log_path)
            print(f"Game log: {log_path}")
        else:
            game_log_config = GameLogConfig(enabled=False)

        with GameLogger(game_log_config) as game_logger:
            runner = GameRunner(strategies, config, game_logger, rng=rng)

            def on_action(turn_num: int, game) -> None:
                if config.logging.show_hands or args.verbose:
                    display.print_action(turn_num, game)

            def on_game_end(game_num: int, game) -> None:
                display.print_game_end(game_num, game)

            runner.set_callbacks(on_action=on_action, on_game_end=on_game_end)

            display.print_separator()
            results = runner.run_games()
            display.print_final_results(results)

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Self-play error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
