"""Simulate win rates between combinations of bot strategies.

Interesting benchmarks to run:
- 4 of the same strategies should have 25% win rate each.
- hard vs 3 rule
- easy vs 3 rule
- 2 hard vs 2 easy
"""

import argparse
import logging
from collections.abc import Callable

import numpy as np
from tqdm import tqdm

from dalaoer.engine.cards import Card
from dalaoer.engine.context import MoveContext
from dalaoer.engine.env import Big2Table
from dalaoer.engine.rule_strategy import choose_rule_move
from dalaoer.engine.smart_strategy import choose_move
from dalaoer.engine.strategy_config import Difficulty, StrategyConfig
from dalaoer.logging_utils import setup_logging

logger = logging.getLogger(__name__)

StrategyFn = Callable[[list[Card], MoveContext], list[Card] | None]

STRATEGY_NAMES = ("rule", "easy", "hard")


def resolve_strategy(strategy_name: str, lookahead_depth: int = 2) -> StrategyFn:
    name = strategy_name.strip().lower()
    if name == "rule":
        return choose_rule_move
    if name in ("easy", "hard"):
        config = StrategyConfig(difficulty=Difficulty(name), lookahead_depth=lookahead_depth)
        return lambda hand, context: choose_move(hand, context, config)
    raise ValueError(f"Unknown strategy: {strategy_name}")


def play_game(strategy_fns: list[StrategyFn], max_moves: int = 1000) -> tuple[int, int]:
    """
    Play one deal using the provided strategies, one per seat.

    Returns:
        (winner seat, number of moves)
    """
    table = Big2Table(len(strategy_fns))
    while not table.done:
        if len(table.history) >= max_moves:
            raise RuntimeError(f"Game did not finish within {max_moves} moves")
        p = table.current_player
        cards = strategy_fns[p](list(table.hands[p]), table.context(p))
        table.step(cards)

    assert table.winner is not None
    return table.winner, len(table.history)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate Big Two wins between bot strategies.",
    )
    parser.add_argument(
        "--strategies",
        nargs="+",
        default=["hard", "rule", "rule", "rule"],
        help=f"Space-separated strategy list, one per seat, from {', '.join(STRATEGY_NAMES)}",
    )
    parser.add_argument(
        "--num-games",
        type=int,
        default=200,
        help="Number of games to simulate.",
    )
    parser.add_argument(
        "--lookahead-depth",
        type=int,
        default=2,
        help="Lookahead depth for the easy/hard strategies.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    setup_logging(args.log_level)
    strategies = [s.strip().lower() for s in args.strategies]
    strategy_fns = [resolve_strategy(name, args.lookahead_depth) for name in strategies]

    print(f"Playing {args.num_games} games with strategies: {strategies}")
    print("-" * 60)

    wins_by_seat = np.zeros(len(strategies), dtype=np.int64)
    game_lengths = np.zeros(args.num_games, dtype=np.int64)

    for game_num in tqdm(range(args.num_games), desc="Games"):
        winner, moves = play_game(strategy_fns)
        wins_by_seat[winner] += 1
        game_lengths[game_num] = moves

    total_games = max(args.num_games, 1)
    print("\n" + "=" * 60)
    print("FINAL RESULTS")
    print("=" * 60)

    print("\nWins by strategy:")
    for name in sorted(set(strategies)):
        seats = [i for i, s in enumerate(strategies) if s == name]
        wins = int(wins_by_seat[seats].sum())
        print(f"  {name}: {wins}/{total_games} ({wins / total_games:.2%})")

    print("\nWins by seat:")
    for seat, wins in enumerate(wins_by_seat):
        print(f"  Seat {seat} ({strategies[seat]}): {int(wins)} wins ({wins / total_games:.2%})")

    if args.num_games > 0:
        print(f"\nMoves per game: mean {game_lengths.mean():.1f}, max {game_lengths.max()}")


if __name__ == "__main__":
    main()
