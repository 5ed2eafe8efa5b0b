import json
from dataclasses import asdict, dataclass
from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"  # rank-based rules
    HARD = "hard"  # lookahead scoring


@dataclass
class StrategyConfig:
    """Configuration for the heuristic bot."""

    difficulty: Difficulty = Difficulty.HARD

    # Lookahead
    lookahead_depth: int = 2

    # Opponents at or below this many cards trigger defensive play
    danger_threshold: int = 3

    # At or below this many cards in our own hand, withheld plays are released
    late_game_threshold: int = 5

    def __post_init__(self):
        self.difficulty = Difficulty(self.difficulty)
        if self.lookahead_depth < 0:
            raise ValueError("lookahead_depth must be non-negative")
        if self.danger_threshold < 0:
            raise ValueError("danger_threshold must be non-negative")
        if self.late_game_threshold < 0:
            raise ValueError("late_game_threshold must be non-negative")

    def save(self, path: str):
        """Save config to JSON file."""
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls, path: str) -> "StrategyConfig":
        """Load config from JSON file."""
        with open(path) as f:
            return cls(**json.load(f))
