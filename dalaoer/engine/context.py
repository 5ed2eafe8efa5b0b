from dataclasses import dataclass, field

from dalaoer.engine.hands import Hand


@dataclass
class MoveContext:
    """Table state seen by a player about to act."""

    last_played_hand: Hand | None = None  # None when leading a fresh trick
    is_first_turn: bool = False
    opponent_hand_sizes: list[int] = field(default_factory=list)  # clockwise from the next player
    next_player_hand_size: int | None = None

    @property
    def next_player_size(self) -> int | None:
        if self.next_player_hand_size is not None:
            return self.next_player_hand_size
        return self.opponent_hand_sizes[0] if self.opponent_hand_sizes else None

    def has_dangerous_opponent(self, threshold: int) -> bool:
        return any(size <= threshold for size in self.opponent_hand_sizes)
