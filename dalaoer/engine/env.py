import logging
from collections.abc import Sequence
from dataclasses import dataclass

from dalaoer.engine.cards import CARDS_PER_DECK, THREE_OF_CLUBS, Card, card_name, create_deck, deal_hands, shuffle_deck
from dalaoer.engine.context import MoveContext
from dalaoer.engine.hands import Hand, HandType, beats, identify_hand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    player: int
    action: str  # "play" or "pass"
    hand: Hand | None = None


class Big2Table:
    """A single Big Two deal played locally, one decision per step."""

    def __init__(self, n_players: int = 4):
        if not 2 <= n_players <= 4:
            raise ValueError(f"n_players must be between 2 and 4, got {n_players}")
        self.n_players = n_players
        self.cards_per_player = CARDS_PER_DECK // n_players
        self.reset()

    def reset(self) -> MoveContext:
        """Shuffles a new deck, deals, and hands the lead to the holder of the 3 of Clubs"""
        deck = shuffle_deck(create_deck())
        self.hands: list[list[Card]] = deal_hands(deck, self.n_players, self.cards_per_player)

        # With fewer than 4 players the 3 of Clubs may stay in the undealt remainder
        self.current_player = 0
        for i, hand in enumerate(self.hands):
            if THREE_OF_CLUBS in hand:
                self.current_player = i
                break

        self.trick_pile: Hand | None = None
        self.last_player: int | None = None
        self.passes_in_row: int = 0
        self.is_first_turn: bool = True
        self.done: bool = False
        self.winner: int | None = None
        self.history: list[HistoryEntry] = []
        self.hand_counts: list[dict[HandType, int]] = [{} for _ in range(self.n_players)]

        for i, hand in enumerate(self.hands):
            dealt = identify_hand(hand)
            if dealt is not None and dealt.type == HandType.DRAGON:
                logger.info("player %d was dealt a Dragon", i)

        return self.context(self.current_player)

    def context(self, player: int) -> MoveContext:
        """The table state as seen by player"""
        # Opponent counts clockwise from the player
        counts = [len(self.hands[(player + i) % self.n_players]) for i in range(1, self.n_players)]
        reference = None if self.last_player == player else self.trick_pile
        return MoveContext(
            last_played_hand=reference,
            is_first_turn=self.is_first_turn,
            opponent_hand_sizes=counts,
            next_player_hand_size=counts[0],
        )

    def legal_hand(self, cards: Sequence[Card]) -> Hand | None:
        """The classified hand if the current player may play these cards, else None"""
        hand = self.hands[self.current_player]
        if not cards or any(c not in hand for c in cards):
            return None

        played = identify_hand(cards)
        if played is None:
            return None

        # The opening play must include the 3 of Clubs
        if self.is_first_turn and THREE_OF_CLUBS in hand and THREE_OF_CLUBS not in played.cards:
            return None

        reference = self.context(self.current_player).last_played_hand
        if reference is not None and not beats(played, reference):
            return None
        return played

    def step(self, cards: Sequence[Card] | None) -> MoveContext:
        """
        Applies a play (or a pass when cards is empty/None) by the current player.

        Raises:
            ValueError: If the game is over, the play is illegal, or the player passes while leading
        """
        if self.done:
            raise ValueError("Game is already finished")

        player = self.current_player
        if not cards:
            if self.context(player).last_played_hand is None:
                raise ValueError(f"Player {player} cannot pass while leading")
            self.history.append(HistoryEntry(player, "pass"))
            self.passes_in_row += 1
            # Everyone else passed, the trick goes back to its owner
            if self.passes_in_row >= self.n_players - 1:
                self.trick_pile = None
                self.passes_in_row = 0
        else:
            played = self.legal_hand(cards)
            if played is None:
                names = " ".join(card_name(c) for c in cards)
                raise ValueError(f"Illegal play by player {player}: {names}")

            for c in played.cards:
                self.hands[player].remove(c)
            self.history.append(HistoryEntry(player, "play", played))
            counts = self.hand_counts[player]
            counts[played.type] = counts.get(played.type, 0) + 1
            self.trick_pile = played
            self.last_player = player
            self.passes_in_row = 0
            self.is_first_turn = False

            if not self.hands[player]:
                self.done = True
                self.winner = player
                logger.info("player %d wins after %d moves", player, len(self.history))

        # If not done, advance the current player
        if not self.done:
            self.current_player = (self.current_player + 1) % self.n_players

        return self.context(self.current_player)
