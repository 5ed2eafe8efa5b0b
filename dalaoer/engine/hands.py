"""Hand classification and comparison for Big Two."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from dalaoer.engine.cards import RANK_ORDER, SUIT_ORDER, Card, Rank, card_weight, sort_cards


class HandType(str, Enum):
    SINGLE = "Single"
    PAIR = "Pair"
    STRAIGHT = "Straight"
    FULL_HOUSE = "FullHouse"
    FOUR_OF_A_KIND = "FourOfAKind"
    STRAIGHT_FLUSH = "StraightFlush"
    DRAGON = "Dragon"
    NONE = "None"


# Only consulted for bomb vs bomb; non-bomb hands must match type exactly
HAND_TYPE_ORDER: dict[HandType, int] = {
    HandType.NONE: 0,
    HandType.SINGLE: 1,
    HandType.PAIR: 1,
    HandType.STRAIGHT: 2,
    HandType.FULL_HOUSE: 3,
    HandType.FOUR_OF_A_KIND: 4,
    HandType.STRAIGHT_FLUSH: 5,
    HandType.DRAGON: 6,
}

BOMB_TYPES = (HandType.FOUR_OF_A_KIND, HandType.STRAIGHT_FLUSH)

_R = Rank
# (ranks, sequence rank, ranking card rank), weakest first
STRAIGHT_WINDOWS: list[tuple[tuple[Rank, ...], int, Rank]] = [
    ((_R.ACE, _R.TWO, _R.THREE, _R.FOUR, _R.FIVE), 1, _R.FIVE),
    *(
        (tuple(list(Rank)[start : start + 5]), start + 2, list(Rank)[start + 4])
        for start in range(8)  # 3-4-5-6-7 .. 10-J-Q-K-A
    ),
    ((_R.TWO, _R.THREE, _R.FOUR, _R.FIVE, _R.SIX), 10, _R.SIX),
]
_WINDOW_BY_RANKS = {frozenset(ranks): (seq, top) for ranks, seq, top in STRAIGHT_WINDOWS}


@dataclass(frozen=True)
class Hand:
    cards: tuple[Card, ...]  # ascending by weight
    type: HandType
    strength: int  # used for comparing within same type

    def size(self) -> int:
        return len(self.cards)

    @property
    def is_bomb(self) -> bool:
        return is_bomb(self)

    def __str__(self) -> str:
        return describe_hand(self)


def is_bomb(hand: Hand) -> bool:
    return hand.type in BOMB_TYPES


def _straight_strength(cards: list[Card]) -> int | None:
    window = _WINDOW_BY_RANKS.get(frozenset(c.rank for c in cards))
    if window is None:
        return None
    sequence_rank, ranking_rank = window
    ranking_card = next(c for c in cards if c.rank == ranking_rank)
    return sequence_rank * 10 + SUIT_ORDER[ranking_card.suit]


def _identify_five(cards: list[Card]) -> Hand | None:
    ranks = [c.rank for c in cards]

    straight_strength = _straight_strength(cards)
    if straight_strength is not None:
        is_flush = len({c.suit for c in cards}) == 1
        hand_type = HandType.STRAIGHT_FLUSH if is_flush else HandType.STRAIGHT
        return Hand(tuple(cards), hand_type, straight_strength)

    # Four-kind + kicker: sorted, the quad fills slots 0..3 or 1..4
    if ranks[0] == ranks[3] or ranks[1] == ranks[4]:
        return Hand(tuple(cards), HandType.FOUR_OF_A_KIND, RANK_ORDER[ranks[2]])

    # Full house: AAABB or AABBB; slot 2 always belongs to the triple
    if (ranks[0] == ranks[2] and ranks[3] == ranks[4]) or (ranks[0] == ranks[1] and ranks[2] == ranks[4]):
        return Hand(tuple(cards), HandType.FULL_HOUSE, RANK_ORDER[ranks[2]])

    return None


def identify_hand(cards: Sequence[Card]) -> Hand | None:
    """
    Classify a group of cards.

    Returns:
        The Hand, or None if the cards do not form a recognised pattern
        (wrong count, repeated card, or no matching shape).
    """
    n = len(cards)
    if n == 0 or len(set(cards)) != n:
        return None

    cards = sort_cards(cards)

    if n == 1:
        return Hand(tuple(cards), HandType.SINGLE, card_weight(cards[0]))

    if n == 2:
        if cards[0].rank == cards[1].rank:
            return Hand(tuple(cards), HandType.PAIR, max(card_weight(c) for c in cards))
        return None

    if n == 5:
        return _identify_five(cards)

    if n == 13:
        if len({c.rank for c in cards}) == 13:
            return Hand(tuple(cards), HandType.DRAGON, card_weight(cards[-1]))
        return None

    return None


def beats(candidate: Hand, reference: Hand) -> bool:
    """Whether candidate may legally be played on top of reference."""
    if is_bomb(candidate):
        if not is_bomb(reference):
            # Bomb overrides any non-bomb, whatever its size or type
            return True
        candidate_order = HAND_TYPE_ORDER[candidate.type]
        reference_order = HAND_TYPE_ORDER[reference.type]
        if candidate_order != reference_order:
            return candidate_order > reference_order
        return candidate.strength > reference.strength

    if candidate.size() != reference.size() or candidate.type != reference.type:
        return False
    return candidate.strength > reference.strength


def _counted_rank(hand: Hand, count: int) -> Rank | None:
    ranks = [c.rank for c in hand.cards]
    for rank in ranks:
        if ranks.count(rank) == count:
            return rank
    return None


def _straight_label(hand: Hand) -> str:
    for ranks, _, _ in STRAIGHT_WINDOWS:
        if frozenset(ranks) == frozenset(c.rank for c in hand.cards):
            return "-".join(r.value for r in ranks)
    return "-".join(c.rank.value for c in hand.cards)


def describe_hand(hand: Hand | None) -> str:
    """Short human readable label, e.g. "Pair of 7", "Straight 2-3-4-5-6"."""
    if hand is None or not hand.cards:
        return ""
    if hand.type == HandType.SINGLE:
        return hand.cards[0].rank.value
    if hand.type == HandType.PAIR:
        return f"Pair of {hand.cards[0].rank.value}"
    if hand.type == HandType.STRAIGHT:
        return f"Straight {_straight_label(hand)}"
    if hand.type == HandType.STRAIGHT_FLUSH:
        return f"Straight Flush {_straight_label(hand)}"
    if hand.type == HandType.FULL_HOUSE:
        triple = _counted_rank(hand, 3)
        return f"Full House of {triple.value if triple else '?'}"
    if hand.type == HandType.FOUR_OF_A_KIND:
        quad = _counted_rank(hand, 4)
        return f"Four of a Kind {quad.value if quad else '?'}"
    if hand.type == HandType.DRAGON:
        return "Dragon"
    return ""
