"""Enumerates the card combinations available to a hand."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from dalaoer.engine.cards import Card, Rank, card_weight, sort_cards
from dalaoer.engine.hands import STRAIGHT_WINDOWS, Hand, HandType, identify_hand

BOMB_PRIORITY_BONUS = 10000
# Singles at or above this weight are a burden to hold on to
HIGH_CARD_WEIGHT = 40


class Category(str, Enum):
    BOMB = "bomb"
    FIVE = "five"
    PAIR = "pair"
    SINGLE = "single"


@dataclass(frozen=True)
class CardCombination:
    cards: tuple[Card, ...]
    hand: Hand
    priority: int  # orders candidates, not gameplay strength
    category: Category

    def size(self) -> int:
        return len(self.cards)


@dataclass
class HandEvaluation:
    bombs: list[CardCombination] = field(default_factory=list)
    five_cards: list[CardCombination] = field(default_factory=list)
    pairs: list[CardCombination] = field(default_factory=list)
    singles: list[Card] = field(default_factory=list)
    total_strength: int = 0


def single_combination(card: Card) -> CardCombination:
    hand = identify_hand([card])
    assert hand is not None
    return CardCombination((card,), hand, card_weight(card), Category.SINGLE)


def _by_rank(cards: Sequence[Card]) -> dict[Rank, list[Card]]:
    by_rank: dict[Rank, list[Card]] = {}
    for c in cards:
        by_rank.setdefault(c.rank, []).append(c)
    return by_rank


def _five_combination(cards: Sequence[Card], expected: tuple[HandType, ...]) -> CardCombination | None:
    hand = identify_hand(cards)
    if hand is None or hand.type not in expected:
        return None
    if hand.is_bomb:
        return CardCombination(tuple(cards), hand, hand.strength + BOMB_PRIORITY_BONUS, Category.BOMB)
    return CardCombination(tuple(cards), hand, hand.strength, Category.FIVE)


def find_straights(cards: Sequence[Card]) -> list[list[Card]]:
    """
    Every straight window present in the cards, weakest window first.

    Each window yields the lowest-suited card of every rank, plus one straight flush
    per suit that holds the whole window.
    """
    by_rank = _by_rank(sort_cards(cards))
    straights: list[list[Card]] = []
    seen: set[frozenset[Card]] = set()

    for ranks, _, _ in STRAIGHT_WINDOWS:
        if not all(r in by_rank for r in ranks):
            continue
        candidates = [[by_rank[r][0] for r in ranks]]
        for first in by_rank[ranks[0]]:
            suited = [next((c for c in by_rank[r] if c.suit == first.suit), None) for r in ranks]
            if all(c is not None for c in suited):
                candidates.append(suited)  # type: ignore[arg-type]
        for straight in candidates:
            key = frozenset(straight)
            if key not in seen:
                seen.add(key)
                straights.append(straight)

    return straights


def find_five_card_hands(cards: Sequence[Card]) -> list[CardCombination]:
    """All four-kind, full house and straight combinations, highest priority first."""
    cards = sort_cards(cards)
    by_rank = _by_rank(cards)
    results: list[CardCombination] = []

    # Four-kind: one combo per off-rank kicker
    for rank, quad in by_rank.items():
        if len(quad) != 4:
            continue
        for kicker in cards:
            if kicker.rank != rank:
                combo = _five_combination(quad + [kicker], (HandType.FOUR_OF_A_KIND,))
                if combo is not None:
                    results.append(combo)

    # Full house: every triple group crossed with every other pair group
    triples = [g for g in by_rank.values() if len(g) >= 3]
    pairs = [g for g in by_rank.values() if len(g) >= 2]
    for t in triples:
        for p in pairs:
            if t[0].rank == p[0].rank:
                continue
            combo = _five_combination(t[:3] + p[:2], (HandType.FULL_HOUSE,))
            if combo is not None:
                results.append(combo)

    for straight in find_straights(cards):
        combo = _five_combination(straight, (HandType.STRAIGHT, HandType.STRAIGHT_FLUSH))
        if combo is not None:
            results.append(combo)

    results.sort(key=lambda c: c.priority, reverse=True)
    return results


def find_pairs(cards: Sequence[Card]) -> list[CardCombination]:
    """Every adjacent equal-rank pair in the sorted cards, highest first."""
    cards = sort_cards(cards)
    pairs: list[CardCombination] = []
    for a, b in zip(cards, cards[1:]):
        if a.rank != b.rank:
            continue
        hand = identify_hand([a, b])
        if hand is not None:
            pairs.append(CardCombination((a, b), hand, hand.strength, Category.PAIR))
    pairs.sort(key=lambda c: c.priority, reverse=True)
    return pairs


def _total_strength(
    bombs: list[CardCombination],
    fives: list[CardCombination],
    pairs: list[CardCombination],
    singles: list[Card],
) -> int:
    score = 1000 * len(bombs) + 200 * len(fives) + 30 * len(pairs)
    score -= 5 * sum(1 for c in singles if card_weight(c) >= HIGH_CARD_WEIGHT)
    return score


def evaluate_hand(cards: Sequence[Card]) -> HandEvaluation:
    """
    Split a hand into bombs, other five-card hands, pairs and leftover singles.

    Combination lists may share cards with each other; only singles are disjoint
    from everything else.
    """
    cards = sort_cards(cards)

    five_card_hands = find_five_card_hands(cards)
    bombs = [c for c in five_card_hands if c.category == Category.BOMB]
    fives = [c for c in five_card_hands if c.category == Category.FIVE]
    pairs = find_pairs(cards)

    used = {card for combo in (*bombs, *fives, *pairs) for card in combo.cards}
    singles = [c for c in cards if c not in used]

    return HandEvaluation(
        bombs=bombs,
        five_cards=fives,
        pairs=pairs,
        singles=singles,
        total_strength=_total_strength(bombs, fives, pairs, singles),
    )
