import logging
from collections.abc import Sequence

from dalaoer.engine.cards import RANK_ORDER, THREE_OF_CLUBS, Card, Rank, card_name, card_weight, sort_cards
from dalaoer.engine.context import MoveContext
from dalaoer.engine.generate_hands import (
    HIGH_CARD_WEIGHT,
    CardCombination,
    Category,
    HandEvaluation,
    evaluate_hand,
    single_combination,
)
from dalaoer.engine.hands import Hand, HandType, beats, identify_hand
from dalaoer.engine.strategy_config import Difficulty, StrategyConfig

logger = logging.getLogger(__name__)

# Singles below this weight cannot hold off an opponent close to going out
WEAK_SINGLE_WEIGHT = 30


def _weakest_first(combos: Sequence[CardCombination]) -> list[CardCombination]:
    return sorted(combos, key=lambda c: c.priority)


def _remove_cards(cards: Sequence[Card], used: Sequence[Card]) -> list[Card]:
    used_set = set(used)
    return [c for c in cards if c not in used_set]


def _is_pair_of_twos(combo: CardCombination) -> bool:
    return combo.category == Category.PAIR and combo.cards[0].rank == Rank.TWO


# =======================
# Move generation
# =======================


def legal_moves(
    cards: Sequence[Card],
    evaluation: HandEvaluation,
    reference: Hand | None,
    include_bombs_when_leading: bool = False,
) -> list[CardCombination]:
    """
    Candidate plays from an evaluated hand.

    Leading: non-bomb five-card hands, pairs and every single (bombs only on request).
    Following: everything that beats the reference, bombs first.
    """
    singles = [single_combination(c) for c in sort_cards(cards)]

    if reference is None:
        moves = list(evaluation.five_cards)
        if include_bombs_when_leading:
            moves.extend(evaluation.bombs)
        moves.extend(evaluation.pairs)
        moves.extend(singles)
        return moves

    every = [*evaluation.bombs, *evaluation.five_cards, *evaluation.pairs, *singles]
    return [m for m in every if beats(m.hand, reference)]


# =======================
# Lookahead scoring
# =======================


def evaluate_end_state(cards: Sequence[Card]) -> float:
    score = -10.0 * len(cards)
    score -= 5 * sum(1 for c in cards if card_weight(c) >= HIGH_CARD_WEIGHT)
    return score


def move_cost(move: CardCombination, evaluation: HandEvaluation) -> float:
    """Cost of a play: breaking a protected five-card hand or bomb, or bombing at all."""
    cost = 0.0
    if move.category == Category.SINGLE:
        cost += 2
    if move.category == Category.PAIR:
        cost += 3

    if move.size() < 5:
        protected = {c for combo in (*evaluation.five_cards, *evaluation.bombs) for c in combo.cards}
        cost += 20 * sum(1 for c in move.cards if c in protected)

    if move.category == Category.BOMB:
        cost += 10
    return cost


def immediate_score(move: CardCombination, evaluation: HandEvaluation) -> float:
    score = 15.0 * move.size()
    if move.category == Category.FIVE:
        score += 20
    if move.category == Category.BOMB:
        score += 50
    return score - move_cost(move, evaluation)


def danger_adjustment(move: CardCombination, dangerous_opponent: bool) -> float:
    if not dangerous_opponent:
        return 0.0
    if move.category == Category.BOMB:
        return 30.0
    if move.category == Category.SINGLE and card_weight(move.cards[0]) < WEAK_SINGLE_WEIGHT:
        return -20.0
    return 0.0


def simulate_future(cards: Sequence[Card], depth: int) -> float:
    """Best greedy continuation value of the remaining cards, depth plies deep."""
    if depth <= 0 or not cards:
        return evaluate_end_state(cards)

    evaluation = evaluate_hand(cards)
    moves = [
        *evaluation.five_cards,
        *evaluation.pairs,
        *(single_combination(c) for c in evaluation.singles),
    ]
    if not moves:
        moves = list(evaluation.bombs)
    if not moves:
        return evaluate_end_state(cards)

    return max(
        -move_cost(m, evaluation) + simulate_future(_remove_cards(cards, m.cards), depth - 1) for m in moves
    )


def _choose_by_lookahead(
    cards: list[Card],
    evaluation: HandEvaluation,
    candidates: list[CardCombination],
    dangerous: bool,
    config: StrategyConfig,
) -> list[Card] | None:
    if not candidates:
        return None

    best_move, best_score = None, float("-inf")
    for move in candidates:
        remaining = _remove_cards(cards, move.cards)
        score = (
            simulate_future(remaining, config.lookahead_depth)
            + immediate_score(move, evaluation)
            + danger_adjustment(move, dangerous)
        )
        # Strictly greater keeps the first of equal scores
        if score > best_score:
            best_move, best_score = move, score

    assert best_move is not None
    logger.debug("lookahead picked %s (score %.1f of %d candidates)", best_move.hand, best_score, len(candidates))
    return list(best_move.cards)


# =======================
# Shared rules
# =======================


def _opening_move(cards: list[Card], evaluation: HandEvaluation) -> list[Card]:
    if THREE_OF_CLUBS not in cards:
        return [cards[0]]
    if identify_hand(cards) is not None:
        return cards

    fives = [c for c in evaluation.five_cards if THREE_OF_CLUBS in c.cards]
    fives += [c for c in evaluation.bombs if THREE_OF_CLUBS in c.cards]
    if fives:
        return list(_weakest_first(fives)[0].cards)

    for pair in _weakest_first(evaluation.pairs):
        if THREE_OF_CLUBS in pair.cards:
            return list(pair.cards)

    return [THREE_OF_CLUBS]


def _lead_rank_based(cards: list[Card], evaluation: HandEvaluation, late_game: bool) -> list[Card]:
    fives = list(evaluation.five_cards)
    if late_game:
        fives.extend(evaluation.bombs)
    if fives:
        return list(_weakest_first(fives)[0].cards)

    if evaluation.pairs:
        return list(_weakest_first(evaluation.pairs)[0].cards)

    small = [c for c in evaluation.singles if RANK_ORDER[c.rank] < RANK_ORDER[Rank.TEN]]
    if small:
        return [small[0]]
    return [cards[0]]


def _follow(
    cards: list[Card],
    evaluation: HandEvaluation,
    context: MoveContext,
    config: StrategyConfig,
) -> list[Card] | None:
    reference = context.last_played_hand
    assert reference is not None

    late_game = len(cards) <= config.late_game_threshold
    dangerous = context.has_dangerous_opponent(config.danger_threshold)
    bombs = [b for b in _weakest_first(evaluation.bombs) if beats(b.hand, reference)]

    if reference.type == HandType.SINGLE:
        if context.next_player_size == 1:
            # Deny the next player their last card
            largest = single_combination(cards[-1])
            if beats(largest.hand, reference):
                return [cards[-1]]
            return list(bombs[0].cards) if bombs else None

        if config.difficulty == Difficulty.HARD:
            return _choose_by_lookahead(
                cards, evaluation, legal_moves(cards, evaluation, reference), dangerous, config
            )

        valid = [c for c in cards if beats(single_combination(c).hand, reference)]
        for c in valid:
            if c.rank != Rank.TWO:
                return [c]
        if valid:
            return [valid[0]]
        if bombs and (dangerous or late_game):
            return list(bombs[0].cards)
        return None

    if reference.type == HandType.PAIR:
        pairs = [p for p in _weakest_first(evaluation.pairs) if beats(p.hand, reference)]
        if pairs and _is_pair_of_twos(pairs[0]) and not (dangerous or late_game):
            logger.debug("holding back pair of 2s against %s", reference)
            return None

        if config.difficulty == Difficulty.HARD:
            return _choose_by_lookahead(
                cards, evaluation, legal_moves(cards, evaluation, reference), dangerous, config
            )

        if pairs:
            return list(pairs[0].cards)
        return list(bombs[0].cards) if bombs else None

    if config.difficulty == Difficulty.HARD:
        return _choose_by_lookahead(cards, evaluation, legal_moves(cards, evaluation, reference), dangerous, config)

    # Enumeration order: bombs, then the other five-card hands, highest priority first
    for combo in [*evaluation.bombs, *evaluation.five_cards]:
        if beats(combo.hand, reference):
            return list(combo.cards)
    return None


# =======================
# Public entry
# =======================


def choose_move(
    hand: Sequence[Card],
    context: MoveContext,
    config: StrategyConfig | None = None,
) -> list[Card] | None:
    """
    Pick the cards a bot plays this turn.

    Args:
        hand: The bot's current cards
        context: Table state (reference hand, first turn flag, opponent hand sizes)
        config: Difficulty and lookahead parameters (defaults to StrategyConfig())

    Returns:
        The cards to play, or None to pass
    """
    config = config or StrategyConfig()
    if not hand:
        return None

    cards = sort_cards(hand)
    evaluation = evaluate_hand(cards)

    if context.is_first_turn:
        move = _opening_move(cards, evaluation)
    elif context.last_played_hand is None:
        if identify_hand(cards) is not None:
            move = cards
        elif config.difficulty == Difficulty.HARD:
            late_game = len(cards) <= config.late_game_threshold
            dangerous = context.has_dangerous_opponent(config.danger_threshold)
            candidates = legal_moves(cards, evaluation, None, include_bombs_when_leading=late_game)
            move = _choose_by_lookahead(cards, evaluation, candidates, dangerous, config) or [cards[0]]
        else:
            move = _lead_rank_based(cards, evaluation, len(cards) <= config.late_game_threshold)
    else:
        move = _follow(cards, evaluation, context, config)

    if logger.isEnabledFor(logging.DEBUG):
        played = " ".join(card_name(c) for c in move) if move else "PASS"
        logger.debug("%s bot plays %s", config.difficulty.value, played)
    return move
