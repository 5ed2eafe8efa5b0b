"""Big Two rules engine: cards, hand classification, combination search and bots."""

from dalaoer.engine.cards import (
    THREE_OF_CLUBS,
    Card,
    Rank,
    Suit,
    card_weight,
    create_deck,
    deal_hands,
    parse_card,
    parse_cards,
    shuffle_deck,
    sort_cards,
)
from dalaoer.engine.context import MoveContext
from dalaoer.engine.generate_hands import CardCombination, Category, HandEvaluation, evaluate_hand
from dalaoer.engine.hands import Hand, HandType, beats, describe_hand, identify_hand, is_bomb
from dalaoer.engine.rule_strategy import choose_rule_move
from dalaoer.engine.smart_strategy import choose_move
from dalaoer.engine.strategy_config import Difficulty, StrategyConfig

__all__ = [
    "THREE_OF_CLUBS",
    "Card",
    "CardCombination",
    "Category",
    "Difficulty",
    "Hand",
    "HandEvaluation",
    "HandType",
    "MoveContext",
    "Rank",
    "StrategyConfig",
    "Suit",
    "beats",
    "card_weight",
    "choose_move",
    "choose_rule_move",
    "create_deck",
    "deal_hands",
    "describe_hand",
    "evaluate_hand",
    "identify_hand",
    "is_bomb",
    "parse_card",
    "parse_cards",
    "shuffle_deck",
    "sort_cards",
]
