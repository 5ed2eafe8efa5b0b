from collections.abc import Sequence

from dalaoer.engine.cards import THREE_OF_CLUBS, Card, sort_cards
from dalaoer.engine.context import MoveContext
from dalaoer.engine.hands import HandType, beats, identify_hand


def choose_rule_move(hand: Sequence[Card], context: MoveContext) -> list[Card] | None:
    """
    Minimal rule-following play, the weakest bot tier.

    Opens with the 3 of Clubs, leads the weakest card, and only ever follows a
    Single with the smallest single that beats it. Returns None to pass.
    """
    if not hand:
        return None
    cards = sort_cards(hand)

    if context.is_first_turn:
        return [THREE_OF_CLUBS] if THREE_OF_CLUBS in cards else [cards[0]]

    reference = context.last_played_hand
    if reference is None:
        return [cards[0]]
    if reference.type != HandType.SINGLE:
        return None

    for c in cards:
        single = identify_hand([c])
        if single is not None and beats(single, reference):
            return [c]
    return None
