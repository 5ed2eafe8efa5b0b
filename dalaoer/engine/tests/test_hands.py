import itertools

import pytest

from dalaoer.engine.cards import card_weight, create_deck, parse_cards
from dalaoer.engine.hands import (
    HandType,
    beats,
    describe_hand,
    identify_hand,
    is_bomb,
)


def hand_of(text: str):
    hand = identify_hand(parse_cards(text))
    assert hand is not None, text
    return hand


class TestIdentifySinglesAndPairs:
    """Tests for one and two card hands"""

    def test_every_single(self):
        for card in create_deck():
            hand = identify_hand([card])
            assert hand is not None
            assert hand.type == HandType.SINGLE
            assert hand.strength == card_weight(card)

    def test_every_two_card_group(self):
        for a, b in itertools.combinations(create_deck(), 2):
            hand = identify_hand([a, b])
            if a.rank == b.rank:
                assert hand is not None
                assert hand.type == HandType.PAIR
                assert hand.strength == max(card_weight(a), card_weight(b))
            else:
                assert hand is None

    def test_pair_strength_uses_higher_suit(self):
        assert hand_of("7S 7C").strength == 43
        assert hand_of("7D 7H").strength == 42

    def test_cards_are_sorted(self):
        hand = hand_of("7S 7C")
        assert hand.cards == tuple(parse_cards("7C 7S"))


class TestIdentifyStraights:
    """Tests for straight and straight flush classification"""

    def test_lowest_standard_straight_flush(self):
        hand = hand_of("3C 4C 5C 6C 7C")
        assert hand.type == HandType.STRAIGHT_FLUSH
        assert hand.strength == 20

    def test_wrap_23456_beats_broadway(self):
        wrap = hand_of("2C 3C 4C 5C 6C")
        broadway = hand_of("10S JS QS KS AS")
        assert wrap.type == HandType.STRAIGHT_FLUSH
        assert broadway.type == HandType.STRAIGHT_FLUSH
        assert wrap.strength == 100
        assert broadway.strength == 93
        assert wrap.strength > broadway.strength

    def test_a2345_is_weakest(self):
        hand = hand_of("AS 2S 3C 4D 5H")
        assert hand.type == HandType.STRAIGHT
        # Ranked by the 5
        assert hand.strength == 12
        assert hand.strength < hand_of("3C 4D 5H 6S 7C").strength

    def test_23456_ranked_by_six(self):
        assert hand_of("2S 3S 4S 5S 6D").strength == 101
        assert hand_of("2S 3S 4S 5S 6H").strength == 102

    @pytest.mark.parametrize(
        "text,strength",
        [
            ("3C 4D 5H 6S 7C", 20),
            ("3C 4D 5H 6S 7S", 23),
            ("9C 10D JH QS KH", 82),
            ("10C JD QH KS AD", 91),
        ],
    )
    def test_standard_straight_strength(self, text, strength):
        hand = hand_of(text)
        assert hand.type == HandType.STRAIGHT
        assert hand.strength == strength

    def test_straight_input_order_does_not_matter(self):
        assert hand_of("7C 3C 6S 5H 4D") == hand_of("3C 4D 5H 6S 7C")

    def test_run_through_two_is_not_a_straight(self):
        assert identify_hand(parse_cards("JC QD KH AS 2C")) is None
        assert identify_hand(parse_cards("QC KD AH 2S 3C")) is None

    def test_flush_is_not_a_hand(self):
        assert identify_hand(parse_cards("3C 5C 7C 9C JC")) is None


class TestIdentifyGroups:
    """Tests for four-kind, full house and other five card groups"""

    def test_four_of_a_kind(self):
        hand = hand_of("9C 9D 9H 9S 3C")
        assert hand.type == HandType.FOUR_OF_A_KIND
        assert hand.strength == 6

    def test_four_of_a_kind_with_high_kicker(self):
        hand = hand_of("3C 3D 3H 3S 2S")
        assert hand.type == HandType.FOUR_OF_A_KIND
        assert hand.strength == 0

    def test_full_house_triple_high(self):
        hand = hand_of("KC KD KH 4S 4C")
        assert hand.type == HandType.FULL_HOUSE
        assert hand.strength == 10

    def test_full_house_triple_low(self):
        hand = hand_of("4C 4D 4H KS KC")
        assert hand.type == HandType.FULL_HOUSE
        assert hand.strength == 1

    def test_two_pair_is_invalid(self):
        assert identify_hand(parse_cards("3C 3D 5H 5S 7C")) is None

    def test_triple_is_invalid(self):
        assert identify_hand(parse_cards("8C 8D 8H")) is None


class TestIdentifyDragon:
    """Tests for thirteen card hands"""

    def test_dragon(self):
        hand = hand_of("3C 4D 5H 6S 7C 8D 9H 10S JC QD KH AS 2H")
        assert hand.type == HandType.DRAGON
        assert hand.strength == 122

    def test_thirteen_with_repeated_rank(self):
        assert identify_hand(parse_cards("3C 3D 5H 6S 7C 8D 9H 10S JC QD KH AS 2H")) is None


class TestIdentifyMalformed:
    """Invalid sizes and malformed groups are simply not hands"""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "3C 3D 3H 3S",
            "3C 4C 5C 6C 7C 8C",
            "3C 4D 5H 6S 7C 8D 9H 10S JC QD KH AS",
        ],
    )
    def test_unsupported_sizes(self, text):
        assert identify_hand(parse_cards(text)) is None

    def test_duplicate_card(self):
        assert identify_hand(parse_cards("3C 3C")) is None
        assert identify_hand(parse_cards("3C 3C 3D 3H 3S")) is None


class TestBeats:
    """Tests for the comparison relation between hands"""

    def test_bomb_beats_any_non_bomb(self):
        quad = hand_of("3C 3D 3H 3S 4C")
        assert is_bomb(quad)
        assert beats(quad, hand_of("10S JS QS KS AD"))
        assert beats(quad, hand_of("2S"))
        assert beats(quad, hand_of("2H 2S"))
        assert beats(quad, hand_of("AC AD AH KS KC"))
        assert beats(quad, hand_of("3S 4D 5H 6S 7C 8D 9H 10S JC QD KH AS 2H"))

    def test_non_bomb_requires_same_type(self):
        straight = hand_of("10C JD QH KS AD")
        full_house = hand_of("4C 4D 4H 5S 5C")
        assert not beats(straight, full_house)
        assert not beats(full_house, straight)

    def test_non_bomb_requires_same_size(self):
        assert not beats(hand_of("2H 2S"), hand_of("3C"))
        assert not beats(hand_of("2S"), hand_of("3C 3D"))

    def test_non_bomb_never_beats_bomb(self):
        assert not beats(hand_of("2C 3D 4H 5S 6C"), hand_of("3C 3D 3H 3S 4C"))

    def test_straight_flush_beats_four_of_a_kind(self):
        straight_flush = hand_of("AC 2C 3C 4C 5C")
        quad = hand_of("2C 2D 2H 2S AD")
        assert straight_flush.strength < quad.strength
        assert beats(straight_flush, quad)
        assert not beats(quad, straight_flush)

    def test_bomb_vs_bomb_same_type(self):
        low = hand_of("5C 5D 5H 5S 3C")
        high = hand_of("KC KD KH KS 3D")
        assert beats(high, low)
        assert not beats(low, high)

    def test_same_type_higher_strength_wins(self):
        assert beats(hand_of("7S 7C"), hand_of("7D 7H"))
        assert beats(hand_of("2C"), hand_of("AS"))
        assert beats(hand_of("2C 3D 4H 5S 6C"), hand_of("10C JD QH KS AS"))
        assert not beats(hand_of("AS 2S 3C 4D 5H"), hand_of("3C 4D 5H 6S 7C"))

    def test_equal_strength_does_not_beat(self):
        # Full houses only compare the triple rank
        a = hand_of("KC KD KH 4C 4D")
        b = hand_of("KC KD KS 5C 5D")
        assert a.strength == b.strength
        assert not beats(a, b)
        assert not beats(b, a)


class TestDescribeHand:
    """Tests for human readable hand labels"""

    @pytest.mark.parametrize(
        "text,label",
        [
            ("QH", "Q"),
            ("7C 7S", "Pair of 7"),
            ("2C 3D 4H 5S 6C", "Straight 2-3-4-5-6"),
            ("AS 2S 3C 4D 5H", "Straight A-2-3-4-5"),
            ("3C 4C 5C 6C 7C", "Straight Flush 3-4-5-6-7"),
            ("4C 4D 4H KS KC", "Full House of 4"),
            ("9C 9D 9H 9S 3C", "Four of a Kind 9"),
            ("3C 4D 5H 6S 7C 8D 9H 10S JC QD KH AS 2H", "Dragon"),
        ],
    )
    def test_labels(self, text, label):
        assert describe_hand(hand_of(text)) == label

    def test_no_hand(self):
        assert describe_hand(None) == ""
