"""Card model for Big Two: ranks, suits, weights and the deck."""

import random
from collections.abc import Iterable, Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

CARDS_PER_DECK = 52


class Suit(str, Enum):
    """Card suits, listed from lowest to highest."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"


class Rank(str, Enum):
    """Card ranks, listed from lowest (3) to highest (2)."""

    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"
    TWO = "2"


# Ordinal ranking from 0-12 where 2 = 12 (highest)
RANK_ORDER: dict[Rank, int] = {rank: i for i, rank in enumerate(Rank)}
SUIT_ORDER: dict[Suit, int] = {suit: i for i, suit in enumerate(Suit)}

SUIT_SYMBOLS = {Suit.CLUBS: "♣", Suit.DIAMONDS: "♦", Suit.HEARTS: "♥", Suit.SPADES: "♠"}
SUIT_LETTERS = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES}


class Card(BaseModel):
    """A playing card. Identity is the (suit, rank) pair."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {"suit": "clubs", "rank": "3"},
                {"suit": "spades", "rank": "2"},
            ]
        },
    )

    suit: Suit = Field(..., description="The suit of the card")
    rank: Rank = Field(..., description="The rank of the card")

    @property
    def weight(self) -> int:
        return card_weight(self)

    @property
    def id(self) -> str:
        return f"{self.rank.value}-{self.suit.value}"

    def __str__(self) -> str:
        return card_name(self)


THREE_OF_CLUBS = Card(suit=Suit.CLUBS, rank=Rank.THREE)


# Card utils


def card_weight(card: Card) -> int:
    """Unique 0..123 ordering key: rank-major, suit-minor."""
    return RANK_ORDER[card.rank] * 10 + SUIT_ORDER[card.suit]


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    return sorted(cards, key=card_weight)


def card_name(card: Card) -> str:
    return f"{card.rank.value}{SUIT_SYMBOLS[card.suit]}"


def parse_card(text: str) -> Card:
    """
    Parse short card notation such as "3C", "10S" or "TH".

    Raises:
        ValueError: If the text is not a rank followed by one of C, D, H, S
    """
    text = text.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Cannot parse card {text!r}")
    rank_text, suit_text = text[:-1], text[-1]
    if rank_text == "T":
        rank_text = "10"
    if suit_text not in SUIT_LETTERS:
        raise ValueError(f"Unknown suit in card {text!r}")
    try:
        rank = Rank(rank_text)
    except ValueError as e:
        raise ValueError(f"Unknown rank in card {text!r}") from e
    return Card(suit=SUIT_LETTERS[suit_text], rank=rank)


def parse_cards(text: str) -> list[Card]:
    """Parse a whitespace separated list of cards, e.g. "3C 4D 5H"."""
    return [parse_card(part) for part in text.split()]


# Deck


def create_deck() -> list[Card]:
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def shuffle_deck(deck: Sequence[Card]) -> list[Card]:
    """Return a uniformly permuted copy of the deck (Fisher-Yates via random.shuffle)."""
    shuffled = list(deck)
    random.shuffle(shuffled)
    return shuffled


def deal_hands(deck: Sequence[Card], n_players: int = 4, cards_per_player: int | None = None) -> list[list[Card]]:
    """
    Deal consecutive slices of the deck, one per player, each sorted by weight.

    Raises:
        ValueError: If the deck cannot supply cards_per_player cards to every player
    """
    if n_players <= 0:
        raise ValueError("n_players must be positive")
    if cards_per_player is None:
        cards_per_player = len(deck) // n_players
    if cards_per_player <= 0 or cards_per_player * n_players > len(deck):
        raise ValueError(f"Cannot deal {cards_per_player} cards to {n_players} players from {len(deck)} cards")
    return [sort_cards(deck[i * cards_per_player : (i + 1) * cards_per_player]) for i in range(n_players)]
