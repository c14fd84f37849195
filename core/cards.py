"""Card, Deck, and Shoe classes."""

import logging
from enum import Enum
from random import Random
from typing import Iterable, Iterator

from core.errors import EmptyShoeError

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits, valued by their display symbol."""

    SPADES = "♠"
    HEARTS = "♡"
    CLUBS = "♣"
    DIAMONDS = "♢"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks, valued by their display label."""

    TWO = "2"
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

    def __str__(self) -> str:
        return self.value

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self is Rank.ACE:
            return 11
        if self in TEN_VALUE_RANKS:
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self is Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self in TEN_VALUE_RANKS


TEN_VALUE_RANKS: frozenset[Rank] = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})


class Card:
    """
    A playing card.

    Rank and suit are fixed at creation. Only the visibility flag changes,
    which is how the dealer's hole card is hidden and later revealed.
    """

    __slots__ = ("_rank", "_suit", "visible")

    def __init__(self, rank: Rank, suit: Suit, visible: bool = True) -> None:
        self._rank = rank
        self._suit = suit
        self.visible = visible

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self._rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self._rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self._rank.is_ten_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit == other._suit

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __str__(self) -> str:
        if not self.visible:
            return "[Hidden Card]"
        return f"{self._rank}{self._suit}"

    def __repr__(self) -> str:
        return f"Card({self._rank.name}, {self._suit.name}, visible={self.visible})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh' or '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.value: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "H": Suit.HEARTS,
            "♡": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♢": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Deck:
    """Factory for a standard 52-card deck."""

    @staticmethod
    def cards() -> list[Card]:
        """Return a fresh, ordered, face-up 52-card deck."""
        return [Card(rank, suit) for suit in Suit for rank in Rank]


class Shoe:
    """
    The dealer's pool of cards, built from one or more decks.

    Cards leave the shoe through ``deal`` and come back through
    ``return_cards``. Returning cards never shuffles; callers shuffle
    explicitly once a round's cards are back.
    """

    MIN_DECKS = 1
    MAX_DECKS = 8

    def __init__(self, num_decks: int = 4, rng: Random | None = None) -> None:
        """
        Initialize and shuffle a shoe.

        Args:
            num_decks: Number of 52-card decks in the shoe (1-8)
            rng: Random number generator for reproducible shuffles
        """
        if not self.MIN_DECKS <= num_decks <= self.MAX_DECKS:
            raise ValueError(
                f"Shoe must have between {self.MIN_DECKS} and {self.MAX_DECKS} decks"
            )

        self._num_decks = num_decks
        self._rng = rng or Random()
        self._cards: list[Card] = []
        for _ in range(num_decks):
            self._cards.extend(Deck.cards())
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the cards currently in the shoe."""
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled shoe with %d cards", len(self._cards))

    def deal(self) -> Card:
        """Remove and return the top card of the shoe."""
        if not self._cards:
            raise EmptyShoeError()
        return self._cards.pop()

    def return_cards(self, cards: Iterable[Card]) -> None:
        """Put cards back into the shoe, face up, without shuffling."""
        for card in cards:
            if not isinstance(card, Card):
                raise TypeError(f"Expected Card, got {type(card).__name__}")
            card.visible = True
            self._cards.append(card)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def total_cards(self) -> int:
        """Return the number of cards in a full shoe."""
        return self._num_decks * 52

    @property
    def num_decks(self) -> int:
        """Return the number of decks in the shoe."""
        return self._num_decks

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
