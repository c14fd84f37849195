"""Core blackjack rules engine - 100% UI-agnostic."""

from core.bank import Dealer, Player
from core.cards import Card, Deck, Shoe, Rank, Suit, TEN_VALUE_RANKS
from core.errors import (
    BlackjackError,
    EmptyShoeError,
    InsufficientFundsError,
    InvalidActionError,
    InvalidBetError,
)
from core.hand import Hand
from core.rules import TableRules

__all__ = [
    "Card",
    "Deck",
    "Shoe",
    "Rank",
    "Suit",
    "TEN_VALUE_RANKS",
    "Hand",
    "Player",
    "Dealer",
    "TableRules",
    "BlackjackError",
    "EmptyShoeError",
    "InsufficientFundsError",
    "InvalidActionError",
    "InvalidBetError",
]
