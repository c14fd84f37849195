"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from core.cards import Card

BLACKJACK = 21

# Showdown scores that rank a natural above any 21 and a bust below any live total.
BLACKJACK_SCORE = 22
BUST_SCORE = 0


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)
    is_split_hand: bool = False
    is_doubled: bool = False

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> int:
        """
        Calculate the best hand value.

        Every ace starts at 11 and is demoted to 1, one at a time, while the
        total is over 21. The result may still exceed 21, which is a bust.
        """
        return _best_total(self.cards)

    @property
    def visible_value(self) -> int:
        """Value of the face-up cards only, as an observer at the table sees it."""
        return _best_total(card for card in self.cards if card.visible)

    @property
    def score(self) -> int:
        """
        Showdown score: 22 for blackjack, 0 for a bust, otherwise the value.
        """
        if self.is_blackjack:
            return BLACKJACK_SCORE
        if self.is_busted:
            return BUST_SCORE
        return self.value

    @property
    def is_initial_hand(self) -> bool:
        """The first two cards of a hand that did not come from a split."""
        return not self.is_split_hand and len(self.cards) == 2

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural: an ace and a ten-valued card on an initial hand."""
        if not self.is_initial_hand:
            return False
        first, second = self.cards
        return (first.is_ace and second.is_ten_value) or (second.is_ace and first.is_ten_value)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    @property
    def is_complete(self) -> bool:
        """A split child holds a single card until it is dealt its second."""
        return len(self.cards) >= 2

    @property
    def can_hit(self) -> bool:
        """Check if another card may be taken."""
        return not self.is_doubled and self.value < BLACKJACK

    @property
    def can_split(self) -> bool:
        """Check if the hand is a pair, counting any two ten-valued cards as a pair."""
        if len(self.cards) != 2:
            return False
        first, second = self.cards
        return first.rank == second.rank or (first.is_ten_value and second.is_ten_value)

    def split_hand(self) -> list["Hand"]:
        """
        Split a pair into two one-card hands.

        Returns:
            Two new split hands, each holding one of the original cards, or a
            list holding only this hand if it cannot be split
        """
        if not self.can_split:
            return [self]
        return [Hand(cards=[card], is_split_hand=True) for card in self.cards]

    def double_down(self) -> None:
        """Mark the hand as doubled; it can take no further hits."""
        self.is_doubled = True

    def flip_hole_card(self) -> None:
        """Turn the second card face up, if there is one."""
        if len(self.cards) > 1:
            self.cards[1].visible = True

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def _best_total(cards) -> int:
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value

    # Demote aces from 11 to 1 as needed
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total
