"""Read-only views of engine state handed to the presentation layer."""

from dataclasses import dataclass

from core.hand import Hand


@dataclass(frozen=True)
class HandSnapshot:
    """
    A hand as seen from across the table.

    Hidden cards are rendered as ``[Hidden Card]`` and left out of the value.
    The blackjack and bust flags are only set once every card is face up.
    """

    cards: tuple[str, ...]
    value: int
    is_blackjack: bool
    is_busted: bool
    is_split_hand: bool = False
    is_doubled: bool = False

    @classmethod
    def of(cls, hand: Hand) -> "HandSnapshot":
        """Take a snapshot of ``hand``."""
        fully_visible = all(card.visible for card in hand.cards)
        return cls(
            cards=tuple(str(card) for card in hand.cards),
            value=hand.visible_value,
            is_blackjack=fully_visible and hand.is_blackjack,
            is_busted=fully_visible and hand.is_busted,
            is_split_hand=hand.is_split_hand,
            is_doubled=hand.is_doubled,
        )

    def __str__(self) -> str:
        return " ".join(self.cards)


@dataclass(frozen=True)
class RoundSummary:
    """Totals reported when play stops."""

    rounds_played: int
    dealer_collected: int
