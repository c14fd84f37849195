"""Payout arithmetic for settled hands. All amounts are integer currency units."""

from dataclasses import dataclass
from enum import Enum

from core.bank import Dealer, Player
from core.hand import Hand


class SettlementKind(str, Enum):
    """How a hand was settled."""

    WIN = "win"
    LOSE = "lose"
    PUSH = "push"
    SURRENDER = "surrender"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Settlement:
    """
    The money movement for one settled hand.

    Attributes:
        kind: How the hand was settled
        bet: The stake riding on the hand
        payout: Winnings on top of the stake (0 unless won)
        returned: Total credited back to the player
        dealer_delta: Signed change to the dealer's collected money
    """

    kind: SettlementKind
    bet: int
    payout: int
    returned: int
    dealer_delta: int

    @property
    def amount(self) -> int:
        """The figure announced for the result: money returned, or money lost."""
        if self.kind in (SettlementKind.LOSE, SettlementKind.SURRENDER):
            return self.dealer_delta
        return self.returned


def blackjack_payout(bet: int) -> int:
    """Winnings on a natural at 3:2, truncated to whole units."""
    return bet * 3 // 2


def compare_scores(hand_score: int, dealer_score: int) -> SettlementKind:
    """Decide a showdown from the two scores."""
    if hand_score == dealer_score:
        return SettlementKind.PUSH
    if hand_score > dealer_score:
        return SettlementKind.WIN
    return SettlementKind.LOSE


def win(player: Player, dealer: Dealer, hand: Hand, bet: int) -> Settlement:
    """Pay the stake back plus even money, or 3:2 on a natural."""
    payout = blackjack_payout(bet) if hand.is_blackjack else bet
    player.win(payout + bet)
    dealer.pay(payout)
    return Settlement(SettlementKind.WIN, bet, payout, payout + bet, -payout)


def lose(player: Player, dealer: Dealer, hand: Hand, bet: int) -> Settlement:
    """The dealer keeps the stake."""
    dealer.collect(bet)
    return Settlement(SettlementKind.LOSE, bet, 0, 0, bet)


def push(player: Player, dealer: Dealer, hand: Hand, bet: int) -> Settlement:
    """Return the stake unchanged."""
    player.win(bet)
    return Settlement(SettlementKind.PUSH, bet, 0, bet, 0)


def surrender(player: Player, dealer: Dealer, hand: Hand, bet: int) -> Settlement:
    """Return half the stake; the dealer keeps the rest, including any odd unit."""
    refund = bet // 2
    player.win(refund)
    dealer.collect(bet - refund)
    return Settlement(SettlementKind.SURRENDER, bet, 0, refund, bet - refund)


SETTLERS = {
    SettlementKind.WIN: win,
    SettlementKind.LOSE: lose,
    SettlementKind.PUSH: push,
    SettlementKind.SURRENDER: surrender,
}


def settle(kind: SettlementKind, player: Player, dealer: Dealer, hand: Hand, bet: int) -> Settlement:
    """Apply the payout rule for ``kind`` and return what moved."""
    return SETTLERS[kind](player, dealer, hand, bet)
