"""Tests for settlement payouts and the player/dealer ledgers."""

import pytest

from core.bank import Player
from core.errors import InsufficientFundsError
from core.game.settlement import (
    Settlement,
    SettlementKind,
    blackjack_payout,
    compare_scores,
    settle,
)


@pytest.fixture
def staked_player():
    """A player who has already staked 100 of 1000."""
    player = Player(1, 1000)
    player.bet(100)
    return player


class TestLedger:
    """Tests for Player and Dealer money handling."""

    def test_bet_debits_balance(self, player):
        """Test placing a stake."""
        player.bet(250)
        assert player.balance == 750

    def test_bet_cannot_exceed_balance(self, player):
        """Test the balance never goes negative."""
        with pytest.raises(InsufficientFundsError):
            player.bet(1001)
        assert player.balance == 1000

    def test_win_credits_balance(self, player):
        """Test crediting winnings."""
        player.win(50)
        assert player.balance == 1050

    def test_broke(self):
        """Test a zero balance is broke."""
        assert Player(3, 0).is_broke
        assert not Player(3, 1).is_broke

    def test_player_name(self, player):
        """Test players are named by seat."""
        assert str(player) == "Player 1"

    def test_players_compare_by_identity(self):
        """Test two players with the same seat and balance are distinct."""
        assert Player(1, 100) != Player(1, 100)

    def test_dealer_collects_and_pays(self, dealer):
        """Test the dealer's signed accumulator."""
        dealer.collect(100)
        dealer.pay(150)
        assert dealer.collected_money == -50
        assert str(dealer) == "Dealer"


class TestSettlement:
    """Tests for the payout rules."""

    def test_blackjack_win(self, staked_player, dealer, blackjack_hand):
        """Test a natural pays 3:2."""
        result = settle(SettlementKind.WIN, staked_player, dealer, blackjack_hand, 100)
        assert result.payout == 150
        assert result.returned == 250
        assert staked_player.balance == 1150
        assert dealer.collected_money == -150

    def test_even_money_win(self, staked_player, dealer, hand_of):
        """Test an ordinary win pays 1:1."""
        result = settle(SettlementKind.WIN, staked_player, dealer, hand_of("10S", "9H"), 100)
        assert result == Settlement(SettlementKind.WIN, 100, 100, 200, -100)
        assert staked_player.balance == 1100
        assert dealer.collected_money == -100

    def test_lose(self, staked_player, dealer, hand_of):
        """Test a loss moves the stake to the dealer."""
        result = settle(SettlementKind.LOSE, staked_player, dealer, hand_of("10S", "6H"), 100)
        assert result.returned == 0
        assert result.amount == 100
        assert staked_player.balance == 900
        assert dealer.collected_money == 100

    def test_push(self, staked_player, dealer, hand_of):
        """Test a push returns the stake."""
        result = settle(SettlementKind.PUSH, staked_player, dealer, hand_of("10S", "8H"), 100)
        assert result.returned == 100
        assert staked_player.balance == 1000
        assert dealer.collected_money == 0

    def test_surrender(self, staked_player, dealer, hand_of):
        """Test surrender returns half and the dealer keeps half."""
        result = settle(SettlementKind.SURRENDER, staked_player, dealer, hand_of("10S", "6H"), 100)
        assert result.returned == 50
        assert result.amount == 50
        assert staked_player.balance == 950
        assert dealer.collected_money == 50

    def test_odd_surrender_remainder_to_dealer(self, dealer, hand_of):
        """Test the odd unit of a surrendered stake goes to the dealer."""
        player = Player(1, 101)
        player.bet(101)
        result = settle(SettlementKind.SURRENDER, player, dealer, hand_of("10S", "6H"), 101)
        assert result.returned == 50
        assert dealer.collected_money == 51

    def test_odd_blackjack_payout_truncates(self):
        """Test 3:2 on an odd stake rounds down to whole units."""
        assert blackjack_payout(5) == 7
        assert isinstance(blackjack_payout(5), int)

    @pytest.mark.parametrize(
        "hand_score, dealer_score, expected",
        [
            (22, 21, SettlementKind.WIN),
            (22, 22, SettlementKind.PUSH),
            (18, 17, SettlementKind.WIN),
            (17, 17, SettlementKind.PUSH),
            (0, 20, SettlementKind.LOSE),
            (21, 22, SettlementKind.LOSE),
            (12, 0, SettlementKind.WIN),
        ],
    )
    def test_compare_scores(self, hand_score, dealer_score, expected):
        """Test showdown comparison of scores."""
        assert compare_scores(hand_score, dealer_score) == expected
