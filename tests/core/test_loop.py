"""Tests for the game loop and continuation policies."""

from random import Random

import pytest

from core.bank import Player
from core.cards import Shoe
from core.errors import InvalidBetError
from core.game import AlwaysContinue, BlackjackGame, EventType, RoundEngine


class TestBlackjackGame:
    """Tests for running rounds back to back."""

    def test_runs_until_policy_stops(self, scripted, recorder):
        """Test the loop plays the number of rounds the policy allows."""
        players = [Player(1, 10_000), Player(2, 10_000)]
        engine = RoundEngine(Shoe(num_decks=2, rng=Random(4)), scripted(bets=10, actions=["stay"] * 50), recorder)
        game = BlackjackGame(players, engine, AlwaysContinue(max_rounds=3))

        summary = game.run()

        assert summary.rounds_played == 3
        assert summary.dealer_collected == engine.dealer.collected_money
        assert len(recorder.of_type(EventType.ROUND_ENDED)) == 3

    def test_broke_player_removed(self, make_engine, scripted, recorder):
        """Test a player with nothing left leaves and an empty table ends play."""
        player = Player(1, 100)
        engine = make_engine(["10S", "10C", "6H", "7D"], scripted(bets=100, actions=["stay"]))
        game = BlackjackGame([player], engine, AlwaysContinue())

        summary = game.run()

        assert player.balance == 0
        assert game.players == []
        assert summary.rounds_played == 1
        assert summary.dealer_collected == 100
        removed = recorder.of_type(EventType.PLAYER_REMOVED)
        assert [e.data["participant"] for e in removed] == ["Player 1"]

    def test_policy_sees_remaining_players(self, scripted, recorder):
        """Test the continuation policy is asked with the current table."""
        seen = []

        class RecordingPolicy(AlwaysContinue):
            def keep_playing(self, players, rounds_played):
                seen.append((len(players), rounds_played))
                return rounds_played < 2

        players = [Player(1, 5000)]
        engine = RoundEngine(Shoe(num_decks=1, rng=Random(9)), scripted(bets=5, actions=["stay"] * 10), recorder)
        BlackjackGame(players, engine, RecordingPolicy()).run()

        assert seen == [(1, 1), (1, 2)]

    def test_always_continue_without_limit(self):
        """Test the default policy never stops on its own."""
        assert AlwaysContinue().keep_playing([Player(1)], 10_000)

    def test_aborted_round_not_counted(self, make_engine, scripted):
        """Test a round that rolls back does not count towards the summary."""
        player = Player(1, 1000)
        engine = make_engine([], scripted(bets=[0]))
        game = BlackjackGame([player], engine, AlwaysContinue())

        with pytest.raises(InvalidBetError):
            game.run()

        assert game.summary.rounds_played == 0
        assert player.balance == 1000
