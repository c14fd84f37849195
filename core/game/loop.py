"""Repeats rounds until the table empties or the continuation policy says stop."""

import logging
from typing import Iterable

from core.bank import Player
from core.game.engine import RoundEngine
from core.game.interfaces import ContinuationPolicy
from core.game.snapshots import RoundSummary

logger = logging.getLogger(__name__)


class BlackjackGame:
    """A table of players and the engine that deals to them."""

    def __init__(
        self,
        players: Iterable[Player],
        engine: RoundEngine,
        policy: ContinuationPolicy,
    ) -> None:
        self.players = list(players)
        self.engine = engine
        self.policy = policy
        self.rounds_played = 0

    def run(self) -> RoundSummary:
        """Play rounds until told to stop and report the totals."""
        while self.players:
            self.engine.play_round(self.players)
            self.rounds_played += 1
            if not self._keep_playing():
                break
        return self.summary

    def _keep_playing(self) -> bool:
        for player in [p for p in self.players if p.is_broke]:
            self.boot_player(player)

        if not self.players:
            logger.info("No players left at the table")
            return False

        return self.policy.keep_playing(list(self.players), self.rounds_played)

    def boot_player(self, player: Player) -> None:
        """Remove a player from the table."""
        self.players.remove(player)
        logger.info("%s leaves the table", player)
        self.engine.notify(self.engine.notifier.player_removed, player)

    @property
    def summary(self) -> RoundSummary:
        return RoundSummary(self.rounds_played, self.engine.dealer.collected_money)
