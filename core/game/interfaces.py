"""Capabilities the engine calls out to: decisions, notifications, continuation."""

from abc import ABC, abstractmethod
from typing import Sequence

from core.bank import Participant, Player
from core.game.actions import Action
from core.game.settlement import Settlement
from core.game.snapshots import HandSnapshot, RoundSummary


class DecisionProvider(ABC):
    """
    Supplies every choice a player makes.

    The engine trusts the contract: ``get_bet`` returns an integer between the
    table minimum and the player's balance, and ``get_decision`` returns one
    of the offered actions. Anything else aborts the round.
    """

    @abstractmethod
    def get_bet(self, player: Player) -> int:
        """Return the player's stake for the coming round."""
        ...

    @abstractmethod
    def get_decision(
        self,
        player: Player,
        hand: HandSnapshot,
        actions: Sequence[Action],
    ) -> Action:
        """Pick one of ``actions`` (never empty) for the given hand."""
        ...


class NotificationSink(ABC):
    """
    Observer of everything that happens during a round.

    Purely observational. The engine logs and ignores any exception raised
    here, so a failing sink cannot change the outcome of a round.
    """

    @abstractmethod
    def indicate_turn(self, participant: Participant) -> None:
        """A player's or the dealer's turn begins."""
        ...

    @abstractmethod
    def indicate_action(self, participant: Participant, action: Action) -> None:
        """A participant took ``action``."""
        ...

    @abstractmethod
    def indicate_hand_value(self, participant: Participant, hand: HandSnapshot) -> None:
        """The current state of one of the participant's hands."""
        ...

    @abstractmethod
    def indicate_result(self, player: Player, hand: HandSnapshot, settlement: Settlement) -> None:
        """A hand was settled."""
        ...

    def round_started(self, round_number: int) -> None:
        """A new round begins."""

    def cards_dealt(self, hands: Sequence[tuple[Participant, HandSnapshot]]) -> None:
        """The opening deal is complete."""

    def dealer_blackjack(self, hand: HandSnapshot) -> None:
        """The dealer has a natural; players will not act this round."""

    def player_removed(self, player: Player) -> None:
        """A player left the table between rounds."""

    def round_ended(self, summary: RoundSummary) -> None:
        """A round has been settled and cleaned up."""


class ContinuationPolicy(ABC):
    """Decides, between rounds, whether to keep playing."""

    @abstractmethod
    def keep_playing(self, players: Sequence[Player], rounds_played: int) -> bool:
        """Return True to deal another round to ``players``."""
        ...


class AlwaysContinue(ContinuationPolicy):
    """Keep playing until the table is empty or ``max_rounds`` is reached."""

    def __init__(self, max_rounds: int | None = None) -> None:
        self.max_rounds = max_rounds

    def keep_playing(self, players: Sequence[Player], rounds_played: int) -> bool:
        if self.max_rounds is None:
            return True
        return rounds_played < self.max_rounds
