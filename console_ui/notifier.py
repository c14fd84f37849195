"""Prints what happens at the table."""

import sys
from typing import Sequence, TextIO

from core.bank import Participant, Player
from core.game.actions import Action
from core.game.interfaces import NotificationSink
from core.game.settlement import Settlement, SettlementKind
from core.game.snapshots import HandSnapshot, RoundSummary


class ConsoleNotifier(NotificationSink):
    """Writes one line per event, indented under the turn it belongs to."""

    def __init__(self, stdout: TextIO = sys.stdout) -> None:
        self.stdout = stdout

    def _say(self, message: str = "") -> None:
        print(message, file=self.stdout)

    def indicate_turn(self, participant: Participant) -> None:
        self._say(f"{participant}'s turn:\n")

    def indicate_action(self, participant: Participant, action: Action) -> None:
        self._say(f"\t{participant} {action}s.")

    def indicate_hand_value(self, participant: Participant, hand: HandSnapshot) -> None:
        if hand.is_blackjack:
            self._say(f"\t{participant} has Blackjack! {hand}!")
        elif hand.is_busted:
            self._say(f"\t{participant}'s hand of {hand} busts! (value: {hand.value})")
        else:
            self._say(f"\t{participant} has {hand} (value: {hand.value})")
        self._say()

    def indicate_result(self, player: Player, hand: HandSnapshot, settlement: Settlement) -> None:
        amount = settlement.amount
        messages = {
            SettlementKind.WIN: f"\t{player} wins ${amount} on {hand}.\n",
            SettlementKind.LOSE: f"\t{player} loses ${amount} on {hand}.\n",
            SettlementKind.PUSH: f"\t{player} pushes on {hand}.\n",
            SettlementKind.SURRENDER: f"\t{player} surrenders hand {hand} and forfeits ${amount}.\n",
        }
        self._say(messages[settlement.kind])

    def round_started(self, round_number: int) -> None:
        self._say(f"Round {round_number}. Dealing cards...\n")

    def cards_dealt(self, hands: Sequence[tuple[Participant, HandSnapshot]]) -> None:
        for participant, hand in hands:
            self._say(f"\t{participant} has been dealt {hand}")
        self._say()

    def dealer_blackjack(self, hand: HandSnapshot) -> None:
        self._say(f"\tDealer has Blackjack! {hand}\n")

    def player_removed(self, player: Player) -> None:
        self._say(f"{player} has run out of money! {player} must leave.")

    def round_ended(self, summary: RoundSummary) -> None:
        self._say(f"Round finished. Dealer has collected ${summary.dealer_collected} so far.")
