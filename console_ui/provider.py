"""Reads bets and actions from the terminal."""

import sys
from typing import Sequence, TextIO

from core.bank import Player
from core.game.actions import Action
from core.game.interfaces import DecisionProvider
from core.game.snapshots import HandSnapshot


def read_line(stdin: TextIO) -> str:
    """Read one line without its newline, raising EOFError when input ends."""
    line = stdin.readline()
    if not line:
        raise EOFError("Input closed")
    return line.rstrip("\r\n")


def parse_int(text: str) -> int | None:
    """Parse a whole number, or return None if ``text`` is not one."""
    try:
        return int(text.strip())
    except ValueError:
        return None


class ConsoleDecisionProvider(DecisionProvider):
    """Asks each player for their choices, re-prompting until the answer is valid."""

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout, min_bet: int = 1) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.min_bet = min_bet

    def _say(self, message: str = "") -> None:
        print(message, file=self.stdout)

    def get_bet(self, player: Player) -> int:
        self._say(f"{player}, you have ${player.balance}. What is your bet?")
        bet = parse_int(read_line(self.stdin))
        while bet is None or bet < self.min_bet or bet > player.balance:
            if bet is None or bet < self.min_bet:
                self._say(f"You must bet at least ${self.min_bet}")
            else:
                self._say(f"You only have ${player.balance} to bet")
            bet = parse_int(read_line(self.stdin))

        self._say(f"{player} bets ${bet}\n")
        return bet

    def get_decision(
        self,
        player: Player,
        hand: HandSnapshot,
        actions: Sequence[Action],
    ) -> Action:
        options = ", ".join(str(action) for action in actions)
        by_name = {action.value: action for action in actions}

        self._say(f"Enter one of the following actions: ({options})")
        choice = read_line(self.stdin).strip().lower()
        while choice not in by_name:
            self._say(f"Invalid input. Please enter an action ({options})")
            choice = read_line(self.stdin).strip().lower()

        self._say()
        return by_name[choice]
