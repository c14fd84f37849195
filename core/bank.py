"""Participants at the table and the money they hold."""

from dataclasses import dataclass

from core.errors import InsufficientFundsError


@dataclass(eq=False)
class Player:
    """
    A seated player and their balance.

    Players compare by identity so they can key the per-round maps even
    when two of them share a balance.
    """

    player_id: int
    balance: int = 1000

    @property
    def name(self) -> str:
        return f"Player {self.player_id}"

    def bet(self, amount: int) -> None:
        """
        Move a stake out of the player's balance.

        Raises:
            InsufficientFundsError: If the stake exceeds the balance
        """
        if amount < 0:
            raise ValueError("Stake cannot be negative")
        if amount > self.balance:
            raise InsufficientFundsError(amount, self.balance)
        self.balance -= amount

    def win(self, amount: int) -> None:
        """Credit the player with money returned from the table."""
        if amount < 0:
            raise ValueError("Credit cannot be negative")
        self.balance += amount

    @property
    def is_broke(self) -> bool:
        return self.balance == 0

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Dealer:
    """The house. Tracks the signed total collected from the players."""

    collected_money: int = 0

    @property
    def name(self) -> str:
        return "Dealer"

    def collect(self, amount: int) -> None:
        """Take a lost stake."""
        self.collected_money += amount

    def pay(self, amount: int) -> None:
        """Pay winnings out of the house."""
        self.collected_money -= amount

    def __str__(self) -> str:
        return self.name


Participant = Player | Dealer
