"""Table rules."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TableRules:
    """
    Blackjack table rules configuration.

    Fixed for the lifetime of a table; the round engine reads them but never
    changes them.
    """

    # Shoe configuration
    num_decks: int = 4

    # Seats at the table
    max_players: int = 9

    # Smallest accepted stake; the largest is the player's balance
    min_bet: int = 1

    # Dealer draws while below this total
    dealer_stands_on: int = 17

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.num_decks < 1 or self.num_decks > 8:
            raise ValueError("num_decks must be between 1 and 8")
        if self.max_players < 1:
            raise ValueError("max_players must be at least 1")
        if self.min_bet < 1:
            raise ValueError("min_bet must be at least 1")
        if not 2 <= self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 2 and 21")
