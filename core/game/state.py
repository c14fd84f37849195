"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: IDLE → COLLECTING_BETS → DEALING → PLAYER_TURNS → DEALER_TURN →
    SHOWDOWN → SETTLING → CLEANUP → ROUND_COMPLETE
    """

    # No round in progress
    IDLE = auto()

    # Asking every player for a stake
    COLLECTING_BETS = auto()

    # Two cards each, dealer's second face down
    DEALING = auto()

    # Players act on each of their hands in table order
    PLAYER_TURNS = auto()

    # Dealer reveals the hole card and draws to 17
    DEALER_TURN = auto()

    # Every live hand is compared against the dealer
    SHOWDOWN = auto()

    # Outcomes are paid out
    SETTLING = auto()

    # Cards go back to the shoe
    CLEANUP = auto()

    # Round finished, ready for the next
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.IDLE: [RoundState.COLLECTING_BETS],
    RoundState.COLLECTING_BETS: [RoundState.DEALING, RoundState.IDLE],
    RoundState.DEALING: [RoundState.PLAYER_TURNS, RoundState.SHOWDOWN, RoundState.IDLE],  # SHOWDOWN if dealer BJ
    RoundState.PLAYER_TURNS: [RoundState.DEALER_TURN, RoundState.IDLE],
    RoundState.DEALER_TURN: [RoundState.SHOWDOWN, RoundState.IDLE],
    RoundState.SHOWDOWN: [RoundState.SETTLING, RoundState.IDLE],
    RoundState.SETTLING: [RoundState.CLEANUP, RoundState.IDLE],
    RoundState.CLEANUP: [RoundState.ROUND_COMPLETE, RoundState.IDLE],
    RoundState.ROUND_COMPLETE: [RoundState.COLLECTING_BETS, RoundState.IDLE],
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
