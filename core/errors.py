"""Exceptions raised by the blackjack rules engine."""


class BlackjackError(Exception):
    """Base class for every error raised by the engine."""


class EmptyShoeError(BlackjackError, IndexError):
    """A card was requested from a shoe with no cards left."""

    def __init__(self, message: str = "Cannot deal from an empty shoe") -> None:
        super().__init__(message)


class InsufficientFundsError(BlackjackError, ValueError):
    """A stake was requested that exceeds the player's balance."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Stake of ${required} exceeds available balance of ${available}")


class InvalidBetError(BlackjackError, ValueError):
    """A decision provider returned a bet outside the allowed range."""

    def __init__(self, amount: object, minimum: int, maximum: int) -> None:
        self.amount = amount
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Bet {amount!r} must be an integer between {minimum} and {maximum}")


class InvalidActionError(BlackjackError, ValueError):
    """A decision provider chose an action that was not offered."""

    def __init__(self, action: object, legal_actions: list) -> None:
        self.action = action
        self.legal_actions = legal_actions
        offered = ", ".join(str(a) for a in legal_actions)
        super().__init__(f"Action {action!r} is not one of the legal actions ({offered})")
