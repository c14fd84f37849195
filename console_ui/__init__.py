"""Terminal front end for the blackjack engine."""

from console_ui.notifier import ConsoleNotifier
from console_ui.provider import ConsoleDecisionProvider

__all__ = [
    "ConsoleNotifier",
    "ConsoleDecisionProvider",
]
