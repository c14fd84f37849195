"""Round engine, game loop and the capabilities they call out to."""

from core.game.actions import Action, legal_actions
from core.game.engine import RoundEngine, RoundContext, SettledHand
from core.game.events import EventRecorder, EventType, GameEvent
from core.game.interfaces import (
    AlwaysContinue,
    ContinuationPolicy,
    DecisionProvider,
    NotificationSink,
)
from core.game.loop import BlackjackGame
from core.game.settlement import Settlement, SettlementKind
from core.game.snapshots import HandSnapshot, RoundSummary
from core.game.state import RoundState

__all__ = [
    "Action",
    "legal_actions",
    "RoundEngine",
    "RoundContext",
    "SettledHand",
    "EventRecorder",
    "EventType",
    "GameEvent",
    "AlwaysContinue",
    "ContinuationPolicy",
    "DecisionProvider",
    "NotificationSink",
    "BlackjackGame",
    "Settlement",
    "SettlementKind",
    "HandSnapshot",
    "RoundSummary",
    "RoundState",
]
