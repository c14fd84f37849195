"""Game events and a recording notification sink."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable, Sequence

from core.bank import Participant, Player
from core.game.actions import Action
from core.game.interfaces import NotificationSink
from core.game.settlement import Settlement
from core.game.snapshots import HandSnapshot, RoundSummary


class EventType(Enum):
    """Types of game events."""

    # Round flow events
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()
    CARDS_DEALT = auto()

    # Turn events
    TURN_STARTED = auto()
    ACTION_TAKEN = auto()
    HAND_VALUE = auto()

    # Outcome events
    DEALER_BLACKJACK = auto()
    HAND_SETTLED = auto()

    # Table events
    PLAYER_REMOVED = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the primary communication mechanism between the core engine
    and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now, compare=False)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventRecorder(NotificationSink):
    """
    Notification sink that turns every notification into a ``GameEvent``.

    Keeps the full history and forwards events to subscribers, either for a
    specific event type or for all events.
    """

    def __init__(self) -> None:
        """Initialize the recorder."""
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Stop sending events to ``handler``."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """
        Record an event and pass it to all subscribers.

        Args:
            event: The event to emit
        """
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Create, record and return a new event."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        """Return the recorded events of one type."""
        return [event for event in self._event_history if event.event_type == event_type]

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()

    # NotificationSink

    def indicate_turn(self, participant: Participant) -> None:
        self.emit_new(EventType.TURN_STARTED, participant=participant.name)

    def indicate_action(self, participant: Participant, action: Action) -> None:
        self.emit_new(EventType.ACTION_TAKEN, participant=participant.name, action=action)

    def indicate_hand_value(self, participant: Participant, hand: HandSnapshot) -> None:
        self.emit_new(EventType.HAND_VALUE, participant=participant.name, hand=hand)

    def indicate_result(self, player: Player, hand: HandSnapshot, settlement: Settlement) -> None:
        self.emit_new(
            EventType.HAND_SETTLED,
            participant=player.name,
            hand=hand,
            settlement=settlement,
        )

    def round_started(self, round_number: int) -> None:
        self.emit_new(EventType.ROUND_STARTED, round_number=round_number)

    def cards_dealt(self, hands: Sequence[tuple[Participant, HandSnapshot]]) -> None:
        self.emit_new(
            EventType.CARDS_DEALT,
            hands=[(participant.name, snapshot) for participant, snapshot in hands],
        )

    def dealer_blackjack(self, hand: HandSnapshot) -> None:
        self.emit_new(EventType.DEALER_BLACKJACK, hand=hand)

    def player_removed(self, player: Player) -> None:
        self.emit_new(EventType.PLAYER_REMOVED, participant=player.name)

    def round_ended(self, summary: RoundSummary) -> None:
        self.emit_new(
            EventType.ROUND_ENDED,
            rounds_played=summary.rounds_played,
            dealer_collected=summary.dealer_collected,
        )
