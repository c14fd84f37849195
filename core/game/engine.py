"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from transitions import Machine

from core.bank import Dealer, Participant, Player
from core.cards import Card, Shoe
from core.errors import BlackjackError, InvalidActionError, InvalidBetError
from core.hand import Hand
from core.rules import TableRules
from core.game.actions import Action, legal_actions
from core.game.interfaces import DecisionProvider, NotificationSink
from core.game.settlement import Settlement, SettlementKind, compare_scores, settle
from core.game.snapshots import HandSnapshot, RoundSummary
from core.game.state import RoundState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandOutcome:
    """A showdown verdict waiting to be paid."""

    player: Player
    hand: Hand
    kind: SettlementKind
    bet: int


@dataclass(frozen=True)
class SettledHand:
    """A hand after its money has moved."""

    player: Player
    hand: HandSnapshot
    settlement: Settlement


@dataclass
class RoundContext:
    """
    Everything that lives for exactly one round.

    ``hands`` holds each player's resolved hands in left-to-right order and
    ``bets`` each player's total committed stake across those hands.
    ``dealt`` is every card that left the shoe this round, which is what
    cleanup puts back.
    """

    players: list[Player]
    dealer_hand: Hand = field(default_factory=Hand)
    hands: dict[Player, list[Hand]] = field(default_factory=dict)
    bets: dict[Player, int] = field(default_factory=dict)
    dealt: list[Card] = field(default_factory=list)
    remainders: dict[Player, int] = field(default_factory=dict)
    settled: list[SettledHand] = field(default_factory=list)


class RoundEngine:
    """
    Plays one round of multi-player blackjack at a time.

    This is the core game logic, completely UI-agnostic. Choices come from
    the injected DecisionProvider and everything that happens is reported to
    the injected NotificationSink.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "open_betting", "source": ["idle", "round_complete"], "dest": "collecting_bets"},
        {"trigger": "start_deal", "source": "collecting_bets", "dest": "dealing"},
        {"trigger": "start_player_turns", "source": "dealing", "dest": "player_turns"},
        {"trigger": "dealer_has_blackjack", "source": "dealing", "dest": "showdown"},
        {"trigger": "start_dealer_turn", "source": "player_turns", "dest": "dealer_turn"},
        {"trigger": "start_showdown", "source": "dealer_turn", "dest": "showdown"},
        {"trigger": "start_settling", "source": "showdown", "dest": "settling"},
        {"trigger": "start_cleanup", "source": "settling", "dest": "cleanup"},
        {"trigger": "finish_round", "source": "cleanup", "dest": "round_complete"},
        {"trigger": "abort", "source": "*", "dest": "idle"},
    ]

    def __init__(
        self,
        shoe: Shoe,
        decisions: DecisionProvider,
        notifier: NotificationSink,
        dealer: Dealer | None = None,
        rules: TableRules | None = None,
    ) -> None:
        """
        Initialize a round engine.

        Args:
            shoe: The shoe to deal from; owned by the engine while a round runs
            decisions: Source of bets and action choices
            notifier: Observer of turns, actions, hands and results
            dealer: The house ledger (a fresh one if not provided)
            rules: Table rules (uses defaults if not provided)
        """
        self.shoe = shoe
        self.decisions = decisions
        self.notifier = notifier
        self.dealer = dealer or Dealer()
        self.rules = rules or TableRules(num_decks=shoe.num_decks)
        self.rounds_completed = 0

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def play_round(self, players: Sequence[Player]) -> list[SettledHand]:
        """
        Play one full round with ``players`` in table order.

        Returns:
            Every settled hand, surrenders included, in settlement order

        Raises:
            BlackjackError: If the round cannot be completed. The round is
                rolled back first: unsettled stakes are refunded and every
                dealt card is returned to the shoe.
        """
        if not players:
            raise ValueError("Cannot play a round without players")

        context = RoundContext(players=list(players))
        self.open_betting()
        self.notify(self.notifier.round_started, self.rounds_completed + 1)
        logger.info("Round %d started with %d players", self.rounds_completed + 1, len(players))

        try:
            self._collect_bets(context)

            self.start_deal()
            self._deal(context)

            if context.dealer_hand.is_blackjack:
                self.dealer_has_blackjack()
                self._handle_dealer_blackjack(context)
            else:
                self.start_player_turns()
                for player in context.players:
                    self._run_player_turn(context, player)

                self.start_dealer_turn()
                self._run_dealer_turn(context)
                self.start_showdown()

            outcomes = self._showdown(context)

            self.start_settling()
            self._settle(context, outcomes)

            self.start_cleanup()
            self._cleanup(context)
        except BlackjackError:
            logger.exception("Round %d aborted", self.rounds_completed + 1)
            self._rollback(context)
            raise
        except BaseException:
            # Interrupts raised from a prompt are rolled back too
            logger.warning("Round %d interrupted, rolling back", self.rounds_completed + 1)
            self._rollback(context)
            raise

        self.rounds_completed += 1
        self.finish_round()
        logger.info(
            "Round %d complete, dealer has collected $%d",
            self.rounds_completed,
            self.dealer.collected_money,
        )
        self.notify(self.notifier.round_ended, RoundSummary(self.rounds_completed, self.dealer.collected_money))
        return context.settled

    # Betting and dealing

    def _collect_bets(self, context: RoundContext) -> None:
        """Ask each player for a stake and take it from their balance."""
        for player in context.players:
            amount = self.decisions.get_bet(player)
            if (
                not isinstance(amount, int)
                or isinstance(amount, bool)
                or not self.rules.min_bet <= amount <= player.balance
            ):
                raise InvalidBetError(amount, self.rules.min_bet, player.balance)

            player.bet(amount)
            context.bets[player] = amount
            logger.debug("%s bets $%d", player, amount)

    def _deal(self, context: RoundContext) -> None:
        """Deal two cards to each player and the dealer, dealer's second face down."""
        for player in context.players:
            hand = Hand()
            context.hands[player] = [hand]
            self._deal_card(context, hand)

        self._deal_card(context, context.dealer_hand)

        for player in context.players:
            self._deal_card(context, context.hands[player][0])

        # Hole card
        self._deal_card(context, context.dealer_hand, face_up=False)

        dealt: list[tuple[Participant, HandSnapshot]] = [
            (player, HandSnapshot.of(context.hands[player][0])) for player in context.players
        ]
        dealt.append((self.dealer, HandSnapshot.of(context.dealer_hand)))
        self.notify(self.notifier.cards_dealt, dealt)

    def _deal_card(self, context: RoundContext, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card from the shoe into a hand."""
        card = self.shoe.deal()
        card.visible = face_up
        context.dealt.append(card)
        hand.add_card(card)
        logger.debug("Dealt %r, %d cards left in shoe", card, len(self.shoe))
        return card

    def _handle_dealer_blackjack(self, context: RoundContext) -> None:
        """Reveal the dealer's natural; players go straight to showdown."""
        context.dealer_hand.flip_hole_card()
        logger.info("Dealer has blackjack")
        self.notify(self.notifier.dealer_blackjack, HandSnapshot.of(context.dealer_hand))

    # Player turns

    def _run_player_turn(self, context: RoundContext, player: Player) -> None:
        """
        Resolve every hand a player holds, splits included.

        Unresolved hands sit on a stack. A split pushes its right child then
        its left, so hands are resolved left to right.
        """
        self.notify(self.notifier.indicate_turn, player)

        pending = list(context.hands[player])
        finished: list[Hand] = []

        while pending:
            hand = pending.pop()

            # Split children hold one card until they are dealt their second
            if not hand.is_complete:
                self._deal_card(context, hand)

            self.notify(self.notifier.indicate_hand_value, player, HandSnapshot.of(hand))

            while True:
                bet = context.bets[player]
                split_stake = bet // (len(pending) + len(finished) + 1)
                actions = legal_actions(hand, player.balance, bet, split_stake)

                if not actions:
                    # Busted or blackjack
                    finished.append(hand)
                    break

                if len(actions) > 1:
                    action = self._ask_decision(player, hand, actions)
                else:
                    action = Action.STAY

                logger.debug("%s chooses %s on %s", player, action, hand)

                if action is Action.HIT:
                    self._deal_card(context, hand)
                    self.notify(self.notifier.indicate_action, player, action)
                    self.notify(self.notifier.indicate_hand_value, player, HandSnapshot.of(hand))
                    continue

                if action is Action.STAY:
                    finished.append(hand)
                    self.notify(self.notifier.indicate_action, player, action)

                elif action is Action.SURRENDER:
                    self.notify(self.notifier.indicate_action, player, action)
                    context.bets[player] = 0
                    self._record_settlement(context, player, hand, SettlementKind.SURRENDER, bet)

                elif action is Action.DOUBLE:
                    player.bet(bet)
                    context.bets[player] = bet * 2
                    self._deal_card(context, hand)
                    hand.double_down()
                    finished.append(hand)
                    self.notify(self.notifier.indicate_action, player, action)
                    self.notify(self.notifier.indicate_hand_value, player, HandSnapshot.of(hand))

                elif action is Action.SPLIT:
                    player.bet(split_stake)
                    context.bets[player] = bet + split_stake
                    left, right = hand.split_hand()
                    pending.append(right)
                    pending.append(left)
                    self.notify(self.notifier.indicate_action, player, action)

                break

        context.hands[player] = finished

    def _ask_decision(self, player: Player, hand: Hand, actions: list[Action]) -> Action:
        """Query the decision provider and hold it to the offered actions."""
        choice = self.decisions.get_decision(player, HandSnapshot.of(hand), list(actions))
        try:
            action = Action(choice)
        except ValueError:
            raise InvalidActionError(choice, actions) from None
        if action not in actions:
            raise InvalidActionError(choice, actions)
        return action

    # Dealer turn and showdown

    def _run_dealer_turn(self, context: RoundContext) -> None:
        """Reveal the hole card, then draw until reaching the stand total."""
        hand = context.dealer_hand
        self.notify(self.notifier.indicate_turn, self.dealer)

        hand.flip_hole_card()
        self.notify(self.notifier.indicate_hand_value, self.dealer, HandSnapshot.of(hand))

        while hand.value < self.rules.dealer_stands_on:
            self.notify(self.notifier.indicate_action, self.dealer, Action.HIT)
            self._deal_card(context, hand)
            self.notify(self.notifier.indicate_hand_value, self.dealer, HandSnapshot.of(hand))

        if not hand.is_busted:
            self.notify(self.notifier.indicate_action, self.dealer, Action.STAY)

    def _showdown(self, context: RoundContext) -> list[HandOutcome]:
        """
        Compare every live hand against the dealer.

        A player's committed bet is spread evenly over their hands. Any
        remainder from the division is kept aside for the dealer.
        """
        dealer_score = context.dealer_hand.score
        outcomes = []

        for player in context.players:
            hands = context.hands[player]
            if not hands:
                continue

            stake, remainder = divmod(context.bets[player], len(hands))
            context.remainders[player] = remainder
            for hand in hands:
                kind = compare_scores(hand.score, dealer_score)
                outcomes.append(HandOutcome(player, hand, kind, stake))

        return outcomes

    def _settle(self, context: RoundContext, outcomes: list[HandOutcome]) -> None:
        """Pay out each showdown verdict."""
        for outcome in outcomes:
            self._record_settlement(context, outcome.player, outcome.hand, outcome.kind, outcome.bet)

        for player in context.players:
            remainder = context.remainders.pop(player, 0)
            if remainder:
                self.dealer.collect(remainder)
            context.bets[player] = 0

    def _record_settlement(
        self,
        context: RoundContext,
        player: Player,
        hand: Hand,
        kind: SettlementKind,
        bet: int,
    ) -> None:
        result = settle(kind, player, self.dealer, hand, bet)
        snapshot = HandSnapshot.of(hand)
        context.settled.append(SettledHand(player, snapshot, result))
        logger.debug("%s %s on %s: %s", player, kind, snapshot, result)
        self.notify(self.notifier.indicate_result, player, snapshot, result)

    # Cleanup

    def _cleanup(self, context: RoundContext) -> None:
        """Return every dealt card to the shoe and shuffle."""
        self.shoe.return_cards(context.dealt)
        self.shoe.shuffle()
        context.dealt.clear()
        context.hands.clear()
        context.bets.clear()

    def _rollback(self, context: RoundContext) -> None:
        """Refund unsettled stakes and recover the cards of an aborted round."""
        for player, bet in context.bets.items():
            if bet:
                player.win(bet)
        self._cleanup(context)
        self.abort()

    def notify(self, callback: Callable[..., None], *args) -> None:
        """Call a bound notification sink method, never letting it disturb the round."""
        try:
            callback(*args)
        except Exception:
            logger.exception("Notification sink failed in %s", callback.__name__)
