"""Pytest fixtures for blackjack engine tests."""

from random import Random
from typing import Sequence

import pytest

from core.bank import Dealer, Player
from core.cards import Card, Shoe
from core.game import Action, DecisionProvider, EventRecorder, HandSnapshot, RoundEngine
from core.hand import Hand
from core.rules import TableRules


def make_hand(*cards: str, is_split_hand: bool = False) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    return Hand(cards=[Card.from_string(c) for c in cards], is_split_hand=is_split_hand)


class StackedShoe(Shoe):
    """
    A full shoe whose next cards are known.

    ``deal_order`` lists the cards that come out first, in order. The rest of
    the shoe follows in seeded random order.
    """

    def __init__(self, deal_order: Sequence[str], num_decks: int = 1) -> None:
        super().__init__(num_decks=num_decks, rng=Random(7))
        stacked = []
        for text in deal_order:
            card = Card.from_string(text)
            self._cards.remove(card)
            stacked.append(card)
        # deal() takes from the end
        self._cards.extend(reversed(stacked))


class ScriptedDecisions(DecisionProvider):
    """Answers from fixed scripts and remembers every question."""

    def __init__(self, bets: int | Sequence[int] = 100, actions: Sequence[str] = ()) -> None:
        self._bets = list(bets) if not isinstance(bets, int) else None
        self._bet = bets if isinstance(bets, int) else None
        self._actions = list(actions)
        self.offered: list[tuple[str, list[Action]]] = []

    def get_bet(self, player: Player) -> int:
        if self._bets is None:
            return self._bet
        return self._bets.pop(0)

    def get_decision(
        self,
        player: Player,
        hand: HandSnapshot,
        actions: Sequence[Action],
    ) -> Action:
        self.offered.append((player.name, list(actions)))
        return self._actions.pop(0)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A shuffled 4-deck shoe."""
    return Shoe(num_decks=4, rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    return make_hand("8S", "8H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def player():
    """A player with the default balance."""
    return Player(1, 1000)


@pytest.fixture
def dealer():
    """A fresh dealer ledger."""
    return Dealer()


@pytest.fixture
def recorder():
    """Notification sink that records events."""
    return EventRecorder()


@pytest.fixture
def make_engine(recorder):
    """Build a round engine dealing a known card sequence from a single deck."""

    def _make(deal_order: Sequence[str], decisions: DecisionProvider, num_decks: int = 1) -> RoundEngine:
        return RoundEngine(
            shoe=StackedShoe(deal_order, num_decks=num_decks),
            decisions=decisions,
            notifier=recorder,
            rules=TableRules(num_decks=num_decks),
        )

    return _make


@pytest.fixture
def hand_of():
    """Factory building a hand from card strings."""
    return make_hand


@pytest.fixture
def scripted():
    """Factory for a scripted decision provider."""
    return ScriptedDecisions


@pytest.fixture
def stacked_shoe():
    """Factory for a shoe with a known deal order."""
    return StackedShoe
