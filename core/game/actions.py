"""Player actions and the rules for when each is legal."""

from enum import Enum

from core.hand import Hand


class Action(str, Enum):
    """Actions a player may take on a hand."""

    DOUBLE = "double"
    HIT = "hit"
    SPLIT = "split"
    STAY = "stay"
    SURRENDER = "surrender"

    def __str__(self) -> str:
        return self.value


def legal_actions(
    hand: Hand,
    balance: int,
    current_bet: int,
    split_stake: int | None = None,
) -> list[Action]:
    """
    Work out which actions a player may take on a hand.

    Args:
        hand: The hand being played
        balance: The player's uncommitted balance
        current_bet: The player's committed bet
        split_stake: Extra stake a split would cost; split is withheld when
            the balance cannot cover it

    Returns:
        The legal actions in lexical order, or an empty list if the hand is
        busted or a blackjack and needs no decision
    """
    if hand.is_busted or hand.is_blackjack:
        return []

    actions = []

    if hand.is_initial_hand:
        if balance >= current_bet:
            actions.append(Action.DOUBLE)
        actions.append(Action.SURRENDER)

    if hand.can_hit:
        actions.append(Action.HIT)

    if hand.can_split and (split_stake is None or balance >= split_stake):
        actions.append(Action.SPLIT)

    actions.append(Action.STAY)

    return sorted(actions, key=lambda action: action.value)
