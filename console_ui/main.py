"""Main entry point for the console blackjack table."""

import logging
import sys
from random import Random
from typing import Sequence, TextIO

from config import AppConfig, GameConfig, config, configure_logging
from console_ui.notifier import ConsoleNotifier
from console_ui.provider import ConsoleDecisionProvider, parse_int, read_line
from core.bank import Dealer, Player
from core.cards import Shoe
from core.game.engine import RoundEngine
from core.game.interfaces import ContinuationPolicy
from core.game.loop import BlackjackGame
from core.rules import TableRules

logger = logging.getLogger(__name__)


class ConsolePrompt(ContinuationPolicy):
    """Asks at the end of every round whether to carry on."""

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def keep_playing(self, players: Sequence[Player], rounds_played: int) -> bool:
        print("\nRound finished. Enter 'exit' to quit playing or anything else to continue", file=self.stdout)
        return read_line(self.stdin).strip().lower() != "exit"


def ask_number(
    stdin: TextIO,
    stdout: TextIO,
    prompt: str,
    low: int,
    high: int,
    default: int | None = None,
) -> int:
    """Prompt until a whole number in ``[low, high]`` is entered; blank picks ``default``."""
    print(prompt, file=stdout)
    while True:
        text = read_line(stdin).strip()
        if not text and default is not None:
            return default
        number = parse_int(text)
        if number is not None and low <= number <= high:
            return number
        print(f"\tInvalid input. Please enter an integer between {low}-{high}: ", file=stdout)


def setup_table(
    settings: GameConfig,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> tuple[list[Player], TableRules]:
    """Ask how many players sit down and how many decks go in the shoe."""
    print("\nWelcome to Blackjack!", file=stdout)
    print("♠-♡-♣-♢-♠-♡-♣-♢-♠-♡-♣\n", file=stdout)

    player_count = ask_number(
        stdin,
        stdout,
        f"\tPlease enter the number of players (1-{settings.max_players}): ",
        1,
        settings.max_players,
    )
    deck_count = ask_number(
        stdin,
        stdout,
        f"\tPlease enter the amount of decks you would like to play with (1-8) [{settings.num_decks}]: ",
        1,
        8,
        default=settings.num_decks,
    )

    players = [Player(i, settings.starting_balance) for i in range(1, player_count + 1)]
    rules = TableRules(
        num_decks=deck_count,
        max_players=settings.max_players,
        min_bet=settings.min_bet,
        dealer_stands_on=settings.dealer_stands_on,
    )
    print(
        f"The table has {player_count} players, and the game will be played "
        f"with {deck_count} decks of cards\n\n",
        file=stdout,
    )
    return players, rules


def build_game(
    players: list[Player],
    rules: TableRules,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    rng: Random | None = None,
) -> BlackjackGame:
    """Wire the console capabilities into a round engine and game loop."""
    engine = RoundEngine(
        shoe=Shoe(num_decks=rules.num_decks, rng=rng),
        decisions=ConsoleDecisionProvider(stdin, stdout, min_bet=rules.min_bet),
        notifier=ConsoleNotifier(stdout),
        dealer=Dealer(),
        rules=rules,
    )
    return BlackjackGame(players, engine, ConsolePrompt(stdin, stdout))


def main(
    app_config: AppConfig = config,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    """Run the console game until the players quit. Returns the exit status."""
    configure_logging(app_config.logging, debug=app_config.debug)

    game = None
    try:
        players, rules = setup_table(app_config.game, stdin, stdout)
        game = build_game(players, rules, stdin, stdout)
        game.run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Input ended, leaving the table")

    print("Quitting...", file=stdout)
    if game is not None:
        summary = game.summary
        print(
            f"Dealer collected ${summary.dealer_collected} in {summary.rounds_played} rounds.",
            file=stdout,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
