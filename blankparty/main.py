"""Main entry point for Blank Party."""

import logging
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from blankparty.engine.round_engine import RoundEngine

QUIT_COMMAND = "/quit"

# Clears the terminal and moves the cursor home
CLEAR_SCREEN = "\033[2J\033[H"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def main() -> None:
    """Run the Blank Party Telegram bot."""
    # Load environment variables
    load_dotenv()

    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("🎉 Starting Blank Party Bot...")

    from blankparty.config import get_bot_token

    if not get_bot_token():
        logger.error(
            "TELEGRAM_BOT_TOKEN environment variable is required. "
            "Set it in .env file or environment."
        )
        sys.exit(1)

    # Import and run bot
    from blankparty.bot.telegram_bot import BlankPartyBot

    try:
        bot = BlankPartyBot()
        bot.setup()
        bot.run()
    except Exception as e:
        logger.exception(f"Failed to start bot: {e}")
        sys.exit(1)


class _Quit(Exception):
    """Raised when the players leave the local session."""


def run_local(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    engine: "RoundEngine | None" = None,
) -> "RoundEngine":
    """Play a session in the terminal, passing the keyboard around.

    Type /quit at any prompt to leave.

    Args:
        input_fn: Reads one line after showing a prompt.
        output_fn: Shows one block of text.
        engine: Engine to drive. Defaults to a fresh RoundEngine.

    Returns:
        The engine, in whatever phase the session ended.
    """
    from blankparty.engine.round_engine import RoundEngine
    from blankparty.models.game_state import GamePhase
    from blankparty.models.question import append_to_draft, insert_blank
    from blankparty.renderer.state_renderer import StateRenderer

    if engine is None:
        engine = RoundEngine()
    renderer = StateRenderer(engine)

    def ask(prompt: str) -> str:
        try:
            line = input_fn(prompt)
        except EOFError:
            raise _Quit from None
        if line.strip() == QUIT_COMMAND:
            raise _Quit
        return line

    def report(result: dict) -> None:
        output_fn(renderer.render_action_result(result))

    if engine.phase == GamePhase.HOME:
        report(engine.new_game())

    draft = ""
    try:
        while True:
            phase = engine.phase
            output_fn(renderer.render_screen())

            if phase == GamePhase.SETUP_HOST:
                report(engine.set_host(ask("Host name: ")))

            elif phase == GamePhase.ADD_PLAYERS:
                name = ask("Player name (empty line to start): ")
                if name.strip():
                    report(engine.add_player(name))
                else:
                    report(engine.start_match())

            elif phase == GamePhase.CREATE_QUESTION:
                line = ask(
                    "Question ('+' adds a blank, '-' clears, '?' draws one, "
                    "empty line submits): "
                )
                command = line.strip()
                if command == "?":
                    report(engine.draw_random_question())
                elif command == "":
                    report(engine.compose_manual_question(draft))
                else:
                    if command == "+":
                        draft = insert_blank(draft)
                    elif command == "-":
                        draft = ""
                    else:
                        draft = append_to_draft(draft, line)
                    output_fn(renderer.render_draft(draft))
                if engine.phase != GamePhase.CREATE_QUESTION:
                    draft = ""

            elif phase == GamePhase.ANSWER_ROUND:
                slots = engine.state.question.slot_count
                texts = [ask(f"Blank {i}: ") for i in range(1, slots + 1)]
                result = engine.submit_answer(texts)
                # Typed answers stay on screen until cleared
                output_fn(CLEAR_SCREEN)
                report(result)

            elif phase == GamePhase.WAIT_FOR_HOST:
                ask("Press Enter to open the answers ")
                report(engine.open_judgment())

            elif phase == GamePhase.JUDGMENT:
                shown = engine.judgment_answers()
                choice = ask("Vote for #: ").strip()
                if not choice.isdigit() or not 1 <= int(choice) <= len(shown):
                    output_fn(f"❌ Pick a number from 1 to {len(shown)}.")
                    continue
                report(engine.pick_winner(shown[int(choice) - 1].author_index))

            elif phase == GamePhase.REVEAL:
                ask("Press Enter for the next round ")
                report(engine.advance_round())

            elif phase == GamePhase.VICTORY:
                choice = ask("[a]gain with same players, [n]ew players, [q]uit: ")
                choice = choice.strip().lower()
                if choice.startswith("a"):
                    report(engine.restart(keep_players=True))
                elif choice.startswith("n"):
                    report(engine.restart(keep_players=False))
                elif choice.startswith("q"):
                    break

    except _Quit:
        pass

    output_fn("👋 Bye!")
    return engine


def cli() -> None:
    """Run the bot, or a terminal session with the ``local`` argument."""
    if len(sys.argv) > 1 and sys.argv[1] == "local":
        load_dotenv()
        setup_logging(logging.WARNING)
        run_local()
    else:
        main()


if __name__ == "__main__":
    cli()
