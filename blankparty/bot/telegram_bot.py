"""Telegram bot for Blank Party.

Each chat hosts one pass-the-device session: everyone plays on the same
phone, handing it over when the bot says so.
"""

import logging
from dataclasses import dataclass, field

from telegram import Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from blankparty.config import get_bot_token, get_winning_score
from blankparty.engine.round_engine import RoundEngine

from .handlers import CommandHandlers, GameHandlers

logger = logging.getLogger(__name__)


@dataclass
class ChatSession:
    """A chat's engine plus the input the current screen is collecting.

    Attributes:
        engine: Round engine for this chat.
        draft: Question the host is writing.
        pending: Texts collected for the answering participant.
    """

    engine: RoundEngine
    draft: str = ""
    pending: list[str] = field(default_factory=list)

    def reset_inputs(self) -> None:
        """Forget partially entered input."""
        self.draft = ""
        self.pending.clear()


class BlankPartyBot:
    """Main Telegram bot for Blank Party.

    Manages bot lifecycle and routes messages to handlers.

    Attributes:
        token: Telegram bot token.
        winning_score: Score that wins a game in every chat.
        app: Telegram Application instance.
        sessions: Active sessions keyed by chat ID.
        command_handlers: Handler for bot commands.
        game_handlers: Handler for game input.
    """

    def __init__(self, token: str | None = None, winning_score: int | None = None) -> None:
        """Initialize the Telegram bot.

        Args:
            token: Telegram bot token. If not provided, reads from env.
            winning_score: Score that wins. If not provided, reads from env.
        """
        self.token = token or get_bot_token()
        if not self.token:
            raise ValueError(
                "Telegram bot token required. Set TELEGRAM_BOT_TOKEN env var."
            )

        self.winning_score = winning_score or get_winning_score()
        self.sessions: dict[int, ChatSession] = {}
        self.command_handlers = CommandHandlers(self)
        self.game_handlers = GameHandlers(self)
        self.app: Application | None = None

    def setup(self) -> None:
        """Set up the bot application and handlers."""
        self.app = Application.builder().token(self.token).build()

        self.app.add_handler(CommandHandler("start", self.command_handlers.start))
        self.app.add_handler(CommandHandler("help", self.command_handlers.help))
        self.app.add_handler(CommandHandler("newgame", self.command_handlers.new_game))
        self.app.add_handler(CommandHandler("status", self.command_handlers.status))
        self.app.add_handler(CommandHandler("endgame", self.command_handlers.end_game))

        self.app.add_handler(CallbackQueryHandler(self.game_handlers.handle_callback))
        self.app.add_handler(
            MessageHandler(
                filters.TEXT & ~filters.COMMAND,
                self.game_handlers.handle_message,
            )
        )

        self.app.add_error_handler(self.error_handler)

        logger.info("Bot setup complete")

    async def error_handler(
        self, update: object, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle errors in the bot."""
        logger.error(f"Exception while handling update: {context.error}")

        if isinstance(update, Update) and update.effective_chat:
            await context.bot.send_message(
                chat_id=update.effective_chat.id,
                text="❌ An error occurred. Please try again.",
            )

    def run(self) -> None:
        """Run the bot (blocking)."""
        if not self.app:
            self.setup()

        logger.info("Starting bot...")
        self.app.run_polling(allowed_updates=Update.ALL_TYPES)

    def get_session(self, chat_id: int) -> ChatSession | None:
        """Get the session for a chat.

        Args:
            chat_id: Telegram chat ID.

        Returns:
            ChatSession or None.
        """
        return self.sessions.get(chat_id)

    def get_or_create_session(self, chat_id: int) -> ChatSession:
        """Get or create the session for a chat.

        Args:
            chat_id: Telegram chat ID.

        Returns:
            ChatSession instance.
        """
        if chat_id not in self.sessions:
            engine = RoundEngine(winning_score=self.winning_score)
            self.sessions[chat_id] = ChatSession(engine=engine)
            logger.info(f"Created session for chat {chat_id}")
        return self.sessions[chat_id]

    def end_session(self, chat_id: int) -> bool:
        """Drop a chat's session.

        Returns:
            True if a session existed.
        """
        return self.sessions.pop(chat_id, None) is not None
