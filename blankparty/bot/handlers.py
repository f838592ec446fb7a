"""Command and game handlers for Telegram bot."""

import logging
from typing import TYPE_CHECKING, Any

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

if TYPE_CHECKING:
    from .telegram_bot import BlankPartyBot, ChatSession

from blankparty.models.game_state import GamePhase
from blankparty.models.question import append_to_draft, insert_blank
from blankparty.renderer.state_renderer import StateRenderer

logger = logging.getLogger(__name__)


def build_keyboard(session: "ChatSession") -> InlineKeyboardMarkup | None:
    """Create the inline keyboard for the session's current screen.

    Args:
        session: Chat session to build buttons for.

    Returns:
        Keyboard markup, or None when the screen only takes text.
    """
    engine = session.engine
    phase = engine.phase
    rows: list[list[InlineKeyboardButton]] = []

    if phase == GamePhase.HOME:
        rows.append([InlineKeyboardButton("🎮 New game", callback_data="fresh")])
    elif phase == GamePhase.ADD_PLAYERS:
        rows.append([InlineKeyboardButton("▶️ Start match", callback_data="start")])
    elif phase == GamePhase.CREATE_QUESTION:
        rows.append([InlineKeyboardButton("➕ Blank (______)", callback_data="blank")])
        rows.append([InlineKeyboardButton("✅ Done", callback_data="done")])
        rows.append([InlineKeyboardButton("🧹 Clear draft", callback_data="clear")])
        rows.append([InlineKeyboardButton("🎲 Random question", callback_data="random")])
    elif phase == GamePhase.WAIT_FOR_HOST:
        rows.append([InlineKeyboardButton("📖 Open answers", callback_data="open")])
    elif phase == GamePhase.JUDGMENT:
        for i, answer in enumerate(engine.judgment_answers(), 1):
            rows.append(
                [
                    InlineKeyboardButton(
                        f"🗳️ Vote #{i}", callback_data=f"pick:{answer.author_index}"
                    )
                ]
            )
    elif phase == GamePhase.REVEAL:
        rows.append([InlineKeyboardButton("⏭️ Next round", callback_data="next")])
    elif phase == GamePhase.VICTORY:
        rows.append([InlineKeyboardButton("🔁 Play again", callback_data="again")])
        rows.append([InlineKeyboardButton("👥 New players", callback_data="fresh")])

    if not rows:
        return None
    return InlineKeyboardMarkup(rows)


async def hide_message(update: Update) -> None:
    """Delete an answer so the next player and the host cannot read it."""
    try:
        await update.message.delete()
    except TelegramError as e:
        logger.warning(f"Could not delete answer message: {e}")


async def send_screen(
    update: Update,
    context: ContextTypes.DEFAULT_TYPE,
    session: "ChatSession",
    prefix: str = "",
) -> None:
    """Send the current screen with its buttons."""
    renderer = StateRenderer(session.engine)
    text = renderer.render_screen()
    if prefix:
        text = f"{prefix}\n\n{text}"

    await context.bot.send_message(
        chat_id=update.effective_chat.id,
        text=text,
        reply_markup=build_keyboard(session),
    )


async def apply_result(
    update: Update,
    context: ContextTypes.DEFAULT_TYPE,
    session: "ChatSession",
    result: dict[str, Any],
    phase_before: GamePhase,
) -> None:
    """Report an operation result and refresh the screen on success."""
    renderer = StateRenderer(session.engine)
    message = renderer.render_action_result(result)

    if not result.get("success"):
        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text=message,
            reply_markup=build_keyboard(session),
        )
        return

    if session.engine.phase != phase_before:
        session.reset_inputs()
    await send_screen(update, context, session, prefix=message)


class CommandHandlers:
    """Handlers for bot commands.

    Attributes:
        bot: Reference to the main bot instance.
    """

    def __init__(self, bot: "BlankPartyBot") -> None:
        """Initialize command handlers.

        Args:
            bot: The BlankPartyBot instance.
        """
        self.bot = bot

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /start command."""
        welcome_text = f"""🎉 Welcome to Blank Party! 🎉

A pass-the-phone game for 3 or more people.

Each round the host writes a sentence with blanks (______), everyone
else fills them in, and the host picks the funniest. The author scores
and hosts next. First to {self.bot.winning_score} points wins!

Commands:
/newgame - Start a new game
/status - Show the current screen
/endgame - End the game in this chat
/help - Show this help"""

        await update.message.reply_text(welcome_text)

    async def help(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /help command."""
        await self.start(update, context)

    async def new_game(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /newgame command."""
        session = self.bot.get_or_create_session(update.effective_chat.id)
        phase_before = session.engine.phase
        result = session.engine.new_game()
        session.reset_inputs()
        await apply_result(update, context, session, result, phase_before)

    async def status(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /status command."""
        session = self.bot.get_session(update.effective_chat.id)
        if not session:
            await update.message.reply_text(
                "❌ No game exists. Use /newgame to create one."
            )
            return

        await send_screen(update, context, session)

    async def end_game(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /endgame command."""
        if self.bot.end_session(update.effective_chat.id):
            await update.message.reply_text("🏁 Game ended.")
        else:
            await update.message.reply_text("No game to end.")


class GameHandlers:
    """Handlers for game input.

    Attributes:
        bot: Reference to the main bot instance.
    """

    def __init__(self, bot: "BlankPartyBot") -> None:
        """Initialize game handlers.

        Args:
            bot: The BlankPartyBot instance.
        """
        self.bot = bot

    async def handle_message(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Route free text to the operation the current screen expects."""
        session = self.bot.get_session(update.effective_chat.id)
        if not session:
            return  # No game, ignore message

        engine = session.engine
        text = update.message.text
        phase = engine.phase

        if phase == GamePhase.SETUP_HOST:
            result = engine.set_host(text)
        elif phase == GamePhase.ADD_PLAYERS:
            result = engine.add_player(text)
        elif phase == GamePhase.CREATE_QUESTION:
            session.draft = append_to_draft(session.draft, text)
            renderer = StateRenderer(engine)
            await update.message.reply_text(
                renderer.render_draft(session.draft),
                reply_markup=build_keyboard(session),
            )
            return
        elif phase == GamePhase.ANSWER_ROUND:
            session.pending.append(text)
            await hide_message(update)
            slot_count = engine.state.question.slot_count
            if len(session.pending) < slot_count:
                await update.message.reply_text(
                    f"📝 Blank {len(session.pending)} saved. Now blank "
                    f"{len(session.pending) + 1}."
                )
                return
            result = engine.submit_answer(session.pending)
            session.pending.clear()
        else:
            await update.message.reply_text("👆 Use the buttons.")
            return

        await apply_result(update, context, session, result, phase)

    async def handle_callback(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle inline keyboard callbacks."""
        query = update.callback_query
        await query.answer()

        session = self.bot.get_session(update.effective_chat.id)
        if not session:
            await query.edit_message_text("❌ Game not found.")
            return

        engine = session.engine
        phase = engine.phase
        data = query.data or ""

        if data == "clear" and phase == GamePhase.CREATE_QUESTION:
            if not session.draft:
                return
            session.draft = ""
            renderer = StateRenderer(engine)
            await query.edit_message_text(
                renderer.render_draft(session.draft),
                reply_markup=build_keyboard(session),
            )
            return

        if data == "blank" and phase == GamePhase.CREATE_QUESTION:
            draft = insert_blank(session.draft)
            if draft == session.draft:
                await context.bot.send_message(
                    chat_id=update.effective_chat.id,
                    text="❌ A question can have at most 2 blanks.",
                )
                return
            session.draft = draft
            renderer = StateRenderer(engine)
            await query.edit_message_text(
                renderer.render_draft(session.draft),
                reply_markup=build_keyboard(session),
            )
            return

        result = self._dispatch(session, data)
        if result is None:
            logger.warning(f"Unknown callback data: {data}")
            return

        await query.edit_message_reply_markup(reply_markup=None)
        await apply_result(update, context, session, result, phase)

    def _dispatch(self, session: "ChatSession", data: str) -> dict[str, Any] | None:
        """Run the operation behind a button."""
        engine = session.engine

        if data == "fresh":
            return engine.restart(keep_players=False)
        if data == "start":
            return engine.start_match()
        if data == "done":
            return engine.compose_manual_question(session.draft)
        if data == "random":
            return engine.draw_random_question()
        if data == "open":
            return engine.open_judgment()
        if data.startswith("pick:"):
            try:
                author_index = int(data.split(":", 1)[1])
            except ValueError:
                return None
            return engine.pick_winner(author_index)
        if data == "next":
            return engine.advance_round()
        if data == "again":
            return engine.restart(keep_players=True)
        return None
