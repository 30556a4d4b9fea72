"""Weatherbook Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    ConversationHandler,
    MessageHandler,
    filters,
)

from .config import Config, load_config
from .core.store import RecordStore
from .telegram_handlers import (
    start_handler,
    help_handler,
    status_handler,
    clear_handler,
    add_start_handler,
    add_temperature_handler,
    add_humidity_handler,
    add_phenomenon_handler,
    add_date_handler,
    add_time_handler,
    query_start_handler,
    query_date_handler,
    query_time_handler,
    cancel_handler,
)
from .telegram_states import AddStates, QueryStates

logger = logging.getLogger(__name__)

TEXT_INPUT = filters.TEXT & ~filters.COMMAND


class AuthFilter(filters.BaseFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def check_update(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


async def unauthorized_handler(update: Update, context):
    """Handle unauthorized access attempts."""
    user = update.effective_user
    if user is not None:
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
    if update.callback_query:
        await update.callback_query.answer()
    message = update.effective_message
    if message is None:
        return
    await message.reply_text(
        "Unauthorized. This bot is private.\n"
        "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in weatherbook.conf"
    )


async def close_store(application: Application) -> None:
    """Release all records when the application shuts down."""
    store = application.bot_data.get("store")
    if store is not None:
        store.close()


def create_application(config: Config | None = None, store: RecordStore | None = None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to weatherbook.conf"
        )

    app = Application.builder().token(config.telegram_bot_token).post_shutdown(close_store).build()
    app.bot_data["store"] = store if store is not None else RecordStore(config.capacity)

    auth_filter = AuthFilter(config.telegram_allowed_users)

    # Simple commands (with auth filter)
    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(CommandHandler("status", status_handler, filters=auth_filter))
    app.add_handler(CommandHandler("clear", clear_handler, filters=auth_filter))

    add_conv = ConversationHandler(
        entry_points=[CommandHandler("add", add_start_handler, filters=auth_filter)],
        states={
            AddStates.TEMPERATURE: [MessageHandler(TEXT_INPUT, add_temperature_handler)],
            AddStates.HUMIDITY: [MessageHandler(TEXT_INPUT, add_humidity_handler)],
            AddStates.PHENOMENON: [
                MessageHandler(TEXT_INPUT, add_phenomenon_handler),
                CallbackQueryHandler(add_phenomenon_handler, pattern=r"^phenomenon:"),
            ],
            AddStates.DATE: [
                MessageHandler(TEXT_INPUT, add_date_handler),
                CallbackQueryHandler(add_date_handler, pattern=r"^date:"),
            ],
            AddStates.TIME: [
                MessageHandler(TEXT_INPUT, add_time_handler),
                CallbackQueryHandler(add_time_handler, pattern=r"^time:"),
            ],
        },
        fallbacks=[CommandHandler("cancel", cancel_handler)],
        per_user=True,
    )
    app.add_handler(add_conv)

    query_conv = ConversationHandler(
        entry_points=[CommandHandler("query", query_start_handler, filters=auth_filter)],
        states={
            QueryStates.DATE: [
                MessageHandler(TEXT_INPUT, query_date_handler),
                CallbackQueryHandler(query_date_handler, pattern=r"^date:"),
            ],
            QueryStates.TIME: [
                MessageHandler(TEXT_INPUT, query_time_handler),
                CallbackQueryHandler(query_time_handler, pattern=r"^time:"),
            ],
        },
        fallbacks=[CommandHandler("cancel", cancel_handler)],
        per_user=True,
    )
    app.add_handler(query_conv)

    # Add catch-all for unauthorized users if we have an allowlist
    if config.telegram_allowed_users:
        app.add_handler(MessageHandler(~auth_filter & filters.ALL, unauthorized_handler))

    return app


def run_bot(config: Config | None = None):
    """Run the Telegram bot."""
    if config is None:
        config = load_config()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.log_level,
    )

    app = create_application(config)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info(f"Starting Weatherbook Telegram bot (capacity {config.capacity})...")

    app.run_polling(allowed_updates=Update.ALL_TYPES)
