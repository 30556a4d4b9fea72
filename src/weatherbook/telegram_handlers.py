"""Telegram command handlers."""

import logging

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes, ConversationHandler

from .core.records import TimeOfDay, current_date
from .core.store import RecordStore
from .core.suitability import KNOWN_PHENOMENA
from .telegram_format import reply_markdown, reply_plain
from .telegram_states import AddStates, QueryStates
from .workflows import FormFields, add_record, query_records, status_message

logger = logging.getLogger(__name__)

COMMANDS_TEXT = (
    "/add - Record a weather observation\n"
    "/query - Find records by date and time of day\n"
    "/status - How many records are stored\n"
    "/clear - Reset your form fields\n"
    "/cancel - Cancel current operation\n"
    "/help - Show all commands"
)


def _store(context: ContextTypes.DEFAULT_TYPE) -> RecordStore:
    return context.bot_data["store"]


def _form(context: ContextTypes.DEFAULT_TYPE) -> FormFields:
    """The user's form fields, which persist between /add and /query like a GUI form."""
    form = context.user_data.get("form")
    if form is None:
        form = FormFields.cleared()
        context.user_data["form"] = form
    return form


async def _read_input(update: Update, prefix: str) -> str | None:
    """Value from a button tap (`prefix:value`) or a typed message."""
    if update.callback_query:
        query = update.callback_query
        await query.answer()
        if query.data and query.data.startswith(prefix):
            return query.data[len(prefix):]
        return None
    if update.message and update.message.text is not None:
        return update.message.text.strip()
    return None


async def _ask(update: Update, text: str, keyboard: list[list[InlineKeyboardButton]] | None = None):
    markup = InlineKeyboardMarkup(keyboard) if keyboard else None
    await update.effective_message.reply_text(text, reply_markup=markup)


def _date_keyboard() -> list[list[InlineKeyboardButton]]:
    today = current_date()
    return [[InlineKeyboardButton(f"Today ({today})", callback_data=f"date:{today}")]]


def _time_keyboard() -> list[list[InlineKeyboardButton]]:
    return [
        [
            InlineKeyboardButton(period.value.capitalize(), callback_data=f"time:{period.value}")
            for period in TimeOfDay
        ]
    ]


# ============== Simple Commands ==============


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    await update.message.reply_text(
        "Hi! I'm your Weather Record Book.\n\n"
        "I keep weather observations and tell you whether the conditions suit travel.\n\n"
        f"Commands:\n{COMMANDS_TEXT}"
    )


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await reply_markdown(
        update.message,
        f"**Weather Record Book commands**\n\n{COMMANDS_TEXT}\n\n"
        "Phenomena with a rating: sunny, cloudy, rainy, snowy, stormy.",
    )


async def status_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /status command."""
    await update.message.reply_text(status_message(_store(context)))


async def clear_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /clear command - reset form fields, stored records are kept."""
    context.user_data["form"] = FormFields.cleared()
    await update.message.reply_text("Fields cleared.")


# ============== Add Conversation ==============


async def add_start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Start the add-record conversation."""
    _form(context)
    await update.message.reply_text("New weather record.\n\nTemperature (°C)?")
    return AddStates.TEMPERATURE


async def add_temperature_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle temperature input."""
    _form(context).temperature = await _read_input(update, "") or ""
    await _ask(update, "Humidity (%)?")
    return AddStates.HUMIDITY


async def add_humidity_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle humidity input and offer common phenomena."""
    _form(context).humidity = await _read_input(update, "") or ""
    keyboard = [
        [InlineKeyboardButton(p.capitalize(), callback_data=f"phenomenon:{p}") for p in KNOWN_PHENOMENA[:3]],
        [InlineKeyboardButton(p.capitalize(), callback_data=f"phenomenon:{p}") for p in KNOWN_PHENOMENA[3:]],
    ]
    await _ask(update, "Weather phenomenon?\nTap an option or type your own.", keyboard)
    return AddStates.PHENOMENON


async def add_phenomenon_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle phenomenon input."""
    value = await _read_input(update, "phenomenon:")
    if value is None:
        return AddStates.PHENOMENON
    _form(context).phenomenon = value
    await _ask(update, "Date (YYYY-MM-DD)?", _date_keyboard())
    return AddStates.DATE


async def add_date_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle date input."""
    value = await _read_input(update, "date:")
    if value is None:
        return AddStates.DATE
    _form(context).date = value
    await _ask(update, "Time of day?", _time_keyboard())
    return AddStates.TIME


async def add_time_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle time of day, then validate and store the record."""
    value = await _read_input(update, "time:")
    if value is None:
        return AddStates.TIME
    form = _form(context)
    form.time = value

    outcome = add_record(_store(context), form)
    if outcome.ok:
        logger.info(f"User {update.effective_user.id} added a record for {form.date}")
    await reply_plain(update.effective_message, outcome.message)
    return ConversationHandler.END


# ============== Query Conversation ==============


async def query_start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Start the query conversation."""
    _form(context)
    await update.message.reply_text(
        "Find weather records.\n\nDate (YYYY-MM-DD)?",
        reply_markup=InlineKeyboardMarkup(_date_keyboard()),
    )
    return QueryStates.DATE


async def query_date_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle query date input."""
    value = await _read_input(update, "date:")
    if value is None:
        return QueryStates.DATE
    _form(context).date = value
    await _ask(update, "Time of day?", _time_keyboard())
    return QueryStates.TIME


async def query_time_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle query time input and show matching records."""
    value = await _read_input(update, "time:")
    if value is None:
        return QueryStates.TIME
    form = _form(context)
    form.time = value

    outcome = query_records(_store(context), form.date, form.time)
    await reply_plain(update.effective_message, outcome.message)
    return ConversationHandler.END


async def cancel_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Cancel the current conversation. Form fields are kept."""
    await update.message.reply_text("Cancelled.")
    return ConversationHandler.END
