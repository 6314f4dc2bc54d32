"""
Start & Help Handlers
=====================
Handles /start, /help, /cancel and /capture_chat_id.
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes

from lang import _ as t
from bot.dependencies import get_deps
from bot.states import Idle, Registering, decode_state, encode_state
from errors import StorageError

logger = logging.getLogger(__name__)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start - welcome back, or ask for a department."""
    deps = get_deps(context)
    user = update.effective_user
    chat_id = update.effective_chat.id

    logger.info(f"User {user.id} ({user.first_name}) started the bot")

    departments = deps.registry.departments_of(chat_id)
    if departments:
        await update.message.reply_text(t("welcome_back", departments=", ".join(departments)))
        return

    try:
        deps.state_store.set(user.id, encode_state(Registering()))
    except StorageError as e:
        logger.error(f"Error during user registration: {e}")
        await update.message.reply_text(t("registration_error"))
        return

    await update.message.reply_text(
        t("welcome_message", departments=", ".join(deps.registry.names))
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    deps = get_deps(context)
    await update.message.reply_text(t("help_message", departments=", ".join(deps.registry.names)))


async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Drop an in-progress registration or event."""
    deps = get_deps(context)
    user_id = update.effective_user.id

    if isinstance(decode_state(deps.state_store.get(user_id)), Idle):
        await update.message.reply_text(t("nothing_to_cancel"))
        return

    deps.state_store.clear(user_id)
    logger.info(f"User {user_id} cancelled their conversation")
    await update.message.reply_text(t("cancelled"))


async def capture_chat_id_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Remember the caller's chat id under their username."""
    deps = get_deps(context)
    username = update.effective_user.username

    if not username:
        await update.message.reply_text(t("username_required"))
        return

    deps.chat_directory.store(username, update.effective_chat.id)
    await update.message.reply_text(t("chat_id_captured", username=username))
