"""
Bot Application
===============
Creates and configures the Telegram bot application.
"""

import logging
from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

import config
from lang import _ as t
from bot.dependencies import BOT_DATA_KEY, BotDependencies
from bot.handlers import (
    # Start
    start_command,
    help_command,
    cancel_command,
    capture_chat_id_command,
    # Marketing
    add_marketing_command,
    remove_marketing_command,
    list_marketing_command,
    # Departments
    list_department_command,
    register_command,
    # Events
    create_command,
    handle_message,
    list_events_command,
    event_command,
)
from errors import StorageError

logger = logging.getLogger(__name__)

# Edited messages carry no update.message and are not conversation input
NEW_MESSAGES = filters.UpdateType.MESSAGE

# (command, lang key of its menu description)
MENU_COMMANDS = [
    ("start", "cmd_start"),
    ("help", "cmd_help"),
    ("add_marketing", "cmd_add_marketing"),
    ("remove_marketing", "cmd_remove_marketing"),
    ("list_marketing", "cmd_list_marketing"),
    ("list", "cmd_list"),
    ("register", "cmd_register"),
    ("create", "cmd_create"),
    ("list_events", "cmd_list_events"),
    ("event", "cmd_event"),
    ("capture_chat_id", "cmd_capture_chat_id"),
    ("cancel", "cmd_cancel"),
]


async def post_init(application: Application):
    """Publish the command menu once the bot is connected."""
    commands = [BotCommand(command, t(key)) for command, key in MENU_COMMANDS]
    try:
        await application.bot.set_my_commands(commands)
        logger.info("Bot commands set successfully")
    except Exception as e:
        logger.error(f"Error setting bot commands: {e}")


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Log handler failures; tell the user when storage is down."""
    error = context.error
    logger.error(f"Error while handling update: {error}", exc_info=error)

    if isinstance(update, Update) and update.effective_message:
        key = "storage_error" if isinstance(error, StorageError) else "event_error"
        await update.effective_message.reply_text(t(key))


def create_application(deps: BotDependencies) -> Application:
    """Create and configure the bot application."""

    application = (
        Application.builder()
        .token(config.TELEGRAM_BOT_TOKEN)
        .connect_timeout(config.TELEGRAM_CONNECT_TIMEOUT)
        .read_timeout(config.TELEGRAM_READ_TIMEOUT)
        .write_timeout(config.TELEGRAM_WRITE_TIMEOUT)
        .concurrent_updates(True)
        .post_init(post_init)
        .build()
    )
    application.bot_data[BOT_DATA_KEY] = deps

    # ========================================================================
    # Register Handlers
    # ========================================================================

    # Basic commands
    application.add_handler(CommandHandler("start", start_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("help", help_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("cancel", cancel_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("capture_chat_id", capture_chat_id_command, filters=NEW_MESSAGES))

    # Marketing team
    application.add_handler(CommandHandler("add_marketing", add_marketing_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("remove_marketing", remove_marketing_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("list_marketing", list_marketing_command, filters=NEW_MESSAGES))

    # Departments (admin)
    application.add_handler(CommandHandler("list", list_department_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("register", register_command, filters=NEW_MESSAGES))

    # Events
    application.add_handler(CommandHandler("create", create_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("list_events", list_events_command, filters=NEW_MESSAGES))
    application.add_handler(CommandHandler("event", event_command, filters=NEW_MESSAGES))

    # Registration replies and event wizard answers; commands never get here
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND & NEW_MESSAGES, handle_message))

    application.add_error_handler(error_handler)

    logger.info("Application configured with all handlers")

    return application
