#!/usr/bin/env python3
"""
Catering Event Bot - Telegram bot for hotel catering events
===========================================================
Entry point for the application.

Usage:
    python main.py
"""

import logging
from telegram import Update

import config
import lang
from bot.app import create_application
from bot.dependencies import build_dependencies
from data.database import Database

# Setup logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
)
logger = logging.getLogger(__name__)

# Suppress httpx logging (contains bot token in URLs)
logging.getLogger("httpx").setLevel(logging.WARNING)


def main():
    """Start the bot."""
    # Validate configuration
    config.validate()

    # Load language
    lang.load_language(config.BOT_LANGUAGE)

    database = Database()
    database.create_tables()
    deps = build_dependencies(database)

    # Create and run application
    logger.info("Starting Hotel Catering Event Bot...")
    application = create_application(deps)

    logger.info("Bot is running! Press Ctrl+C to stop.")
    try:
        application.run_polling(allowed_updates=[Update.MESSAGE])
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
