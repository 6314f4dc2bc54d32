"""
Language Support Module
=======================
Load and manage language strings for the bot.
"""

import importlib
import logging

from errors import ConfigurationError

logger = logging.getLogger(__name__)

# Default language
DEFAULT_LANGUAGE = "en"

# Current loaded strings
_current_strings: dict = {}


def load_language(lang_code: str):
    """
    Load the strings of ``lang/<lang_code>.py``.

    Raises:
        ConfigurationError: no strings module exists for ``lang_code``
    """
    global _current_strings

    try:
        module = importlib.import_module(f"lang.{lang_code}")
    except ModuleNotFoundError as e:
        raise ConfigurationError(f"Unsupported BOT_LANGUAGE: {lang_code}") from e

    _current_strings = module.STRINGS
    logger.info(f"Loaded language: {lang_code}")


def get(key: str, **kwargs) -> str:
    """
    Get a localized string by key.

    Args:
        key: The string key
        **kwargs: Format arguments

    Returns:
        The localized string, or the key if not found
    """
    text = _current_strings.get(key, key)

    if kwargs:
        try:
            text = text.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Missing format key {e} for string '{key}'")

    return text


# Shortcut alias
_ = get


# Initialize with default language
load_language(DEFAULT_LANGUAGE)
