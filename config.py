"""
Configuration settings for the Catering Event Bot
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

def _int_env(name: str, default: str):
    """Integer setting, or None when the value is not a number (reported by validate)."""
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return None


# Base directory
BASE_DIR = Path(__file__).parent

# Telegram settings
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")

# Only this user may run /list and /register
ADMIN_USER_ID = _int_env("ADMIN_USER_ID", "353435199")

# Database settings
DB_HOST = os.getenv("DB_HOST")
DB_PORT = _int_env("DB_PORT", "3306")
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_DATABASE = os.getenv("DB_DATABASE")
DB_CONNECTION_LIMIT = _int_env("DB_CONNECTION_LIMIT", "5")
DB_CONNECT_TIMEOUT = 10  # seconds

# Full SQLAlchemy URL; takes precedence over the DB_* values (e.g. sqlite:///catering.db)
DATABASE_URL = os.getenv("DATABASE_URL")

# Departments that can receive event broadcasts
DEPARTMENT_NAMES = [
    name.strip()
    for name in os.getenv("DEPARTMENT_NAMES", "").split(",")
    if name.strip()
]

# Documents
ASSETS_DIR = Path(os.getenv("ASSETS_DIR", str(BASE_DIR / "assets")))
LOGO_PATH = ASSETS_DIR / "logo.png"
SIGNATURES_DIR = ASSETS_DIR / "signatures"
PDF_DIR = Path(os.getenv("PDF_DIR", str(BASE_DIR / "pdfs")))

HOTEL_NAME = "Planet Hotel"

BILLING_INSTRUCTIONS = [
    "Please contact Mr. Merhawi Solomon for billing Instructions.",
    "Note: First Day: As per request. Subsequent Days: Based on the available number of Participants.",
]

# (role, name, signature image file in SIGNATURES_DIR)
APPROVERS = [
    ("Prepared By", "Merhawi Solomon (Marketing Manager)", "merhawi.png"),
    ("Approved By", "Kirubel Yirdaw (Operational Manager)", "kirubel.png"),
    ("Approved By", "Mulu Hadush (General Manager)", "mulu.png"),
]

# One list of lines per footer column: left, center, right
FOOTER_COLUMNS = [
    ["Phone: +251-93-028-5483", "Website: www.planethotelethiopia.com"],
    ["Email: contact@planethotelethiopia.com", "Address: Tigray, Ethiopia"],
    ["Fax: 0344405717", "Location: Hawelty street, Mekele"],
]

# Network timeouts for Telegram requests (seconds)
TELEGRAM_CONNECT_TIMEOUT = 10.0
TELEGRAM_READ_TIMEOUT = 30.0
TELEGRAM_WRITE_TIMEOUT = 60.0  # document uploads

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Language settings
# Options: "en" (English)
BOT_LANGUAGE = os.getenv("BOT_LANGUAGE", "en")


def validate():
    """Fail fast when a required setting is missing."""
    missing = []
    if not TELEGRAM_BOT_TOKEN:
        missing.append("TELEGRAM_BOT_TOKEN")
    if not DEPARTMENT_NAMES:
        missing.append("DEPARTMENT_NAMES")
    if not DATABASE_URL:
        for name in ("DB_HOST", "DB_USER", "DB_DATABASE"):
            if not globals()[name]:
                missing.append(name)
    if missing:
        raise ConfigurationError(f"Missing settings in .env file: {', '.join(missing)}")

    invalid = [
        name for name in ("ADMIN_USER_ID", "DB_PORT", "DB_CONNECTION_LIMIT")
        if globals()[name] is None
    ]
    if invalid:
        raise ConfigurationError(f"Settings must be whole numbers: {', '.join(invalid)}")
