"""
Bot Handlers
============
Export all handlers for easy import.
"""

from bot.handlers.start import (
    start_command,
    help_command,
    cancel_command,
    capture_chat_id_command,
)

from bot.handlers.marketing import (
    add_marketing_command,
    remove_marketing_command,
    list_marketing_command,
)

from bot.handlers.departments import (
    list_department_command,
    register_command,
)

from bot.handlers.events import (
    create_command,
    handle_message,
    list_events_command,
    event_command,
)

__all__ = [
    # Start
    "start_command",
    "help_command",
    "cancel_command",
    "capture_chat_id_command",
    # Marketing
    "add_marketing_command",
    "remove_marketing_command",
    "list_marketing_command",
    # Departments
    "list_department_command",
    "register_command",
    # Events
    "create_command",
    "handle_message",
    "list_events_command",
    "event_command",
]
