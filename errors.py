"""
Errors
======
Failure types shared by the bot, the data layer and the services.
"""


class CateringBotError(Exception):
    """Base class for all bot errors."""


class ConfigurationError(CateringBotError):
    """A required setting is missing. Fatal at startup."""


class StorageError(CateringBotError):
    """The database could not be reached or a query failed."""


class ValidationError(CateringBotError):
    """A collected event draft is incomplete or badly formatted."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class MalformedStateError(CateringBotError):
    """A stored conversation state could not be decoded."""


class DeliveryError(CateringBotError):
    """Sending a broadcast to one recipient failed."""

    def __init__(self, department: str, chat_id: int, cause: Exception):
        super().__init__(f"Delivery to {department} ({chat_id}) failed: {cause}")
        self.department = department
        self.chat_id = chat_id
        self.cause = cause
