"""
State Store - Per-user conversation state
=========================================
Keeps one opaque state token per Telegram user. The token format is owned
by bot.states; this module only reads and writes strings.
"""

import logging
from typing import Optional

from data.database import Database, UserStateRow

logger = logging.getLogger(__name__)


class StateStore:
    """Persists conversation state tokens keyed by user id."""

    def __init__(self, database: Database):
        self.database = database

    def get(self, user_id: int) -> Optional[str]:
        """Get the user's token, or None when nothing is recorded."""
        with self.database.session() as session:
            row = session.get(UserStateRow, user_id)
            return row.state if row else None

    def set(self, user_id: int, token: str):
        """Store a token, replacing any previous one."""
        with self.database.session() as session:
            session.merge(UserStateRow(user_id=user_id, state=token))
        logger.debug(f"State for user {user_id} set to {token[:40]!r}")

    def clear(self, user_id: int):
        """Forget the user's state."""
        with self.database.session() as session:
            row = session.get(UserStateRow, user_id)
            if row:
                session.delete(row)
