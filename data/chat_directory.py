"""
Chat Directory - Username to chat id lookup
===========================================
Filled by /capture_chat_id so the admin can /register other users.
"""

import logging
from typing import Optional

from data.database import Database, UserChatRow
from data.marketing_team import normalize_username

logger = logging.getLogger(__name__)


class ChatDirectory:
    def __init__(self, database: Database):
        self.database = database

    def store(self, username: str, chat_id: int):
        username = normalize_username(username)
        with self.database.session() as session:
            session.merge(UserChatRow(username=username, chat_id=chat_id))
        logger.info(f"Stored chat ID for @{username}: {chat_id}")

    def lookup(self, username: str) -> Optional[int]:
        username = normalize_username(username)
        with self.database.session() as session:
            row = session.get(UserChatRow, username)
            return row.chat_id if row else None
