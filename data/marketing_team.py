"""
Marketing Team - Users allowed to create events
===============================================
"""

import logging

from sqlalchemy import select

from data.database import Database, MarketingMemberRow

logger = logging.getLogger(__name__)


def normalize_username(username: str) -> str:
    """Usernames are case-insensitive and stored without the leading '@'."""
    return (username or "").strip().lstrip("@").lower()


class MarketingTeam:
    """Set of Telegram usernames (without '@') that may run /create."""

    def __init__(self, database: Database):
        self.database = database

    def is_member(self, username: str) -> bool:
        username = normalize_username(username)
        if not username:
            return False
        with self.database.session() as session:
            return session.get(MarketingMemberRow, username) is not None

    def add(self, username: str) -> bool:
        """Add a member. Returns False if already present."""
        username = normalize_username(username)
        with self.database.session() as session:
            if session.get(MarketingMemberRow, username) is not None:
                return False
            session.add(MarketingMemberRow(username=username))
        logger.info(f"Added @{username} to the marketing team")
        return True

    def remove(self, username: str) -> bool:
        """Remove a member. Returns False if not present."""
        username = normalize_username(username)
        with self.database.session() as session:
            row = session.get(MarketingMemberRow, username)
            if row is None:
                return False
            session.delete(row)
        logger.info(f"Removed @{username} from the marketing team")
        return True

    def list_members(self) -> list[str]:
        with self.database.session() as session:
            return list(session.scalars(select(MarketingMemberRow.username)))
