"""
Data Package
============
Database access: conversation state, departments, marketing team, events.
"""

from data.models import EventDraft, Event, FIELDS
from data.database import Database
from data.state_store import StateStore
from data.department_registry import DepartmentRegistry, DepartmentStore
from data.marketing_team import MarketingTeam
from data.chat_directory import ChatDirectory
from data.event_repository import EventRepository

__all__ = [
    "EventDraft",
    "Event",
    "FIELDS",
    "Database",
    "StateStore",
    "DepartmentRegistry",
    "DepartmentStore",
    "MarketingTeam",
    "ChatDirectory",
    "EventRepository",
]
