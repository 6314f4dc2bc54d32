"""
Bot Dependencies
================
Shared stores and services, kept in ``application.bot_data`` so every
handler uses the same registry and database pool.
"""

import logging
from dataclasses import dataclass

from telegram.ext import ContextTypes

import config
from data.chat_directory import ChatDirectory
from data.database import Database
from data.department_registry import DepartmentRegistry, DepartmentStore
from data.event_repository import EventRepository
from data.marketing_team import MarketingTeam
from data.state_store import StateStore
from services.broadcaster import Broadcaster
from services.conversation import ConversationEngine
from services.event_pipeline import EventPipeline
from services.pdf_generator import PDFGenerator

logger = logging.getLogger(__name__)

BOT_DATA_KEY = "deps"


@dataclass
class BotDependencies:
    state_store: StateStore
    registry: DepartmentRegistry
    marketing_team: MarketingTeam
    chat_directory: ChatDirectory
    events: EventRepository
    engine: ConversationEngine
    pipeline: EventPipeline
    admin_user_id: int = config.ADMIN_USER_ID

    def is_admin(self, user_id: int) -> bool:
        return user_id == self.admin_user_id


def build_dependencies(database: Database) -> BotDependencies:
    """Wire stores and services on top of one database."""
    registry = DepartmentRegistry.load(config.DEPARTMENT_NAMES, DepartmentStore(database))
    events = EventRepository(database)
    pipeline = EventPipeline(
        repository=events,
        pdf_generator=PDFGenerator(),
        broadcaster=Broadcaster(),
        registry=registry,
    )
    return BotDependencies(
        state_store=StateStore(database),
        registry=registry,
        marketing_team=MarketingTeam(database),
        chat_directory=ChatDirectory(database),
        events=events,
        engine=ConversationEngine(registry),
        pipeline=pipeline,
    )


def get_deps(context: ContextTypes.DEFAULT_TYPE) -> BotDependencies:
    return context.bot_data[BOT_DATA_KEY]
