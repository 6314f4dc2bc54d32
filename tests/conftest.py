"""Pytest configuration and shared fixtures."""

import asyncio
from dataclasses import replace
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from bot.dependencies import BOT_DATA_KEY, BotDependencies
from data.chat_directory import ChatDirectory
from data.database import Database
from data.department_registry import DepartmentRegistry, DepartmentStore
from data.event_repository import EventRepository
from data.marketing_team import MarketingTeam
from data.models import EventDraft
from data.state_store import StateStore
from services.broadcaster import Broadcaster
from services.conversation import ConversationEngine
from services.event_pipeline import EventPipeline
from services.pdf_generator import PDFGenerator

DEPARTMENTS = ["Kitchen", "Housekeeping", "Front Office", "Security"]
ADMIN_ID = 1000

ANSWERS = [
    "Abebe Kebede",
    "Acme Trading",
    "0012345678",
    "+251911000000",
    "Annual Meeting",
    "2025-03-14",
    "09:30",
    "50",
    "Main Hall",
    "Full Day",
    "Coffee break, Lunch, Projector",
]


def run(coro):
    return asyncio.run(coro)


def complete_draft(**overrides) -> EventDraft:
    draft = EventDraft()
    for answer in ANSWERS:
        draft = draft.with_next(answer)
    return replace(draft, **overrides)


@pytest.fixture
def database() -> Database:
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def registry(database) -> DepartmentRegistry:
    return DepartmentRegistry.load(DEPARTMENTS, DepartmentStore(database))


@pytest.fixture
def pdf_generator(tmp_path) -> PDFGenerator:
    return PDFGenerator(
        output_dir=tmp_path / "pdfs",
        logo_path=tmp_path / "assets" / "logo.png",
        signatures_dir=tmp_path / "assets" / "signatures",
    )


@pytest.fixture
def deps(database, registry, pdf_generator) -> BotDependencies:
    events = EventRepository(database)
    return BotDependencies(
        state_store=StateStore(database),
        registry=registry,
        marketing_team=MarketingTeam(database),
        chat_directory=ChatDirectory(database),
        events=events,
        engine=ConversationEngine(registry),
        pipeline=EventPipeline(events, pdf_generator, Broadcaster(), registry),
        admin_user_id=ADMIN_ID,
    )


@pytest.fixture
def fake_bot():
    bot = MagicMock()
    bot.send_message = AsyncMock()
    bot.send_document = AsyncMock()
    return bot


@pytest.fixture
def make_context(deps, fake_bot):
    def _make(*args: str):
        return SimpleNamespace(bot_data={BOT_DATA_KEY: deps}, bot=fake_bot, args=list(args))
    return _make


def make_update(text: str = "", user_id: int = 42, chat_id: int = 4242, username: str = "planner"):
    message = MagicMock()
    message.text = text
    message.reply_text = AsyncMock()
    return SimpleNamespace(
        message=message,
        effective_message=message,
        effective_user=SimpleNamespace(id=user_id, username=username, first_name="Test"),
        effective_chat=SimpleNamespace(id=chat_id),
    )


def replies(update) -> list[str]:
    """Texts sent back through reply_text, in order."""
    return [call.args[0] for call in update.message.reply_text.call_args_list]
