"""
Event Handlers
==============
/create starts the wizard; plain messages drive registration and the
wizard through the conversation engine; /list_events and /event read
stored events.
"""

import logging
from telegram import Update
from telegram.constants import MessageLimit, ParseMode
from telegram.ext import ContextTypes

from lang import _ as t
from bot.dependencies import BotDependencies, get_deps
from bot.states import Idle, decode_state, encode_state
from data.models import Event, EventDraft
from errors import StorageError, ValidationError
from services.broadcaster import clip, escape, format_event_message
from services.conversation import CompleteEvent, Outcome, RegisterDepartment, start_event_creation

logger = logging.getLogger(__name__)


# ============================================================================
# Event creation
# ============================================================================

async def create_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Start the event wizard (marketing team only)."""
    deps = get_deps(context)
    user = update.effective_user

    if not user.username:
        await update.message.reply_text(t("username_required"))
        return

    if not deps.marketing_team.is_member(user.username):
        await update.message.reply_text(t("marketing_only"))
        return

    outcome = start_event_creation()
    deps.state_store.set(user.id, encode_state(outcome.next_state))
    logger.info(f"User {user.id} (@{user.username}) started creating an event")
    await update.message.reply_text(outcome.reply)


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Feed a non-command text message to the conversation engine."""
    deps = get_deps(context)
    user_id = update.effective_user.id
    chat_id = update.effective_chat.id
    text = update.message.text or ""

    if text.startswith("/"):
        return

    state = decode_state(deps.state_store.get(user_id))
    outcome = deps.engine.advance(user_id, text, state)

    # The next state is saved before any action runs
    if outcome.next_state != state:
        save_state(deps, user_id, outcome)

    if outcome.reply:
        await update.message.reply_text(outcome.reply)

    if isinstance(outcome.action, RegisterDepartment):
        department = outcome.action.department
        if deps.registry.register(department, chat_id):
            await update.message.reply_text(t("registered", department=department))
        else:
            await update.message.reply_text(t("already_registered", department=department))

    elif isinstance(outcome.action, CompleteEvent):
        await complete_event(update, context, outcome.action.draft)


def save_state(deps: BotDependencies, user_id: int, outcome: Outcome):
    if isinstance(outcome.next_state, Idle):
        deps.state_store.clear(user_id)
    else:
        deps.state_store.set(user_id, encode_state(outcome.next_state))


async def complete_event(update: Update, context: ContextTypes.DEFAULT_TYPE, draft: EventDraft):
    """Store, render and broadcast a finished draft, reporting the result."""
    deps = get_deps(context)
    await update.message.reply_text(t("creating_event"))

    try:
        result = await deps.pipeline.run(context.bot, draft, update.effective_chat.id)
    except ValidationError as e:
        logger.info(f"Event from user {update.effective_user.id} rejected: {e.reason}")
        await update.message.reply_text(t("event_invalid", reason=e.reason))
        return
    except StorageError as e:
        logger.error(f"Could not store event: {e}")
        await update.message.reply_text(t("event_storage_error"))
        return

    if result.report.failed:
        logger.warning(f"Event {result.event.id} not delivered to {len(result.report.failed)} chats")
    await update.message.reply_text(t("event_created"))


# ============================================================================
# Event listing
# ============================================================================

def format_event_entry(event: Event) -> str:
    """MarkdownV2 entry for /list_events."""
    not_specified = t("not_specified")
    lines = [
        f"*Event:* {escape(clip(event.event_name))} \\(\\#{event.id}\\)",
        f"*Date:* {escape(clip(event.event_date))}",
        f"*Time:* {escape(clip(event.event_time or not_specified))}",
        f"*Participants:* {escape(clip(event.participants))}",
        f"*Location:* {escape(clip(event.location or not_specified))}",
    ]
    if event.services:
        lines.append(f"*Services:* {escape(clip(event.services))}")
    return "\n".join(lines)


def chunk_messages(title: str, entries: list[str], limit: int = MessageLimit.MAX_TEXT_LENGTH) -> list[str]:
    """Join entries into as few messages as fit under Telegram's length limit.

    Each entry must fit on its own; the title never shares a message that
    would overflow.
    """
    messages = []
    current = title
    for entry in entries:
        candidate = f"{current}\n\n{entry}"
        if len(candidate) > limit:
            messages.append(current)
            candidate = entry
        current = candidate
    messages.append(current)
    return messages


async def list_events_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    deps = get_deps(context)
    events = deps.events.list_all()

    if not events:
        await update.message.reply_text(t("no_events"))
        return

    entries = [format_event_entry(event) for event in events]
    for message in chunk_messages(escape(t("events_title")), entries):
        await update.message.reply_text(message, parse_mode=ParseMode.MARKDOWN_V2)


async def event_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Show one stored event: /event <id>."""
    deps = get_deps(context)
    args = context.args or []

    if len(args) != 1 or not args[0].isdigit():
        await update.message.reply_text(t("event_usage"))
        return

    event = deps.events.get_by_id(int(args[0]))
    if event is None:
        await update.message.reply_text(t("event_not_found", event_id=args[0]))
        return

    await update.message.reply_text(format_event_message(event), parse_mode=ParseMode.MARKDOWN_V2)
