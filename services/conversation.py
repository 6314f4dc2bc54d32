"""
Conversation Engine
===================
Decides what a plain (non-command) message means for the user's current
state. It has no side effects: the caller persists the next state and
carries out the returned action.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from lang import _ as t
from bot.states import ConversationState, CreatingEvent, Idle, Registering
from data.department_registry import DepartmentRegistry
from data.models import FIELDS, EventDraft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterDepartment:
    """Register the sender's chat to a department."""
    department: str


@dataclass(frozen=True)
class CompleteEvent:
    """All fields are collected: validate, store, render and broadcast."""
    draft: EventDraft


Action = Union[RegisterDepartment, CompleteEvent]


@dataclass(frozen=True)
class Outcome:
    next_state: ConversationState
    reply: Optional[str] = None
    action: Optional[Action] = None


class ConversationEngine:
    """Registration and event-wizard transitions."""

    def __init__(self, registry: DepartmentRegistry):
        self.registry = registry

    def advance(self, user_id: int, text: str, state: ConversationState) -> Outcome:
        if isinstance(state, CreatingEvent):
            return self._collect_field(user_id, text, state.draft)
        return self._choose_department(user_id, text, state)

    def _choose_department(self, user_id: int, text: str, state: ConversationState) -> Outcome:
        department = self.registry.resolve(text)
        if department is None:
            logger.info(f"User {user_id} sent an unknown department {text.strip()[:40]!r}")
            return Outcome(
                next_state=state,
                reply=t("invalid_department", departments=", ".join(self.registry.names)),
            )
        return Outcome(next_state=Idle(), action=RegisterDepartment(department))

    def _collect_field(self, user_id: int, text: str, draft: EventDraft) -> Outcome:
        current = draft.next_field()
        if current is None:
            # A finished draft should never have been stored; start over
            logger.warning(f"User {user_id} had a complete draft in progress, restarting")
            draft = EventDraft()
            current = draft.next_field()

        value = text.strip()
        if not value:
            return Outcome(next_state=CreatingEvent(draft), reply=t(current.prompt_key))

        draft = draft.with_next(value)
        if draft.is_complete():
            logger.info(f"User {user_id} finished the event wizard")
            return Outcome(next_state=Idle(), action=CompleteEvent(draft))

        logger.debug(f"User {user_id} answered {current.name} ({draft.filled_count()}/{len(FIELDS)})")
        return Outcome(next_state=CreatingEvent(draft), reply=t(draft.next_field().prompt_key))


def start_event_creation() -> Outcome:
    """State and first question for /create."""
    first = EventDraft().next_field()
    return Outcome(next_state=CreatingEvent(), reply=t("create_welcome") + "\n\n" + t(first.prompt_key))
