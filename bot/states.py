"""
Conversation States
===================
Per-user state between messages: Idle, Registering or CreatingEvent.
Stored as a string token; encode/decode happen only at the store boundary.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from data.models import EventDraft
from errors import MalformedStateError

logger = logging.getLogger(__name__)

REGISTERING_TAG = "registering"
CREATING_EVENT_TAG = "creating_event"


@dataclass(frozen=True)
class Idle:
    """No conversation in progress."""


@dataclass(frozen=True)
class Registering:
    """Waiting for a department name."""


@dataclass(frozen=True)
class CreatingEvent:
    """Collecting event fields one message at a time."""
    draft: EventDraft = field(default_factory=EventDraft)


ConversationState = Union[Idle, Registering, CreatingEvent]


def encode_state(state: ConversationState) -> Optional[str]:
    """Token for the state store, or None for Idle."""
    if isinstance(state, Registering):
        return REGISTERING_TAG
    if isinstance(state, CreatingEvent):
        return f"{CREATING_EVENT_TAG}:{json.dumps(state.draft.to_dict(), ensure_ascii=False)}"
    return None


def parse_draft(payload: str) -> EventDraft:
    """Decode a serialized draft, raising MalformedStateError on bad input."""
    payload = payload.strip()
    if not payload:
        return EventDraft()
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedStateError(f"Draft is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedStateError(f"Draft must be an object, got {type(data).__name__}")
    return EventDraft.from_dict(data)


def decode_state(token: Optional[str]) -> ConversationState:
    """State for a stored token. Never fails: bad drafts become empty drafts."""
    if not token:
        return Idle()
    tag, _, payload = token.partition(":")
    tag = tag.strip()
    if tag == REGISTERING_TAG:
        return Registering()
    if tag == CREATING_EVENT_TAG:
        try:
            return CreatingEvent(parse_draft(payload))
        except MalformedStateError as e:
            logger.warning(f"Error parsing event state, starting from an empty draft: {e}")
            return CreatingEvent(EventDraft())
    logger.warning(f"Unknown conversation state {tag!r}, treating as idle")
    return Idle()
