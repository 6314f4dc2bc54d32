"""
Event Models - Drafts collected in chat and persisted events
============================================================
A draft is filled one field at a time, always in FIELD_ORDER.
"""

from dataclasses import dataclass, asdict, fields, replace
from datetime import datetime
from typing import Optional, Sequence


@dataclass(frozen=True)
class DraftField:
    """One step of the event wizard."""
    name: str  # EventDraft attribute
    prompt_key: str  # lang key of the question asking for it
    label: str  # Shown in summaries and documents


FIELDS: tuple[DraftField, ...] = (
    DraftField("client_name", "ask_client_name", "Client Name"),
    DraftField("company_name", "ask_company_name", "Company Name"),
    DraftField("tin_number", "ask_tin_number", "Company TIN no."),
    DraftField("contact_number", "ask_contact_number", "Contact Number"),
    DraftField("event_name", "ask_event_name", "Event Name"),
    DraftField("event_date", "ask_event_date", "Event Date"),
    DraftField("event_time", "ask_event_time", "Event Time"),
    DraftField("participants", "ask_participants", "Participants"),
    DraftField("location", "ask_location", "Location"),
    DraftField("duration", "ask_duration", "Duration"),
    DraftField("services", "ask_services", "Services"),
)

FIELD_ORDER: tuple[str, ...] = tuple(f.name for f in FIELDS)
FIELD_LABELS: dict[str, str] = {f.name: f.label for f in FIELDS}

# Keys used in the serialized draft
_JSON_KEYS = {
    "client_name": "clientName",
    "company_name": "companyName",
    "tin_number": "tinNumber",
    "contact_number": "contactNumber",
    "event_name": "eventName",
    "event_date": "eventDate",
    "event_time": "eventTime",
    "participants": "participants",
    "location": "location",
    "duration": "duration",
    "services": "services",
}


@dataclass(frozen=True)
class EventDraft:
    """An event being collected through the wizard.

    Fields are only ever set through ``with_next``, so the populated fields
    always form a prefix of FIELD_ORDER.
    """
    client_name: Optional[str] = None
    company_name: Optional[str] = None
    tin_number: Optional[str] = None
    contact_number: Optional[str] = None
    event_name: Optional[str] = None
    event_date: Optional[str] = None
    event_time: Optional[str] = None
    participants: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    services: Optional[str] = None

    def next_field(self) -> Optional[DraftField]:
        """The first empty field, or None when the draft is complete."""
        for field_ in FIELDS:
            if not getattr(self, field_.name):
                return field_
        return None

    def is_complete(self) -> bool:
        return self.next_field() is None

    def filled_count(self) -> int:
        field_ = self.next_field()
        return len(FIELDS) if field_ is None else FIELDS.index(field_)

    def with_next(self, value: str) -> "EventDraft":
        """Return a copy with the next empty field set to ``value``."""
        field_ = self.next_field()
        if field_ is None:
            raise ValueError("Draft is already complete")
        return replace(self, **{field_.name: value})

    def to_dict(self) -> dict:
        """Serialize the filled fields using camelCase keys."""
        return {
            _JSON_KEYS[name]: value
            for name, value in asdict(self).items()
            if value
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EventDraft":
        """Rebuild a draft, keeping only the contiguous prefix of string values."""
        draft = cls()
        for name in FIELD_ORDER:
            value = data.get(_JSON_KEYS[name])
            if not isinstance(value, str) or not value:
                break
            draft = draft.with_next(value)
        return draft


@dataclass
class Event:
    """A persisted catering event."""
    id: int
    created_at: datetime
    client_name: str
    company_name: str
    contact_number: str
    event_name: str
    event_date: str
    participants: str
    tin_number: Optional[str] = None
    event_time: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    services: Optional[str] = None

    @classmethod
    def from_draft(cls, id: int, created_at: datetime, draft: EventDraft) -> "Event":
        values = {f.name: getattr(draft, f.name) for f in fields(EventDraft)}
        return cls(id=id, created_at=created_at, **values)

    def labelled(self, names: Sequence[str], missing: str) -> list[tuple[str, str]]:
        """(label, value) pairs for the named fields; empty values read ``missing``."""
        return [(FIELD_LABELS[name], getattr(self, name) or missing) for name in names]

    def service_items(self) -> list[str]:
        """Services split into a list when given as comma-separated text."""
        if not self.services or "," not in self.services:
            return []
        return [item.strip() for item in self.services.split(",") if item.strip()]
