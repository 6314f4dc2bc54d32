"""
Event Repository - Persisted catering events
============================================
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select

from data.database import Database, EventRow
from data.models import Event, EventDraft
from errors import ValidationError
from services.validator import validate_event

logger = logging.getLogger(__name__)


def _row_to_event(row: EventRow) -> Event:
    return Event(
        id=row.id,
        created_at=row.created_at,
        client_name=row.client_name,
        company_name=row.company_name,
        tin_number=row.company_tin,
        contact_number=row.contact_number,
        event_name=row.event_name,
        event_date=row.event_date,
        event_time=row.event_time,
        participants=row.participants,
        location=row.location,
        duration=row.duration,
        services=row.services,
    )


class EventRepository:
    """Stores events and assigns their id and creation time."""

    def __init__(self, database: Database):
        self.database = database

    def create(self, draft: EventDraft) -> Event:
        """Persist a validated draft and return the stored event."""
        result = validate_event(draft)
        if not result.valid:
            raise ValidationError(result.error)

        # DATETIME columns keep whole seconds
        created_at = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
        with self.database.session() as session:
            row = EventRow(
                client_name=draft.client_name,
                company_name=draft.company_name,
                company_tin=draft.tin_number,
                contact_number=draft.contact_number,
                event_name=draft.event_name,
                event_date=draft.event_date,
                event_time=draft.event_time,
                participants=draft.participants,
                location=draft.location,
                duration=draft.duration,
                services=draft.services,
                created_at=created_at,
            )
            session.add(row)
            session.flush()
            event = Event.from_draft(row.id, created_at, draft)

        logger.info(f"Created event {event.id} ({event.event_name}) for {event.company_name}")
        return event

    def get_by_id(self, event_id: int) -> Optional[Event]:
        with self.database.session() as session:
            row = session.get(EventRow, event_id)
            return _row_to_event(row) if row else None

    def list_all(self) -> list[Event]:
        with self.database.session() as session:
            return [_row_to_event(row) for row in session.scalars(select(EventRow))]
