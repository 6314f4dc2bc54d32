"""
Event Pipeline - From a finished draft to a broadcast document
==============================================================
validate -> store -> render PDF -> send to creator -> broadcast
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from telegram import Bot

from data.department_registry import DepartmentRegistry
from data.event_repository import EventRepository
from data.models import Event, EventDraft
from errors import ValidationError
from lang import _ as t
from services.broadcaster import Broadcaster, DeliveryReport
from services.pdf_generator import PDFGenerator
from services.validator import validate_event

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    event: Event
    document_path: Path
    report: DeliveryReport


class EventPipeline:
    def __init__(
        self,
        repository: EventRepository,
        pdf_generator: PDFGenerator,
        broadcaster: Broadcaster,
        registry: DepartmentRegistry,
    ):
        self.repository = repository
        self.pdf_generator = pdf_generator
        self.broadcaster = broadcaster
        self.registry = registry

    async def run(self, bot: Bot, draft: EventDraft, creator_chat_id: int) -> PipelineResult:
        """Create and distribute an event.

        Raises ValidationError for bad drafts and StorageError when the event
        cannot be saved. Delivery failures are only logged.
        """
        result = validate_event(draft)
        if not result.valid:
            raise ValidationError(result.error)

        # Blocking storage and drawing calls run in worker threads
        event = await asyncio.to_thread(self.repository.create, draft)
        document_path = await asyncio.to_thread(self.pdf_generator.render, event, self.registry.names)

        try:
            with open(document_path, "rb") as doc_file:
                await bot.send_document(
                    chat_id=creator_chat_id,
                    document=doc_file,
                    filename=document_path.name,
                    caption=t("creator_caption", event_id=event.id, event_name=event.event_name),
                )
        except Exception as e:
            logger.error(f"Error sending event {event.id} PDF to creator {creator_chat_id}: {e}")

        report = await self.broadcaster.broadcast(bot, document_path, event, self.registry.snapshot())
        return PipelineResult(event=event, document_path=document_path, report=report)
