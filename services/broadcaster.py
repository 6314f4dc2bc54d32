"""
Broadcaster - Sends a new event to every registered department chat
===================================================================
Each recipient gets a summary message followed by the event PDF.
A failure for one recipient never stops delivery to the others.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Sequence

from telegram import Bot
from telegram.constants import ParseMode
from telegram.helpers import escape_markdown

from data.models import Event
from errors import DeliveryError
from lang import _ as t

logger = logging.getLogger(__name__)


# Escaping at most doubles a clipped value, so a summary fits one Telegram message
MAX_VALUE_LENGTH = 180

SUMMARY_FIELDS = (
    "event_name",
    "client_name",
    "company_name",
    "contact_number",
    "event_date",
    "event_time",
    "participants",
    "location",
    "duration",
    "services",
)


def escape(value) -> str:
    """Escape text for MarkdownV2."""
    return escape_markdown(str(value), version=2)


def clip(value, limit: int = MAX_VALUE_LENGTH) -> str:
    """Shorten ``value`` to ``limit`` characters, marking the cut with an ellipsis."""
    text = str(value)
    if len(text) <= limit:
        return text
    return text[:limit - 1].rstrip() + "…"


def format_event_message(event: Event) -> str:
    """MarkdownV2 summary of an event; every value is clipped and escaped."""
    rows = event.labelled(SUMMARY_FIELDS, t("not_specified"))
    lines = [f"*{escape(t('broadcast_title'))}*"]
    lines += [f"*{escape(label)}*: {escape(clip(value))}" for label, value in rows]
    lines += ["", escape(t("broadcast_footer"))]
    return "\n".join(lines)


@dataclass
class DeliveryResult:
    department: str
    chat_id: int
    delivered: bool
    error: Optional[str] = None


@dataclass
class DeliveryReport:
    """Outcome per (department, chat) pair."""
    event_id: int
    results: list[DeliveryResult] = field(default_factory=list)

    @property
    def delivered(self) -> list[DeliveryResult]:
        return [r for r in self.results if r.delivered]

    @property
    def failed(self) -> list[DeliveryResult]:
        return [r for r in self.results if not r.delivered]

    def summary(self) -> str:
        return f"event {self.event_id}: {len(self.delivered)} delivered, {len(self.failed)} failed"


class Broadcaster:
    """Delivers event summaries and documents, best effort, no retries."""

    async def send_to(self, bot: Bot, chat_id: int, message: str, document_path: Path, caption: str):
        await bot.send_message(chat_id=chat_id, text=message, parse_mode=ParseMode.MARKDOWN_V2)
        with open(document_path, "rb") as doc_file:
            await bot.send_document(
                chat_id=chat_id,
                document=doc_file,
                filename=Path(document_path).name,
                caption=caption,
            )

    async def broadcast(
        self,
        bot: Bot,
        document_path: Path,
        event: Event,
        departments: Mapping[str, Sequence[int]],
    ) -> DeliveryReport:
        message = format_event_message(event)
        caption = t("broadcast_caption", event_id=event.id)
        report = DeliveryReport(event_id=event.id)

        for department, chat_ids in departments.items():
            for chat_id in chat_ids:
                try:
                    await self.send_to(bot, chat_id, message, document_path, caption)
                except Exception as e:
                    error = DeliveryError(department, chat_id, e)
                    logger.error(f"Error sending event {event.id}: {error}")
                    report.results.append(DeliveryResult(department, chat_id, False, str(e)))
                else:
                    report.results.append(DeliveryResult(department, chat_id, True))

        logger.info(f"Broadcast {report.summary()}")
        return report
