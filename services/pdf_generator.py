"""
PDF Generator - Catering event order documents
==============================================
Builds the page content as a list of blocks first, then draws the blocks
with fpdf2. The same event and assets always give the same blocks.
"""

import logging
import math
import os
from dataclasses import dataclass
from datetime import timezone
from pathlib import Path
from typing import Optional, Sequence

from fpdf import FPDF
from fpdf.enums import XPos, YPos

import config
from data.models import Event
from lang import _ as t

logger = logging.getLogger(__name__)

HEADING_COLOR = (0, 0, 255)
FOOTER_COLOR = (128, 128, 128)
GRID_COLUMNS = 3

CLIENT_FIELDS = ("client_name", "company_name", "tin_number", "contact_number")
DETAIL_FIELDS = ("event_name", "event_date", "event_time", "participants", "location", "duration")


def _find_unicode_font() -> Optional[str]:
    """Find a Unicode TTF font on the system."""
    font_paths = [
        config.ASSETS_DIR / "DejaVuSans.ttf",
        # Linux
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
        "/usr/share/fonts/TTF/DejaVuSans.ttf",
        # macOS
        "/Library/Fonts/Arial Unicode.ttf",
        "/System/Library/Fonts/Supplemental/Arial.ttf",
    ]
    for path in font_paths:
        if os.path.exists(path):
            return str(path)
    return None


@dataclass(frozen=True)
class Block:
    """One piece of the document, in page order."""
    kind: str  # letterhead, meta, bullets, text, approvals, grid, footer
    title: str = ""
    lines: tuple[str, ...] = ()
    images: tuple[Optional[str], ...] = ()  # one per line for approvals
    columns: tuple[tuple[str, ...], ...] = ()


class EventPDF(FPDF):
    """A4 document with a Unicode font when one is available."""

    def __init__(self):
        super().__init__(orientation="P", unit="mm", format="A4")
        self._font_name = "helvetica"  # fallback
        self.unicode = False

        font_path = _find_unicode_font()
        if font_path:
            try:
                bold_path = font_path.replace(".ttf", "-Bold.ttf")
                self.add_font("UniFont", "", font_path)
                self.add_font("UniFont", "B", bold_path if os.path.exists(bold_path) else font_path)
                self._font_name = "UniFont"
                self.unicode = True
            except Exception as e:
                logger.warning(f"Could not load font {font_path}: {e}")

    @property
    def bullet(self) -> str:
        return "•" if self.unicode else "-"

    def set_doc_font(self, style="", size=10):
        self.set_font(self._font_name, style, size)

    def safe(self, text: str) -> str:
        """Core fonts only cover latin-1."""
        if self.unicode:
            return text
        return text.encode("latin-1", "replace").decode("latin-1")

    def footer(self):
        self.set_y(-12)
        self.set_doc_font("", 8)
        self.set_text_color(*FOOTER_COLOR)
        self.cell(0, 8, f"{t('doc_page')} {self.page_no()}", align="C")
        self.set_text_color(0, 0, 0)


class PDFGenerator:
    """Renders a stored event into a PDF file."""

    def __init__(
        self,
        output_dir: Path = config.PDF_DIR,
        logo_path: Path = config.LOGO_PATH,
        signatures_dir: Path = config.SIGNATURES_DIR,
    ):
        self.output_dir = Path(output_dir)
        self.logo_path = Path(logo_path)
        self.signatures_dir = Path(signatures_dir)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def build_layout(self, event: Event, department_names: Sequence[str]) -> list[Block]:
        not_specified = t("not_specified")
        blocks = []

        if self.logo_path.exists():
            blocks.append(Block("letterhead", images=(str(self.logo_path),)))

        blocks.append(Block("meta", lines=(
            f"{t('doc_event_id')}:  {event.id}",
            f"{t('doc_date')}: {event.created_at:%Y-%m-%d}",
        )))

        client_rows = event.labelled(CLIENT_FIELDS, not_specified)
        blocks.append(Block("bullets", t("doc_client_info"), tuple(
            f"{label}: {value}" for label, value in client_rows
        )))

        detail_rows = event.labelled(DETAIL_FIELDS, not_specified)
        blocks.append(Block("bullets", t("doc_event_details"), tuple(
            f"{label}: {value}" for label, value in detail_rows
        )))

        items = event.service_items()
        if items:
            blocks.append(Block("bullets", t("doc_services"), tuple(items)))
        else:
            blocks.append(Block("text", t("doc_services"), (event.services or not_specified,)))

        blocks.append(Block("bullets", t("doc_billing"), tuple(config.BILLING_INSTRUCTIONS)))

        lines, images = [], []
        for role, name, signature in config.APPROVERS:
            lines.append(f"{role}: {name}")
            path = self.signatures_dir / signature
            images.append(str(path) if path.exists() else None)
        blocks.append(Block("approvals", t("doc_approval"), tuple(lines), tuple(images)))

        blocks.append(Block("grid", t("doc_cc_departments"), tuple(department_names)))

        blocks.append(Block("footer", columns=tuple(tuple(c) for c in config.FOOTER_COLUMNS)))
        return blocks

    def file_name(self, event: Event) -> str:
        """<company>_<date>_<id>.pdf with unsafe characters removed."""
        def clean(value: str) -> str:
            kept = "".join(c for c in value if c.isalnum() or c in (" ", "-", "_")).strip()
            return kept[:40].replace(" ", "_")

        return f"{clean(event.company_name) or 'event'}_{clean(event.event_date)}_{event.id}.pdf"

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def render(self, event: Event, department_names: Sequence[str]) -> Path:
        """Write the event PDF and return its path."""
        blocks = self.build_layout(event, department_names)

        pdf = EventPDF()
        pdf.set_title(f"{event.event_name} - {event.company_name}")
        pdf.set_author(config.HOTEL_NAME)
        pdf.set_creation_date(event.created_at.replace(tzinfo=timezone.utc))
        pdf.set_auto_page_break(auto=True, margin=18)
        pdf.add_page()

        draw = {
            "letterhead": self._draw_letterhead,
            "meta": self._draw_meta,
            "bullets": self._draw_bullets,
            "text": self._draw_text,
            "approvals": self._draw_approvals,
            "grid": self._draw_grid,
            "footer": self._draw_footer,
        }
        for block in blocks:
            draw[block.kind](pdf, block)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.output_dir / self.file_name(event)
        pdf.output(str(filepath))
        logger.info(f"Event PDF saved: {filepath}")
        return filepath

    def _heading(self, pdf: EventPDF, title: str):
        pdf.set_doc_font("B", 12)
        pdf.set_text_color(*HEADING_COLOR)
        pdf.cell(0, 8, pdf.safe(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)
        pdf.set_doc_font("", 10)

    def _draw_letterhead(self, pdf: EventPDF, block: Block):
        pdf.set_y(5)
        try:
            # Flowing placement moves the cursor below the image
            pdf.image(block.images[0], x=pdf.l_margin, w=pdf.epw)
        except Exception as e:
            logger.warning(f"Could not add letterhead: {e}")
            pdf.set_y(pdf.t_margin)
            return
        pdf.ln(2)
        pdf.line(pdf.l_margin, pdf.get_y(), pdf.l_margin + pdf.epw, pdf.get_y())
        pdf.ln(4)

    def _draw_meta(self, pdf: EventPDF, block: Block):
        pdf.set_doc_font("", 9)
        for line in block.lines:
            pdf.cell(0, 5, pdf.safe(line), align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    def _draw_bullets(self, pdf: EventPDF, block: Block):
        self._heading(pdf, block.title)
        for line in block.lines:
            pdf.set_x(pdf.l_margin + 7)
            pdf.multi_cell(pdf.epw - 7, 6, pdf.safe(f"{pdf.bullet} {line}"),
                           new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    def _draw_text(self, pdf: EventPDF, block: Block):
        self._heading(pdf, block.title)
        for line in block.lines:
            pdf.multi_cell(0, 6, pdf.safe(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    def _draw_approvals(self, pdf: EventPDF, block: Block):
        self._heading(pdf, block.title)
        signature_x = pdf.l_margin + pdf.epw / 3 + 50
        for line, image in zip(block.lines, block.images):
            line_y = pdf.get_y()
            pdf.cell(0, 8, pdf.safe(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            if image:
                try:
                    # Overlay the signature on the approver line
                    pdf.image(image, x=signature_x, y=line_y - 6, w=24)
                except Exception as e:
                    logger.warning(f"Could not add signature {image}: {e}")
            pdf.ln(4)
        pdf.ln(2)

    def _draw_grid(self, pdf: EventPDF, block: Block):
        self._heading(pdf, block.title)
        names = list(block.lines)
        rows = math.ceil(len(names) / GRID_COLUMNS)
        col_width = pdf.epw / GRID_COLUMNS
        # Fill column by column
        for row in range(rows):
            for col in range(GRID_COLUMNS):
                index = col * rows + row
                name = names[index] if index < len(names) else ""
                pdf.cell(col_width, 6, pdf.safe(name))
            pdf.ln(6)
        pdf.ln(4)

    def _draw_footer(self, pdf: EventPDF, block: Block):
        pdf.line(pdf.l_margin, pdf.get_y(), pdf.l_margin + pdf.epw, pdf.get_y())
        pdf.ln(3)
        pdf.set_doc_font("", 8)
        pdf.set_text_color(*FOOTER_COLOR)
        col_width = pdf.epw / len(block.columns)
        aligns = ("L", "C", "R")
        depth = max(len(column) for column in block.columns)
        for row in range(depth):
            for col, column in enumerate(block.columns):
                text = column[row] if row < len(column) else ""
                pdf.cell(col_width, 5, pdf.safe(text), align=aligns[col % len(aligns)])
            pdf.ln(5)
        pdf.set_text_color(0, 0, 0)
