"""
Page layout for the negotiation report.

The composer walks a fixed sequence of sections (cover, charts, narrative,
consolidated) and turns them into pages of positioned primitives. Positions
are millimetres from the top-left corner of an A4 page; export_pdf renders
them. Nothing here touches reportlab's canvas, so a layout can be inspected
(and tested) without producing a PDF.

Overflow rules:
  - text is checked line by line; a line that would start below the bottom
    limit goes to a new page, so paragraphs may split between lines but a
    line never splits;
  - images are never split; one that would cross the bottom limit moves to a
    new page unless the page is still empty;
  - a missing or unreadable chart is skipped and logged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from typing import Callable, Optional

from PIL import Image as PILImage
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

import settings
from logging_setup import get_logger
from metrics import aggregate
from narrative import describe_consolidated, describe_entry

logger = get_logger("ecotrack.composer")

ChartSource = Callable[[str], Optional[bytes]]


class Section(Enum):
    COVER = "cover"
    CHARTS = "charts"
    NARRATIVE = "narrative"
    CONSOLIDATED = "consolidated"
    DONE = "done"


_SECTION_ORDER = list(Section)


@dataclass(frozen=True)
class TextLine:
    x: float
    y: float
    text: str
    font: str = settings.FONT
    size: float = settings.BODY_SIZE
    align: str = "left"


@dataclass(frozen=True)
class ImageBlock:
    x: float
    y: float
    width: float
    height: float
    data: bytes = field(repr=False)
    name: str = ""


@dataclass
class Page:
    primitives: list = field(default_factory=list)

    def lines(self) -> list[str]:
        return [p.text for p in self.primitives if isinstance(p, TextLine)]

    def images(self) -> list[ImageBlock]:
        return [p for p in self.primitives if isinstance(p, ImageBlock)]


@dataclass
class ComposedDocument:
    pages: list[Page]

    def lines(self) -> list[str]:
        return [line for page in self.pages for line in page.lines()]


@dataclass
class DocumentCursor:
    page_index: int = 0
    y: float = settings.COVER_TITLE_Y
    bottom: float = settings.BOTTOM_LIMIT
    column_width: float = settings.COLUMN_WIDTH


def text_width(text: str, font_name: str = settings.FONT, font_size: float = settings.BODY_SIZE) -> float:
    """Rendered width of ``text`` in millimetres."""
    return stringWidth(text, font_name, font_size) / mm


def _split_long_word(word: str, max_width: float, font_name: str, font_size: float) -> list[str]:
    pieces = []
    chunk = ""
    for ch in word:
        if chunk and text_width(chunk + ch, font_name, font_size) > max_width:
            pieces.append(chunk)
            chunk = ch
        else:
            chunk += ch
    if chunk:
        pieces.append(chunk)
    return pieces


def wrap_text(
    text: str,
    max_width: float = settings.COLUMN_WIDTH,
    font_name: str = settings.FONT,
    font_size: float = settings.BODY_SIZE,
) -> list[str]:
    """
    Greedy word wrap: each returned line fits ``max_width`` (mm) in the given
    font. A single word wider than the column is broken between characters.
    """
    lines: list[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if text_width(candidate, font_name, font_size) <= max_width:
            current = candidate
            continue

        if current:
            lines.append(current)
            current = ""

        if text_width(word, font_name, font_size) <= max_width:
            current = word
        else:
            pieces = _split_long_word(word, max_width, font_name, font_size)
            lines.extend(pieces[:-1])
            current = pieces[-1]

    if current:
        lines.append(current)
    return lines


def image_size(data: bytes):
    """(width, height) in pixels, or None when the bytes are not an image."""
    try:
        with PILImage.open(BytesIO(data)) as im:
            w, h = im.size
    except (OSError, ValueError) as e:
        logger.warning("unreadable chart image: %s", e)
        return None
    if not w or not h:
        return None
    return w, h


class DocumentComposer:
    """Single-use layout state machine: cover -> charts -> narrative -> consolidated -> done."""

    def __init__(self, cursor: DocumentCursor | None = None):
        self.section = Section.COVER
        self.cursor = cursor or DocumentCursor()
        self.pages: list[Page] = [Page()]

    # ----------------------------
    # state / page handling
    # ----------------------------
    def _enter(self, section: Section) -> None:
        if self.section is Section.DONE:
            raise ValueError("composer already finished")
        expected = _SECTION_ORDER[_SECTION_ORDER.index(self.section) + 1]
        if section is not expected:
            raise ValueError(f"cannot move from {self.section.value} to {section.value}")
        self.section = section

    def _require(self, section: Section) -> None:
        if self.section is not section:
            raise ValueError(f"operation requires section {section.value}, composer is in {self.section.value}")

    @property
    def page(self) -> Page:
        return self.pages[self.cursor.page_index]

    def new_page(self) -> None:
        self.pages.append(Page())
        self.cursor.page_index += 1
        self.cursor.y = settings.TOP_MARGIN

    def _page_is_fresh(self) -> bool:
        return not self.page.images() and self.cursor.y <= settings.TOP_MARGIN

    def gap(self, amount: float) -> None:
        self.cursor.y += amount
        if self.cursor.y > self.cursor.bottom:
            self.new_page()

    # ----------------------------
    # placement
    # ----------------------------
    def place_title(self, title: str) -> None:
        self._require(Section.COVER)
        self.page.primitives.append(
            TextLine(
                x=settings.PAGE_WIDTH / 2,
                y=self.cursor.y,
                text=title,
                font=settings.FONT_BOLD,
                size=settings.TITLE_SIZE,
                align="center",
            )
        )
        self.cursor.y += settings.COVER_TITLE_GAP

    def begin_charts(self) -> None:
        self._enter(Section.CHARTS)

    def place_image(self, data: bytes, name: str = "") -> bool:
        """Scale to the fixed width, keep the aspect ratio. False if skipped."""
        self._require(Section.CHARTS)
        size = image_size(data)
        if size is None:
            return False

        w, h = size
        height = settings.IMAGE_WIDTH * h / float(w)
        if self.cursor.y + height > self.cursor.bottom and not self._page_is_fresh():
            self.new_page()

        self.page.primitives.append(
            ImageBlock(
                x=settings.IMAGE_X,
                y=self.cursor.y,
                width=settings.IMAGE_WIDTH,
                height=height,
                data=data,
                name=name,
            )
        )
        self.cursor.y += height + settings.IMAGE_GAP
        return True

    def begin_narrative(self, heading: str = settings.NARRATIVE_HEADING) -> None:
        self._enter(Section.NARRATIVE)
        self.new_page()
        self.page.primitives.append(
            TextLine(
                x=settings.PAGE_WIDTH / 2,
                y=self.cursor.y,
                text=heading,
                size=settings.HEADING_SIZE,
                align="center",
            )
        )
        self.cursor.y += settings.HEADING_GAP

    def place_line(self, text: str) -> None:
        if self.cursor.y > self.cursor.bottom:
            self.new_page()
        self.page.primitives.append(TextLine(x=settings.TEXT_X, y=self.cursor.y, text=text))
        self.cursor.y += settings.LINE_HEIGHT

    def place_paragraphs(self, fragments) -> None:
        if self.section not in (Section.NARRATIVE, Section.CONSOLIDATED):
            raise ValueError(f"text placement not allowed in section {self.section.value}")
        for fragment in fragments:
            for line in wrap_text(fragment, self.cursor.column_width):
                self.place_line(line)

    def begin_consolidated(self) -> None:
        self._enter(Section.CONSOLIDATED)
        self.gap(settings.CONSOLIDATED_GAP)

    def finish(self) -> ComposedDocument:
        self._enter(Section.DONE)
        pages = list(self.pages)
        while len(pages) > 1 and not pages[-1].primitives:
            pages.pop()
        return ComposedDocument(pages=pages)


def _acquire(chart_source: ChartSource | None, name: str):
    if chart_source is None:
        return None
    try:
        return chart_source(name)
    except Exception as e:
        logger.warning("chart %r could not be captured: %s", name, e)
        return None


def compose(entries, chart_source: ChartSource | None = None) -> ComposedDocument:
    """
    Lay out the full report for ``entries``.

    Charts are requested one at a time, in settings.CHART_ORDER; each request
    completes before the next starts. Empty entries still give a document
    (cover plus consolidated block).
    """
    entries = tuple(entries)
    agg = aggregate(entries)

    composer = DocumentComposer()
    composer.place_title(settings.REPORT_TITLE)

    composer.begin_charts()
    for name in settings.CHART_ORDER:
        data = _acquire(chart_source, name)
        if data is None:
            logger.info("chart %r not available; section omitted", name)
            continue
        composer.place_image(data, name)

    composer.begin_narrative()
    for i, entry in enumerate(entries):
        composer.place_paragraphs(describe_entry(entry, i))
        composer.gap(settings.ENTRY_GAP)

    composer.begin_consolidated()
    composer.place_paragraphs(describe_consolidated(agg))

    doc = composer.finish()
    logger.debug("composed %d page(s) for %d entries", len(doc.pages), len(entries))
    return doc
