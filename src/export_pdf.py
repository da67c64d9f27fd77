# src/export_pdf.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

import settings
from composer import ComposedDocument, ImageBlock, TextLine, compose
from logging_setup import get_logger

logger = get_logger("ecotrack.export_pdf")


def _draw_text(pdf: canvas.Canvas, line: TextLine, page_height: float) -> None:
    pdf.setFont(line.font, line.size)
    x = line.x * mm
    y = page_height - line.y * mm
    if line.align == "center":
        pdf.drawCentredString(x, y, line.text)
    else:
        pdf.drawString(x, y, line.text)


def _draw_image(pdf: canvas.Canvas, block: ImageBlock, page_height: float) -> None:
    # reportlab anchors images at their bottom-left corner
    pdf.drawImage(
        ImageReader(BytesIO(block.data)),
        block.x * mm,
        page_height - (block.y + block.height) * mm,
        width=block.width * mm,
        height=block.height * mm,
        preserveAspectRatio=True,
        mask="auto",
    )


def render_pdf(document: ComposedDocument, title: str = settings.REPORT_TITLE) -> bytes:
    """Draw composed pages onto an A4 canvas and return the PDF bytes."""
    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(title)
    _, page_height = A4

    for page in document.pages:
        for item in page.primitives:
            if isinstance(item, ImageBlock):
                _draw_image(pdf, item, page_height)
            elif isinstance(item, TextLine):
                _draw_text(pdf, item, page_height)
        pdf.showPage()

    pdf.save()
    return buffer.getvalue()


def export_pdf(entries, chart_source=None, out_path=None, write: bool = True) -> bytes:
    """
    Compose and render the negotiation report.

    The file (settings.PDF_FILENAME under settings.OUTPUT_DIR unless ``out_path``
    is given) is written only after the whole document has been rendered.
    With ``write=False`` only the bytes are returned.
    """
    document = compose(entries, chart_source=chart_source)
    data = render_pdf(document)

    if write:
        path = Path(out_path) if out_path else settings.OUTPUT_DIR / settings.PDF_FILENAME
        path.parent.mkdir(exist_ok=True, parents=True)
        path.write_bytes(data)
        logger.info("PDF generated: %s (%d page(s))", path, len(document.pages))

    return data
