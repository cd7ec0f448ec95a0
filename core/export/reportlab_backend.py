"""
Direct PDF drawing with reportlab.

Does not look at the rendered HTML: the catalog is laid out from the raw
records as a simple text document.

    title (centred)
    description (centred, wrapped)
    business name (centred)
    ----------------------------------
    product name
    SKU: ...
    Price: $...
    description (wrapped)
    ...
    Generated on ...          Page i of N
"""
import io
from typing import List, Optional

from config.logging_config import get_logger
from config.settings import settings
from core.export.base import (
    PdfBackend,
    PdfBackendUnavailableError,
    PdfGenerationError,
    PdfOptions,
    PdfRenderRequest,
)
from core.templating.composer import format_timestamp

logger = get_logger(__name__)

# Graceful import: the backend reports itself unavailable without reportlab
try:
    from reportlab.lib.utils import simpleSplit
    from reportlab.pdfgen import canvas
    REPORTLAB_AVAILABLE = True
except ImportError:
    canvas = None  # type: ignore[assignment]
    simpleSplit = None  # type: ignore[assignment]
    REPORTLAB_AVAILABLE = False
    logger.warning("reportlab not installed, direct PDF rendering unavailable")

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FOOTER_FONT_SIZE = 9
LEADING = 1.25


class _PageCursor:
    """Writes lines top-down, adding pages and footers as it goes."""

    def __init__(self, canv, options: PdfOptions, footer_text: str, total_pages: Optional[int]):
        self.canv = canv
        self.width, self.height = options.page_dimensions
        self.margin = options.margin
        self.options = options
        self.footer_text = footer_text
        self.total_pages = total_pages
        self.page = 1
        self.y = self.height - self.margin
        # Room reserved at the bottom for the footer lines
        self.bottom = self.margin + 2 * FOOTER_FONT_SIZE

    @property
    def text_width(self) -> float:
        return self.width - 2 * self.margin

    def remaining(self) -> float:
        return self.y - self.bottom

    def new_page(self) -> None:
        self._draw_footer()
        self.canv.showPage()
        self.page += 1
        self.y = self.height - self.margin

    def text(self, value: str, font: str, size: float, centred: bool = False, space_after: float = 0) -> None:
        for line in simpleSplit(value, font, size, self.text_width) or [""]:
            if self.remaining() < size * LEADING:
                self.new_page()
            self.y -= size
            self.canv.setFont(font, size)
            if centred:
                self.canv.drawCentredString(self.width / 2, self.y, line)
            else:
                self.canv.drawString(self.margin, self.y, line)
            self.y -= size * (LEADING - 1)
        self.y -= space_after

    def divider(self, space_after: float = 12) -> None:
        self.canv.line(self.margin, self.y, self.width - self.margin, self.y)
        self.y -= space_after

    def skip(self, amount: float) -> None:
        self.y -= amount

    def finish(self) -> int:
        self._draw_footer()
        self.canv.showPage()
        self.canv.save()
        return self.page

    def _draw_footer(self) -> None:
        self.canv.setFont(FONT, FOOTER_FONT_SIZE)
        if self.options.show_footer:
            self.canv.drawCentredString(self.width / 2, self.margin - 10, self.footer_text)
        if self.options.show_page_numbers and self.total_pages:
            self.canv.drawCentredString(
                self.width / 2,
                self.margin - 10 - 1.5 * FOOTER_FONT_SIZE,
                f"Page {self.page} of {self.total_pages}",
            )


class ReportlabBackend(PdfBackend):
    """Draws the catalog directly onto a reportlab canvas."""

    name = "reportlab"

    def __init__(self, page_break_threshold: Optional[float] = None):
        self.page_break_threshold = (
            page_break_threshold if page_break_threshold is not None
            else settings.pdf_page_break_threshold
        )

    def render(self, request: PdfRenderRequest, options: PdfOptions) -> bytes:
        if not REPORTLAB_AVAILABLE:
            raise PdfBackendUnavailableError(self.name, "reportlab is not installed")

        try:
            # First pass only counts pages so footers can say "Page i of N"
            total_pages = self._draw(io.BytesIO(), request, options, total_pages=None)
            buffer = io.BytesIO()
            self._draw(buffer, request, options, total_pages=total_pages)
        except Exception as e:
            raise PdfGenerationError(self.name, str(e)) from e

        logger.info(
            "Rendered catalog %s with reportlab: %d pages, %d products",
            request.catalog.id, total_pages, len(request.products),
        )
        return buffer.getvalue()

    def _draw(self, target, request: PdfRenderRequest, options: PdfOptions, total_pages: Optional[int]) -> int:
        catalog, business = request.catalog, request.business

        canv = canvas.Canvas(target, pagesize=options.page_dimensions)
        canv.setTitle(options.title or catalog.name)
        canv.setAuthor(options.author or business.name)
        canv.setSubject(catalog.description or "Product Catalog")
        canv.setKeywords("catalog, products")

        cursor = _PageCursor(
            canv, options,
            footer_text=f"Generated on {format_timestamp(request.generated_at)}",
            total_pages=total_pages,
        )

        cursor.text(catalog.name, FONT_BOLD, 24, centred=True, space_after=6)
        if catalog.description:
            cursor.text(catalog.description, FONT, 12, centred=True, space_after=6)
        cursor.text(business.name, FONT_BOLD, 14, centred=True, space_after=12)
        cursor.divider()

        for index, product in enumerate(request.products):
            if index > 0 and cursor.remaining() < self.page_break_threshold:
                cursor.new_page()
            for value, font, size in self._product_lines(product):
                cursor.text(value, font, size, space_after=3)
            cursor.skip(14)

        return cursor.finish()

    @staticmethod
    def _product_lines(product) -> List[tuple]:
        lines = [(product.name, FONT_BOLD, 16)]
        if product.sku:
            lines.append((f"SKU: {product.sku}", FONT, 10))
        if product.price:
            lines.append((f"Price: ${product.price}", FONT_BOLD, 12))
        if product.description:
            lines.append((product.description, FONT, 11))
        return lines
