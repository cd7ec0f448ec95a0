"""
Headless Chromium print-to-PDF backend.

Renders a plain text-only page (independent of the catalog template) and
prints it with ``chromium --headless --print-to-pdf``. One browser process
per call, bounded by ``browser_timeout_seconds``.
"""
import shutil
import subprocess
import tempfile
from pathlib import Path
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
from core.templating.substitution import substitute

logger = get_logger(__name__)

BROWSER_CANDIDATES = ("chromium", "chromium-browser", "google-chrome", "google-chrome-stable")

PRINT_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{{catalogName}}</title>
    <style>
      @page { size: {{pageSize}} {{orientation}}; margin: 1cm; }
      body { font-family: Arial, sans-serif; margin: 0; padding: 20px; }
      h1 { text-align: center; margin-bottom: 5px; }
      h2 { text-align: center; font-size: 16px; color: #555; margin-bottom: 20px; }
      .business { text-align: center; font-size: 18px; font-weight: bold; margin-bottom: 30px; }
      .divider { border-top: 1px solid #ccc; margin: 20px 0; }
      .product { margin-bottom: 30px; }
      .product h3 { margin-bottom: 5px; }
      .product .sku { font-size: 12px; color: #777; margin-bottom: 5px; }
      .product .price { font-weight: bold; margin-bottom: 5px; }
      .product .description { font-size: 14px; color: #333; }
      .footer { text-align: center; font-size: 12px; color: #777; margin-top: 30px; }
      .page-number { text-align: center; font-size: 12px; color: #777; margin-top: 10px; }
    </style>
  </head>
  <body>
    <h1>{{catalogName}}</h1>
    {{catalogDescription}}
    <div class="business">{{businessName}}</div>
    <div class="divider"></div>
    {{products}}
    {{footer}}
    {{pageNumber}}
  </body>
</html>
"""

PRINT_PRODUCT = """
    <div class="product">
      <h3>{{name}}</h3>
      {{sku}}
      {{price}}
      {{description}}
    </div>"""


def find_browser(explicit: Optional[str] = None) -> Optional[str]:
    """Path of a Chromium-family browser, or ``None``."""
    if explicit:
        return explicit if Path(explicit).exists() or shutil.which(explicit) else None
    for candidate in BROWSER_CANDIDATES:
        found = shutil.which(candidate)
        if found:
            return found
    return None


def _optional(value, markup: str) -> str:
    return substitute(markup, {"value": value}) if value else ""


def build_print_html(request: PdfRenderRequest, options: PdfOptions) -> str:
    """Simple inline-styled page with an ``@page`` rule for size and orientation."""
    catalog = request.catalog
    products = "".join(
        substitute(PRINT_PRODUCT, {
            "name": p.name,
            "sku": _optional(p.sku, '<div class="sku">SKU: {{value}}</div>'),
            "price": _optional(p.price, '<div class="price">Price: ${{value}}</div>'),
            "description": _optional(p.description, '<div class="description">{{value}}</div>'),
        })
        for p in request.products
    )
    footer = ""
    if options.show_footer:
        footer = substitute(
            '<div class="footer">Generated on {{date}}</div>',
            {"date": format_timestamp(request.generated_at)},
        )

    return substitute(PRINT_PAGE, {
        "catalogName": catalog.name,
        "catalogDescription": _optional(catalog.description, "<h2>{{value}}</h2>"),
        "businessName": request.business.name,
        "pageSize": options.page_size,
        "orientation": options.orientation,
        "products": products,
        "footer": footer,
        "pageNumber": '<div class="page-number">Page 1</div>' if options.show_page_numbers else "",
    })


class BrowserBackend(PdfBackend):
    """Prints a simplified catalog page through headless Chromium."""

    name = "browser"

    def __init__(self, binary: Optional[str] = None, timeout: Optional[int] = None):
        self.binary = binary if binary is not None else settings.browser_binary
        self.timeout = timeout if timeout is not None else settings.browser_timeout_seconds

    def _command(self, binary: str, html_path: Path, pdf_path: Path) -> List[str]:
        return [
            binary,
            "--headless",
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--disable-gpu",
            "--no-pdf-header-footer",
            f"--print-to-pdf={pdf_path}",
            html_path.as_uri(),
        ]

    def render(self, request: PdfRenderRequest, options: PdfOptions) -> bytes:
        binary = find_browser(self.binary)
        if not binary:
            raise PdfBackendUnavailableError(self.name, "no Chromium/Chrome binary found")

        with tempfile.TemporaryDirectory(prefix="catalog_print_") as tmp:
            html_path = Path(tmp) / "catalog.html"
            pdf_path = Path(tmp) / "catalog.pdf"
            html_path.write_text(build_print_html(request, options), encoding="utf-8")

            logger.info(
                "Printing catalog %s with %s (%s %s)",
                request.catalog.id, binary, options.page_size, options.orientation,
            )
            try:
                result = subprocess.run(
                    self._command(binary, html_path, pdf_path),
                    capture_output=True,
                    timeout=self.timeout,
                )
            except subprocess.TimeoutExpired as e:
                raise PdfGenerationError(self.name, f"timed out after {self.timeout}s") from e
            except OSError as e:
                raise PdfGenerationError(self.name, str(e)) from e

            if result.returncode != 0 or not pdf_path.exists():
                stderr = (result.stderr or b"").decode("utf-8", errors="replace").strip()
                raise PdfGenerationError(
                    self.name,
                    f"browser exited with code {result.returncode}: {stderr[-500:]}",
                )

            return pdf_path.read_bytes()
