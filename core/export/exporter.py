"""
Catalog document export: HTML always, PDF from the first backend that works.
"""
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from config.logging_config import get_logger
from core.export.base import PdfBackend, PdfGenerationError, PdfOptions, PdfRenderRequest
from core.export.browser_backend import BrowserBackend
from core.export.reportlab_backend import ReportlabBackend
from core.models import Business, Catalog, Product, Template
from core.templating.orchestrator import render_catalog_html
from core.templating.registry import TemplateRegistry

logger = get_logger(__name__)

BACKENDS = {
    ReportlabBackend.name: ReportlabBackend,
    BrowserBackend.name: BrowserBackend,
}


def build_backends(names: Sequence[str]) -> List[PdfBackend]:
    """Instantiate backends in the given order.

    Raises:
        ValueError: Unknown backend name.
    """
    backends = []
    for name in names:
        if name not in BACKENDS:
            raise ValueError(f"Unknown PDF backend: {name}. Known: {', '.join(BACKENDS)}")
        backends.append(BACKENDS[name]())
    return backends


@dataclass
class ExportResult:
    """Files produced by one export"""
    html_path: Path
    pdf_path: Optional[Path] = None
    backend: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def html_fallback(self) -> bool:
        """True when no backend produced a PDF and the HTML is the deliverable."""
        return self.pdf_path is None


class DocumentExporter:
    """Renders catalog HTML and converts it with an ordered list of PDF backends."""

    def __init__(self, backends: Sequence[PdfBackend], registry: TemplateRegistry):
        self.backends = list(backends)
        self.registry = registry

    def export(
        self,
        catalog: Catalog,
        products: List[Product],
        template: Template,
        business: Business,
        output_base: Union[str, Path],
        generated_at: Optional[datetime] = None,
    ) -> ExportResult:
        """Write ``<output_base>.html`` and, if any backend succeeds, ``<output_base>.pdf``.

        Backend failures are collected, never raised.
        """
        output_base = Path(output_base)
        generated_at = generated_at or datetime.now()

        html = render_catalog_html(
            catalog, products, template, business,
            registry=self.registry, generated_at=generated_at,
        )
        html_path = output_base.with_name(output_base.name + ".html")
        html_path.write_text(html, encoding="utf-8")
        result = ExportResult(html_path=html_path)

        request = PdfRenderRequest(
            html=html,
            catalog=catalog,
            business=business,
            products=products,
            generated_at=generated_at,
        )
        options = PdfOptions.from_catalog(catalog, business)

        for backend in self.backends:
            try:
                pdf_bytes = backend.render(request, options)
            except PdfGenerationError as e:
                logger.warning("PDF backend %s failed for catalog %s: %s", backend.name, catalog.id, e)
                result.errors.append(str(e))
                continue
            except Exception as e:
                logger.exception("PDF backend %s crashed for catalog %s", backend.name, catalog.id)
                result.errors.append(str(PdfGenerationError(backend.name, str(e))))
                continue

            pdf_path = output_base.with_name(output_base.name + ".pdf")
            pdf_path.write_bytes(pdf_bytes)
            result.pdf_path = pdf_path
            result.backend = backend.name
            logger.info("Catalog %s exported to %s via %s", catalog.id, pdf_path.name, backend.name)
            return result

        logger.warning(
            "All PDF backends failed for catalog %s, delivering %s",
            catalog.id, html_path.name,
        )
        return result
