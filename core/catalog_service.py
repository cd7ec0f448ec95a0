"""
Catalog document generation.

Loads a catalog with its template, business and products, exports it
through :class:`core.export.exporter.DocumentExporter` and publishes the
result on the catalog record.
"""
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from config.logging_config import get_logger
from core.export.exporter import DocumentExporter
from core.models import CamelModel, Catalog, CatalogStatus, Product
from core.storage import MemStorage

logger = get_logger(__name__)

PDF_SUCCESS_MESSAGE = "PDF generated successfully"
HTML_FALLBACK_MESSAGE = "Catalog generated as HTML (PDF generation failed)"
HTML_FALLBACK_ERROR = "PDF generation failed, using HTML version instead"


class ResourceNotFoundError(Exception):
    """A record needed for rendering does not exist."""

    def __init__(self, kind: str, entity_id: Optional[int]):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} not found")


class CatalogDocumentResult(CamelModel):
    message: str
    pdf_url: str
    html_url: str
    product_count: int
    catalog: Catalog
    error: Optional[str] = None


def select_products(catalog: Catalog, products: List[Product]) -> List[Product]:
    """Products of ``catalog.product_ids`` in that order.

    Ids not among *products* (another business's products, deleted ones)
    are dropped, duplicates are ignored and inactive products skipped.
    """
    by_id = {p.id: p for p in products}
    selected, seen = [], set()
    for product_id in catalog.product_ids:
        if product_id in seen:
            continue
        seen.add(product_id)
        product = by_id.get(product_id)
        if product is not None and product.active:
            selected.append(product)
    return selected


class CatalogDocumentService:
    """Generates and publishes catalog documents."""

    def __init__(
        self,
        storage: MemStorage,
        exporter: DocumentExporter,
        generated_dir: Union[str, Path],
        url_prefix: str = "/generated",
    ):
        self.storage = storage
        self.exporter = exporter
        self.generated_dir = Path(generated_dir)
        self.url_prefix = url_prefix.rstrip("/")

    def _url(self, path: Path) -> str:
        return f"{self.url_prefix}/{path.name}"

    def reserve_base_name(self, catalog_id: int) -> Path:
        """Claim ``catalog_<id>_<epoch-ms>`` by creating its HTML file exclusively.

        A taken name bumps the millisecond stamp, so concurrent renders of the
        same catalog never share files.
        """
        self.generated_dir.mkdir(parents=True, exist_ok=True)
        stamp = int(time.time() * 1000)
        while True:
            base = self.generated_dir / f"catalog_{catalog_id}_{stamp}"
            try:
                with open(base.with_name(base.name + ".html"), "x", encoding="utf-8"):
                    pass
                return base
            except FileExistsError:
                stamp += 1

    def generate(self, catalog_id: int, generated_at: Optional[datetime] = None) -> CatalogDocumentResult:
        """Render the catalog to HTML and PDF (or HTML only) and mark it published.

        Raises:
            ResourceNotFoundError: Catalog, template or business is missing.
        """
        catalog = self.storage.get_catalog(catalog_id)
        if not catalog:
            raise ResourceNotFoundError("Catalog", catalog_id)

        template = self.storage.get_template(catalog.template_id)
        if not template:
            raise ResourceNotFoundError("Template", catalog.template_id)

        business = self.storage.get_business(catalog.business_id)
        if not business:
            raise ResourceNotFoundError("Business", catalog.business_id)

        products = select_products(catalog, self.storage.get_products(catalog.business_id))
        logger.info(
            "Generating catalog %s (%s) with template %s: %d of %d products",
            catalog.id, catalog.name, template.name, len(products), len(catalog.product_ids),
        )

        base = self.reserve_base_name(catalog.id)
        try:
            result = self.exporter.export(catalog, products, template, business, base, generated_at=generated_at)
        except Exception:
            # Never leave a partial document in the served directory
            for suffix in (".html", ".pdf"):
                base.with_name(base.name + suffix).unlink(missing_ok=True)
            raise

        html_url = self._url(result.html_path)
        if result.html_fallback:
            pdf_url, message, error = html_url, HTML_FALLBACK_MESSAGE, HTML_FALLBACK_ERROR
        else:
            pdf_url, message, error = self._url(result.pdf_path), PDF_SUCCESS_MESSAGE, None

        updated = self.storage.update_catalog(catalog.id, pdf_url=pdf_url, status=CatalogStatus.PUBLISHED)
        if updated is None:
            # Deleted while rendering
            raise ResourceNotFoundError("Catalog", catalog_id)

        return CatalogDocumentResult(
            message=message,
            pdf_url=pdf_url,
            html_url=html_url,
            product_count=len(products),
            catalog=updated,
            error=error,
        )
