"""
Shared state and dependency getters for API route modules.

Routes take these through ``Depends(get_...)`` so tests can swap them with
``app.dependency_overrides``.
"""

import time

from config.logging_config import get_logger
from config.settings import settings
from core.catalog_service import CatalogDocumentService
from core.export.exporter import DocumentExporter, build_backends
from core.storage import MemStorage
from core.templating.registry import FilesystemTemplateRegistry, TemplateRegistry

logger = get_logger(__name__)

# --- Singletons ---

start_time = time.time()

storage = MemStorage()
template_registry = FilesystemTemplateRegistry(settings.custom_templates_dir)
exporter = DocumentExporter(build_backends(settings.get_pdf_backends()), template_registry)
catalog_service = CatalogDocumentService(
    storage,
    exporter,
    settings.generated_dir,
    url_prefix=settings.generated_url_prefix,
)

logger.info("PDF backends: %s", ", ".join(b.name for b in exporter.backends) or "none")


# --- Getters ---

def get_storage() -> MemStorage:
    return storage


def get_template_registry() -> TemplateRegistry:
    return template_registry


def get_catalog_service() -> CatalogDocumentService:
    return catalog_service
