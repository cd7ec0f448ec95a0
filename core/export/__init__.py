"""Catalog PDF export: backend interface, reportlab and headless-browser backends."""
from core.export.base import (
    PdfBackend,
    PdfBackendUnavailableError,
    PdfGenerationError,
    PdfOptions,
    PdfRenderRequest,
)
from core.export.exporter import DocumentExporter, ExportResult, build_backends

__all__ = [
    "PdfBackend",
    "PdfBackendUnavailableError",
    "PdfGenerationError",
    "PdfOptions",
    "PdfRenderRequest",
    "DocumentExporter",
    "ExportResult",
    "build_backends",
]
