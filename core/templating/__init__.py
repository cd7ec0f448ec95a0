"""Catalog HTML templating: substitution, layouts, custom templates, fallback."""
from core.templating.orchestrator import render_catalog_html
from core.templating.registry import (
    FilesystemTemplateRegistry,
    InMemoryTemplateRegistry,
    TemplateFiles,
    TemplateRegistry,
)

__all__ = [
    "render_catalog_html",
    "FilesystemTemplateRegistry",
    "InMemoryTemplateRegistry",
    "TemplateFiles",
    "TemplateRegistry",
]
