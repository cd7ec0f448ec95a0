"""
Custom template registries.

A registry maps a template name (``modern-minimal`` or
``modern-minimal.html``) to the page source and, when present, the
per-product fragment stored next to it as ``<name>-product.html``.
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from config.logging_config import get_logger

logger = get_logger(__name__)

TEMPLATE_SUFFIX = ".html"
PRODUCT_SUFFIX = "-product"


@dataclass
class TemplateFiles:
    """Sources of one custom template"""
    name: str
    page: str
    product: Optional[str] = None


def slugify(name: str) -> str:
    """``"Modern Minimal"`` -> ``"modern-minimal"``."""
    return re.sub(r"\s+", "-", name.strip().lower())


def normalize_name(name: str) -> str:
    """Strip a trailing ``.html`` so both spellings address the same template."""
    if name.endswith(TEMPLATE_SUFFIX):
        return name[: -len(TEMPLATE_SUFFIX)]
    return name


class TemplateRegistry(ABC):
    """Lookup of custom page templates by name."""

    @abstractmethod
    def resolve(self, name: str) -> Optional[TemplateFiles]:
        """Template sources for *name*, or ``None`` when there is no such template."""

    @abstractmethod
    def list_names(self) -> List[str]:
        """Names of all page templates (product fragments excluded)."""


class FilesystemTemplateRegistry(TemplateRegistry):
    """Templates stored as ``<directory>/<name>.html`` files.

    Files are read on every call so edits show up without a restart.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def resolve(self, name: str) -> Optional[TemplateFiles]:
        stem = normalize_name(name)
        if not stem or "/" in stem or "\\" in stem or stem.startswith("."):
            logger.warning("Rejected custom template name: %r", name)
            return None

        page_path = self.directory / f"{stem}{TEMPLATE_SUFFIX}"
        product_path = self.directory / f"{stem}{PRODUCT_SUFFIX}{TEMPLATE_SUFFIX}"
        try:
            if not page_path.is_file():
                return None
            page = page_path.read_text(encoding="utf-8")
            product = product_path.read_text(encoding="utf-8") if product_path.is_file() else None
        except OSError as e:
            # e.g. ENAMETOOLONG for very long template names
            logger.warning("Custom template %r unreadable: %s", name, e)
            return None

        logger.info("Using custom template: %s", page_path)
        return TemplateFiles(name=stem, page=page, product=product)

    def list_names(self) -> List[str]:
        if not self.directory.is_dir():
            return []
        return sorted(
            path.stem
            for path in self.directory.glob(f"*{TEMPLATE_SUFFIX}")
            if not path.stem.endswith(PRODUCT_SUFFIX)
        )


class InMemoryTemplateRegistry(TemplateRegistry):
    """Dict-backed registry, used by tests and embedded callers."""

    def __init__(self, templates: Optional[Dict[str, TemplateFiles]] = None):
        self._templates: Dict[str, TemplateFiles] = {}
        for files in (templates or {}).values():
            self.add(files)

    def add(self, files: TemplateFiles) -> None:
        files.name = normalize_name(files.name)
        self._templates[files.name] = files

    def resolve(self, name: str) -> Optional[TemplateFiles]:
        return self._templates.get(normalize_name(name))

    def list_names(self) -> List[str]:
        return sorted(self._templates)
