"""
PDF backend interface shared by the exporter and its backends.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Literal, Optional, Tuple

from core.models import Business, Catalog, Product

# Points (1/72 inch), portrait
PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "A4": (595.28, 841.89),
    "Letter": (612.0, 792.0),
    "Legal": (612.0, 1008.0),
}


class PdfGenerationError(Exception):
    """A backend failed to produce a PDF."""

    def __init__(self, backend: str, message: str):
        self.backend = backend
        super().__init__(f"{backend}: {message}")


class PdfBackendUnavailableError(PdfGenerationError):
    """The backend's library or binary is not installed."""


@dataclass
class PdfOptions:
    """Page and metadata settings for one PDF render"""
    page_size: str = "A4"
    orientation: Literal["portrait", "landscape"] = "portrait"
    margin: float = 50.0
    show_page_numbers: bool = True
    show_footer: bool = True
    title: Optional[str] = None
    author: Optional[str] = None

    @property
    def page_dimensions(self) -> Tuple[float, float]:
        """(width, height) in points; landscape swaps the two."""
        width, height = PAGE_SIZES.get(self.page_size, PAGE_SIZES["A4"])
        if self.orientation == "landscape":
            return height, width
        return width, height

    @classmethod
    def from_catalog(cls, catalog: Catalog, business: Optional[Business] = None) -> "PdfOptions":
        options = catalog.settings
        return cls(
            page_size=options.page_size,
            orientation=options.orientation,
            show_page_numbers=options.show_page_numbers,
            show_footer=options.show_footer,
            title=catalog.name,
            author=business.name if business else None,
        )


@dataclass
class PdfRenderRequest:
    """Everything a backend may draw from.

    ``html`` is the rendered catalog page; backends that lay out the
    document themselves use the raw records instead.
    """
    html: str
    catalog: Catalog
    business: Business
    products: List[Product] = field(default_factory=list)
    generated_at: datetime = field(default_factory=datetime.now)


class PdfBackend(ABC):
    """One way of turning a catalog into PDF bytes."""

    name: str = "base"

    @abstractmethod
    def render(self, request: PdfRenderRequest, options: PdfOptions) -> bytes:
        """Return the PDF document.

        Raises:
            PdfBackendUnavailableError: Library or binary missing.
            PdfGenerationError: Rendering failed.
        """
