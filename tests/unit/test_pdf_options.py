"""
Unit tests for core/export/base.py
"""
import pytest

from core.export.base import PAGE_SIZES, PdfBackendUnavailableError, PdfGenerationError, PdfOptions
from core.models import Business, CatalogSettings


class TestPdfOptions:
    """Test page geometry and catalog mapping."""

    @pytest.mark.parametrize("size,expected", [
        ("A4", (595.28, 841.89)),
        ("Letter", (612.0, 792.0)),
        ("Legal", (612.0, 1008.0)),
    ])
    def test_portrait_dimensions(self, size, expected):
        assert PdfOptions(page_size=size).page_dimensions == expected

    def test_landscape_swaps(self):
        assert PdfOptions(page_size="Letter", orientation="landscape").page_dimensions == (792.0, 612.0)

    def test_unknown_size_defaults_to_a4(self):
        assert PdfOptions(page_size="Tabloid").page_dimensions == PAGE_SIZES["A4"]

    def test_from_catalog(self, make_catalog):
        catalog = make_catalog(settings=CatalogSettings(page_size="Legal", orientation="landscape", show_page_numbers=False))
        options = PdfOptions.from_catalog(catalog, Business(id=1, name="Acme"))
        assert options.page_size == "Legal"
        assert options.orientation == "landscape"
        assert options.show_page_numbers is False
        assert options.title == "Summer Line"
        assert options.author == "Acme"


class TestErrors:
    def test_message_carries_backend(self):
        err = PdfGenerationError("browser", "timed out")
        assert err.backend == "browser"
        assert str(err) == "browser: timed out"

    def test_unavailable_is_generation_error(self):
        assert issubclass(PdfBackendUnavailableError, PdfGenerationError)
