"""
Unit tests for core/export/reportlab_backend.py
"""
import re
from unittest.mock import MagicMock, patch

import pytest

from core.export.base import PdfBackendUnavailableError, PdfGenerationError, PdfOptions, PdfRenderRequest
from core.export.reportlab_backend import ReportlabBackend


def _page_count(pdf: bytes) -> int:
    return len(re.findall(rb"/Type /Page\b", pdf))


@pytest.fixture
def request_for(catalog, business, fixed_time):
    def build(products):
        return PdfRenderRequest(html="<html></html>", catalog=catalog, business=business,
                                products=products, generated_at=fixed_time)
    return build


def _drawn_text(canvas_mock) -> list:
    calls = list(canvas_mock.return_value.drawCentredString.call_args_list)
    calls += list(canvas_mock.return_value.drawString.call_args_list)
    return [c.args[2] for c in calls]


class TestReportlabBackend:
    """Test direct PDF drawing."""

    def test_renders_pdf_bytes(self, request_for, products):
        pdf = ReportlabBackend().render(request_for(products), PdfOptions())
        assert pdf.startswith(b"%PDF")
        assert _page_count(pdf) == 1

    def test_long_catalog_spans_pages(self, request_for, make_product):
        many = [make_product(i, name=f"Item {i}", description="Text. " * 40, price="1.00") for i in range(40)]
        pdf = ReportlabBackend().render(request_for(many), PdfOptions())
        assert _page_count(pdf) > 1

    def test_landscape_page_size(self, request_for, products):
        with patch("core.export.reportlab_backend.canvas.Canvas") as canvas_mock:
            ReportlabBackend().render(request_for(products), PdfOptions(page_size="A4", orientation="landscape"))
        assert canvas_mock.call_args.kwargs["pagesize"] == (841.89, 595.28)

    def test_product_lines(self, request_for, products):
        with patch("core.export.reportlab_backend.canvas.Canvas") as canvas_mock:
            ReportlabBackend().render(request_for(products), PdfOptions())
        text = _drawn_text(canvas_mock)
        assert "Summer Line" in text
        assert "Acme Supply" in text
        assert "Widget" in text
        assert "SKU: W1" in text
        assert "Price: $9.99" in text
        assert "Generated on 2024-05-01 12:30:00" in text

    def test_page_numbers_know_total(self, request_for, make_product):
        many = [make_product(i, name=f"Item {i}", description="Text. " * 40) for i in range(40)]
        with patch("core.export.reportlab_backend.canvas.Canvas") as canvas_mock:
            ReportlabBackend().render(request_for(many), PdfOptions())
        numbers = [t for t in _drawn_text(canvas_mock) if t.startswith("Page ")]
        total = numbers[-1].split(" of ")[1]
        assert numbers[0] == f"Page 1 of {total}"
        assert int(total) > 1

    def test_page_numbers_disabled(self, request_for, products):
        with patch("core.export.reportlab_backend.canvas.Canvas") as canvas_mock:
            ReportlabBackend().render(request_for(products), PdfOptions(show_page_numbers=False))
        assert not [t for t in _drawn_text(canvas_mock) if t.startswith("Page ")]

    def test_page_break_threshold(self, request_for, make_product):
        few = [make_product(i, name=f"Item {i}") for i in range(3)]
        with patch("core.export.reportlab_backend.canvas.Canvas") as canvas_mock:
            ReportlabBackend(page_break_threshold=10_000).render(request_for(few), PdfOptions())
        # Every product after the first starts a page: 3 pages per pass, 2 passes
        assert canvas_mock.return_value.showPage.call_count == 6

    def test_unavailable_without_reportlab(self, request_for, products):
        with patch("core.export.reportlab_backend.REPORTLAB_AVAILABLE", False):
            with pytest.raises(PdfBackendUnavailableError, match="reportlab"):
                ReportlabBackend().render(request_for(products), PdfOptions())

    def test_drawing_errors_wrapped(self, request_for, products):
        with patch("core.export.reportlab_backend.canvas.Canvas", side_effect=ValueError("bad page")):
            with pytest.raises(PdfGenerationError, match="reportlab: bad page"):
                ReportlabBackend().render(request_for(products), PdfOptions())
