"""
Unit tests for core/export/browser_backend.py
"""
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from core.export.base import PdfBackendUnavailableError, PdfGenerationError, PdfOptions, PdfRenderRequest
from core.export.browser_backend import BrowserBackend, build_print_html, find_browser


@pytest.fixture
def render_request(catalog, business, products, fixed_time):
    return PdfRenderRequest(html="<html></html>", catalog=catalog, business=business,
                            products=products, generated_at=fixed_time)


def _fake_browser(returncode=0, write_pdf=True):
    """subprocess.run stand-in that writes the --print-to-pdf target."""
    def run(cmd, **kwargs):
        if write_pdf:
            target = next(a for a in cmd if a.startswith("--print-to-pdf=")).split("=", 1)[1]
            Path(target).write_bytes(b"%PDF-1.4 fake")
        return MagicMock(returncode=returncode, stderr=b"crashed")
    return run


# ============================================================
# Print page
# ============================================================

class TestBuildPrintHtml:
    """Test the simplified print page."""

    def test_page_rule_from_options(self, render_request):
        html = build_print_html(render_request, PdfOptions(page_size="Letter", orientation="landscape"))
        assert "@page { size: Letter landscape; margin: 1cm; }" in html

    def test_contents(self, render_request):
        html = build_print_html(render_request, PdfOptions())
        assert "<h1>Summer Line</h1>" in html
        assert "<h2>Warm weather picks</h2>" in html
        assert '<div class="business">Acme Supply</div>' in html
        assert '<div class="sku">SKU: W1</div>' in html
        assert '<div class="price">Price: $9.99</div>' in html
        assert "Generated on 2024-05-01 12:30:00" in html
        assert '<div class="page-number">Page 1</div>' in html

    def test_page_number_optional(self, render_request):
        html = build_print_html(render_request, PdfOptions(show_page_numbers=False))
        assert '<div class="page-number">' not in html


# ============================================================
# Rendering
# ============================================================

class TestBrowserBackend:
    """Test the headless browser subprocess."""

    def test_missing_binary(self, render_request):
        with patch("core.export.browser_backend.find_browser", return_value=None):
            with pytest.raises(PdfBackendUnavailableError):
                BrowserBackend().render(render_request, PdfOptions())

    def test_success_returns_pdf_bytes(self, render_request):
        with patch("core.export.browser_backend.find_browser", return_value="/usr/bin/chromium"), \
                patch("core.export.browser_backend.subprocess.run", side_effect=_fake_browser()) as run:
            pdf = BrowserBackend(timeout=5).render(render_request, PdfOptions())

        assert pdf == b"%PDF-1.4 fake"
        cmd = run.call_args.args[0]
        assert cmd[0] == "/usr/bin/chromium"
        assert "--headless" in cmd
        assert cmd[-1].startswith("file://")
        assert run.call_args.kwargs["timeout"] == 5

    def test_timeout(self, render_request):
        with patch("core.export.browser_backend.find_browser", return_value="/usr/bin/chromium"), \
                patch("core.export.browser_backend.subprocess.run",
                      side_effect=subprocess.TimeoutExpired(cmd="chromium", timeout=5)):
            with pytest.raises(PdfGenerationError, match="timed out"):
                BrowserBackend(timeout=5).render(render_request, PdfOptions())

    def test_nonzero_exit(self, render_request):
        with patch("core.export.browser_backend.find_browser", return_value="/usr/bin/chromium"), \
                patch("core.export.browser_backend.subprocess.run",
                      side_effect=_fake_browser(returncode=1, write_pdf=False)):
            with pytest.raises(PdfGenerationError, match="code 1: crashed"):
                BrowserBackend().render(render_request, PdfOptions())

    def test_no_output_file(self, render_request):
        with patch("core.export.browser_backend.find_browser", return_value="/usr/bin/chromium"), \
                patch("core.export.browser_backend.subprocess.run", side_effect=_fake_browser(write_pdf=False)):
            with pytest.raises(PdfGenerationError):
                BrowserBackend().render(render_request, PdfOptions())


class TestFindBrowser:
    def test_explicit_path(self, tmp_path):
        binary = tmp_path / "chrome"
        binary.write_text("")
        assert find_browser(str(binary)) == str(binary)

    def test_explicit_missing(self, tmp_path):
        assert find_browser(str(tmp_path / "absent")) is None

    def test_searches_path(self):
        with patch("core.export.browser_backend.shutil.which",
                   side_effect=lambda name: "/opt/chrome" if name == "google-chrome" else None):
            assert find_browser() == "/opt/chrome"

    def test_nothing_installed(self):
        with patch("core.export.browser_backend.shutil.which", return_value=None):
            assert find_browser() is None
