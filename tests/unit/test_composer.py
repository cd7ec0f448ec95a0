"""
Unit tests for core/templating/composer.py
"""
import pytest

from core.models import CatalogSettings, CustomLayout, FeaturedLayout, GenericLayout, GridLayout
from core.templating.composer import compose_dynamic_template, format_timestamp


class TestComposeDynamicTemplate:
    """Test the full-page composer."""

    def test_full_document(self, catalog, products, grid_template, business, fixed_time):
        html = compose_dynamic_template(catalog, products, grid_template, business, fixed_time)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Summer Line</title>" in html
        assert "<h1>Summer Line</h1>" in html
        assert "<p>Warm weather picks</p>" in html
        assert "<p>Acme Supply</p>" in html
        assert 'class="products grid-layout"' in html
        assert "Generated on 2024-05-01 12:30:00" in html
        assert 'class="page-number"' in html

    def test_layout_styles_follow_dispatch(self, catalog, products, business, fixed_time, make_template):
        html = compose_dynamic_template(catalog, products, make_template(FeaturedLayout()), business, fixed_time)
        assert ".featured-product {" in html
        assert 'class="products featured-layout"' in html

    @pytest.mark.parametrize("layout", [CustomLayout(custom_template="gone.html"), GenericLayout(type="mosaic")])
    def test_custom_and_unknown_render_as_grid(self, catalog, products, business, fixed_time, make_template, layout):
        html = compose_dynamic_template(catalog, products, make_template(layout), business, fixed_time)
        assert 'class="product-grid"' in html
        assert 'class="products grid-layout"' in html

    def test_header_hidden(self, products, grid_template, business, fixed_time, make_catalog):
        catalog = make_catalog(settings=CatalogSettings(show_header=False))
        html = compose_dynamic_template(catalog, products, grid_template, business, fixed_time)
        assert 'class="header"' not in html
        assert "<h1>" not in html

    def test_footer_and_page_numbers_hidden(self, products, grid_template, business, fixed_time, make_catalog):
        catalog = make_catalog(settings=CatalogSettings(show_footer=False, show_page_numbers=False))
        html = compose_dynamic_template(catalog, products, grid_template, business, fixed_time)
        assert "Generated on" not in html
        assert 'class="page-number"' not in html
        assert '<div class="footer">' not in html

    def test_page_number_without_footer_text(self, products, grid_template, business, fixed_time, make_catalog):
        catalog = make_catalog(settings=CatalogSettings(show_footer=False, show_page_numbers=True))
        html = compose_dynamic_template(catalog, products, grid_template, business, fixed_time)
        assert "Generated on" not in html
        assert 'class="page-number"' in html

    def test_no_description_paragraph_when_empty(self, products, grid_template, business, fixed_time, make_catalog):
        html = compose_dynamic_template(make_catalog(), products, grid_template, business, fixed_time)
        assert "<p></p>" not in html

    def test_deterministic(self, catalog, products, grid_template, business, fixed_time):
        first = compose_dynamic_template(catalog, products, grid_template, business, fixed_time)
        second = compose_dynamic_template(catalog, products, grid_template, business, fixed_time)
        assert first == second

    def test_values_with_braces_not_expanded(self, products, grid_template, business, fixed_time, make_catalog):
        catalog = make_catalog(name="Sale {{businessName}}")
        html = compose_dynamic_template(catalog, products, grid_template, business, fixed_time)
        assert "<h1>Sale {{businessName}}</h1>" in html


class TestFormatTimestamp:
    def test_format(self, fixed_time):
        assert format_timestamp(fixed_time) == "2024-05-01 12:30:00"

    def test_defaults_to_now(self):
        assert len(format_timestamp()) == 19
