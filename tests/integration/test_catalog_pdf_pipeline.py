"""
Integration tests: storage -> templating -> reportlab -> files on disk.

Uses the real reportlab backend and a filesystem template registry.
"""
import re

import pytest

from core.catalog_service import CatalogDocumentService
from core.export.exporter import DocumentExporter, build_backends
from core.models import BusinessBase, CatalogBase, CatalogStatus, ProductBase
from core.sample_data import load_sample_data
from core.storage import MemStorage
from core.templating.custom_template import sync_custom_templates
from core.templating.registry import FilesystemTemplateRegistry

pytest.importorskip("reportlab")


@pytest.fixture
def templates_dir(tmp_path):
    directory = tmp_path / "custom"
    directory.mkdir()
    return directory


@pytest.fixture
def output_dir(tmp_path):
    directory = tmp_path / "generated"
    directory.mkdir()
    return directory


@pytest.fixture
def service(templates_dir, output_dir):
    storage = MemStorage()
    load_sample_data(storage)
    registry = FilesystemTemplateRegistry(templates_dir)
    exporter = DocumentExporter(build_backends(["reportlab"]), registry)
    return CatalogDocumentService(storage, exporter, output_dir)


class TestCatalogPdfPipeline:
    """End-to-end document generation."""

    def test_sample_catalog_to_pdf(self, service, output_dir):
        storage = service.storage
        product_ids = [p.id for p in storage.get_products(1)]
        catalog = storage.create_catalog(CatalogBase(
            business_id=1, template_id=1, name="Spring Collection", product_ids=product_ids,
        ))

        result = service.generate(catalog.id)

        pdf_file = output_dir / result.pdf_url.rsplit("/", 1)[1]
        html_file = output_dir / result.html_url.rsplit("/", 1)[1]
        assert pdf_file.read_bytes().startswith(b"%PDF")
        html = html_file.read_text()
        assert "Premium Widget" in html
        assert 'class="product-grid"' in html
        assert result.product_count == 3
        assert storage.get_catalog(catalog.id).status == CatalogStatus.PUBLISHED

    def test_landscape_legal(self, service, output_dir):
        storage = service.storage
        catalog = storage.create_catalog(CatalogBase.model_validate({
            "businessId": 2, "templateId": 3, "name": "Price Sheet", "productIds": [4],
            "settings": {"pageSize": "Legal", "orientation": "landscape"},
        }))

        result = service.generate(catalog.id)

        pdf = (output_dir / result.pdf_url.rsplit("/", 1)[1]).read_bytes()
        assert re.search(rb"/MediaBox \[\s*0 0 1008 612\s*\]", pdf)

    def test_custom_template_from_disk(self, service, templates_dir, output_dir):
        (templates_dir / "holiday.html").write_text("<main data-custom>{{catalogName}} {{products}}</main>")
        (templates_dir / "holiday-product.html").write_text("<p>{{productName}}</p>")
        storage = service.storage
        created = sync_custom_templates(storage, service.exporter.registry)
        assert [t.name for t in created] == ["Holiday"]

        catalog = storage.create_catalog(CatalogBase(
            business_id=1, template_id=created[0].id, name="Gifts", product_ids=[1, 2],
        ))
        result = service.generate(catalog.id)

        html = (output_dir / result.html_url.rsplit("/", 1)[1]).read_text()
        assert html == "<main data-custom>Gifts <p>Premium Widget</p><p>Basic Gadget</p></main>"

    def test_many_products_paginate(self, service, output_dir):
        storage = service.storage
        business = storage.create_business(BusinessBase(name="Bulk Co"))
        ids = [
            storage.create_product(ProductBase(
                business_id=business.id, name=f"Item {i}", price="1.00",
                description="A long description. " * 20,
            )).id
            for i in range(30)
        ]
        catalog = storage.create_catalog(CatalogBase(
            business_id=business.id, template_id=2, name="Bulk", product_ids=ids,
        ))

        result = service.generate(catalog.id)

        pdf = (output_dir / result.pdf_url.rsplit("/", 1)[1]).read_bytes()
        assert len(re.findall(rb"/Type /Page\b", pdf)) > 1
