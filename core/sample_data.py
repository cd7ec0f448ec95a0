"""Sample businesses and products loaded in development mode."""
from config.logging_config import get_logger
from core.models import BusinessBase, ProductBase
from core.storage import MemStorage

logger = get_logger(__name__)


SAMPLE_BUSINESSES = [
    {
        "name": "Sample Company",
        "description": "A sample company for development purposes",
        "address": "123 Sample Street, Sample City, 12345",
        "contactEmail": "contact@samplecompany.com",
        "contactPhone": "+1 (123) 456-7890",
        "settings": {
            "defaultTemplateId": 1,
            "theme": {"primary": "#3366FF", "secondary": "#FF6633"},
            "pdfSettings": {"defaultSize": "A4", "defaultOrientation": "portrait"},
        },
    },
    {
        "name": "Test Corporation",
        "description": "A test corporation for development purposes",
        "address": "456 Test Avenue, Test Town, 67890",
        "contactEmail": "info@testcorp.com",
        "contactPhone": "+1 (987) 654-3210",
        "settings": {
            "defaultTemplateId": 2,
            "theme": {"primary": "#22CCAA", "secondary": "#AA22CC"},
            "pdfSettings": {"defaultSize": "Letter", "defaultOrientation": "landscape"},
        },
    },
]

# Products reference businesses by position in SAMPLE_BUSINESSES
SAMPLE_PRODUCTS = [
    (0, {
        "name": "Premium Widget",
        "sku": "W-PREMIUM-001",
        "description": "High-quality premium widget. Built with advanced features. Ships fully assembled.",
        "price": "99.99",
        "category": "Widgets",
        "tags": ["premium", "featured", "bestseller"],
        "images": ["https://images.unsplash.com/photo-1523275335684-37898b6baf30"],
        "variations": [
            {"name": "Color", "options": ["Red", "Blue", "Green"]},
            {"name": "Size", "options": ["Small", "Medium", "Large"]},
        ],
    }),
    (0, {
        "name": "Basic Gadget",
        "sku": "G-BASIC-002",
        "description": "Affordable basic gadget for everyday use",
        "price": "49.99",
        "category": "Gadgets",
        "tags": ["basic", "affordable", "popular"],
        "images": ["https://images.unsplash.com/photo-1546868871-7041f2a55e12"],
        "variations": [{"name": "Color", "options": ["Black", "White", "Silver"]}],
    }),
    (0, {
        "name": "Deluxe Accessory",
        "sku": "A-DELUXE-003",
        "description": "Luxury accessory to complement your widgets and gadgets",
        "price": "149.99",
        "category": "Accessories",
        "tags": ["luxury", "premium"],
    }),
    (1, {
        "name": "Test Product",
        "sku": "TEST-001",
        "description": "Product owned by the test corporation",
        "price": "19.99",
        "category": "Testing",
        "tags": ["test"],
    }),
]


def load_sample_data(storage: MemStorage) -> None:
    """Populate ``storage`` with the sample businesses and products."""
    business_ids = []
    for entry in SAMPLE_BUSINESSES:
        business = storage.create_business(BusinessBase.model_validate(entry))
        business_ids.append(business.id)

    for index, entry in SAMPLE_PRODUCTS:
        storage.create_product(
            ProductBase.model_validate({**entry, "businessId": business_ids[index]})
        )

    logger.info(
        "Sample data loaded: %d businesses, %d products",
        len(SAMPLE_BUSINESSES), len(SAMPLE_PRODUCTS),
    )
