"""
Layout generators: product list -> HTML fragment.

One generator per layout family (grid, featured, list, showcase). All of
them share the same rules:

- products render in the order given;
- a product without an image never gets an ``<img>`` tag: grid and
  featured show the text ``No Image`` in the slot, list and showcase drop
  the image block;
- sku / price / description blocks appear only when the layout flag is set
  and the product field is non-empty;
- an empty product list gives an empty container.

Markup is assembled from the string constants below through
:func:`core.templating.substitution.substitute`.
"""
from typing import Callable, Dict, List, Optional

from core.models import Product
from core.templating.features import derive_features
from core.templating.substitution import substitute

LayoutGenerator = Callable[[List[Product], object], str]

NO_IMAGE = "No Image"

# ---------------------------------------------------------------------------
# Shared fragments
# ---------------------------------------------------------------------------

_IMG = '<img src="{{src}}" alt="{{alt}}"{{style}}>'

_SKU = '<div class="product-sku"{{style}}>{{label}}{{sku}}</div>'
_PRICE = '<div class="product-price"{{style}}>${{price}}</div>'
_DESCRIPTION = '<div class="product-description"{{style}}>{{description}}</div>'

_FEATURE_LIST = """
      <div class="product-features"{{container_style}}>
        <h3{{heading_style}}>{{heading}}</h3>
        <ul{{list_style}}>{{items}}</ul>
      </div>"""
_FEATURE_ITEM = "<li{{style}}>{{feature}}</li>"

_HIGHLIGHT_ITEM_STYLE = "background: #f8f9fa; padding: 10px; margin-bottom: 8px; border-left: 3px solid #4dabf7;"


def _style_attr(style: str) -> str:
    return substitute(' style="{{style}}"', {"style": style}) if style else ""


def image_html(product: Product, style: str = "max-width: 100%; max-height: 100%;") -> str:
    """``<img>`` for the product's first image, or the ``No Image`` text."""
    src = product.primary_image
    if not src:
        return NO_IMAGE
    return substitute(_IMG, {"src": src, "alt": product.name, "style": _style_attr(style)})


def sku_block(product: Product, enabled: bool = True, style: str = "", label: str = "SKU: ") -> str:
    if not (enabled and product.sku):
        return ""
    return substitute(_SKU, {"sku": product.sku, "label": label, "style": _style_attr(style)})


def price_block(product: Product, enabled: bool = True, style: str = "") -> str:
    if not (enabled and product.price):
        return ""
    return substitute(_PRICE, {"price": product.price, "style": _style_attr(style)})


def description_block(product: Product, enabled: bool = True, style: str = "") -> str:
    if not (enabled and product.description):
        return ""
    return substitute(_DESCRIPTION, {"description": product.description, "style": _style_attr(style)})


def feature_list(
    features: List[str],
    heading: str,
    highlight: bool = False,
    container_style: str = "",
    heading_style: str = "",
) -> str:
    """Bullet list of derived features, empty string when there are none."""
    if not features:
        return ""
    item_style = _HIGHLIGHT_ITEM_STYLE if highlight else "margin-bottom: 8px;"
    items = "".join(
        substitute(_FEATURE_ITEM, {"feature": f, "style": _style_attr(item_style)})
        for f in features
    )
    return substitute(_FEATURE_LIST, {
        "heading": heading,
        "items": items,
        "container_style": _style_attr(container_style),
        "heading_style": _style_attr(heading_style),
        "list_style": _style_attr("list-style-type: none; padding-left: 0;" if highlight else ""),
    })


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

_GRID = '<div class="product-grid" style="display: grid; grid-template-columns: repeat({{columns}}, 1fr); gap: 20px;">{{cards}}\n</div>'

_GRID_CARD = """
  <div class="product-card">
    {{image}}
    <div class="product-details">
      <div class="product-name">{{name}}</div>
      {{sku}}
      {{price}}
      {{description}}
    </div>
  </div>"""

_IMAGE_SLOT = '<div class="product-image"{{style}}>{{image}}</div>'


def generate_grid_layout(products: List[Product], layout) -> str:
    """Cards in an N-column CSS grid (``layout.columns``, default 2)."""
    columns = getattr(layout, "columns", None) or 2
    show_image = getattr(layout, "show_image", True)

    cards = []
    for product in products:
        image = substitute(_IMAGE_SLOT, {"image": image_html(product), "style": ""}) if show_image else ""
        cards.append(substitute(_GRID_CARD, {
            "image": image,
            "name": product.name,
            "sku": sku_block(product, getattr(layout, "show_sku", False)),
            "price": price_block(product, getattr(layout, "show_price", False)),
            "description": description_block(product, getattr(layout, "show_description", False)),
        }))

    return substitute(_GRID, {"columns": columns, "cards": "".join(cards)})


# ---------------------------------------------------------------------------
# Featured
# ---------------------------------------------------------------------------

_FEATURED = '<div class="product-featured">{{items}}\n</div>'

_FEATURED_ITEM = """
  <div class="featured-product" style="display: flex; margin-bottom: 50px;{{direction}}">
    {{image}}
    <div class="product-details" style="flex: 2; padding: 20px;">
      <h2 class="product-name">{{name}}</h2>
      {{price}}
      {{body}}
    </div>
  </div>
  <hr style="border: 0; height: 1px; background: #ddd; margin: 30px 0;">"""

_FLEX_DIRECTION = {
    "left": "",
    "right": " flex-direction: row-reverse;",
    "top": " flex-direction: column;",
}


def generate_featured_layout(products: List[Product], layout) -> str:
    """One full-width block per product.

    ``image_position`` right reverses the row; ``show_features`` turns the
    description into a "Key Features" bullet list.
    """
    position = getattr(layout, "image_position", None) or "left"
    direction = _FLEX_DIRECTION.get(position, "")
    show_image = getattr(layout, "show_image", True)
    show_features = getattr(layout, "show_features", False)
    highlight = getattr(layout, "highlight_features", False)

    items = []
    for product in products:
        image = ""
        if show_image:
            image = substitute(_IMAGE_SLOT, {
                "image": image_html(product),
                "style": _style_attr("flex: 1; padding: 20px;"),
            })

        features = derive_features(product.description) if show_features else []
        if features:
            body = feature_list(features, "Key Features", highlight=highlight)
        else:
            body = description_block(
                product,
                getattr(layout, "show_description", False),
                style="margin: 15px 0; line-height: 1.6;",
            )

        items.append(substitute(_FEATURED_ITEM, {
            "direction": direction,
            "image": image,
            "name": product.name,
            "price": price_block(
                product,
                getattr(layout, "show_price", False),
                style="font-size: 24px; color: #e63946; margin: 10px 0;",
            ),
            "body": body,
        }))

    return substitute(_FEATURED, {"items": "".join(items)})


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

_LIST = '<div class="product-list">{{rows}}\n</div>'

_LIST_ROW = """
  <div class="product-list-item" style="display: flex; align-items: {{align}}; padding: {{padding}} 0; border-bottom: 1px solid #eee;">
    {{image}}
    <div class="product-info" style="flex: 1;">
      <div class="product-name" style="font-weight: bold;{{name_style}}">{{name}}</div>
      {{sku}}
      {{description}}
    </div>
    {{price}}
  </div>"""


def generate_list_layout(products: List[Product], layout) -> str:
    """Single-column rows. ``compact`` shrinks everything and drops descriptions."""
    compact = getattr(layout, "compact", False) is True
    show_image = getattr(layout, "show_image", True)
    size = "60px" if compact else "80px"

    rows = []
    for product in products:
        image = ""
        if show_image and product.primary_image:
            image = image_html(
                product,
                style=substitute(
                    "width: {{size}}; height: {{size}}; object-fit: contain; margin-right: 15px;",
                    {"size": size},
                ),
            )

        rows.append(substitute(_LIST_ROW, {
            "align": "center" if compact else "flex-start",
            "padding": "10px" if compact else "20px",
            "image": image,
            "name_style": " font-size: 14px;" if compact else "",
            "name": product.name,
            "sku": sku_block(
                product,
                getattr(layout, "show_sku", False),
                style="font-size: 12px; color: #777;",
                label="",
            ),
            "description": description_block(
                product,
                getattr(layout, "show_description", False) and not compact,
                style="margin-top: 5px; font-size: 14px; color: #555;",
            ),
            "price": price_block(
                product,
                getattr(layout, "show_price", False),
                style=substitute(
                    "font-weight: bold; color: #e63946; font-size: {{size}}; min-width: 80px; text-align: right;",
                    {"size": "14px" if compact else "18px"},
                ),
            ),
        }))

    return substitute(_LIST, {"rows": "".join(rows)})


# ---------------------------------------------------------------------------
# Showcase
# ---------------------------------------------------------------------------

_SHOWCASE = '<div class="product-showcase">{{items}}\n</div>'

_SHOWCASE_ITEM = """
  <div class="product-showcase-item" style="margin-bottom: 60px; padding-bottom: 40px; border-bottom: 1px solid #ddd;">
    <h2 style="color: #2c3e50; text-align: center; margin-bottom: 20px; font-size: 28px;">{{name}}</h2>
    {{image}}
    <div class="product-details-showcase" style="max-width: 800px; margin: 0 auto;">
      {{description}}
      {{features}}
      {{meta}}
    </div>
  </div>"""

_SHOWCASE_IMAGE = '<div class="product-image-showcase" style="text-align: center; margin-bottom: 30px;">{{image}}</div>'

_SHOWCASE_META = '<div class="product-meta" style="display: flex; justify-content: space-between; margin-top: 30px; background: #f8f9fa; padding: 15px; border-radius: 5px;">{{sku}}{{price}}</div>'


def generate_showcase_layout(products: List[Product], layout) -> str:
    """Large centred block per product with optional feature bullets and a sku/price row."""
    show_image = getattr(layout, "show_image", True)
    bullets = getattr(layout, "show_bullet_points", False)
    highlight = getattr(layout, "highlight_features", False)

    items = []
    for product in products:
        image = ""
        if show_image and product.primary_image:
            image = substitute(_SHOWCASE_IMAGE, {
                "image": image_html(product, style="max-width: 100%; max-height: 300px; object-fit: contain;"),
            })

        features = ""
        if bullets:
            features = feature_list(
                derive_features(product.description),
                "Product Features",
                highlight=highlight,
                container_style="margin-top: 20px;",
                heading_style="color: #333; margin-bottom: 15px;",
            )

        sku = sku_block(product, style="color: #666;")
        price = price_block(product, style="font-weight: bold; color: #e63946; font-size: 20px;")
        meta = substitute(_SHOWCASE_META, {"sku": sku, "price": price}) if (sku or price) else ""

        items.append(substitute(_SHOWCASE_ITEM, {
            "name": product.name,
            "image": image,
            "description": description_block(
                product,
                not bullets,
                style="line-height: 1.6; color: #555; margin-bottom: 20px;",
            ),
            "features": features,
            "meta": meta,
        }))

    return substitute(_SHOWCASE, {"items": "".join(items)})


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

LAYOUT_GENERATORS: Dict[str, LayoutGenerator] = {
    "grid": generate_grid_layout,
    "featured": generate_featured_layout,
    "list": generate_list_layout,
    "showcase": generate_showcase_layout,
}

LAYOUT_STYLES: Dict[str, str] = {
    "grid": """
        .product-card { border: 1px solid #eee; border-radius: 8px; overflow: hidden; background: white; }
        .product-image { height: 200px; background: #f5f5f5; display: flex; align-items: center; justify-content: center; }
        .product-details { padding: 15px; }
        .product-name { font-weight: bold; margin-bottom: 5px; }
        .product-price { color: #e63946; font-weight: bold; margin: 5px 0; }
        .product-sku { font-size: 12px; color: #999; margin-bottom: 5px; }
        .product-description { font-size: 14px; color: #666; margin-top: 10px; }
    """,
    "featured": """
        .featured-product { background: white; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.05); }
        .product-name { color: #2c3e50; margin-top: 0; }
    """,
    "list": """
        .product-list { background: white; border-radius: 8px; padding: 10px; box-shadow: 0 2px 10px rgba(0,0,0,0.05); }
    """,
    "showcase": """
        .product-showcase { max-width: 900px; margin: 0 auto; }
        .product-showcase-item { background: white; border-radius: 8px; padding: 30px; box-shadow: 0 2px 10px rgba(0,0,0,0.05); }
    """,
}


def resolve_layout_kind(layout_type: Optional[str]) -> str:
    """Layout family for a template tag; anything unknown renders as grid."""
    return layout_type if layout_type in LAYOUT_GENERATORS else "grid"


def get_layout_generator(layout_type: Optional[str]) -> LayoutGenerator:
    return LAYOUT_GENERATORS[resolve_layout_kind(layout_type)]


def get_layout_styles(layout_type: Optional[str]) -> str:
    return LAYOUT_STYLES[resolve_layout_kind(layout_type)]
