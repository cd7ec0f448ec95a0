"""
Dynamic template composer.

Wraps a layout fragment in a complete HTML page: base styles plus the
layout's own rules, an optional header, and an optional footer with the
generation timestamp and a page-number marker.
"""
from datetime import datetime
from typing import List, Optional

from config.logging_config import get_logger
from core.models import Business, Catalog, Product, Template
from core.templating.layouts import get_layout_generator, get_layout_styles, resolve_layout_kind
from core.templating.substitution import substitute

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

BASE_STYLES = """
        body { font-family: Arial, sans-serif; margin: 20px; }
        .header { text-align: center; margin-bottom: 30px; }
        .footer { text-align: center; margin-top: 30px; font-size: 12px; color: #999; }
        .page-number { text-align: center; font-size: 12px; color: #777; margin-top: 10px; }"""

PAGE_SHELL = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{{title}}</title>
  <style>{{base_styles}}
{{layout_styles}}
  </style>
</head>
<body>{{header}}
  <div class="products {{kind}}-layout">
    {{products}}
  </div>{{footer}}
</body>
</html>
"""

HEADER = """
  <div class="header">
    <h1>{{catalogName}}</h1>
    {{catalogDescription}}
    <p>{{businessName}}</p>
  </div>
"""

FOOTER = """
  <div class="footer">{{content}}
  </div>"""

GENERATED_LINE = "\n    <p>Generated on {{generatedDate}}</p>"

PAGE_NUMBER = '\n    <div class="page-number">Page 1</div>'


def format_timestamp(generated_at: Optional[datetime] = None) -> str:
    """Timestamp text used in "Generated on ..." lines."""
    return (generated_at or datetime.now()).strftime(TIMESTAMP_FORMAT)


def compose_dynamic_template(
    catalog: Catalog,
    products: List[Product],
    template: Template,
    business: Business,
    generated_at: Optional[datetime] = None,
) -> str:
    """Build the full catalog page from the template's layout settings.

    ``custom`` and unrecognised layout types render as a grid.
    """
    layout = template.layout
    layout_type = getattr(layout, "type", None)
    kind = resolve_layout_kind(layout_type)
    if kind != layout_type:
        logger.debug("Layout type %r rendered as %s", layout_type, kind)

    fragment = get_layout_generator(kind)(products, layout)
    options = catalog.settings

    header = ""
    if options.show_header:
        description = ""
        if catalog.description:
            description = substitute("<p>{{text}}</p>", {"text": catalog.description})
        header = substitute(HEADER, {
            "catalogName": catalog.name,
            "catalogDescription": description,
            "businessName": business.name,
        })

    footer_lines = []
    if options.show_footer:
        footer_lines.append(substitute(GENERATED_LINE, {"generatedDate": format_timestamp(generated_at)}))
    if options.show_page_numbers:
        footer_lines.append(PAGE_NUMBER)
    footer = substitute(FOOTER, {"content": "".join(footer_lines)}) if footer_lines else ""

    return substitute(PAGE_SHELL, {
        "title": catalog.name,
        "base_styles": BASE_STYLES,
        "layout_styles": get_layout_styles(kind),
        "header": header,
        "kind": kind,
        "products": fragment,
        "footer": footer,
    })
