# wiki/markdown/plantuml/sanitizer.py

from functools import lru_cache

import bleach
from bleach.css_sanitizer import ALLOWED_CSS_PROPERTIES, ALLOWED_SVG_PROPERTIES, CSSSanitizer


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for diagram markup."""
    allowed_tags = {
        # raster formats come back wrapped in an image tag
        "img",
        "p",
        "div",
        "span",
        "pre",
        # svg structure
        "svg",
        "g",
        "defs",
        "desc",
        "title",
        "symbol",
        "use",
        "clippath",
        "clipPath",
        "mask",
        "marker",
        "pattern",
        "lineargradient",
        "linearGradient",
        "radialgradient",
        "radialGradient",
        "stop",
        "filter",
        "feoffset",
        "feOffset",
        "fegaussianblur",
        "feGaussianBlur",
        "feblend",
        "feBlend",
        "fecolormatrix",
        "feColorMatrix",
        "feflood",
        "feFlood",
        "fecomposite",
        "feComposite",
        # svg shapes
        "path",
        "rect",
        "circle",
        "ellipse",
        "line",
        "polyline",
        "polygon",
        # svg text
        "text",
        "tspan",
        "textpath",
        "textPath",
    }

    svg_attrs = [
        "xmlns",
        "xmlns:xlink",
        "version",
        "viewBox",
        "viewbox",
        "preserveAspectRatio",
        "preserveaspectratio",
        "width",
        "height",
        "x",
        "y",
        "x1",
        "y1",
        "x2",
        "y2",
        "cx",
        "cy",
        "r",
        "rx",
        "ry",
        "d",
        "points",
        "transform",
        "fill",
        "fill-opacity",
        "fill-rule",
        "stroke",
        "stroke-width",
        "stroke-opacity",
        "stroke-dasharray",
        "stroke-linecap",
        "stroke-linejoin",
        "opacity",
        "font-family",
        "font-size",
        "font-style",
        "font-weight",
        "text-anchor",
        "textLength",
        "textlength",
        "lengthAdjust",
        "lengthadjust",
        "dominant-baseline",
        "href",
        "xlink:href",
        "offset",
        "stop-color",
        "stop-opacity",
        "markerWidth",
        "markerheight",
        "markerHeight",
        "markerwidth",
        "refX",
        "refY",
        "refx",
        "refy",
        "orient",
        "filterUnits",
        "filterunits",
        "dx",
        "dy",
        "stdDeviation",
        "stddeviation",
        "in",
        "in2",
        "result",
        "mode",
        "values",
        "type",
        "clip-path",
        "mask",
        "filter",
        "style",
        "contentStyleType",
        "contentstyletype",
        "zoomAndPan",
        "zoomandpan",
    ]

    allowed_attrs = {
        "*": ["class", "id", "data-*", "aria-*", "role"] + svg_attrs,
        "img": ["src", "alt", "title", "width", "height", "loading", "decoding"],
    }

    # data: URIs carry raster output for some server formats
    allowed_protocols = {"http", "https", "data"}

    # PlantUML writes most presentation into style attributes: dashed
    # lifelines, the svg background and text styling all live there
    diagram_css_properties = frozenset(
        {
            "background",
            "stroke-dasharray",
            "stroke-dashoffset",
            "stroke-miterlimit",
            "font-family",
            "font-size",
            "font-style",
            "font-weight",
            "text-decoration",
            "white-space",
            "opacity",
            "display",
            "width",
            "height",
        }
    )

    css_sanitizer = CSSSanitizer(
        allowed_css_properties=ALLOWED_CSS_PROPERTIES | diagram_css_properties,
        allowed_svg_properties=ALLOWED_SVG_PROPERTIES,
    )

    return allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer


def sanitize_diagram_markup(markup: str) -> str:
    """
    Clean markup returned by the diagram server before it is embedded.

    Scripts, event handler attributes and foreign elements are dropped;
    comments are stripped so server output can never inject a placeholder.
    """
    allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer = _get_bleach_config()

    return bleach.clean(
        markup,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        css_sanitizer=css_sanitizer,
        strip=True,
        strip_comments=True,
    )
