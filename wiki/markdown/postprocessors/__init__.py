# wiki/markdown/postprocessors/__init__.py

from .plantuml_enhancer import plantuml_enhancer_default
from .plantuml_restorer import plantuml_restorer_default

POSTPROCESSORS = [
    plantuml_restorer_default,  # Must be first: later passes may drop HTML comments
    plantuml_enhancer_default,  # Accessibility and state classes on diagram containers
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
