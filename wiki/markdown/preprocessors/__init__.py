# wiki/markdown/preprocessors/__init__.py

from .plantuml_extractor import plantuml_extractor_default

PREPROCESSORS = [
    plantuml_extractor_default,  # Must run before anything that reads fenced code
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
