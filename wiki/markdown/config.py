from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    raw_html must stay enabled: PlantUML blocks are swapped for HTML comment
    placeholders before conversion and Pandoc has to emit those comments
    verbatim for the restore pass to find them.
    """
    return {
        "extra_args": [
            # Enable Pandoc markdown extensions (all in --from argument)
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+smart+pipe_tables+definition_lists+footnotes+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes+implicit_header_references+fancy_lists+tex_math_dollars",
            # Math rendering with MathJax
            "--mathjax",
        ],
        "filters": [],
    }


@dataclass(frozen=True)
class PlantUMLConfig:
    """Settings read by the diagram fetcher. Owned by Django settings."""

    enabled: bool = False
    server_url: str = ""
    image_format: str = "svg"
    dark: bool = False
    timeout: float = 10
    cache_timeout: int = 3600
    max_workers: int = 4
    sanitize: bool = False


def get_plantuml_config():
    """
    Build the PlantUML configuration from ``settings.PLANTUML``.

    Example settings:

        PLANTUML = {
            "ENABLE": True,
            "SERVER_URL": "https://www.plantuml.com/plantuml",
            "IMAGE_FORMAT": "svg",
        }

    Missing keys fall back to the PlantUMLConfig defaults, so an absent
    setting leaves the feature disabled.
    """
    options = getattr(settings, "PLANTUML", None) or {}
    if not isinstance(options, dict):
        raise ImproperlyConfigured("PLANTUML setting must be a dict")

    defaults = PlantUMLConfig()

    try:
        max_workers = max(1, int(options.get("MAX_WORKERS", defaults.max_workers)))
    except (TypeError, ValueError):
        raise ImproperlyConfigured("PLANTUML['MAX_WORKERS'] must be an integer")

    return PlantUMLConfig(
        enabled=bool(options.get("ENABLE", defaults.enabled)),
        server_url=(options.get("SERVER_URL") or "").rstrip("/"),
        image_format=options.get("IMAGE_FORMAT") or defaults.image_format,
        dark=bool(options.get("DARK", defaults.dark)),
        timeout=options.get("TIMEOUT", defaults.timeout),
        cache_timeout=options.get("CACHE_TIMEOUT", defaults.cache_timeout),
        max_workers=max_workers,
        sanitize=bool(options.get("SANITIZE", defaults.sanitize)),
    )
