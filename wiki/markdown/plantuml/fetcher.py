# wiki/markdown/plantuml/fetcher.py
"""
Fetch rendered PlantUML diagrams from a remote PlantUML server.

The server renders from the URL alone:

    {SERVER_URL}/{d?}{IMAGE_FORMAT}/{encoded source}

where the "d" prefix asks for the dark theme. Failures never propagate:
they come back as an error paragraph so one bad diagram cannot fail the
whole page.
"""

import hashlib
import logging

import requests
from django.core.cache import cache

from .encoder import encode
from .html import error_paragraph, source_paragraph
from .sanitizer import sanitize_diagram_markup

logger = logging.getLogger(__name__)


def build_diagram_url(server_url: str, image_format: str, token: str, dark: bool = False) -> str:
    dark_prefix = "d" if dark else ""
    return f"{server_url}/{dark_prefix}{image_format}/{token}"


def _cache_key(url: str, sanitize: bool) -> str:
    """Key on the full request URL and on whether the body gets sanitized."""
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()
    mode = "clean" if sanitize else "raw"
    return f"plantuml:{mode}:{digest}"


def fetch_diagram(source: str, config, dark: bool = False) -> str:
    """
    Return embeddable markup for one diagram.

    Args:
        source: PlantUML diagram source (the lines between the fences)
        config: PlantUMLConfig
        dark: Request the dark variant from the server

    Returns:
        The server response body, a paragraph holding the source when the
        feature is disabled, or an error paragraph when the fetch fails.
    """
    if not config.enabled or not config.server_url:
        return source_paragraph(source)

    token = encode(source)
    url = build_diagram_url(config.server_url, config.image_format, token, dark)

    cache_key = _cache_key(url, config.sanitize)
    if config.cache_timeout:
        cached = cache.get(cache_key)
        if cached is not None:
            logger.debug("PlantUML cache hit for %s", url)
            return cached

    logger.debug("Fetching PlantUML diagram from %s", url)
    try:
        response = requests.get(url, timeout=config.timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.warning("PlantUML fetch failed for %s: %s", url, e)
        return error_paragraph("Error fetching PlantUML diagram", e)

    try:
        content = response.text
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.warning("PlantUML response read failed for %s: %s", url, e)
        return error_paragraph("Error reading PlantUML diagram", e)

    if config.sanitize:
        try:
            content = sanitize_diagram_markup(content)
        except Exception as e:
            logger.error(f"Diagram sanitization failed for {url}: {e}", exc_info=True)
            return error_paragraph("Error sanitizing PlantUML diagram", e)

    if config.cache_timeout:
        cache.set(cache_key, content, config.cache_timeout)

    return content
