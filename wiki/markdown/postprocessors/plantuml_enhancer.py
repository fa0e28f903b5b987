# wiki/markdown/postprocessors/plantuml_enhancer.py
"""
Postprocessor that decorates restored PlantUML containers.

This postprocessor:
- Gives inline SVG diagrams role="img" and an aria-label
- Adds "plantuml--error" to containers holding a fetch error
- Adds "plantuml--source" to containers showing the raw source (feature disabled)
- Numbers containers with data-diagram-index in document order
"""

from typing import List, Optional

from bs4 import BeautifulSoup

from wiki.markdown.plantuml.html import ERROR_CLASS
from wiki.markdown.plantuml.store import CONTAINER_CLASS


def _add_classes(element, classes: List[str]) -> None:
    existing_classes = element.get("class", [])
    if isinstance(existing_classes, str):
        existing_classes = existing_classes.split()
    element["class"] = list(dict.fromkeys(existing_classes + classes))


def plantuml_enhancer(
    html: str,
    context: dict,
    container_class: str = CONTAINER_CLASS,
    aria_label: Optional[str] = "PlantUML diagram",
) -> str:
    """
    Add state classes and accessibility attributes to diagram containers.

    Args:
        html: HTML string to process
        context: Context dictionary (unused)
        container_class: Class marking diagram containers
        aria_label: Label for inline SVG; None leaves the SVG unlabelled

    Returns:
        Processed HTML
    """
    if container_class not in html:
        return html

    soup = BeautifulSoup(html, "html.parser")
    containers = soup.find_all("div", class_=container_class)
    if not containers:
        return html

    for index, container in enumerate(containers):
        container["data-diagram-index"] = str(index)

        if container.find("p", class_=ERROR_CLASS):
            _add_classes(container, [f"{container_class}--error"])
            continue

        svg = container.find("svg")
        if svg is not None:
            svg["role"] = "img"
            if aria_label and not svg.get("aria-label"):
                svg["aria-label"] = aria_label
            continue

        if container.find("img") is None and container.find("p") is not None:
            _add_classes(container, [f"{container_class}--source"])

    return str(soup)


def plantuml_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for plantuml_enhancer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return plantuml_enhancer(html, context)
