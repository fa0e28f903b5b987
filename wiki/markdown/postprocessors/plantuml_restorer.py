# wiki/markdown/postprocessors/plantuml_restorer.py

from wiki.markdown.plantuml import find_diagram_store


def restore_plantuml_blocks(html: str, context: dict) -> str:
    """
    Put rendered PlantUML diagrams back in place of their placeholders.

    Must run after Pandoc and before anything that would strip HTML comments.
    A context that never went through the extractor is returned unchanged.
    """
    store = find_diagram_store(context)
    if store is None:
        return html
    return store.restore(html)


def plantuml_restorer_default(html: str, context: dict) -> str:
    return restore_plantuml_blocks(html, context)
