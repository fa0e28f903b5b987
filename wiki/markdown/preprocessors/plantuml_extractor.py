"""
Preprocessor that lifts PlantUML blocks out of the markdown before Pandoc.

Converts:
    ```plantuml            <!-- PLANTUML_BLOCK_0 -->
    A->B: hi          →
    ```

The rendered diagram is kept in the DiagramStore of the render context and
put back by the plantuml_restorer postprocessor.
"""

from wiki.markdown.plantuml import get_diagram_store


def extract_plantuml_blocks(text: str, context: dict, config=None, fetch=None) -> str:
    """
    Replace PlantUML blocks with placeholder comments.

    Args:
        text: Raw markdown text
        context: Render context; receives the DiagramStore. A truthy "dark"
            key requests dark-theme diagrams.
        config: PlantUMLConfig, defaults to settings.PLANTUML
        fetch: Callable (source, config, dark) -> markup, defaults to
            fetch_diagram

    Returns:
        Markdown with placeholders
    """
    store = get_diagram_store(context, config=config, fetch=fetch, dark=context.get("dark"))
    return store.extract(text)


def plantuml_extractor_default(text: str, context: dict) -> str:
    """
    Default configuration for plantuml_extractor.

    Register this in PREPROCESSORS.
    """
    return extract_plantuml_blocks(text, context)
