"""Small HTML fragments shared by the PlantUML fetcher and store."""

ERROR_CLASS = "plantuml-error"


def escape_text(value) -> str:
    """
    Escape text for use as element content.

    Only "&" and "<" can start markup inside text content, so ">" is left
    alone and diagram arrows such as "A->B" read the same in the page.
    """
    return str(value).replace("&", "&amp;").replace("<", "&lt;")


def source_paragraph(source: str) -> str:
    return f"<p>{escape_text(source)}</p>"


def error_paragraph(message: str, error) -> str:
    return f'<p class="{ERROR_CLASS}">{escape_text(message)}: {escape_text(error)}</p>'
