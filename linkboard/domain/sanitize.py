import html


def escape_markup(text: str | None) -> str:
    """
    Escape text for use inside table markup, attribute values included.
    None and empty strings render as nothing.
    """
    if not text:
        return ""
    return html.escape(text, quote=True)
