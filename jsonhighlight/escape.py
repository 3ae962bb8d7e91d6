"""
This module provides the escaping routine used by the JSONHighlight formatter.
Every piece of text that comes from the data (object keys, string values and
the text of unknown values) goes through here before it is embedded in markup.
"""

# One entry per character that can break out of HTML text or attribute content
HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "'": "&#39;",
    '"': "&quot;",
}

_ESCAPE_TABLE = str.maketrans(HTML_ENTITIES)


def escape_html(text: str) -> str:
    """
    Escape the five HTML-significant characters in a string.

    The substitution is a single left-to-right pass: replacement text is never
    scanned again, so escaping an already escaped string encodes its
    ampersands a second time.

    Args:
        text: Any string, possibly empty

    Returns:
        str: The escaped string

    Example:
        >>> escape_html('<a href="x">Tom & Jerry</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;'
    """
    return text.translate(_ESCAPE_TABLE)
