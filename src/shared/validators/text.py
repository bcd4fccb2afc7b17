"""Text sanitization helpers."""

import html

# Longest replacement html.escape produces ("'" -> "&#x27;")
MAX_ESCAPED_CHAR_LENGTH = 6


def sanitize(value: object) -> str:
    """Trim and HTML-escape a raw submitted value.

    ``None`` becomes an empty string and other non-string values are converted
    with ``str()`` first. Both single and double quotes are escaped.

    Examples:
        >>> sanitize("  <b>Tom & Jerry's</b> ")
        '&lt;b&gt;Tom &amp; Jerry&#x27;s&lt;/b&gt;'

    """
    if value is None:
        return ""
    return html.escape(str(value).strip(), quote=True)
