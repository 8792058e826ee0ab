import html
from typing import Any


def sanitize_string(value: Any) -> str:
    """
    Sanitize a value by escaping HTML special characters to prevent XSS.
    Returns an empty string if input is None.
    """
    if value is None:
        return ""
    return html.escape(str(value), quote=True)
