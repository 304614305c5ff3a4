"""
Text processing utilities.
"""
import re

_MARKDOWN_SPECIAL = re.compile(r"([_~*`\\])")


def escape_markdown(text: str | None) -> str:
    """
    Escape Discord markdown characters so entrant names cannot break formatting.

    Args:
        text: Input text

    Returns:
        Text with each of _ ~ * ` \\ prefixed by a backslash
    """
    if text is None:
        return ""

    return _MARKDOWN_SPECIAL.sub(r"\\\1", str(text))


def truncate_text(text: str, max_length: int = 200) -> str:
    """Truncate text with ellipsis if too long"""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."
