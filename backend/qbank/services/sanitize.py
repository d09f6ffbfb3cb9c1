"""
Free-text sanitization for question and answer bodies: escape markup so stored text renders inert.
"""
import html


def sanitize_text(text: str) -> str:
    """Escape &, < and > (quotes left as-is; output targets HTML text content, not attributes)."""
    return html.escape(text, quote=False)
