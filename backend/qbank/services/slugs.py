"""
Slug derivation: lower-case, hyphenated, URL-safe identifier from a title or question text.
"""
import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^\w-]+", re.ASCII)


def slugify(text: str) -> str:
    """
    Trim and lower-case text, collapse whitespace runs into one hyphen, drop anything
    that is not an ASCII word character or hyphen.
    slugify("What is HTML?") -> "what-is-html"
    """
    slug = _WHITESPACE_RE.sub("-", text.strip().lower())
    return _NON_SLUG_RE.sub("", slug)
