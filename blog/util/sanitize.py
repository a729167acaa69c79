"""Comment content sanitization."""

import html
import re

import nh3

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def sanitize_text(content: str) -> str:
    """Reduce user input to plain text.

    Strips every HTML tag (script/style bodies included) and control
    characters other than tab and newlines, then trims surrounding whitespace.
    Text outside tags comes back as typed: ``&`` and a lone ``<`` are kept,
    not entity-encoded, so the result is never longer than the input.
    Escaping is left to whoever renders it.
    """
    cleaned = html.unescape(nh3.clean(content, tags=set(), strip_comments=True))
    return _CONTROL_CHARS.sub("", cleaned).strip()
