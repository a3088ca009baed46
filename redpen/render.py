"""
HTML rendering of checked text.

Produces a minimal HTML document in which misspelled words are wrapped in
a highlighted inline element. All text, inside or outside a highlight, is
HTML-escaped; newlines between words become <br> line breaks.
"""

from __future__ import annotations

import html
from collections.abc import Iterable

from redpen.config import DEFAULT_HIGHLIGHT_STYLE
from redpen.models import Token

DOCUMENT_START = "<html>\n"
DOCUMENT_END = "</html>\n"
LINE_BREAK = "<br>\n"


def escape_text(text: str) -> str:
    """Escape &, < and > (quotes are left alone)."""
    return html.escape(text, quote=False)


def escape_between(text: str) -> str:
    """Escape text that lies between words, turning newlines into <br>."""
    return escape_text(text).replace("\n", LINE_BREAK)


def highlight(word: str, style: str = DEFAULT_HIGHLIGHT_STYLE) -> str:
    """Wrap an (unescaped) word in the invalid-word marker."""
    return f'<a style="{html.escape(style)}">{escape_text(word)}</a>'


def render_html(
    text: str,
    tokens: Iterable[Token],
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
) -> str:
    """
    Render text as HTML with invalid words highlighted.

    Args:
        text: The original text the tokens were scanned from.
        tokens: Tokens ordered by start offset, non-overlapping.
        highlight_style: CSS applied to the marker around invalid words.

    Returns:
        The complete HTML document.

    Example:
        >>> tokens = check_tokens("cat & dg", Dictionary.from_words(["cat"]))
        >>> render_html("cat & dg", tokens)
        '<html>\\ncat &amp; <a style="color:red">dg</a></html>\\n'
    """
    parts = [DOCUMENT_START]
    last_pos = 0

    for token in tokens:
        if token.start > last_pos:
            parts.append(escape_between(text[last_pos : token.start]))

        word = token.text_in(text)
        parts.append(escape_text(word) if token.is_valid else highlight(word, highlight_style))
        last_pos = token.end

    if last_pos < len(text):
        parts.append(escape_between(text[last_pos:]))

    parts.append(DOCUMENT_END)
    return "".join(parts)
