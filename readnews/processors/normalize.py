from __future__ import annotations

import html
import re
import unicodedata

from bs4 import BeautifulSoup

_whitespace_re = re.compile(r"\s+")
_control_chars_re = re.compile(r"[\u0000-\u0008\u000B\u000C\u000E-\u001F\u007F]")

# Guardian trail text wraps words and fragments of words in these
_INLINE_TAGS = ("strong", "b", "em", "i", "a", "span")

_QUOTE_TRANSLATION = {
    ord("\u2018"): "'",
    ord("\u2019"): "'",
    ord("\u201C"): '"',
    ord("\u201D"): '"',
}


def trail_text_to_plain(markup: str | None) -> str:
    """Render a ``trailText`` value as one line of plain text.

    Inline emphasis and links are merged into the surrounding words,
    ``<br>`` and paragraph breaks become spaces, and entities are decoded
    even when the API escaped them twice (``&amp;#39;``).
    """
    if not markup:
        return ""

    soup = BeautifulSoup(markup, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with(" ")
    for tag in soup.find_all(_INLINE_TAGS):
        tag.unwrap()
    soup.smooth()

    text = html.unescape(soup.get_text(" "))
    return _whitespace_re.sub(" ", text).strip()


def display_text(text: str | None) -> str:
    """Make a title or description safe to print on a terminal line."""
    if not text:
        return ""

    text = text.translate(_QUOTE_TRANSLATION)
    # NFKC folds non-breaking spaces and the ellipsis character
    text = unicodedata.normalize("NFKC", text)
    text = _control_chars_re.sub(" ", text)
    return _whitespace_re.sub(" ", text).strip()
