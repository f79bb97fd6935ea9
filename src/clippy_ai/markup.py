"""Lightweight HTML handling: title lookup and tag stripping.

Neither function is an HTML parser. Both scan the raw markup linearly and
accept that malformed input (unclosed tags, stray ``<``) can leak tag text
into the output or toggle script/style suppression incorrectly.
"""

import re

from .utils import extract_host

MAX_TEXT_CHARS = 10_000

# Order matters: &amp; is decoded first
_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
)

_TITLE_OPEN = re.compile(r"<title", re.IGNORECASE)
_TITLE_CLOSE = re.compile(r"</title>", re.IGNORECASE)

_SUPPRESS_START = ("script", "style")
_SUPPRESS_END = ("/script", "/style")


def decode_entities(text: str) -> str:
    """Replace the handful of common entities by literal substitution."""
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def find_title(html: str) -> str:
    """Return the decoded, trimmed ``<title>`` text, or "" if there is none."""
    start = _TITLE_OPEN.search(html)
    if not start:
        return ""
    gt = html.find(">", start.end())
    if gt == -1:
        return ""
    end = _TITLE_CLOSE.search(html, gt + 1)
    if not end:
        return ""
    return decode_entities(html[gt + 1:end.start()]).strip()


def extract_title(html: str, url: str) -> str:
    """Best human-readable title for a page.

    Falls back to the URL's host, then to the URL itself.
    """
    title = find_title(html)
    if title:
        return title
    return extract_host(url) or url


def strip_html(html: str) -> str:
    """Reduce markup to whitespace-collapsed plain text.

    Script and style bodies are dropped and each tag becomes a single space.
    The result is capped at MAX_TEXT_CHARS characters.
    """
    out = []
    tag = []
    in_tag = False
    suppressed = False

    for ch in html:
        if ch == "<":
            in_tag = True
            tag = []
        elif ch == ">":
            name = "".join(tag).lower()
            if name.startswith(_SUPPRESS_START):
                suppressed = True
            elif name.startswith(_SUPPRESS_END):
                suppressed = False
            in_tag = False
            out.append(" ")
        elif in_tag:
            tag.append(ch)
        elif not suppressed:
            out.append(ch)

    text = " ".join("".join(out).split())
    return text[:MAX_TEXT_CHARS]
