"""HTML excerpts: cut rendered markup to a character budget without breaking tags or words"""

import re
from html import escape

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


MORE_MARKER = "<!-- more -->"
SKIPPED_TAGS = {"script", "style", "template"}

_WS_RE = re.compile(r'(\s+)')


class _Budget:
    """Remaining characters for one excerpt; the ellipsis is reserved up front and cut to fit."""

    def __init__(self, limit: int, ellipsis: str):
        self.ellipsis = ellipsis[:max(limit, 0)]
        self.remaining = limit - len(self.ellipsis)
        self.emitted_text = False
        self.exhausted = False

    def take(self, text: str) -> bool:
        if len(text) > self.remaining:
            return False
        self.remaining -= len(text)
        return True

    def cut(self, out: list[str]) -> None:
        if not self.exhausted:
            self.exhausted = True
            out.append(self.ellipsis)


def _opening_tag(tag: Tag) -> str:
    parts = [tag.name]
    for name, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        parts.append(name if value is None else f'{name}="{escape(value)}"')
    return f"<{' '.join(parts)}>"


def _hard_cut(text: str, budget: _Budget) -> str:
    """Keep as many leading characters of a single overlong word as fit."""
    kept = []
    for ch in text:
        esc = escape(ch, quote=False)
        if not budget.take(esc):
            break
        kept.append(esc)
    return "".join(kept)


def _emit_text(text: str, out: list[str], budget: _Budget) -> None:
    escaped = escape(text, quote=False)
    if budget.take(escaped):
        out.append(escaped)
        budget.emitted_text = budget.emitted_text or bool(text.strip())
        return

    kept = []
    for piece in _WS_RE.split(text):
        if not piece:
            continue
        esc = escape(piece, quote=False)
        if not budget.take(esc):
            break
        kept.append(esc)
    partial = "".join(kept).rstrip()
    if not partial and not budget.emitted_text:
        partial = _hard_cut(text.lstrip(), budget)
    out.append(partial)
    budget.cut(out)


def _emit(node: Tag, out: list[str], budget: _Budget) -> None:
    """Serialize node's children into out until the budget runs out.

    Closing tags are charged when an element opens, so every element that
    was started is closed even when the cut happens inside it.
    """
    for child in node.children:
        if budget.exhausted:
            return
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            _emit_text(str(child), out, budget)
            continue
        if not isinstance(child, Tag) or child.name in SKIPPED_TAGS:
            continue

        void = child.can_be_empty_element
        opening = _opening_tag(child)
        closing = "" if void else f"</{child.name}>"
        if not budget.take(opening + closing):
            budget.cut(out)
            return
        out.append(opening)
        if not void:
            _emit(child, out, budget)
            out.append(closing)


def excerpt_html(
    html: str,
    max_length: int = 250,
    ellipsis: str = "…",
    marker: str = MORE_MARKER,
    ) -> str:
    """Return a well-formed HTML excerpt of at most max_length characters.

    Content before an explicit marker comment wins when present. Otherwise
    short HTML is returned as-is and long HTML is cut at a word boundary,
    suffixed with ellipsis, with all open elements closed.
    """
    if marker and marker in html:
        html = html.split(marker, 1)[0]
    elif len(html.strip()) <= max_length:
        return html.strip()

    out: list[str] = []
    _emit(BeautifulSoup(html, "html.parser"), out, _Budget(max_length, ellipsis))
    return "".join(out).strip()
