"""Shared fixtures for core unit tests"""

from html.parser import HTMLParser

import pytest


VOID_TAGS = {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}


class _TagBalance(HTMLParser):
    def __init__(self):
        super().__init__()
        self.stack: list[str] = []
        self.errors: list[str] = []

    def handle_starttag(self, tag, attrs):
        if tag not in VOID_TAGS:
            self.stack.append(tag)

    def handle_endtag(self, tag):
        if not self.stack or self.stack[-1] != tag:
            self.errors.append(f"unexpected </{tag}>")
        else:
            self.stack.pop()


@pytest.fixture(name="assert_well_formed")
def assert_well_formed_fixture():
    """Return a checker asserting every opened element is closed in order."""
    def _check(html: str) -> None:
        parser = _TagBalance()
        parser.feed(html)
        parser.close()
        assert parser.errors == []
        assert parser.stack == [], f"unclosed tags: {parser.stack}"
    return _check
