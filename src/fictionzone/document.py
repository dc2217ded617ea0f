"""BeautifulSoup implementation of the DocumentQuery protocol.

Text extraction follows jQuery-style semantics: ``text(selector)`` joins
the text of every match, ``attr`` and ``inner_html`` read the first match.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


class SoupDocument:
    """A parsed document, or one element of it, queried by CSS selector."""

    def __init__(self, root: Tag) -> None:
        self._root = root

    def select(self, selector: str) -> list[SoupDocument]:
        return [SoupDocument(node) for node in self._root.select(selector)]

    def text(self, selector: str | None = None) -> str:
        if selector is None:
            return self._root.get_text()
        return "".join(self.texts(selector))

    def texts(self, selector: str) -> list[str]:
        return [node.get_text() for node in self._root.select(selector)]

    def attr(self, name: str, selector: str | None = None) -> str | None:
        node = self._root if selector is None else self._root.select_one(selector)
        if node is None:
            return None
        value = node.get(name)
        if isinstance(value, list):  # multi-valued attributes such as class
            return " ".join(value)
        return value

    def inner_html(self, selector: str) -> str | None:
        node = self._root.select_one(selector)
        if node is None:
            return None
        return node.decode_contents()


def load_document(html: str) -> SoupDocument:
    return SoupDocument(BeautifulSoup(html, "html.parser"))
