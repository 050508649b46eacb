"""Read-only views over a parsed HTML document with noise subtrees masked out."""

from __future__ import annotations

from typing import Iterable, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .text import WHITESPACE_PATTERN, clean_text
from .vocabulary import NOISE_SELECTORS

BLOCK_TAGS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "br",
        "dd",
        "div",
        "dl",
        "dt",
        "figcaption",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "td",
        "th",
        "tr",
        "ul",
    }
)


class DocumentView:
    """Query a soup while treating noise subtrees as absent.

    The parsed tree is never modified: matching noise elements are recorded
    in an ignore set and skipped by every query and text walk. Several views
    with different ignore sets can therefore share one soup.
    """

    def __init__(self, soup: BeautifulSoup, ignore_selectors: Iterable[str] = NOISE_SELECTORS) -> None:
        self.soup = soup
        self._ignored: frozenset[int] = frozenset(
            id(element)
            for selector in ignore_selectors
            for element in soup.select(selector)
        )

    @classmethod
    def parse(cls, html: str, ignore_selectors: Iterable[str] = NOISE_SELECTORS) -> "DocumentView":
        return cls(BeautifulSoup(html, "lxml"), ignore_selectors)

    def with_ignored(self, ignore_selectors: Iterable[str]) -> "DocumentView":
        """Return a second view over the same soup with a different ignore set."""
        return DocumentView(self.soup, ignore_selectors)

    def is_ignored(self, element: Tag) -> bool:
        if id(element) in self._ignored:
            return True
        return any(id(parent) in self._ignored for parent in element.parents)

    def select(self, selector: str) -> list[Tag]:
        return [element for element in self.soup.select(selector) if not self.is_ignored(element)]

    def select_one(self, selector: str) -> Tag | None:
        for element in self.soup.select(selector):
            if not self.is_ignored(element):
                return element
        return None

    def select_within(self, element: Tag, selector: str) -> list[Tag]:
        return [child for child in element.select(selector) if not self.is_ignored(child)]

    def next_siblings(self, element: Tag) -> Iterator[Tag]:
        """Yield following element siblings that are not masked."""
        for sibling in element.find_next_siblings():
            if id(sibling) not in self._ignored:
                yield sibling

    def text(self, element: Tag | None, *, block_separator: str = " ") -> str:
        """Concatenate visible text below *element*, skipping masked subtrees."""
        if element is None:
            return ""
        parts: list[str] = []
        self._collect_text(element, parts, block_separator)
        return "".join(parts)

    def _collect_text(self, node: Tag, parts: list[str], block_separator: str) -> None:
        for child in node.children:
            if isinstance(child, Tag):
                if id(child) in self._ignored:
                    continue
                is_block = child.name in BLOCK_TAGS
                if is_block:
                    parts.append(block_separator)
                self._collect_text(child, parts, block_separator)
                if is_block:
                    parts.append(block_separator)
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                # Source line breaks inside a text node are not block breaks
                parts.append(WHITESPACE_PATTERN.sub(" ", str(child)))

    def lines(self) -> list[str]:
        """Visible text of the document body, one block per line."""
        root = self.soup.body or self.soup
        raw = self.text(root, block_separator="\n")
        return [line for line in (clean_text(part) for part in raw.splitlines()) if line]


def visible_text_lines(html: str) -> list[str]:
    return DocumentView.parse(html).lines()
