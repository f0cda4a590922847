"""Content handed over by drag and drop from outside the application."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class PasteboardContent:
    """Data carried by an external drop, currently a list of URLs."""

    urls: list[str] = field(default_factory=list)

    def add_url(self, url: str) -> None:
        """Append a URL to the content."""
        self.urls.append(url)

    def has_urls(self) -> bool:
        """Return True if at least one URL is present."""
        return bool(self.urls)


def make_pasteboard_content_with_urls(urls: Iterable[str]) -> PasteboardContent:
    """Build pasteboard content holding the given URLs in order."""
    content = PasteboardContent()
    for url in urls:
        content.add_url(url)
    return content