"""HTTP client for fetching food pages."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class PageClient(Protocol):
    """Interface for loading page HTML."""

    async def fetch_html(self, url: str) -> str:
        """Return the HTML of the page at url."""


@dataclass
class HttpxPageClient(PageClient):
    """HTTPX-backed page client."""

    user_agent: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, user_agent: str) -> "HttpxPageClient":
        """Create a page client with a managed httpx session."""
        return cls(
            user_agent=user_agent,
            http_client=httpx.AsyncClient(follow_redirects=True),
        )

    async def fetch_html(self, url: str) -> str:
        """Download a page, raising on HTTP errors."""
        response = await self.http_client.get(
            url,
            headers={"User-Agent": self.user_agent},
            timeout=30,
        )
        response.raise_for_status()
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
