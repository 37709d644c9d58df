"""Backend client that receives scraped nutrition records."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class SinkError(RuntimeError):
    """Raised when the backend rejects a record or cannot be reached."""

    def __init__(
        self, message: str, status_code: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RecordSink(Protocol):
    """Interface for submitting records to the backend."""

    async def submit(self, payload: dict[str, object]) -> object:
        """Submit a record and return the backend's JSON response."""


@dataclass
class HttpxRecordSink(RecordSink):
    """HTTPX-backed record sink for the `/food/script` endpoint."""

    base_url: str
    region: str
    language: str
    source: str
    http_client: httpx.AsyncClient
    timeout_seconds: float | None = None

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        base_url: str,
        region: str,
        language: str,
        source: str,
        timeout_seconds: float | None = None,
    ) -> "HttpxRecordSink":
        """Create a record sink with a managed httpx session."""
        return cls(
            base_url=base_url,
            region=region,
            language=language,
            source=source,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def submit(self, payload: dict[str, object]) -> object:
        """POST the record as JSON and return the parsed response body."""
        url = f"{self.base_url.rstrip('/')}/food/script"
        timeout = (
            httpx.USE_CLIENT_DEFAULT
            if self.timeout_seconds is None
            else self.timeout_seconds
        )
        try:
            response = await self.http_client.post(
                url,
                params={
                    "region": self.region,
                    "language": self.language,
                    "source": self.source,
                },
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=timeout,
            )
        except httpx.HTTPError as exc:
            raise SinkError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            raise SinkError(
                f"HTTP error! status: {response.status_code} - {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise SinkError(
                f"Invalid JSON response! status: {response.status_code} - "
                f"{response.text}",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
