"""HTTP client for a self-hosted image tagging service."""

from dataclasses import dataclass

import httpx

from nutrify.services.tagging import ClassifierClient


@dataclass
class HttpxClassifierClient(ClassifierClient):
    """HTTPX-backed classifier client.

    The service accepts the raw image as the request body and answers with
    ``{"tags": [...]}``.
    """

    url: str
    http_client: httpx.AsyncClient
    api_key: str | None = None
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, url: str, api_key: str | None = None, timeout_seconds: float = 15.0
    ) -> "HttpxClassifierClient":
        """Create a classifier client with a managed httpx session."""
        return cls(
            url=url,
            http_client=httpx.AsyncClient(),
            api_key=api_key,
            timeout_seconds=timeout_seconds,
        )

    async def classify(self, image_bytes: bytes, mime_type: str) -> dict[str, object]:
        """Post image bytes and return the decoded response."""
        headers = {"Content-Type": mime_type}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        response = await self.http_client.post(
            self.url,
            content=image_bytes,
            headers=headers,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
