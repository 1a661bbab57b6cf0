from __future__ import annotations

from typing import Any, List, Optional

import httpx

from agent.tools.errors import ImageSearchError


def _extract_urls(data: Any) -> List[str]:
    urls = data.get("data") if isinstance(data, dict) else None
    if not isinstance(urls, list):
        raise ImageSearchError("Invalid response from image API")
    return [str(url) for url in urls]


class ImageSearchClient:
    """Client for the image-search API: ``GET <endpoint>?query=...`` -> ``{"data": [url, ...]}``."""

    def __init__(
        self,
        endpoint: str,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    def search(self, query: str) -> List[str]:
        if not self.endpoint:
            raise ImageSearchError("IMAGE_API_URL not configured")

        try:
            with httpx.Client(
                timeout=self.timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = client.get(self.endpoint, params={"query": query})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise ImageSearchError(f"Image API call failed: {exc}") from exc
        except ValueError as exc:
            raise ImageSearchError("Invalid response from image API") from exc

        urls = _extract_urls(data)
        if not urls:
            raise ImageSearchError("No images found")
        return urls
