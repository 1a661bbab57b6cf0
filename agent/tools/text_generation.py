from __future__ import annotations

from typing import Optional

import httpx

from agent.tools.errors import TextGenerationError


class TextGenerationClient:
    """Client for the text-generation API: ``GET <endpoint>?prompt=...`` -> ``{"response": "..."}``.

    A call only counts as successful on HTTP 200 with a non-empty ``response``
    string; everything else raises :class:`TextGenerationError`.
    """

    def __init__(
        self,
        endpoint: str,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    def generate(self, prompt: str) -> str:
        if not self.endpoint:
            raise TextGenerationError("TEXT_API_URL not configured")

        try:
            with httpx.Client(
                timeout=self.timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = client.get(self.endpoint, params={"prompt": prompt})
        except httpx.HTTPError as exc:
            raise TextGenerationError(f"Text generation API call failed: {exc}") from exc

        if response.status_code != 200:
            raise TextGenerationError(
                f"Text generation API returned status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise TextGenerationError("Invalid response from text generation API") from exc

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text:
            raise TextGenerationError("Invalid response from text generation API")
        return text
