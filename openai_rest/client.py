"""OpenAI client facade.

``OpenAIClient`` owns the configuration and a single ``httpx.AsyncClient``
and hands both to every endpoint wrapper, so the rest of an application can
call ``client.images.generate_image(...)`` without dealing with routes,
headers or JSON.
"""

from __future__ import annotations

from typing import Optional

import httpx

from openai_rest.config import Settings, get_settings, logger
from openai_rest.endpoints import (
    ChatEndpoint,
    EmbeddingsEndpoint,
    ImagesEndpoint,
    ModelsEndpoint,
    ModerationsEndpoint,
)
from openai_rest.errors import AuthenticationError
from openai_rest.utils.http import build_async_client


class OpenAIClient:
    """Entry point for every endpoint of the OpenAI HTTP API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        if not self.settings.openai_api_key:
            raise AuthenticationError("No OpenAI API key configured; set OPENAI_API_KEY")

        # Caller-provided clients are left open on aclose().
        self._owns_http = http_client is None
        self.http = http_client or build_async_client(self.settings)

        self.models = ModelsEndpoint(self)
        self.chat = ChatEndpoint(self)
        self.embeddings = EmbeddingsEndpoint(self)
        self.images = ImagesEndpoint(self)
        self.moderations = ModerationsEndpoint(self)
        logger.debug(
            "OpenAIClient ready: base_url={} organization={}",
            self.settings.openai_base_url,
            self.settings.openai_organization_id,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "OpenAIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
