"""
Pytest configuration and fixtures for openai_rest tests.
"""

import json
import os
from typing import Callable, List, Optional

import httpx
import pytest

from openai_rest import OpenAIClient, Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="sk-test", openai_organization_id="org-test", _env_file=None)


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(settings, requests_seen) -> Callable[..., OpenAIClient]:
    """Build a client whose HTTP traffic is answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> OpenAIClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(
            base_url=settings.openai_base_url,
            transport=httpx.MockTransport(_record),
        )
        return OpenAIClient(settings=settings, http_client=http)

    return _make


def json_response(body, status_code: int = 200, headers: Optional[dict] = None) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode(),
        headers={"content-type": "application/json", **(headers or {})},
    )


@pytest.fixture
def openai_api_key() -> Optional[str]:
    """Fixture for OpenAI API key."""
    return os.getenv("OPENAI_API_KEY")


@pytest.fixture
def skip_if_no_openai_key(openai_api_key):
    """Skip live tests if OpenAI API key is not available."""
    if not openai_api_key:
        pytest.skip("OPENAI_API_KEY not set, skipping test")
