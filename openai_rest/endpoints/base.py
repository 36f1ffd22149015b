from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar

import httpx

from openai_rest.config import logger
from openai_rest.schemas.base import BaseResponse
from openai_rest.utils.http import raise_for_status, response_metadata, safe_http_error_message

if TYPE_CHECKING:
    from openai_rest.client import OpenAIClient

R = TypeVar("R", bound=BaseResponse)


class BaseEndpoint:
    """One route family of the API, e.g. ``images`` or ``embeddings``.

    Endpoints keep no per-call state; settings and the HTTP client come from
    the owning ``OpenAIClient``.
    """

    root: str = ""

    def __init__(self, client: "OpenAIClient") -> None:
        self.client = client

    def _route(self, *parts: str) -> str:
        return "/".join(p.strip("/") for p in (self.root, *parts) if p)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("{} {}", method, path)
        r = await self.client.http.request(method, path, **kwargs)
        if not r.is_success:
            logger.info("OpenAI HTTP {} on {} {}: {}", r.status_code, method, path, safe_http_error_message(r))
        raise_for_status(r)
        return r

    async def _get(self, *parts: str) -> httpx.Response:
        return await self._request("GET", self._route(*parts))

    async def _post(
        self,
        *parts: str,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        return await self._request("POST", self._route(*parts), json=json, data=data, files=files)

    @staticmethod
    def _parse(r: httpx.Response, cls: Type[R]) -> R:
        body = r.json()
        body.update(response_metadata(r))
        return cls.model_validate(body)
