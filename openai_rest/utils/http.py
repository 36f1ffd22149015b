from typing import Any, Dict, Optional

import httpx

from openai_rest.config import Settings
from openai_rest.errors import OpenAIHTTPError


def build_async_client(settings: Settings) -> httpx.AsyncClient:
    headers = {
        "Authorization": f"Bearer {settings.openai_api_key}",
        "User-Agent": settings.user_agent,
    }
    if settings.openai_organization_id:
        headers["OpenAI-Organization"] = settings.openai_organization_id
    return httpx.AsyncClient(
        base_url=settings.openai_base_url,
        headers=headers,
        timeout=httpx.Timeout(settings.http_timeout, connect=settings.http_connect_timeout),
    )


def _error_body(r: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        j = r.json()
    except ValueError:
        return None
    if isinstance(j, dict) and isinstance(j.get("error"), dict):
        return j["error"]
    return None


def safe_http_error_message(r: httpx.Response) -> str:
    err = _error_body(r)
    if err and err.get("message"):
        return str(err["message"])
    return r.text[:300]


def raise_for_status(r: httpx.Response) -> None:
    if r.is_success:
        return
    err = _error_body(r) or {}
    raise OpenAIHTTPError(
        r.status_code,
        safe_http_error_message(r),
        type=err.get("type"),
        code=err.get("code"),
        request_id=r.headers.get("x-request-id"),
    )


def response_metadata(r: httpx.Response) -> Dict[str, Any]:
    ms = r.headers.get("openai-processing-ms")
    return {
        "organization": r.headers.get("openai-organization"),
        "processing_time_ms": int(ms) if ms and ms.isdigit() else None,
        "request_id": r.headers.get("x-request-id"),
    }
