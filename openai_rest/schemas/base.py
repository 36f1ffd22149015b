from typing import Optional

from pydantic import BaseModel, ConfigDict


class Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class BaseResponse(Frozen):
    """Fields filled from the response headers rather than the body."""

    organization: Optional[str] = None
    processing_time_ms: Optional[int] = None
    request_id: Optional[str] = None


class Usage(Frozen):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
