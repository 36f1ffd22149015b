from typing import Dict, Optional, Tuple

from pydantic import Field, field_validator

from openai_rest.schemas.base import BaseResponse, Frozen
from openai_rest.schemas.models import model_id

DEFAULT_MODERATION_MODEL = "text-moderation-latest"


class ModerationsRequest(Frozen):
    input: str
    model: str = DEFAULT_MODERATION_MODEL

    @field_validator("input")
    @classmethod
    def non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Missing required input parameter")
        return v

    @field_validator("model", mode="before")
    @classmethod
    def default_model(cls, v):
        return model_id(v, DEFAULT_MODERATION_MODEL)


class ModerationResult(Frozen):
    flagged: bool = False
    categories: Dict[str, bool] = Field(default_factory=dict)
    category_scores: Dict[str, float] = Field(default_factory=dict)


class ModerationsResponse(BaseResponse):
    id: Optional[str] = None
    model: Optional[str] = None
    results: Tuple[ModerationResult, ...] = ()

    @property
    def flagged(self) -> bool:
        return any(r.flagged for r in self.results)
