from typing import Optional, Tuple

from pydantic import Field, field_validator

from openai_rest.schemas.base import BaseResponse, Frozen, Usage
from openai_rest.schemas.models import model_id

DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"


class EmbeddingsRequest(Frozen):
    """Input texts to embed.

    ``input`` takes a single string or a sequence of strings. Each input is
    limited to 8192 tokens by the service; that limit is not checked here.
    """

    input: Tuple[str, ...] = Field(..., description="Texts to embed, order preserved")
    model: str = DEFAULT_EMBEDDING_MODEL
    user: Optional[str] = Field(None, description="End-user id for abuse monitoring")

    @field_validator("input", mode="before")
    @classmethod
    def non_empty_input(cls, v):
        if v is None:
            raise ValueError("Missing required input parameter")
        if isinstance(v, str):
            if not v.strip():
                raise ValueError("Missing required input parameter")
            return (v,)
        v = tuple(v)
        if not v:
            raise ValueError("Missing required input parameter")
        return v

    @field_validator("model", mode="before")
    @classmethod
    def embedding_model(cls, v):
        v = model_id(v, DEFAULT_EMBEDDING_MODEL)
        if "text-embedding" not in v:
            raise ValueError(f"{v} is not supported for embedding.")
        return v


class Datum(Frozen):
    object: Optional[str] = None
    embedding: Tuple[float, ...] = ()
    index: int = 0


class EmbeddingsResponse(BaseResponse):
    object: Optional[str] = None
    data: Tuple[Datum, ...] = ()
    model: Optional[str] = None
    usage: Usage = Field(default_factory=Usage)
