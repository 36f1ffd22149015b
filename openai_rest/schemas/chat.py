from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import Field, field_validator

from openai_rest.schemas.base import BaseResponse, Frozen, Usage
from openai_rest.schemas.models import model_id

Role = Literal["system", "user", "assistant", "function"]

DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"


class Message(Frozen):
    role: Role
    content: Optional[str] = None
    name: Optional[str] = None


class ChatRequest(Frozen):
    messages: Tuple[Message, ...]
    model: str = DEFAULT_CHAT_MODEL
    temperature: Optional[float] = Field(None, ge=0, le=2)
    top_p: Optional[float] = Field(None, ge=0, le=1)
    n: Optional[int] = Field(None, ge=1)
    max_tokens: Optional[int] = Field(None, ge=1)
    stop: Optional[Union[str, Tuple[str, ...]]] = None
    presence_penalty: Optional[float] = Field(None, ge=-2, le=2)
    frequency_penalty: Optional[float] = Field(None, ge=-2, le=2)
    user: Optional[str] = None

    @field_validator("messages")
    @classmethod
    def non_empty_messages(cls, v):
        if not v:
            raise ValueError("Missing required messages parameter")
        return v

    @field_validator("model", mode="before")
    @classmethod
    def default_model(cls, v):
        return model_id(v, DEFAULT_CHAT_MODEL)

    def payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class Choice(Frozen):
    index: int = 0
    message: Message
    finish_reason: Optional[str] = None

    def __str__(self) -> str:
        return self.message.content or ""


class ChatResponse(BaseResponse):
    id: str
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: Tuple[Choice, ...] = ()
    usage: Usage = Field(default_factory=Usage)

    @property
    def first_choice(self) -> Optional[Choice]:
        return self.choices[0] if self.choices else None

    def __str__(self) -> str:
        return str(self.first_choice) if self.first_choice else ""


def conversation(messages: List[Dict[str, Any]], **options: Any) -> ChatRequest:
    """Build a ``ChatRequest`` from plain ``{"role": ..., "content": ...}`` dicts."""
    return ChatRequest(messages=[Message(**m) for m in messages], **options)
