from openai_rest.schemas.base import BaseResponse, Usage
from openai_rest.schemas.chat import ChatRequest, ChatResponse, Choice, Message, Role, conversation
from openai_rest.schemas.embeddings import Datum, EmbeddingsRequest, EmbeddingsResponse
from openai_rest.schemas.images import (
    ImageEditRequest,
    ImageGenerationRequest,
    ImageResult,
    ImageSize,
    ImagesResponse,
    ImageVariationRequest,
    ResponseFormat,
)
from openai_rest.schemas.models import Model
from openai_rest.schemas.moderations import ModerationResult, ModerationsRequest, ModerationsResponse

__all__ = [
    "BaseResponse",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "Datum",
    "EmbeddingsRequest",
    "EmbeddingsResponse",
    "ImageEditRequest",
    "ImageGenerationRequest",
    "ImageResult",
    "ImageSize",
    "ImageVariationRequest",
    "ImagesResponse",
    "Message",
    "Model",
    "ModerationResult",
    "ModerationsRequest",
    "ModerationsResponse",
    "ResponseFormat",
    "Role",
    "Usage",
    "conversation",
]
