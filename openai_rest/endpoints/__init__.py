from openai_rest.endpoints.base import BaseEndpoint
from openai_rest.endpoints.chat import ChatEndpoint
from openai_rest.endpoints.embeddings import EmbeddingsEndpoint
from openai_rest.endpoints.images import ImagesEndpoint
from openai_rest.endpoints.models import ModelsEndpoint
from openai_rest.endpoints.moderations import ModerationsEndpoint

__all__ = [
    "BaseEndpoint",
    "ChatEndpoint",
    "EmbeddingsEndpoint",
    "ImagesEndpoint",
    "ModelsEndpoint",
    "ModerationsEndpoint",
]
