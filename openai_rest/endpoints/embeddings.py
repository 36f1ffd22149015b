from typing import Optional, Sequence, Union

from openai_rest.config import logger
from openai_rest.endpoints.base import BaseEndpoint
from openai_rest.schemas.embeddings import EmbeddingsRequest, EmbeddingsResponse
from openai_rest.schemas.models import Model


class EmbeddingsEndpoint(BaseEndpoint):
    """Vector representations of text, computed by the service."""

    root = "embeddings"

    async def create_embedding(
        self,
        input: Union[str, Sequence[str], EmbeddingsRequest],
        model: Optional[Union[str, Model]] = None,
        user: Optional[str] = None,
    ) -> EmbeddingsResponse:
        if isinstance(input, EmbeddingsRequest):
            request = input
        else:
            request = EmbeddingsRequest(input=input, model=model, user=user)
        r = await self._post(json=request.model_dump(mode="json", exclude_none=True))
        response = self._parse(r, EmbeddingsResponse)
        if not response.data:
            logger.warning("Embeddings: service returned no data (request_id={})", response.request_id)
        return response
