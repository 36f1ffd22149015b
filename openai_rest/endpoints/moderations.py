from typing import Optional, Union

from openai_rest.endpoints.base import BaseEndpoint
from openai_rest.schemas.models import Model
from openai_rest.schemas.moderations import ModerationsRequest, ModerationsResponse


class ModerationsEndpoint(BaseEndpoint):
    """Classifies text against the usage policies."""

    root = "moderations"

    async def create_moderation(self, request: ModerationsRequest) -> ModerationsResponse:
        r = await self._post(json=request.model_dump(mode="json"))
        return self._parse(r, ModerationsResponse)

    async def get_moderation(self, input: str, model: Optional[Union[str, Model]] = None) -> bool:
        """True when the service flags ``input``."""
        response = await self.create_moderation(ModerationsRequest(input=input, model=model))
        return response.flagged
