from typing import Tuple
from urllib.parse import quote

from openai_rest.config import logger
from openai_rest.endpoints.base import BaseEndpoint
from openai_rest.schemas.models import Model


class ModelsEndpoint(BaseEndpoint):
    """Lists the models available to the configured account."""

    root = "models"

    async def get_models(self) -> Tuple[Model, ...]:
        r = await self._get()
        models = tuple(Model.model_validate(m) for m in r.json().get("data") or [])
        logger.debug("Models: {} available", len(models))
        return models

    async def get_model_details(self, model_id: str) -> Model:
        if not model_id or not model_id.strip():
            raise ValueError("Missing required model_id parameter")
        r = await self._get(quote(model_id, safe=""))
        return Model.model_validate(r.json())
