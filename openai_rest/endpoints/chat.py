from openai_rest.config import logger
from openai_rest.endpoints.base import BaseEndpoint
from openai_rest.schemas.chat import ChatRequest, ChatResponse


class ChatEndpoint(BaseEndpoint):
    root = "chat"

    async def get_completion(self, request: ChatRequest) -> ChatResponse:
        r = await self._post("completions", json=request.payload())
        response = self._parse(r, ChatResponse)
        logger.debug(
            "Chat response id={} choices={} total_tokens={}",
            response.id,
            len(response.choices),
            response.usage.total_tokens,
        )
        return response
