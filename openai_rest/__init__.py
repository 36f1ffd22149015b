from openai_rest.client import OpenAIClient
from openai_rest.config import Settings, __version__
from openai_rest.errors import AuthenticationError, OpenAIError, OpenAIHTTPError

__all__ = [
    "AuthenticationError",
    "OpenAIClient",
    "OpenAIError",
    "OpenAIHTTPError",
    "Settings",
    "__version__",
]
