from typing import Optional


class OpenAIError(Exception):
    """Base class for errors raised by this library."""


class AuthenticationError(OpenAIError):
    pass


class OpenAIHTTPError(OpenAIError):
    """The service answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        type: Optional[str] = None,
        code: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> None:
        super().__init__(f"OpenAI HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.type = type
        self.code = code
        self.request_id = request_id
