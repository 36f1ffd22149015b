from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Dict, Optional, Tuple

from pydantic import AfterValidator, Field

from openai_rest.schemas.base import BaseResponse, Frozen

MAX_PROMPT_LENGTH = 1000


class ImageSize(str, Enum):
    SMALL = "256x256"
    MEDIUM = "512x512"
    LARGE = "1024x1024"


class ResponseFormat(str, Enum):
    URL = "url"
    B64_JSON = "b64_json"


# -------------------- Requests --------------------


class _ImageOptions(Frozen):
    n: int = Field(1, ge=1, le=10, description="Number of images to generate")
    size: ImageSize = ImageSize.LARGE
    response_format: ResponseFormat = ResponseFormat.URL
    user: Optional[str] = None

    def form_fields(self) -> Dict[str, str]:
        data = {
            "n": str(self.n),
            "size": self.size.value,
            "response_format": self.response_format.value,
        }
        if self.user:
            data["user"] = self.user
        return data


def _check_prompt(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Missing required prompt parameter")
    if len(v) > MAX_PROMPT_LENGTH:
        raise ValueError(f"prompt cannot exceed {MAX_PROMPT_LENGTH} characters")
    return v


Prompt = Annotated[str, AfterValidator(_check_prompt)]


class ImageGenerationRequest(_ImageOptions):
    prompt: Prompt

    def payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ImageVariationRequest(_ImageOptions):
    image: Path = Field(..., description="Local path of the source image")


class ImageEditRequest(_ImageOptions):
    image: Path = Field(..., description="Local path of the image to edit")
    mask: Optional[Path] = Field(None, description="Transparent areas mark where to edit")
    prompt: Prompt


# -------------------- Results --------------------


class ImageResult(Frozen):
    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None

    @property
    def key(self) -> Optional[str]:
        return self.url or self.b64_json


class ImagesResponse(BaseResponse):
    created: Optional[int] = None
    data: Tuple[ImageResult, ...] = ()
