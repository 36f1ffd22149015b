"""Image generation, edits and variations.

Generation sends a JSON body; edits and variations upload the local image
(and optional mask) as ``multipart/form-data``. Each call returns the
service's result list as a tuple of ``ImageResult``.
"""

import asyncio
import mimetypes
from pathlib import Path
from typing import Optional, Tuple, Union

from openai_rest.config import logger
from openai_rest.endpoints.base import BaseEndpoint
from openai_rest.schemas.images import (
    ImageEditRequest,
    ImageGenerationRequest,
    ImageResult,
    ImageSize,
    ImagesResponse,
    ImageVariationRequest,
    ResponseFormat,
)

PathLike = Union[str, Path]


async def _upload(path: Path) -> Tuple[str, bytes, str]:
    if not path.is_file():
        raise FileNotFoundError(f"Image not found: {path}")
    content = await asyncio.to_thread(path.read_bytes)
    return path.name, content, mimetypes.guess_type(path.name)[0] or "application/octet-stream"


class ImagesEndpoint(BaseEndpoint):
    root = "images"

    async def generate_image(
        self,
        prompt: Union[str, ImageGenerationRequest],
        n: int = 1,
        size: ImageSize = ImageSize.LARGE,
        response_format: ResponseFormat = ResponseFormat.URL,
        user: Optional[str] = None,
    ) -> Tuple[ImageResult, ...]:
        """Create images from a text prompt.

        Parameters
        ----------
        prompt:
            Either the prompt text (at most 1000 characters) or a prebuilt
            ``ImageGenerationRequest``, in which case the other arguments are
            ignored.
        n:
            Number of images, 1 to 10.
        """

        if isinstance(prompt, ImageGenerationRequest):
            request = prompt
        else:
            request = ImageGenerationRequest(
                prompt=prompt, n=n, size=size, response_format=response_format, user=user
            )
        r = await self._post("generations", json=request.payload())
        return self._results(self._parse(r, ImagesResponse))

    async def create_image_edit(
        self,
        image: Union[PathLike, ImageEditRequest],
        mask: Optional[PathLike] = None,
        prompt: str = "",
        n: int = 1,
        size: ImageSize = ImageSize.LARGE,
        response_format: ResponseFormat = ResponseFormat.URL,
        user: Optional[str] = None,
    ) -> Tuple[ImageResult, ...]:
        """Edit ``image`` where ``mask`` is transparent, guided by ``prompt``.

        Without a mask the image itself must carry the transparent areas.
        """

        if isinstance(image, ImageEditRequest):
            request = image
        else:
            request = ImageEditRequest(
                image=image,
                mask=mask,
                prompt=prompt,
                n=n,
                size=size,
                response_format=response_format,
                user=user,
            )
        files = {"image": await _upload(request.image)}
        if request.mask is not None:
            files["mask"] = await _upload(request.mask)
        data = request.form_fields()
        data["prompt"] = request.prompt
        r = await self._post("edits", data=data, files=files)
        return self._results(self._parse(r, ImagesResponse))

    async def create_image_variation(
        self,
        image: Union[PathLike, ImageVariationRequest],
        n: int = 1,
        size: ImageSize = ImageSize.LARGE,
        response_format: ResponseFormat = ResponseFormat.URL,
        user: Optional[str] = None,
    ) -> Tuple[ImageResult, ...]:
        if isinstance(image, ImageVariationRequest):
            request = image
        else:
            request = ImageVariationRequest(
                image=image, n=n, size=size, response_format=response_format, user=user
            )
        files = {"image": await _upload(request.image)}
        r = await self._post("variations", data=request.form_fields(), files=files)
        return self._results(self._parse(r, ImagesResponse))

    @staticmethod
    def _results(response: ImagesResponse) -> Tuple[ImageResult, ...]:
        if not response.data:
            logger.warning("Images: service returned no results (request_id={})", response.request_id)
        else:
            logger.debug("Images: {} results", len(response.data))
        return response.data
