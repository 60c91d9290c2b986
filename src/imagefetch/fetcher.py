from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from yarl import URL

from .codec import DecodedImage, ImageDecoder, PillowDecoder
from .errors import (
    BadData,
    BadStatusCode,
    FetchError,
    GenericError,
    TransportError,
)
from .http.types import (
    Headers,
    HttpImplementation,
    Request,
    Response,
)
from .utils import logger

Completion = Callable[[Optional[DecodedImage], Optional[FetchError]], None]


def validate_response(response: object, decode: ImageDecoder) -> DecodedImage:
    """
    Turn whatever the transport returned into an image, or raise the
    FetchError describing the first check that failed.
    """
    if not isinstance(response, Response):
        raise GenericError()
    if response.status != 200:
        raise BadStatusCode(response.status)
    if not response.body:
        raise BadData()
    try:
        return decode(response.body)
    except Exception as exc:
        raise BadData() from exc


@dataclass(frozen=True)
class Fetcher:
    http: HttpImplementation
    decode: ImageDecoder = field(default_factory=PillowDecoder)

    async def get(
        self, url: Union[str, URL], headers: Optional[Headers] = None
    ) -> DecodedImage:
        return await self.fetch_image(Request(url, headers))

    async def fetch_image(self, request: Request) -> DecodedImage:
        response = await self._perform(request)
        return validate_response(response, self.decode)

    def fetch_image_with_callback(
        self, request: Request, callback: Completion
    ) -> asyncio.Task[None]:
        """
        Schedule the fetch on the running loop and return immediately.

        The callback is called exactly once, either with the image or with
        the error, from inside the returned task.
        """
        return asyncio.create_task(self._deliver(request, callback))

    async def _deliver(self, request: Request, callback: Completion) -> None:
        try:
            image = await self.fetch_image(request)
        except FetchError as error:
            callback(None, error)
        else:
            callback(image, None)

    async def _perform(self, request: Request) -> Response:
        # CancelledError is a BaseException and passes through
        try:
            logger.debug("sending request %r", request)
            return await self.http(request)
        except Exception as exc:
            raise TransportError() from exc
