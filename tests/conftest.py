import io
from typing import AsyncGenerator, List, Optional, Tuple

import pytest
from _pytest.fixtures import SubRequest
from PIL import Image

from imagefetch.codec import DecodedImage
from imagefetch.errors import FetchError
from imagefetch.http.types import HttpImplementation


@pytest.fixture(params=["httpx", "aiohttp"])
async def http(request: SubRequest) -> AsyncGenerator[HttpImplementation, None]:
    if request.param == "httpx":
        try:
            import httpx

            from imagefetch.http.httpx import HTTPX
        except ImportError:
            raise pytest.skip("httpx not installed")
        async with httpx.AsyncClient() as client:
            yield HTTPX(client)
    elif request.param == "aiohttp":
        try:
            import aiohttp

            from imagefetch.http.aiohttp import AIOHTTP
        except ImportError:
            raise pytest.skip("aiohttp not installed")
        async with aiohttp.ClientSession() as session:
            yield AIOHTTP(session)


def encode_image(
    fmt: str, size: Tuple[int, int] = (4, 3), color: str = "red"
) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return encode_image("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return encode_image("JPEG", (8, 8), "blue")


class Outcomes:
    """
    Records every callback invocation made by the callback convention.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[Optional[DecodedImage], Optional[FetchError]]] = []

    def __call__(
        self, image: Optional[DecodedImage], error: Optional[FetchError]
    ) -> None:
        self.calls.append((image, error))


@pytest.fixture
def outcomes() -> Outcomes:
    return Outcomes()
