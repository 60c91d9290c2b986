import asyncio
from typing import Optional

from aiohttp import ClientSession

from imagefetch.codec import DecodedImage
from imagefetch.errors import FetchError
from imagefetch.fetcher import Fetcher
from imagefetch.http.aiohttp import AIOHTTP
from imagefetch.http.types import Request


async def example():
    request = Request("https://upload.wikimedia.org/wikipedia/en/f/f7/RickRoll.png")
    async with ClientSession() as session:
        fetcher = Fetcher(AIOHTTP(session))

        # Callback style, returns right away
        def show(image: Optional[DecodedImage], error: Optional[FetchError]) -> None:
            if error is not None:
                return
            print("callback got", image.format, image.width, image.height)

        task = fetcher.fetch_image_with_callback(request, show)

        # async/await style
        image = await fetcher.fetch_image(request)
        print("await got", image.format, image.width, image.height)

        await task


if __name__ == "__main__":
    asyncio.run(example())
