from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Literal, Optional, Union

from yarl import URL

from ..errors import InvalidURL

Headers = Dict[str, str]

SCHEMES = frozenset({"http", "https"})


def parse_url(url: Union[str, URL]) -> URL:
    """
    Parse and check an absolute http(s) URL, raising InvalidURL otherwise.
    """
    try:
        parsed = url if isinstance(url, URL) else URL(url)
    except (TypeError, ValueError) as exc:
        raise InvalidURL(url) from exc
    if not parsed.is_absolute() or parsed.scheme not in SCHEMES or not parsed.host:
        raise InvalidURL(url)
    return parsed


@dataclass(frozen=True, init=False)
class Request:
    url: URL
    headers: Optional[Headers]
    method: Literal["GET"]

    def __init__(
        self, url: Union[str, URL], headers: Optional[Headers] = None
    ) -> None:
        object.__setattr__(self, "url", parse_url(url))
        object.__setattr__(self, "headers", dict(headers) if headers else None)
        object.__setattr__(self, "method", "GET")


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes


@dataclass
class RequestFailed(Exception):
    inner: Exception


HttpImplementation = Callable[[Request], Awaitable[Response]]
