from dataclasses import dataclass, field
from typing import Any, List, Union

from .types import Request, Response


@dataclass
class MockHTTP:
    """
    Replays canned results in order, cycling once exhausted. Exceptions are
    raised instead of returned. Every request received is recorded.
    """

    responses: List[Union[Response, Exception, Any]]
    requests: List[Request] = field(default_factory=list)
    counter: int = 0

    async def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        try:
            result = self.responses[self.counter]
        finally:
            self.counter = (self.counter + 1) % len(self.responses)
        if isinstance(result, Exception):
            raise result
        return result
