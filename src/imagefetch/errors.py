from enum import Enum, unique
from typing import Optional


class ImageFetchError(Exception):
    pass


class InvalidURL(ImageFetchError):
    def __init__(self, url: object):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class DecodeFailed(ImageFetchError):
    pass


@unique
class ErrorKind(Enum):
    transport = "TransportError"
    generic = "GenericError"
    bad_status_code = "BadStatusCode"
    bad_data = "BadData"


class FetchError(ImageFetchError):
    """
    Base class of the closed set of reasons a fetch can fail.

    The kind is the discriminator, the message is only meant for humans.
    """

    kind: ErrorKind
    message: str

    def __init__(self, message: Optional[str] = None):
        super().__init__(self.message if message is None else message)


class TransportError(FetchError):
    kind = ErrorKind.transport
    message = "Transport error."


class GenericError(FetchError):
    kind = ErrorKind.generic
    message = "Generic error."


class BadStatusCode(FetchError):
    kind = ErrorKind.bad_status_code
    message = "Bad status code."

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"Bad status code: {status}.")


class BadData(FetchError):
    kind = ErrorKind.bad_data
    message = "Bad data, it could not be turned into an image."
