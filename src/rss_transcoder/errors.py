"""Error types raised by RSS Transcoder."""

from enum import Enum
from typing import Any, Optional, Sequence


class ErrorKind(str, Enum):
    """The closed set of failure kinds a caller can receive."""

    VALIDATION = "validation"
    CONVERSION = "conversion"
    DECODE = "decode"
    ENCODE = "encode"
    UPSTREAM = "upstream"


class FeedError(Exception):
    """Base class for every failure raised by the library."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequiredFieldError(FeedError):
    """A required field (or one of a group of fields) was not supplied."""

    kind = ErrorKind.VALIDATION

    def __init__(self, entity: str, fields: Sequence[str]):
        self.entity = entity
        self.fields = tuple(fields)
        names = " or ".join(self.fields)
        super().__init__(f"{entity}: either {names} must have a value")


class ConversionError(FeedError):
    """A textual value could not be converted to its target type."""

    kind = ErrorKind.CONVERSION

    def __init__(self, field: str, value: Any, target: str):
        self.field = field
        self.value = value
        self.target = target
        super().__init__(f"Error converting {field}={value!r} to {target}")


class DecodeError(FeedError):
    """The input text is not a well-formed RSS 2.0 document."""

    kind = ErrorKind.DECODE

    def __init__(self, reason: str, position: Optional[tuple] = None):
        self.reason = reason
        self.position = position
        if position:
            line, column = position
            super().__init__(f"Error decoding feed at line {line}, column {column}: {reason}")
        else:
            super().__init__(f"Error decoding feed: {reason}")


class EncodeError(FeedError):
    """An entity could not be rendered into the target wire format."""

    kind = ErrorKind.ENCODE

    def __init__(self, tag: str, stage: str, reason: str = ""):
        self.tag = tag
        self.stage = stage
        self.reason = reason
        message = f"Error creating {stage} for {tag}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UpstreamError(FeedError):
    """Fetching or decoding the raw feed bytes failed."""

    kind = ErrorKind.UPSTREAM


class MissingXmlExtensionError(UpstreamError):
    """The feed URL does not end with ``.xml``."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Url must end with .xml: {url}")


class RetrievalError(UpstreamError):
    """The fetcher could not retrieve the feed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Error retrieving response from {url}: {reason}")


class TextDecodingError(UpstreamError):
    """The fetched bytes are not valid UTF-8."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Error converting utf8 to str: {reason}")
