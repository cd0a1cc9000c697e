"""RSS Transcoder: RSS 2.0 object model with XML and JSON codecs."""

__version__ = "0.1.0"

from .errors import (
    ConversionError,
    DecodeError,
    EncodeError,
    ErrorKind,
    FeedError,
    MissingXmlExtensionError,
    RequiredFieldError,
    RetrievalError,
    TextDecodingError,
    UpstreamError,
)
from .feed import Feed, FeedBuilder
from .feedio import JsonStyle

__all__ = [
    "ConversionError",
    "DecodeError",
    "EncodeError",
    "ErrorKind",
    "Feed",
    "FeedBuilder",
    "FeedError",
    "JsonStyle",
    "MissingXmlExtensionError",
    "RequiredFieldError",
    "RetrievalError",
    "TextDecodingError",
    "UpstreamError",
    "__version__",
]
