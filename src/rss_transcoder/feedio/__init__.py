"""Feed readers and writers."""

from .json_writer import JsonStyle, JsonWriter
from .reader import FeedReader, read_channel
from .xml_writer import XmlWriter

__all__ = ["FeedReader", "JsonStyle", "JsonWriter", "XmlWriter", "read_channel"]
