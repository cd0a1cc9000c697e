"""The top-level Feed and its builder."""

import logging
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from .feedio.json_writer import JsonStyle, JsonWriter
from .feedio.reader import read_channel
from .feedio.xml_writer import XmlWriter
from .rss.builders import ChannelBuilder
from .rss.models import Channel
from .services.fetcher import Fetcher, RequestsFetcher, decode_feed_bytes, validate_feed_url


logger = logging.getLogger(__name__)


class Feed(BaseModel):
    """A feed document: exactly one channel."""

    model_config = ConfigDict(frozen=True)

    channel: Channel

    def to_xml(self) -> bytes:
        """Encode the feed as an RSS 2.0 XML document."""
        return XmlWriter(self.channel).xml()

    def to_json(self, style: Union[JsonStyle, str] = JsonStyle.LEGACY) -> str:
        """Encode the feed as JSON in the given layout."""
        return JsonWriter(self.channel, JsonStyle(style)).json()


class FeedBuilder:
    """Creates a :class:`Feed` from a channel, feed text, or a feed URL."""

    def __init__(self) -> None:
        self._channel: Optional[Channel] = None

    def channel(self, channel: Channel) -> "FeedBuilder":
        self._channel = channel
        return self

    def read_from_str(self, feed: str) -> "FeedBuilder":
        """
        Decode an RSS document into the builder's channel.

        Raises:
            DecodeError: If the document is malformed
        """
        self._channel = read_channel(feed)
        return self

    def read_from_url(self, url: str, fetcher: Optional[Fetcher] = None) -> "FeedBuilder":
        """
        Fetch, decode and parse a feed.

        The ``.xml`` check runs before anything is fetched.

        Args:
            url: Feed URL; its path must end with ``.xml``
            fetcher: Source of raw bytes, a RequestsFetcher when None

        Raises:
            MissingXmlExtensionError: If the URL does not end with ``.xml``
            RetrievalError: If the fetch fails
            TextDecodingError: If the body is not valid UTF-8
            DecodeError: If the document is malformed
        """
        validate_feed_url(url)
        fetcher = fetcher or RequestsFetcher()
        feed = decode_feed_bytes(fetcher.fetch(url))
        logger.debug(f"feed xml: {feed}")
        return self.read_from_str(feed)

    def finalize(self) -> Feed:
        """Construct the Feed; an untouched builder holds an empty channel."""
        channel = self._channel if self._channel is not None else ChannelBuilder().finalize()
        return Feed(channel=channel)
