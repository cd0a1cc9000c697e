"""RSS 2.0 document decoder."""

import logging
import xml.etree.ElementTree as ET
from typing import Callable, Dict, Optional

from ..errors import DecodeError
from ..rss.builders import (
    CategoryBuilder,
    ChannelBuilder,
    CloudBuilder,
    EnclosureBuilder,
    GuidBuilder,
    ImageBuilder,
    ItemBuilder,
    SourceBuilder,
    TextInputBuilder,
)
from ..rss.models import Category, Channel, Cloud, Enclosure, Guid, Image, Item, Source, TextInput


logger = logging.getLogger(__name__)


def _text(element: ET.Element) -> str:
    """Leaf text, verbatim; an empty element yields an empty string."""
    return element.text or ""


def _child_text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    return None if child is None else _text(child)


def _decode_category(element: ET.Element) -> Category:
    return CategoryBuilder().category(_text(element)).domain(element.get("domain")).finalize()


def _decode_cloud(element: ET.Element) -> Cloud:
    return (
        CloudBuilder()
        .domain(element.get("domain"))
        .port(element.get("port"))
        .path(element.get("path"))
        .register_procedure(element.get("registerProcedure"))
        .protocol(element.get("protocol"))
        .finalize()
    )


def _decode_image(element: ET.Element) -> Image:
    return (
        ImageBuilder()
        .url(_child_text(element, "url"))
        .title(_child_text(element, "title"))
        .link(_child_text(element, "link"))
        .width(_child_text(element, "width"))
        .height(_child_text(element, "height"))
        .description(_child_text(element, "description"))
        .finalize()
    )


def _decode_text_input(element: ET.Element) -> TextInput:
    return (
        TextInputBuilder()
        .title(_child_text(element, "title"))
        .description(_child_text(element, "description"))
        .name(_child_text(element, "name"))
        .link(_child_text(element, "link"))
        .finalize()
    )


def _decode_enclosure(element: ET.Element) -> Enclosure:
    return (
        EnclosureBuilder()
        .url(element.get("url"))
        .length(element.get("length"))
        .enclosure_type(element.get("type"))
        .finalize()
    )


def _decode_guid(element: ET.Element) -> Guid:
    return GuidBuilder().guid(_text(element)).permalink(element.get("isPermaLink")).finalize()


def _decode_source(element: ET.Element) -> Source:
    return SourceBuilder().url(element.get("url")).source(_text(element)).finalize()


def _decode_item(element: ET.Element) -> Item:
    builder = ItemBuilder()
    simple: Dict[str, Callable[[Optional[str]], ItemBuilder]] = {
        "title": builder.title,
        "link": builder.link,
        "description": builder.description,
        "author": builder.author,
        "comments": builder.comments,
        "pubDate": builder.pub_date,
    }

    for child in element:
        tag = child.tag
        if tag in simple:
            simple[tag](_text(child))
        elif tag == "category":
            builder.category(_decode_category(child))
        elif tag == "enclosure":
            builder.enclosure(_decode_enclosure(child))
        elif tag == "guid":
            builder.guid(_decode_guid(child))
        elif tag == "source":
            builder.source(_decode_source(child))
        else:
            logger.debug(f"Skipping unrecognized item element: {tag}")

    return builder.finalize()


def _decode_channel(element: ET.Element) -> Channel:
    builder = ChannelBuilder()
    simple: Dict[str, Callable[[Optional[str]], ChannelBuilder]] = {
        "title": builder.title,
        "link": builder.link,
        "description": builder.description,
        "language": builder.language,
        "copyright": builder.copyright,
        "managingEditor": builder.managing_editor,
        "webMaster": builder.web_master,
        "pubDate": builder.pub_date,
        "lastBuildDate": builder.last_build_date,
        "generator": builder.generator,
        "docs": builder.docs,
        "ttl": builder.ttl,
        "rating": builder.rating,
    }

    for child in element:
        tag = child.tag
        if tag in simple:
            simple[tag](_text(child))
        elif tag == "category":
            builder.category(_decode_category(child))
        elif tag == "cloud":
            builder.cloud(_decode_cloud(child))
        elif tag == "image":
            builder.image(_decode_image(child))
        elif tag == "textInput":
            builder.text_input(_decode_text_input(child))
        elif tag == "skipHours":
            for hour in child.findall("hour"):
                builder.skip_hour(_text(hour))
        elif tag == "skipDays":
            for day in child.findall("day"):
                builder.skip_day(_text(day))
        elif tag == "item":
            builder.item(_decode_item(child))
        else:
            logger.debug(f"Skipping unrecognized channel element: {tag}")

    return builder.finalize()


def read_channel(feed: str) -> Channel:
    """
    Decode an RSS 2.0 document into a Channel.

    Args:
        feed: Complete ``<rss>`` document text

    Returns:
        The decoded Channel

    Raises:
        DecodeError: If the text is not well-formed or has no ``<rss><channel>``
        ConversionError: If a date, number or boolean cannot be converted
        RequiredFieldError: If an item has neither title nor description
    """
    try:
        root = ET.fromstring(feed)
    except ET.ParseError as e:
        raise DecodeError(str(e), getattr(e, "position", None)) from e

    if root.tag != "rss":
        raise DecodeError(f"expected <rss> root element, found <{root.tag}>")

    channel_element = root.find("channel")
    if channel_element is None:
        raise DecodeError("missing <channel> element")

    channel = _decode_channel(channel_element)
    logger.debug(f"Decoded channel '{channel.title}' with {len(channel.items)} items")
    return channel


class FeedReader:
    """Parses a feed document into a :class:`Channel`."""

    def __init__(self, feed: str):
        """
        Decode the feed eagerly.

        Args:
            feed: Complete ``<rss>`` document text

        Raises:
            DecodeError: If the document is malformed
        """
        self._channel = read_channel(feed)

    def channel(self) -> Channel:
        """Get the decoded channel."""
        return self._channel
