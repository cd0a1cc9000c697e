"""RSS 2.0 XML encoder."""

import logging
import re
import xml.etree.ElementTree as ET
from typing import Dict, Optional

from ..errors import EncodeError
from ..rss.models import Category, Channel, Cloud, Enclosure, Guid, Image, Item, Source, TextInput
from ..utils.convert import format_rfc2822


logger = logging.getLogger(__name__)

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


# Stands in for a carriage return in element text until serialization.
# NUL is outside the Char production, so checked text never contains it.
_CARRIAGE_RETURN_MARK = "\x00"


def _check(tag: str, stage: str, value: str) -> str:
    match = _INVALID_XML_CHARS.search(value)
    if match:
        raise EncodeError(tag, stage, f"invalid character {match.group()!r}")
    return value


def _element(
    parent: ET.Element,
    tag: str,
    text: Optional[str] = None,
    attrib: Optional[Dict[str, str]] = None,
) -> ET.Element:
    """Append a child element, rejecting content XML cannot carry."""
    checked = {}
    for name, value in (attrib or {}).items():
        checked[name] = _check(tag, f"attribute {name}", value)

    element = ET.SubElement(parent, tag, checked)
    if text is not None:
        element.text = _check(tag, "text", text).replace("\r", _CARRIAGE_RETURN_MARK)
    return element


def _optional(parent: ET.Element, tag: str, text: Optional[str]) -> None:
    if text is not None:
        _element(parent, tag, text)


def _write_category(parent: ET.Element, category: Category) -> None:
    attrib = {"domain": category.domain} if category.domain is not None else None
    _element(parent, "category", category.category, attrib)


def _write_cloud(parent: ET.Element, cloud: Cloud) -> None:
    _element(parent, "cloud", attrib={
        "domain": cloud.domain,
        "port": str(cloud.port),
        "path": cloud.path,
        "registerProcedure": cloud.register_procedure,
        "protocol": cloud.protocol,
    })


def _write_image(parent: ET.Element, image: Image) -> None:
    element = _element(parent, "image")
    _element(element, "url", image.url)
    _element(element, "title", image.title)
    _element(element, "link", image.link)
    _element(element, "width", str(image.width))
    _element(element, "height", str(image.height))
    _optional(element, "description", image.description)


def _write_text_input(parent: ET.Element, text_input: TextInput) -> None:
    element = _element(parent, "textInput")
    _element(element, "title", text_input.title)
    _element(element, "description", text_input.description)
    _element(element, "name", text_input.name)
    _element(element, "link", text_input.link)


def _write_enclosure(parent: ET.Element, enclosure: Enclosure) -> None:
    _element(parent, "enclosure", attrib={
        "url": enclosure.url,
        "length": str(enclosure.length),
        "type": enclosure.enclosure_type,
    })


def _write_guid(parent: ET.Element, guid: Guid) -> None:
    _element(parent, "guid", guid.guid, {"isPermaLink": "true" if guid.permalink else "false"})


def _write_source(parent: ET.Element, source: Source) -> None:
    _element(parent, "source", source.source, {"url": source.url})


def _write_item(parent: ET.Element, item: Item) -> None:
    element = _element(parent, "item")
    _optional(element, "title", item.title)
    _optional(element, "link", item.link)
    _optional(element, "description", item.description)
    _optional(element, "author", item.author)
    for category in item.categories:
        _write_category(element, category)
    _optional(element, "comments", item.comments)
    if item.enclosure is not None:
        _write_enclosure(element, item.enclosure)
    if item.guid is not None:
        _write_guid(element, item.guid)
    if item.pub_date is not None:
        _element(element, "pubDate", format_rfc2822(item.pub_date))
    if item.source is not None:
        _write_source(element, item.source)


def build_document(channel: Channel) -> ET.Element:
    """Build the complete ``<rss>`` element tree for a channel."""
    rss = ET.Element("rss", {"version": "2.0"})
    element = _element(rss, "channel")

    _element(element, "title", channel.title)
    _element(element, "link", channel.link)
    _element(element, "description", channel.description)
    _optional(element, "language", channel.language)
    _optional(element, "copyright", channel.copyright)
    _optional(element, "managingEditor", channel.managing_editor)
    _optional(element, "webMaster", channel.web_master)
    if channel.pub_date is not None:
        _element(element, "pubDate", format_rfc2822(channel.pub_date))
    if channel.last_build_date is not None:
        _element(element, "lastBuildDate", format_rfc2822(channel.last_build_date))
    for category in channel.categories:
        _write_category(element, category)
    _optional(element, "generator", channel.generator)
    _optional(element, "docs", channel.docs)
    if channel.cloud is not None:
        _write_cloud(element, channel.cloud)
    if channel.ttl is not None:
        _element(element, "ttl", str(channel.ttl))
    if channel.image is not None:
        _write_image(element, channel.image)
    _optional(element, "rating", channel.rating)
    if channel.text_input is not None:
        _write_text_input(element, channel.text_input)
    if channel.skip_hours:
        hours = _element(element, "skipHours")
        for hour in channel.skip_hours:
            _element(hours, "hour", str(hour))
    if channel.skip_days:
        days = _element(element, "skipDays")
        for day in channel.skip_days:
            _element(days, "day", day)
    for item in channel.items:
        _write_item(element, item)

    return rss


class XmlWriter:
    """Serializes a :class:`Channel` to an RSS 2.0 document."""

    def __init__(self, channel: Channel):
        self.channel = channel

    def xml(self) -> bytes:
        """
        Encode the channel.

        The whole tree is built before serialization, so a failure never
        leaves a partial document behind. Carriage returns in text are
        written as ``&#13;`` so parsers do not normalize them to newlines.

        Returns:
            UTF-8 bytes starting with the XML prolog

        Raises:
            EncodeError: If any tag text or attribute holds characters XML
                cannot represent
        """
        document = build_document(self.channel)
        body = ET.tostring(document, encoding="unicode", short_empty_elements=False)
        body = body.replace(_CARRIAGE_RETURN_MARK, "&#13;")
        logger.debug(f"Encoded channel '{self.channel.title}' to {len(body)} characters of XML")
        return (XML_PROLOG + body).encode("utf-8")
