"""JSON encoder for RSS 2.0 channels.

Two layouts share the same keys and the same "omit absent fields" rule, and
both sort keys at every level:

``legacy``
    The wire format existing consumers read. Numbers are strings, and every
    composite value (cloud, image, items, ...) is serialized on its own and
    stored as JSON *text* inside its parent. The document is
    ``{"feed":{"xml":"<text of {"channel":"<text>","version":"2.0"}>"}}``.

``nested``
    The same document with composites as real objects and arrays, and
    numbers and booleans as native JSON values.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, List

from ..errors import EncodeError
from ..rss.models import Category, Channel, Cloud, Enclosure, Guid, Image, Item, Source, TextInput
from ..utils.convert import format_rfc2822


logger = logging.getLogger(__name__)


class JsonStyle(str, Enum):
    """Layout of the JSON document."""

    LEGACY = "legacy"
    NESTED = "nested"


def _dumps(tag: str, value: Any) -> str:
    try:
        text = json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        # lone surrogates survive dumps but not UTF-8
        text.encode("utf-8")
        return text
    except (TypeError, ValueError) as e:
        raise EncodeError(tag, "json text", str(e)) from e


class JsonWriter:
    """Serializes a :class:`Channel` to JSON."""

    def __init__(self, channel: Channel, style: JsonStyle = JsonStyle.LEGACY):
        self.channel = channel
        self.style = JsonStyle(style)

    def json(self) -> str:
        """
        Encode the channel.

        Returns:
            The JSON document as text

        Raises:
            EncodeError: If any part of the document cannot be serialized
        """
        rss = {
            "version": "2.0",
            "channel": self._embed("channel", self._channel_map(self.channel)),
        }
        document = _dumps("feed", {"feed": {"xml": self._embed("xml", rss)}})
        logger.debug(
            f"Encoded channel '{self.channel.title}' to {len(document)} characters of "
            f"{self.style.value} JSON"
        )
        return document

    @property
    def legacy(self) -> bool:
        return self.style is JsonStyle.LEGACY

    def _embed(self, tag: str, value: Any) -> Any:
        """Legacy layout stores composites as JSON text."""
        return _dumps(tag, value) if self.legacy else value

    def _number(self, value: int) -> Any:
        return str(value) if self.legacy else value

    def _collection(self, key: str, values: List[Any]) -> Any:
        return self._embed(key, {key: values})

    def _category_map(self, category: Category) -> Dict[str, Any]:
        result = {"category": category.category}
        if category.domain is not None:
            result["domain"] = category.domain
        return result

    def _categories(self, categories) -> Any:
        return self._collection(
            "category",
            [self._embed("category", self._category_map(category)) for category in categories],
        )

    def _cloud_map(self, cloud: Cloud) -> Dict[str, Any]:
        return {
            "domain": cloud.domain,
            "port": self._number(cloud.port),
            "path": cloud.path,
            "registerProcedure": cloud.register_procedure,
            "protocol": cloud.protocol,
        }

    def _image_map(self, image: Image) -> Dict[str, Any]:
        result = {
            "title": image.title,
            "link": image.link,
            "url": image.url,
            "width": self._number(image.width),
            "height": self._number(image.height),
        }
        if image.description is not None:
            result["description"] = image.description
        return result

    def _text_input_map(self, text_input: TextInput) -> Dict[str, Any]:
        return {
            "title": text_input.title,
            "description": text_input.description,
            "name": text_input.name,
            "link": text_input.link,
        }

    def _enclosure_map(self, enclosure: Enclosure) -> Dict[str, Any]:
        return {
            "url": enclosure.url,
            "length": self._number(enclosure.length),
            "type": enclosure.enclosure_type,
        }

    def _guid_map(self, guid: Guid) -> Dict[str, Any]:
        permalink = ("true" if guid.permalink else "false") if self.legacy else guid.permalink
        return {"guid": guid.guid, "permalink": permalink}

    def _source_map(self, source: Source) -> Dict[str, Any]:
        return {"url": source.url, "source": source.source}

    def _item_map(self, item: Item) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if item.title is not None:
            result["title"] = item.title
        if item.link is not None:
            result["link"] = item.link
        if item.description is not None:
            result["description"] = item.description
        if item.author is not None:
            result["author"] = item.author
        if item.categories:
            result["categories"] = self._categories(item.categories)
        if item.comments is not None:
            result["comments"] = item.comments
        if item.enclosure is not None:
            result["enclosure"] = self._embed("enclosure", self._enclosure_map(item.enclosure))
        if item.guid is not None:
            result["guid"] = self._embed("guid", self._guid_map(item.guid))
        if item.pub_date is not None:
            result["pubDate"] = format_rfc2822(item.pub_date)
        if item.source is not None:
            result["source"] = self._embed("source", self._source_map(item.source))
        return result

    def _channel_map(self, channel: Channel) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "title": channel.title,
            "link": channel.link,
            "description": channel.description,
        }

        optional_text = {
            "language": channel.language,
            "copyright": channel.copyright,
            "managingEditor": channel.managing_editor,
            "webMaster": channel.web_master,
            "generator": channel.generator,
            "docs": channel.docs,
            "rating": channel.rating,
        }
        for key, value in optional_text.items():
            if value is not None:
                result[key] = value

        if channel.pub_date is not None:
            result["pubDate"] = format_rfc2822(channel.pub_date)
        if channel.last_build_date is not None:
            result["lastBuildDate"] = format_rfc2822(channel.last_build_date)
        if channel.categories:
            result["categories"] = self._categories(channel.categories)
        if channel.cloud is not None:
            result["cloud"] = self._embed("cloud", self._cloud_map(channel.cloud))
        if channel.ttl is not None:
            result["ttl"] = self._number(channel.ttl)
        if channel.image is not None:
            result["image"] = self._embed("image", self._image_map(channel.image))
        if channel.text_input is not None:
            result["textInput"] = self._embed("textInput", self._text_input_map(channel.text_input))
        if channel.skip_hours:
            result["skipHours"] = self._collection(
                "hour", [self._number(hour) for hour in channel.skip_hours]
            )
        if channel.skip_days:
            result["skipDays"] = self._collection("day", list(channel.skip_days))
        if channel.items:
            result["items"] = self._collection(
                "item", [self._embed("item", self._item_map(item)) for item in channel.items]
            )

        return result
