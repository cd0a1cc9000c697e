"""Immutable entities of the RSS 2.0 object model.

Instances are produced by the builders in :mod:`rss_transcoder.rss.builders`;
once created they are never mutated. Collections are tuples, and an empty
tuple means the element is absent from the feed.
"""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import RequiredFieldError


class _Entity(BaseModel):
    """Common configuration for all feed entities."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


class Category(_Entity):
    """A ``<category>`` of a channel or an item."""

    category: str = ""
    domain: Optional[str] = None


class Cloud(_Entity):
    """A ``<cloud>`` publish/subscribe endpoint."""

    domain: str = ""
    port: int = Field(default=0, ge=0)
    path: str = ""
    register_procedure: str = ""
    protocol: str = ""


class Image(_Entity):
    """A channel ``<image>``. The 144x400 size limits are not enforced."""

    title: str = ""
    link: str = ""
    url: str = ""
    width: int = 0
    height: int = 0
    description: Optional[str] = None


class TextInput(_Entity):
    """A channel ``<textInput>`` box."""

    title: str = ""
    description: str = ""
    name: str = ""
    link: str = ""


class Enclosure(_Entity):
    """A media object attached to an item."""

    url: str = ""
    length: int = Field(default=0, ge=0)
    enclosure_type: str = ""


class Guid(_Entity):
    """An item's globally unique identifier."""

    guid: str = ""
    permalink: bool = True


class Source(_Entity):
    """The channel an item came from."""

    url: str = ""
    source: str = ""


class Item(_Entity):
    """One feed entry. At least one of title or description is present."""

    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    categories: Tuple[Category, ...] = ()
    comments: Optional[str] = None
    enclosure: Optional[Enclosure] = None
    guid: Optional[Guid] = None
    pub_date: Optional[datetime] = None
    source: Optional[Source] = None

    @model_validator(mode="after")
    def require_title_or_description(self) -> "Item":
        if self.title is None and self.description is None:
            raise RequiredFieldError("item", ("title", "description"))
        return self


class Channel(_Entity):
    """Feed metadata and its ordered items."""

    title: str = ""
    link: str = ""
    description: str = ""
    language: Optional[str] = None
    copyright: Optional[str] = None
    managing_editor: Optional[str] = None
    web_master: Optional[str] = None
    pub_date: Optional[datetime] = None
    last_build_date: Optional[datetime] = None
    categories: Tuple[Category, ...] = ()
    generator: Optional[str] = None
    docs: Optional[str] = None
    cloud: Optional[Cloud] = None
    ttl: Optional[int] = None
    image: Optional[Image] = None
    rating: Optional[str] = None
    text_input: Optional[TextInput] = None
    skip_hours: Tuple[int, ...] = ()
    skip_days: Tuple[str, ...] = ()
    items: Tuple[Item, ...] = ()
