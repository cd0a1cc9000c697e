"""Builders for the RSS 2.0 entities.

Every setter stores its raw value and returns the builder, so calls chain::

    channel = (
        ChannelBuilder()
        .title("The Linux Action Show! OGG")
        .link("http://www.jupiterbroadcasting.com")
        .description("Ogg Vorbis audio versions of The Linux Action Show!")
        .finalize()
    )

Conversion (dates, integers, booleans given as text) and validation happen
only in ``finalize()``, which returns an immutable entity or raises a
:class:`~rss_transcoder.errors.FeedError` subclass.

Required scalars of Category, Cloud, Image, TextInput, Enclosure, Guid and
Source default to empty string / zero when unset. That validation is weak on
purpose: only Item enforces a required-field rule.
"""

import copy
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConversionError, RequiredFieldError
from ..utils.convert import to_bool, to_datetime, to_int, to_text
from .models import (
    Category,
    Channel,
    Cloud,
    Enclosure,
    Guid,
    Image,
    Item,
    Source,
    TextInput,
)


EntityT = TypeVar("EntityT", bound=BaseModel)
BuilderT = TypeVar("BuilderT", bound="EntityBuilder")


class EntityBuilder:
    """Shared plumbing for the entity builders."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def _set(self: BuilderT, field: str, value: Any) -> BuilderT:
        self._values[field] = value
        return self

    def _get(self, field: str, default: Any = None) -> Any:
        value = self._values.get(field)
        return default if value is None else value

    def _append(self: BuilderT, field: str, value: Any) -> BuilderT:
        if self._values.get(field) is None:
            self._values[field] = []
        self._values[field].append(value)
        return self

    def clone(self: BuilderT) -> BuilderT:
        """Return an independent copy of this builder."""
        return copy.deepcopy(self)

    @staticmethod
    def _build(model: Type[EntityT], **values: Any) -> EntityT:
        """Instantiate the entity, reporting type mismatches as conversion failures."""
        try:
            return model(**values)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error.get("loc", ())) or model.__name__
            raise ConversionError(field, error.get("input"), error.get("type", "value")) from e


class CategoryBuilder(EntityBuilder):
    """Builds a :class:`Category`."""

    def category(self, category: Optional[str]) -> "CategoryBuilder":
        return self._set("category", category)

    def domain(self, domain: Optional[str]) -> "CategoryBuilder":
        return self._set("domain", domain)

    def finalize(self) -> Category:
        return self._build(
            Category,
            category=to_text("category", self._get("category", "")),
            domain=to_text("domain", self._get("domain")),
        )


class CloudBuilder(EntityBuilder):
    """Builds a :class:`Cloud`."""

    def domain(self, domain: Optional[str]) -> "CloudBuilder":
        return self._set("domain", domain)

    def port(self, port: Any) -> "CloudBuilder":
        """Set the port, as an int or its decimal text."""
        return self._set("port", port)

    def path(self, path: Optional[str]) -> "CloudBuilder":
        return self._set("path", path)

    def register_procedure(self, register_procedure: Optional[str]) -> "CloudBuilder":
        return self._set("register_procedure", register_procedure)

    def protocol(self, protocol: Optional[str]) -> "CloudBuilder":
        return self._set("protocol", protocol)

    def finalize(self) -> Cloud:
        return self._build(
            Cloud,
            domain=to_text("domain", self._get("domain", "")),
            port=to_int("port", self._get("port", 0), non_negative=True),
            path=to_text("path", self._get("path", "")),
            register_procedure=to_text("registerProcedure", self._get("register_procedure", "")),
            protocol=to_text("protocol", self._get("protocol", "")),
        )


class ImageBuilder(EntityBuilder):
    """Builds an :class:`Image`."""

    def title(self, title: Optional[str]) -> "ImageBuilder":
        return self._set("title", title)

    def link(self, link: Optional[str]) -> "ImageBuilder":
        return self._set("link", link)

    def url(self, url: Optional[str]) -> "ImageBuilder":
        return self._set("url", url)

    def width(self, width: Any) -> "ImageBuilder":
        return self._set("width", width)

    def height(self, height: Any) -> "ImageBuilder":
        return self._set("height", height)

    def description(self, description: Optional[str]) -> "ImageBuilder":
        return self._set("description", description)

    def finalize(self) -> Image:
        return self._build(
            Image,
            title=to_text("title", self._get("title", "")),
            link=to_text("link", self._get("link", "")),
            url=to_text("url", self._get("url", "")),
            width=to_int("width", self._get("width", 0)),
            height=to_int("height", self._get("height", 0)),
            description=to_text("description", self._get("description")),
        )


class TextInputBuilder(EntityBuilder):
    """Builds a :class:`TextInput`."""

    def title(self, title: Optional[str]) -> "TextInputBuilder":
        return self._set("title", title)

    def description(self, description: Optional[str]) -> "TextInputBuilder":
        return self._set("description", description)

    def name(self, name: Optional[str]) -> "TextInputBuilder":
        return self._set("name", name)

    def link(self, link: Optional[str]) -> "TextInputBuilder":
        return self._set("link", link)

    def finalize(self) -> TextInput:
        return self._build(
            TextInput,
            title=to_text("title", self._get("title", "")),
            description=to_text("description", self._get("description", "")),
            name=to_text("name", self._get("name", "")),
            link=to_text("link", self._get("link", "")),
        )


class EnclosureBuilder(EntityBuilder):
    """Builds an :class:`Enclosure`."""

    def url(self, url: Optional[str]) -> "EnclosureBuilder":
        return self._set("url", url)

    def length(self, length: Any) -> "EnclosureBuilder":
        """Set the size in bytes, as an int or its decimal text."""
        return self._set("length", length)

    def enclosure_type(self, enclosure_type: Optional[str]) -> "EnclosureBuilder":
        return self._set("enclosure_type", enclosure_type)

    def finalize(self) -> Enclosure:
        return self._build(
            Enclosure,
            url=to_text("url", self._get("url", "")),
            length=to_int("length", self._get("length", 0), non_negative=True),
            enclosure_type=to_text("type", self._get("enclosure_type", "")),
        )


class GuidBuilder(EntityBuilder):
    """Builds a :class:`Guid`. ``permalink`` defaults to True."""

    def guid(self, guid: Optional[str]) -> "GuidBuilder":
        return self._set("guid", guid)

    def permalink(self, permalink: Any) -> "GuidBuilder":
        """Set isPermaLink, as a bool or the text ``true``/``false``."""
        return self._set("permalink", permalink)

    def finalize(self) -> Guid:
        return self._build(
            Guid,
            guid=to_text("guid", self._get("guid", "")),
            permalink=to_bool("isPermaLink", self._get("permalink", True)),
        )


class SourceBuilder(EntityBuilder):
    """Builds a :class:`Source`."""

    def url(self, url: Optional[str]) -> "SourceBuilder":
        return self._set("url", url)

    def source(self, source: Optional[str]) -> "SourceBuilder":
        return self._set("source", source)

    def finalize(self) -> Source:
        return self._build(
            Source,
            url=to_text("url", self._get("url", "")),
            source=to_text("source", self._get("source", "")),
        )


class ItemBuilder(EntityBuilder):
    """Builds an :class:`Item`."""

    def title(self, title: Optional[str]) -> "ItemBuilder":
        return self._set("title", title)

    def link(self, link: Optional[str]) -> "ItemBuilder":
        return self._set("link", link)

    def description(self, description: Optional[str]) -> "ItemBuilder":
        return self._set("description", description)

    def author(self, author: Optional[str]) -> "ItemBuilder":
        return self._set("author", author)

    def categories(self, categories: Optional[Iterable[Category]]) -> "ItemBuilder":
        return self._set("categories", None if categories is None else list(categories))

    def category(self, category: Category) -> "ItemBuilder":
        """Append a single category."""
        return self._append("categories", category)

    def comments(self, comments: Optional[str]) -> "ItemBuilder":
        return self._set("comments", comments)

    def enclosure(self, enclosure: Optional[Enclosure]) -> "ItemBuilder":
        return self._set("enclosure", enclosure)

    def guid(self, guid: Optional[Guid]) -> "ItemBuilder":
        return self._set("guid", guid)

    def pub_date(self, pub_date: Any) -> "ItemBuilder":
        """Set the publication date, as RFC-2822 text or an aware datetime."""
        return self._set("pub_date", pub_date)

    def source(self, source: Optional[Source]) -> "ItemBuilder":
        return self._set("source", source)

    def finalize(self) -> Item:
        """
        Construct the Item.

        Raises:
            RequiredFieldError: If neither title nor description is set
            ConversionError: If pubDate text is not a valid RFC-2822 date
        """
        title = self._get("title")
        description = self._get("description")
        if title is None and description is None:
            raise RequiredFieldError("item", ("title", "description"))

        return self._build(
            Item,
            title=to_text("title", title),
            link=to_text("link", self._get("link")),
            description=to_text("description", description),
            author=to_text("author", self._get("author")),
            categories=tuple(self._get("categories", ())),
            comments=to_text("comments", self._get("comments")),
            enclosure=self._get("enclosure"),
            guid=self._get("guid"),
            pub_date=to_datetime("pubDate", self._get("pub_date")),
            source=self._get("source"),
        )


class ChannelBuilder(EntityBuilder):
    """Builds a :class:`Channel`. An untouched builder yields an empty channel."""

    def title(self, title: Optional[str]) -> "ChannelBuilder":
        return self._set("title", title)

    def link(self, link: Optional[str]) -> "ChannelBuilder":
        return self._set("link", link)

    def description(self, description: Optional[str]) -> "ChannelBuilder":
        return self._set("description", description)

    def language(self, language: Optional[str]) -> "ChannelBuilder":
        return self._set("language", language)

    def copyright(self, copyright: Optional[str]) -> "ChannelBuilder":
        return self._set("copyright", copyright)

    def managing_editor(self, managing_editor: Optional[str]) -> "ChannelBuilder":
        return self._set("managing_editor", managing_editor)

    def web_master(self, web_master: Optional[str]) -> "ChannelBuilder":
        return self._set("web_master", web_master)

    def pub_date(self, pub_date: Any) -> "ChannelBuilder":
        return self._set("pub_date", pub_date)

    def last_build_date(self, last_build_date: Any) -> "ChannelBuilder":
        return self._set("last_build_date", last_build_date)

    def categories(self, categories: Optional[Iterable[Category]]) -> "ChannelBuilder":
        return self._set("categories", None if categories is None else list(categories))

    def category(self, category: Category) -> "ChannelBuilder":
        return self._append("categories", category)

    def generator(self, generator: Optional[str]) -> "ChannelBuilder":
        return self._set("generator", generator)

    def docs(self, docs: Optional[str]) -> "ChannelBuilder":
        return self._set("docs", docs)

    def cloud(self, cloud: Optional[Cloud]) -> "ChannelBuilder":
        return self._set("cloud", cloud)

    def ttl(self, ttl: Any) -> "ChannelBuilder":
        """Set time-to-live in minutes, as an int or its decimal text."""
        return self._set("ttl", ttl)

    def image(self, image: Optional[Image]) -> "ChannelBuilder":
        return self._set("image", image)

    def rating(self, rating: Optional[str]) -> "ChannelBuilder":
        return self._set("rating", rating)

    def text_input(self, text_input: Optional[TextInput]) -> "ChannelBuilder":
        return self._set("text_input", text_input)

    def skip_hours(self, skip_hours: Optional[Iterable[Any]]) -> "ChannelBuilder":
        return self._set("skip_hours", None if skip_hours is None else list(skip_hours))

    def skip_hour(self, hour: Any) -> "ChannelBuilder":
        return self._append("skip_hours", hour)

    def skip_days(self, skip_days: Optional[Iterable[str]]) -> "ChannelBuilder":
        return self._set("skip_days", None if skip_days is None else list(skip_days))

    def skip_day(self, day: str) -> "ChannelBuilder":
        return self._append("skip_days", day)

    def items(self, items: Optional[Iterable[Item]]) -> "ChannelBuilder":
        return self._set("items", None if items is None else list(items))

    def item(self, item: Item) -> "ChannelBuilder":
        return self._append("items", item)

    def finalize(self) -> Channel:
        """
        Construct the Channel.

        Raises:
            ConversionError: If a date, ttl or skip hour cannot be converted
        """
        return self._build(
            Channel,
            title=to_text("title", self._get("title", "")),
            link=to_text("link", self._get("link", "")),
            description=to_text("description", self._get("description", "")),
            language=to_text("language", self._get("language")),
            copyright=to_text("copyright", self._get("copyright")),
            managing_editor=to_text("managingEditor", self._get("managing_editor")),
            web_master=to_text("webMaster", self._get("web_master")),
            pub_date=to_datetime("pubDate", self._get("pub_date")),
            last_build_date=to_datetime("lastBuildDate", self._get("last_build_date")),
            categories=tuple(self._get("categories", ())),
            generator=to_text("generator", self._get("generator")),
            docs=to_text("docs", self._get("docs")),
            cloud=self._get("cloud"),
            ttl=to_int("ttl", self._get("ttl")),
            image=self._get("image"),
            rating=to_text("rating", self._get("rating")),
            text_input=self._get("text_input"),
            skip_hours=tuple(to_int("hour", hour) for hour in self._get("skip_hours", ())),
            skip_days=tuple(to_text("day", day) for day in self._get("skip_days", ())),
            items=tuple(self._get("items", ())),
        )
