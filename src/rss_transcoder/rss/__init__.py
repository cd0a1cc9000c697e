"""RSS 2.0 entity model and builders."""

from .builders import (
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
from .models import Category, Channel, Cloud, Enclosure, Guid, Image, Item, Source, TextInput

__all__ = [
    "Category",
    "CategoryBuilder",
    "Channel",
    "ChannelBuilder",
    "Cloud",
    "CloudBuilder",
    "Enclosure",
    "EnclosureBuilder",
    "Guid",
    "GuidBuilder",
    "Image",
    "ImageBuilder",
    "Item",
    "ItemBuilder",
    "Source",
    "SourceBuilder",
    "TextInput",
    "TextInputBuilder",
]
