"""Shared fixtures for the RSS Transcoder test suite."""

import pytest

from rss_transcoder.rss import (
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


SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
  <channel>
    <title>The Linux Action Show! OGG</title>
    <link>http://www.jupiterbroadcasting.com</link>
    <description>Ogg Vorbis audio versions of The Linux Action Show!</description>
    <language>en</language>
    <copyright>Jupiter Broadcasting</copyright>
    <managingEditor>chris@jupiterbroadcasting.com (Chris Fisher)</managingEditor>
    <webMaster>webmaster@jupiterbroadcasting.com</webMaster>
    <pubDate>Sun, 13 Mar 2016 20:02:02 -0700</pubDate>
    <lastBuildDate>Mon, 14 Mar 2016 08:30:00 +0000</lastBuildDate>
    <category domain="http://www.dmoz.org">Technology</category>
    <category>Linux</category>
    <generator>Feeder 2.5.12(2294); Mac OS X Version 10.9.5 (Build 13F34) http://reinventedsoftware.com/feeder/</generator>
    <docs>http://blogs.law.harvard.edu/tech/rss</docs>
    <cloud domain="rpc.sys.com" port="80" path="/RPC2" registerProcedure="pingMe" protocol="soap"/>
    <ttl>60</ttl>
    <image>
      <url>http://www.jupiterbroadcasting.com/images/LAS-VIDEO-Badge.jpg</url>
      <title>The Linux Action Show! OGG</title>
      <link>http://www.jupiterbroadcasting.com</link>
      <width>144</width>
      <height>144</height>
      <description>LAS badge</description>
    </image>
    <rating>(PICS-1.1 "http://www.rsac.org/ratingsv01.html" l by "webmaster@example.com" r (n 0 s 0 v 0 l 0))</rating>
    <textInput>
      <title>Search</title>
      <description>Search the archive</description>
      <name>q</name>
      <link>http://www.jupiterbroadcasting.com/search</link>
    </textInput>
    <skipHours>
      <hour>0</hour>
      <hour>1</hour>
    </skipHours>
    <skipDays>
      <day>Saturday</day>
      <day>Sunday</day>
    </skipDays>
    <itunes:author>Jupiter Broadcasting</itunes:author>
    <item>
      <title>Making Music with Linux | LAS 408</title>
      <link>http://www.jupiterbroadcasting.com/96521/making-music-with-linux-las-408/</link>
      <description>This week we&#8217;re making music &amp; more.</description>
      <author>chris@jupiterbroadcasting.com (Chris Fisher)</author>
      <category>Podcast</category>
      <comments>http://www.jupiterbroadcasting.com/96521/#comments</comments>
      <enclosure url="http://www.podtrac.com/las-0408.ogg" length="68970086" type="audio/ogg"/>
      <guid isPermaLink="false">http://www.jupiterbroadcasting.com/?p=96521</guid>
      <pubDate>Sun, 13 Mar 2016 20:02:02 -0700</pubDate>
      <source url="http://www.jupiterbroadcasting.com/feeds/las.xml">Jupiter Broadcasting</source>
      <itunes:duration>1:31:05</itunes:duration>
    </item>
    <item>
      <description>Second episode, description only</description>
      <guid>http://www.jupiterbroadcasting.com/?p=96000</guid>
    </item>
  </channel>
</rss>
"""


def build_full_channel():
    """A channel with every optional field present."""
    item = (
        ItemBuilder()
        .title("Making Music with Linux | LAS 408")
        .link("http://www.jupiterbroadcasting.com/96521")
        .description("This week we make music & more <b>bold</b>")
        .author("chris@jupiterbroadcasting.com (Chris Fisher)")
        .category(CategoryBuilder().category("Podcast").domain("http://example.com/cats").finalize())
        .comments("http://www.jupiterbroadcasting.com/96521/#comments")
        .enclosure(
            EnclosureBuilder()
            .url("http://www.podtrac.com/las-0408.ogg")
            .length(68970086)
            .enclosure_type("audio/ogg")
            .finalize()
        )
        .guid(GuidBuilder().guid("http://www.jupiterbroadcasting.com/?p=96521").permalink(False).finalize())
        .pub_date("Sun, 13 Mar 2016 20:02:02 -0700")
        .source(SourceBuilder().url("http://www.jupiterbroadcasting.com/feed.xml").source("JB").finalize())
        .finalize()
    )

    return (
        ChannelBuilder()
        .title("The Linux Action Show! OGG")
        .link("http://www.jupiterbroadcasting.com")
        .description("Ogg Vorbis audio versions of The Linux Action Show!")
        .language("en")
        .copyright("Jupiter Broadcasting")
        .managing_editor("chris@jupiterbroadcasting.com")
        .web_master("webmaster@jupiterbroadcasting.com")
        .pub_date("Sun, 13 Mar 2016 20:02:02 -0700")
        .last_build_date("Mon, 14 Mar 2016 08:30:00 +0000")
        .category(CategoryBuilder().category("Technology").finalize())
        .generator("Feeder 2.5.12")
        .docs("http://blogs.law.harvard.edu/tech/rss")
        .cloud(
            CloudBuilder()
            .domain("rpc.sys.com")
            .port(80)
            .path("/RPC2")
            .register_procedure("pingMe")
            .protocol("soap")
            .finalize()
        )
        .ttl(60)
        .image(
            ImageBuilder()
            .url("http://www.jupiterbroadcasting.com/badge.jpg")
            .title("LAS")
            .link("http://www.jupiterbroadcasting.com")
            .width(144)
            .height(144)
            .finalize()
        )
        .rating("PG")
        .text_input(
            TextInputBuilder()
            .title("Search")
            .description("Search the archive")
            .name("q")
            .link("http://www.jupiterbroadcasting.com/search")
            .finalize()
        )
        .skip_hours([0, 23])
        .skip_days(["Saturday", "Sunday"])
        .item(item)
        .item(ItemBuilder().description("Only a description").finalize())
        .finalize()
    )


@pytest.fixture
def sample_feed():
    return SAMPLE_FEED


@pytest.fixture
def full_channel():
    return build_full_channel()


@pytest.fixture
def minimal_channel():
    return ChannelBuilder().title("T").link("http://x").description("D").finalize()
