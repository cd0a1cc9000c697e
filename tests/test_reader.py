"""Tests for the RSS document decoder."""

from datetime import datetime, timedelta, timezone

import pytest

from rss_transcoder.errors import ConversionError, DecodeError, ErrorKind, RequiredFieldError
from rss_transcoder.feedio import FeedReader, read_channel


def wrap(channel_body: str) -> str:
    return f'<rss version="2.0"><channel>{channel_body}</channel></rss>'


class TestChannelDecoding:
    """Mapping of channel elements to Channel fields."""

    def test_required_fields(self, sample_feed):
        channel = read_channel(sample_feed)

        assert channel.title == "The Linux Action Show! OGG"
        assert channel.link == "http://www.jupiterbroadcasting.com"
        assert channel.description == "Ogg Vorbis audio versions of The Linux Action Show!"

    def test_optional_text_fields(self, sample_feed):
        channel = read_channel(sample_feed)

        assert channel.language == "en"
        assert channel.copyright == "Jupiter Broadcasting"
        assert channel.managing_editor == "chris@jupiterbroadcasting.com (Chris Fisher)"
        assert channel.web_master == "webmaster@jupiterbroadcasting.com"
        assert channel.generator.startswith("Feeder 2.5.12(2294)")
        assert channel.docs == "http://blogs.law.harvard.edu/tech/rss"
        assert channel.rating.startswith("(PICS-1.1")

    def test_dates(self, sample_feed):
        channel = read_channel(sample_feed)

        assert channel.pub_date == datetime(2016, 3, 13, 20, 2, 2, tzinfo=timezone(timedelta(hours=-7)))
        assert channel.last_build_date == datetime(2016, 3, 14, 8, 30, tzinfo=timezone.utc)

    def test_categories(self, sample_feed):
        channel = read_channel(sample_feed)

        assert [c.category for c in channel.categories] == ["Technology", "Linux"]
        assert channel.categories[0].domain == "http://www.dmoz.org"
        assert channel.categories[1].domain is None

    def test_cloud(self, sample_feed):
        cloud = read_channel(sample_feed).cloud

        assert cloud.domain == "rpc.sys.com"
        assert cloud.port == 80
        assert cloud.path == "/RPC2"
        assert cloud.register_procedure == "pingMe"
        assert cloud.protocol == "soap"

    def test_image_and_text_input(self, sample_feed):
        channel = read_channel(sample_feed)

        assert channel.image.url == "http://www.jupiterbroadcasting.com/images/LAS-VIDEO-Badge.jpg"
        assert channel.image.width == 144
        assert channel.image.height == 144
        assert channel.image.description == "LAS badge"
        assert channel.text_input.name == "q"
        assert channel.text_input.link == "http://www.jupiterbroadcasting.com/search"

    def test_ttl_and_skips(self, sample_feed):
        channel = read_channel(sample_feed)

        assert channel.ttl == 60
        assert channel.skip_hours == (0, 1)
        assert channel.skip_days == ("Saturday", "Sunday")

    def test_absent_fields_stay_absent(self):
        channel = read_channel(wrap("<title>T</title><link>http://x</link><description>D</description>"))

        assert channel.language is None
        assert channel.pub_date is None
        assert channel.cloud is None
        assert channel.image is None
        assert channel.categories == ()
        assert channel.items == ()

    def test_missing_required_elements_default_to_empty(self):
        channel = read_channel(wrap("<language>en</language>"))

        assert channel.title == ""
        assert channel.language == "en"

    def test_empty_element_is_empty_string(self):
        assert read_channel(wrap("<title/><copyright></copyright>")).copyright == ""

    def test_text_is_not_trimmed(self):
        assert read_channel(wrap("<title>  padded  </title>")).title == "  padded  "

    def test_unrecognized_and_namespaced_elements_skipped(self, sample_feed):
        """Forward-compatible skip of unknown elements."""
        channel = read_channel(wrap("<title>T</title><unknown>x</unknown><foo:bar xmlns:foo='urn:foo'/>"))

        assert channel.title == "T"
        assert len(read_channel(sample_feed).items) == 2

    def test_feed_reader_class(self, sample_feed):
        assert FeedReader(sample_feed).channel() == read_channel(sample_feed)


class TestItemDecoding:
    """Mapping of item elements to Item fields."""

    def test_full_item(self, sample_feed):
        item = read_channel(sample_feed).items[0]

        assert item.title == "Making Music with Linux | LAS 408"
        assert item.description == "This week we’re making music & more."
        assert item.author == "chris@jupiterbroadcasting.com (Chris Fisher)"
        assert item.categories[0].category == "Podcast"
        assert item.comments == "http://www.jupiterbroadcasting.com/96521/#comments"
        assert item.enclosure.url == "http://www.podtrac.com/las-0408.ogg"
        assert item.enclosure.length == 68970086
        assert item.enclosure.enclosure_type == "audio/ogg"
        assert item.guid.guid == "http://www.jupiterbroadcasting.com/?p=96521"
        assert item.guid.permalink is False
        assert item.pub_date.utcoffset() == timedelta(hours=-7)
        assert item.source.url == "http://www.jupiterbroadcasting.com/feeds/las.xml"
        assert item.source.source == "Jupiter Broadcasting"

    def test_guid_permalink_defaults_true(self, sample_feed):
        item = read_channel(sample_feed).items[1]

        assert item.title is None
        assert item.guid.permalink is True

    def test_item_without_title_or_description_fails(self):
        with pytest.raises(RequiredFieldError):
            read_channel(wrap("<item><link>http://x/1</link></item>"))

    def test_bad_enclosure_length_fails(self):
        with pytest.raises(ConversionError) as exc_info:
            read_channel(wrap('<item><title>t</title><enclosure url="u" length="big" type="a"/></item>'))

        assert exc_info.value.field == "length"

    def test_bad_pub_date_fails(self):
        with pytest.raises(ConversionError):
            read_channel(wrap("<item><title>t</title><pubDate>not a date</pubDate></item>"))


class TestDecodeFailures:
    """Malformed documents never yield a partial channel."""

    @pytest.mark.parametrize("text", [
        "",
        "<rss><channel><title>T</title></channel>",
        "<rss><channel><title>T</titl></channel></rss>",
        "not xml at all",
    ])
    def test_malformed_markup(self, text):
        with pytest.raises(DecodeError) as exc_info:
            read_channel(text)

        assert exc_info.value.kind is ErrorKind.DECODE

    def test_wrong_root(self):
        with pytest.raises(DecodeError, match="<rss>"):
            read_channel("<feed><title>Atom</title></feed>")

    def test_missing_channel(self):
        with pytest.raises(DecodeError, match="channel"):
            read_channel('<rss version="2.0"></rss>')
