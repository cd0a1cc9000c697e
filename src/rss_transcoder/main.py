"""Main RSS Transcoder application."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import TranscoderConfig, load_config
from .feed import Feed, FeedBuilder
from .feedio.json_writer import JsonStyle
from .services.fetcher import Fetcher, RequestsFetcher


OUTPUT_FORMATS = ("xml", "json")


class TranscoderApp:
    """Wires configuration, logging and fetching around the feed codecs."""

    def __init__(
        self,
        config_file: Optional[Path] = None,
        config: Optional[TranscoderConfig] = None,
        fetcher: Optional[Fetcher] = None,
    ):
        """
        Initialize the application.

        Args:
            config_file: Optional path to configuration file
            config: Already-loaded configuration, takes precedence over config_file
            fetcher: Optional fetcher, a RequestsFetcher built from config when None
        """
        self.config = config or load_config(config_file)

        self._setup_logging()

        self.fetcher = fetcher or RequestsFetcher(self.config.fetch)

        logging.debug("RSS Transcoder initialized")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        handlers = []

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

        if self.config.log_file:
            log_file = Path(self.config.log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers = handlers

    def set_verbose(self, verbose: bool) -> None:
        if verbose:
            logging.getLogger().setLevel(logging.DEBUG)
            for handler in logging.getLogger().handlers:
                handler.setLevel(logging.DEBUG)

    def load(self, source: str) -> Feed:
        """
        Load a feed from a local file or an http(s) URL.

        Args:
            source: File path or URL ending in ``.xml``

        Returns:
            The decoded Feed
        """
        if source.startswith(("http://", "https://")):
            logging.info(f"Reading feed from URL: {source}")
            return FeedBuilder().read_from_url(source, fetcher=self.fetcher).finalize()

        logging.info(f"Reading feed from file: {source}")
        text = Path(source).read_text(encoding='utf-8')
        return FeedBuilder().read_from_str(text).finalize()

    def convert(
        self,
        source: str,
        output_format: str = "xml",
        json_style: Optional[Union[JsonStyle, str]] = None,
    ) -> bytes:
        """
        Load a feed and encode it.

        Args:
            source: File path or URL
            output_format: ``xml`` or ``json``
            json_style: JSON layout, the configured one when None

        Returns:
            Encoded document as UTF-8 bytes
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {list(OUTPUT_FORMATS)}")

        feed = self.load(source)

        if output_format == "xml":
            output = feed.to_xml()
        else:
            style = JsonStyle(json_style) if json_style else self.config.json_style
            output = feed.to_json(style).encode('utf-8')

        logging.info(f"Converted {source} to {output_format} ({len(output)} bytes)")
        return output

    def get_info(self, feed: Feed) -> Dict[str, Any]:
        """
        Summarize a feed.

        Returns:
            Dictionary with channel title, link, language and item count
        """
        channel = feed.channel
        return {
            "title": channel.title,
            "link": channel.link,
            "language": channel.language,
            "items": len(channel.items),
            "categories": len(channel.categories),
        }
