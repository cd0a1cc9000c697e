"""Retrieval of raw feed documents over HTTP."""

import codecs
import logging
from typing import Optional, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import FetchConfig
from ..errors import MissingXmlExtensionError, RetrievalError, TextDecodingError


logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Anything that turns a feed URL into raw bytes."""

    def fetch(self, url: str) -> bytes:
        ...


def validate_feed_url(url: str) -> str:
    """
    Check that a feed URL names an ``.xml`` document.

    The whole URL must end with ``.xml``, so a trailing query string or
    fragment fails the check.

    Raises:
        MissingXmlExtensionError: If the URL does not end with ``.xml``
    """
    if not url.endswith(".xml"):
        raise MissingXmlExtensionError(url)
    return url


def decode_feed_bytes(raw: bytes) -> str:
    """
    Decode fetched bytes as UTF-8, dropping a leading byte order mark.

    Raises:
        TextDecodingError: If the bytes are not valid UTF-8
    """
    if raw.startswith(codecs.BOM_UTF8):
        raw = raw[len(codecs.BOM_UTF8):]

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TextDecodingError(str(e)) from e


class RequestsFetcher:
    """Fetches feeds with a retrying requests session."""

    def __init__(self, config: Optional[FetchConfig] = None):
        """
        Initialize the fetcher.

        Args:
            config: Fetch configuration, defaults when None
        """
        self.config = config or FetchConfig()
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with retry strategy."""
        session = requests.Session()

        retry_strategy = Retry(
            total=self.config.retry_attempts,
            backoff_factor=self.config.backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({
            'User-Agent': self.config.user_agent
        })

        return session

    def fetch(self, url: str) -> bytes:
        """
        Retrieve the raw feed document.

        Args:
            url: Feed URL

        Returns:
            Response body

        Raises:
            RetrievalError: On connection failures, timeouts and HTTP error statuses
        """
        logger.info(f"Fetching feed: {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"HTTP error fetching feed {url}: {e}")
            raise RetrievalError(url, str(e)) from e

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.content
