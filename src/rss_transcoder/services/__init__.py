"""Service layer for RSS Transcoder."""

from .fetcher import Fetcher, RequestsFetcher, decode_feed_bytes, validate_feed_url

__all__ = ["Fetcher", "RequestsFetcher", "decode_feed_bytes", "validate_feed_url"]
