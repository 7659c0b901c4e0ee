"""Record extractors: site markup to structured records."""

from unsplash_mcp.extractors.base import RecordExtractor
from unsplash_mcp.extractors.soup_extractor import SoupExtractor, parse_count

__all__ = ["RecordExtractor", "SoupExtractor", "parse_count"]
