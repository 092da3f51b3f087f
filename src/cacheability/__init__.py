from .cacheability import Cacheability
from .directives import CacheControlDirectives, parse_directives, format_directives
from .headers import metadata_from_headers, metadata_from_response
from .interfaces import HeaderLookup
from .metadata import Metadata, empty_metadata
from .error import UnsupportedHeaders

__all__ = [
    "Cacheability",
    "CacheControlDirectives",
    "HeaderLookup",
    "Metadata",
    "UnsupportedHeaders",
    "empty_metadata",
    "format_directives",
    "metadata_from_headers",
    "metadata_from_response",
    "parse_directives",
]
