from typing import Any, Optional

from .directives import format_directives
from .headers import metadata_from_headers, metadata_from_response
from .metadata import Metadata, empty_metadata


class Cacheability:
    """
    Tracks the freshness of a single cacheable response.

    Metadata comes from one of ``metadata`` (adopted as is), ``headers``
    (a header mapping or lookup object) or ``cache_control`` (a raw
    Cache-Control value), checked in that order.
    """

    def __init__(
        self,
        metadata: Optional[Metadata] = None,
        headers: Any = None,
        cache_control: Optional[str] = None,
    ) -> None:
        if metadata is not None:
            self._metadata = metadata
        elif headers is not None:
            self._metadata = metadata_from_headers(headers)
        elif cache_control is not None:
            self._metadata = Metadata.from_cache_control(cache_control)
        else:
            self._metadata = empty_metadata()

    @classmethod
    def from_response(cls, response: Any) -> "Cacheability":
        return cls(metadata=metadata_from_response(response))

    @property
    def metadata(self) -> Metadata:
        return self._metadata

    @metadata.setter
    def metadata(self, metadata: Metadata) -> None:
        self._metadata = metadata

    def parse_headers(self, headers: Any) -> Metadata:
        """Replace the held metadata with one parsed from ``headers``."""
        self._metadata = metadata_from_headers(headers)
        return self._metadata

    def parse_cache_control(self, cache_control: str) -> Metadata:
        """Replace the held metadata with one parsed from a Cache-Control value."""
        self._metadata = Metadata.from_cache_control(cache_control)
        return self._metadata

    def check_ttl(self) -> bool:
        """True while the response is fresh; no-cache and no-store are never fresh."""
        return self._metadata.is_fresh()

    def print_cache_control(self) -> str:
        """Cache-Control value with numeric directives counted down to now."""
        metadata = self._metadata
        return format_directives(metadata.cache_control, metadata.countdown())

    def __repr__(self) -> str:
        return f"<Cacheability {self._metadata!r}>"
