import logging
from typing import Any, Callable, Optional, Sequence

from requests.structures import CaseInsensitiveDict

from .error import UnsupportedHeaders
from .interfaces import HeaderLookup
from .metadata import Metadata

logger = logging.getLogger(__name__)

# Canonical header name first; the others are spellings used by prebuilt
# header objects such as {"cacheControl": ..., "etag": ...}.
CACHE_CONTROL_NAMES = ("cache-control", "cacheControl", "cache_control")
ETAG_NAMES = ("etag",)


def _header_getter(headers: Any) -> Callable[[str], Optional[str]]:
    # Plain mappings are matched case-insensitively on a copy, so the
    # caller's collection is never touched.
    if hasattr(headers, "items"):
        return CaseInsensitiveDict(headers.items()).get
    if isinstance(headers, HeaderLookup):
        return headers.get
    raise UnsupportedHeaders(
        f"expected a header mapping or an object with get(), got {type(headers).__name__}"
    )


def _first(get: Callable[[str], Optional[str]], names: Sequence[str]) -> Optional[str]:
    for name in names:
        value = get(name)
        if value is not None:
            return value
    return None


def metadata_from_headers(headers: Any, now: Optional[float] = None) -> Metadata:
    """Build metadata from the cache-control and etag headers of a collection."""
    get = _header_getter(headers)
    cache_control = _first(get, CACHE_CONTROL_NAMES)
    etag = _first(get, ETAG_NAMES)
    if cache_control is None:
        logger.debug("No cache-control header found")
    return Metadata.from_cache_control(cache_control, etag=etag, now=now)


def metadata_from_response(response: Any, now: Optional[float] = None) -> Metadata:
    """Build metadata from a requests, httpx or aiohttp response's headers."""
    headers = getattr(response, "headers", None)
    if headers is None:
        raise UnsupportedHeaders(f"{type(response).__name__} has no headers")
    return metadata_from_headers(headers, now=now)
