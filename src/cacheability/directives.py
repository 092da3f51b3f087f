import logging
import re
from typing import Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

CacheControlDirectives = Dict[str, Union[bool, int]]

# (wire token, key) pairs, in emission order
BOOLEAN_DIRECTIVES = (
    ("public", "public"),
    ("private", "private"),
    ("no-cache", "no_cache"),
    ("no-store", "no_store"),
    ("must-revalidate", "must_revalidate"),
    ("proxy-revalidate", "proxy_revalidate"),
    ("immutable", "immutable"),
)

NUMERIC_DIRECTIVES = (
    ("max-age", "max_age"),
    ("s-maxage", "s_maxage"),
    ("stale-while-revalidate", "stale_while_revalidate"),
    ("stale-if-error", "stale_if_error"),
)

_BOOLEAN_KEYS = dict(BOOLEAN_DIRECTIVES)
_NUMERIC_KEYS = dict(NUMERIC_DIRECTIVES)
_DELTA_SECONDS = re.compile(r"[0-9]+")

# Larger delta-seconds values are treated as this one (RFC 9111 1.2.2).
MAX_DELTA_SECONDS = 2 ** 31


def _parse_seconds(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    if not _DELTA_SECONDS.fullmatch(value):
        return None
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_DELTA_SECONDS)):
        return MAX_DELTA_SECONDS
    return min(int(digits), MAX_DELTA_SECONDS)


def parse_directives(value: Optional[str]) -> CacheControlDirectives:
    """Parse a Cache-Control header value into a directive dictionary.

    Only the recognized directives are kept. Boolean directives map to True,
    numeric ones to a non-negative int of seconds. Absent directives have no
    key. Unknown names and numeric directives without a valid value are
    dropped, and when a directive repeats the last valid occurrence wins.
    """
    cc: CacheControlDirectives = {}
    if not value:
        return cc

    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if "=" in part:
            name, arg = part.split("=", 1)
        else:
            name, arg = part, None
        name = name.strip().lower()

        if name in _BOOLEAN_KEYS:
            cc[_BOOLEAN_KEYS[name]] = True
        elif name in _NUMERIC_KEYS:
            seconds = _parse_seconds(arg)
            if seconds is None:
                logger.debug("Ignoring %s with invalid value %r", name, arg)
                continue
            cc[_NUMERIC_KEYS[name]] = seconds
        else:
            logger.debug("Ignoring unrecognized cache-control directive %r", name)
    return cc


def format_directives(
    directives: Mapping[str, Union[bool, int]],
    numeric_values: Optional[Mapping[str, int]] = None,
) -> str:
    """
    Serialize directives into a canonical Cache-Control value.

    ``numeric_values`` overrides the stored numeric values, e.g. with the
    remaining seconds at the time of printing.
    """
    numeric_values = numeric_values or {}
    parts = []
    for token, key in BOOLEAN_DIRECTIVES:
        if directives.get(key) is True:
            parts.append(token)
    for token, key in NUMERIC_DIRECTIVES:
        value = numeric_values.get(key, directives.get(key))
        if value is None or isinstance(value, bool):
            continue
        parts.append(f"{token}={value}")
    return ", ".join(parts)
