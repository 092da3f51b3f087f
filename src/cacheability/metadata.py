import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .directives import NUMERIC_DIRECTIVES, CacheControlDirectives, parse_directives
from .utils import now_ms

logger = logging.getLogger(__name__)


def compute_ttl(directives: CacheControlDirectives, now: Optional[float] = None) -> float:
    """Absolute expiry in epoch milliseconds; +inf without max-age."""
    max_age = directives.get("max_age")
    if max_age is None or isinstance(max_age, bool):
        return math.inf
    if now is None:
        now = now_ms()
    return now + max_age * 1000


@dataclass(frozen=True)
class Metadata:
    """
    Freshness metadata captured for one response.

    ``ttl`` is fixed when the metadata is built and never recomputed. A new
    parse produces a new Metadata instead.
    """
    cache_control: CacheControlDirectives = field(default_factory=dict)
    etag: Optional[str] = None
    ttl: float = math.inf

    @classmethod
    def from_cache_control(
        cls,
        value: Optional[str],
        etag: Optional[str] = None,
        now: Optional[float] = None,
    ) -> "Metadata":
        directives = parse_directives(value)
        ttl = compute_ttl(directives, now)
        logger.debug("Parsed cache-control %r -> %r (ttl=%s)", value, directives, ttl)
        return cls(cache_control=directives, etag=etag, ttl=ttl)

    def is_fresh(self, now: Optional[float] = None) -> bool:
        if self.cache_control.get("no_cache") or self.cache_control.get("no_store"):
            return False
        if now is None:
            now = now_ms()
        return now < self.ttl

    def remaining(self, directive: str, now: Optional[float] = None) -> Optional[int]:
        """
        Seconds left on a numeric directive at ``now``, rounded up, never below zero.

        Every numeric directive counts down by the time elapsed since the
        max-age baseline that produced ``ttl``. Without a finite ``ttl`` there
        is no baseline and the parsed value is returned unchanged.
        """
        value = self.cache_control.get(directive)
        if value is None or isinstance(value, bool):
            return None
        if math.isinf(self.ttl):
            return value
        if now is None:
            now = now_ms()
        baseline = self.cache_control.get("max_age", value)
        left_ms = self.ttl - now + (value - baseline) * 1000
        return max(0, math.ceil(left_ms / 1000))

    def countdown(self, now: Optional[float] = None) -> Dict[str, int]:
        """Remaining seconds for every numeric directive present."""
        if now is None:
            now = now_ms()
        remaining = {}
        for _, key in NUMERIC_DIRECTIVES:
            seconds = self.remaining(key, now)
            if seconds is not None:
                remaining[key] = seconds
        return remaining

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cache_control": dict(self.cache_control),
            "etag": self.etag,
            "ttl": None if math.isinf(self.ttl) else self.ttl,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Metadata":
        ttl = data.get("ttl")
        return cls(
            cache_control=dict(data.get("cache_control") or {}),
            etag=data.get("etag"),
            ttl=math.inf if ttl is None else float(ttl),
        )


def empty_metadata() -> Metadata:
    return Metadata()
