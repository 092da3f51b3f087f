from typing import Protocol, Optional, runtime_checkable


@runtime_checkable
class HeaderLookup(Protocol):
    """
    Protocol for header collections with case-insensitive single-value lookup,
    e.g. ``requests.structures.CaseInsensitiveDict`` or ``httpx.Headers``.
    """
    def get(self, name: str) -> Optional[str]:
        """Return the value for a header name, or None."""
        ...
