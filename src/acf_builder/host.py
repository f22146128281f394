"""
Host registration capability.

The host (the form plugin runtime) is optional. Descriptors receive it
explicitly through ``register(host=...)`` or fall back to the process
default set here.
"""

from typing import Any, Optional, Protocol


class HostRegistrar(Protocol):
    """Callable that hands a finalized field record to the host."""

    def __call__(self, record: dict[str, Any]) -> Any: ...


# Global default host (set by application)
_default_host: Optional[HostRegistrar] = None


def set_default_host(host: Optional[HostRegistrar]) -> None:
    """Set (or clear with None) the host used when register() gets none."""
    global _default_host
    _default_host = host


def get_default_host() -> Optional[HostRegistrar]:
    """Get the default host, or None when not running inside one."""
    return _default_host
