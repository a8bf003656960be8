"""
Global config registry for pokeapi_moves.

Holds the active ClientConfig behind a lock so any module can read it
without the config being threaded through every call.
"""

import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pokeapi_moves.config import ClientConfig

_config: Optional["ClientConfig"] = None
_lock = threading.Lock()


def set_config(config: "ClientConfig") -> None:
    """Set the global ClientConfig instance.

    Args:
        config: ClientConfig instance to use globally
    """
    global _config
    with _lock:
        _config = config


def get_config() -> "ClientConfig":
    """Get the global ClientConfig instance.

    Raises:
        RuntimeError: If config has not been set

    Returns:
        ClientConfig instance
    """
    with _lock:
        if _config is None:
            raise RuntimeError("Config has not been set. Call set_config() or configure() first.")
        return _config


def has_config() -> bool:
    with _lock:
        return _config is not None


def clear_config() -> None:
    """Clear the global config (useful for testing)."""
    global _config
    with _lock:
        _config = None
