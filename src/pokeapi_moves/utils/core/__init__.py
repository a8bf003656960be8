"""Core infrastructure utilities."""

from .codec import RESOURCE_TYPES, dumps, from_dict, loads, resource_type, to_dict
from .config_registry import clear_config, get_config, has_config, set_config
from .loader import ResourceLoader
from .logger import LogContext, get_logger

__all__ = [
    "get_logger",
    "LogContext",
    "get_config",
    "set_config",
    "has_config",
    "clear_config",
    "RESOURCE_TYPES",
    "resource_type",
    "from_dict",
    "loads",
    "to_dict",
    "dumps",
    "ResourceLoader",
]
