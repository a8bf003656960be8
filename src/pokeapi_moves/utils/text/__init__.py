"""Text processing utilities."""

from .text_util import name_to_id, url_to_id, url_to_kind

__all__ = [
    "name_to_id",
    "url_to_id",
    "url_to_kind",
]
