"""
Text utility functions for resource names and resource URLs.

PokéAPI identifies resources by kebab-case names (e.g., "thunder-punch") and
by URLs of the form https://pokeapi.co/api/v2/<kind>/<id>/.
"""

import re
from typing import Optional

_RESOURCE_URL_PATTERN = re.compile(r"/api/v2/(?P<kind>[a-z0-9-]+)/(?P<id>\d+)/?$")


def name_to_id(name: str) -> str:
    """Convert a display name to the API's resource name format.

    Args:
        name (str): The name to convert (e.g., "Thunder Punch").

    Returns:
        str: A lowercase, kebab-case, alphanumeric name (e.g., "thunder-punch").
    """
    id_str = name.replace("é", "e")
    id_str = re.sub(r"[^a-z0-9\s-]", "", id_str.lower())
    id_str = re.sub(r"\s+", "-", id_str)
    id_str = id_str.strip("-")
    return id_str


def url_to_id(url: Optional[str]) -> Optional[int]:
    """Extract the numeric id from a resource URL.

    Args:
        url (Optional[str]): A resource URL (e.g., "https://pokeapi.co/api/v2/move/1/").

    Returns:
        Optional[int]: The id, or None if the URL does not end in a resource id.
    """
    if not url:
        return None
    match = _RESOURCE_URL_PATTERN.search(url)
    return int(match.group("id")) if match else None


def url_to_kind(url: Optional[str]) -> Optional[str]:
    """Extract the resource kind from a resource URL.

    Args:
        url (Optional[str]): A resource URL (e.g., "https://pokeapi.co/api/v2/move-target/10/").

    Returns:
        Optional[str]: The kind (e.g., "move-target"), or None if the URL is not a resource URL.
    """
    if not url:
        return None
    match = _RESOURCE_URL_PATTERN.search(url)
    return match.group("kind") if match else None
