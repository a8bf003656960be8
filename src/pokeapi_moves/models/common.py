"""
Shared PokéAPI data structures.

These dataclasses mirror the small JSON shapes that appear throughout the
PokéAPI schema: resource references, paginated resource lists and
localized text entries. Every field is optional so a partial payload can
still be represented; list fields default to an empty list.
"""

from dataclasses import dataclass, field
from typing import Optional


# region Resource References
@dataclass(slots=True)
class ApiResource:
    """An unnamed pointer to another API resource."""

    url: Optional[str] = None


@dataclass(slots=True)
class NamedApiResource:
    """A named pointer to another API resource (e.g., {"name": "pound", "url": ".../move/1/"})."""

    name: Optional[str] = None
    url: Optional[str] = None


@dataclass(slots=True)
class NamedApiResourceList:
    """A page of named resource references, as returned by a list endpoint."""

    count: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    results: list[NamedApiResource] = field(default_factory=list)


# endregion


# region Localized Text
@dataclass(slots=True)
class Name:
    """The name of a resource in one language."""

    name: Optional[str] = None
    language: Optional[NamedApiResource] = None


@dataclass(slots=True)
class Description:
    """The description of a resource in one language."""

    description: Optional[str] = None
    language: Optional[NamedApiResource] = None


@dataclass(slots=True)
class Effect:
    effect: Optional[str] = None
    language: Optional[NamedApiResource] = None


@dataclass(slots=True)
class VerboseEffect:
    """An effect with both its long and short text in one language."""

    effect: Optional[str] = None
    short_effect: Optional[str] = None
    language: Optional[NamedApiResource] = None


# endregion


# region Version Details
@dataclass(slots=True)
class AbilityEffectChange:
    """A previous effect text, in effect until the given version group."""

    effect_entries: list[Effect] = field(default_factory=list)
    version_group: Optional[NamedApiResource] = None


@dataclass(slots=True)
class MachineVersionDetail:
    machine: Optional[ApiResource] = None
    version_group: Optional[NamedApiResource] = None


# endregion
