"""
Conversion between PokéAPI JSON and the record dataclasses.

JSON null and a missing key mean the same thing here: both leave the field at
its default, which is None for scalars and nested records and an empty list
for collections. Keys the records do not declare are ignored.
"""

from dataclasses import asdict
from typing import Any, Type, TypeVar, Union

import orjson
from dacite import Config, DaciteError
from dacite import from_dict as dacite_from_dict

from pokeapi_moves.models import (
    Move,
    MoveAilment,
    MoveBattleStyle,
    MoveCategory,
    MoveDamageClass,
    MoveLearnMethod,
    MoveTarget,
)
from pokeapi_moves.utils.core.logger import get_logger

logger = get_logger(__name__)
T = TypeVar("T")

# API resource kind (as it appears in resource URLs) -> record type
RESOURCE_TYPES: dict[str, type] = {
    "move": Move,
    "move-ailment": MoveAilment,
    "move-battle-style": MoveBattleStyle,
    "move-category": MoveCategory,
    "move-damage-class": MoveDamageClass,
    "move-learn-method": MoveLearnMethod,
    "move-target": MoveTarget,
}

# Records are data only, so types are not checked on the way in
_dacite_config = Config(check_types=False)


def resource_type(kind: str) -> type:
    """Get the record type for an API resource kind.

    Args:
        kind (str): Resource kind (e.g., "move-ailment").

    Raises:
        KeyError: If the kind is not a move resource.

    Returns:
        type: The record dataclass for that kind.
    """
    try:
        return RESOURCE_TYPES[kind]
    except KeyError:
        raise KeyError(
            f"Unknown resource kind '{kind}', expected one of {sorted(RESOURCE_TYPES)}"
        ) from None


def _strip_nulls(value: Any) -> Any:
    """Recursively drop null-valued keys so the dataclass defaults apply."""
    if isinstance(value, dict):
        return {k: _strip_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_strip_nulls(v) for v in value]
    return value


def from_dict(data_class: Type[T], data: dict[str, Any]) -> T:
    """Build a record from a parsed JSON object.

    Args:
        data_class (Type[T]): The record dataclass to build.
        data (dict[str, Any]): The parsed JSON object.

    Raises:
        TypeError: If data is not a JSON object.
        DaciteError: If the data cannot be mapped onto the dataclass.

    Returns:
        T: The populated record.
    """
    if not isinstance(data, dict):
        raise TypeError(
            f"{data_class.__name__} must be built from a JSON object, got {type(data).__name__}"
        )
    try:
        return dacite_from_dict(data_class=data_class, data=_strip_nulls(data), config=_dacite_config)
    except DaciteError as e:
        logger.error(f"Error deserializing {data_class.__name__}: {e}", exc_info=True)
        raise


def loads(data_class: Type[T], raw: Union[bytes, str]) -> T:
    """Parse a JSON document and build a record from it.

    Args:
        data_class (Type[T]): The record dataclass to build.
        raw (Union[bytes, str]): The JSON document.

    Raises:
        orjson.JSONDecodeError: If raw is not valid JSON.

    Returns:
        T: The populated record.
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        logger.error(f"Invalid JSON for {data_class.__name__}: {e}")
        raise
    return from_dict(data_class, data)


def to_dict(record: Any, omit_none: bool = False) -> dict[str, Any]:
    """Convert a record (and everything nested in it) to plain JSON-ready values.

    Args:
        record (Any): A record dataclass instance.
        omit_none (bool, optional): Leave out fields whose value is None. Defaults to False.

    Returns:
        dict[str, Any]: The record as a dictionary keyed by API field names.
    """
    if omit_none:
        return asdict(record, dict_factory=lambda items: {k: v for k, v in items if v is not None})
    return asdict(record)


def dumps(record: Any, indent: bool = False, omit_none: bool = False) -> bytes:
    """Serialize a record to JSON with sorted keys.

    Args:
        record (Any): A record dataclass instance.
        indent (bool, optional): Indent with two spaces. Defaults to False.
        omit_none (bool, optional): Leave out fields whose value is None. Defaults to False.

    Returns:
        bytes: The UTF-8 encoded JSON document.
    """
    option = orjson.OPT_SORT_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(to_dict(record, omit_none=omit_none), option=option)
