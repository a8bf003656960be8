"""pokeapi_moves - Dataclass records for the PokéAPI move endpoints."""

from .config import ClientConfig, configure
from .models import (
    Move,
    MoveAilment,
    MoveBattleStyle,
    MoveCategory,
    MoveDamageClass,
    MoveLearnMethod,
    MoveTarget,
)
from .utils.core import ResourceLoader, dumps, from_dict, loads, to_dict

__version__ = "1.0.0"
__all__ = [
    "ClientConfig",
    "configure",
    "Move",
    "MoveAilment",
    "MoveBattleStyle",
    "MoveCategory",
    "MoveDamageClass",
    "MoveLearnMethod",
    "MoveTarget",
    "ResourceLoader",
    "from_dict",
    "loads",
    "to_dict",
    "dumps",
]
