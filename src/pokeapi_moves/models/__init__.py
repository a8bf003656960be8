"""PokéAPI move record types."""

from .common import (
    AbilityEffectChange,
    ApiResource,
    Description,
    Effect,
    MachineVersionDetail,
    Name,
    NamedApiResource,
    NamedApiResourceList,
    VerboseEffect,
)
from .moves import (
    ContestComboDetail,
    ContestComboSets,
    Move,
    MoveAilment,
    MoveBattleStyle,
    MoveCategory,
    MoveDamageClass,
    MoveFlavorText,
    MoveLearnMethod,
    MoveMetaData,
    MoveStatChange,
    MoveTarget,
    PastMoveStatValues,
)

__all__ = [
    # Shared shapes
    "ApiResource",
    "NamedApiResource",
    "NamedApiResourceList",
    "Name",
    "Description",
    "Effect",
    "VerboseEffect",
    "AbilityEffectChange",
    "MachineVersionDetail",
    # Moves
    "Move",
    "ContestComboSets",
    "ContestComboDetail",
    "MoveFlavorText",
    "MoveMetaData",
    "MoveStatChange",
    "PastMoveStatValues",
    # Move lookup resources
    "MoveAilment",
    "MoveBattleStyle",
    "MoveCategory",
    "MoveDamageClass",
    "MoveLearnMethod",
    "MoveTarget",
]
