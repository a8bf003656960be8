"""
PokéAPI move data structures.

This module defines dataclasses that correspond to the JSON returned by the
move endpoints (move, move-ailment, move-battle-style, move-category,
move-damage-class, move-learn-method and move-target).

Records are plain data: values are stored exactly as received and are never
validated here. Numeric fields the API reports as null when not applicable
are Optional[int], so "not applicable" stays distinct from zero.

Build instances through pokeapi_moves.utils.core.codec:
    from pokeapi_moves.models import Move
    from pokeapi_moves.utils.core.codec import loads

    move = loads(Move, raw_json)
"""

from dataclasses import dataclass, field
from typing import Optional

from pokeapi_moves.models.common import (
    AbilityEffectChange,
    ApiResource,
    Description,
    MachineVersionDetail,
    Name,
    NamedApiResource,
    VerboseEffect,
)


# region Contest Combos
@dataclass(slots=True)
class ContestComboDetail:
    """Moves that combo with this one, in the order the API lists them."""

    use_before: list[NamedApiResource] = field(default_factory=list)
    use_after: list[NamedApiResource] = field(default_factory=list)


@dataclass(slots=True)
class ContestComboSets:
    """Combo details for normal contests and super contests."""

    normal: Optional[ContestComboDetail] = None
    super: Optional[ContestComboDetail] = None


# endregion


# region Move Structure
@dataclass(slots=True)
class MoveFlavorText:
    flavor_text: Optional[str] = None
    language: Optional[NamedApiResource] = None
    version_group: Optional[NamedApiResource] = None


@dataclass(slots=True)
class MoveMetaData:
    """Battle properties of a move.

    Hit and turn counts are None when the move hits once or lasts a single
    turn. Drain is a percent of damage dealt (negative for recoil); healing
    is a percent of the user's maximum HP.
    """

    ailment: Optional[NamedApiResource] = None
    category: Optional[NamedApiResource] = None
    min_hits: Optional[int] = None
    max_hits: Optional[int] = None
    min_turns: Optional[int] = None
    max_turns: Optional[int] = None
    drain: Optional[int] = None
    healing: Optional[int] = None
    crit_rate: Optional[int] = None
    ailment_chance: Optional[int] = None
    flinch_chance: Optional[int] = None
    stat_chance: Optional[int] = None


@dataclass(slots=True)
class MoveStatChange:
    """A stat the move changes, and by how many stages."""

    change: Optional[int] = None
    stat: Optional[NamedApiResource] = None


@dataclass(slots=True)
class PastMoveStatValues:
    """Values a move had before the given version group changed them.

    A None value means that property did not change in that version group.
    """

    accuracy: Optional[int] = None
    effect_chance: Optional[int] = None
    power: Optional[int] = None
    pp: Optional[int] = None
    effect_entries: list[VerboseEffect] = field(default_factory=list)
    type: Optional[NamedApiResource] = None
    version_group: Optional[NamedApiResource] = None


@dataclass(slots=True)
class Move:
    """Represents a move resource (e.g., Pound)."""

    id: Optional[int] = None
    name: Optional[str] = None
    # Percentage in [0, 100]; None for moves that never miss.
    accuracy: Optional[int] = None
    effect_chance: Optional[int] = None
    pp: Optional[int] = None
    # In [-8, 8]; higher goes first.
    priority: Optional[int] = None
    # None for moves with no base power.
    power: Optional[int] = None
    contest_combos: Optional[ContestComboSets] = None
    contest_type: Optional[NamedApiResource] = None
    contest_effect: Optional[ApiResource] = None
    damage_class: Optional[NamedApiResource] = None
    effect_entries: list[VerboseEffect] = field(default_factory=list)
    effect_changes: list[AbilityEffectChange] = field(default_factory=list)
    flavor_text_entries: list[MoveFlavorText] = field(default_factory=list)
    generation: Optional[NamedApiResource] = None
    learned_by_pokemon: list[NamedApiResource] = field(default_factory=list)
    machines: list[MachineVersionDetail] = field(default_factory=list)
    meta: Optional[MoveMetaData] = None
    names: list[Name] = field(default_factory=list)
    past_values: list[PastMoveStatValues] = field(default_factory=list)
    stat_changes: list[MoveStatChange] = field(default_factory=list)
    super_contest_effect: Optional[ApiResource] = None
    target: Optional[NamedApiResource] = None
    type: Optional[NamedApiResource] = None


# endregion


# region Move Lookup Resources
@dataclass(slots=True)
class MoveAilment:
    """A status condition a move may inflict (e.g., paralysis)."""

    id: Optional[int] = None
    name: Optional[str] = None
    moves: list[NamedApiResource] = field(default_factory=list)
    names: list[Name] = field(default_factory=list)


@dataclass(slots=True)
class MoveBattleStyle:
    """A battle style used by the Battle Palace and Battle Tent."""

    id: Optional[int] = None
    name: Optional[str] = None
    names: list[Name] = field(default_factory=list)


@dataclass(slots=True)
class MoveCategory:
    """A broad category of move effect (e.g., damage, ailment)."""

    id: Optional[int] = None
    name: Optional[str] = None
    moves: list[NamedApiResource] = field(default_factory=list)
    descriptions: list[Description] = field(default_factory=list)


@dataclass(slots=True)
class MoveDamageClass:
    """How a move deals damage: physical, special or status."""

    id: Optional[int] = None
    name: Optional[str] = None
    descriptions: list[Description] = field(default_factory=list)
    moves: list[NamedApiResource] = field(default_factory=list)
    names: list[Name] = field(default_factory=list)


@dataclass(slots=True)
class MoveLearnMethod:
    id: Optional[int] = None
    name: Optional[str] = None
    descriptions: list[Description] = field(default_factory=list)
    names: list[Name] = field(default_factory=list)
    version_groups: list[NamedApiResource] = field(default_factory=list)


@dataclass(slots=True)
class MoveTarget:
    """Which Pokémon a move is aimed at."""

    id: Optional[int] = None
    name: Optional[str] = None
    descriptions: list[Description] = field(default_factory=list)
    moves: list[NamedApiResource] = field(default_factory=list)
    names: list[Name] = field(default_factory=list)


# endregion
