"""Shared fixtures: API payloads shaped like the live PokéAPI responses."""

import copy

import pytest

from pokeapi_moves.utils.core.config_registry import clear_config
from pokeapi_moves.utils.core.loader import ResourceLoader

API = "https://pokeapi.co/api/v2"


def ref(kind: str, name: str, resource_id: int) -> dict:
    return {"name": name, "url": f"{API}/{kind}/{resource_id}/"}


ENGLISH = ref("language", "en", 9)

POUND = {
    "id": 1,
    "name": "pound",
    "accuracy": 100,
    "effect_chance": None,
    "pp": 35,
    "priority": 0,
    "power": 40,
    "contest_combos": {
        "normal": {
            "use_before": [
                ref("move", "double-slap", 3),
                ref("move", "headbutt", 29),
            ],
            "use_after": None,
        },
        "super": {"use_before": None, "use_after": None},
    },
    "contest_type": ref("contest-type", "tough", 5),
    "contest_effect": {"url": f"{API}/contest-effect/1/"},
    "damage_class": ref("move-damage-class", "physical", 2),
    "effect_entries": [
        {
            "effect": "Inflicts regular damage.",
            "short_effect": "Inflicts regular damage with no additional effect.",
            "language": ENGLISH,
        }
    ],
    "effect_changes": [],
    "flavor_text_entries": [
        {
            "flavor_text": "Pounds with fore\nlegs or tail.",
            "language": ENGLISH,
            "version_group": ref("version-group", "gold-silver", 3),
        }
    ],
    "generation": ref("generation", "generation-i", 1),
    "learned_by_pokemon": [ref("pokemon", "clefairy", 35)],
    "machines": [],
    "meta": {
        "ailment": ref("move-ailment", "none", 0),
        "category": ref("move-category", "damage", 0),
        "min_hits": None,
        "max_hits": None,
        "min_turns": None,
        "max_turns": None,
        "drain": 0,
        "healing": 0,
        "crit_rate": 0,
        "ailment_chance": 0,
        "flinch_chance": 0,
        "stat_chance": 0,
    },
    "names": [{"name": "Pound", "language": ENGLISH}],
    "past_values": [],
    "stat_changes": [],
    "super_contest_effect": {"url": f"{API}/super-contest-effect/5/"},
    "target": ref("move-target", "selected-pokemon", 10),
    "type": ref("type", "normal", 1),
}

GROWL = {
    "id": 45,
    "name": "growl",
    "accuracy": 100,
    "effect_chance": None,
    "pp": 40,
    "priority": 0,
    "power": None,
    "damage_class": ref("move-damage-class", "status", 1),
    "effect_changes": [
        {
            "effect_entries": [
                {"effect": "Does not affect Pokémon behind a substitute.", "language": ENGLISH}
            ],
            "version_group": ref("version-group", "black-white", 11),
        }
    ],
    "machines": [
        {
            "machine": {"url": f"{API}/machine/1/"},
            "version_group": ref("version-group", "sword-shield", 20),
        }
    ],
    "past_values": [
        {
            "accuracy": None,
            "effect_chance": None,
            "power": None,
            "pp": 30,
            "effect_entries": [],
            "type": None,
            "version_group": ref("version-group", "gold-silver", 3),
        }
    ],
    "stat_changes": [{"change": -1, "stat": ref("stat", "attack", 2)}],
    "target": ref("move-target", "all-opponents", 11),
    "type": ref("type", "normal", 1),
}

PARALYSIS = {
    "id": 1,
    "name": "paralysis",
    "moves": [ref("move", "thunder-punch", 9), ref("move", "body-slam", 34)],
    "names": [{"name": "Paralysis", "language": ENGLISH}],
}

ATTACK_STYLE = {
    "id": 1,
    "name": "attack",
    "names": [{"name": "Attack", "language": ENGLISH}],
}

DAMAGE_CATEGORY = {
    "id": 0,
    "name": "damage",
    "moves": [ref("move", "pound", 1)],
    "descriptions": [{"description": "Inflicts damage", "language": ENGLISH}],
}

PHYSICAL = {
    "id": 2,
    "name": "physical",
    "descriptions": [{"description": "physical damage", "language": ENGLISH}],
    "moves": [ref("move", "pound", 1)],
    "names": [{"name": "physical", "language": ENGLISH}],
}

LEVEL_UP = {
    "id": 1,
    "name": "level-up",
    "descriptions": [
        {"description": "Learned when a Pokémon reaches a certain level.", "language": ENGLISH}
    ],
    "names": [{"name": "Level up", "language": ENGLISH}],
    "version_groups": [ref("version-group", "red-blue", 1)],
}

SELECTED_POKEMON = {
    "id": 10,
    "name": "selected-pokemon",
    "descriptions": [
        {"description": "One other Pokémon on the field, selected by the trainer.", "language": ENGLISH}
    ],
    "moves": [ref("move", "pound", 1)],
    "names": [{"name": "Selected Pokémon", "language": ENGLISH}],
}

MOVE_INDEX = {
    "count": 2,
    "next": None,
    "previous": None,
    "results": [ref("move", "pound", 1), ref("move", "growl", 45)],
}


@pytest.fixture
def pound() -> dict:
    return copy.deepcopy(POUND)


@pytest.fixture
def growl() -> dict:
    return copy.deepcopy(GROWL)


@pytest.fixture(autouse=True)
def reset_globals():
    """Every test starts with no config and no loader data directory."""
    clear_config()
    ResourceLoader.set_data_dir(None)
    yield
    clear_config()
    ResourceLoader.set_data_dir(None)
