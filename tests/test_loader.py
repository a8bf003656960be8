from pathlib import Path

import orjson
import pytest
from conftest import MOVE_INDEX, PARALYSIS, SELECTED_POKEMON

from pokeapi_moves.models import Move, MoveAilment, MoveTarget, NamedApiResource
from pokeapi_moves.utils.core.loader import ResourceLoader


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(data))


@pytest.fixture
def dump_dir(tmp_path: Path, pound: dict, growl: dict) -> Path:
    """A small api-data style dump with two moves, one ailment and one target."""
    write_json(tmp_path / "move" / "index.json", MOVE_INDEX)
    write_json(tmp_path / "move" / "1" / "index.json", pound)
    write_json(tmp_path / "move" / "45" / "index.json", growl)
    write_json(tmp_path / "move-ailment" / "paralysis.json", PARALYSIS)
    write_json(tmp_path / "move-target" / "10" / "index.json", SELECTED_POKEMON)
    ResourceLoader.set_data_dir(tmp_path)
    return tmp_path


def test_unconfigured_loader_raises() -> None:
    with pytest.raises(ValueError, match="not configured"):
        ResourceLoader.get_data_dir()


def test_load_by_id(dump_dir: Path) -> None:
    move = ResourceLoader.load_move(1)

    assert isinstance(move, Move)
    assert move.name == "pound"
    assert move.power == 40


def test_load_by_numeric_string(dump_dir: Path) -> None:
    assert ResourceLoader.load_move("45").name == "growl"


def test_load_by_name_through_index(dump_dir: Path) -> None:
    move = ResourceLoader.load_move("Growl")

    assert move is not None
    assert move.id == 45


def test_load_by_flat_name_file(dump_dir: Path) -> None:
    ailment = ResourceLoader.load_move_ailment("Paralysis")

    assert isinstance(ailment, MoveAilment)
    assert [m.name for m in ailment.moves] == ["thunder-punch", "body-slam"]


def test_missing_resource_returns_none(dump_dir: Path) -> None:
    assert ResourceLoader.load_move(999) is None
    assert ResourceLoader.load_move("struggle") is None
    assert ResourceLoader.load_move_category(1) is None


def test_unknown_kind_raises(dump_dir: Path) -> None:
    with pytest.raises(KeyError):
        ResourceLoader.load("pokemon", 1)


def test_invalid_json_returns_none(dump_dir: Path) -> None:
    bad = dump_dir / "move" / "2" / "index.json"
    bad.parent.mkdir(parents=True)
    bad.write_text("{broken", encoding="utf-8")

    assert ResourceLoader.load_move(2) is None


def test_non_object_payload_returns_none(dump_dir: Path) -> None:
    write_json(dump_dir / "move" / "3" / "index.json", [1, 2])

    assert ResourceLoader.load_move(3) is None


def test_load_reference(dump_dir: Path) -> None:
    pound = ResourceLoader.load_move(1)

    target = ResourceLoader.load_reference(pound.target)

    assert isinstance(target, MoveTarget)
    assert target.name == "selected-pokemon"


def test_load_reference_unsupported(dump_dir: Path) -> None:
    pound = ResourceLoader.load_move(1)

    assert ResourceLoader.load_reference(pound.type) is None
    assert ResourceLoader.load_reference(NamedApiResource(name="x", url=None)) is None


def test_load_index(dump_dir: Path) -> None:
    index = ResourceLoader.load_index("move")

    assert index.count == 2
    assert [r.name for r in index.results] == ["pound", "growl"]
    assert ResourceLoader.load_index("move-target") is None


def test_load_all(dump_dir: Path) -> None:
    moves = ResourceLoader.load_all("move")

    assert sorted(moves) == ["growl", "pound"]
    assert moves["pound"].id == 1
    assert ResourceLoader.load_all("move-learn-method") == {}


def test_save_then_load(tmp_path: Path) -> None:
    ResourceLoader.set_data_dir(tmp_path)
    move = Move(id=33, name="tackle", power=40, accuracy=100, pp=35, priority=0)

    path = ResourceLoader.save("move", move)

    assert path == tmp_path / "move" / "33" / "index.json"
    assert not path.with_suffix(".tmp").exists()
    assert ResourceLoader.load_move(33) == move


def test_save_without_id_uses_name(tmp_path: Path) -> None:
    ResourceLoader.set_data_dir(tmp_path)

    path = ResourceLoader.save("move-ailment", MoveAilment(name="Trap"))

    assert path == tmp_path / "move-ailment" / "trap.json"
    assert ResourceLoader.load_move_ailment("trap").name == "Trap"


def test_save_rejects_wrong_record_type(tmp_path: Path) -> None:
    ResourceLoader.set_data_dir(tmp_path)

    with pytest.raises(TypeError):
        ResourceLoader.save("move", MoveAilment(id=1))


def test_save_requires_id_or_name(tmp_path: Path) -> None:
    ResourceLoader.set_data_dir(tmp_path)

    with pytest.raises(ValueError):
        ResourceLoader.save("move", Move())


def test_saved_record_can_be_loaded_by_name(tmp_path: Path) -> None:
    ResourceLoader.set_data_dir(tmp_path)
    move = Move(id=33, name="tackle", power=40)

    ResourceLoader.save("move", move)

    assert ResourceLoader.load_move("tackle") == move
    assert ResourceLoader.load_move("Tackle") == move
    index = ResourceLoader.load_index("move")
    assert index.count == 1
    assert index.results[0] == NamedApiResource(name="tackle", url="/api/v2/move/33/")


def test_save_updates_existing_index(dump_dir: Path) -> None:
    ResourceLoader.save("move", Move(id=33, name="tackle"))
    ResourceLoader.save("move", Move(id=33, name="tackle", power=40))

    index = ResourceLoader.load_index("move")

    assert index.count == 3
    assert [r.name for r in index.results] == ["pound", "tackle", "growl"]
    assert ResourceLoader.load_move("growl").id == 45
    assert ResourceLoader.load_move("tackle").power == 40


def test_save_without_id_leaves_index_alone(dump_dir: Path) -> None:
    ResourceLoader.save("move", Move(name="struggle"))

    assert ResourceLoader.load_index("move").count == 2
    assert ResourceLoader.load_move("struggle").name == "struggle"


def test_load_all_keeps_folder_record_on_duplicate(dump_dir: Path, pound: dict, caplog) -> None:
    write_json(dump_dir / "move" / "pound.json", dict(pound, power=99))

    with caplog.at_level("WARNING", logger="pokeapi_moves.utils.core.loader"):
        moves = ResourceLoader.load_all("move")

    assert moves["pound"].power == 40
    assert any("Duplicate move 'pound'" in r.getMessage() for r in caplog.records)
