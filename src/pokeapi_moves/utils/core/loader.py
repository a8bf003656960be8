"""
Helper utilities for loading a local PokéAPI JSON dump into record dataclasses.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Optional, Union

import orjson
from dacite import DaciteError

from pokeapi_moves.models import (
    ApiResource,
    Move,
    MoveAilment,
    MoveBattleStyle,
    MoveCategory,
    MoveDamageClass,
    MoveLearnMethod,
    MoveTarget,
    NamedApiResource,
    NamedApiResourceList,
)
from pokeapi_moves.utils.core.codec import RESOURCE_TYPES, dumps, from_dict, resource_type
from pokeapi_moves.utils.core.logger import get_logger
from pokeapi_moves.utils.text.text_util import name_to_id, url_to_id, url_to_kind

logger = get_logger(__name__)

INDEX_FILE = "index.json"


class ResourceLoader:
    """
    Utility class for reading move records from a local copy of the API.

    The expected layout is the one published by PokeAPI's api-data project:

        <data_dir>/move/index.json        resource list for the kind
        <data_dir>/move/1/index.json      one resource, by id

    Flat files named after the resource (<data_dir>/move/pound.json) are
    also accepted. Records are read from disk on every call; nothing is
    cached.

    Configuration:
    - Use set_data_dir() to point the loader at the dump
    - Use get_data_dir() to retrieve the current data directory path

    Thread Safety:
    The data directory is guarded by a lock and writes are serialized, so the
    loader can be used from multiple threads.
    """

    # Class-level data directory (None until configured)
    _data_dir: Optional[Path] = None

    _data_dir_lock = threading.Lock()
    _file_lock = threading.Lock()

    @classmethod
    def get_data_dir(cls) -> Path:
        """Get the current data directory path (thread-safe).

        Raises:
            ValueError: If data directory has not been set via set_data_dir()

        Returns:
            Path: The data directory path
        """
        with cls._data_dir_lock:
            if cls._data_dir is None:
                raise ValueError(
                    "ResourceLoader data directory not configured. "
                    "Call ResourceLoader.set_data_dir(path) or configure(ClientConfig(data_dir=...)) first."
                )
            return cls._data_dir

    @classmethod
    def set_data_dir(cls, path: Optional[Path]) -> None:
        """Set the data directory path (thread-safe).

        Args:
            path (Optional[Path]): The new data directory path, or None to unset it
        """
        with cls._data_dir_lock:
            old_dir = cls._data_dir
            cls._data_dir = Path(path) if path is not None else None
        logger.info(f"Data directory changed from {old_dir} to {path}")

    @classmethod
    def get_category_path(cls, kind: str) -> Path:
        """Get the folder holding every resource of a kind.

        Args:
            kind (str): Resource kind (e.g., 'move', 'move-target')

        Returns:
            Path: Path to the kind's folder
        """
        return cls.get_data_dir() / kind

    @classmethod
    def _find_file(cls, kind: str, identifier: Union[int, str]) -> Optional[Path]:
        """Find the JSON file for a resource by id or name.

        Names are tried as a flat file, then as a folder, then resolved to an
        id through the kind's index.

        Args:
            kind (str): Resource kind
            identifier (Union[int, str]): Resource id or name

        Returns:
            Optional[Path]: The found file path, or None if not found
        """
        kind_dir = cls.get_category_path(kind)

        if isinstance(identifier, str) and not identifier.isdigit():
            name = name_to_id(identifier)
            for candidate in (kind_dir / f"{name}.json", kind_dir / name / INDEX_FILE):
                if candidate.exists():
                    return candidate

            index = cls.load_index(kind, silent=True)
            if index is None:
                return None
            for ref in index.results:
                if ref.name and name_to_id(ref.name) == name:
                    resource_id = url_to_id(ref.url)
                    if resource_id is None:
                        return None
                    identifier = resource_id
                    break
            else:
                return None

        file_path = kind_dir / str(identifier) / INDEX_FILE
        if file_path.exists():
            return file_path
        flat_path = kind_dir / f"{identifier}.json"
        if flat_path.exists():
            return flat_path
        return None

    @staticmethod
    def _read_json(file_path: Path) -> Any:
        """Read and parse a JSON file.

        Raises:
            ValueError: If the file is not valid JSON
            OSError: If the file cannot be read
        """
        logger.debug(f"Loading JSON file: {file_path}")
        try:
            with open(file_path, "rb") as f:
                return orjson.loads(f.read())
        except ValueError as e:
            logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
            raise
        except OSError as e:
            logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
            raise

    @classmethod
    def _build(cls, kind: str, data: Any, label: str) -> Optional[Any]:
        """Build the record for a kind, logging and returning None on failure."""
        data_class = resource_type(kind)
        try:
            return from_dict(data_class, data)
        except (DaciteError, TypeError, ValueError) as e:
            logger.error(f"Error loading {kind} '{label}': {e}")
            return None

    @classmethod
    def load(cls, kind: str, identifier: Union[int, str]) -> Optional[Any]:
        """Load one resource of a kind.

        Args:
            kind (str): Resource kind (e.g., 'move', 'move-ailment')
            identifier (Union[int, str]): Resource id (1) or name ('Pound', 'pound')

        Raises:
            KeyError: If the kind is not a move resource kind

        Returns:
            Optional[Any]: The record, or None if it is missing or unreadable
        """
        resource_type(kind)
        file_path = cls._find_file(kind, identifier)
        if file_path is None:
            logger.debug(f"{kind} '{identifier}' not found in {cls.get_category_path(kind)}")
            return None

        try:
            data = cls._read_json(file_path)
        except (ValueError, OSError):
            return None

        return cls._build(kind, data, str(identifier))

    @classmethod
    def load_reference(cls, ref: Union[NamedApiResource, ApiResource]) -> Optional[Any]:
        """Load the record a resource reference points at.

        Args:
            ref (Union[NamedApiResource, ApiResource]): Reference with a resource URL

        Returns:
            Optional[Any]: The record, or None if the URL is not a known move resource
        """
        kind = url_to_kind(ref.url)
        resource_id = url_to_id(ref.url)
        if kind is None or resource_id is None:
            logger.warning(f"Cannot resolve resource reference: {ref.url!r}")
            return None
        if kind not in RESOURCE_TYPES:
            logger.warning(f"Resource reference points at unsupported kind '{kind}': {ref.url}")
            return None
        return cls.load(kind, resource_id)

    @classmethod
    def load_index(cls, kind: str, silent: bool = False) -> Optional[NamedApiResourceList]:
        """Load the resource list of a kind.

        Args:
            kind (str): Resource kind
            silent (bool, optional): If True, don't log when the index is missing. Defaults to False.

        Returns:
            Optional[NamedApiResourceList]: The list, or None if missing or unreadable
        """
        file_path = cls.get_category_path(kind) / INDEX_FILE
        if not file_path.exists():
            if not silent:
                logger.warning(f"No index for '{kind}' at {file_path}")
            return None

        try:
            data = cls._read_json(file_path)
            return from_dict(NamedApiResourceList, data)
        except (DaciteError, TypeError, ValueError, OSError) as e:
            logger.error(f"Error loading index for '{kind}': {e}")
            return None

    @classmethod
    def load_all(cls, kind: str) -> dict[str, Any]:
        """Load every resource of a kind found in the dump.

        Args:
            kind (str): Resource kind

        Returns:
            dict[str, Any]: Mapping of resource name (or file stem when unnamed) to record
        """
        resource_type(kind)
        kind_dir = cls.get_category_path(kind)
        if not kind_dir.exists():
            return {}

        files = sorted(kind_dir.glob(f"*/{INDEX_FILE}")) + sorted(
            p for p in kind_dir.glob("*.json") if p.name != INDEX_FILE
        )

        results: dict[str, Any] = {}
        for file_path in files:
            label = file_path.parent.name if file_path.name == INDEX_FILE else file_path.stem
            try:
                data = cls._read_json(file_path)
            except (ValueError, OSError):
                continue
            record = cls._build(kind, data, label)
            if record is None:
                continue
            key = record.name or label
            # Folder layout is read first and wins over a flat duplicate
            if key in results:
                logger.warning(f"Duplicate {kind} '{key}' in {file_path}, keeping the earlier file")
                continue
            results[key] = record

        logger.debug(f"Loaded {len(results)} {kind} records from {kind_dir}")
        return results

    @classmethod
    def _write_atomic(cls, file_path: Path, payload: bytes) -> None:
        """Write bytes through a temp file and rename it into place (caller holds _file_lock)."""
        file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = file_path.with_suffix(".tmp")
        try:
            with open(temp_path, "wb") as f:
                f.write(payload)
            temp_path.replace(file_path)
        except OSError as e:
            logger.error(f"Error writing {file_path}: {e}", exc_info=True)
            if temp_path.exists():
                temp_path.unlink()
            raise

    @classmethod
    def _update_index(cls, kind: str, resource_id: int, name: Optional[str]) -> None:
        """Add or replace a resource's entry in <kind>/index.json (caller holds _file_lock)."""
        url = f"/api/v2/{kind}/{resource_id}/"
        index = cls.load_index(kind, silent=True) or NamedApiResourceList()
        index.results = [
            ref
            for ref in index.results
            if url_to_id(ref.url) != resource_id and (name is None or ref.name != name)
        ]
        index.results.append(NamedApiResource(name=name, url=url))
        index.results.sort(key=lambda ref: url_to_id(ref.url) or 0)
        index.count = len(index.results)
        cls._write_atomic(cls.get_category_path(kind) / INDEX_FILE, dumps(index, indent=True))

    @classmethod
    def save(cls, kind: str, record: Any) -> Path:
        """Write a record to the dump and return its path (thread-safe).

        Records with an id go to <kind>/<id>/index.json and are listed in
        <kind>/index.json so they can be found by name; others go to
        <kind>/<name>.json.

        Args:
            kind (str): Resource kind
            record (Any): The record to save

        Raises:
            TypeError: If the record is not of the kind's record type
            ValueError: If the record has neither an id nor a name
            OSError: If the file cannot be written

        Returns:
            Path: Path to the saved file
        """
        data_class = resource_type(kind)
        if not isinstance(record, data_class):
            raise TypeError(
                f"Expected {data_class.__name__} for '{kind}', got {type(record).__name__}"
            )

        kind_dir = cls.get_category_path(kind)
        if record.id is not None:
            file_path = kind_dir / str(record.id) / INDEX_FILE
        elif record.name:
            file_path = kind_dir / f"{name_to_id(record.name)}.json"
        else:
            raise ValueError(f"Cannot save {kind} without an id or a name")

        with cls._file_lock:
            logger.info(f"Saving {kind} '{record.name or record.id}' to {file_path}")
            cls._write_atomic(file_path, dumps(record, indent=True))
            if record.id is not None:
                cls._update_index(kind, record.id, record.name)

        return file_path

    @classmethod
    def load_move(cls, identifier: Union[int, str]) -> Optional[Move]:
        """Load a move by id or name (e.g., 1, 'pound', 'Thunder Punch')."""
        return cls.load("move", identifier)

    @classmethod
    def load_move_ailment(cls, identifier: Union[int, str]) -> Optional[MoveAilment]:
        return cls.load("move-ailment", identifier)

    @classmethod
    def load_move_battle_style(cls, identifier: Union[int, str]) -> Optional[MoveBattleStyle]:
        return cls.load("move-battle-style", identifier)

    @classmethod
    def load_move_category(cls, identifier: Union[int, str]) -> Optional[MoveCategory]:
        return cls.load("move-category", identifier)

    @classmethod
    def load_move_damage_class(cls, identifier: Union[int, str]) -> Optional[MoveDamageClass]:
        return cls.load("move-damage-class", identifier)

    @classmethod
    def load_move_learn_method(cls, identifier: Union[int, str]) -> Optional[MoveLearnMethod]:
        return cls.load("move-learn-method", identifier)

    @classmethod
    def load_move_target(cls, identifier: Union[int, str]) -> Optional[MoveTarget]:
        return cls.load("move-target", identifier)
