"""JSON persistence helpers."""
from __future__ import annotations

import dataclasses
import json
import types
import typing
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from globalkit.utils.log import do_catch_log

__all__ = [
    "documents_dir",
    "ensure_parent_dir",
    "load",
    "load_collection",
    "save",
    "save_collection",
    "to_dict_representation",
    "to_list_representation",
]

T = TypeVar("T")


def ensure_parent_dir(path: str | Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it as a ``Path``."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def save(instance: Any, path: str | Path) -> None:
    """Encode ``instance`` as JSON and write it to ``path``.

    Dataclass instances are encoded field by field. Missing parent directories are
    created on the way.
    """

    _write(path, _encode(instance))


def load(path: str | Path, cls: Optional[Type[T]] = None) -> Any:
    """Decode the JSON document at ``path``, rebuilding ``cls`` when given."""

    data = _read(path)
    if cls is None:
        return data
    return _decode(data, cls)


def save_collection(items: Iterable[Any], path: str | Path) -> None:
    """Write ``items`` to ``path`` as a JSON array."""

    _write(path, [_encode(item) for item in items])


def load_collection(path: str | Path, cls: Optional[Type[T]] = None) -> List[Any]:
    """Read a JSON array from ``path``; each element becomes ``cls`` when given."""

    data = _read(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in '{path}', found {type(data).__name__}")
    if cls is None:
        return data
    return [_decode(item, cls) for item in data]


def to_dict_representation(obj: Any) -> Optional[Dict[str, Any]]:
    """Return the JSON object form of ``obj``.

    ``None`` (after logging the error) when ``obj`` cannot be encoded, and an
    empty dict when it encodes to something other than an object.
    """

    def convert() -> Dict[str, Any]:
        decoded = _round_trip(obj)
        return decoded if isinstance(decoded, dict) else {}

    return do_catch_log(convert)


def to_list_representation(obj: Any) -> Optional[List[Any]]:
    """Return the JSON array form of ``obj``; see :func:`to_dict_representation`."""

    def convert() -> List[Any]:
        decoded = _round_trip(obj)
        return decoded if isinstance(decoded, list) else []

    return do_catch_log(convert)


def documents_dir() -> Path:
    """Return the current user's documents directory."""

    return Path.home() / "Documents"


def _write(path: str | Path, payload: Any) -> None:
    file_path = ensure_parent_dir(path)
    serialized = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
    file_path.write_text(serialized + "\n", encoding="utf-8")


def _read(path: str | Path) -> Any:
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as exc:  # pragma: no cover - I/O edge cases
        raise RuntimeError(f"Failed to read JSON file '{file_path}': {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in '{file_path}': {exc}") from exc


def _encode(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def _decode(data: Any, cls: Type[T]) -> T:
    if dataclasses.is_dataclass(cls) and isinstance(data, dict):
        hints = typing.get_type_hints(cls)
        kwargs = {
            field.name: _decode_value(data[field.name], hints.get(field.name, Any))
            for field in dataclasses.fields(cls)
            if field.init and field.name in data
        }
        return cls(**kwargs)
    if isinstance(data, dict):
        return cls(**data)
    return cls(data)  # type: ignore[call-arg]


def _decode_value(value: Any, hint: Any) -> Any:
    """Rebuild dataclasses nested in ``value`` according to the annotation ``hint``."""

    if value is None:
        return None
    if dataclasses.is_dataclass(hint) and isinstance(hint, type):
        return _decode(value, hint) if isinstance(value, dict) else value

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)
    if origin is list and args and isinstance(value, list):
        return [_decode_value(item, args[0]) for item in value]
    if origin is tuple and args and isinstance(value, list):
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_decode_value(item, args[0]) for item in value)
        return tuple(_decode_value(item, arg) for item, arg in zip(value, args))
    if origin is dict and len(args) == 2 and isinstance(value, dict):
        return {key: _decode_value(item, args[1]) for key, item in value.items()}
    if origin is typing.Union or isinstance(hint, types.UnionType):
        for arg in args:
            if arg is not type(None) and dataclasses.is_dataclass(arg) and isinstance(value, dict):
                return _decode(value, arg)
    return value


def _round_trip(obj: Any) -> Any:
    return json.loads(json.dumps(_encode(obj)))
