"""Opaque key/value metadata bags attached to results and responses."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Union

from embedport.errors import InvalidArgumentError

MetadataValue = Union[
    str,
    int,
    float,
    bool,
    None,
    Mapping[str, "MetadataValue"],
    tuple["MetadataValue", ...],
]
Metadata = Mapping[str, MetadataValue]

EMPTY_METADATA: Metadata = MappingProxyType({})


def freeze_metadata(values: Mapping[str, Any] | None, *, path: str = "metadata") -> Metadata:
    """Validate a metadata mapping and return a read-only deep copy.

    Nested mappings become read-only mappings and lists/tuples become tuples.
    Any other value type is rejected with ``InvalidArgumentError``.
    """
    if values is None:
        return EMPTY_METADATA
    if not isinstance(values, Mapping):
        raise InvalidArgumentError(f"{path} must be a mapping, got {type(values).__name__}.")
    frozen: dict[str, MetadataValue] = {}
    for key, value in values.items():
        if not isinstance(key, str):
            raise InvalidArgumentError(f"{path} keys must be strings, got {key!r}.")
        frozen[key] = _freeze_value(value, f"{path}.{key}")
    return MappingProxyType(frozen)


def thaw_metadata(values: Metadata) -> dict[str, Any]:
    """Return a plain, JSON-serializable copy of a frozen metadata mapping."""
    return {key: _thaw_value(value) for key, value in values.items()}


def _freeze_value(value: Any, path: str) -> MetadataValue:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return freeze_metadata(value, path=path)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze_value(item, f"{path}[{index}]") for index, item in enumerate(value))
    raise InvalidArgumentError(f"{path} has unsupported metadata type {type(value).__name__}.")


def _thaw_value(value: MetadataValue) -> Any:
    if isinstance(value, Mapping):
        return thaw_metadata(value)
    if isinstance(value, tuple):
        return [_thaw_value(item) for item in value]
    return value


def metadata_key(values: Metadata) -> tuple:
    """Return a hashable form of a frozen metadata mapping, independent of key order."""
    return tuple(sorted((key, _key_value(value)) for key, value in values.items()))


def _key_value(value: MetadataValue) -> Any:
    if isinstance(value, Mapping):
        return ("mapping", metadata_key(value))
    if isinstance(value, tuple):
        return ("sequence", tuple(_key_value(item) for item in value))
    return value
