"""Launch argument value types and request models.

An argument value is one of ``str``, ``bool``, ``int``, ``float``, a list
of argument values or a ``str``-keyed dict of argument values.  ``None``
is deliberately *not* a value: removing a key from the persistent overlay
is spelled with the :data:`DELETE` marker instead.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

ArgumentValue: TypeAlias = "str | bool | int | float | list[ArgumentValue] | dict[str, ArgumentValue]"
ArgumentMap: TypeAlias = "Mapping[str, ArgumentValue]"


class Platform(enum.StrEnum):
    ANDROID = "android"
    IOS = "ios"


class DeleteMarker(enum.Enum):
    """Singleton marker meaning "remove this key" in an overlay patch.

    Being an enum member, the marker survives ``copy.deepcopy`` and
    pickling as the very same object, so identity checks stay valid on
    store snapshots.
    """

    DELETE = "delete"

    def __repr__(self) -> str:
        return "DELETE"


DELETE: Literal[DeleteMarker.DELETE] = DeleteMarker.DELETE
"""Deletion marker accepted by :meth:`LaunchArgsStore.modify`."""

_PRIMITIVES = (str, bool, int, float)


def _copy_value(value: Any, path: str, *, nested: bool = False) -> Any:
    if isinstance(value, float) and nested and not math.isfinite(value):
        # Structured values travel as strict JSON, which has no NaN/Infinity.
        raise ValueError(f"{path}: non-finite number {value!r} is not allowed inside a structured value")
    if isinstance(value, _PRIMITIVES):
        return value
    if value is DELETE:
        raise ValueError(f"{path}: deletion marker is only allowed as a top-level overlay value")
    if isinstance(value, Mapping):
        copied: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueError(f"{path}: keys must be strings, got {type(key).__name__}")
            copied[key] = _copy_value(item, f"{path}.{key}", nested=True)
        return copied
    if isinstance(value, (list, tuple)):
        return [_copy_value(item, f"{path}[{index}]", nested=True) for index, item in enumerate(value)]
    raise ValueError(f"{path}: unsupported launch argument type {type(value).__name__}")


def freeze_value(value: Any) -> Any:
    """Return a read-only view of *value*: dicts become mapping proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_value(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item) for item in value)
    return value


def thaw_value(value: Any) -> Any:
    """Return a detached, mutable copy of *value* (mappings to dicts, sequences to lists)."""
    if isinstance(value, Mapping):
        return {key: thaw_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw_value(item) for item in value]
    return value


def validate_argument_map(value: Any, *, allow_delete: bool = False) -> dict[str, Any]:
    """Validate *value* as an argument map and return a detached copy.

    Tuples are normalized to lists.  When *allow_delete* is true the
    :data:`DELETE` marker is accepted as a top-level value.

    Raises :class:`TypeError` if *value* is not a mapping and
    :class:`ValueError` for an invalid key or value.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"launch arguments must be a mapping, got {type(value).__name__}")
    result: dict[str, Any] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise ValueError(f"launch argument keys must be strings, got {key!r}")
        if item is DELETE and allow_delete:
            result[key] = DELETE
        else:
            result[key] = _copy_value(item, key)
    return result


class LaunchRequest(BaseModel):
    """A single launch call: ``{newInstance, launchArgs?}``.

    ``launch_args`` become the on-site layer for this call only.  Both the
    camelCase and snake_case spellings are accepted.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    new_instance: bool = False
    launch_args: dict[str, Any] | None = None

    @field_validator("launch_args", mode="before")
    @classmethod
    def _validate_launch_args(cls, value: Any) -> Any:
        if value is None:
            return None
        try:
            return validate_argument_map(value, allow_delete=False)
        except TypeError as exc:
            # pydantic only converts ValueError into a ValidationError.
            raise ValueError(str(exc)) from exc
