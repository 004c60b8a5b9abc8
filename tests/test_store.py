from __future__ import annotations

import copy
import pickle
from types import MappingProxyType

import pytest

from pylaunchargs.exceptions import InvalidArgumentError, InvalidPatchError
from pylaunchargs.models import DELETE
from pylaunchargs.store import LaunchArgsStore


def test_initially_empty() -> None:
    store = LaunchArgsStore()
    assert store.get() == {}
    assert len(store) == 0


def test_modify_add_change_delete() -> None:
    store = LaunchArgsStore()
    store.modify({"app": DELETE, "goo": "gle!", "ama": "zon"})

    snapshot = store.get()
    assert snapshot == {"app": DELETE, "goo": "gle!", "ama": "zon"}
    assert snapshot["app"] is DELETE
    assert store.deleted_keys() == frozenset({"app"})


def test_modify_is_shallow_merge() -> None:
    store = LaunchArgsStore()
    store.modify({"a": 1, "b": {"x": 1}})
    store.modify({"b": {"y": 2}, "c": True})

    # Untouched keys survive; touched keys are replaced wholesale.
    assert store.get() == {"a": 1, "b": {"y": 2}, "c": True}


def test_modify_overwrites_deletion() -> None:
    store = LaunchArgsStore()
    store.modify({"a": DELETE})
    store.modify({"a": "back"})
    assert store.get() == {"a": "back"}


def test_modify_chains() -> None:
    store = LaunchArgsStore()
    assert store.modify({"a": 1}).modify({"b": 2}) is store
    assert store.get() == {"a": 1, "b": 2}


def test_modify_accepts_any_mapping() -> None:
    store = LaunchArgsStore()
    store.modify(MappingProxyType({"a": "b"}))
    assert store.get() == {"a": "b"}


def test_get_returns_detached_snapshot() -> None:
    store = LaunchArgsStore()
    store.modify({"nested": {"list": [1, 2]}})

    snapshot = store.get()
    snapshot["nested"]["list"].append(3)
    snapshot["new"] = "key"

    assert store.get() == {"nested": {"list": [1, 2]}}


def test_modify_copies_patch_values() -> None:
    store = LaunchArgsStore()
    value = {"list": [1]}
    store.modify({"k": value})
    value["list"].append(2)

    assert store.get() == {"k": {"list": [1]}}


def test_reset_is_idempotent() -> None:
    store = LaunchArgsStore()
    store.modify({"a": 1, "b": DELETE})
    store.reset()
    assert store.get() == {}
    store.reset()
    assert store.get() == {}


@pytest.mark.parametrize("patch", [None, "a=b", ["a", "b"], 42])
def test_modify_rejects_non_mapping(patch: object) -> None:
    store = LaunchArgsStore()
    with pytest.raises(InvalidPatchError):
        store.modify(patch)  # type: ignore[arg-type]


def test_modify_rejects_invalid_value_without_partial_update() -> None:
    store = LaunchArgsStore()
    store.modify({"keep": "me"})

    with pytest.raises(InvalidPatchError, match="bad"):
        store.modify({"ok": "fine", "bad": None})

    assert store.get() == {"keep": "me"}


def test_modify_rejects_non_string_key() -> None:
    with pytest.raises(InvalidPatchError):
        LaunchArgsStore().modify({1: "x"})  # type: ignore[dict-item]


def test_nested_delete_marker_rejected() -> None:
    with pytest.raises(InvalidPatchError):
        LaunchArgsStore().modify({"outer": {"inner": DELETE}})


def test_invalid_patch_is_invalid_argument() -> None:
    assert issubclass(InvalidPatchError, InvalidArgumentError)


def test_delete_marker_identity_survives_copy_and_pickle() -> None:
    assert copy.deepcopy(DELETE) is DELETE
    assert copy.copy(DELETE) is DELETE
    assert pickle.loads(pickle.dumps(DELETE)) is DELETE
    assert repr(DELETE) == "DELETE"


def test_non_finite_number_inside_structure_rejected() -> None:
    store = LaunchArgsStore()
    with pytest.raises(InvalidPatchError, match="non-finite"):
        store.modify({"limits": {"max": float("inf")}})
    with pytest.raises(InvalidPatchError, match="non-finite"):
        store.modify({"samples": [1.0, float("nan")]})
    assert store.get() == {}


def test_non_finite_top_level_number_accepted() -> None:
    store = LaunchArgsStore()
    store.modify({"ratio": float("inf")})
    assert store.get() == {"ratio": float("inf")}
