"""Helpers for test suites that drive launches."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pylaunchargs.exceptions import PreconditionMismatchError


def _dump(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=repr)


def assert_preconfigured_value(actual: Mapping[str, Any], expected: Mapping[str, Any]) -> None:
    """Fail fast when the preconfigured launch args are not what a test assumes.

    Raises
    ------
    PreconditionMismatchError
        If *actual* and *expected* are not structurally equal.
    """
    if dict(actual) == dict(expected):
        return
    raise PreconditionMismatchError(
        "Precondition failure: Preconfigured launch arguments do not match the expected value.\n"
        f"Expected: {_dump(dict(expected))}\n"
        f"Received: {_dump(dict(actual))}",
        expected=dict(expected),
        received=dict(actual),
    )
