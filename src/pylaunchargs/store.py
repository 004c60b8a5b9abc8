"""Process-wide mutable overlay of launch argument modifications.

The store outlives individual launches: whatever is set here applies to
every subsequent launch until :meth:`LaunchArgsStore.reset` is called.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pylaunchargs._redact import describe_for_log
from pylaunchargs.exceptions import InvalidPatchError
from pylaunchargs.models import DELETE, validate_argument_map

_logger = logging.getLogger(__name__)


class LaunchArgsStore:
    """Overlay layer between the configured baseline and on-site args.

    A key mapped to :data:`DELETE` is a real entry: it removes the key from
    the resolved launch arguments even when the baseline supplies it.

    Usage::

        store = LaunchArgsStore()
        store.modify({"app": DELETE, "goo": "gle!"})
        store.get()   # {"app": DELETE, "goo": "gle!"}
        store.reset()
    """

    def __init__(self, *, log_values: bool = True) -> None:
        self._overlay: dict[str, Any] = {}
        self._log_values = log_values

    def get(self) -> dict[str, Any]:
        """Return a detached snapshot of the overlay, deletions included."""
        return copy.deepcopy(self._overlay)

    def modify(self, patch: Mapping[str, Any]) -> LaunchArgsStore:
        """Shallow-merge *patch* into the overlay.

        Keys absent from *patch* are left untouched.  The patch is
        validated as a whole before anything is applied.

        Raises
        ------
        InvalidPatchError
            If *patch* is not a mapping or holds an invalid key or value.
        """
        try:
            validated = validate_argument_map(patch, allow_delete=True)
        except (TypeError, ValueError) as exc:
            raise InvalidPatchError(f"Invalid launch args patch: {exc}") from exc

        self._overlay.update(validated)
        if validated:
            _logger.debug(
                "Launch args overlay modified: %s",
                describe_for_log(validated, log_values=self._log_values),
            )
        return self

    def reset(self) -> None:
        """Clear every modification."""
        if self._overlay:
            _logger.debug("Launch args overlay reset (%d entries dropped)", len(self._overlay))
        self._overlay.clear()

    def deleted_keys(self) -> frozenset[str]:
        """Keys currently marked for deletion."""
        return frozenset(key for key, value in self._overlay.items() if value is DELETE)

    def __len__(self) -> int:
        return len(self._overlay)

    def __repr__(self) -> str:
        return f"LaunchArgsStore(keys={sorted(self._overlay)!r})"
