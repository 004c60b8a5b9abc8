"""Platform-aware exclusion of reserved launch argument keys.

Some platforms run the app under an instrumentation layer that
intercepts certain option names before the app process ever sees them
(Android's ``am instrument`` consumes ``debug``, ``log``, ``size`` and
friends).  Passing those through would have no effect, so they are
dropped silently rather than reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pylaunchargs._constants import ANDROID_RESERVED_KEYS
from pylaunchargs.models import Platform

_logger = logging.getLogger(__name__)

DEFAULT_RESERVED_KEYS: Mapping[Platform, frozenset[str]] = MappingProxyType(
    {
        Platform.ANDROID: ANDROID_RESERVED_KEYS,
    }
)


class ReservedKeyFilter:
    """Strategy table mapping each platform to its reserved keys.

    Platforms missing from the table have no intercepting layer and
    are filtered with the identity function.
    """

    def __init__(self, reserved: Mapping[Platform, Iterable[str]] | None = None) -> None:
        table = DEFAULT_RESERVED_KEYS if reserved is None else reserved
        self._reserved: dict[Platform, frozenset[str]] = {
            Platform(platform): frozenset(keys) for platform, keys in table.items()
        }

    def reserved_keys(self, platform: Platform) -> frozenset[str]:
        return self._reserved.get(Platform(platform), frozenset())

    def filter(self, platform: Platform, args: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of *args* without the keys reserved on *platform*."""
        reserved = self.reserved_keys(platform)
        if not reserved:
            return dict(args)

        kept: dict[str, Any] = {}
        dropped: list[str] = []
        for key, value in args.items():
            if key in reserved:
                dropped.append(key)
            else:
                kept[key] = value
        if dropped:
            _logger.debug("Dropping launch args reserved on %s: %s", platform, sorted(dropped))
        return kept
