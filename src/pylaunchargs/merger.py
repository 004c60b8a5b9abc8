"""Deterministic merge of the three launch argument layers.

Precedence, lowest to highest: baseline < overlay < on-site.  Only the
overlay can delete keys.  The merged map is passed through the platform's
reserved-key filter before it is returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pylaunchargs.filter import ReservedKeyFilter
from pylaunchargs.models import DELETE, Platform, thaw_value

_DEFAULT_FILTER = ReservedKeyFilter()


def _apply_overlay(target: dict[str, Any], overlay: Mapping[str, Any]) -> None:
    for key, value in overlay.items():
        if value is DELETE:
            target.pop(key, None)
        else:
            target[key] = thaw_value(value)


def _apply_on_site(target: dict[str, Any], on_site: Mapping[str, Any]) -> None:
    # No deletion semantics here: omitting a key is the only way to not override it.
    for key, value in on_site.items():
        target[key] = thaw_value(value)


def resolve(
    platform: Platform,
    baseline: Mapping[str, Any] | None,
    overlay: Mapping[str, Any] | None,
    on_site: Mapping[str, Any] | None,
    *,
    key_filter: ReservedKeyFilter | None = None,
) -> dict[str, Any]:
    """Merge baseline, overlay and on-site args into the resolved set.

    Inputs are never mutated and the result shares no mutable state with
    them.  Any layer may be ``None``, meaning empty.
    """
    resolved: dict[str, Any] = thaw_value(baseline) if baseline else {}
    if overlay:
        _apply_overlay(resolved, overlay)
    if on_site:
        _apply_on_site(resolved, on_site)
    return (key_filter or _DEFAULT_FILTER).filter(platform, resolved)
