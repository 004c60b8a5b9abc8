"""Helpers for safe debug logging.

Launch arguments regularly carry credentials for test backends (API keys,
session tokens, passwords).  This module redacts such values before they
reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pylaunchargs.models import DELETE

_SENSITIVE_KEY_FRAGMENTS: tuple[str, ...] = (
    "password",
    "passwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "authorization",
    "cookie",
    "credential",
    "privatekey",
)

_MAX_STRING = 256


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(fragment in lowered for fragment in _SENSITIVE_KEY_FRAGMENTS)


def _entry(key: str, value: Any, max_string: int) -> Any:
    # A sensitive key hides its whole value, structured or not.
    if _is_sensitive(key):
        return "<redacted>"
    return _value(value, max_string)


def _value(value: Any, max_string: int) -> Any:
    if value is DELETE:
        return "<delete>"
    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"
    if isinstance(value, Mapping):
        return {str(key): _entry(str(key), item, max_string) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_value(item, max_string) for item in value]
    return value


def redact_for_log(args: Mapping[str, Any], *, max_string: int = _MAX_STRING) -> dict[str, Any]:
    """Return a copy of a launch argument map that is safe to log.

    Works on raw values as well as serialized strings, and on overlay
    patches (DELETE entries render as ``<delete>``).
    """
    return {str(key): _entry(str(key), value, max_string) for key, value in args.items()}


def describe_for_log(args: Mapping[str, Any], *, log_values: bool) -> Any:
    """Redacted view of *args*, or just the sorted keys when values are off."""
    if not log_values:
        return sorted(args)
    return redact_for_log(args)
