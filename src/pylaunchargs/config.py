"""Launch configuration for pylaunchargs."""

from __future__ import annotations

import dataclasses
import json
import os
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pylaunchargs._constants import ENV_PREFIX
from pylaunchargs.exceptions import LaunchArgsConfigError
from pylaunchargs.filter import DEFAULT_RESERVED_KEYS
from pylaunchargs.models import Platform, freeze_value, validate_argument_map


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _parse_platform(value: Any) -> Platform:
    try:
        return Platform(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in Platform)
        raise LaunchArgsConfigError(f"Unknown platform {value!r} (expected one of: {choices})") from exc


def _parse_key_list(value: str) -> frozenset[str]:
    return frozenset(part.strip() for part in value.split(",") if part.strip())


def _parse_reserved(platform: Any, keys: Any) -> frozenset[str]:
    # A bare string is iterable too and would silently become a set of characters.
    if isinstance(keys, str) or not isinstance(keys, Iterable):
        raise LaunchArgsConfigError(f"Reserved keys for {platform!r} must be a collection of strings, got {keys!r}")
    reserved = frozenset(keys)
    if not all(isinstance(key, str) for key in reserved):
        raise LaunchArgsConfigError(f"Reserved keys for {platform!r} must be strings, got {sorted(map(repr, reserved))}")
    return reserved


@dataclasses.dataclass(frozen=True)
class LaunchConfig:
    """Launch configuration.

    Parameters
    ----------
    platform : Platform
        Platform of the device under test. Selects the reserved-key set.
    launch_args : Mapping[str, Any]
        Baseline launch arguments declared for the app. Stored deeply
        read-only over a private copy: nested dicts become mapping proxies
        and lists become tuples.
    reserved_keys : Mapping[Platform, frozenset[str]]
        Keys the platform's instrumentation layer intercepts. Defaults to
        the Android ``am instrument`` options.
    log_values : bool
        Include (redacted) argument values in DEBUG logs. When ``False``
        only key names are logged.
    """

    platform: Platform = Platform.ANDROID
    launch_args: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    reserved_keys: Mapping[Platform, frozenset[str]] = dataclasses.field(
        default_factory=lambda: dict(DEFAULT_RESERVED_KEYS)
    )
    log_values: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "platform", _parse_platform(self.platform))
        try:
            baseline = validate_argument_map(self.launch_args)
        except (TypeError, ValueError) as exc:
            raise LaunchArgsConfigError(f"Invalid baseline launch args: {exc}") from exc
        # Nested dicts and lists are frozen too; resolve() thaws a private copy per launch.
        object.__setattr__(self, "launch_args", freeze_value(baseline))
        reserved = MappingProxyType(
            {_parse_platform(platform): _parse_reserved(platform, keys) for platform, keys in self.reserved_keys.items()}
        )
        object.__setattr__(self, "reserved_keys", reserved)

    @classmethod
    def from_env(cls, **overrides: Any) -> LaunchConfig:
        """Create configuration from environment variables.

        Reads ``LAUNCHARGS_PLATFORM``, ``LAUNCHARGS_BASELINE`` (a JSON
        object), ``LAUNCHARGS_ANDROID_RESERVED_KEYS`` (comma separated)
        and ``LAUNCHARGS_LOG_VALUES``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        LaunchArgsConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        platform_env = env.get(f"{ENV_PREFIX}PLATFORM")
        if platform_env is not None and "platform" not in overrides:
            config_kwargs["platform"] = _parse_platform(platform_env)

        baseline_env = env.get(f"{ENV_PREFIX}BASELINE")
        if baseline_env is not None and "launch_args" not in overrides:
            try:
                baseline = json.loads(baseline_env)
            except json.JSONDecodeError as exc:
                raise LaunchArgsConfigError(f"{ENV_PREFIX}BASELINE is not valid JSON") from exc
            if not isinstance(baseline, dict):
                raise LaunchArgsConfigError(f"{ENV_PREFIX}BASELINE must be a JSON object")
            config_kwargs["launch_args"] = baseline

        android_env = env.get(f"{ENV_PREFIX}ANDROID_RESERVED_KEYS")
        if android_env is not None and "reserved_keys" not in overrides:
            reserved = dict(DEFAULT_RESERVED_KEYS)
            reserved[Platform.ANDROID] = _parse_key_list(android_env)
            config_kwargs["reserved_keys"] = reserved

        if "log_values" not in overrides:
            config_kwargs["log_values"] = _env_bool(env.get(f"{ENV_PREFIX}LOG_VALUES"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
