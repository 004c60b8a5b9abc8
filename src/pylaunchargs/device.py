"""Launch surface: resolves launch args and hands them to a launch invoker."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import ValidationError

from pylaunchargs._redact import describe_for_log
from pylaunchargs.config import LaunchConfig
from pylaunchargs.exceptions import InvalidLaunchArgsError, LaunchArgsError, LaunchError
from pylaunchargs.filter import ReservedKeyFilter
from pylaunchargs.merger import resolve
from pylaunchargs.models import LaunchRequest, Platform, thaw_value
from pylaunchargs.serializer import serialize_args
from pylaunchargs.store import LaunchArgsStore

_logger = logging.getLogger(__name__)


class LaunchInvoker(Protocol):
    """Structural interface of whatever actually starts the app process.

    Having a protocol here makes it easy to pass test doubles while the
    production invoker (adb, simctl, ...) lives outside this library.
    """

    async def launch(self, args: dict[str, str], *, new_instance: bool) -> None:
        ...


class Device:
    """Device under test, as far as launch arguments are concerned.

    Usage::

        device = Device(LaunchConfig(launch_args={"env": "staging"}), invoker)
        device.app_launch_args.modify({"env": DELETE})
        await device.launch_app(new_instance=True, launch_args={"hello": "world"})
    """

    def __init__(
        self,
        config: LaunchConfig,
        invoker: LaunchInvoker,
        *,
        store: LaunchArgsStore | None = None,
        key_filter: ReservedKeyFilter | None = None,
    ) -> None:
        self._config = config
        self._invoker = invoker
        self._store = store if store is not None else LaunchArgsStore(log_values=config.log_values)
        self._key_filter = key_filter if key_filter is not None else ReservedKeyFilter(config.reserved_keys)

    @property
    def platform(self) -> Platform:
        return self._config.platform

    @property
    def baseline(self) -> dict[str, Any]:
        """The configured baseline launch args (a copy)."""
        return thaw_value(self._config.launch_args)

    @property
    def app_launch_args(self) -> LaunchArgsStore:
        """Persistent overlay applied to every launch until reset."""
        return self._store

    def _resolve(self, on_site: Mapping[str, Any] | None) -> dict[str, Any]:
        return resolve(
            self._config.platform,
            self._config.launch_args,
            self._store.get(),
            on_site,
            key_filter=self._key_filter,
        )

    def preview_launch_args(self, launch_args: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Return the args a launch with *launch_args* would receive, unserialized."""
        request = self._validate_request({"launch_args": launch_args})
        return self._resolve(request.launch_args)

    async def launch_app(
        self,
        *,
        new_instance: bool = False,
        launch_args: Mapping[str, Any] | None = None,
    ) -> dict[str, str]:
        """Resolve launch args and launch the app.

        *launch_args* are on-site overrides for this call only; they win
        over the baseline and the overlay and are not remembered.

        Returns the serialized args handed to the invoker.
        """
        return await self.launch_app_request({"new_instance": new_instance, "launch_args": launch_args})

    async def launch_app_request(self, request: LaunchRequest | Mapping[str, Any]) -> dict[str, str]:
        """Launch using a ``{newInstance, launchArgs?}`` request."""
        validated = request if isinstance(request, LaunchRequest) else self._validate_request(request)

        # Resolve before the first await so no modify() can interleave with the merge.
        args = serialize_args(self._resolve(validated.launch_args))
        _logger.debug(
            "Launching app on %s (new_instance=%s) with args: %s",
            self._config.platform,
            validated.new_instance,
            describe_for_log(args, log_values=self._config.log_values),
        )

        try:
            await self._invoker.launch(dict(args), new_instance=validated.new_instance)
        except LaunchArgsError:
            raise
        except Exception as exc:
            raise LaunchError(
                f"App launch failed on {self._config.platform}: {exc}",
                platform=str(self._config.platform),
            ) from exc
        return args

    @staticmethod
    def _validate_request(request: Mapping[str, Any]) -> LaunchRequest:
        try:
            return LaunchRequest.model_validate(dict(request))
        except ValidationError as exc:
            raise InvalidLaunchArgsError(f"Invalid launch request: {exc}") from exc
