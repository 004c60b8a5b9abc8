"""Custom exception hierarchy for pylaunchargs."""

from __future__ import annotations

from typing import Any


class LaunchArgsError(Exception):
    """Base exception for all pylaunchargs errors."""


class LaunchArgsConfigError(LaunchArgsError):
    """Invalid or missing configuration."""


class InvalidArgumentError(LaunchArgsError):
    """A launch-argument map or value is malformed (programmer error)."""


class InvalidPatchError(InvalidArgumentError):
    """``modify`` was called with something that is not a valid argument patch."""


class InvalidLaunchArgsError(InvalidArgumentError):
    """On-site launch arguments passed to a launch call are malformed.

    On-site arguments do not support deletion; passing the deletion
    marker here is rejected as well.
    """


class PreconditionMismatchError(LaunchArgsError):
    """Preconfigured launch arguments differ from what a test expects."""

    def __init__(
        self,
        message: str,
        *,
        expected: Any = None,
        received: Any = None,
    ) -> None:
        self.expected = expected
        self.received = received
        super().__init__(message)


class LaunchError(LaunchArgsError):
    """The launch invoker failed to start the application."""

    def __init__(self, message: str, *, platform: str = "") -> None:
        self.platform = platform
        super().__init__(message)
