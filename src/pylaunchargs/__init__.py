"""pylaunchargs - Launch argument resolution for apps under automated test."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pylaunchargs")
except PackageNotFoundError:
    __version__ = "0+local"
from pylaunchargs.config import LaunchConfig
from pylaunchargs.device import Device, LaunchInvoker
from pylaunchargs.exceptions import (
    InvalidArgumentError,
    InvalidLaunchArgsError,
    InvalidPatchError,
    LaunchArgsConfigError,
    LaunchArgsError,
    LaunchError,
    PreconditionMismatchError,
)
from pylaunchargs.filter import DEFAULT_RESERVED_KEYS, ReservedKeyFilter
from pylaunchargs.merger import resolve
from pylaunchargs.models import (
    DELETE,
    ArgumentMap,
    ArgumentValue,
    DeleteMarker,
    LaunchRequest,
    Platform,
)
from pylaunchargs.serializer import serialize, serialize_args
from pylaunchargs.store import LaunchArgsStore

__all__ = [
    "__version__",
    "ArgumentMap",
    "ArgumentValue",
    "DEFAULT_RESERVED_KEYS",
    "DELETE",
    "DeleteMarker",
    "Device",
    "InvalidArgumentError",
    "InvalidLaunchArgsError",
    "InvalidPatchError",
    "LaunchArgsConfigError",
    "LaunchArgsError",
    "LaunchArgsStore",
    "LaunchConfig",
    "LaunchError",
    "LaunchInvoker",
    "LaunchRequest",
    "Platform",
    "PreconditionMismatchError",
    "ReservedKeyFilter",
    "resolve",
    "serialize",
    "serialize_args",
]
