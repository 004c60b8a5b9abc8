"""Conversion of launch argument values into launch-transportable strings.

Primitives map to their plain text form; structured values (lists and
dicts) become compact JSON so the receiving app can parse them back.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pylaunchargs.models import ArgumentMap, ArgumentValue


def _serialize_float(value: float) -> str:
    """Format *value* the way JavaScript's ``String(number)`` does.

    Digits come from the shortest round-trip ``repr``; only the layout
    changes (``1.0`` -> ``"1"``, ``1e23`` -> ``"1e+23"``, ``1e-7`` -> ``"1e-7"``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # value == 0.<digits> * 10**point
    point = len(digits) + exponent
    prefix = "-" if sign else ""

    if len(digits) <= point <= 21:
        return prefix + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return prefix + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return prefix + "0." + "0" * -point + digits
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    power = point - 1
    return f"{prefix}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def serialize(value: ArgumentValue) -> str:
    """Return the launch-transportable string form of *value*.

    * ``bool`` → ``"true"`` / ``"false"``
    * ``int`` / ``float`` → canonical decimal text
    * ``str`` → unchanged
    * ``list`` / ``tuple`` / ``dict`` → compact JSON

    Raises :class:`TypeError` for anything else, including non-finite
    floats nested inside a structured value.
    """
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _serialize_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(_jsonable(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except ValueError as exc:
            # NaN/Infinity have no strict-JSON spelling the app could parse.
            raise TypeError(f"cannot serialize non-finite number inside a structured launch argument: {exc}") from exc
    raise TypeError(f"cannot serialize launch argument of type {type(value).__name__}")


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, (str, bool, int, float)):
        return value
    raise TypeError(f"cannot serialize launch argument of type {type(value).__name__}")


def serialize_args(args: ArgumentMap) -> dict[str, str]:
    """Serialize a resolved argument map key by key."""
    return {key: serialize(value) for key, value in args.items()}
