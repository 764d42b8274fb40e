"""Argument helpers for building call forms from ABI parameters.

- `input_kind` / `placeholder`: what kind of widget and hint a type wants.
- `parse_input_value`: turn user text into the Python value passed to a call.
- `validate_input`: check user text against a parameter before calling.
- `format_return_value`: render a call result for display.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from eth_utils import is_hex, is_hex_address

from emitscope.core.models import Parameter
from emitscope.errors import InputValueError

InputKind = Literal["number", "checkbox", "text"]

_TRUTHY = ("true", "1", "on")
_SIZED = re.compile(r"^(u?int|bytes)(\d*)$")


@dataclass(slots=True, frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None


def _is_int_type(typ: str) -> bool:
    return typ.startswith("uint") or typ.startswith("int")


def _to_int(value: str) -> int:
    s = value.strip()
    if s.lower().lstrip("-").startswith("0x"):
        return int(s, 16)
    return int(s)


def _bits(typ: str) -> int:
    m = _SIZED.match(typ)
    return int(m.group(2)) if m and m.group(2) else 256


def input_kind(typ: str) -> InputKind:
    if _is_int_type(typ) and not typ.endswith("]"):
        return "number"
    if typ == "bool":
        return "checkbox"
    return "text"


def placeholder(typ: str) -> str:
    if typ.endswith("[]"):
        return "[1, 2, 3] or 1,2,3"
    if _is_int_type(typ):
        return "0"
    if typ == "address":
        return "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0"
    if typ == "bool":
        return "true/false"
    if typ == "string":
        return "Enter text..."
    if typ.startswith("bytes"):
        return "0x..."
    return "Enter value..."


def parse_input_value(value: str, typ: str) -> Any:
    """Convert form text into a call argument for ABI type `typ`.

    Empty text yields None. Arrays accept a JSON array or a comma-separated
    list; each element is parsed with the base type.
    """
    if not value:
        return None

    if typ.endswith("[]"):
        base = typ[:-2]
        try:
            items = json.loads(value)
        except json.JSONDecodeError:
            items = None
        if not isinstance(items, list):
            items = [v.strip() for v in value.split(",")]
        return [parse_input_value(str(v), base) for v in items]

    if _is_int_type(typ):
        try:
            return _to_int(value)
        except ValueError as e:
            raise InputValueError(f"Invalid number: {value}") from e

    if typ == "bool":
        return value.lower() in _TRUTHY

    # address, bytes, string
    return value


def _check_int(value: str, typ: str) -> ValidationResult:
    try:
        n = _to_int(value)
    except ValueError:
        return ValidationResult(False, f"Invalid number: {value}")
    bits = _bits(typ)
    if typ.startswith("uint"):
        if n < 0:
            return ValidationResult(False, "Unsigned integers must be >= 0")
        if n > (1 << bits) - 1:
            return ValidationResult(False, f"Value exceeds max for {typ}")
    elif not -(1 << (bits - 1)) <= n <= (1 << (bits - 1)) - 1:
        return ValidationResult(False, f"Value out of range for {typ}")
    return ValidationResult(True)


def validate_input(value: str, param: Parameter) -> ValidationResult:
    """Check form text against `param` without raising."""
    typ = param.type
    if not value:
        # unsigned ints and bools have a sensible zero value
        if typ.startswith("uint") or typ == "bool":
            return ValidationResult(True)
        return ValidationResult(False, "Value is required")

    if typ.endswith("[]"):
        try:
            parse_input_value(value, typ)
        except InputValueError as e:
            return ValidationResult(False, f"Invalid array: {e}")
        return ValidationResult(True)

    if typ == "address":
        if not value.startswith("0x") or not is_hex_address(value):
            return ValidationResult(False, "Invalid address format (must be 0x + 40 hex chars)")
        return ValidationResult(True)

    if _is_int_type(typ):
        return _check_int(value, typ)

    if typ.startswith("bytes") and typ != "bytes":
        size = _bits(typ)
        if not value.startswith("0x") or not is_hex(value):
            return ValidationResult(False, "Bytes must be hex string (0x...)")
        got = (len(value) - 2) // 2
        if got != size:
            return ValidationResult(False, f"Expected {size} bytes, got {got}")

    return ValidationResult(True)


def format_return_value(value: Any) -> str:
    """Render a decoded call result for display."""
    if value is None:
        return "N/A"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_return_value(v) for v in value) + "]"
    if isinstance(value, Mapping):
        return json.dumps(value, indent=2, default=str)
    return str(value)
