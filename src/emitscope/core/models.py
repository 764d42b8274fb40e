"""Core value objects for contract interfaces, emission maps and queries.

This module defines:
- `Parameter`: one ABI input/output slot (event inputs carry `indexed`).
- `FunctionItem` / `EventItem`: the two interface item kinds we care about.
- `CategorizedInterface`: read / write / event buckets plus drop diagnostics.
- `GeneratedQuery`: a labelled, ready-to-submit query string.

Design notes
------------
- Everything is frozen; sequences are stored as tuples.
- `FunctionItem.mutability` keeps the raw string when it is not one of the
  four known values so the categorizer can report it instead of the loader
  rejecting it.
- `EmissionMap` is a plain dict: an absent key means "unknown".
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from eth_utils.abi import event_signature_to_log_topic


class Mutability(str, Enum):
    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"

    @classmethod
    def parse(cls, value: str) -> Mutability | None:
        """Return the member for `value`, or None when it is not recognized."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_read_only(self) -> bool:
        return self in (Mutability.PURE, Mutability.VIEW)


# === Interface items ===


@dataclass(slots=True, frozen=True)
class Parameter:
    """One ABI parameter. `name` may be empty for anonymous slots."""

    type: str  # e.g. "uint256", "address", "bytes32", "uint8[]"
    name: str = ""
    indexed: bool = False

    @property
    def is_numeric(self) -> bool:
        return self.type.startswith("uint") or self.type.startswith("int")

    def display_name(self, index: int) -> str:
        return self.name or f"param{index}"


def _signature(name: str, params: Sequence[Parameter]) -> str:
    return f"{name}({','.join(p.type for p in params)})"


@dataclass(slots=True, frozen=True)
class FunctionItem:
    name: str
    inputs: tuple[Parameter, ...] = ()
    outputs: tuple[Parameter, ...] = ()
    mutability: Mutability | str = Mutability.NONPAYABLE

    @property
    def signature(self) -> str:
        return _signature(self.name, self.inputs)

    @property
    def state_mutability(self) -> str:
        """The ABI `stateMutability` string, known or not."""
        return self.mutability.value if isinstance(self.mutability, Mutability) else self.mutability


@dataclass(slots=True, frozen=True)
class EventItem:
    name: str
    inputs: tuple[Parameter, ...] = ()
    anonymous: bool = False

    @property
    def signature(self) -> str:
        return _signature(self.name, self.inputs)

    @property
    def topic0(self) -> str:
        """Keccak hash of the canonical signature (lowercase 0x-hex)."""
        return "0x" + event_signature_to_log_topic(self.signature).hex()

    def numeric_inputs(self) -> list[tuple[int, Parameter]]:
        """(position, parameter) pairs for integer-typed inputs, in order."""
        return [(i, p) for i, p in enumerate(self.inputs) if p.is_numeric]


InterfaceItem = FunctionItem | EventItem
InterfaceDescription = Sequence[InterfaceItem]


# === Derived values ===


@dataclass(slots=True, frozen=True)
class CategorizedInterface:
    """Interface items split by role, each bucket in declaration order."""

    read_functions: tuple[FunctionItem, ...] = ()
    write_functions: tuple[FunctionItem, ...] = ()
    events: tuple[EventItem, ...] = ()
    diagnostics: tuple[str, ...] = ()  # one line per dropped item


# Function name -> distinct event names in first-seen order.
EmissionMap = dict[str, list[str]]


@dataclass(slots=True, frozen=True)
class GeneratedQuery:
    """A labelled query ready for the query engine."""

    name: str
    description: str
    query_text: str
    chart_types: tuple[str, ...] = field(default=())  # rendering hints only
