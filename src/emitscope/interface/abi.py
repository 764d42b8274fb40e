import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from emitscope.core.models import EventItem, FunctionItem, InterfaceDescription, Mutability, Parameter
from emitscope.errors import AbiFormatError


class AbiParameter(BaseModel):
    name: str = ""
    type: str
    indexed: bool = False
    internalType: str | None = None
    components: list["AbiParameter"] | None = None

    def canonical_type(self) -> str:
        """ABI type with tuple components expanded, e.g. `(address,uint256)[]`."""
        if not self.type.startswith("tuple") or self.components is None:
            return self.type
        inner = ",".join(c.canonical_type() for c in self.components)
        return f"({inner}){self.type[len('tuple'):]}"


AbiParameter.model_rebuild()


class AbiFunction(BaseModel):
    type: Literal["function"]
    name: str
    inputs: list[AbiParameter] = []
    outputs: list[AbiParameter] = []
    stateMutability: str | None = None
    # pre-0.5 compiler output
    constant: bool | None = None
    payable: bool | None = None


class AbiEvent(BaseModel):
    type: Literal["event"]
    name: str
    inputs: list[AbiParameter] = []
    anonymous: bool = False


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | dict[str, Any] | Path | str


def _unwrap(data: Any, origin: str) -> list[dict[str, Any]]:
    if isinstance(data, dict) and isinstance(data.get("abi"), list):
        # Foundry / Hardhat artifact
        data = data["abi"]
    if not isinstance(data, list):
        raise AbiFormatError(f"Unrecognized ABI format: {origin}")
    if not all(isinstance(entry, dict) for entry in data):
        raise AbiFormatError(f"ABI entries must be objects: {origin}")
    return data


def load_abi(abi: AbiSpec) -> list[dict[str, Any]]:
    """Return the raw ABI entry list from a path, a JSON string or an iterable."""
    if isinstance(abi, Path):
        try:
            return _unwrap(json.loads(abi.read_text()), str(abi))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise AbiFormatError(f"Invalid JSON in {abi}: {e}") from e
    if isinstance(abi, str):
        try:
            return _unwrap(json.loads(abi), "<string>")
        except json.JSONDecodeError as e:
            raise AbiFormatError(f"Invalid ABI JSON: {e}") from e
    if isinstance(abi, dict):
        return _unwrap(abi, "<dict>")
    return _unwrap(list(abi), "<iterable>")


def _to_parameter(param: AbiParameter) -> Parameter:
    return Parameter(type=param.canonical_type(), name=param.name, indexed=param.indexed)


def _resolve_mutability(fn: AbiFunction) -> Mutability | str:
    if fn.stateMutability is not None:
        return Mutability.parse(fn.stateMutability) or fn.stateMutability
    if fn.constant:
        return Mutability.VIEW
    if fn.payable:
        return Mutability.PAYABLE
    return Mutability.NONPAYABLE


def get_function_item(fn: AbiFunction) -> FunctionItem:
    return FunctionItem(
        name=fn.name,
        inputs=tuple(_to_parameter(p) for p in fn.inputs),
        outputs=tuple(_to_parameter(p) for p in fn.outputs),
        mutability=_resolve_mutability(fn),
    )


def get_event_item(event: AbiEvent) -> EventItem:
    return EventItem(
        name=event.name,
        inputs=tuple(_to_parameter(p) for p in event.inputs),
        anonymous=event.anonymous,
    )


def parse_interface(abi: AbiSpec) -> InterfaceDescription:
    """Validate an ABI and keep its function and event entries, in order.

    Constructor, fallback, receive and error entries are skipped.
    """
    items: list[FunctionItem | EventItem] = []
    for idx, entry in enumerate(load_abi(abi)):
        kind = entry.get("type", "function")  # old compilers omit "function"
        try:
            if kind == "function":
                items.append(get_function_item(AbiFunction.model_validate({**entry, "type": kind})))
            elif kind == "event":
                items.append(get_event_item(AbiEvent.model_validate(entry)))
        except ValidationError as e:
            raise AbiFormatError(f"ABI entry #{idx} ({kind}) is malformed: {e}") from e
    return items
