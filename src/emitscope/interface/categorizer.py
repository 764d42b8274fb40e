"""Split an interface description into read functions, write functions and events."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from emitscope.core.models import (
    CategorizedInterface,
    EventItem,
    FunctionItem,
    InterfaceDescription,
    Mutability,
)

logger = logging.getLogger(__name__)


def categorize(interface: InterfaceDescription) -> CategorizedInterface:
    """Partition functions by mutability and collect events.

    Order of declaration is kept inside each bucket. Functions whose
    mutability is not one of pure/view/nonpayable/payable land in no bucket;
    each one is reported in `diagnostics` and logged.
    """
    read: list[FunctionItem] = []
    write: list[FunctionItem] = []
    events: list[EventItem] = []
    diagnostics: list[str] = []

    for item in interface:
        match item:
            case EventItem():
                events.append(item)
            case FunctionItem(mutability=Mutability.PURE | Mutability.VIEW):
                read.append(item)
            case FunctionItem(mutability=Mutability.NONPAYABLE | Mutability.PAYABLE):
                write.append(item)
            case FunctionItem():
                msg = f"function {item.signature} dropped: unrecognized mutability {item.mutability!r}"
                logger.warning(msg)
                diagnostics.append(msg)

    return CategorizedInterface(
        read_functions=tuple(read),
        write_functions=tuple(write),
        events=tuple(events),
        diagnostics=tuple(diagnostics),
    )


def function_names(functions: Iterable[FunctionItem]) -> list[str]:
    return [fn.name for fn in functions]


def event_names(events: Iterable[EventItem]) -> list[str]:
    return [ev.name for ev in events]
