"""Function -> emitted-event correlation.

Both passes always run:
- the source scan (`parse_emissions`), authoritative where it finds emits;
- name-similarity inference (`infer_emissions`) over the mutating functions.

The result starts from the inference map and every non-empty scan entry
overwrites it. A function missing from the result is *unknown*, never
"emits nothing".
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from emitscope.core.config import CorrelatorConfig
from emitscope.core.models import CategorizedInterface, EmissionMap
from emitscope.correlation.inference import infer_emissions
from emitscope.correlation.parser import parse_emissions
from emitscope.naming import to_storage_table_name

logger = logging.getLogger(__name__)


class EmissionStatus(str, Enum):
    MAPPED = "mapped"
    UNKNOWN = "unknown"


def merge_emissions(inferred: EmissionMap, parsed: EmissionMap) -> EmissionMap:
    merged: EmissionMap = {fn: list(evs) for fn, evs in inferred.items()}
    for fn, evs in parsed.items():
        if evs:
            merged[fn] = list(evs)
    return merged


def _tables(mapping: EmissionMap) -> dict[str, list[str]]:
    return {fn: [to_storage_table_name(ev) for ev in evs] for fn, evs in mapping.items()}


def correlate(
    source_text: str,
    mutating_function_names: Sequence[str],
    event_names: Sequence[str],
    config: CorrelatorConfig | None = None,
) -> EmissionMap:
    """Best-effort map from function name to the events it may emit."""
    parsed = parse_emissions(source_text)
    inferred = infer_emissions(mutating_function_names, event_names, config)
    merged = merge_emissions(inferred, parsed)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("functions=%s events=%s", list(mutating_function_names), list(event_names))
        logger.debug("parsed=%s", parsed)
        logger.debug("inferred=%s", inferred)
        logger.debug("merged (tables)=%s", _tables(merged))

    unresolved = [fn for fn in mutating_function_names if fn not in merged]
    if unresolved:
        logger.info("no emitted events found for: %s", ", ".join(unresolved))
    return merged


def correlate_interface(
    source_text: str,
    categorized: CategorizedInterface,
    config: CorrelatorConfig | None = None,
) -> EmissionMap:
    return correlate(
        source_text,
        [fn.name for fn in categorized.write_functions],
        [ev.name for ev in categorized.events],
        config,
    )


def describe_emissions(mapping: EmissionMap, names: Sequence[str]) -> dict[str, EmissionStatus]:
    """Per function, whether events are known or the mapping is unknown."""
    return {
        fn: EmissionStatus.MAPPED if mapping.get(fn) else EmissionStatus.UNKNOWN
        for fn in names
    }
