"""Function-to-event correlation.

This package provides:
- Source scanning of function bodies for `emit` statements
- Name-similarity inference used as a fallback
- `correlate`, which runs both and merges them
"""

from emitscope.correlation.correlator import (
    EmissionStatus,
    correlate,
    correlate_interface,
    describe_emissions,
    merge_emissions,
)
from emitscope.correlation.inference import event_stem, function_stem, infer_emissions
from emitscope.correlation.parser import parse_emissions

__all__ = [
    "EmissionStatus",
    "correlate",
    "correlate_interface",
    "describe_emissions",
    "merge_emissions",
    "event_stem",
    "function_stem",
    "infer_emissions",
    "parse_emissions",
]
