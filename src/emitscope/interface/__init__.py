"""Contract interface handling.

This package provides:
- ABI JSON validation and conversion to interface items (abi)
- Read / write / event categorization (categorizer)
- Call-argument parsing and validation helpers (inputs)
"""

from emitscope.interface.abi import load_abi, parse_interface
from emitscope.interface.categorizer import categorize, event_names, function_names

__all__ = [
    "load_abi",
    "parse_interface",
    "categorize",
    "event_names",
    "function_names",
]
