from __future__ import annotations

from .core.config import CorrelatorConfig, QueryConfig
from .core.models import (
    CategorizedInterface,
    EmissionMap,
    EventItem,
    FunctionItem,
    GeneratedQuery,
    Mutability,
    Parameter,
)
from .correlation import EmissionStatus, correlate, correlate_interface, describe_emissions
from .errors import AbiFormatError, EmitscopeError, InputValueError
from .interface import categorize, load_abi, parse_interface
from .naming import (
    address_filter,
    dataset_name,
    extract_contract_name,
    to_storage_column_name,
    to_storage_table_name,
)
from .queries import generate_analytical_queries, generate_event_queries

__all__ = [
    "categorize",
    "load_abi",
    "parse_interface",
    "correlate",
    "correlate_interface",
    "describe_emissions",
    "EmissionStatus",
    "generate_analytical_queries",
    "generate_event_queries",
    "to_storage_table_name",
    "to_storage_column_name",
    "address_filter",
    "dataset_name",
    "extract_contract_name",
    "CorrelatorConfig",
    "QueryConfig",
    "CategorizedInterface",
    "EmissionMap",
    "EventItem",
    "FunctionItem",
    "GeneratedQuery",
    "Mutability",
    "Parameter",
    "EmitscopeError",
    "AbiFormatError",
    "InputValueError",
]
