"""Core data models, configuration and collaborator interfaces.

This package provides:
- Value objects (Parameter, FunctionItem, EventItem, GeneratedQuery, ...)
- Configuration classes (CorrelatorConfig, QueryConfig)
- Protocols for the external deployer and query engine
"""

from emitscope.core.config import CorrelatorConfig, QueryConfig
from emitscope.core.interfaces import DeploymentResult, IContractDeployer, IQueryEngine
from emitscope.core.models import (
    CategorizedInterface,
    EmissionMap,
    EventItem,
    FunctionItem,
    GeneratedQuery,
    InterfaceDescription,
    Mutability,
    Parameter,
)

__all__ = [
    "CorrelatorConfig",
    "QueryConfig",
    "DeploymentResult",
    "IContractDeployer",
    "IQueryEngine",
    "CategorizedInterface",
    "EmissionMap",
    "EventItem",
    "FunctionItem",
    "GeneratedQuery",
    "InterfaceDescription",
    "Mutability",
    "Parameter",
]
