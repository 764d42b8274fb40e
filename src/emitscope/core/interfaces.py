from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, kw_only=True)
class DeploymentResult:
    """Successful deployment as reported by the compiler/deployer."""

    address: str
    abi: list[dict[str, Any]]
    transaction_hash: str


# ---------------------------------------------------------------------------
# IContractDeployer
# ---------------------------------------------------------------------------

@runtime_checkable
class IContractDeployer(Protocol):
    """
    Opaque compile-and-deploy toolchain.

    Domain expectations:
    - The source text it receives is the same text later handed to
      `correlate`, so emission parsing sees exactly what was deployed.
    - Failures come back as a diagnostic string, not an exception.
    """

    def deploy(self, *, source_text: str, contract_name: str) -> DeploymentResult | str:
        """
        Compile `source_text`, deploy `contract_name` and return its address,
        ABI and transaction hash, or the compiler/deployer diagnostic.
        """
        ...


# ---------------------------------------------------------------------------
# IQueryEngine
# ---------------------------------------------------------------------------

@runtime_checkable
class IQueryEngine(Protocol):
    """
    Opaque indexing/query service.

    Domain expectations:
    - Tables are named with `to_storage_table_name(event.name)` inside the
      dataset, columns with `to_storage_column_name(param.name)`.
    - A table may be missing until its event has fired at least once.
    """

    def query(self, query_text: str, dataset_id: str) -> Iterable[Mapping[str, Any]]:
        """
        Run `query_text` against `dataset_id` and stream back rows.

        Implementations raise whatever their transport raises; callers
        decide how to present "table not found" versus "zero rows".
        """
        ...
