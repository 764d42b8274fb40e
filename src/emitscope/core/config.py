from __future__ import annotations

from dataclasses import dataclass

# Leading verbs recognized when stemming function names.
DEFAULT_VERBS: tuple[str, ...] = (
    "increment",
    "decrement",
    "set",
    "get",
    "add",
    "remove",
    "update",
    "delete",
    "create",
    "mint",
    "burn",
    "transfer",
    "approve",
    "withdraw",
    "deposit",
    "ret",
    "return",
    "fetch",
    "retrieve",
    "call",
    "execute",
    "send",
    "receive",
    "claim",
    "stake",
    "unstake",
    "swap",
    "buy",
    "sell",
    "pay",
    "refund",
)


@dataclass(frozen=True)
class CorrelatorConfig:
    """Tuning knobs for name-similarity inference."""

    verbs: tuple[str, ...] = DEFAULT_VERBS
    overlap_ratio: float = 0.6  # share of characters two short stems must have in common
    short_stem_max_len: int = 5  # both stems at most this long to use the overlap rule
    min_event_stem_len: int = 3  # event stem length needed for the containment rule


@dataclass(frozen=True)
class QueryConfig:
    """Row caps and column names used when synthesizing queries."""

    series_row_cap: int = 50
    recent_row_cap: int = 10
    timeline_row_cap: int = 20
    block_column: str = "block_num"
    timestamp_column: str = "timestamp"
    address_column: str = "address"
