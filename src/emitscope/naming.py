"""Identifier conventions shared with the indexing engine.

The indexer materializes each event as a snake_case table inside a dataset
and each event parameter as a snake_case column. Addresses are stored as
20-byte binaries, so filters compare against `decode('<hex>', 'hex')`.
"""

from __future__ import annotations

import re
import time

from eth_utils import remove_0x_prefix

_UPPER = re.compile(r"([A-Z])")
_CONTRACT = re.compile(r"\bcontract\s+([A-Z][a-zA-Z0-9_]*)\s*(?:is\s+[^{]+)?\{")


def _snake(name: str) -> str:
    return _UPPER.sub(r"_\1", name).lower()


def to_storage_table_name(event_name: str) -> str:
    """`ValueReturned` -> `value_returned`."""
    out = _snake(event_name)
    if out.startswith("_") and event_name[:1].isupper():
        out = out[1:]
    return out


def to_storage_column_name(param_name: str) -> str:
    """`newValue` -> `new_value`. A leading capital keeps its underscore."""
    return _snake(param_name)


def format_address_for_query(address: str) -> str:
    """Lowercase hex without the `0x` prefix, as the engine's `decode` expects."""
    return remove_0x_prefix(address.lower())


def address_filter(address: str | None, column: str = "address") -> str:
    """`WHERE <column> = decode('<hex>', 'hex')`, or "" without an address."""
    if not address:
        return ""
    return f"WHERE {column} = decode('{format_address_for_query(address)}', 'hex')"


def extract_contract_name(source_text: str) -> str | None:
    """Name of the first `contract Name [is ...] {` declaration, if any."""
    m = _CONTRACT.search(source_text)
    return m.group(1) if m else None


def dataset_name(
    contract_name: str,
    timestamp: int | None = None,
    *,
    namespace: str = "eth_global",
    version: str = "dev",
) -> str:
    """`MyToken` -> `eth_global/mytoken_1700000000000@dev` (timestamp in ms)."""
    ts = timestamp if timestamp is not None else int(time.time() * 1000)
    return f"{namespace}/{contract_name.lower()}_{ts}@{version}"
