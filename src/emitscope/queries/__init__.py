"""Query synthesis against the indexer's per-event tables.

This package provides:
- SQL templates (sql_templates)
- Analytical (chartable) and explorer query menus (generator)
"""

from emitscope.queries.generator import (
    column_for,
    generate_analytical_queries,
    generate_event_queries,
    qualified_table,
)

__all__ = [
    "column_for",
    "generate_analytical_queries",
    "generate_event_queries",
    "qualified_table",
]
