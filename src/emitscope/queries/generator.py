"""Query menus synthesized from a contract's events.

Two menus are offered:

- `generate_analytical_queries`: one chartable series per event (a numeric
  parameter over blocks, or the event count per block when the event has no
  numeric parameter) plus an event-type comparison when there are several
  events.
- `generate_event_queries`: explorer queries (recent rows, grouped counts,
  event-type comparison and a timeline).

Tables and columns are named with the indexer's conventions from
`emitscope.naming`. Nothing here executes a query.
"""

from __future__ import annotations

from collections.abc import Sequence

from emitscope.core.config import QueryConfig
from emitscope.core.models import EventItem, GeneratedQuery, Parameter
from emitscope.naming import address_filter, to_storage_column_name, to_storage_table_name
from emitscope.queries import sql_templates


def qualified_table(dataset_id: str, event_name: str) -> str:
    """`"<dataset>".<snake_case event>`"""
    return f'"{dataset_id}".{to_storage_table_name(event_name)}'


def column_for(param: Parameter, index: int) -> str:
    return to_storage_column_name(param.display_name(index))


def _where(contract_address: str | None, config: QueryConfig) -> str:
    clause = address_filter(contract_address, column=config.address_column)
    return f"{clause}\n" if clause else ""


def _counts_by_type(
    events: Sequence[EventItem],
    dataset_id: str,
    where: str,
) -> str:
    selects = [
        sql_templates.EVENT_COUNT_SELECT.format(
            label=event.name,
            table=qualified_table(dataset_id, event.name),
            where=where,
        ).rstrip()
        for event in events
    ]
    return sql_templates.UNION_ALL.join(selects)


def generate_analytical_queries(
    events: Sequence[EventItem],
    dataset_id: str,
    contract_address: str | None = None,
    config: QueryConfig | None = None,
) -> list[GeneratedQuery]:
    """Chartable queries, in event declaration order, comparison last.

    Series are capped at `config.series_row_cap` rows (50 by default).
    """
    config = config or QueryConfig()
    where = _where(contract_address, config)
    queries: list[GeneratedQuery] = []

    for event in events:
        table = qualified_table(dataset_id, event.name)
        numeric = event.numeric_inputs()
        if numeric:
            index, param = numeric[0]
            column = column_for(param, index)
            queries.append(
                GeneratedQuery(
                    name=f"{event.name} over time",
                    description=f"{event.name}.{param.display_name(index)} by block",
                    query_text=sql_templates.TIME_SERIES_QUERY.format(
                        block=config.block_column,
                        column=column,
                        table=table,
                        where=where,
                        limit=config.series_row_cap,
                    ),
                    chart_types=("line",),
                )
            )
        else:
            queries.append(
                GeneratedQuery(
                    name=f"{event.name} count over time",
                    description=f"{event.name} events per block",
                    query_text=sql_templates.COUNT_OVER_TIME_QUERY.format(
                        block=config.block_column,
                        table=table,
                        where=where,
                        limit=config.series_row_cap,
                    ),
                    chart_types=("line",),
                )
            )

    if len(events) > 1:
        queries.append(
            GeneratedQuery(
                name="Event counts by type",
                description="Compare event frequencies",
                query_text=_counts_by_type(events, dataset_id, where),
                chart_types=("bar", "pie"),
            )
        )

    return queries


def generate_event_queries(
    events: Sequence[EventItem],
    dataset_id: str,
    contract_address: str | None = None,
    config: QueryConfig | None = None,
) -> list[GeneratedQuery]:
    """Explorer queries: recent rows and grouped counts per event, then summaries."""
    config = config or QueryConfig()
    if not events:
        return []

    where = _where(contract_address, config)
    queries: list[GeneratedQuery] = []

    for event in events:
        table = qualified_table(dataset_id, event.name)
        columns = [column_for(p, i) for i, p in enumerate(event.inputs)]

        queries.append(
            GeneratedQuery(
                name=f"Recent {event.name} events",
                description=f"Get the most recent {event.name} events from the contract",
                query_text=sql_templates.RECENT_EVENTS_QUERY.format(
                    columns=", ".join([config.block_column, config.timestamp_column, *columns]),
                    table=table,
                    where=where,
                    block=config.block_column,
                    limit=config.recent_row_cap,
                ),
            )
        )

        if columns:
            queries.append(
                GeneratedQuery(
                    name=f"{event.name} by {columns[0]}",
                    description=f"Group {event.name} events by {columns[0]}",
                    query_text=sql_templates.GROUPED_COUNT_QUERY.format(
                        column=columns[0],
                        table=table,
                        where=where,
                        limit=config.recent_row_cap,
                    ),
                )
            )

    if len(events) > 1:
        queries.append(
            GeneratedQuery(
                name="Event counts by type",
                description="Summary of all event types emitted by this contract",
                query_text=_counts_by_type(events, dataset_id, where),
                chart_types=("bar", "pie"),
            )
        )

    first = events[0]
    queries.append(
        GeneratedQuery(
            name="Event timeline",
            description=f"{first.name} events over time with timestamps",
            query_text=sql_templates.EVENT_TIMELINE_QUERY.format(
                block=config.block_column,
                ts=config.timestamp_column,
                table=qualified_table(dataset_id, first.name),
                where=where,
                limit=config.timeline_row_cap,
            ),
        )
    )

    return queries
