"""
sql_templates.py
----------------

Query shapes used by the generators in generator.py.

Placeholders:
    {table}   fully qualified table, e.g. "eth_global/counter_1@dev".incremented
    {where}   address predicate line ending in a newline, or ""
    {block}   block-number column
    {ts}      block-timestamp column
    {limit}   row cap
"""

# =====================================================================
# ANALYTICAL (CHARTABLE) QUERIES
# =====================================================================

TIME_SERIES_QUERY = """SELECT {block}, {column}
FROM {table}
{where}ORDER BY {block} ASC
LIMIT {limit}"""

COUNT_OVER_TIME_QUERY = """SELECT {block}, COUNT(*) AS event_count
FROM {table}
{where}GROUP BY {block}
ORDER BY {block} ASC
LIMIT {limit}"""

# One select per event, joined with UNION_ALL.
EVENT_COUNT_SELECT = """SELECT '{label}' AS event_type, COUNT(*) AS count
FROM {table}
{where}"""

UNION_ALL = "\nUNION ALL\n"


# =====================================================================
# EXPLORER QUERIES
# =====================================================================

RECENT_EVENTS_QUERY = """SELECT {columns}
FROM {table}
{where}ORDER BY {block} DESC
LIMIT {limit}"""

GROUPED_COUNT_QUERY = """SELECT {column}, COUNT(*) AS count
FROM {table}
{where}GROUP BY {column}
ORDER BY count DESC
LIMIT {limit}"""

EVENT_TIMELINE_QUERY = """SELECT {block}, {ts}, COUNT(*) AS event_count
FROM {table}
{where}GROUP BY {block}, {ts}
ORDER BY {block} DESC
LIMIT {limit}"""
