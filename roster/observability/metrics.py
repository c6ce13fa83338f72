"""Prometheus metrics for Roster."""

from prometheus_client import Counter, Histogram

STORE_OPERATIONS = Counter(
    "roster_store_operations_total",
    "Student store operations by outcome",
    labelnames=["operation", "outcome"],
)

IMPORT_ROWS = Counter(
    "roster_import_rows_total",
    "Rows processed by the bulk importer",
    labelnames=["outcome"],
)

IMPORT_RUNS = Counter(
    "roster_import_runs_total",
    "Bulk import runs by result",
    labelnames=["result"],
)

IMPORT_DURATION = Histogram(
    "roster_import_duration_seconds",
    "Wall-clock duration of a bulk import run",
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)
