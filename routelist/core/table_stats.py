"""Table Stats: derived read-only summary of the store.

Invariants:
    - Recomputed on every call, never cached
    - last_updated is the time of computation, not of the last mutation
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from routelist.core.table_store import TableStore


@dataclass(frozen=True)
class TableStats:
    total_rows: int
    total_columns: int
    last_updated: datetime


def compute_table_stats(
    store: TableStore, now: datetime | None = None,
) -> TableStats:
    """Count rows and columns. Pure apart from reading the clock."""
    return TableStats(
        total_rows=len(store.rows),
        total_columns=len(store.columns),
        last_updated=now or datetime.now(timezone.utc),
    )
