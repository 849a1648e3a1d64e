"""Tests for compute_table_stats: counts plus computation timestamp."""

from datetime import datetime, timezone

from routelist.core.table_stats import compute_table_stats
from routelist.core.table_store import TableStore


def test_empty_store_returns_zero_counts():
    stats = compute_table_stats(TableStore())
    assert stats.total_rows == 0
    assert stats.total_columns == 0


def test_counts_rows_and_columns():
    store = TableStore()
    for _ in range(3):
        store.rows.create()
    store.columns.create({"name": "Route"})
    deleted = store.rows.create()
    store.rows.delete(deleted.id)
    stats = compute_table_stats(store)
    assert stats.total_rows == 3
    assert stats.total_columns == 1


def test_last_updated_is_time_of_computation():
    fixed = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert compute_table_stats(TableStore(), now=fixed).last_updated == fixed


def test_recomputed_on_every_call():
    store = TableStore()
    first = compute_table_stats(store)
    store.rows.create()
    second = compute_table_stats(store)
    assert first.total_rows == 0
    assert second.total_rows == 1
    assert second.last_updated >= first.last_updated
    assert second.last_updated.tzinfo is not None
