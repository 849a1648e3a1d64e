"""Tests for seed_table: default columns and sample rows."""

from routelist.core.seed_data import DEFAULT_COLUMNS, SAMPLE_ROWS, seed_table
from routelist.core.table_store import TableStore


def test_seeds_empty_store():
    store = TableStore()
    assert seed_table(store) is True
    assert len(store.columns) == len(DEFAULT_COLUMNS)
    assert len(store.rows) == len(SAMPLE_ROWS)


def test_default_columns_in_display_order():
    store = TableStore()
    seed_table(store)
    columns = store.columns.list_all()
    assert [c.name for c in columns][:3] == ["No", "Route", "Code"]
    assert [c.sort_order for c in columns] == list(range(len(DEFAULT_COLUMNS)))
    no_column = columns[0]
    assert no_column.type == "number"
    assert no_column.is_editable == "false"
    assert columns[-1].type == "images"


def test_data_keys_use_wire_names():
    store = TableStore()
    seed_table(store)
    keys = {c.data_key for c in store.columns.list_all()}
    assert {"tngSite", "tngRoute", "images", "no"} <= keys


def test_sample_rows_keep_counter_consistent():
    store = TableStore()
    seed_table(store)
    row = store.rows.create({"route": "Route C"})
    assert row.sort_order == len(SAMPLE_ROWS)
    assert store.rows.list_all()[0].route == "Route A"


def test_seeding_populated_store_is_noop():
    store = TableStore()
    store.rows.create({"route": "mine"})
    assert seed_table(store) is False
    assert len(store.rows) == 1
    assert len(store.columns) == 0
