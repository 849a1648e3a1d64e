"""Seed Data: default columns and sample rows for a fresh table.

Invariants:
    - Seeding goes through the store's create(), so sort_order counters stay
      consistent with later creates
    - Seeding an already populated store is a no-op
"""

import logging

from routelist.core.domain_types import ColumnType
from routelist.core.table_store import TableStore

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS: list[dict] = [
    {"name": "No", "data_key": "no", "type": ColumnType.NUMBER.value, "is_editable": "false"},
    {"name": "Route", "data_key": "route"},
    {"name": "Code", "data_key": "code"},
    {"name": "Location", "data_key": "location"},
    {"name": "Trip", "data_key": "trip"},
    {"name": "Info", "data_key": "info"},
    {"name": "TNG Site", "data_key": "tngSite"},
    {"name": "TNG Route", "data_key": "tngRoute"},
    {"name": "Images", "data_key": "images", "type": ColumnType.IMAGES.value},
]

SAMPLE_ROWS: list[dict] = [
    {
        "no": 1, "route": "Route A", "code": "RT001", "location": "Downtown",
        "trip": "Morning", "info": "Main route", "tng_site": "Site 1",
        "tng_route": "TNG-001", "latitude": "40.7128", "longitude": "-74.0060",
    },
    {
        "no": 2, "route": "Route B", "code": "RT002", "location": "Uptown",
        "trip": "Evening", "info": "Secondary route", "tng_site": "Site 2",
        "tng_route": "TNG-002", "latitude": "40.7589", "longitude": "-73.9851",
    },
]


def seed_table(store: TableStore) -> bool:
    """Populate an empty store. Returns False if anything was already there."""
    if len(store.rows) or len(store.columns):
        logger.info("Store not empty, skipping seed data")
        return False
    for column in DEFAULT_COLUMNS:
        store.columns.create(column)
    for row in SAMPLE_ROWS:
        store.rows.create(row)
    logger.info(
        "Seeded table",
        extra={"rows": len(SAMPLE_ROWS), "columns": len(DEFAULT_COLUMNS)},
    )
    return True
