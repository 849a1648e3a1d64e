"""Table Routes: CRUD and reorder for rows and columns, plus stats.

Invariants:
    - Bodies validated by Pydantic before the store is touched
    - Store absence (None/False) becomes ResourceNotFoundError (404)
    - Responses serialized with camelCase aliases
    - Row and column endpoints mirror each other path for path
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from routelist.api.dependencies import get_store
from routelist.core.errors import ResourceNotFoundError
from routelist.core.table_stats import compute_table_stats
from routelist.core.table_store import TableStore
from routelist.schemas.table import (
    ColumnCreate, ColumnResponse, ColumnUpdate,
    ReorderRequest, ReorderResponse,
    RowCreate, RowResponse, RowUpdate,
    TableStatsResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["table"])


# --- Rows ---------------------------------------------------------------------

@router.get("/rows", response_model=list[RowResponse])
async def list_rows(store: TableStore = Depends(get_store)):
    """All rows in display order."""
    return [RowResponse.model_validate(r) for r in store.rows.list_all()]


@router.post("/rows/reorder", response_model=ReorderResponse)
async def reorder_rows(
    body: ReorderRequest, store: TableStore = Depends(get_store),
):
    store.rows.reorder(body.ids)
    logger.info("Rows reordered", extra={"count": len(body.ids)})
    return ReorderResponse()


@router.get("/rows/{row_id}", response_model=RowResponse)
async def get_row(row_id: str, store: TableStore = Depends(get_store)):
    row = store.rows.get(row_id)
    if row is None:
        raise ResourceNotFoundError("Row", row_id)
    return RowResponse.model_validate(row)


@router.post(
    "/rows", response_model=RowResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_row(
    body: RowCreate | None = None, store: TableStore = Depends(get_store),
):
    """Create a row; a missing body means all defaults."""
    if body is None:
        body = RowCreate()
    row = store.rows.create(body.to_fields())
    logger.info("Row created", extra={"entity_id": row.id})
    return RowResponse.model_validate(row)


@router.put("/rows/{row_id}", response_model=RowResponse)
async def update_row(
    row_id: str, body: RowUpdate, store: TableStore = Depends(get_store),
):
    """Partial update: only fields present in the body change."""
    row = store.rows.update(row_id, body.to_fields())
    if row is None:
        raise ResourceNotFoundError("Row", row_id)
    return RowResponse.model_validate(row)


@router.delete("/rows/{row_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_row(row_id: str, store: TableStore = Depends(get_store)):
    if not store.rows.delete(row_id):
        raise ResourceNotFoundError("Row", row_id)
    logger.info("Row deleted", extra={"entity_id": row_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Columns ------------------------------------------------------------------

@router.get("/columns", response_model=list[ColumnResponse])
async def list_columns(store: TableStore = Depends(get_store)):
    """All columns in display order."""
    return [
        ColumnResponse.model_validate(c) for c in store.columns.list_all()
    ]


@router.post("/columns/reorder", response_model=ReorderResponse)
async def reorder_columns(
    body: ReorderRequest, store: TableStore = Depends(get_store),
):
    store.columns.reorder(body.ids)
    logger.info("Columns reordered", extra={"count": len(body.ids)})
    return ReorderResponse()


@router.get("/columns/{column_id}", response_model=ColumnResponse)
async def get_column(column_id: str, store: TableStore = Depends(get_store)):
    column = store.columns.get(column_id)
    if column is None:
        raise ResourceNotFoundError("Column", column_id)
    return ColumnResponse.model_validate(column)


@router.post(
    "/columns", response_model=ColumnResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_column(
    body: ColumnCreate | None = None, store: TableStore = Depends(get_store),
):
    if body is None:
        body = ColumnCreate()
    column = store.columns.create(body.to_fields())
    logger.info("Column created", extra={"entity_id": column.id})
    return ColumnResponse.model_validate(column)


@router.put("/columns/{column_id}", response_model=ColumnResponse)
async def update_column(
    column_id: str, body: ColumnUpdate,
    store: TableStore = Depends(get_store),
):
    column = store.columns.update(column_id, body.to_fields())
    if column is None:
        raise ResourceNotFoundError("Column", column_id)
    return ColumnResponse.model_validate(column)


@router.delete(
    "/columns/{column_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_column(
    column_id: str, store: TableStore = Depends(get_store),
):
    if not store.columns.delete(column_id):
        raise ResourceNotFoundError("Column", column_id)
    logger.info("Column deleted", extra={"entity_id": column_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Stats --------------------------------------------------------------------

@router.get("/stats", response_model=TableStatsResponse)
async def table_stats(store: TableStore = Depends(get_store)):
    """Row/column counts, computed fresh on every call."""
    return TableStatsResponse.model_validate(compute_table_stats(store))
