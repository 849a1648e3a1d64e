"""Tests for table schemas: camelCase aliases, strict types, to_fields()."""

import pytest
from pydantic import ValidationError

from routelist.core.domain_types import ImageWithCaption
from routelist.core.table_store import RowStore
from routelist.schemas.table import (
    ColumnCreate, ColumnUpdate, ReorderRequest, RowCreate, RowResponse,
    RowUpdate,
)


def test_row_create_accepts_empty_body():
    fields = RowCreate.model_validate({}).to_fields()
    assert fields["no"] == 0
    assert fields["route"] == ""
    assert fields["images"] == []
    assert fields["latitude"] is None


def test_row_create_reads_camel_case():
    body = RowCreate.model_validate({
        "tngSite": "S1", "qrCode": "payload",
        "images": [{"url": "a.png", "caption": "A"}],
    })
    fields = body.to_fields()
    assert fields["tng_site"] == "S1"
    assert fields["qr_code"] == "payload"
    assert fields["images"] == [ImageWithCaption("a.png", "A")]


@pytest.mark.parametrize("payload", [
    {"no": "5"},
    {"route": 7},
    {"images": "not-a-list"},
    {"images": [{"caption": "missing url"}]},
])
def test_row_create_rejects_wrong_types(payload):
    with pytest.raises(ValidationError):
        RowCreate.model_validate(payload)


def test_row_update_only_supplied_fields():
    assert RowUpdate.model_validate({}).to_fields() == {}
    assert RowUpdate.model_validate({"code": "C"}).to_fields() == {"code": "C"}


def test_row_update_null_clears_coordinates_only():
    fields = RowUpdate.model_validate({
        "latitude": None, "route": None, "images": None,
    }).to_fields()
    assert fields == {"latitude": None}


def test_column_update_drops_nulls():
    fields = ColumnUpdate.model_validate({"name": "N", "options": None}).to_fields()
    assert fields == {"name": "N"}


def test_column_create_defaults():
    fields = ColumnCreate.model_validate({"dataKey": "route"}).to_fields()
    assert fields == {
        "name": "", "data_key": "route", "type": "text",
        "is_editable": "true", "options": [],
    }


def test_reorder_requires_list_of_strings():
    assert ReorderRequest.model_validate({"ids": ["a", "b"]}).ids == ["a", "b"]
    with pytest.raises(ValidationError):
        ReorderRequest.model_validate({"ids": "a"})
    with pytest.raises(ValidationError):
        ReorderRequest.model_validate({"ids": [1, 2]})
    with pytest.raises(ValidationError):
        ReorderRequest.model_validate({})


def test_row_response_serializes_camel_case():
    row = RowStore().create({
        "tng_route": "T", "images": [ImageWithCaption("a.png")],
    })
    data = RowResponse.model_validate(row).model_dump(by_alias=True)
    assert data["tngRoute"] == "T"
    assert data["sortOrder"] == 0
    assert data["qrCode"] == ""
    assert data["images"] == [{"url": "a.png", "caption": ""}]
