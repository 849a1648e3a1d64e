"""Table Schemas: Pydantic models for rows, columns, reorder and stats.

Invariants:
    - Create models default every field, so {} is a valid create body
    - Update models mark every field optional; only fields present in the
      body reach the store (exclude_unset)
    - JSON types are checked strictly: "5" is not a number, 5 is not a string
    - to_fields() returns snake_case keyword fields ready for the store, with
      images converted to domain ImageWithCaption values

Design Decisions:
    - Explicit null in an update means "not supplied", except for latitude and
      longitude where null clears the coordinate
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from routelist.core.domain_types import ColumnType, ImageWithCaption

NULLABLE_ROW_FIELDS = frozenset({"latitude", "longitude"})


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class ImageSchema(CamelModel):
    url: StrictStr
    caption: StrictStr = ""


# --- Rows ---------------------------------------------------------------------

class RowCreate(CamelModel):
    """Row creation: every field optional, defaulted to its zero value."""
    no: StrictInt = 0
    route: StrictStr = ""
    code: StrictStr = ""
    location: StrictStr = ""
    trip: StrictStr = ""
    info: StrictStr = ""
    tng_site: StrictStr = ""
    tng_route: StrictStr = ""
    latitude: StrictStr | None = None
    longitude: StrictStr | None = None
    images: list[ImageSchema] = Field(default_factory=list)
    qr_code: StrictStr = ""

    def to_fields(self) -> dict[str, Any]:
        return _to_domain_fields(self.model_dump())


class RowUpdate(CamelModel):
    """Partial row update: any subset of the mutable fields."""
    no: StrictInt | None = None
    route: StrictStr | None = None
    code: StrictStr | None = None
    location: StrictStr | None = None
    trip: StrictStr | None = None
    info: StrictStr | None = None
    tng_site: StrictStr | None = None
    tng_route: StrictStr | None = None
    latitude: StrictStr | None = None
    longitude: StrictStr | None = None
    images: list[ImageSchema] | None = None
    qr_code: StrictStr | None = None

    def to_fields(self) -> dict[str, Any]:
        supplied = self.model_dump(exclude_unset=True)
        return _to_domain_fields({
            k: v for k, v in supplied.items()
            if v is not None or k in NULLABLE_ROW_FIELDS
        })


class RowResponse(CamelModel):
    id: str
    sort_order: int
    no: int
    route: str
    code: str
    location: str
    trip: str
    info: str
    tng_site: str
    tng_route: str
    latitude: str | None
    longitude: str | None
    images: list[ImageSchema]
    qr_code: str


# --- Columns ------------------------------------------------------------------

class ColumnCreate(CamelModel):
    """Column creation: type defaults to text, editable by default."""
    name: StrictStr = ""
    data_key: StrictStr = ""
    type: StrictStr = ColumnType.TEXT.value
    is_editable: StrictStr = "true"
    options: list[StrictStr] = Field(default_factory=list)

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class ColumnUpdate(CamelModel):
    name: StrictStr | None = None
    data_key: StrictStr | None = None
    type: StrictStr | None = None
    is_editable: StrictStr | None = None
    options: list[StrictStr] | None = None

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ColumnResponse(CamelModel):
    id: str
    sort_order: int
    name: str
    data_key: str
    type: str
    is_editable: str
    options: list[str]


# --- Shared -------------------------------------------------------------------

class ReorderRequest(CamelModel):
    """Ordered ids; unknown ids are ignored by the store."""
    ids: list[StrictStr]


class ReorderResponse(CamelModel):
    success: bool = True


class TableStatsResponse(CamelModel):
    total_rows: int
    total_columns: int
    last_updated: datetime


def _to_domain_fields(fields: dict[str, Any]) -> dict[str, Any]:
    if fields.get("images") is not None:
        fields["images"] = [ImageWithCaption(**img) for img in fields["images"]]
    return fields
