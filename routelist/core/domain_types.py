"""Domain Types: the Row and Column entities held by the table store.

Invariants:
    - id and sort_order are assigned by the store, never by callers
    - Every semantic field has a zero value, so a Row/Column can be built from
      any subset of its fields
    - Column.type is a free-form tag; ColumnType lists the values the UI knows
    - List-valued fields (images, options) are tuples: entities are fully immutable

Design Decisions:
    - Plain dataclasses, not Pydantic: core stays free of API concerns and
      dataclasses.replace() gives copy-on-write updates
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


RowId = NewType("RowId", str)
ColumnId = NewType("ColumnId", str)


class ColumnType(str, Enum):
    """Column renderer tags understood by the client."""
    NUMBER = "number"
    TEXT = "text"
    IMAGES = "images"
    SELECT = "select"


@dataclass(frozen=True)
class ImageWithCaption:
    url: str
    caption: str = ""


@dataclass(frozen=True)
class Row:
    """One record of the route list."""

    id: RowId
    sort_order: int
    no: int = 0
    route: str = ""
    code: str = ""
    location: str = ""
    trip: str = ""
    info: str = ""
    tng_site: str = ""
    tng_route: str = ""
    # Decimal text as entered, e.g. "40.7128"
    latitude: str | None = None
    longitude: str | None = None
    images: tuple[ImageWithCaption, ...] = ()
    qr_code: str = ""


@dataclass(frozen=True)
class Column:
    """Display/edit descriptor for one Row field."""

    id: ColumnId
    sort_order: int
    name: str = ""
    data_key: str = ""
    type: str = ColumnType.TEXT.value
    is_editable: str = "true"
    options: tuple[str, ...] = ()
