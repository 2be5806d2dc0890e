# schemas/listing.py

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

SortField = Literal["name", "date"]
SortOrder = Literal["asc", "desc"]


class ListingItem(BaseModel):
    type: Literal["folder", "document"]
    id: int
    name: str
    created_by: Optional[str] = None
    created_at: datetime
    folder_id: Optional[int] = None
    file_type: Optional[str] = None
    size: Optional[int] = None


class SortSpec(BaseModel):
    """
    Name and date sorting are mutually exclusive.

    Each toggle cycles unsorted -> asc -> desc -> unsorted and clears the
    other field.
    """
    field: Optional[SortField] = None
    order: SortOrder = "asc"

    def toggle(self, field: SortField) -> "SortSpec":
        if self.field != field:
            return SortSpec(field=field, order="asc")
        if self.order == "asc":
            return SortSpec(field=field, order="desc")
        return SortSpec()

    def toggle_name(self) -> "SortSpec":
        return self.toggle("name")

    def toggle_date(self) -> "SortSpec":
        return self.toggle("date")


class Page(BaseModel):
    items: List[ListingItem] = []
    page: int
    page_size: int
    total_items: int
    total_pages: int
