# services/listing.py
"""
Combined folder + document view.

``project`` is a pure function over already-fetched folders and documents:
it picks the visible set for the current scope, applies the global search,
sorts, and cuts one page. ``ListingState`` keeps the page index in step with
the scope, search query, and mutations the way the browser view does.
"""
import math
from typing import Iterable, List, Optional

from models.folder import ROOT_FOLDER_ID
from schemas.listing import ListingItem, Page, SortSpec
from services.exceptions import ValidationError

PAGE_SIZE = 10


def folder_item(folder) -> ListingItem:
    return ListingItem(
        type="folder",
        id=folder.id,
        name=folder.name,
        created_by=folder.created_by,
        created_at=folder.created_at,
    )


def document_item(document) -> ListingItem:
    return ListingItem(
        type="document",
        id=document.id,
        name=document.name,
        created_by=document.created_by,
        created_at=document.created_at,
        folder_id=document.folder_id,
        file_type=document.file_type,
        size=document.size,
    )


def _matches(item, query: str) -> bool:
    if query in item.name.lower():
        return True
    return bool(item.created_by) and query in item.created_by.lower()


def visible_items(folders: Iterable, documents: Iterable, scope: Optional[int] = None) -> List[ListingItem]:
    if scope is None:
        return (
            [folder_item(f) for f in folders if f.id != ROOT_FOLDER_ID]
            + [document_item(d) for d in documents if d.folder_id == ROOT_FOLDER_ID]
        )
    return [document_item(d) for d in documents if d.folder_id == scope]


def search_items(folders: Iterable, documents: Iterable, query: str) -> List[ListingItem]:
    """Match every non-Root folder and every document, ignoring scope."""
    needle = query.strip().lower()
    return (
        [folder_item(f) for f in folders if f.id != ROOT_FOLDER_ID and _matches(f, needle)]
        + [document_item(d) for d in documents if _matches(d, needle)]
    )


def sort_items(items: List[ListingItem], sort: Optional[SortSpec]) -> List[ListingItem]:
    if sort is None or sort.field is None:
        return list(items)
    reverse = sort.order == "desc"
    if sort.field == "name":
        return sorted(items, key=lambda item: item.name.lower(), reverse=reverse)
    return sorted(items, key=lambda item: item.created_at, reverse=reverse)


def paginate(items: List[ListingItem], page: int = 1, page_size: int = PAGE_SIZE) -> Page:
    if page < 1:
        raise ValidationError("Page must be at least 1")
    if page_size < 1:
        raise ValidationError("Page size must be at least 1")
    start = (page - 1) * page_size
    return Page(
        items=items[start:start + page_size],
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=math.ceil(len(items) / page_size),
    )


def project(
    folders: Iterable,
    documents: Iterable,
    scope: Optional[int] = None,
    search_query: Optional[str] = None,
    sort: Optional[SortSpec] = None,
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> Page:
    folders = list(folders)
    documents = list(documents)
    if search_query and search_query.strip():
        items = search_items(folders, documents, search_query)
    else:
        items = visible_items(folders, documents, scope)
    return paginate(sort_items(items, sort), page, page_size)


class ListingState:
    """View state for the combined listing; resets to page 1 whenever the visible set changes."""

    def __init__(self, page_size: int = PAGE_SIZE):
        self.scope: Optional[int] = None
        self.search_query = ""
        self.sort = SortSpec()
        self.page = 1
        self.page_size = page_size

    def open_folder(self, folder_id: int) -> None:
        self.scope = folder_id
        self.page = 1

    def back_to_root(self) -> None:
        self.scope = None
        self.page = 1

    def set_search(self, query: str) -> None:
        self.search_query = query
        self.page = 1

    def toggle_name_sort(self) -> None:
        self.sort = self.sort.toggle_name()

    def toggle_date_sort(self) -> None:
        self.sort = self.sort.toggle_date()

    def go_to_page(self, page: int) -> None:
        self.page = page

    def after_mutation(self, deleted_folder_id: Optional[int] = None) -> None:
        # leaving a folder that no longer exists
        if deleted_folder_id is not None and deleted_folder_id == self.scope:
            self.scope = None
        self.page = 1

    def render(self, folders: Iterable, documents: Iterable) -> Page:
        return project(
            folders,
            documents,
            scope=self.scope,
            search_query=self.search_query,
            sort=self.sort,
            page=self.page,
            page_size=self.page_size,
        )
