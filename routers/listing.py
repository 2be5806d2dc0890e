# routers/listing.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from schemas.listing import Page, SortField, SortOrder, SortSpec
from services.document import DocumentService
from services.folder import FolderService
from services.listing import PAGE_SIZE, project
from utils.deps import get_document_service, get_folder_service, parse_id

router = APIRouter(prefix="/api/listing", tags=["Listing"])


@router.get(
    "",
    response_model=Page,
    summary="Combined folder and document view with search, sort and pagination"
)
def get_listing(
    folder_id: Optional[str] = Query(default=None, description="Omit for the root view"),
    query: Optional[str] = Query(default=None, description="Searches all folders and documents"),
    sort: Optional[SortField] = Query(default=None),
    order: SortOrder = Query(default="asc"),
    page: int = Query(default=1),
    page_size: int = Query(default=PAGE_SIZE, le=100),
    folders: FolderService = Depends(get_folder_service),
    documents: DocumentService = Depends(get_document_service),
):
    scope = None
    if folder_id:
        scope = parse_id(folder_id, "folder")
        # same 404 as the folder's document list
        folders.get_folder(scope)

    return project(
        folders.list_folders(),
        documents.list_documents(),
        scope=scope,
        search_query=query,
        sort=SortSpec(field=sort, order=order),
        page=page,
        page_size=page_size,
    )
