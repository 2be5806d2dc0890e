# routers/document.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from schemas.document import DocumentCreate, DocumentCreated, DocumentResponse
from services.document import DocumentService
from utils.deps import get_document_service, parse_id

router = APIRouter(prefix="/api/documents", tags=["Documents"])


# must be registered before "/{document_id}"
@router.get(
    "/search",
    response_model=List[DocumentResponse],
    summary="Search documents by name (case-insensitive, partial match)"
)
def search_documents(
    query: Optional[str] = Query(default=None, description="At least 2 characters"),
    service: DocumentService = Depends(get_document_service),
):
    return service.search_documents(query or "")


@router.get(
    "",
    response_model=List[DocumentResponse],
    summary="List all documents, or the documents of one folder"
)
def list_documents(
    folder_id: Optional[str] = Query(default=None),
    service: DocumentService = Depends(get_document_service),
):
    if folder_id is None or folder_id == "":
        return service.list_documents()
    return service.list_documents(parse_id(folder_id, "folder"))


@router.post(
    "",
    response_model=DocumentCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a document record"
)
def create_document(req: DocumentCreate, service: DocumentService = Depends(get_document_service)):
    result = service.create_document(req.model_dump())
    return DocumentCreated(id=result["id"], name=result["name"], message="Document created successfully")


@router.get(
    "/{document_id}",
    response_model=DocumentResponse,
    summary="Get one document"
)
def get_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    return service.get_document(parse_id(document_id, "document"))


@router.delete(
    "/{document_id}",
    summary="Delete a document"
)
def delete_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    service.delete_document(parse_id(document_id, "document"))
    return {"message": "Document deleted successfully"}
