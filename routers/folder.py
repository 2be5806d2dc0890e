# routers/folder.py

from typing import List

from fastapi import APIRouter, Depends, status

from schemas.folder import FolderCreate, FolderCreated, FolderDocumentCount, FolderResponse
from services.document import DocumentService
from services.folder import FolderService
from utils.deps import get_document_service, get_folder_service, parse_id

router = APIRouter(prefix="/api/folders", tags=["Folders"])


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List all folders, newest first"
)
def list_folders(service: FolderService = Depends(get_folder_service)):
    return service.list_folders()


@router.post(
    "",
    response_model=FolderCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a folder"
)
def create_folder(req: FolderCreate, service: FolderService = Depends(get_folder_service)):
    """
    • req.name (string, required, 1-255 characters after trimming)
    • req.created_by (string, optional)
    """
    result = service.create_folder(req.name, req.created_by)
    return FolderCreated(id=result["id"], name=result["name"], message="Folder created successfully")


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    summary="Get one folder"
)
def get_folder(folder_id: str, service: FolderService = Depends(get_folder_service)):
    return service.get_folder(parse_id(folder_id, "folder"))


@router.get(
    "/{folder_id}/documents/count",
    response_model=FolderDocumentCount,
    summary="Count the documents in a folder"
)
def count_documents(folder_id: str, service: DocumentService = Depends(get_document_service)):
    fid = parse_id(folder_id, "folder")
    return FolderDocumentCount(folder_id=fid, count=service.count_documents_in_folder(fid))


@router.delete(
    "/{folder_id}",
    summary="Delete a folder and every document in it"
)
def delete_folder(folder_id: str, service: FolderService = Depends(get_folder_service)):
    service.delete_folder(parse_id(folder_id, "folder"))
    return {"message": "Folder deleted successfully"}
