# utils/deps.py

from fastapi import Depends
from sqlalchemy.orm import Session

from dao.document import DocumentDAO
from dao.folder import FolderDAO
from db import get_db
from models.base import id_in_range
from services.document import DocumentService
from services.exceptions import ValidationError
from services.folder import FolderService


def get_folder_service(db: Session = Depends(get_db)) -> FolderService:
    return FolderService(FolderDAO(db))


def get_document_service(db: Session = Depends(get_db)) -> DocumentService:
    return DocumentService(DocumentDAO(db), FolderDAO(db))


def parse_id(raw: str, entity: str) -> int:
    """
    Path and query ids arrive as text so a non-numeric id is a 400, not a 422.
    Ids outside the primary key range are rejected the same way.
    """
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {entity} ID")
    if not id_in_range(value):
        raise ValidationError(f"Invalid {entity} ID")
    return value
