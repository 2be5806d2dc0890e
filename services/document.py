# services/document.py

import logging
from typing import Any, List, Mapping, Optional

from dao.document import DocumentDAO
from dao.folder import FolderDAO
from models.base import id_in_range
from models.document import Document, MAX_DOCUMENT_SIZE
from services.exceptions import NotFound, PersistenceFailure, ValidationError

logger = logging.getLogger(__name__)

MAX_DOCUMENT_NAME_LENGTH = 255
MAX_FILE_TYPE_LENGTH = 50
MIN_SEARCH_QUERY_LENGTH = 2


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class DocumentService:
    """
    Business rules for documents.

    Folder existence is read through the folder gateway; the existence check
    and the insert are separate round trips.
    """

    def __init__(self, document_dao: DocumentDAO, folder_dao: FolderDAO):
        self.document_dao = document_dao
        self.folder_dao = folder_dao

    def list_documents(self, folder_id: Optional[int] = None) -> List[Document]:
        if folder_id is None:
            return self.document_dao.find_all_documents()
        if not self.folder_dao.exists(folder_id):
            raise NotFound("Folder not found")
        return self.document_dao.find_all_docs_by_folder_id(folder_id)

    def get_document(self, document_id: int) -> Document:
        document = self.document_dao.find_document_by_id(document_id)
        if document is None:
            raise NotFound("Document not found")
        return document

    def search_documents(self, query: Optional[str]) -> List[Document]:
        if _blank(query):
            raise ValidationError("Search query is required")
        term = query.strip()
        if len(term) < MIN_SEARCH_QUERY_LENGTH:
            raise ValidationError(f"Search query must be at least {MIN_SEARCH_QUERY_LENGTH} characters")

        try:
            return self.document_dao.search_doc_by_name(term)
        except PersistenceFailure:
            raise PersistenceFailure("Failed to search documents")

    def create_document(self, data: Mapping[str, Any]) -> dict:
        name = data.get("name")
        folder_id = data.get("folder_id")
        file_type = data.get("file_type")
        size = data.get("size")
        created_by = data.get("created_by")

        if _blank(name):
            raise ValidationError("Document name is required and cannot be empty")
        if len(name.strip()) > MAX_DOCUMENT_NAME_LENGTH:
            raise ValidationError(f"Document name cannot exceed {MAX_DOCUMENT_NAME_LENGTH} characters")
        if not folder_id:
            raise ValidationError("Folder ID is required")
        if _blank(file_type):
            raise ValidationError("File type is required")
        if len(file_type.strip()) > MAX_FILE_TYPE_LENGTH:
            raise ValidationError(f"File type cannot exceed {MAX_FILE_TYPE_LENGTH} characters")
        if not isinstance(size, int) or size <= 0:
            raise ValidationError("File size must be greater than 0")
        if size > MAX_DOCUMENT_SIZE:
            raise ValidationError("File size cannot exceed 500MB")

        if not id_in_range(folder_id) or not self.folder_dao.exists(folder_id):
            raise NotFound("Folder not found")

        clean_name = name.strip()
        document_id = self.document_dao.create_document(
            name=clean_name,
            folder_id=folder_id,
            file_type=file_type.strip().lower(),
            size=size,
            created_by=created_by.strip() if created_by else None,
        )
        logger.info("Created document %s (%r) in folder %s", document_id, clean_name, folder_id)
        return {"id": document_id, "name": clean_name}

    def delete_document(self, document_id: int) -> bool:
        if self.document_dao.find_document_by_id(document_id) is None:
            raise NotFound("Document not found")
        deleted = self.document_dao.delete_document_by_id(document_id)
        if deleted:
            logger.info("Deleted document %s", document_id)
        return deleted

    def count_documents_in_folder(self, folder_id: int) -> int:
        if not self.folder_dao.exists(folder_id):
            raise NotFound("Folder not found")
        return self.document_dao.document_count_in_folder(folder_id)
