# dao/document.py

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mappers import DocumentMapper
from models.document import Document
from services.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


class DocumentDAO:
    """Runs the document statements against one session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all_documents(self) -> List[Document]:
        try:
            return list(self.db.execute(DocumentMapper.SELECT_ALL_DOCUMENTS).scalars().all())
        except SQLAlchemyError as e:
            self._fail("Failed to retrieve documents", e)

    def find_document_by_id(self, document_id: int) -> Optional[Document]:
        try:
            return self.db.execute(
                DocumentMapper.SELECT_DOCUMENT_BY_ID, {"document_id": document_id}
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            self._fail("Failed to retrieve document", e)

    def find_all_docs_by_folder_id(self, folder_id: int) -> List[Document]:
        try:
            return list(
                self.db.execute(
                    DocumentMapper.SELECT_DOCUMENTS_BY_FOLDER_ID, {"folder_id": folder_id}
                ).scalars().all()
            )
        except SQLAlchemyError as e:
            self._fail("Failed to retrieve documents", e)

    def search_doc_by_name(self, term: str) -> List[Document]:
        pattern = DocumentMapper.build_search_pattern(term)
        try:
            return list(
                self.db.execute(
                    DocumentMapper.SEARCH_DOCUMENTS_BY_NAME, {"pattern": pattern}
                ).scalars().all()
            )
        except SQLAlchemyError as e:
            self._fail("Failed to search documents", e)

    def create_document(
        self,
        name: str,
        folder_id: int,
        file_type: str,
        size: int,
        created_by: Optional[str] = None,
    ) -> int:
        document = Document(
            name=name,
            folder_id=folder_id,
            file_type=file_type,
            size=size,
            created_by=created_by or None,
        )
        try:
            self.db.add(document)
            self.db.commit()
            self.db.refresh(document)
        except SQLAlchemyError as e:
            self._fail("Failed to create document", e)
        return document.id

    def delete_document_by_id(self, document_id: int) -> bool:
        try:
            result = self.db.execute(DocumentMapper.DELETE_DOCUMENT, {"document_id": document_id})
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("Failed to delete document", e)
        return result.rowcount > 0

    def document_count_in_folder(self, folder_id: int) -> int:
        try:
            return self.db.execute(
                DocumentMapper.COUNT_DOCUMENTS_IN_FOLDER, {"folder_id": folder_id}
            ).scalar_one()
        except SQLAlchemyError as e:
            self._fail("Failed to count documents", e)

    def _fail(self, message: str, error: Exception):
        self.db.rollback()
        logger.exception("%s: %s", message, error)
        raise PersistenceFailure(message) from error
