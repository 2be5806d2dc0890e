# dao/folder.py

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mappers import DocumentMapper, FolderMapper
from models.folder import Folder, DEFAULT_CREATED_BY
from services.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


class FolderDAO:
    """Runs the folder statements against one session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all_folders(self) -> List[Folder]:
        try:
            return list(self.db.execute(FolderMapper.SELECT_ALL_FOLDERS).scalars().all())
        except SQLAlchemyError as e:
            self._fail("Failed to retrieve folders", e)

    def find_folder_by_id(self, folder_id: int) -> Optional[Folder]:
        try:
            return self.db.execute(
                FolderMapper.SELECT_FOLDER_BY_ID, {"folder_id": folder_id}
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            self._fail("Failed to retrieve folder", e)

    def exists(self, folder_id: int) -> bool:
        try:
            row = self.db.execute(
                FolderMapper.CHECK_FOLDER_EXISTS, {"folder_id": folder_id}
            ).first()
        except SQLAlchemyError as e:
            self._fail("Failed to verify folder existence", e)
        return row is not None

    def create(self, name: str, created_by: Optional[str] = None) -> int:
        folder = Folder(name=name, created_by=created_by or DEFAULT_CREATED_BY)
        try:
            self.db.add(folder)
            self.db.commit()
            self.db.refresh(folder)
        except SQLAlchemyError as e:
            self._fail("Failed to create folder", e)
        return folder.id

    def delete(self, folder_id: int) -> bool:
        """Delete the folder and every document it owns in one transaction."""
        try:
            self.db.execute(DocumentMapper.DELETE_DOCUMENTS_BY_FOLDER_ID, {"folder_id": folder_id})
            result = self.db.execute(FolderMapper.DELETE_FOLDER, {"folder_id": folder_id})
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("Failed to delete folder", e)
        return result.rowcount > 0

    def _fail(self, message: str, error: Exception):
        self.db.rollback()
        logger.exception("%s: %s", message, error)
        raise PersistenceFailure(message) from error
