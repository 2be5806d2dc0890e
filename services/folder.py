# services/folder.py

import logging
from typing import List, Optional

from dao.folder import FolderDAO
from models.folder import Folder, ROOT_FOLDER_ID
from services.exceptions import ConflictOrIllegalOperation, NotFound, ValidationError

logger = logging.getLogger(__name__)

MAX_FOLDER_NAME_LENGTH = 255


class FolderService:
    """
    Business rules for folders.

    ● names are trimmed and must be 1-255 characters
    ● the Root folder can never be deleted
    ● deleting a folder removes every document inside it
    """

    def __init__(self, folder_dao: FolderDAO):
        self.folder_dao = folder_dao

    def list_folders(self) -> List[Folder]:
        return self.folder_dao.find_all_folders()

    def get_folder(self, folder_id: int) -> Folder:
        folder = self.folder_dao.find_folder_by_id(folder_id)
        if folder is None:
            raise NotFound("Folder not found")
        return folder

    def folder_exists(self, folder_id: int) -> bool:
        return self.folder_dao.exists(folder_id)

    def create_folder(self, name: Optional[str], created_by: Optional[str] = None) -> dict:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Folder name is required and cannot be empty")
        trimmed_name = name.strip()
        if len(trimmed_name) > MAX_FOLDER_NAME_LENGTH:
            raise ValidationError(f"Folder name cannot exceed {MAX_FOLDER_NAME_LENGTH} characters")

        folder_id = self.folder_dao.create(
            name=trimmed_name,
            created_by=created_by.strip() if created_by else None,
        )
        logger.info("Created folder %s (%r)", folder_id, trimmed_name)
        return {"id": folder_id, "name": trimmed_name}

    def delete_folder(self, folder_id: int) -> bool:
        if folder_id == ROOT_FOLDER_ID:
            raise ConflictOrIllegalOperation("Root folder cannot be deleted")
        if not self.folder_dao.exists(folder_id):
            raise NotFound("Folder not found")

        deleted = self.folder_dao.delete(folder_id)
        if deleted:
            logger.info("Deleted folder %s with its documents", folder_id)
        return deleted
