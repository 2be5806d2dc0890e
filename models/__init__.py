from .base import Base, MAX_ID, id_in_range
from .folder import Folder, ROOT_FOLDER_ID, ROOT_FOLDER_NAME, DEFAULT_CREATED_BY
from .document import Document, MAX_DOCUMENT_SIZE

__all__ = [
    "Base",
    "MAX_ID",
    "id_in_range",
    "Folder",
    "Document",
    "ROOT_FOLDER_ID",
    "ROOT_FOLDER_NAME",
    "DEFAULT_CREATED_BY",
    "MAX_DOCUMENT_SIZE",
]
