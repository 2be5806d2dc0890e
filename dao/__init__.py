from .folder import FolderDAO
from .document import DocumentDAO

__all__ = ["FolderDAO", "DocumentDAO"]
