from . import folder as FolderMapper
from . import document as DocumentMapper

__all__ = ["FolderMapper", "DocumentMapper"]
