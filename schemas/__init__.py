# schemas/__init__.py

from .folder import (
    FolderCreate, FolderResponse,
    FolderCreated, FolderDocumentCount,
)

from .document import (
    DocumentCreate, DocumentResponse,
    DocumentCreated,
)

from .listing import (
    ListingItem,
    SortSpec,
    Page,
)
