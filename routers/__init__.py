from .folder import router as folder_router
from .document import router as document_router
from .listing import router as listing_router

routers = [
    folder_router,
    document_router,
    listing_router,
]
