# schemas/document.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class DocumentCreate(BaseModel):
    # all optional so the service reports which field is missing
    name: Optional[str] = None
    folder_id: Optional[int] = None
    file_type: Optional[str] = None
    size: Optional[int] = None
    created_by: Optional[str] = None


class DocumentResponse(BaseModel):
    id: int
    name: str
    folder_id: int
    file_type: str
    size: int
    created_by: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class DocumentCreated(BaseModel):
    id: int
    name: str
    message: str
