# schemas/folder.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class FolderCreate(BaseModel):
    name: Optional[str] = None
    created_by: Optional[str] = None


class FolderResponse(BaseModel):
    id: int
    name: str
    created_by: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class FolderCreated(BaseModel):
    id: int
    name: str
    message: str


class FolderDocumentCount(BaseModel):
    folder_id: int
    count: int
