from sqlalchemy import Column, Integer, String, TIMESTAMP, text
from sqlalchemy.orm import relationship
from .base import Base

# The Root folder (id=1) is seeded at startup, hidden from listings and never deletable.
# Documents created at the top level live here.
ROOT_FOLDER_ID = 1
ROOT_FOLDER_NAME = "Root"
DEFAULT_CREATED_BY = "Unknown"


class Folder(Base):
    __tablename__ = "folders"

    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(String(255), nullable=False)
    created_by = Column(String(255), nullable=True, server_default=text(f"'{DEFAULT_CREATED_BY}'"))
    created_at = Column(TIMESTAMP, nullable=False, server_default=text("CURRENT_TIMESTAMP"))

    # relations
    documents = relationship(
        "Document",
        back_populates="folder",
        cascade="all, delete",
        passive_deletes=True,
    )
