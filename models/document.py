from sqlalchemy import Column, Integer, BigInteger, String, ForeignKey, TIMESTAMP, text
from sqlalchemy.orm import relationship
from .base import Base

# 500 MiB
MAX_DOCUMENT_SIZE = 524288000


class Document(Base):
    __tablename__ = "documents"

    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(String(255), nullable=False)
    folder_id  = Column(Integer, ForeignKey("folders.id", ondelete="CASCADE"), nullable=False, index=True)
    file_type  = Column(String(50), nullable=False)
    size       = Column(BigInteger().with_variant(Integer, "sqlite"), nullable=False)
    created_by = Column(String(255), nullable=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=text("CURRENT_TIMESTAMP"))

    # relations
    folder = relationship("Folder", back_populates="documents")
