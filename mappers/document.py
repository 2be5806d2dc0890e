# mappers/document.py
"""
Named statements for the ``documents`` table.
"""
from sqlalchemy import bindparam, delete, func, select

from models.document import Document

TABLE_NAME = Document.__tablename__
COLUMN_NAMES = ["id", "name", "folder_id", "file_type", "size", "created_by", "created_at"]

LIKE_ESCAPE = "\\"

_newest_first = (Document.created_at.desc(), Document.id.desc())

SELECT_ALL_DOCUMENTS = (
    select(Document)
    .order_by(*_newest_first)
)

SELECT_DOCUMENT_BY_ID = (
    select(Document)
    .where(Document.id == bindparam("document_id"))
)

SELECT_DOCUMENTS_BY_FOLDER_ID = (
    select(Document)
    .where(Document.folder_id == bindparam("folder_id"))
    .order_by(*_newest_first)
)

# lower() folds ASCII only on SQLite; full Unicode case-insensitivity relies on the
# MySQL column collation.
SEARCH_DOCUMENTS_BY_NAME = (
    select(Document)
    .where(Document.name.ilike(bindparam("pattern"), escape=LIKE_ESCAPE))
    .order_by(*_newest_first)
)

COUNT_DOCUMENTS_IN_FOLDER = (
    select(func.count(Document.id))
    .where(Document.folder_id == bindparam("folder_id"))
)

DELETE_DOCUMENT = (
    delete(Document.__table__)
    .where(Document.__table__.c.id == bindparam("document_id"))
)

DELETE_DOCUMENTS_BY_FOLDER_ID = (
    delete(Document.__table__)
    .where(Document.__table__.c.folder_id == bindparam("folder_id"))
)


def build_search_pattern(term: str) -> str:
    """Wrap ``term`` for a substring LIKE, treating ``%`` and ``_`` literally."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
