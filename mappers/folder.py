# mappers/folder.py
"""
Named statements for the ``folders`` table.

Every read the folder gateway performs is listed here so the selected
columns and ordering live in one place.
"""
from sqlalchemy import bindparam, delete, select

from models.folder import Folder

TABLE_NAME = Folder.__tablename__
COLUMN_NAMES = ["id", "name", "created_by", "created_at"]

SELECT_ALL_FOLDERS = (
    select(Folder)
    .order_by(Folder.created_at.desc(), Folder.id.desc())
)

SELECT_FOLDER_BY_ID = (
    select(Folder)
    .where(Folder.id == bindparam("folder_id"))
)

CHECK_FOLDER_EXISTS = (
    select(Folder.id)
    .where(Folder.id == bindparam("folder_id"))
    .limit(1)
)

DELETE_FOLDER = (
    delete(Folder.__table__)
    .where(Folder.__table__.c.id == bindparam("folder_id"))
)
