import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from dao.document import DocumentDAO
from dao.folder import FolderDAO
from db import Database
from main import create_app
from services.document import DocumentService
from services.folder import FolderService


@pytest.fixture()
def database():
    """Fresh in-memory database with the Root folder seeded."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine=engine)
    db.init_db()
    yield db
    db.close()


@pytest.fixture()
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def folder_service(db_session):
    return FolderService(FolderDAO(db_session))


@pytest.fixture()
def document_service(db_session):
    return DocumentService(DocumentDAO(db_session), FolderDAO(db_session))


@pytest.fixture()
def client(database):
    app = create_app(database)
    with TestClient(app) as c:
        yield c
