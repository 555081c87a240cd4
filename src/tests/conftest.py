import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.infrastructure.database.session import create_db_engine, create_session_factory, init_db
from src.main import create_app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(engine):
    return create_app(settings=Settings(app_env="test"), engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
