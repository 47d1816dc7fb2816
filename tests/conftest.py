"""Pytest fixtures for analytics tests."""

from collections.abc import Generator
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.db.base import Base
from app.db.models import DoubtClearance, EducationalVideo, SkillPlan, VideoRequest
from app.main import create_app


ACTIVITY_TABLES = [
    VideoRequest.__table__,
    EducationalVideo.__table__,
    DoubtClearance.__table__,
    SkillPlan.__table__,
]

# Tuesday, so the trailing week runs Wed..Tue.
AS_OF = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine, tables=ACTIVITY_TABLES)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine, tables=ACTIVITY_TABLES)


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(ACTIVITY_TABLES):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def as_of() -> datetime:
    return AS_OF
