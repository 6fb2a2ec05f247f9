import os

# Point the app at a throwaway in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
from sqlalchemy.orm import Session
from dbplayground.db import Base, engine, SessionLocal, init_db
from dbplayground.models import User

@pytest.fixture(scope="session", autouse=True)
def create_test_schema():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(autouse=True)
def empty_users_table():
    session: Session = SessionLocal()
    try:
        session.query(User).delete()
        session.commit()
    finally:
        session.close()
    yield

@pytest.fixture
def db_session() -> Session:
    session: Session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def make_user(db_session: Session):
    def _make(first_name, last_name, age=None) -> User:
        user = User(first_name=first_name, last_name=last_name, age=age)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make
