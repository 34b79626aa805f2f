import os

# db.py refuses to import without a URL; tests bind their own engine below
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from models import Base, User


class TrackingSession(Session):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


class RecordingFactory:
    """Session factory that remembers every session it hands out."""

    def __init__(self, maker):
        self.maker = maker
        self.sessions = []

    def __call__(self):
        s = self.maker()
        self.sessions.append(s)
        return s


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    s = sessionmaker(bind=engine, autoflush=False)()
    yield s
    s.close()


@pytest.fixture
def make_factory(engine):
    def _make(session_class=TrackingSession):
        return RecordingFactory(sessionmaker(bind=engine, autoflush=False, class_=session_class))
    return _make


@pytest.fixture
def session_factory(make_factory):
    return make_factory()


@pytest.fixture
def make_user(db):
    def _make(employee_number="1001", name="Jane Doe", **kwargs):
        user = User(employee_number=employee_number, name=name, **kwargs)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture
def failing_factory(make_factory):
    """Factory whose sessions raise the given exception on every query."""
    def _make(exc):
        class FailingSession(TrackingSession):
            def query(self, *args, **kwargs):
                raise exc
        return make_factory(FailingSession)
    return _make
