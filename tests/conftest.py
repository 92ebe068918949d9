from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mindcare.db import Base
from mindcare.main import create_app
from mindcare.services.responder import ResponseEngine
from mindcare.services.store import DataStore
from mindcare.settings import Settings


class Clock:
    """Local wall clock the tests can move around."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class FixedRandom:
    def __init__(self, value: float = 0.0):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def clock():
    return Clock(datetime(2026, 10, 19, 9, 30))


@pytest.fixture
def store(session_factory, clock):
    return DataStore(session_factory, prefix="test_", clock=clock)


@pytest.fixture
def responder():
    return ResponseEngine(rng=FixedRandom(0.0))


@pytest.fixture
def client(store, responder):
    config = Settings(typing_delay_min=1.0, typing_delay_max=3.0)
    app = create_app(config=config, store=store, responder=responder)
    with TestClient(app) as c:
        yield c
