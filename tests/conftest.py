from datetime import datetime

import pytest
from sqlalchemy.orm import sessionmaker

from blogcore.db import models
from blogcore.db.database import build_engine
from blogcore.db.entities import EntityFactory
from blogcore.db.repositories import BlogRepository, CustomerRepository

# Naive on purpose: SQLite hands datetimes back without tzinfo.
FIXED_NOW = datetime(2024, 5, 17, 9, 30, 0)

_engine = build_engine("sqlite+pysqlite:///:memory:", echo=False)
_SessionLocal = sessionmaker(bind=_engine, autoflush=False, autocommit=False)


class FixedClock:
    def __init__(self, moment=FIXED_NOW):
        self.moment = moment

    def now(self):
        return self.moment


@pytest.fixture(scope="module")
def db():
    models.Base.metadata.create_all(bind=_engine)
    session = _SessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=_engine)


@pytest.fixture(autouse=True)
def clean(db):
    for table in reversed(models.Base.metadata.sorted_tables):
        db.execute(table.delete())
    db.commit()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def repo(db, clock):
    return BlogRepository(EntityFactory(db), CustomerRepository(db), clock)


def add_row(db, row):
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture
def make_customer(db):
    def _make(email="reader@example.com", **kwargs):
        return add_row(db, models.Customer(email=email, firstname=email.split("@")[0], **kwargs))
    return _make


@pytest.fixture
def make_author(db):
    def _make(name="Ada", **kwargs):
        return add_row(db, models.Author(name=name, type=0, status=0, **kwargs))
    return _make


@pytest.fixture
def make_category(db):
    def _make(name="News", **kwargs):
        return add_row(db, models.Category(**{"name": name, "enabled": 1, "store_ids": "0", "parent_id": 1, **kwargs}))
    return _make


@pytest.fixture
def make_tag(db):
    def _make(name="python", **kwargs):
        return add_row(db, models.Tag(**{"name": name, "enabled": 1, "store_ids": "0", **kwargs}))
    return _make


@pytest.fixture
def make_topic(db):
    def _make(name="Releases", **kwargs):
        return add_row(db, models.Topic(**{"name": name, "enabled": 1, "store_ids": "0", **kwargs}))
    return _make
