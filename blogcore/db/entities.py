"""
Storage handles the blog repository talks through.

``EntityFactory`` hands out one ``EntityStore`` per entity kind. A store loads,
saves and deletes rows of its model and opens ``Collection`` queries that
narrow by field equality. Stores commit on save/delete; a failing flush rolls
the session back and the SQLAlchemy error propagates unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blogcore.db import models
from blogcore.exceptions import InputError

logger = logging.getLogger(__name__)

ENTITY_MODELS: Dict[str, Type[models.Base]] = {
    "post": models.Post,
    "tag": models.Tag,
    "topic": models.Topic,
    "category": models.Category,
    "author": models.Author,
}


class Collection:
    """Filterable, countable query over one model."""

    def __init__(self, db: Session, model):
        self._db = db
        self._model = model
        self._query = db.query(model)

    def add_field_to_filter(self, field: str, value: Any) -> "Collection":
        if field not in self._model.__table__.columns:
            raise InputError(
                f"Unknown filter field {field!r} for {self._model.__name__}",
                context={"field": field},
            )
        self._query = self._query.filter(getattr(self._model, field) == value)
        return self

    def count(self) -> int:
        return self._query.count()

    def get_items(self) -> List[Any]:
        return self._query.all()

    def __iter__(self):
        return iter(self.get_items())


class EntityStore:
    """Persistence handle for a single entity kind."""

    def __init__(self, db: Session, model):
        self._db = db
        self.model = model

    def new(self, **data):
        return self.model().add_data(data)

    def load(self, entity_id) -> Optional[Any]:
        if entity_id is None:
            return None
        entity = self._db.get(self.model, entity_id)
        logger.debug("entity_load: model=%s id=%s found=%s", self.model.__name__, entity_id, entity is not None)
        return entity

    def save(self, entity):
        try:
            self._db.add(entity)
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            raise
        self._db.refresh(entity)
        return entity

    def delete(self, entity) -> None:
        try:
            self._db.delete(entity)
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            raise

    def get_collection(self) -> Collection:
        return Collection(self._db, self.model)


class EntityFactory:
    """Builds stores for the blog entity kinds on a shared session."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, kind: str = "post") -> EntityStore:
        model = ENTITY_MODELS.get(kind)
        if model is None:
            raise InputError(f"Unknown entity type {kind!r}", context={"kind": kind})
        return EntityStore(self._db, model)
