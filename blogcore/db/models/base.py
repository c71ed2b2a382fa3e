"""
Shared SQLAlchemy base and the data-bag helpers every blog entity carries.
"""
import logging
from datetime import datetime, UTC
from typing import Any, Dict, Mapping

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


class DataObjectMixin:
    """Dictionary-style access to an entity's persisted fields.

    ``relation_id_fields`` names list-valued attributes (association proxies)
    that belong to the data bag alongside the mapped columns.
    """

    relation_id_fields = ()

    @classmethod
    def id_field_name(cls) -> str:
        return sa_inspect(cls).primary_key[0].key

    @classmethod
    def data_keys(cls) -> list:
        keys = [attr.key for attr in sa_inspect(cls).column_attrs]
        return keys + list(cls.relation_id_fields)

    def get_id(self):
        return getattr(self, self.id_field_name())

    def get_data(self) -> Dict[str, Any]:
        data = {}
        for key in self.data_keys():
            value = getattr(self, key)
            data[key] = list(value) if key in self.relation_id_fields else value
        return data

    def add_data(self, data: Mapping[str, Any]):
        """Merge ``data`` over the entity; keys that are not fields are skipped.

        Relation id lists replace the current links; ``None`` leaves them as is.
        """
        known = set(self.data_keys())
        for key, value in data.items():
            if key not in known:
                logger.debug("add_data_skipped: entity=%s key=%s", type(self).__name__, key)
                continue
            if key in self.relation_id_fields:
                if value is None:
                    continue
                value = list(value)
            setattr(self, key, value)
        return self


Base = declarative_base()
