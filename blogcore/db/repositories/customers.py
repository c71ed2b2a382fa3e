"""
Customer repository.

Read-only lookup of the customer identities blog authors belong to.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from blogcore.db import models
from blogcore.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class CustomerRepository:
    def __init__(self, db: Session):
        self._db = db

    def find(self, customer_id) -> Optional[models.Customer]:
        if customer_id is None:
            return None
        return self._db.query(models.Customer).filter(models.Customer.id == customer_id).first()

    def get_by_id(self, customer_id) -> models.Customer:
        customer = self.find(customer_id)
        if customer is None:
            logger.debug("customer_missing: id=%s", customer_id)
            raise NotFoundError(
                f"No such entity with customerId = {customer_id}",
                context={"customer_id": customer_id},
            )
        return customer
