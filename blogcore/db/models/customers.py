from sqlalchemy import Column, Integer, String, DateTime
from .base import Base, DataObjectMixin, now_utc


class Customer(DataObjectMixin, Base):
    __tablename__ = 'customers'
    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    firstname = Column(String(255), nullable=True)
    lastname = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
