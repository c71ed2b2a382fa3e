from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from .base import Base, DataObjectMixin, now_utc


class Author(DataObjectMixin, Base):
    __tablename__ = 'blog_authors'
    # Posts reference authors by this key through Post.author_id
    user_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    url_key = Column(String(255), nullable=True)
    customer_id = Column(Integer, ForeignKey('customers.id'), nullable=True)
    type = Column(Integer, nullable=True)
    status = Column(Integer, nullable=True)
    short_description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_blog_authors_customer_id', 'customer_id'),
    )
