"""
Tags, topics and categories share a shape: a named, store-scoped,
SEO-aware label attached to posts through link tables.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from .base import Base, DataObjectMixin, now_utc


class Tag(DataObjectMixin, Base):
    __tablename__ = 'blog_tags'
    tag_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    url_key = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    store_ids = Column(String(255), nullable=True)
    enabled = Column(Integer, nullable=True)
    meta_robots = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    post_links = relationship("PostTag", back_populates="tag", cascade="all")


class Topic(DataObjectMixin, Base):
    __tablename__ = 'blog_topics'
    topic_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    url_key = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    store_ids = Column(String(255), nullable=True)
    enabled = Column(Integer, nullable=True)
    meta_robots = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    post_links = relationship("PostTopic", back_populates="topic", cascade="all")


class Category(DataObjectMixin, Base):
    __tablename__ = 'blog_categories'
    category_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    url_key = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    store_ids = Column(String(255), nullable=True)
    enabled = Column(Integer, nullable=True)
    meta_robots = Column(String(255), nullable=True)
    # 1 is the root category
    parent_id = Column(Integer, nullable=True)
    position = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    post_links = relationship("PostCategory", back_populates="category", cascade="all")
