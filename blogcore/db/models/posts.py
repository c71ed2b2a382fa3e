from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import relationship
from .base import Base, DataObjectMixin, now_utc


class PostCategory(Base):
    __tablename__ = 'blog_post_categories'
    post_id = Column(Integer, ForeignKey('blog_posts.post_id', ondelete='CASCADE'), primary_key=True)
    category_id = Column(Integer, ForeignKey('blog_categories.category_id', ondelete='CASCADE'), primary_key=True)
    position = Column(Integer, nullable=False, default=0)

    post = relationship("Post", back_populates="category_links")
    category = relationship("Category", back_populates="post_links")


class PostTag(Base):
    __tablename__ = 'blog_post_tags'
    post_id = Column(Integer, ForeignKey('blog_posts.post_id', ondelete='CASCADE'), primary_key=True)
    tag_id = Column(Integer, ForeignKey('blog_tags.tag_id', ondelete='CASCADE'), primary_key=True)
    position = Column(Integer, nullable=False, default=0)

    post = relationship("Post", back_populates="tag_links")
    tag = relationship("Tag", back_populates="post_links")


class PostTopic(Base):
    __tablename__ = 'blog_post_topics'
    post_id = Column(Integer, ForeignKey('blog_posts.post_id', ondelete='CASCADE'), primary_key=True)
    topic_id = Column(Integer, ForeignKey('blog_topics.topic_id', ondelete='CASCADE'), primary_key=True)
    position = Column(Integer, nullable=False, default=0)

    post = relationship("Post", back_populates="topic_links")
    topic = relationship("Topic", back_populates="post_links")


class Post(DataObjectMixin, Base):
    __tablename__ = 'blog_posts'
    post_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    short_description = Column(Text, nullable=True)
    post_content = Column(Text, nullable=True)
    url_key = Column(String(255), nullable=True)
    # Author.user_id, not the customer id
    author_id = Column(Integer, nullable=True)
    store_ids = Column(String(255), nullable=True)
    enabled = Column(Integer, nullable=True)
    allow_comment = Column(Integer, nullable=True)
    in_rss = Column(Integer, nullable=True)
    meta_title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)
    meta_robots = Column(String(255), nullable=True)
    layout = Column(String(255), nullable=True)
    publish_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    category_links = relationship("PostCategory", back_populates="post", cascade="all, delete-orphan")
    tag_links = relationship("PostTag", back_populates="post", cascade="all, delete-orphan")
    topic_links = relationship("PostTopic", back_populates="post", cascade="all, delete-orphan")

    categories_ids = association_proxy(
        "category_links", "category_id",
        creator=lambda category_id: PostCategory(category_id=int(category_id)),
    )
    tags_ids = association_proxy(
        "tag_links", "tag_id",
        creator=lambda tag_id: PostTag(tag_id=int(tag_id)),
    )
    topics_ids = association_proxy(
        "topic_links", "topic_id",
        creator=lambda topic_id: PostTopic(topic_id=int(topic_id)),
    )

    relation_id_fields = ("categories_ids", "tags_ids", "topics_ids")

    __table_args__ = (
        Index('idx_blog_posts_author_id', 'author_id'),
    )
