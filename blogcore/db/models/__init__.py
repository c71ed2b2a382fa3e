"""
Domain-split SQLAlchemy models with a compatibility aggregator.

This package exposes `Base`, `now_utc`, the data-bag mixin and all ORM
classes used by the blog repositories.
"""

from .base import Base, DataObjectMixin, now_utc  # re-export

# Domain models
from .customers import Customer
from .authors import Author
from .taxonomy import Tag, Topic, Category
from .posts import Post, PostCategory, PostTag, PostTopic

__all__ = [
    # base
    "Base",
    "DataObjectMixin",
    "now_utc",
    # identities
    "Customer",
    "Author",
    # taxonomy
    "Tag",
    "Topic",
    "Category",
    # posts
    "Post",
    "PostCategory",
    "PostTag",
    "PostTopic",
]
