"""
Domain-split Pydantic schemas with a compatibility aggregator.

Create/Update schemas are the data bags handed to the repository; the plain
names are read models built from ORM rows.
"""

from .posts import PostBase, PostCreate, PostUpdate, Post
from .taxonomy import (
    TaxonomyBase,
    TagCreate,
    TagUpdate,
    Tag,
    TopicCreate,
    TopicUpdate,
    Topic,
    CategoryCreate,
    CategoryUpdate,
    Category,
)
from .authors import AuthorBase, AuthorCreate, AuthorUpdate, Author

__all__ = [
    "PostBase",
    "PostCreate",
    "PostUpdate",
    "Post",
    "TaxonomyBase",
    "TagCreate",
    "TagUpdate",
    "Tag",
    "TopicCreate",
    "TopicUpdate",
    "Topic",
    "CategoryCreate",
    "CategoryUpdate",
    "Category",
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "Author",
]
