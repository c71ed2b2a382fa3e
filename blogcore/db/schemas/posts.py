from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator


class PostBase(BaseModel):
    name: Optional[str] = None
    short_description: Optional[str] = None
    post_content: Optional[str] = None
    url_key: Optional[str] = None
    author_id: Optional[int] = None
    store_ids: Optional[str] = None
    enabled: Optional[int] = None
    allow_comment: Optional[int] = None
    in_rss: Optional[int] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    meta_robots: Optional[str] = None
    layout: Optional[str] = None
    publish_date: Optional[datetime] = None
    model_config = ConfigDict(coerce_numbers_to_str=True)


class PostCreate(PostBase):
    # Comma-joined ids, e.g. "1,4,7"
    categories_ids: Optional[str] = None
    tags_ids: Optional[str] = None
    topics_ids: Optional[str] = None
    created_at: Optional[datetime] = None


class PostUpdate(PostCreate):
    pass


class Post(PostBase):
    post_id: int
    categories_ids: List[int] = []
    tags_ids: List[int] = []
    topics_ids: List[int] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)

    @field_validator("categories_ids", "tags_ids", "topics_ids", mode="before")
    @classmethod
    def _materialize_ids(cls, value):
        return list(value) if value is not None else []
