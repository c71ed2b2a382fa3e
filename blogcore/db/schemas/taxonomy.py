from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class TaxonomyBase(BaseModel):
    name: Optional[str] = None
    url_key: Optional[str] = None
    description: Optional[str] = None
    store_ids: Optional[str] = None
    enabled: Optional[int] = None
    meta_robots: Optional[str] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(coerce_numbers_to_str=True)


class TagCreate(TaxonomyBase):
    pass


class TagUpdate(TaxonomyBase):
    pass


class Tag(TaxonomyBase):
    tag_id: int
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)


class TopicCreate(TaxonomyBase):
    pass


class TopicUpdate(TaxonomyBase):
    pass


class Topic(TaxonomyBase):
    topic_id: int
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)


class CategoryCreate(TaxonomyBase):
    parent_id: Optional[int] = None
    position: Optional[int] = None


class CategoryUpdate(CategoryCreate):
    pass


class Category(CategoryCreate):
    category_id: int
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)
