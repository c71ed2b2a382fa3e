from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class AuthorBase(BaseModel):
    name: Optional[str] = None
    url_key: Optional[str] = None
    type: Optional[int] = None
    status: Optional[int] = None
    short_description: Optional[str] = None
    created_at: Optional[datetime] = None


class AuthorCreate(AuthorBase):
    pass


class AuthorUpdate(AuthorBase):
    customer_id: Optional[int] = None


class Author(AuthorBase):
    user_id: int
    customer_id: Optional[int] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
