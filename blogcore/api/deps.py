"""
Shared FastAPI dependencies for the blog routers.
"""
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from blogcore.db.clock import SystemClock
from blogcore.db.database import get_db
from blogcore.db.entities import EntityFactory
from blogcore.db.repositories import BlogRepository, CustomerRepository, Rejected


def get_clock():
    return SystemClock()


def get_blog_repository(db: Session = Depends(get_db), clock=Depends(get_clock)) -> BlogRepository:
    """Build the repository on the request-scoped session."""
    return BlogRepository(EntityFactory(db), CustomerRepository(db), clock)


def created_entity(result):
    """Unwrap a create result, turning a rejection into a 422."""
    if isinstance(result, Rejected):
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=result.reason)
    return result.entity
