"""
Authors API endpoints.

Authors are created against an existing customer account.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from blogcore.db import schemas
from blogcore.db.repositories import BlogRepository
from blogcore.api.deps import created_entity, get_blog_repository

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("/", response_model=List[schemas.Author])
def list_authors_endpoint(repo: BlogRepository = Depends(get_blog_repository)):
    return repo.get_author_list()


@router.post("/customers/{customer_id}", response_model=schemas.Author, status_code=status.HTTP_201_CREATED)
def create_author_endpoint(
    customer_id: int,
    author: schemas.AuthorCreate,
    repo: BlogRepository = Depends(get_blog_repository),
):
    return created_entity(repo.create_author(customer_id, author))


@router.put("/{author_id}", response_model=schemas.Author)
def update_author_endpoint(author_id: int, author: schemas.AuthorUpdate, repo: BlogRepository = Depends(get_blog_repository)):
    return repo.update_author(author_id, author)


@router.delete("/{author_id}")
def delete_author_endpoint(author_id: int, repo: BlogRepository = Depends(get_blog_repository)):
    return {"deleted": repo.delete_author(author_id)}
