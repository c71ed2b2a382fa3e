"""
Posts API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from blogcore.db import schemas
from blogcore.db.repositories import BlogRepository
from blogcore.api.deps import created_entity, get_blog_repository

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=List[schemas.Post])
def list_posts_endpoint(repo: BlogRepository = Depends(get_blog_repository)):
    return repo.get_post_list()


@router.post("/", response_model=schemas.Post, status_code=status.HTTP_201_CREATED)
def create_post_endpoint(post: schemas.PostCreate, repo: BlogRepository = Depends(get_blog_repository)):
    return created_entity(repo.create_post(post))


@router.put("/{post_id}", response_model=schemas.Post)
def update_post_endpoint(post_id: int, post: schemas.PostUpdate, repo: BlogRepository = Depends(get_blog_repository)):
    return repo.update_post(post_id, post)


@router.delete("/{post_id}")
def delete_post_endpoint(post_id: int, repo: BlogRepository = Depends(get_blog_repository)):
    return {"deleted": repo.delete_post(post_id)}
