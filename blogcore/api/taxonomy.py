"""
Tag, topic and category API endpoints.

The three resources share one shape, so each gets the same four routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from blogcore.db import schemas
from blogcore.db.repositories import BlogRepository
from blogcore.api.deps import created_entity, get_blog_repository

tags_router = APIRouter(prefix="/tags", tags=["tags"])
topics_router = APIRouter(prefix="/topics", tags=["topics"])
categories_router = APIRouter(prefix="/categories", tags=["categories"])


@tags_router.get("/", response_model=List[schemas.Tag])
def list_tags_endpoint(repo: BlogRepository = Depends(get_blog_repository)):
    return repo.get_tag_list()


@tags_router.post("/", response_model=schemas.Tag, status_code=status.HTTP_201_CREATED)
def create_tag_endpoint(tag: schemas.TagCreate, repo: BlogRepository = Depends(get_blog_repository)):
    return created_entity(repo.create_tag(tag))


@tags_router.put("/{tag_id}", response_model=schemas.Tag)
def update_tag_endpoint(tag_id: int, tag: schemas.TagUpdate, repo: BlogRepository = Depends(get_blog_repository)):
    return repo.update_tag(tag_id, tag)


@tags_router.delete("/{tag_id}")
def delete_tag_endpoint(tag_id: int, repo: BlogRepository = Depends(get_blog_repository)):
    return {"deleted": repo.delete_tag(tag_id)}


@topics_router.get("/", response_model=List[schemas.Topic])
def list_topics_endpoint(repo: BlogRepository = Depends(get_blog_repository)):
    return repo.get_topic_list()


@topics_router.post("/", response_model=schemas.Topic, status_code=status.HTTP_201_CREATED)
def create_topic_endpoint(topic: schemas.TopicCreate, repo: BlogRepository = Depends(get_blog_repository)):
    return created_entity(repo.create_topic(topic))


@topics_router.put("/{topic_id}", response_model=schemas.Topic)
def update_topic_endpoint(topic_id: int, topic: schemas.TopicUpdate, repo: BlogRepository = Depends(get_blog_repository)):
    return repo.update_topic(topic_id, topic)


@topics_router.delete("/{topic_id}")
def delete_topic_endpoint(topic_id: int, repo: BlogRepository = Depends(get_blog_repository)):
    return {"deleted": repo.delete_topic(topic_id)}


@categories_router.get("/", response_model=List[schemas.Category])
def list_categories_endpoint(repo: BlogRepository = Depends(get_blog_repository)):
    return repo.get_category_list()


@categories_router.post("/", response_model=schemas.Category, status_code=status.HTTP_201_CREATED)
def create_category_endpoint(category: schemas.CategoryCreate, repo: BlogRepository = Depends(get_blog_repository)):
    return created_entity(repo.create_category(category))


@categories_router.put("/{category_id}", response_model=schemas.Category)
def update_category_endpoint(
    category_id: int,
    category: schemas.CategoryUpdate,
    repo: BlogRepository = Depends(get_blog_repository),
):
    return repo.update_category(category_id, category)


@categories_router.delete("/{category_id}")
def delete_category_endpoint(category_id: int, repo: BlogRepository = Depends(get_blog_repository)):
    return {"deleted": repo.delete_category(category_id)}
