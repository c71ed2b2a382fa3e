"""
Blog repository.

List, create, update and delete for posts, tags, topics, categories and
authors. Storage goes through an injected ``EntityFactory``; timestamps come
from an injected clock and customer identities from a ``CustomerRepository``.

Create calls never raise on bad drafts: they return ``Rejected`` with the
draft untouched. Update calls raise ``InputError`` for an empty id and
``NotFoundError`` for an unknown one. Store failures propagate unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from blogcore.db import schemas
from blogcore.db.clock import Clock
from blogcore.db.entities import EntityFactory
from blogcore.db.repositories.customers import CustomerRepository
from blogcore.db.repositories.results import Created, CreateResult, Rejected
from blogcore.exceptions import InputError, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_META_ROBOTS = "INDEX,FOLLOW"
DEFAULT_LAYOUT = "empty"
ALL_STORES = "0"
ROOT_CATEGORY_ID = 1

# (data key, entity kind, filter field used to verify each referenced id)
POST_RELATIONS = (
    ("categories_ids", "category", "category_id"),
    ("tags_ids", "tag", "tag_id"),
    ("topics_ids", "topic", "topic_id"),
)


def split_ids(value) -> List[str]:
    """Split a comma-joined id string; repeated ids are dropped, order kept."""
    if isinstance(value, str):
        value = [part.strip() for part in value.split(",")]
    return list(dict.fromkeys(value))


class BlogRepository:
    def __init__(self, factory: EntityFactory, customers: CustomerRepository, clock: Clock):
        self._factory = factory
        self._customers = customers
        self._clock = clock

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------
    def get_post_list(self) -> List[Any]:
        return self._list("post")

    def create_post(self, post: schemas.PostCreate) -> CreateResult:
        """Validate, normalize and persist a post draft."""
        data = post.model_dump()
        reason = self._post_rejection_reason(data)
        if reason is not None:
            logger.info("post_rejected: name=%s reason=%s", post.name, reason)
            return Rejected(post, reason)

        self.prepare_data(data)
        store = self._factory.get("post")
        entity = store.save(store.new(**data))
        logger.info("post_created: id=%s author_id=%s", entity.post_id, entity.author_id)
        return Created(entity)

    def update_post(self, post_id, post: schemas.PostUpdate):
        """Merge set fields over a post; relation ids must all resolve."""
        self._require_id("post", post_id)
        changes = post.model_dump(exclude_unset=True)
        reason = self._relation_rejection_reason(changes)
        if reason is not None:
            raise InputError(reason, context={"kind": "post", "id": post_id})
        for key, _kind, _field in POST_RELATIONS:
            if changes.get(key):
                changes[key] = split_ids(changes[key])
        return self._update("post", post_id, changes)

    def delete_post(self, post_id) -> bool:
        return self._delete("post", post_id)

    def prepare_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Fill post defaults in place.

        ``created_at`` is overwritten on every call; everything else is only
        set when empty.
        """
        for key, _kind, _field in POST_RELATIONS:
            if data.get(key):
                data[key] = split_ids(data[key])
        for key in ("enabled", "allow_comment", "in_rss"):
            if not data.get(key):
                data[key] = 0
        if not data.get("store_ids"):
            data["store_ids"] = ALL_STORES
        if not data.get("meta_robots"):
            data["meta_robots"] = DEFAULT_META_ROBOTS
        if not data.get("layout"):
            data["layout"] = DEFAULT_LAYOUT
        data["created_at"] = self._clock.now()
        if not data.get("publish_date"):
            data["publish_date"] = self._clock.now()
        return data

    def check_post_data(self, data: Dict[str, Any]) -> bool:
        return self._post_rejection_reason(data) is None

    def check_author(self, author_id) -> bool:
        """True when some author row has ``user_id == author_id``."""
        collection = self._factory.get("author").get_collection().add_field_to_filter("user_id", author_id)
        return collection.count() > 0

    def _post_rejection_reason(self, data: Dict[str, Any]) -> Optional[str]:
        if not data.get("name"):
            return "name is required"
        if not data.get("author_id"):
            return "author_id is required"
        if not self.check_author(data["author_id"]):
            return f"author {data['author_id']} does not exist"
        return self._relation_rejection_reason(data)

    def _relation_rejection_reason(self, data: Dict[str, Any]) -> Optional[str]:
        for key, kind, field in POST_RELATIONS:
            if not data.get(key):
                continue
            store = self._factory.get(kind)
            for raw_id in split_ids(data[key]):
                try:
                    ref_id = int(raw_id)
                except (TypeError, ValueError):
                    return f"{key} contains invalid id {raw_id!r}"
                if store.get_collection().add_field_to_filter(field, ref_id).count() < 1:
                    return f"{kind} {ref_id} does not exist"
        return None

    # ------------------------------------------------------------------
    # Tags, topics, categories
    # ------------------------------------------------------------------
    def get_tag_list(self) -> List[Any]:
        return self._list("tag")

    def create_tag(self, tag: schemas.TagCreate) -> CreateResult:
        return self._create_labelled("tag", tag)

    def update_tag(self, tag_id, tag: schemas.TagUpdate):
        return self._update("tag", tag_id, tag.model_dump(exclude_unset=True))

    def delete_tag(self, tag_id) -> bool:
        return self._delete("tag", tag_id)

    def get_topic_list(self) -> List[Any]:
        return self._list("topic")

    def create_topic(self, topic: schemas.TopicCreate) -> CreateResult:
        return self._create_labelled("topic", topic)

    def update_topic(self, topic_id, topic: schemas.TopicUpdate):
        return self._update("topic", topic_id, topic.model_dump(exclude_unset=True))

    def delete_topic(self, topic_id) -> bool:
        return self._delete("topic", topic_id)

    def get_category_list(self) -> List[Any]:
        return self._list("category")

    def create_category(self, category: schemas.CategoryCreate) -> CreateResult:
        return self._create_labelled("category", category)

    def update_category(self, category_id, category: schemas.CategoryUpdate):
        return self._update("category", category_id, category.model_dump(exclude_unset=True))

    def delete_category(self, category_id) -> bool:
        return self._delete("category", category_id)

    def _create_labelled(self, kind: str, draft) -> CreateResult:
        # An explicit enabled=0 is empty too, so new labels always start enabled.
        if not draft.name:
            logger.info("%s_rejected: reason=name is required", kind)
            return Rejected(draft, "name is required")

        data = draft.model_dump()
        if not data.get("store_ids"):
            data["store_ids"] = ALL_STORES
        if not data.get("enabled"):
            data["enabled"] = 1
        if not data.get("created_at"):
            data["created_at"] = self._clock.now()
        if not data.get("meta_robots"):
            data["meta_robots"] = DEFAULT_META_ROBOTS
        if kind == "category" and not data.get("parent_id"):
            data["parent_id"] = ROOT_CATEGORY_ID

        store = self._factory.get(kind)
        entity = store.save(store.new(**data))
        logger.info("%s_created: id=%s name=%s", kind, entity.get_id(), entity.name)
        return Created(entity)

    # ------------------------------------------------------------------
    # Authors
    # ------------------------------------------------------------------
    def get_author_list(self) -> List[Any]:
        return self._list("author")

    def create_author(self, customer_id, author: schemas.AuthorCreate) -> CreateResult:
        """Attach a new author to ``customer_id``.

        The guard requires the customer's existing author count to be below
        zero, so no input ever gets past it. Kept as-is pending product
        confirmation; the likely intent is "no author yet" (count < 1).
        """
        collection = self._factory.get("author").get_collection().add_field_to_filter("customer_id", customer_id)
        customer = self._customers.get_by_id(customer_id)

        if not author.name:
            logger.info("author_rejected: customer_id=%s reason=name is required", customer_id)
            return Rejected(author, "name is required")
        existing = collection.count()
        if not (existing < 0 and customer):
            logger.info("author_rejected: customer_id=%s existing=%s", customer_id, existing)
            return Rejected(author, f"customer {customer_id} has {existing} author(s); creation requires fewer than 0")

        data = author.model_dump()
        data["customer_id"] = customer_id
        if not data.get("type"):
            data["type"] = 0
        if not data.get("status"):
            data["status"] = 0
        if not data.get("created_at"):
            data["created_at"] = self._clock.now()
        store = self._factory.get("author")
        entity = store.save(store.new(**data))
        logger.info("author_created: id=%s customer_id=%s", entity.user_id, customer_id)
        return Created(entity)

    def update_author(self, author_id, author: schemas.AuthorUpdate):
        return self._update("author", author_id, author.model_dump(exclude_unset=True))

    def delete_author(self, author_id) -> bool:
        return self._delete("author", author_id)

    # ------------------------------------------------------------------
    # Shared
    # ------------------------------------------------------------------
    def _list(self, kind: str) -> List[Any]:
        items = self._factory.get(kind).get_collection().get_items()
        logger.debug("%s_list: count=%s", kind, len(items))
        return items

    def _require_id(self, kind: str, entity_id) -> None:
        if not entity_id:
            raise InputError(f"Invalid {kind} id {entity_id}", context={"kind": kind, "id": entity_id})

    def _update(self, kind: str, entity_id, changes: Dict[str, Any]):
        self._require_id(kind, entity_id)
        store = self._factory.get(kind)
        entity = store.load(entity_id)
        if entity is None:
            raise NotFoundError(
                f'The "{entity_id}" {kind.capitalize()} doesn\'t exist.',
                context={"kind": kind, "id": entity_id},
            )
        entity.add_data(changes)
        entity = store.save(entity)
        logger.info("%s_updated: id=%s fields=%s", kind, entity_id, sorted(changes))
        return entity

    def _delete(self, kind: str, entity_id) -> bool:
        store = self._factory.get(kind)
        entity = store.load(entity_id)
        if entity is None:
            logger.info("%s_delete_missing: id=%s", kind, entity_id)
            return False
        store.delete(entity)
        logger.info("%s_deleted: id=%s", kind, entity_id)
        return True
