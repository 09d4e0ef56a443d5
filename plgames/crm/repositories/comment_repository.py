# -*- coding: utf-8 -*-
"""
Repository layer for CRM issue comments.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

from crm.models import Comment
from crm.repositories.base import BaseRepository
from crm.store import as_uuid, store_errors

logger = logging.getLogger(__name__)


class CommentRepository(BaseRepository):
    model = Comment
    updatable = frozenset({"content"})
    user_fields = frozenset({"author_id"})

    def get(self, comment_id) -> Optional[Comment]:
        pk = as_uuid(comment_id)
        if pk is None:
            return None
        with store_errors("load comment"):
            return self.queryset().select_related("author", "issue__project").filter(id=pk).first()

    def get_by_issue(self, issue_id) -> List[Comment]:
        with store_errors("list comments"):
            qs = self.queryset().select_related("author").filter(issue_id=as_uuid(issue_id))
            return list(qs.order_by("created_at"))

    def count_by_issue(self, issue_id) -> int:
        with store_errors("count comments"):
            return self.queryset().filter(issue_id=as_uuid(issue_id)).count()

    def create(self, data: Dict[str, Any]) -> Comment:
        data = self._clean(data, "create comment")
        with self.store.write("create comment"):
            comment = self.queryset().create(**data)
        logger.debug("[crm] comment %s created on issue %s", comment.id, comment.issue_id)
        return self.get(comment.id)

    def update(self, comment_id, data: Dict[str, Any]) -> Comment:
        data = self._clean(data, "update comment")
        with self.store.write("update comment"):
            comment = self.queryset().get(id=as_uuid(comment_id))
            self._save_fields(comment, data)
        logger.debug("[crm] comment %s updated", comment.id)
        return self.get(comment.id)

    def delete(self, comment_id) -> Comment:
        with self.store.write("delete comment"):
            comment = self.queryset().select_related("author").get(id=as_uuid(comment_id))
            self._delete(comment)
        logger.debug("[crm] comment %s deleted", comment.id)
        return comment
