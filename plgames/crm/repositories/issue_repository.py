# -*- coding: utf-8 -*-
"""
Repository layer for CRM issues.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import logging

from django.db.models import Count, Prefetch, QuerySet

from crm.models import Comment, Issue, TimeLog
from crm.repositories.base import BaseRepository
from crm.store import as_user_id, as_uuid, store_errors

logger = logging.getLogger(__name__)


@dataclass
class IssueFilters:
    """Equality filters for issue listings; unset fields are ignored."""
    status: Optional[str] = None
    assignee_id: Optional[Any] = None
    sprint_id: Optional[Any] = None
    issue_type: Optional[str] = None
    priority: Optional[str] = None

    def as_lookup(self) -> Optional[Dict[str, Any]]:
        """Lookup kwargs, or ``None`` when an id filter cannot match any row."""
        assignee_id = as_user_id(self.assignee_id)
        sprint_id = as_uuid(self.sprint_id)
        if (self.assignee_id is not None and assignee_id is None) or (self.sprint_id is not None and sprint_id is None):
            return None
        lookup = {
            "status": self.status,
            "assignee_id": assignee_id,
            "sprint_id": sprint_id,
            "issue_type": self.issue_type,
            "priority": self.priority,
        }
        return {k: v for k, v in lookup.items() if v is not None}


class IssueRepository(BaseRepository):
    model = Issue
    updatable = frozenset({
        "title", "description", "assignee_id", "sprint_id", "status",
        "priority", "issue_type", "story_points", "due_date",
    })
    user_fields = frozenset({"assignee_id", "reporter_id"})

    def _with_counts(self, qs: QuerySet) -> QuerySet:
        return qs.annotate(
            comments_count=Count("comments", distinct=True),
            time_logs_count=Count("time_logs", distinct=True),
        )

    def _detail_queryset(self) -> QuerySet:
        comments = self.store.objects(Comment).select_related("author").order_by("created_at")
        time_logs = self.store.objects(TimeLog).select_related("user").order_by("-logged_at")
        qs = self.queryset().select_related(
            "project", "assignee", "reporter", "sprint", "parent"
        ).prefetch_related(
            Prefetch("comments", queryset=comments),
            Prefetch("time_logs", queryset=time_logs),
        )
        return self._with_counts(qs)

    # ============== Queries ==============
    def get(self, issue_id) -> Optional[Issue]:
        pk = as_uuid(issue_id)
        if pk is None:
            return None
        with store_errors("load issue"):
            return self._detail_queryset().filter(id=pk).first()

    def get_by_project(self, project_id, filters: Optional[IssueFilters] = None) -> List[Issue]:
        pk = as_uuid(project_id)
        if pk is None:
            return []
        lookup = filters.as_lookup() if filters else {}
        if lookup is None:
            return []
        with store_errors("list issues"):
            qs = self.queryset().select_related("assignee", "reporter", "sprint").filter(project_id=pk, **lookup)
            return list(self._with_counts(qs).order_by("-created_at"))

    def get_subtasks(self, issue_id) -> List[Issue]:
        with store_errors("list subtasks"):
            qs = self.queryset().select_related("assignee", "reporter").filter(parent_id=as_uuid(issue_id))
            return list(qs.order_by("created_at"))

    def count_by_project(self, project_id) -> int:
        with store_errors("count issues"):
            return self.queryset().filter(project_id=as_uuid(project_id)).count()

    def count_by_sprint(self, sprint_id) -> int:
        with store_errors("count issues"):
            return self.queryset().filter(sprint_id=as_uuid(sprint_id)).count()

    def count_by_status(self, project_id) -> Dict[str, int]:
        """Grouped counts; statuses without issues are absent from the result."""
        with store_errors("count issues by status"):
            rows = (
                self.queryset()
                .filter(project_id=as_uuid(project_id))
                .order_by()
                .values("status")
                .annotate(total=Count("id"))
            )
            return {row["status"]: row["total"] for row in rows}

    # ============== Mutations ==============
    def create(self, data: Dict[str, Any]) -> Issue:
        data = self._clean(data, "create issue")
        with self.store.write("create issue"):
            issue = self.queryset().create(**data)
        logger.debug("[crm] issue %s created: %s", issue.id, issue.title)
        return self.get(issue.id)

    def update(self, issue_id, data: Dict[str, Any]) -> Issue:
        data = self._clean(data, "update issue")
        with self.store.write("update issue"):
            issue = self.queryset().get(id=as_uuid(issue_id))
            self._save_fields(issue, data)
        logger.debug("[crm] issue %s updated: %s", issue.id, issue.title)
        return self.get(issue.id)

    def delete(self, issue_id) -> Issue:
        with self.store.write("delete issue"):
            issue = self.queryset().select_related("project").get(id=as_uuid(issue_id))
            self._delete(issue)
        logger.debug("[crm] issue %s deleted: %s", issue.id, issue.title)
        return issue
