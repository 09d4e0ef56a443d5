# -*- coding: utf-8 -*-
"""
Repository layer for CRM sprints.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

from django.db.models import Count, Prefetch, QuerySet

from crm.models import Issue, Sprint
from crm.repositories.base import BaseRepository
from crm.store import as_uuid, store_errors

logger = logging.getLogger(__name__)


class SprintRepository(BaseRepository):
    model = Sprint
    updatable = frozenset({"name", "goal", "start_date", "end_date", "is_active"})

    def _with_counts(self, qs: QuerySet) -> QuerySet:
        return qs.annotate(issues_count=Count("issues", distinct=True))

    # ============== Queries ==============
    def get(self, sprint_id) -> Optional[Sprint]:
        pk = as_uuid(sprint_id)
        if pk is None:
            return None
        issues = self.store.objects(Issue).select_related("assignee", "reporter")
        with store_errors("load sprint"):
            qs = self.queryset().select_related("project").prefetch_related(
                Prefetch("issues", queryset=issues)
            ).filter(id=pk)
            return self._with_counts(qs).first()

    def get_by_project(self, project_id) -> List[Sprint]:
        pk = as_uuid(project_id)
        if pk is None:
            return []
        with store_errors("list sprints"):
            qs = self.queryset().filter(project_id=pk)
            return list(self._with_counts(qs).order_by("-start_date"))

    # ============== Mutations ==============
    def create(self, data: Dict[str, Any]) -> Sprint:
        with self.store.write("create sprint"):
            sprint = self.queryset().create(**data)
        logger.debug("[crm] sprint %s created: %s", sprint.id, sprint.name)
        return self.get(sprint.id)

    def update(self, sprint_id, data: Dict[str, Any]) -> Sprint:
        with self.store.write("update sprint"):
            sprint = self.queryset().get(id=as_uuid(sprint_id))
            self._save_fields(sprint, data)
        logger.debug("[crm] sprint %s updated: %s", sprint.id, sprint.name)
        return self.get(sprint.id)

    def delete(self, sprint_id) -> Sprint:
        # issues stay in the project with their sprint cleared
        with self.store.write("delete sprint"):
            sprint = self.queryset().select_related("project").get(id=as_uuid(sprint_id))
            self._delete(sprint)
        logger.debug("[crm] sprint %s deleted: %s", sprint.id, sprint.name)
        return sprint
