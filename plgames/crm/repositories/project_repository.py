# -*- coding: utf-8 -*-
"""
Repository layer for CRM projects.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

from django.db.models import Count, QuerySet

from crm.models import Project
from crm.repositories.base import BaseRepository
from crm.store import as_uuid, store_errors

logger = logging.getLogger(__name__)


class ProjectRepository(BaseRepository):
    model = Project
    updatable = frozenset({"name", "key", "description", "lead_id"})
    user_fields = frozenset({"lead_id"})

    def _with_counts(self, qs: QuerySet) -> QuerySet:
        return qs.annotate(issues_count=Count("issues", distinct=True))

    # ============== Queries ==============
    def get(self, project_id) -> Optional[Project]:
        pk = as_uuid(project_id)
        if pk is None:
            return None
        with store_errors("load project"):
            qs = self.queryset().select_related("workspace", "lead").filter(id=pk)
            return self._with_counts(qs).first()

    def get_by_workspace(self, workspace_id) -> List[Project]:
        pk = as_uuid(workspace_id)
        if pk is None:
            return []
        with store_errors("list projects"):
            qs = self.queryset().select_related("lead").filter(workspace_id=pk)
            return list(self._with_counts(qs).order_by("-created_at"))

    def count_by_workspace(self, workspace_id) -> int:
        pk = as_uuid(workspace_id)
        if pk is None:
            return 0
        with store_errors("count projects"):
            return self.queryset().filter(workspace_id=pk).count()

    # ============== Mutations ==============
    def create(self, data: Dict[str, Any]) -> Project:
        data = self._clean(data, "create project")
        with self.store.write("create project"):
            project = self.queryset().create(**data)
        logger.debug("[crm] project %s created: %s", project.id, project.name)
        return self.get(project.id)

    def update(self, project_id, data: Dict[str, Any]) -> Project:
        data = self._clean(data, "update project")
        with self.store.write("update project"):
            project = self.queryset().get(id=as_uuid(project_id))
            self._save_fields(project, data)
        logger.debug("[crm] project %s updated: %s", project.id, project.name)
        return self.get(project.id)

    def delete(self, project_id) -> Project:
        # issues, sprints, comments and time logs go with it in one transaction
        with self.store.write("delete project"):
            project = self.queryset().select_related("workspace", "lead").get(id=as_uuid(project_id))
            self._delete(project)
        logger.debug("[crm] project %s deleted: %s", project.id, project.name)
        return project
