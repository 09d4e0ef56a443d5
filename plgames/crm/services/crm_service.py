# -*- coding: utf-8 -*-
"""
Service layer for the CRM.

Aggregates the per-entity repositories behind one facade:
- turns absent rows (and the store's DoesNotExist on update/delete) into
  ``NotFound`` carrying the entity id;
- fills aggregate results so callers never see gaps (every status key is
  present, time totals default to 0).

No authorization happens here; callers check workspace membership first.
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from django.core.exceptions import ObjectDoesNotExist

from crm.exceptions import NotFound
from crm.models import Comment, Issue, Project, Sprint, TimeLog
from crm.repositories import (
    CommentRepository,
    IssueFilters,
    IssueRepository,
    ProjectRepository,
    SprintRepository,
    TimeLogRepository,
)
from crm.store import Store


@contextmanager
def _not_found_as(entity: str, entity_id) -> Iterator[None]:
    try:
        yield
    except NotFound:
        raise
    except ObjectDoesNotExist as ex:
        raise NotFound(entity, entity_id) from ex


class CrmService:

    def __init__(
        self,
        *,
        projects: ProjectRepository,
        issues: IssueRepository,
        sprints: SprintRepository,
        comments: CommentRepository,
        time_logs: TimeLogRepository,
    ):
        self.projects = projects
        self.issues = issues
        self.sprints = sprints
        self.comments = comments
        self.time_logs = time_logs

    @classmethod
    def for_store(cls, store: Store) -> "CrmService":
        return cls(
            projects=ProjectRepository(store),
            issues=IssueRepository(store),
            sprints=SprintRepository(store),
            comments=CommentRepository(store),
            time_logs=TimeLogRepository(store),
        )

    # ============== Projects ==============
    def get_project(self, project_id) -> Project:
        project = self.projects.get(project_id)
        if project is None:
            raise NotFound("Project", project_id)
        return project

    def get_projects_by_workspace(self, workspace_id) -> List[Project]:
        return self.projects.get_by_workspace(workspace_id)

    def count_projects_by_workspace(self, workspace_id) -> int:
        return self.projects.count_by_workspace(workspace_id)

    def create_project(self, data: Dict[str, Any]) -> Project:
        return self.projects.create(data)

    def update_project(self, project_id, data: Dict[str, Any]) -> Project:
        with _not_found_as("Project", project_id):
            return self.projects.update(project_id, data)

    def delete_project(self, project_id) -> Project:
        with _not_found_as("Project", project_id):
            return self.projects.delete(project_id)

    # ============== Issues ==============
    def get_issue(self, issue_id) -> Issue:
        issue = self.issues.get(issue_id)
        if issue is None:
            raise NotFound("Issue", issue_id)
        return issue

    def get_issues_by_project(self, project_id, filters: Optional[IssueFilters] = None) -> List[Issue]:
        return self.issues.get_by_project(project_id, filters)

    def get_subtasks(self, issue_id) -> List[Issue]:
        return self.issues.get_subtasks(issue_id)

    def count_issues_by_project(self, project_id) -> int:
        return self.issues.count_by_project(project_id)

    def count_issues_by_sprint(self, sprint_id) -> int:
        return self.issues.count_by_sprint(sprint_id)

    def create_issue(self, data: Dict[str, Any]) -> Issue:
        return self.issues.create(data)

    def update_issue(self, issue_id, data: Dict[str, Any]) -> Issue:
        with _not_found_as("Issue", issue_id):
            return self.issues.update(issue_id, data)

    def delete_issue(self, issue_id) -> Issue:
        with _not_found_as("Issue", issue_id):
            return self.issues.delete(issue_id)

    def get_issue_status_count(self, project_id) -> Dict[str, int]:
        """Issue count per status, with every status present."""
        counts = {status: 0 for status in Issue.Status.values}
        counts.update(self.issues.count_by_status(project_id))
        return counts

    # ============== Sprints ==============
    def get_sprint(self, sprint_id) -> Sprint:
        sprint = self.sprints.get(sprint_id)
        if sprint is None:
            raise NotFound("Sprint", sprint_id)
        return sprint

    def get_sprints_by_project(self, project_id) -> List[Sprint]:
        return self.sprints.get_by_project(project_id)

    def create_sprint(self, data: Dict[str, Any]) -> Sprint:
        return self.sprints.create(data)

    def update_sprint(self, sprint_id, data: Dict[str, Any]) -> Sprint:
        with _not_found_as("Sprint", sprint_id):
            return self.sprints.update(sprint_id, data)

    def delete_sprint(self, sprint_id) -> Sprint:
        with _not_found_as("Sprint", sprint_id):
            return self.sprints.delete(sprint_id)

    # ============== Comments ==============
    def get_comment(self, comment_id) -> Comment:
        comment = self.comments.get(comment_id)
        if comment is None:
            raise NotFound("Comment", comment_id)
        return comment

    def get_comments_by_issue(self, issue_id) -> List[Comment]:
        return self.comments.get_by_issue(issue_id)

    def count_comments_by_issue(self, issue_id) -> int:
        return self.comments.count_by_issue(issue_id)

    def create_comment(self, data: Dict[str, Any]) -> Comment:
        return self.comments.create(data)

    def update_comment(self, comment_id, data: Dict[str, Any]) -> Comment:
        with _not_found_as("Comment", comment_id):
            return self.comments.update(comment_id, data)

    def delete_comment(self, comment_id) -> Comment:
        with _not_found_as("Comment", comment_id):
            return self.comments.delete(comment_id)

    # ============== Time logs ==============
    def get_time_log(self, time_log_id) -> TimeLog:
        time_log = self.time_logs.get(time_log_id)
        if time_log is None:
            raise NotFound("TimeLog", time_log_id)
        return time_log

    def get_time_logs_by_issue(self, issue_id) -> List[TimeLog]:
        return self.time_logs.get_by_issue(issue_id)

    def count_time_logs_by_issue(self, issue_id) -> int:
        return self.time_logs.count_by_issue(issue_id)

    def create_time_log(self, data: Dict[str, Any]) -> TimeLog:
        return self.time_logs.create(data)

    def update_time_log(self, time_log_id, data: Dict[str, Any]) -> TimeLog:
        with _not_found_as("TimeLog", time_log_id):
            return self.time_logs.update(time_log_id, data)

    def delete_time_log(self, time_log_id) -> TimeLog:
        with _not_found_as("TimeLog", time_log_id):
            return self.time_logs.delete(time_log_id)

    def get_total_time_spent(self, issue_id) -> int:
        return self.time_logs.total_time_spent(issue_id) or 0
