from .project_repository import ProjectRepository
from .issue_repository import IssueFilters, IssueRepository
from .sprint_repository import SprintRepository
from .comment_repository import CommentRepository
from .time_log_repository import TimeLogRepository

__all__ = [
    'ProjectRepository',
    'IssueFilters',
    'IssueRepository',
    'SprintRepository',
    'CommentRepository',
    'TimeLogRepository',
]
