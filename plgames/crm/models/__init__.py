# ============================================
# crm/models/__init__.py
# ============================================
from .project import Project
from .issue import Issue
from .sprint import Sprint
from .comment import Comment
from .time_log import TimeLog

__all__ = [
    'Project',
    'Issue',
    'Sprint',
    'Comment',
    'TimeLog',
]
