# ============================================
# crm/models/issue.py
# ============================================
import uuid

from django.conf import settings
from django.db import models


class Issue(models.Model):
    class Status(models.TextChoices):
        BACKLOG = 'BACKLOG', 'Backlog'
        TODO = 'TODO', 'Todo'
        IN_PROGRESS = 'IN_PROGRESS', 'In progress'
        IN_REVIEW = 'IN_REVIEW', 'In review'
        DONE = 'DONE', 'Done'
        CANCELLED = 'CANCELLED', 'Cancelled'

    class IssueType(models.TextChoices):
        TASK = 'TASK', 'Task'
        BUG = 'BUG', 'Bug'
        STORY = 'STORY', 'Story'
        EPIC = 'EPIC', 'Epic'

    class Priority(models.TextChoices):
        LOWEST = 'LOWEST', 'Lowest'
        LOW = 'LOW', 'Low'
        MEDIUM = 'MEDIUM', 'Medium'
        HIGH = 'HIGH', 'High'
        HIGHEST = 'HIGHEST', 'Highest'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='issues'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    status = models.CharField(
        max_length=12,
        choices=Status.choices,
        default=Status.BACKLOG
    )
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    issue_type = models.CharField(
        max_length=10,
        choices=IssueType.choices,
        default=IssueType.TASK
    )
    assignee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_crm_issues'
    )
    reporter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='reported_crm_issues'
    )
    # Subtasks survive their parent's deletion as top-level issues
    parent = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='subtasks'
    )
    sprint = models.ForeignKey(
        'Sprint',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='issues'
    )
    story_points = models.IntegerField(null=True, blank=True)
    due_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'crm_issues'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['project', 'status'], name='crm_issue_project_status_idx'),
            models.Index(fields=['assignee'], name='crm_issue_assignee_idx'),
            models.Index(fields=['reporter'], name='crm_issue_reporter_idx'),
            models.Index(fields=['sprint'], name='crm_issue_sprint_idx'),
        ]

    def __str__(self):
        return f"{self.project_id} - {self.title}"
