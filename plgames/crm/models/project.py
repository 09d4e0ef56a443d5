# ============================================
# crm/models/project.py
# ============================================
import uuid

from django.conf import settings
from django.db import models


class Project(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    key = models.CharField(max_length=10, unique=True, db_index=True)
    description = models.TextField(blank=True, null=True)
    workspace = models.ForeignKey(
        'workspaces.Workspace',
        on_delete=models.CASCADE,
        related_name='crm_projects'
    )
    lead = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='led_crm_projects'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'crm_projects'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['workspace', '-created_at'], name='crm_project_ws_created_idx'),
        ]

    def __str__(self):
        return f"{self.key} - {self.name}"
