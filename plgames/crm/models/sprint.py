# ============================================
# crm/models/sprint.py
# ============================================
import uuid

from django.db import models


class Sprint(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='sprints'
    )
    name = models.CharField(max_length=255)
    goal = models.TextField(blank=True, null=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    is_active = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'crm_sprints'
        ordering = ['-start_date']
        indexes = [
            models.Index(fields=['project', 'is_active'], name='crm_sprint_project_active_idx'),
        ]

    def __str__(self):
        return f"{self.project_id} - {self.name}"
