# ============================================
# crm/models/time_log.py
# ============================================
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class TimeLog(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    issue = models.ForeignKey(
        'Issue',
        on_delete=models.CASCADE,
        related_name='time_logs'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='crm_time_logs'
    )
    time_spent = models.PositiveIntegerField(validators=[MinValueValidator(1)])  # minutes
    description = models.TextField(blank=True, null=True)
    logged_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'crm_time_logs'
        ordering = ['-logged_at']
        indexes = [
            models.Index(fields=['issue', '-logged_at'], name='crm_timelog_issue_logged_idx'),
        ]

    def __str__(self):
        return f"{self.time_spent}m on {self.issue_id}"
