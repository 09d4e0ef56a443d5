# ============================================
# crm/models/comment.py
# ============================================
import uuid

from django.conf import settings
from django.db import models


class Comment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    issue = models.ForeignKey(
        'Issue',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='crm_comments'
    )
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'crm_comments'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['issue', 'created_at'], name='crm_comment_issue_created_idx'),
        ]

    def __str__(self):
        return f"Comment on {self.issue_id}"
