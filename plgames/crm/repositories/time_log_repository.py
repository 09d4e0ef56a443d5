# -*- coding: utf-8 -*-
"""
Repository layer for CRM time logs.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

from django.db.models import Sum

from crm.models import TimeLog
from crm.repositories.base import BaseRepository
from crm.store import as_uuid, store_errors

logger = logging.getLogger(__name__)


class TimeLogRepository(BaseRepository):
    model = TimeLog
    updatable = frozenset({"time_spent", "description", "logged_at"})
    user_fields = frozenset({"user_id"})

    def get(self, time_log_id) -> Optional[TimeLog]:
        pk = as_uuid(time_log_id)
        if pk is None:
            return None
        with store_errors("load time log"):
            return self.queryset().select_related("user", "issue__project").filter(id=pk).first()

    def get_by_issue(self, issue_id) -> List[TimeLog]:
        with store_errors("list time logs"):
            qs = self.queryset().select_related("user").filter(issue_id=as_uuid(issue_id))
            return list(qs.order_by("-logged_at"))

    def count_by_issue(self, issue_id) -> int:
        with store_errors("count time logs"):
            return self.queryset().filter(issue_id=as_uuid(issue_id)).count()

    def total_time_spent(self, issue_id) -> Optional[int]:
        """Raw SUM over the issue's logs; ``None`` when there are none."""
        with store_errors("sum time logs"):
            result = self.queryset().filter(issue_id=as_uuid(issue_id)).aggregate(total=Sum("time_spent"))
            return result["total"]

    def create(self, data: Dict[str, Any]) -> TimeLog:
        data = self._clean(data, "create time log")
        with self.store.write("create time log"):
            time_log = self.queryset().create(**data)
        logger.debug("[crm] time log %s created: %sm on issue %s", time_log.id, time_log.time_spent, time_log.issue_id)
        return self.get(time_log.id)

    def update(self, time_log_id, data: Dict[str, Any]) -> TimeLog:
        data = self._clean(data, "update time log")
        with self.store.write("update time log"):
            time_log = self.queryset().get(id=as_uuid(time_log_id))
            self._save_fields(time_log, data)
        logger.debug("[crm] time log %s updated", time_log.id)
        return self.get(time_log.id)

    def delete(self, time_log_id) -> TimeLog:
        with self.store.write("delete time log"):
            time_log = self.queryset().select_related("user").get(id=as_uuid(time_log_id))
            self._delete(time_log)
        logger.debug("[crm] time log %s deleted", time_log.id)
        return time_log
