# -*- coding: utf-8 -*-
"""
Access checks for CRM entry points.

Membership is looked up in the ``workspaces`` app through the same store
handle the repositories use.
"""
from __future__ import annotations
import logging

from crm.exceptions import Forbidden
from crm.store import Store, store_errors
from workspaces.selectors import is_workspace_member

logger = logging.getLogger(__name__)


class WorkspacePermission:

    def __init__(self, store: Store):
        self.store = store

    def is_workspace_member(self, workspace_id, user_id) -> bool:
        with store_errors("check workspace membership"):
            return is_workspace_member(workspace_id, user_id, using=self.store.alias)

    def assert_workspace_member(self, workspace_id, user, message: str) -> None:
        if not self.is_workspace_member(workspace_id, user.pk):
            logger.info("[crm] denied user=%s workspace=%s: %s", user.pk, workspace_id, message)
            raise Forbidden(message)

    @staticmethod
    def assert_owner(owner_id, user, message: str) -> None:
        if str(owner_id) != str(user.pk):
            logger.info("[crm] denied user=%s owner=%s: %s", user.pk, owner_id, message)
            raise Forbidden(message)
