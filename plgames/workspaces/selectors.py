# -*- coding: utf-8 -*-
"""
Selector layer for workspace membership (read-only lookups).
"""
from __future__ import annotations
from django.db import DEFAULT_DB_ALIAS

from workspaces.ids import as_uuid
from workspaces.models import WorkspaceMember


def is_workspace_member(workspace_id, user_id, using: str = DEFAULT_DB_ALIAS) -> bool:
    """True when ``user_id`` holds any membership row in the workspace."""
    pk = as_uuid(workspace_id)
    if pk is None or user_id is None:
        return False
    return WorkspaceMember.objects.using(using).filter(workspace_id=pk, user_id=user_id).exists()
