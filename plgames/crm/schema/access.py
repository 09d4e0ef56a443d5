# ============================================
# crm/schema/access.py
# ============================================
"""
Authorization protocol shared by every CRM resolver.

Order is fixed for all operations:
1. the target (or its ancestor project) is loaded; absent -> NotFound
2. its workspace is derived through the project
3. caller must be a member of that workspace; otherwise Forbidden
4. ownership-gated mutations additionally require caller == author/user
"""
from datetime import datetime
from enum import Enum

from django.utils import timezone

from crm.exceptions import Forbidden


def crm(info):
    return info.context.crm


def current_user(info):
    user = getattr(info.context, 'user', None)
    if user is None or not user.is_authenticated:
        raise Forbidden('Authentication required')
    return user


def authorize_workspace(info, workspace_id, message):
    user = current_user(info)
    crm(info).permission.assert_workspace_member(workspace_id, user, message)
    return user


def authorize_project(info, project, message):
    return authorize_workspace(info, project.workspace_id, message)


def authorize_owner(info, owner_id, message):
    user = current_user(info)
    crm(info).permission.assert_owner(owner_id, user, message)
    return user


def enum_value(value):
    return value.value if isinstance(value, Enum) else value


def _plain(value):
    if isinstance(value, datetime) and timezone.is_naive(value):
        # offset-less input is read in the current timezone
        return timezone.make_aware(value)
    return enum_value(value)


def input_data(value, renames=None):
    """Only the fields the caller supplied, with enums unwrapped and datetimes aware."""
    renames = renames or {}
    return {renames.get(k, k): _plain(v) for k, v in dict(value).items()}
