# -*- coding: utf-8 -*-
"""
Per-request wiring: one Store, the service built on it, and the
permission checker, attached to the request as ``request.crm``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS

from crm.permissions import WorkspacePermission
from crm.services.crm_service import CrmService
from crm.store import Store


@dataclass(frozen=True)
class CrmContext:
    service: CrmService
    permission: WorkspacePermission

    @classmethod
    def for_store(cls, store: Store) -> "CrmContext":
        return cls(service=CrmService.for_store(store), permission=WorkspacePermission(store))


def attach_crm(request, store: Optional[Store] = None):
    if store is None:
        store = Store(getattr(settings, "CRM_DATABASE_ALIAS", DEFAULT_DB_ALIAS))
    request.crm = CrmContext.for_store(store)
    return request
