# -*- coding: utf-8 -*-
"""
Repository base for the CRM (pure DB access, no business rules).
"""
from __future__ import annotations
from typing import Any, Dict, List, Type

from django.db.models import Model, QuerySet

from crm.exceptions import ConstraintViolation
from crm.store import Store, as_user_id


class BaseRepository:
    model: Type[Model]
    # fields an update may touch; anything else in the patch is ignored
    updatable: frozenset = frozenset()
    # foreign keys to the user model, parsed before they reach the ORM
    user_fields: frozenset = frozenset()

    def __init__(self, store: Store):
        self.store = store

    def queryset(self) -> QuerySet:
        return self.store.objects(self.model)

    def _clean(self, data: Dict[str, Any], action: str) -> Dict[str, Any]:
        cleaned = dict(data)
        for k in self.user_fields.intersection(cleaned):
            if cleaned[k] is None:
                continue
            user_id = as_user_id(cleaned[k])
            if user_id is None:
                raise ConstraintViolation(action)
            cleaned[k] = user_id
        return cleaned

    def _save_fields(self, obj: Model, patch: Dict[str, Any]) -> Model:
        fields: List[str] = []
        for k, v in patch.items():
            if k in self.updatable:
                setattr(obj, k, v)
                fields.append(k)
        if fields:
            if "updated_at" in [f.name for f in obj._meta.fields]:
                fields.append("updated_at")
            obj.save(using=self.store.alias, update_fields=fields)
        return obj

    def _delete(self, obj: Model) -> Model:
        # Django clears the pk on delete; callers still need the id
        pk = obj.pk
        obj.delete(using=self.store.alias)
        obj.pk = pk
        return obj
