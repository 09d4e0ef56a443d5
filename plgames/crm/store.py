# -*- coding: utf-8 -*-
"""
Store handle shared by the CRM repositories.

A ``Store`` is bound to one database alias and is passed explicitly to
every repository at construction; nothing in the CRM reaches for a
module-level connection.
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Type
import logging

from django.db import (
    DEFAULT_DB_ALIAS,
    DatabaseError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    transaction,
)
from django.db.models import Model, QuerySet

from crm.exceptions import ConstraintViolation, StoreUnavailable
from workspaces.ids import as_uuid, as_user_id  # noqa: F401

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Translate driver-level failures into CRM store errors."""
    try:
        yield
    except IntegrityError as ex:
        logger.warning("[crm] %s rejected by store: %s", action, ex)
        raise ConstraintViolation(action) from ex
    except (OperationalError, InterfaceError) as ex:
        logger.exception("[crm] %s failed, store unreachable", action)
        raise StoreUnavailable(action) from ex
    except DatabaseError as ex:
        logger.exception("[crm] %s failed in store", action)
        raise StoreUnavailable(action) from ex


@dataclass(frozen=True)
class Store:
    alias: str = DEFAULT_DB_ALIAS

    def objects(self, model: Type[Model]) -> QuerySet:
        return model._default_manager.using(self.alias)

    def atomic(self):
        return transaction.atomic(using=self.alias)

    @contextmanager
    def write(self, action: str) -> Iterator[None]:
        # savepoint is rolled back before the error is translated
        with store_errors(action):
            with self.atomic():
                yield
