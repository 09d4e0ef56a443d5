# -*- coding: utf-8 -*-
"""
Parsing of ids that arrive as opaque strings from API callers.

Both helpers return ``None`` for anything they cannot parse, so callers
decide whether that means "no match" or a rejected write.
"""
from __future__ import annotations
from typing import Any, Optional
import uuid

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError


def as_uuid(value) -> Optional[uuid.UUID]:
    """Parse an entity id; malformed ids become ``None``."""
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def as_user_id(value) -> Optional[Any]:
    """Parse a user reference into the user model's primary-key type."""
    if value is None:
        return None
    try:
        return get_user_model()._meta.pk.to_python(value)
    except ValidationError:
        return None
