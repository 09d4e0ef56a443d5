# ============================================
# crm/exceptions.py
# ============================================
"""
Domain errors surfaced to API callers.

NotFound and Forbidden subclass Django's own ObjectDoesNotExist and
PermissionDenied so code that already handles those keeps working.
Store failures are re-raised as StoreError subclasses with a generic
message; the driver exception is chained as ``__cause__``.
"""
from django.core.exceptions import ObjectDoesNotExist, PermissionDenied


class CrmError(Exception):
    code = 'CRM_ERROR'


class NotFound(CrmError, ObjectDoesNotExist):
    code = 'NOT_FOUND'

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class Forbidden(CrmError, PermissionDenied):
    code = 'FORBIDDEN'


class StoreError(CrmError):
    code = 'STORE_ERROR'

    def __init__(self, action: str, message: str = "Store operation failed"):
        self.action = action
        super().__init__(message)


class ConstraintViolation(StoreError):
    code = 'CONSTRAINT_VIOLATION'

    def __init__(self, action: str):
        super().__init__(action, f"Cannot {action}: a data constraint was violated")


class StoreUnavailable(StoreError):
    code = 'STORE_UNAVAILABLE'

    def __init__(self, action: str):
        super().__init__(action, f"Cannot {action}: the data store is unavailable")
