from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """Base class for failures that are reported to the caller with an HTTP status."""

    status_code = 500
    default_message = "Internal Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"detail": self.message}


class Unauthenticated(CatalogError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(CatalogError):
    status_code = 403
    default_message = "Unauthorized"


class NotFound(CatalogError):
    status_code = 404
    default_message = "Not found"


class ValidationError(CatalogError):
    # Missing or malformed fields share the 404 "Invalid Request" answer
    status_code = 404
    default_message = "Invalid Request"

    def __init__(self, errors: Optional[List[Dict[str, Any]]] = None, message: Optional[str] = None):
        self.errors = errors or []
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {"detail": self.message, "errors": self.errors}


class ReferenceConflict(CatalogError):
    status_code = 409
    default_message = "Resource is still referenced"


class PersistenceError(CatalogError):
    status_code = 500
    default_message = "Internal Error"
