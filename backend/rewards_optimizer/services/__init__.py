from .errors import ConflictError, NotFoundError, ServiceError, ValidationError

__all__ = [
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
