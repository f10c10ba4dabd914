from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ServiceError(Exception):
    """Consistent service-layer exception with HTTP-friendly metadata."""

    status_code: int
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:  # pragma: no cover - convenience for logging
        return f"{self.status_code} {self.code}: {self.message} | {self.details}"


class ValidationError(ServiceError):
    """A declared field constraint was violated before persisting."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(
            400,
            "VALIDATION_ERROR",
            f"Invalid value for '{field_name}'.",
            {"field": field_name, "reason": reason},
        )

    @property
    def field(self) -> str:
        return self.details["field"]


class NotFoundError(ServiceError):
    def __init__(self, message: str, details: Dict[str, Any] | None = None) -> None:
        super().__init__(404, "NOT_FOUND", message, details or {})


class ConflictError(ServiceError):
    def __init__(self, message: str, details: Dict[str, Any] | None = None) -> None:
        super().__init__(409, "CONFLICT", message, details or {})
