from fastapi import HTTPException

from rewards_optimizer.services.errors import ServiceError


def error_payload(code: str, message: str, details: dict) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
        }
    }


def to_http_exception(exc: ServiceError) -> HTTPException:
    return HTTPException(
        status_code=exc.status_code,
        detail=error_payload(exc.code, exc.message, exc.details),
    )
