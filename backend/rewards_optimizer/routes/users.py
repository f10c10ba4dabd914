from fastapi import APIRouter, Depends, HTTPException, status

from rewards_optimizer.dependencies.errors import error_payload, to_http_exception
from rewards_optimizer.dependencies.services import get_user_service
from rewards_optimizer.models.user import UserCreate, UserResponse
from rewards_optimizer.services.errors import ServiceError
from rewards_optimizer.services.user_service import UserService

router = APIRouter(
    prefix="/api/users",
    tags=["users"]
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Sign up a new user.

    Validation:
    - username must not already exist
    - email must not already exist
    """
    try:
        return service.create_user(payload)
    except ServiceError as exc:
        raise to_http_exception(exc)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error_payload("NOT_FOUND", "User not found.", {"user_id": user_id}),
        )
    return user
