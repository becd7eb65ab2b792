"""User Routes — CRUD, lookups and existence checks for users.

Invariants:
    - Static path segments (/username, /email, /role, /exists) are matched
      before /{user_id} because user_id only accepts UUIDs
    - Passwords are accepted in requests and never returned
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from repairshop.api.deps import get_user_service
from repairshop.core.domain_types import Role, UserId
from repairshop.schemas.common import DeletedResponse, ExistsResponse
from repairshop.schemas.user import UserCreate, UserResponse, UserUpdate
from repairshop.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    return await service.create(body)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_all()


@router.get("/username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str, service: UserService = Depends(get_user_service),
):
    return await service.get_by_username(username)


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str, service: UserService = Depends(get_user_service),
):
    return await service.get_by_email(email)


@router.get("/role/{role}", response_model=list[UserResponse])
async def list_users_by_role(
    role: Role, service: UserService = Depends(get_user_service),
):
    return await service.list_by_role(role)


@router.get("/exists/username/{username}", response_model=ExistsResponse)
async def username_exists(
    username: str, service: UserService = Depends(get_user_service),
):
    return ExistsResponse(exists=await service.exists_by_username(username))


@router.get("/exists/email/{email}", response_model=ExistsResponse)
async def email_exists(
    email: str, service: UserService = Depends(get_user_service),
):
    return ExistsResponse(exists=await service.exists_by_email(email))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    return await service.get_by_id(UserId(user_id))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID, body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    return await service.update(UserId(user_id), body)


@router.delete("/{user_id}", response_model=DeletedResponse)
async def delete_user(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    await service.delete(UserId(user_id))
    return DeletedResponse(message="User deleted successfully", id=user_id)
