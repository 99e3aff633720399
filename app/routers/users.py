from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.dependencies import get_db, get_user_service
from app.exceptions import ConflictError
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    # Soft-deleted users are listed too
    return await service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = await service.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    db: AsyncSession = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    try:
        new_user = await service.create_user(name=user.name, email=user.email)
        await db.commit()
        return new_user
    except ConflictError as exc:
        await db.rollback()
        # Constraint violations surface as server errors
        raise HTTPException(status_code=500, detail=str(exc))


@router.api_route("/{user_id}", methods=["PUT", "PATCH"], response_model=UserResponse)
async def update_user(
    user_id: int,
    user_update: UserUpdate,
    db: AsyncSession = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    try:
        user = await service.update_user(user_id, user_update.model_dump(exclude_unset=True))
    except ConflictError as exc:
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(exc))

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    await db.commit()
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    await service.delete_user(user_id)
    await db.commit()
    return None
