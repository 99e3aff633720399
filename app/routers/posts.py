from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.dependencies import get_db, get_post_service
from app.exceptions import NotFoundError
from app.schemas.post import PostCreate, PostResponse, PostUpdate
from app.services.posts import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
async def list_posts(service: PostService = Depends(get_post_service)):
    return await service.list_posts()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, service: PostService = Depends(get_post_service)):
    post = await service.get_post(post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    db: AsyncSession = Depends(get_db),
    service: PostService = Depends(get_post_service),
):
    try:
        post = await service.create_post(
            title=post_data.title,
            content=post_data.content,
            user_id=post_data.user_id,
        )
    except NotFoundError as exc:
        # A missing owner aborts creation as a server error, not a 404
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(exc))

    await db.commit()
    return post


@router.api_route("/{post_id}", methods=["PUT", "PATCH"], response_model=PostResponse)
async def update_post(
    post_id: int,
    update_data: PostUpdate,
    db: AsyncSession = Depends(get_db),
    service: PostService = Depends(get_post_service),
):
    post = await service.update_post(post_id, update_data.model_dump(exclude_unset=True))
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")

    await db.commit()
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    db: AsyncSession = Depends(get_db),
    service: PostService = Depends(get_post_service),
):
    await service.delete_post(post_id)
    await db.commit()
    return None


@router.get("/user/{user_id}/posts", response_model=list[PostResponse])
async def list_posts_of_user(user_id: int, service: PostService = Depends(get_post_service)):
    try:
        return await service.list_posts_of_user(user_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("/user/{user_id}/posts/{post_id}", response_model=PostResponse)
async def get_post_of_user(user_id: int, post_id: int, service: PostService = Depends(get_post_service)):
    try:
        post = await service.get_post_of_user(user_id, post_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User not found")

    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post
