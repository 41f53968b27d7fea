from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from api.cache import ALL_PARTITIONS, CachePartition, QueryCache, get_cache
from api.response import respond
from storage.service import category as category_service

router = APIRouter(prefix="/category")


def _get_user_id(request: Request) -> int:
    return request.state.user_id


class CreateCategoryRequest(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = None


class UpdateCategoryRequest(BaseModel):
    category_id: str
    name: Optional[str] = None
    color: Optional[str] = None


class CategoryIdRequest(BaseModel):
    category_id: str


@router.get("/list")
async def list_categories(request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    result = cache.get_or_load(
        user_id, CachePartition.CATEGORIES, None,
        lambda: category_service.get_categories(user_id),
    )
    return respond(result)


@router.post("")
async def create_category(req: CreateCategoryRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    result = category_service.create_category(user_id, req.name, color=req.color)
    if result.success:
        cache.invalidate(user_id, CachePartition.CATEGORIES)
    return respond(result)


@router.post("/update")
async def update_category(req: UpdateCategoryRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    fields = req.model_dump(exclude={"category_id"}, exclude_unset=True)
    result = category_service.update_category(user_id, req.category_id, **fields)
    # task payloads embed category name and color
    if result.success:
        cache.invalidate(user_id, *ALL_PARTITIONS)
    return respond(result)


@router.post("/delete")
async def delete_category(req: CategoryIdRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    result = category_service.delete_category(user_id, req.category_id)
    if result.success:
        cache.invalidate(user_id, *ALL_PARTITIONS)
    return respond(result)
