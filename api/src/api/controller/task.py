from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from api.cache import CachePartition, QueryCache, TASK_PARTITIONS, get_cache
from api.response import respond
from storage import time_util
from storage.entity.dto import UNSET
from storage.service import task as task_service

router = APIRouter(prefix="/task")

# Query-string value meaning "tasks without a category".
NO_CATEGORY = "none"


def _get_user_id(request: Request) -> int:
    return request.state.user_id


def _category_filter(category_id: Optional[str]):
    if category_id is None:
        return UNSET
    return None if category_id == NO_CATEGORY else category_id


class CreateTaskRequest(BaseModel):
    title: Optional[str] = None
    scheduled_at: Optional[str] = None
    category_id: Optional[str] = None
    priority: Optional[str] = None
    memo: Optional[str] = None


class UpdateTaskRequest(BaseModel):
    task_id: str
    title: Optional[str] = None
    scheduled_at: Optional[str] = None
    category_id: Optional[str] = None
    priority: Optional[str] = None
    memo: Optional[str] = None


class TaskIdRequest(BaseModel):
    task_id: str


class SkipTaskRequest(BaseModel):
    task_id: str
    reason: Optional[str] = None


class ReorderTasksRequest(BaseModel):
    task_ids: List[str]


def _mutated(cache: QueryCache, user_id: int, result):
    if result.success:
        cache.invalidate(user_id, *TASK_PARTITIONS)
    return respond(result)


@router.get("/today")
async def get_today_tasks(request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    result = cache.get_or_load(
        user_id, CachePartition.TODAY, time_util.today(),
        lambda: task_service.get_today_tasks(user_id),
    )
    return respond(result)


@router.get("/date")
async def get_tasks_by_date(request: Request, date: str = Query(...), cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    # is_past/is_future depend on the current day
    key = (date, time_util.today())
    result = cache.get_or_load(
        user_id, CachePartition.DATE, key,
        lambda: task_service.get_tasks_by_date(user_id, date),
    )
    return respond(result)


@router.get("/search")
async def search_tasks(
    request: Request,
    keyword: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    category_id: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    date_from: Optional[str] = Query(None),
    date_to: Optional[str] = Query(None),
    cache: QueryCache = Depends(get_cache),
):
    user_id = _get_user_id(request)
    filters = {k: v for k, v in dict(
        keyword=keyword, status=status, priority=priority,
        date_from=date_from, date_to=date_to,
    ).items() if v is not None}
    category = _category_filter(category_id)
    if category is not UNSET:
        filters["category_id"] = category
    key = tuple(sorted(filters.items()))
    result = cache.get_or_load(
        user_id, CachePartition.SEARCH, key,
        lambda: task_service.search_tasks(user_id, **filters),
    )
    return respond(result)


@router.get("/list")
async def list_tasks(request: Request, category_id: Optional[str] = Query(None), cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    category = _category_filter(category_id)
    result = cache.get_or_load(
        user_id, CachePartition.LIST, category_id,
        lambda: task_service.get_all_tasks(user_id, category_id=category),
    )
    return respond(result)


@router.get("/stats")
async def get_monthly_stats(request: Request, month: str = Query(...), cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    # overdue counts are relative to the current day
    key = (month, time_util.today())
    result = cache.get_or_load(
        user_id, CachePartition.MONTH, key,
        lambda: task_service.get_monthly_stats(user_id, month),
    )
    return respond(result)


@router.post("")
async def create_task(req: CreateTaskRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    result = task_service.create_task(
        user_id, req.title, scheduled_at=req.scheduled_at, category_id=req.category_id,
        priority=req.priority, memo=req.memo,
    )
    return _mutated(cache, user_id, result)


@router.post("/update")
async def update_task(req: UpdateTaskRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    # exclude_unset keeps explicit nulls (clear the field) apart from omitted fields
    fields = req.model_dump(exclude={"task_id"}, exclude_unset=True)
    result = task_service.update_task(user_id, req.task_id, **fields)
    return _mutated(cache, user_id, result)


@router.post("/complete")
async def complete_task(req: TaskIdRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    return _mutated(cache, user_id, task_service.complete_task(user_id, req.task_id))


@router.post("/uncomplete")
async def uncomplete_task(req: TaskIdRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    return _mutated(cache, user_id, task_service.uncomplete_task(user_id, req.task_id))


@router.post("/skip")
async def skip_task(req: SkipTaskRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    return _mutated(cache, user_id, task_service.skip_task(user_id, req.task_id, reason=req.reason))


@router.post("/unskip")
async def unskip_task(req: TaskIdRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    return _mutated(cache, user_id, task_service.unskip_task(user_id, req.task_id))


@router.post("/delete")
async def delete_task(req: TaskIdRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    return _mutated(cache, user_id, task_service.delete_task(user_id, req.task_id))


@router.post("/reorder")
async def reorder_tasks(req: ReorderTasksRequest, request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    return _mutated(cache, user_id, task_service.reorder_tasks(user_id, req.task_ids))
