from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from api.cache import ALL_PARTITIONS, QueryCache, get_cache
from api.response import respond
from storage.service import user as user_service

router = APIRouter(prefix="/account")


def _get_user_id(request: Request) -> int:
    return request.state.user_id


class ChangeEmailRequest(BaseModel):
    email: str


@router.get("/me")
async def get_me(request: Request):
    user_id = _get_user_id(request)
    user = user_service.get_user(user_id)
    return user.to_dict() if user else None


@router.post("/email")
async def change_email(req: ChangeEmailRequest, request: Request):
    user_id = _get_user_id(request)
    return respond(user_service.change_email(user_id, req.email))


@router.post("/delete")
async def delete_account(request: Request, cache: QueryCache = Depends(get_cache)):
    user_id = _get_user_id(request)
    result = user_service.delete_account(user_id)
    if result.success:
        cache.invalidate(user_id, *ALL_PARTITIONS)
    return respond(result)
