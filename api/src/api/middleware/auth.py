from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from api.response import UnicodeJSONResponse
from storage.service import user as user_service


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolve the bearer token to request.state.user_id for /api routes."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or not request.url.path.startswith("/api"):
            return await call_next(request)
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        user_id = user_service.resolve_token(token.strip()) if scheme.lower() == "bearer" and token else None
        if user_id is None:
            return UnicodeJSONResponse(status_code=401, content={"detail": "Not authenticated"})
        request.state.user_id = user_id
        return await call_next(request)
