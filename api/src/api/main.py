from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.cache import QueryCache
from api.response import UnicodeJSONResponse
from api.controller.task import router as task_router
from api.controller.category import router as category_router
from api.controller.account import router as account_router
from api.middleware.auth import AuthMiddleware
from storage.database.base import init_db, is_initialized
from storage.log import setup_logging
from storage.settings import load_config


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_config()
    setup_logging(config["log_level"])
    if not is_initialized():
        init_db(config["database_url"])
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="yarukoto API", default_response_class=UnicodeJSONResponse, lifespan=lifespan)
    app.state.query_cache = QueryCache()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AuthMiddleware)

    api_router = APIRouter(prefix="/api")
    api_router.include_router(task_router)
    api_router.include_router(category_router)
    api_router.include_router(account_router)
    app.include_router(api_router)
    return app


app = create_app()


def main():
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    main()
