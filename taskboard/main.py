import logging
import sys
import time
from datetime import timedelta
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.config import Settings, get_settings
from taskboard.database import MemoryStore
from taskboard.exceptions import APIError
from taskboard.routers import auth, tasks
from taskboard.utils.auth import TokenService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Every error body carries a human-readable "message"
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"message": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(settings: Optional[Settings] = None, store: Optional[MemoryStore] = None) -> FastAPI:
    settings = settings or get_settings()

    # Fails here, at startup, when the secret is missing
    token_service = TokenService(
        settings.secret_key,
        algorithm=settings.algorithm,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )

    app = FastAPI(title="Taskboard API")
    app.state.settings = settings
    app.state.token_service = token_service
    app.state.store = store if store is not None else MemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        # request.state.user is only set once the auth gate has accepted the token
        user = getattr(request.state, "user", None)
        logger.debug(
            "%s %s -> %s in %.3fs (user=%s)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            user.id if user else "-",
        )
        return response

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api")
    app.include_router(tasks.router, prefix="/api")
    return app


_settings = get_settings()
configure_logging(_settings.log_level)
app = create_app(_settings)


if __name__ == "__main__":
    uvicorn.run("taskboard.main:app", host="0.0.0.0", port=8000)
