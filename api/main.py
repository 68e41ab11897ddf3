import sys
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
import uvicorn
from dependency_injector.wiring import Provide, inject
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request

from api.di.container import ApplicationContainer as DependencyContainer
from api.shared.dtos import (
    HealthCheckResponse,
    ReadinessResponse,
    field_errors_from_pydantic,
)
from api.shared.exceptions import GraphifyException
from api.shared.response import error_response, exception_response
from core.logger import configure_logging
from core.settings import SETTINGS
from infra.document_store import DocumentStore

configure_logging(SETTINGS.APP)

logger = structlog.get_logger("graphify")

SERVICE_NAME = "Graphify Backend API"


class CustomFastAPI(FastAPI):
    container: DependencyContainer


@asynccontextmanager
async def lifespan(_app: CustomFastAPI):
    logger.info("app.startup.begin", store_backend=SETTINGS.MONGODB.STORE_BACKEND)
    start_time = time.time()

    store = _app.container.infrastructure.document_store()
    try:
        await store.init()
    except Exception as e:
        # a store that cannot be reached at startup is fatal
        logger.exception("app.startup.store_failed", error=str(e))
        raise
    logger.info("app.startup.complete", elapsed_s=round(time.time() - start_time, 2))

    yield

    try:
        await store.shutdown()
        logger.info("app.shutdown.complete")
    except Exception as e:
        logger.exception("app.shutdown.failed", error=str(e))


def cors_origins() -> list:
    origins = [SETTINGS.CORS.FRONTEND_URL, SETTINGS.CORS.LOCAL_DEV_ORIGIN]
    return list(dict.fromkeys(o for o in origins if o))


def create_fastapi_app() -> CustomFastAPI:
    _app = CustomFastAPI(
        title=SERVICE_NAME,
        description="Conversation and user profile persistence plus a Groq proxy",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Initialize dependency container
    _app.container = DependencyContainer()
    _app.container.infrastructure.config.from_dict(SETTINGS.model_dump())

    _app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "x-session-id"],
    )

    # Include feature routers
    from api.features.chat.router import router as chat_router
    from api.features.client_config.router import router as client_config_router
    from api.features.conversation.router import router as conversation_router
    from api.features.users.router import router as users_router

    _app.include_router(client_config_router, prefix="/api/config", tags=["Config"])
    _app.include_router(chat_router, prefix="/api/groq", tags=["Chat"])
    _app.include_router(
        conversation_router, prefix="/api/conversations", tags=["Conversations"]
    )
    _app.include_router(users_router, prefix="/api/users", tags=["Users"])

    return _app


app = create_fastapi_app()


@app.get("/health", response_model=HealthCheckResponse)
async def health():
    return HealthCheckResponse(
        status="ok",
        message=f"{SERVICE_NAME} is running",
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/ready", response_model=ReadinessResponse)
@inject
async def ready(
    store: DocumentStore = Depends(
        Provide[DependencyContainer.infrastructure.document_store]
    ),
):
    await store.ping()
    return ReadinessResponse(status="ok", dependencies={"store": "ok"})


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        exc.status_code, str(exc.detail), "HTTP_ERROR", headers=exc.headers
    )


@app.exception_handler(GraphifyException)
async def graphify_exception_handler(request: Request, exc: GraphifyException):
    if exc.status_code >= 500:
        logger.error(
            "request.failed",
            path=request.url.path,
            error_code=exc.error_code,
            error=exc.message,
        )
    return exception_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(
        400,
        "Invalid request payload",
        "INVALID_PAYLOAD",
        {"errors": field_errors_from_pydantic(list(exc.errors()))},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("request.unhandled", path=request.url.path, error=str(exc))
    return error_response(500, "Internal server error", "INTERNAL_ERROR")


# routes above use @inject, so wire once they exist
app.container.wire(modules=[sys.modules[__name__]])


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "api.main:app",
        host=SETTINGS.APP.HOST,
        port=SETTINGS.APP.PORT,
        log_level=SETTINGS.APP.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
