from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings as default_settings
from app.database import Database
from app.exceptions import ConflictError, NotFoundError, ValidationError
from app.log_config import configure_logging
from app.routers.posts import router as posts_router
from app.routers.users import router as users_router

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.database_url, echo=settings.sql_echo)
        await database.create_all()
        app.state.database = database
        logger.info("database_ready", url=database.engine.url.render_as_string(hide_password=True))

        yield

        await database.dispose()
        logger.info("database_disposed")

    app = FastAPI(
        lifespan=lifespan,
        title="Users & Posts API",
        description="Users and their posts, with soft deletion",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        logger.warning("constraint_violation", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error", method=request.method, path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal Server Error", "error": str(exc)},
        )

    app.include_router(users_router)
    app.include_router(posts_router)

    @app.get("/")
    def root():
        return {"message": "Users & Posts API running"}

    return app


app = create_app()
