from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging

from . import __version__
from .api import api_router
from .api.dependencies import get_warehouse_service
from .config import Settings, get_settings
from .database import Database
from .schemas.warehouse import DbTestResponse, ErrorResponse, HealthResponse
from .services.exceptions import ServiceError
from .services.warehouse_service import WarehouseService

# Logging setup
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # Startup
    logger.info(f"🚀 Starting {settings.app_name} (db {settings.connect_string})...")
    try:
        if settings.create_tables:
            await database.create_all()
            logger.info("✅ Database tables created")
    except Exception as e:
        logger.error(f"❌ Failed to start {settings.app_name}: {e}")
        raise

    yield

    # Shutdown
    logger.info(f"🛑 Shutting down {settings.app_name}...")
    await database.dispose()
    logger.info("✅ Database connections closed")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Raw order intake and Power BI feeds over the order database",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Liveness check"""
        return HealthResponse()

    @app.get("/db-test", response_model=DbTestResponse, responses={500: {"model": ErrorResponse}})
    async def db_test(
            warehouse_service: WarehouseService = Depends(get_warehouse_service)
    ):
        """Round-trip to the database"""
        rows = await warehouse_service.probe()
        return DbTestResponse(rows=rows)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(400, _describe_validation_errors(exc))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"❌ Unhandled exception: {exc}", exc_info=True)
        return _error(500, str(exc))

    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "warehouse_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
