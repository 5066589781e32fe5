# expense_tracker/main.py
import uvicorn
import logging
from typing import Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from expense_tracker.core.config import Settings, settings as default_settings
from expense_tracker.core.database import build_engine, build_session_factory, create_db_and_tables
from expense_tracker.core.exceptions import RecordServiceError
from expense_tracker.api.api import api_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None) -> FastAPI:
    """Build the application around one storage engine.

    ``engine`` defaults to one built from ``settings.DATABASE_URL``; tests
    pass their own so each gets an isolated store.
    """
    settings = settings or default_settings
    engine = engine or build_engine(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        openapi_tags=[
            {"name": "categories", "description": "Transaction categories"},
            {"name": "transactions", "description": "Income and expense records"},
            {"name": "budgets", "description": "One budget amount per category"},
        ],
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RecordServiceError)
    async def record_service_exception_handler(request: Request, exc: RecordServiceError):
        """Render service failures as plain text with the mapped status"""
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed requests get a one-line plain-text reason, e.g.
        ``Invalid request: body.categoryId Field required``"""
        reasons = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])} {error['msg']}"
            for error in exc.errors()
        )
        return PlainTextResponse(f"Invalid request: {reasons}", status_code=422)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
        return PlainTextResponse("Internal server error", status_code=500)

    # ------------------------------------------------------------
    # ROOT ENDPOINT
    # ------------------------------------------------------------
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information"""
        return {
            "message": f"{settings.APP_NAME} is running!",
            "version": settings.VERSION
        }

    # ------------------------------------------------------------
    # HEALTH CHECK ENDPOINT
    # ------------------------------------------------------------
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {str(e)}")
            raise HTTPException(status_code=503, detail=f"Service unhealthy: {str(e)}")
        return {
            "status": "healthy",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT
        }

    # ------------------------------------------------------------
    # BUSINESS LOGIC ROUTES
    # ------------------------------------------------------------
    app.include_router(api_router, prefix="/api")

    # ------------------------------------------------------------
    # STARTUP / SHUTDOWN EVENTS
    # ------------------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        """Startup event to create database tables"""
        if settings.CREATE_TABLES_ON_STARTUP:
            await create_db_and_tables(engine)
            logger.info("Database tables created successfully")
        logger.info(f"{settings.APP_NAME} {settings.VERSION} started ({settings.ENVIRONMENT})")

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()

    return app


logging.basicConfig(level=default_settings.LOG_LEVEL)

app = create_app()

if __name__ == "__main__":
    uvicorn.run("expense_tracker.main:app", host=default_settings.HOST, port=default_settings.PORT, reload=False)
