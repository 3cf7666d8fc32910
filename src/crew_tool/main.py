"""Main FastAPI application"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.crew_tool.api.endpoints import health, auth, crew_import
from src.crew_tool.api.errors import ApiError, api_error_handler, validation_error_handler
from src.crew_tool.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Crew Tool API in {settings.APP_ENV} environment")
    settings.validate_secrets_for_production()

    yield

    logger.info("Shutting down Crew Tool API")


app = FastAPI(
    title="Crew Tool - Fleet Crew Management",
    description="Crew records and bulk crew onboarding for maritime fleet operators",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, tags=["Auth"])
app.include_router(crew_import.router, tags=["Crew Import"])


@app.get("/")
def root():
    return {
        "message": "Crew Tool API",
        "environment": settings.APP_ENV,
        "docs": "/docs"
    }
