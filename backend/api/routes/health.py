"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import MongoDatabase
from ..dependencies import get_mongo_database

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/", response_model=HealthResponse)
@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/api/ready", response_model=ReadinessResponse)
async def readiness_check(
    database: MongoDatabase = Depends(get_mongo_database),
):
    """
    Readiness check endpoint.

    Pings MongoDB; answers 503 when the deployment is unreachable.
    """
    if database.ping():
        return ReadinessResponse(status="ready", database="connected")

    body = ReadinessResponse(status="not_ready", database="unreachable")
    return JSONResponse(status_code=503, content=body.model_dump())
