"""Liveness and datastore reachability probe"""
import logging
from fastapi import APIRouter
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from src.crew_tool.api.deps import DbSession
from src.crew_tool.config import settings
from src.crew_tool.models.vessel import Vessel

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(db: DbSession):
    try:
        vessel_count = db.execute(select(func.count(Vessel.id))).scalar_one()
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        return {"status": "degraded", "environment": settings.APP_ENV, "database": "unreachable"}

    return {
        "status": "ok",
        "environment": settings.APP_ENV,
        "database": "connected",
        "vessels": vessel_count,
    }
