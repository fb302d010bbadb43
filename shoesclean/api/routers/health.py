# This file defines the liveness endpoint used by orchestration and monitoring.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from shoesclean.api.api_config import ApiConfig
from shoesclean.api.dependencies import get_config
from shoesclean.api.schemas.health_schemas import HealthResponse

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@router.get("/health", response_model=HealthResponse)
def health(config: ConfigDep) -> dict[str, object]:
    return {
        "success": True,
        "status": "healthy",
        "timestamp": _utc_now(),
        "version": config.app_version,
    }
