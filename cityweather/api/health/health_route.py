from datetime import datetime, timezone

from fastapi import APIRouter

from cityweather import __version__
from cityweather.config.config import config

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Liveness check; also reports whether an API key is configured."""

    return {
        "message": "City Weather API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "api_key_configured": bool(config.openweather_api_key),
    }
