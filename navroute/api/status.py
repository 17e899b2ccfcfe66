from fastapi import APIRouter
from pydantic import BaseModel

from navroute.core.preferences import app_preferences
from navroute.core.route_cache import route_cache

router = APIRouter(prefix="/status", tags=["status"])


class OfflineModeBody(BaseModel):
    offline_mode: bool


@router.get("/routing")
def routing_status():
    config = app_preferences.valhalla_api_config
    return {
        "offline_mode": app_preferences.offline_mode,
        "base_url": config.base_url,
        "api_key_set": bool(config.api_key),
        "cached_routes": len(route_cache),
    }


@router.put("/offline-mode")
def set_offline_mode(body: OfflineModeBody):
    app_preferences.set_offline_mode(body.offline_mode)
    return {"offline_mode": app_preferences.offline_mode}
