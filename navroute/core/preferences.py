# navroute/core/preferences.py
from __future__ import annotations
from typing import Optional

from pydantic import BaseModel

from navroute.config import settings


class ApiConfiguration(BaseModel):
    base_url: str
    api_key: Optional[str] = None


class AppPreferences:
    """
    In-memory preference store read by the routing layer.
    Seeded from settings; the host app may flip values at runtime.
    """

    def __init__(
        self,
        offline_mode: Optional[bool] = None,
        valhalla_api_config: Optional[ApiConfiguration] = None,
    ):
        self._offline_mode = (
            settings.OFFLINE_MODE if offline_mode is None else bool(offline_mode)
        )
        self._valhalla_api_config = valhalla_api_config or ApiConfiguration(
            base_url=settings.VALHALLA_BASE_URL,
            api_key=settings.VALHALLA_API_KEY,
        )

    @property
    def offline_mode(self) -> bool:
        return self._offline_mode

    @property
    def valhalla_api_config(self) -> ApiConfiguration:
        return self._valhalla_api_config

    def set_offline_mode(self, offline_mode: bool) -> None:
        self._offline_mode = bool(offline_mode)

    def set_valhalla_base_url(self, base_url: str) -> None:
        self._valhalla_api_config = self._valhalla_api_config.model_copy(
            update={"base_url": base_url}
        )

    def set_valhalla_api_key(self, api_key: Optional[str]) -> None:
        # blank keys are treated as "no key"
        self._valhalla_api_config = self._valhalla_api_config.model_copy(
            update={"api_key": api_key or None}
        )


# one shared store for the HTTP app
app_preferences = AppPreferences()
