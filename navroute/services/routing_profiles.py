# services/routing_profiles.py
from __future__ import annotations
import threading
import time
import uuid
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from navroute.models.costing import (
    CostingOptions,
    default_options_for_mode,
    deserialize_options,
    serialize_options,
)
from navroute.models.route import RoutingMode


def _now_ms() -> int:
    return int(time.time() * 1000)


class RoutingProfile(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    routing_mode: str
    options_json: str
    is_default: bool = False
    created_at: int = Field(default_factory=_now_ms)
    updated_at: int = Field(default_factory=_now_ms)


class RoutingProfileStore:
    """
    Named costing-option sets, at most one default per mode.
    Options are kept as JSON the same way a database row would hold them.
    """

    def __init__(self):
        self._profiles: Dict[str, RoutingProfile] = {}
        self._lock = threading.Lock()

    def _clear_default_for_mode(self, routing_mode: str) -> None:
        for pid, p in self._profiles.items():
            if p.routing_mode == routing_mode and p.is_default:
                self._profiles[pid] = p.model_copy(update={"is_default": False})

    def create_profile(
        self,
        name: str,
        routing_mode: RoutingMode,
        options: CostingOptions,
        is_default: bool = False,
    ) -> str:
        profile = RoutingProfile(
            name=name,
            routing_mode=routing_mode.value,
            options_json=serialize_options(options),
            is_default=is_default,
        )
        with self._lock:
            if is_default:
                self._clear_default_for_mode(routing_mode.value)
            self._profiles[profile.id] = profile
        return profile.id

    def update_profile(
        self,
        profile_id: str,
        name: Optional[str] = None,
        options: Optional[CostingOptions] = None,
        is_default: Optional[bool] = None,
    ) -> RoutingProfile:
        with self._lock:
            existing = self._profiles.get(profile_id)
            if existing is None:
                raise KeyError(f"Profile not found: {profile_id}")

            updates = {"updated_at": _now_ms()}
            if name is not None:
                updates["name"] = name
            if options is not None:
                updates["options_json"] = serialize_options(options)
            if is_default is not None:
                updates["is_default"] = is_default
            if is_default:
                self._clear_default_for_mode(existing.routing_mode)

            updated = existing.model_copy(update=updates)
            self._profiles[profile_id] = updated
            return updated

    def delete_profile(self, profile_id: str) -> None:
        with self._lock:
            self._profiles.pop(profile_id, None)

    def get_profile(self, profile_id: str) -> Optional[RoutingProfile]:
        with self._lock:
            return self._profiles.get(profile_id)

    def profiles_for_mode(self, mode: RoutingMode) -> List[RoutingProfile]:
        with self._lock:
            return [p for p in self._profiles.values() if p.routing_mode == mode.value]

    def default_profile(self, mode: RoutingMode) -> Optional[RoutingProfile]:
        for p in self.profiles_for_mode(mode):
            if p.is_default:
                return p
        return None

    def options_for(self, profile: RoutingProfile) -> CostingOptions:
        return deserialize_options(profile.routing_mode, profile.options_json)

    def default_options(self, mode: RoutingMode) -> CostingOptions:
        """The mode's default profile options, or the built-in empty set."""
        profile = self.default_profile(mode)
        if profile is None:
            return default_options_for_mode(mode)
        return self.options_for(profile)
