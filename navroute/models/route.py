# models/route.py
from __future__ import annotations
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from navroute.core.exceptions import UnknownRoutingModeError


class RoutingMode(str, Enum):
    AUTO = "auto"
    TRUCK = "truck"
    MOTOR_SCOOTER = "motor_scooter"
    MOTORCYCLE = "motorcycle"
    BICYCLE = "bicycle"
    PEDESTRIAN = "pedestrian"

    @classmethod
    def from_value(cls, value: str) -> "RoutingMode":
        key = (value or "").lower().strip()
        for mode in cls:
            if mode.value == key or mode.name.lower() == key:
                return mode
        raise UnknownRoutingModeError(f"Unknown routing mode: {value}")


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class RouteGeometry(_Frozen):
    type: Literal["LineString"] = "LineString"
    # [longitude, latitude] pairs
    coordinates: List[List[float]] = Field(default_factory=list)


class Maneuver(_Frozen):
    location: List[float] = Field(default_factory=list)  # [longitude, latitude]
    bearing_before: float = 0.0
    bearing_after: float = 0.0
    type: str = ""
    modifier: Optional[str] = None
    instruction: str = ""


class RouteStep(_Frozen):
    distance: float = Field(0.0, ge=0, allow_inf_nan=False)
    duration: float = Field(0.0, ge=0, allow_inf_nan=False)
    instruction: str = ""
    name: str = ""
    geometry: Optional[RouteGeometry] = None
    maneuver: Maneuver = Field(default_factory=Maneuver)


class RouteLeg(_Frozen):
    summary: str = ""
    distance: float = Field(0.0, ge=0, allow_inf_nan=False)
    duration: float = Field(0.0, ge=0, allow_inf_nan=False)
    steps: List[RouteStep] = Field(default_factory=list)


class RouteResult(_Frozen):
    distance: float = Field(0.0, ge=0, allow_inf_nan=False)  # meters
    duration: float = Field(0.0, ge=0, allow_inf_nan=False)  # seconds
    legs: List[RouteLeg] = Field(default_factory=list)
    geometry: RouteGeometry = Field(default_factory=RouteGeometry)
    units: Literal["kilometers", "miles"] = "kilometers"

    @classmethod
    def empty(cls, units: str = "kilometers") -> "RouteResult":
        """The degenerate result every failed routing call collapses to."""
        return cls(units="miles" if units == "miles" else "kilometers")

    @property
    def is_empty(self) -> bool:
        return (
            self.distance == 0.0
            and self.duration == 0.0
            and not self.legs
            and not self.geometry.coordinates
        )
