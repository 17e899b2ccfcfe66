# models/navigation.py
from __future__ import annotations
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GeographicCoordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    sw: GeographicCoordinate
    ne: GeographicCoordinate


class NavigationStep(BaseModel):
    distance: float = 0.0
    duration: float = 0.0
    road_name: Optional[str] = None
    instruction: str = ""
    # per-step geometry is not populated yet
    geometry: List[GeographicCoordinate] = Field(default_factory=list)
    visual_instructions: List[dict] = Field(default_factory=list)
    spoken_instructions: List[dict] = Field(default_factory=list)


class NavigationWaypoint(BaseModel):
    coordinate: GeographicCoordinate
    kind: Literal["break", "via"] = "break"


class NavigationRoute(BaseModel):
    geometry: List[GeographicCoordinate] = Field(default_factory=list)
    bbox: BoundingBox
    distance: float = 0.0
    waypoints: List[NavigationWaypoint] = Field(default_factory=list)
    steps: List[NavigationStep] = Field(default_factory=list)


# ---- guidance-engine configuration ----


class WaypointAdvance(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["waypoint_within_range"] = "waypoint_within_range"
    range_m: float


class StepAdvanceCondition(BaseModel):
    """
    entry_and_exit: the user must come within `distance_to_end_of_step_m` of the
    step end, then move `distance_after_end_of_step_m` past it.
    to_end_of_step: advance as soon as the user is within `distance_m`.
    Both ignore fixes less accurate than `minimum_horizontal_accuracy_m`.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["distance_entry_and_exit", "distance_to_end_of_step"]
    minimum_horizontal_accuracy_m: int
    distance_to_end_of_step_m: Optional[int] = None
    distance_after_end_of_step_m: Optional[int] = None
    distance_m: Optional[int] = None


class RouteDeviationTracking(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["static_threshold"] = "static_threshold"
    minimum_horizontal_accuracy_m: int
    max_acceptable_deviation_m: float


class CourseFiltering(str, Enum):
    SNAP_TO_ROUTE = "snap_to_route"
    RAW = "raw"


class NavigationControllerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    waypoint_advance: WaypointAdvance
    step_advance_condition: StepAdvanceCondition
    arrival_step_advance_condition: StepAdvanceCondition
    route_deviation_tracking: RouteDeviationTracking
    snapped_location_course_filtering: CourseFiltering = CourseFiltering.SNAP_TO_ROUTE
