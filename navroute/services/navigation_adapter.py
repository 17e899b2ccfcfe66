# services/navigation_adapter.py
from __future__ import annotations
import json
from typing import Dict, Iterable, List, Optional, Sequence

from navroute.adapters.request_builder import costing_options_document
from navroute.core.interfaces import RouteOptions
from navroute.models.costing import CostingOptions, default_options_for_mode
from navroute.models.navigation import (
    BoundingBox,
    CourseFiltering,
    GeographicCoordinate,
    NavigationControllerConfig,
    NavigationRoute,
    NavigationStep,
    NavigationWaypoint,
    RouteDeviationTracking,
    StepAdvanceCondition,
    WaypointAdvance,
)
from navroute.models.route import RouteResult, RoutingMode

# ---- guidance thresholds (process-wide, not per route) ----
WAYPOINT_ARRIVAL_RADIUS_M = 100.0
STEP_ADVANCE_MIN_ACCURACY_M = 30
STEP_ADVANCE_ENTRY_M = 5
STEP_ADVANCE_EXIT_M = 32
ARRIVAL_STEP_ADVANCE_DISTANCE_M = 32
DEVIATION_MIN_ACCURACY_M = 15
DEVIATION_MAX_M = 50.0

NAVIGATION_CONFIG = NavigationControllerConfig(
    waypoint_advance=WaypointAdvance(range_m=WAYPOINT_ARRIVAL_RADIUS_M),
    step_advance_condition=StepAdvanceCondition(
        kind="distance_entry_and_exit",
        minimum_horizontal_accuracy_m=STEP_ADVANCE_MIN_ACCURACY_M,
        distance_to_end_of_step_m=STEP_ADVANCE_ENTRY_M,
        distance_after_end_of_step_m=STEP_ADVANCE_EXIT_M,
    ),
    arrival_step_advance_condition=StepAdvanceCondition(
        kind="distance_to_end_of_step",
        minimum_horizontal_accuracy_m=STEP_ADVANCE_MIN_ACCURACY_M,
        distance_m=ARRIVAL_STEP_ADVANCE_DISTANCE_M,
    ),
    route_deviation_tracking=RouteDeviationTracking(
        minimum_horizontal_accuracy_m=DEVIATION_MIN_ACCURACY_M,
        max_acceptable_deviation_m=DEVIATION_MAX_M,
    ),
    snapped_location_course_filtering=CourseFiltering.SNAP_TO_ROUTE,
)


def to_coordinate(lon_lat: Sequence[float]) -> GeographicCoordinate:
    """[lon, lat] -> (lat, lng). The only place the axis order flips."""
    return GeographicCoordinate(lat=float(lon_lat[1]), lng=float(lon_lat[0]))


def bounding_box(coords: Iterable[GeographicCoordinate]) -> BoundingBox:
    coords = list(coords)
    if not coords:
        zero = GeographicCoordinate(lat=0.0, lng=0.0)
        return BoundingBox(sw=zero, ne=zero)
    lats = [c.lat for c in coords]
    lngs = [c.lng for c in coords]
    return BoundingBox(
        sw=GeographicCoordinate(lat=min(lats), lng=min(lngs)),
        ne=GeographicCoordinate(lat=max(lats), lng=max(lngs)),
    )


class NavigationAdapter:
    """Turns a RouteResult into the route object the guidance engine drives."""

    config = NAVIGATION_CONFIG

    def __init__(self, mode: RoutingMode, options: Optional[CostingOptions] = None):
        self.mode = mode
        self.options = options

    def set_options(self, options: Optional[CostingOptions] = None) -> None:
        # None keeps whatever was set before
        if options is not None:
            self.options = options

    @property
    def options_json(self) -> str:
        """Costing options document handed to the engine for re-routing."""
        options = self.options or default_options_for_mode(self.mode)
        return options.to_valhalla_options_json()

    def options_json_for(self, options: Optional[RouteOptions] = None) -> str:
        """Re-routing document for the options a route was computed with (None: this adapter's own)."""
        if options is None:
            return self.options_json
        return json.dumps(costing_options_document(self.mode.value, options))

    def adapt(
        self,
        route: RouteResult,
        waypoints: Optional[List[NavigationWaypoint]] = None,
    ) -> NavigationRoute:
        geometry = [to_coordinate(c) for c in route.geometry.coordinates]

        # TODO: carry per-step geometry and visual/spoken instructions once the
        # parser slices are mapped onto engine coordinates
        steps = [
            NavigationStep(
                distance=step.distance,
                duration=step.duration,
                road_name=step.name or None,
                instruction=step.instruction,
            )
            for leg in route.legs
            for step in leg.steps
        ]

        if waypoints is None:
            waypoints = (
                [
                    NavigationWaypoint(coordinate=geometry[0]),
                    NavigationWaypoint(coordinate=geometry[-1]),
                ]
                if geometry
                else []
            )

        return NavigationRoute(
            geometry=geometry,
            bbox=bounding_box(geometry),
            distance=route.distance,
            waypoints=waypoints,
            steps=steps,
        )


class NavigationAdapterRepository:
    """One adapter per routing mode, with per-mode costing options."""

    def __init__(self, profiles=None):
        # profiles: RoutingProfileStore supplying each mode's default options
        self.profiles = profiles
        self._adapters: Dict[RoutingMode, NavigationAdapter] = {
            mode: NavigationAdapter(mode, self._defaults(mode)) for mode in RoutingMode
        }

    def _defaults(self, mode: RoutingMode) -> CostingOptions:
        if self.profiles is not None:
            return self.profiles.default_options(mode)
        return default_options_for_mode(mode)

    def for_mode(self, mode: RoutingMode) -> NavigationAdapter:
        return self._adapters[mode]

    @property
    def walking(self) -> NavigationAdapter:
        return self._adapters[RoutingMode.PEDESTRIAN]

    @property
    def cycling(self) -> NavigationAdapter:
        return self._adapters[RoutingMode.BICYCLE]

    @property
    def driving(self) -> NavigationAdapter:
        return self._adapters[RoutingMode.AUTO]

    def set_options_for_mode(self, mode: RoutingMode, options: CostingOptions) -> None:
        self._adapters[mode].set_options(options)

    def reset_options_to_defaults_for_mode(self, mode: RoutingMode) -> None:
        self._adapters[mode].set_options(self._defaults(mode))
