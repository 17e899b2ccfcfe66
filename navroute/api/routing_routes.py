# api/routing_routes.py
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError, model_validator

from navroute.api._coords import coerce_point
from navroute.api._resp import fail, not_found, ok
from navroute.core.interfaces import RouteOptions
from navroute.core.route_cache import route_cache
from navroute.models.costing import costing_options_adapter
from navroute.models.route import LatLng, RouteResult, RoutingMode
from navroute.services.bootstrap import (
    navigation_adapters,
    routing_service,
)

router = APIRouter(prefix="/route", tags=["route"])


class RouteBody(BaseModel):
    """
    origin/destination may be {latitude,longitude}, {lat,lon} or [lon,lat].
    options is either a flat Valhalla costing mapping (optionally with
    "units") or a tagged options object carrying "costing_type".
    When omitted, the mode's default profile is used.
    """

    origin: LatLng
    destination: LatLng
    mode: RoutingMode = RoutingMode.AUTO
    options: Optional[Dict[str, Any]] = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_points(cls, v: Any):
        if isinstance(v, dict):
            v = dict(v)
            for key in ("origin", "destination"):
                if key in v:
                    v[key] = coerce_point(v[key])
        return v


def _resolve_options(body: RouteBody) -> RouteOptions:
    if body.options is None:
        return navigation_adapters.for_mode(body.mode).options
    if "costing_type" in body.options:
        try:
            options = costing_options_adapter.validate_python(body.options)
        except ValidationError as e:
            raise HTTPException(422, f"Invalid costing options: {e.errors()}")
        if options.costing_type != body.mode.value:
            fail(422, f"{options.costing_type} options do not match mode {body.mode.value}")
        return options
    return body.options


async def _compute(body: RouteBody) -> Tuple[RouteResult, RouteOptions]:
    options = _resolve_options(body)
    result = await routing_service.compute_route(
        body.origin, body.destination, body.mode.value, options
    )
    return result, options


@router.post("", summary="Compute a route between two points")
async def compute_route(body: RouteBody):
    result, _ = await _compute(body)
    return ok(result.model_dump(), empty=result.is_empty)


@router.post(
    "/navigation",
    summary="Compute a route, adapt it for guidance and cache it under an id",
)
async def navigation_route(body: RouteBody):
    result, options = await _compute(body)
    adapter = navigation_adapters.for_mode(body.mode)
    nav_route = adapter.adapt(result)
    route_id = route_cache.store(nav_route)
    return ok(
        {
            "route_id": route_id,
            "route": nav_route.model_dump(mode="json"),
            "config": adapter.config.model_dump(mode="json"),
            "options": adapter.options_json_for(
                None if body.options is None else options
            ),
        },
        empty=result.is_empty,
    )


@router.get("/cache/{route_id}")
def get_cached_route(route_id: str):
    route = route_cache.get(route_id)
    if route is None:
        not_found("Route", route_id)
    return ok(route.model_dump(mode="json"))


@router.delete("/cache/{route_id}")
def remove_cached_route(route_id: str):
    route_cache.remove(route_id)
    return ok()


@router.delete("/cache")
def clear_route_cache():
    route_cache.clear()
    return ok()
