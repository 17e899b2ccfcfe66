# services/route_parser.py
"""
Valhalla trip JSON -> RouteResult.

Tolerance is two-level: a response without a usable ``trip`` yields ``None``
(callers degrade to RouteResult.empty()), while a bad leg or maneuver only
drops that element and its siblings still parse.
"""
from __future__ import annotations
import logging
import math
from typing import Any, Dict, List, Optional, Tuple

import polyline

from navroute.core.exceptions import RouteParseError
from navroute.models.route import (
    Maneuver,
    RouteGeometry,
    RouteLeg,
    RouteResult,
    RouteStep,
)

logger = logging.getLogger(__name__)

# Valhalla encodes shapes with 6 digits of precision (not Google's 5)
SHAPE_PRECISION = 6

Coords = List[List[float]]


def _num(value: Any) -> float:
    """
    None -> 0.0; anything non-numeric, negative or non-finite raises so the
    owning element is dropped.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    out = float(value)
    if not math.isfinite(out) or out < 0:
        raise ValueError(f"not a non-negative finite number: {value!r}")
    return out


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _units(value: Any) -> str:
    u = _text(value).lower()
    return "miles" if u in ("miles", "mile", "mi") else "kilometers"


def decode_shape(shape: Any) -> Coords:
    """Decode a Valhalla polyline6 shape straight into [lon, lat] pairs."""
    if not shape or not isinstance(shape, str):
        return []
    try:
        points = polyline.decode(shape, SHAPE_PRECISION, geojson=True)
    except (IndexError, ValueError, TypeError) as e:
        logger.debug("Undecodable leg shape (%s); leaving geometry empty", e)
        return []
    return [[float(lon), float(lat)] for lon, lat in points]


def _require_trip(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise RouteParseError(f"response is not an object: {type(data).__name__}")
    trip = data.get("trip")
    if not isinstance(trip, dict):
        raise RouteParseError("response has no 'trip'")
    return trip


def _parse_maneuver(raw: Dict[str, Any], shape: Coords) -> Maneuver:
    begin = raw.get("begin_shape_index")
    end = raw.get("end_shape_index")

    location = raw.get("location")
    if isinstance(location, (list, tuple)) and len(location) >= 2:
        location = [float(location[0]), float(location[1])]
    elif isinstance(begin, int) and 0 <= begin < len(shape):
        location = list(shape[begin])
    else:
        location = []

    # Valhalla's native format has no bearings; shape indices stand in
    return Maneuver(
        location=location,
        bearing_before=_num(raw.get("bearing_before", begin)),
        bearing_after=_num(raw.get("bearing_after", end)),
        type=_text(raw.get("type")),
        modifier=None if raw.get("modifier") is None else _text(raw["modifier"]),
        instruction=_text(raw.get("instruction")),
    )


def _step_geometry(raw: Dict[str, Any], shape: Coords) -> Optional[RouteGeometry]:
    begin = raw.get("begin_shape_index")
    end = raw.get("end_shape_index")
    if not shape or not isinstance(begin, int) or not isinstance(end, int):
        return None
    if begin < 0 or end < begin:
        return None
    return RouteGeometry(coordinates=[list(c) for c in shape[begin : end + 1]])


def _parse_step(raw: Any, shape: Coords) -> RouteStep:
    if not isinstance(raw, dict):
        raise ValueError(f"maneuver is not an object: {raw!r}")
    street_names = raw.get("street_names")
    name = (
        _text(street_names[0])
        if isinstance(street_names, list) and street_names
        else ""
    )
    return RouteStep(
        distance=_num(raw.get("length")),
        duration=_num(raw.get("time")),
        instruction=_text(raw.get("instruction")),
        name=name,
        geometry=_step_geometry(raw, shape),
        maneuver=_parse_maneuver(raw, shape),
    )


def _parse_step_or_none(raw: Any, shape: Coords) -> Optional[RouteStep]:
    try:
        return _parse_step(raw, shape)
    except (ValueError, TypeError, KeyError, IndexError) as e:
        logger.debug("Dropping unparseable maneuver: %s", e)
        return None


def _parse_leg(raw: Any) -> Tuple[RouteLeg, Coords]:
    if not isinstance(raw, dict):
        raise ValueError(f"leg is not an object: {raw!r}")

    summary = _mapping(raw.get("summary"))
    summary_text = raw.get("summary") if isinstance(raw.get("summary"), str) else ""
    shape = decode_shape(raw.get("shape"))

    maneuvers = raw.get("maneuvers")
    if not isinstance(maneuvers, list):
        if maneuvers is not None:
            logger.debug("Leg maneuvers malformed (%s); leg kept without steps",
                         type(maneuvers).__name__)
        maneuvers = []

    steps = [
        step
        for step in (_parse_step_or_none(m, shape) for m in maneuvers)
        if step is not None
    ]

    leg = RouteLeg(
        summary=summary_text,
        distance=_num(summary.get("length")),
        duration=_num(summary.get("time")),
        steps=steps,
    )
    return leg, shape


def _parse_leg_or_none(raw: Any) -> Optional[Tuple[RouteLeg, Coords]]:
    try:
        return _parse_leg(raw)
    except (ValueError, TypeError, KeyError, IndexError) as e:
        logger.debug("Dropping unparseable leg: %s", e)
        return None


def _join_shapes(shapes: List[Coords]) -> Coords:
    out: Coords = []
    for shape in shapes:
        if out and shape and out[-1] == shape[0]:
            out.extend(shape[1:])
        else:
            out.extend(shape)
    return out


def _soft_num(value: Any) -> float:
    try:
        return _num(value)
    except (ValueError, TypeError):
        return 0.0


def parse_route_response(data: Any) -> Optional[RouteResult]:
    """
    Parse a Valhalla ``/route`` response. Returns ``None`` only when there is
    no trip at all; everything below that level degrades per element.
    """
    try:
        trip = _require_trip(data)
    except RouteParseError as e:
        logger.warning("Route response rejected: %s", e)
        return None

    raw_legs = trip.get("legs")
    if not isinstance(raw_legs, list):
        raw_legs = []

    parsed = [p for p in (_parse_leg_or_none(leg) for leg in raw_legs) if p is not None]
    legs = [leg for leg, _ in parsed]
    shapes = [shape for _, shape in parsed]

    summary = _mapping(trip.get("summary"))
    return RouteResult(
        distance=_soft_num(summary.get("length")),
        duration=_soft_num(summary.get("time")),
        legs=legs,
        geometry=RouteGeometry(coordinates=_join_shapes(shapes)),
        units=_units(trip.get("units") or "kilometers"),
    )
