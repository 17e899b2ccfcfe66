# adapters/request_builder.py
from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from navroute.config import settings
from navroute.core.interfaces import RouteOptions
from navroute.models.costing import CostingOptions
from navroute.models.route import LatLng


def _location(point: LatLng) -> Dict[str, Any]:
    # Valhalla wants lon/lat keys; never positional pairs
    return {"lon": point.longitude, "lat": point.latitude, "type": "break"}


def split_options(options: Optional[RouteOptions] = None) -> Tuple[Dict[str, Any], Optional[str]]:
    """Costing fields with unset (None) values dropped, plus any units a flat mapping carries."""
    if isinstance(options, CostingOptions):
        return options.costing_fields(), None
    costing = {k: v for k, v in dict(options or {}).items() if v is not None}
    units = costing.pop("units", None)
    return costing, units


def request_units(options: Optional[RouteOptions] = None, units: Optional[str] = None) -> str:
    _, carried = split_options(options)
    return carried or units or settings.ROUTE_UNITS


def costing_options_document(profile: str, options: Optional[RouteOptions] = None) -> Dict[str, Any]:
    """{"costing_options": {profile: {...}}}, the form the guidance engine re-routes with."""
    costing, _ = split_options(options)
    return {"costing_options": {profile: costing}}


def build_route_request(
    origin: LatLng,
    destination: LatLng,
    profile: str,
    options: Optional[RouteOptions] = None,
    units: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the Valhalla /route body.
    - options may be a CostingOptions model or a plain mapping
    - a "units" key in a mapping sets the request units
    - costing_options is only sent when something besides units is set
    """
    if isinstance(options, CostingOptions) and options.costing_type != profile:
        raise ValueError(
            f"{options.costing_type} costing options cannot be used with {profile} costing"
        )
    costing, _ = split_options(options)

    body: Dict[str, Any] = {
        "locations": [_location(origin), _location(destination)],
        "costing": profile,
        "units": request_units(options, units),
    }
    if costing:
        body["costing_options"] = {profile: costing}
    return body
