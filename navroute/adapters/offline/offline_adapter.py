import asyncio
import logging
from typing import Any, Callable, Dict, Optional

from navroute.adapters.request_builder import build_route_request, request_units
from navroute.core.exceptions import RouteParseError
from navroute.core.interfaces import RouteOptions, RoutingBackend
from navroute.models.route import LatLng, RouteResult
from navroute.services.route_parser import parse_route_response

logger = logging.getLogger(__name__)

# Takes a Valhalla /route request body, returns the raw trip response.
# Implementations are blocking (on-device graph search) and run in a thread.
OfflineRouteEngine = Callable[[Dict[str, Any]], Dict[str, Any]]


class OfflineRoutingAdapter(RoutingBackend):
    """
    Offline backend. Without an engine it answers every request with an
    empty route; with one it behaves like the online backend minus the network.
    """

    def __init__(self, engine: Optional[OfflineRouteEngine] = None):
        self.engine = engine

    async def compute_route(
        self,
        origin: LatLng,
        destination: LatLng,
        profile: str,
        options: Optional[RouteOptions] = None,
    ) -> RouteResult:
        units = request_units(options)
        if self.engine is None:
            return RouteResult.empty(units)

        try:
            body = build_route_request(origin, destination, profile, options, units)
            data = await asyncio.to_thread(self.engine, body)
            result = parse_route_response(data)
            if result is None:
                raise RouteParseError("offline engine response has no trip")
            return result
        except RouteParseError as e:
            logger.error("Offline routing failed: %s", e)
        except Exception:
            logger.exception("Offline route engine raised")

        return RouteResult.empty(units)
