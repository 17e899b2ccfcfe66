import logging
from typing import Any, Dict, Optional

import httpx

from navroute.adapters.request_builder import build_route_request, request_units
from navroute.config import settings
from navroute.core.exceptions import RouteParseError, RoutingRequestError
from navroute.core.interfaces import RouteOptions, RoutingBackend
from navroute.core.preferences import AppPreferences
from navroute.models.route import LatLng, RouteResult
from navroute.services.route_parser import parse_route_response

logger = logging.getLogger(__name__)


class ValhallaRoutingAdapter(RoutingBackend):
    """
    Online backend: POSTs to a Valhalla /route endpoint.
    Endpoint and API key are read from the preference store on every call.
    """

    def __init__(self, preferences: AppPreferences, timeout: Optional[float] = None):
        self.preferences = preferences
        self.timeout = settings.HTTP_TIMEOUT_S if timeout is None else timeout

    async def _post(self, body: Dict[str, Any]) -> Any:
        config = self.preferences.valhalla_api_config
        params = {"api_key": config.api_key} if config.api_key else None
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(config.base_url, params=params, json=body)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as e:
            raise RoutingRequestError(
                f"Valhalla HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            raise RoutingRequestError(f"Valhalla transport error: {e}") from e
        except ValueError as e:
            # body was not JSON
            raise RoutingRequestError(f"Valhalla returned invalid JSON: {e}") from e

    async def compute_route(
        self,
        origin: LatLng,
        destination: LatLng,
        profile: str,
        options: Optional[RouteOptions] = None,
    ) -> RouteResult:
        units = request_units(options)
        try:
            body = build_route_request(origin, destination, profile, options, units)
            data = await self._post(body)
            result = parse_route_response(data)
            if result is None:
                raise RouteParseError("Valhalla response has no trip")
            return result
        except (RoutingRequestError, RouteParseError) as e:
            logger.error("Valhalla routing failed: %s", e)
        except Exception:
            logger.exception("Unexpected error while routing with Valhalla")

        logger.warning(
            "Returning empty route for %s -> %s (%s)", origin, destination, profile
        )
        return RouteResult.empty(units)
