import logging
from typing import Optional

from navroute.core.interfaces import RouteOptions, RoutingBackend
from navroute.core.preferences import AppPreferences
from navroute.models.route import LatLng, RouteResult

logger = logging.getLogger(__name__)


class MultiplexedRoutingService(RoutingBackend):
    """Sends each call wholly to the offline or the online backend."""

    def __init__(
        self,
        preferences: AppPreferences,
        online: RoutingBackend,
        offline: RoutingBackend,
    ):
        self.preferences = preferences
        self.online = online
        self.offline = offline

    def select_backend(self) -> RoutingBackend:
        return self.offline if self.preferences.offline_mode else self.online

    async def compute_route(
        self,
        origin: LatLng,
        destination: LatLng,
        profile: str,
        options: Optional[RouteOptions] = None,
    ) -> RouteResult:
        # sampled once; toggling mid-flight does not reroute this call
        backend = self.select_backend()
        logger.debug("Routing %s via %s", profile, type(backend).__name__)
        return await backend.compute_route(origin, destination, profile, options)
