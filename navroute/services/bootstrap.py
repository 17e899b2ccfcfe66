# services/bootstrap.py
from __future__ import annotations
from typing import Optional

from navroute.adapters.offline.offline_adapter import OfflineRouteEngine, OfflineRoutingAdapter
from navroute.adapters.online.valhalla_adapter import ValhallaRoutingAdapter
from navroute.core.preferences import AppPreferences, app_preferences
from navroute.services.multiplexed_routing import MultiplexedRoutingService
from navroute.services.navigation_adapter import NavigationAdapterRepository
from navroute.services.routing_profiles import RoutingProfileStore


def build_routing_service(
    preferences: AppPreferences,
    offline_engine: Optional[OfflineRouteEngine] = None,
) -> MultiplexedRoutingService:
    return MultiplexedRoutingService(
        preferences=preferences,
        online=ValhallaRoutingAdapter(preferences),
        offline=OfflineRoutingAdapter(engine=offline_engine),
    )


# shared instances used by the HTTP app
routing_profiles = RoutingProfileStore()
routing_service = build_routing_service(app_preferences)
navigation_adapters = NavigationAdapterRepository(profiles=routing_profiles)
