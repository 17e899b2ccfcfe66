from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

from navroute.models.costing import CostingOptions
from navroute.models.route import LatLng, RouteResult

RouteOptions = Union[CostingOptions, Mapping[str, Any], None]


class RoutingBackend(ABC):
    """
    All online/offline routing backends must implement this.
    compute_route resolves to exactly one RouteResult and never raises for
    backend trouble; failures come back as RouteResult.empty().
    """

    @abstractmethod
    async def compute_route(
        self,
        origin: LatLng,
        destination: LatLng,
        profile: str,
        options: Optional[RouteOptions] = None,
    ) -> RouteResult: ...
