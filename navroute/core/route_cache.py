# core/route_cache.py
import threading
import uuid
from typing import Dict, Generic, Optional, TypeVar

from navroute.models.navigation import NavigationRoute

T = TypeVar("T")


class RouteCache(Generic[T]):
    """
    Holds large route objects under short opaque ids so callers can pass the
    id around (e.g. in navigation parameters) instead of the payload.
    Entries live until remove()/clear(); there is no TTL and no eviction.
    """

    def __init__(self):
        self._store: Dict[str, T] = {}
        self._lock = threading.Lock()

    def store(self, route: T) -> str:
        with self._lock:
            route_id = str(uuid.uuid4())
            while route_id in self._store:
                route_id = str(uuid.uuid4())
            self._store[route_id] = route
            return route_id

    def get(self, route_id: str) -> Optional[T]:
        with self._lock:
            return self._store.get(route_id)

    def remove(self, route_id: str) -> None:
        with self._lock:
            self._store.pop(route_id, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


# one shared cache instance for adapted navigation routes
route_cache: RouteCache[NavigationRoute] = RouteCache()
