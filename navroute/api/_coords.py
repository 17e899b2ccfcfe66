# api/_coords.py
from typing import Any, Dict


def coerce_point(item: Any) -> Any:
    """
    Accept:
      - {"latitude": .., "longitude": ..}
      - {"lat": .., "lon"|"lng": ..}
      - [lon, lat]
    Return a {"latitude", "longitude"} dict, or the input untouched so
    pydantic reports the problem.
    """
    if isinstance(item, dict):
        if "latitude" in item and "longitude" in item:
            return item
        if "lat" in item and ("lon" in item or "lng" in item):
            lon = item.get("lon", item.get("lng"))
            out: Dict[str, float] = {"latitude": item["lat"], "longitude": lon}
            return out
    if isinstance(item, (list, tuple)) and len(item) == 2:
        # positional pairs are [lon, lat], same as GeoJSON
        return {"latitude": item[1], "longitude": item[0]}
    return item
