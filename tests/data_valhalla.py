# tests/data_valhalla.py
"""Valhalla-shaped payloads shared by the tests."""
import polyline

ORIGIN = {"latitude": 40.0, "longitude": -75.0}
DESTINATION = {"latitude": 40.1, "longitude": -75.1}

# [lon, lat] pairs
LEG_A_COORDS = [(-75.0, 40.0), (-75.05, 40.05), (-75.1, 40.1)]
LEG_B_COORDS = [(-75.1, 40.1), (-75.2, 40.15)]


def encode(coords):
    return polyline.encode(coords, 6, geojson=True)


def maneuver(length=100.0, time=10.0, instruction="Continue", street=None, **extra):
    m = {"length": length, "time": time, "instruction": instruction, "type": 1}
    if street is not None:
        m["street_names"] = [street]
    m.update(extra)
    return m


def leg(maneuvers, length=None, time=None, shape=None):
    out = {
        "maneuvers": maneuvers,
        "summary": {
            "length": length if length is not None else 0.0,
            "time": time if time is not None else 0.0,
        },
    }
    if shape is not None:
        out["shape"] = shape
    return out


def trip_response(legs, length=0.0, time=0.0, units="kilometers"):
    return {
        "trip": {
            "locations": [],
            "legs": legs,
            "summary": {"length": length, "time": time},
            "units": units,
            "status": 0,
        }
    }


HEAD_NORTH = trip_response(
    [leg([maneuver(1000, 120, "Head north", street="Main Street")], 1000, 120)],
    length=1000,
    time=120,
)
