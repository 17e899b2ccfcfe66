# tests/test_routing_endpoints.py
import json

import httpx
import respx

from data_valhalla import HEAD_NORTH, LEG_A_COORDS, encode, leg, maneuver, trip_response

VALHALLA_URL = "https://valhalla.test/route"
BODY = {
    "origin": {"lat": 40.0, "lon": -75.0},
    "destination": [-75.1, 40.1],
    "mode": "auto",
}


@respx.mock
def test_route_endpoint(client):
    route = respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=HEAD_NORTH))
    r = client.post("/route", json=BODY)
    assert r.status_code == 200, r.text
    j = r.json()
    assert j["status"] == "success"
    assert j["empty"] is False
    assert j["data"]["distance"] == 1000
    assert j["data"]["legs"][0]["steps"][0]["instruction"] == "Head north"

    sent = json.loads(route.calls.last.request.content)
    assert sent["locations"][0] == {"lon": -75.0, "lat": 40.0, "type": "break"}
    assert sent["locations"][1] == {"lon": -75.1, "lat": 40.1, "type": "break"}
    # no options and no default profile -> nothing beyond units
    assert "costing_options" not in sent


@respx.mock
def test_route_endpoint_passes_flat_options(client):
    route = respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=HEAD_NORTH))
    r = client.post("/route", json={**BODY, "options": {"use_highways": 0.5, "units": "miles"}})
    assert r.status_code == 200, r.text
    sent = json.loads(route.calls.last.request.content)
    assert sent["units"] == "miles"
    assert sent["costing_options"] == {"auto": {"use_highways": 0.5}}


@respx.mock
def test_route_endpoint_accepts_tagged_options(client):
    route = respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=HEAD_NORTH))
    body = {**BODY, "mode": "truck", "options": {"costing_type": "truck", "hazmat": True}}
    r = client.post("/route", json=body)
    assert r.status_code == 200, r.text
    sent = json.loads(route.calls.last.request.content)
    assert sent["costing"] == "truck"
    assert sent["costing_options"] == {"truck": {"hazmat": True}}


def test_route_endpoint_rejects_bad_tagged_options(client):
    body = {**BODY, "options": {"costing_type": "spaceship"}}
    r = client.post("/route", json=body)
    assert r.status_code == 422


def test_route_endpoint_rejects_bad_mode(client):
    r = client.post("/route", json={**BODY, "mode": "teleport"})
    assert r.status_code == 422


@respx.mock
def test_backend_failure_is_an_empty_route_not_an_error(client):
    respx.post(VALHALLA_URL).mock(side_effect=httpx.ConnectError("down"))
    r = client.post("/route", json=BODY)
    assert r.status_code == 200
    j = r.json()
    assert j["empty"] is True
    assert j["data"]["distance"] == 0.0
    assert j["data"]["legs"] == []


@respx.mock
def test_navigation_route_is_cached(client):
    payload = trip_response(
        [leg([maneuver(500, 60, "Go", street="Elm", begin_shape_index=0, end_shape_index=2)],
             500, 60, shape=encode(LEG_A_COORDS))],
        length=500,
        time=60,
    )
    respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=payload))
    r = client.post("/route/navigation", json=BODY)
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    route_id = data["route_id"]
    assert data["route"]["steps"][0]["road_name"] == "Elm"
    assert data["route"]["geometry"][0]["lat"] == 40.0
    assert data["config"]["waypoint_advance"]["range_m"] == 100.0
    assert json.loads(data["options"]) == {"costing_options": {"auto": {}}}

    got = client.get(f"/route/cache/{route_id}")
    assert got.status_code == 200
    assert got.json()["data"] == data["route"]

    assert client.delete(f"/route/cache/{route_id}").status_code == 200
    assert client.get(f"/route/cache/{route_id}").status_code == 404
    # removing twice is fine
    assert client.delete(f"/route/cache/{route_id}").status_code == 200


@respx.mock
def test_clear_cache(client):
    respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=HEAD_NORTH))
    ids = [client.post("/route/navigation", json=BODY).json()["data"]["route_id"] for _ in range(2)]
    assert client.delete("/route/cache").status_code == 200
    for rid in ids:
        assert client.get(f"/route/cache/{rid}").status_code == 404


@respx.mock(assert_all_called=False)
def test_offline_toggle_routes_offline(client):
    route = respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=HEAD_NORTH))
    r = client.put("/status/offline-mode", json={"offline_mode": True})
    assert r.json() == {"offline_mode": True}

    status = client.get("/status/routing").json()
    assert status["offline_mode"] is True
    assert status["base_url"] == VALHALLA_URL

    r = client.post("/route", json=BODY)
    assert r.status_code == 200
    assert r.json()["empty"] is True
    assert not route.called


def test_profile_defaults(client):
    r = client.get("/profiles/defaults/pedestrian")
    assert r.status_code == 200
    assert r.json()["data"] == {"costing_options": {"pedestrian": {}}}
    assert client.get("/profiles/defaults/hovercraft").status_code == 400


@respx.mock
def test_null_options_are_not_sent(client):
    route = respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=HEAD_NORTH))
    r = client.post("/route", json={**BODY, "options": {"use_highways": None, "use_tolls": 0.3}})
    assert r.status_code == 200, r.text
    sent = json.loads(route.calls.last.request.content)
    assert sent["costing_options"] == {"auto": {"use_tolls": 0.3}}


def test_tagged_options_must_match_mode(client):
    body = {**BODY, "mode": "bicycle", "options": {"costing_type": "auto", "use_highways": 0.5}}
    r = client.post("/route", json=body)
    assert r.status_code == 422
    assert "bicycle" in r.json()["detail"]["message"]


@respx.mock
def test_navigation_options_are_the_ones_routed_with(client):
    route = respx.post(VALHALLA_URL).mock(return_value=httpx.Response(200, json=HEAD_NORTH))
    body = {**BODY, "options": {"use_highways": 0.5, "units": "miles"}}
    data = client.post("/route/navigation", json=body).json()["data"]
    sent = json.loads(route.calls.last.request.content)
    assert json.loads(data["options"]) == {"costing_options": sent["costing_options"]}
    assert json.loads(data["options"]) == {"costing_options": {"auto": {"use_highways": 0.5}}}
