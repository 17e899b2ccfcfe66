# tests/test_route_parser.py
import pytest

from navroute.services.route_parser import decode_shape, parse_route_response
from data_valhalla import (
    HEAD_NORTH,
    LEG_A_COORDS,
    LEG_B_COORDS,
    encode,
    leg,
    maneuver,
    trip_response,
)


def test_head_north_trip():
    result = parse_route_response(HEAD_NORTH)
    assert result is not None
    assert result.distance == 1000
    assert result.duration == 120
    assert len(result.legs) == 1
    step = result.legs[0].steps[0]
    assert (step.distance, step.duration, step.instruction) == (1000, 120, "Head north")
    assert step.name == "Main Street"


@pytest.mark.parametrize("counts", [[1], [3, 2], [0, 4, 1]])
def test_leg_and_step_counts_follow_the_response(counts):
    legs = [leg([maneuver() for _ in range(n)]) for n in counts]
    result = parse_route_response(trip_response(legs))
    assert [len(l.steps) for l in result.legs] == counts


@pytest.mark.parametrize("payload", [{}, {"trips": {}}, {"trip": None}, {"trip": []}, [], "oops", None])
def test_missing_trip_yields_none(payload):
    assert parse_route_response(payload) is None


def test_malformed_maneuvers_only_affect_their_leg():
    legs = [
        leg([maneuver(), maneuver()]),
        leg("not-a-list"),
        leg([maneuver(), "junk", maneuver(length="far"), maneuver()]),
    ]
    result = parse_route_response(trip_response(legs))
    assert len(result.legs) == 3
    assert [len(l.steps) for l in result.legs] == [2, 0, 2]


def test_non_object_leg_is_dropped():
    result = parse_route_response(trip_response([leg([maneuver()]), 42, leg([])]))
    assert len(result.legs) == 2


def test_absent_fields_default():
    result = parse_route_response({"trip": {"legs": [{"maneuvers": [{}]}]}})
    assert (result.distance, result.duration, result.units) == (0.0, 0.0, "kilometers")
    lg = result.legs[0]
    assert (lg.summary, lg.distance, lg.duration) == ("", 0.0, 0.0)
    step = lg.steps[0]
    assert (step.distance, step.duration, step.instruction, step.name) == (0.0, 0.0, "", "")
    assert step.geometry is None
    assert step.maneuver.location == []
    assert step.maneuver.modifier is None


def test_units_miles():
    result = parse_route_response(trip_response([], units="miles"))
    assert result.units == "miles"


def test_maneuver_fields():
    m = maneuver(
        instruction="Turn left onto Elm Street.",
        type=15,
        modifier="left",
        location=[-75.05, 40.05],
        begin_shape_index=1,
        end_shape_index=2,
    )
    result = parse_route_response(trip_response([leg([m])]))
    man = result.legs[0].steps[0].maneuver
    assert man.type == "15"
    assert man.modifier == "left"
    assert man.location == [-75.05, 40.05]
    assert (man.bearing_before, man.bearing_after) == (1.0, 2.0)
    assert man.instruction == "Turn left onto Elm Street."


def test_shape_decodes_as_lon_lat():
    coords = decode_shape(encode(LEG_A_COORDS))
    assert len(coords) == 3
    for got, want in zip(coords, LEG_A_COORDS):
        assert got == pytest.approx(list(want))


def test_bad_shape_keeps_the_leg():
    result = parse_route_response(trip_response([leg([maneuver()], shape="@@@")]))
    assert len(result.legs) == 1
    assert len(result.legs[0].steps) == 1


def test_route_geometry_joins_legs_without_duplicate_joint():
    legs = [
        leg([maneuver(begin_shape_index=0, end_shape_index=2)], shape=encode(LEG_A_COORDS)),
        leg([maneuver(begin_shape_index=0, end_shape_index=1)], shape=encode(LEG_B_COORDS)),
    ]
    result = parse_route_response(trip_response(legs))
    coords = result.geometry.coordinates
    assert len(coords) == 4
    assert coords[0] == pytest.approx([-75.0, 40.0])
    assert coords[-1] == pytest.approx([-75.2, 40.15])


def test_step_geometry_and_location_come_from_shape():
    m = maneuver(begin_shape_index=1, end_shape_index=2)
    result = parse_route_response(trip_response([leg([m], shape=encode(LEG_A_COORDS))]))
    step = result.legs[0].steps[0]
    assert len(step.geometry.coordinates) == 2
    assert step.geometry.coordinates[0] == pytest.approx([-75.05, 40.05])
    assert step.maneuver.location == pytest.approx([-75.05, 40.05])


def test_negative_values_never_reach_the_result():
    legs = [
        leg([maneuver(-5, -1), maneuver(50, 5)], 50, 5),
        leg([maneuver()], -5, -1),
    ]
    result = parse_route_response(trip_response(legs, length=-5, time=-1))
    assert (result.distance, result.duration) == (0.0, 0.0)
    # the bad leg is dropped, the bad maneuver only from its own leg
    assert len(result.legs) == 1
    assert [s.distance for s in result.legs[0].steps] == [50.0]


@pytest.mark.parametrize("bad", ["nan", "inf", float("nan"), float("-inf")])
def test_non_finite_values_are_malformed(bad):
    legs = [leg([maneuver(length=bad), maneuver()], 100, 10), leg([], bad, 0)]
    result = parse_route_response(trip_response(legs, length=bad, time=10))
    assert result.distance == 0.0
    assert result.duration == 10.0
    assert len(result.legs) == 1
    assert len(result.legs[0].steps) == 1
