from fastapi import APIRouter

from navroute.api._resp import fail, ok
from navroute.core.exceptions import UnknownRoutingModeError
from navroute.models.route import RoutingMode
from navroute.services.bootstrap import routing_profiles

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/defaults/{mode}")
def default_options(mode: str):
    try:
        routing_mode = RoutingMode.from_value(mode)
    except UnknownRoutingModeError as e:
        fail(400, str(e))
    options = routing_profiles.default_options(routing_mode)
    return ok(options.to_valhalla_options())
