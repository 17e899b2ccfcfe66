# models/costing.py
from __future__ import annotations
import json
from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Type, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from navroute.models.route import RoutingMode


class BicycleType(str, Enum):
    ROAD = "road"
    HYBRID = "hybrid"
    CROSS = "cross"
    MOUNTAIN = "mountain"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "BicycleType":
        for item in cls:
            if item.value == value:
                return item
        return cls.ROAD


class PedestrianType(str, Enum):
    FOOT = "foot"
    WHEELCHAIR = "wheelchair"
    BLIND = "blind"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "PedestrianType":
        for item in cls:
            if item.value == value:
                return item
        return cls.FOOT


class CostingOptions(BaseModel):
    """
    Base for Valhalla costing options. Field names are already the
    lower_snake_case keys Valhalla expects; unset fields stay None and are
    left out of the request so the backend applies its own defaults.
    """

    model_config = ConfigDict(extra="ignore")

    costing_type: str

    def costing_fields(self) -> Dict[str, Any]:
        return self.model_dump(
            mode="json", exclude_none=True, exclude={"costing_type"}
        )

    def to_valhalla_options(self) -> Dict[str, Any]:
        return {"costing_options": {self.costing_type: self.costing_fields()}}

    def to_valhalla_options_json(self) -> str:
        return json.dumps(self.to_valhalla_options())


class AutoCostingFields(CostingOptions):
    """Parameters shared by every motorised costing (auto, truck, scooter, motorcycle)."""

    # maneuver and access penalties
    maneuver_penalty: Optional[float] = None
    gate_cost: Optional[float] = None
    gate_penalty: Optional[float] = None
    private_access_penalty: Optional[float] = None
    destination_only_penalty: Optional[float] = None

    # tolls and ferries
    toll_booth_cost: Optional[float] = None
    toll_booth_penalty: Optional[float] = None
    ferry_cost: Optional[float] = None
    use_ferry: Optional[float] = None

    # road type preferences, 0..1
    use_highways: Optional[float] = None
    use_tolls: Optional[float] = None
    use_living_streets: Optional[float] = None
    use_tracks: Optional[float] = None

    service_penalty: Optional[float] = None
    service_factor: Optional[float] = None

    country_crossing_cost: Optional[float] = None
    country_crossing_penalty: Optional[float] = None

    shortest: Optional[bool] = None
    use_distance: Optional[float] = None
    disable_hierarchy_pruning: Optional[bool] = None

    top_speed: Optional[float] = None
    fixed_speed: Optional[float] = None

    ignore_closures: Optional[bool] = None
    closure_factor: Optional[float] = None
    ignore_restrictions: Optional[bool] = None
    ignore_oneways: Optional[bool] = None
    ignore_non_vehicular_restrictions: Optional[bool] = None
    ignore_access: Optional[bool] = None
    ignore_construction: Optional[bool] = None

    # vehicle dimensions, meters
    height: Optional[float] = None
    width: Optional[float] = None

    exclude_unpaved: Optional[bool] = None
    exclude_cash_only_tolls: Optional[bool] = None
    include_hov2: Optional[bool] = None
    include_hov3: Optional[bool] = None
    include_hot: Optional[bool] = None


class AutoRoutingOptions(AutoCostingFields):
    costing_type: Literal["auto"] = "auto"


class TruckRoutingOptions(AutoCostingFields):
    costing_type: Literal["truck"] = "truck"

    length: Optional[float] = None  # meters
    weight: Optional[float] = None  # metric tons
    axle_load: Optional[float] = None  # metric tons
    axle_count: Optional[int] = None
    hazmat: Optional[bool] = None
    hgv_no_access_penalty: Optional[float] = None
    low_class_penalty: Optional[float] = None
    use_truck_route: Optional[float] = None


class MotorScooterRoutingOptions(AutoCostingFields):
    costing_type: Literal["motor_scooter"] = "motor_scooter"

    use_primary: Optional[float] = None
    use_hills: Optional[float] = None


class MotorcycleRoutingOptions(AutoCostingFields):
    costing_type: Literal["motorcycle"] = "motorcycle"

    use_trails: Optional[float] = None


class CyclingRoutingOptions(CostingOptions):
    costing_type: Literal["bicycle"] = "bicycle"

    bicycle_type: Optional[BicycleType] = None
    cycling_speed: Optional[float] = None  # km/h

    use_roads: Optional[float] = None
    use_hills: Optional[float] = None
    use_ferry: Optional[float] = None
    use_living_streets: Optional[float] = None
    avoid_bad_surfaces: Optional[float] = None

    maneuver_penalty: Optional[float] = None
    gate_cost: Optional[float] = None
    gate_penalty: Optional[float] = None
    destination_only_penalty: Optional[float] = None
    service_penalty: Optional[float] = None
    country_crossing_cost: Optional[float] = None
    country_crossing_penalty: Optional[float] = None

    shortest: Optional[bool] = None
    disable_hierarchy_pruning: Optional[bool] = None

    @field_validator("bicycle_type", mode="before")
    @classmethod
    def _known_bicycle_type(cls, v):
        # unknown names fall back to road
        return None if v is None else BicycleType.from_value(v)


class PedestrianRoutingOptions(CostingOptions):
    costing_type: Literal["pedestrian"] = "pedestrian"

    walking_speed: Optional[float] = None  # km/h

    walkway_factor: Optional[float] = None
    sidewalk_factor: Optional[float] = None
    alley_factor: Optional[float] = None
    driveway_factor: Optional[float] = None

    step_penalty: Optional[float] = None
    elevator_penalty: Optional[float] = None

    use_ferry: Optional[float] = None
    use_living_streets: Optional[float] = None
    use_tracks: Optional[float] = None
    use_hills: Optional[float] = None
    use_lit: Optional[float] = None

    service_penalty: Optional[float] = None
    service_factor: Optional[float] = None
    destination_only_penalty: Optional[float] = None

    max_hiking_difficulty: Optional[int] = None
    type: Optional[PedestrianType] = None

    max_distance: Optional[float] = None
    transit_start_end_max_distance: Optional[float] = None
    transit_transfer_max_distance: Optional[float] = None

    shortest: Optional[bool] = None
    mode_factor: Optional[float] = None

    @field_validator("type", mode="before")
    @classmethod
    def _known_pedestrian_type(cls, v):
        return None if v is None else PedestrianType.from_value(v)


AnyCostingOptions = Annotated[
    Union[
        AutoRoutingOptions,
        TruckRoutingOptions,
        MotorScooterRoutingOptions,
        MotorcycleRoutingOptions,
        CyclingRoutingOptions,
        PedestrianRoutingOptions,
    ],
    Field(discriminator="costing_type"),
]

costing_options_adapter: TypeAdapter = TypeAdapter(AnyCostingOptions)

OPTIONS_BY_MODE: Dict[RoutingMode, Type[CostingOptions]] = {
    RoutingMode.AUTO: AutoRoutingOptions,
    RoutingMode.TRUCK: TruckRoutingOptions,
    RoutingMode.MOTOR_SCOOTER: MotorScooterRoutingOptions,
    RoutingMode.MOTORCYCLE: MotorcycleRoutingOptions,
    RoutingMode.BICYCLE: CyclingRoutingOptions,
    RoutingMode.PEDESTRIAN: PedestrianRoutingOptions,
}


def default_options_for_mode(mode: RoutingMode) -> CostingOptions:
    return OPTIONS_BY_MODE[mode]()


def serialize_options(options: CostingOptions) -> str:
    """Flat JSON used when persisting a profile (costing_type included)."""
    return options.model_dump_json(exclude_none=True)


def deserialize_options(routing_mode: str, options_json: str) -> CostingOptions:
    """
    Restore options persisted with serialize_options().
    Unknown modes raise; unreadable JSON falls back to the mode defaults.
    """
    mode = RoutingMode.from_value(routing_mode)
    try:
        return OPTIONS_BY_MODE[mode].model_validate_json(options_json)
    except ValidationError:
        return default_options_for_mode(mode)
