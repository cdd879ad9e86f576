"""Chassis: a physical or logical container of systems, sensors and power equipment."""

from __future__ import annotations

from pydantic import Field

from redfishkit.core.entity import MutableEntity
from redfishkit.core.errors import CollectionError
from redfishkit.core.odata import ODataLink, RedfishEnum, link_uri
from redfishkit.core.result import Result

from .common import IndicatorLED, PowerState, Status
from .sensor import Sensor


class ChassisType(RedfishEnum):
    RACK = "Rack"
    BLADE = "Blade"
    ENCLOSURE = "Enclosure"
    STAND_ALONE = "StandAlone"
    RACK_MOUNT = "RackMount"
    CARD = "Card"
    CARTRIDGE = "Cartridge"
    ROW = "Row"
    POD = "Pod"
    EXPANSION = "Expansion"
    SIDECAR = "Sidecar"
    ZONE = "Zone"
    SLED = "Sled"
    SHELF = "Shelf"
    DRAWER = "Drawer"
    MODULE = "Module"
    COMPONENT = "Component"
    IP_BASED_DRIVE = "IPBasedDrive"
    RACK_GROUP = "RackGroup"
    STORAGE_ENCLOSURE = "StorageEnclosure"
    OTHER = "Other"


class EnvironmentalClass(RedfishEnum):
    """ASHRAE environmental class."""

    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"


class Chassis(MutableEntity):
    asset_tag: str | None = None
    chassis_type: ChassisType | None = None
    electrical_source_manager_uris: list[str] | None = Field(
        default=None, alias="ElectricalSourceManagerURIs"
    )
    electrical_source_names: list[str] | None = None
    environmental_class: EnvironmentalClass | None = None
    indicator_led: IndicatorLED | None = Field(default=None, alias="IndicatorLED")
    location_indicator_active: bool | None = None
    manufacturer: str | None = None
    model: str | None = None
    part_number: str | None = None
    power_state: PowerState | None = None
    serial_number: str | None = None
    sku: str | None = Field(default=None, alias="SKU")
    status: Status | None = None
    uuid: str | None = Field(default=None, alias="UUID")

    sensors_link: ODataLink | None = Field(default=None, alias="Sensors")

    read_write_fields = (
        "asset_tag",
        "electrical_source_manager_uris",
        "electrical_source_names",
        "environmental_class",
        "location_indicator_active",
    )

    def sensors(self) -> Result[list[Sensor], CollectionError]:
        return Sensor.list_referenced(self.client, link_uri(self.sensors_link))


__all__ = ["Chassis", "ChassisType", "EnvironmentalClass"]
