"""PowerDistribution: a PDU, transfer switch, switchgear or power shelf."""

from __future__ import annotations

from pydantic import Field

from redfishkit.core.entity import MutableEntity
from redfishkit.core.errors import CollectionError
from redfishkit.core.odata import ODataLink, RedfishEnum, link_uri
from redfishkit.core.result import Result

from .circuit import Circuit
from .common import Status
from .outlet import Outlet
from .sensor import Sensor


class PowerEquipmentType(RedfishEnum):
    RACK_PDU = "RackPDU"
    FLOOR_PDU = "FloorPDU"
    MANUAL_TRANSFER_SWITCH = "ManualTransferSwitch"
    AUTOMATIC_TRANSFER_SWITCH = "AutomaticTransferSwitch"
    SWITCHGEAR = "Switchgear"
    POWER_SHELF = "PowerShelf"
    BUS = "Bus"


class PowerDistribution(MutableEntity):
    """Power distribution equipment and links to its circuits and outlets."""

    asset_tag: str | None = None
    equipment_type: PowerEquipmentType | None = None
    firmware_version: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    part_number: str | None = None
    production_date: str | None = None
    serial_number: str | None = None
    status: Status | None = None
    uuid: str | None = Field(default=None, alias="UUID")
    version: str | None = None

    branches_link: ODataLink | None = Field(default=None, alias="Branches")
    feeders_link: ODataLink | None = Field(default=None, alias="Feeders")
    mains_link: ODataLink | None = Field(default=None, alias="Mains")
    subfeeds_link: ODataLink | None = Field(default=None, alias="Subfeeds")
    outlets_link: ODataLink | None = Field(default=None, alias="Outlets")
    sensors_link: ODataLink | None = Field(default=None, alias="Sensors")

    read_write_fields = ("asset_tag",)

    def branches(self) -> Result[list[Circuit], CollectionError]:
        return Circuit.list_referenced(self.client, link_uri(self.branches_link))

    def feeders(self) -> Result[list[Circuit], CollectionError]:
        return Circuit.list_referenced(self.client, link_uri(self.feeders_link))

    def mains(self) -> Result[list[Circuit], CollectionError]:
        return Circuit.list_referenced(self.client, link_uri(self.mains_link))

    def subfeeds(self) -> Result[list[Circuit], CollectionError]:
        return Circuit.list_referenced(self.client, link_uri(self.subfeeds_link))

    def outlets(self) -> Result[list[Outlet], CollectionError]:
        return Outlet.list_referenced(self.client, link_uri(self.outlets_link))

    def sensors(self) -> Result[list[Sensor], CollectionError]:
        return Sensor.list_referenced(self.client, link_uri(self.sensors_link))


__all__ = ["PowerDistribution", "PowerEquipmentType"]
