"""Manager: a BMC, enclosure manager or other management controller."""

from __future__ import annotations

from pydantic import Field

from redfishkit.core.entity import MutableEntity
from redfishkit.core.odata import RedfishEnum
from redfishkit.transport.base import Response

from .common import PowerState, ResetType, Status


class ManagerType(RedfishEnum):
    MANAGEMENT_CONTROLLER = "ManagementController"
    ENCLOSURE_MANAGER = "EnclosureManager"
    BMC = "BMC"
    RACK_MANAGER = "RackManager"
    AUXILIARY_CONTROLLER = "AuxiliaryController"
    SERVICE = "Service"


class Manager(MutableEntity):
    """A management controller and its clock settings.

    ``date_time`` and ``date_time_local_offset`` are kept as the strings the
    service sends so that an unchanged clock never shows up in a diff because
    of a formatting round-trip.
    """

    auto_dst_enabled: bool | None = Field(default=None, alias="AutoDSTEnabled")
    date_time: str | None = None
    date_time_local_offset: str | None = None
    firmware_version: str | None = None
    location_indicator_active: bool | None = None
    manager_type: ManagerType | None = None
    model: str | None = None
    power_state: PowerState | None = None
    service_identification: str | None = None
    status: Status | None = None
    time_zone_name: str | None = None
    uuid: str | None = Field(default=None, alias="UUID")

    read_write_fields = (
        "auto_dst_enabled",
        "date_time",
        "date_time_local_offset",
        "location_indicator_active",
        "service_identification",
        "time_zone_name",
    )

    def reset(self, reset_type: ResetType = ResetType.GRACEFUL_RESTART) -> Response:
        """Reset the manager through its ``#Manager.Reset`` action."""
        return self.perform_action("#Manager.Reset", ResetType=reset_type)


__all__ = ["Manager", "ManagerType"]
