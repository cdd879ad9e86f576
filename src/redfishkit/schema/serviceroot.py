"""ServiceRoot: the ``/redfish/v1/`` entry point and navigation to top-level collections."""

from __future__ import annotations

from typing import Self

from pydantic import Field

from redfishkit.core.entity import Entity
from redfishkit.core.errors import CollectionError
from redfishkit.core.odata import ODataLink, link_uri
from redfishkit.core.result import Result
from redfishkit.core.settings import Settings
from redfishkit.transport.base import Client
from redfishkit.transport.http import HTTPClient

from .chassis import Chassis
from .computersystem import ComputerSystem
from .manager import Manager

DEFAULT_URI = "/redfish/v1/"


class ServiceRoot(Entity):
    """Read-only entry point of a Redfish service."""

    redfish_version: str | None = None
    uuid: str | None = Field(default=None, alias="UUID")
    product: str | None = None
    vendor: str | None = None

    systems_link: ODataLink | None = Field(default=None, alias="Systems")
    chassis_link: ODataLink | None = Field(default=None, alias="Chassis")
    managers_link: ODataLink | None = Field(default=None, alias="Managers")

    @classmethod
    def get(cls, client: Client, uri: str = DEFAULT_URI) -> Self:
        return super().get(client, uri)

    def systems(self) -> Result[list[ComputerSystem], CollectionError]:
        return ComputerSystem.list_referenced(self.client, link_uri(self.systems_link))

    def chassis(self) -> Result[list[Chassis], CollectionError]:
        return Chassis.list_referenced(self.client, link_uri(self.chassis_link))

    def managers(self) -> Result[list[Manager], CollectionError]:
        return Manager.list_referenced(self.client, link_uri(self.managers_link))


def connect(config: Settings | None = None) -> ServiceRoot:
    """Build an `HTTPClient` from settings and fetch the service root."""
    return ServiceRoot.get(HTTPClient.from_settings(config))


__all__ = ["ServiceRoot", "connect", "DEFAULT_URI"]
