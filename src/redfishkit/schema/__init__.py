"""Redfish resource contracts.

Each module mirrors one Redfish schema: field declarations, enumerations and,
for writable resources, the ``read_write_fields`` whitelist.
"""

from __future__ import annotations

from .chassis import Chassis
from .circuit import Circuit
from .computersystem import Boot, ComputerSystem
from .manager import Manager
from .outlet import Outlet
from .powerdistribution import PowerDistribution
from .sensor import Sensor
from .serviceroot import ServiceRoot, connect

__all__ = [
    "Boot",
    "Chassis",
    "Circuit",
    "ComputerSystem",
    "Manager",
    "Outlet",
    "PowerDistribution",
    "Sensor",
    "ServiceRoot",
    "connect",
]
