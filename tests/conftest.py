"""Shared fixtures: a fake transport and representative Redfish documents."""

from __future__ import annotations

from typing import Any

import pytest
from fakes import FakeClient

CIRCUIT_URI = "/redfish/v1/PowerEquipment/RackPDUs/1/Branches/A"
SYSTEM_URI = "/redfish/v1/Systems/1"


@pytest.fixture  # type: ignore[misc]
def client() -> FakeClient:
    """A fresh in-memory transport for each test."""
    return FakeClient()


@pytest.fixture  # type: ignore[misc]
def circuit_doc() -> dict[str, Any]:
    """A branch circuit as a rack PDU would report it."""
    return {
        "@odata.id": CIRCUIT_URI,
        "@odata.type": "#Circuit.v1_7_0.Circuit",
        "@odata.etag": 'W/"a1b2"',
        "Id": "A",
        "Name": "Branch Circuit A",
        "CircuitType": "Branch",
        "BreakerState": "Normal",
        "CriticalCircuit": False,
        "RatedCurrentAmps": 20,
        "ElectricalConsumerNames": ["web-01", "web-02"],
        "PowerRestorePolicy": "AlwaysOn",
        "PowerOnDelaySeconds": 0,
        "UserLabel": "",
        "ElectricalSourceManagerURI": "",
        "CurrentAmps": {"DataSourceUri": f"{CIRCUIT_URI}/Sensors/Current", "Reading": 3.4},
        "Status": {"State": "Enabled", "Health": "OK"},
        "Oem": {"Contoso": {"Zone": 4}},
        "Actions": {
            "#Circuit.PowerControl": {
                "target": f"{CIRCUIT_URI}/Actions/Circuit.PowerControl",
            }
        },
    }


@pytest.fixture  # type: ignore[misc]
def system_doc() -> dict[str, Any]:
    """A physical server with a reset action and boot settings."""
    return {
        "@odata.id": SYSTEM_URI,
        "@odata.type": "#ComputerSystem.v1_20_0.ComputerSystem",
        "Id": "1",
        "Name": "web-01",
        "SystemType": "Physical",
        "AssetTag": "",
        "HostName": "web-01",
        "PowerState": "On",
        "IndicatorLED": "Off",
        "Manufacturer": "Contoso",
        "SKU": "8675309",
        "UUID": "38947555-7742-3448-3784-823347823834",
        "Boot": {
            "BootSourceOverrideEnabled": "Disabled",
            "BootSourceOverrideTarget": "None",
            "BootSourceOverrideTarget@Redfish.AllowableValues": ["None", "Pxe", "Hdd"],
            "BootSourceOverrideMode": "UEFI",
        },
        "Status": {"State": "Enabled", "Health": "OK", "HealthRollup": "OK"},
        "Actions": {
            "#ComputerSystem.Reset": {
                "target": f"{SYSTEM_URI}/Actions/ComputerSystem.Reset",
                "ResetType@Redfish.AllowableValues": ["On", "ForceOff", "GracefulRestart", "ForceRestart"],
            },
            "Oem": {},
        },
    }
