"""Tests for the snapshot-diff partial update (`MutableEntity.update`).

Scope
-----
1.  **Empty diff**: nothing whitelisted changed -> no PATCH at all.
2.  **Whitelist isolation**: read-only fields never reach the PATCH body.
3.  **Minimal delta**: exactly the changed whitelisted fields, by wire name.
4.  **Baseline**: the snapshot is the last-fetched bytes, not the live object,
    and it is only replaced by `refresh()`.
5.  **Errors**: transport errors propagate; a missing or corrupt snapshot is a
    `DecodeError`; an empty whitelist fails at class definition time.
"""

from __future__ import annotations

import json
from typing import Any

import pytest
from conftest import CIRCUIT_URI
from fakes import FakeClient

from redfishkit.core.entity import MutableEntity
from redfishkit.core.errors import DecodeError, TransportError
from redfishkit.schema.chassis import Chassis, ChassisType
from redfishkit.schema.circuit import Circuit
from redfishkit.schema.common import PowerRestorePolicy

CHASSIS_URI = "/redfish/v1/Chassis/1"


def _fetch(client: FakeClient, doc: dict[str, Any]) -> Circuit:
    client.documents[CIRCUIT_URI] = doc
    return Circuit.get(client, CIRCUIT_URI)


def test_critical_circuit_example_sends_only_whitelisted_change(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    """CriticalCircuit is writable, RatedCurrentAmps is not: only the former is sent."""
    circuit = _fetch(client, circuit_doc)

    circuit.critical_circuit = True
    circuit.rated_current_amps = 30

    circuit.update()

    assert client.requests("PATCH") == [(CIRCUIT_URI, {"CriticalCircuit": True})]


def test_no_changes_issues_no_patch(client: FakeClient, circuit_doc: dict[str, Any]) -> None:
    circuit = _fetch(client, circuit_doc)

    circuit.update()

    assert client.requests("PATCH") == []


def test_reassigning_same_values_is_not_a_change(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    """Equal values (including an equal new list) produce an empty diff."""
    circuit = _fetch(client, circuit_doc)
    circuit.critical_circuit = False
    circuit.electrical_consumer_names = ["web-01", "web-02"]
    circuit.power_restore_policy = "AlwaysOn"  # type: ignore[assignment]

    circuit.update()

    assert client.requests("PATCH") == []


def test_read_only_changes_alone_succeed_without_patch(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    circuit = _fetch(client, circuit_doc)
    circuit.rated_current_amps = 32
    circuit.name = "renamed"
    assert circuit.status is not None
    circuit.status.health = None

    circuit.update()

    assert client.requests("PATCH") == []


@pytest.mark.parametrize(  # type: ignore[misc]
    "changes, expected",
    [
        ({}, {}),
        ({"user_label": "rack 12"}, {"UserLabel": "rack 12"}),
        (
            {"user_label": "rack 12", "power_on_delay_seconds": 5},
            {"UserLabel": "rack 12", "PowerOnDelaySeconds": 5.0},
        ),
        (
            {
                "user_label": "rack 12",
                "power_on_delay_seconds": 5,
                "electrical_source_manager_uri": "https://pdu-mgr/",
                "breaker_state": "Tripped",
            },
            {
                "UserLabel": "rack 12",
                "PowerOnDelaySeconds": 5.0,
                "ElectricalSourceManagerURI": "https://pdu-mgr/",
            },
        ),
    ],
)
def test_patch_body_contains_exactly_the_changed_fields(
    client: FakeClient,
    circuit_doc: dict[str, Any],
    changes: dict[str, Any],
    expected: dict[str, Any],
) -> None:
    circuit = _fetch(client, circuit_doc)
    for attr, value in changes.items():
        setattr(circuit, attr, value)

    assert circuit.patch_payload() == expected
    circuit.update()

    sent = client.requests("PATCH")
    if expected:
        assert sent == [(CIRCUIT_URI, expected)]
    else:
        assert sent == []


def test_list_fields_compare_element_wise(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    """An in-place append on a list is detected and the whole new list is sent."""
    circuit = _fetch(client, circuit_doc)
    assert circuit.electrical_consumer_names is not None
    circuit.electrical_consumer_names.append("web-03")

    circuit.update()

    assert client.requests("PATCH") == [
        (CIRCUIT_URI, {"ElectricalConsumerNames": ["web-01", "web-02", "web-03"]})
    ]


def test_enum_values_are_sent_as_wire_strings(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    circuit = _fetch(client, circuit_doc)
    circuit.power_restore_policy = PowerRestorePolicy.LAST_STATE

    circuit.update()

    assert client.requests("PATCH") == [(CIRCUIT_URI, {"PowerRestorePolicy": "LastState"})]


def test_unlisted_enum_values_decode_and_update(client: FakeClient) -> None:
    """Newer services send enum values this library does not list yet."""
    client.documents[CHASSIS_URI] = {
        "@odata.id": CHASSIS_URI,
        "Id": "1",
        "ChassisType": "PowerStrip",
        "EnvironmentalClass": "A1",
        "AssetTag": "a",
    }
    chassis = Chassis.get(client, CHASSIS_URI)

    assert chassis.chassis_type == "PowerStrip"
    assert isinstance(chassis.chassis_type, ChassisType)
    assert chassis.chassis_type.value == "PowerStrip"

    chassis.asset_tag = "b"
    chassis.update()
    chassis.environmental_class = "A5"  # type: ignore[assignment]
    chassis.update()

    assert client.requests("PATCH") == [
        (CHASSIS_URI, {"AssetTag": "b"}),
        (CHASSIS_URI, {"AssetTag": "b", "EnvironmentalClass": "A5"}),
    ]


def test_clearing_a_field_sends_null(client: FakeClient, circuit_doc: dict[str, Any]) -> None:
    circuit = _fetch(client, circuit_doc)
    circuit.user_label = None

    circuit.update()

    assert client.requests("PATCH") == [(CIRCUIT_URI, {"UserLabel": None})]


def test_snapshot_is_not_refreshed_by_update(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    """Without a refresh, a second update diffs against the same fetched bytes."""
    circuit = _fetch(client, circuit_doc)
    raw_before = circuit.raw
    circuit.critical_circuit = True

    circuit.update()
    circuit.update()

    assert circuit.raw == raw_before
    assert client.requests("PATCH") == [
        (CIRCUIT_URI, {"CriticalCircuit": True}),
        (CIRCUIT_URI, {"CriticalCircuit": True}),
    ]


def test_snapshot_is_rebuilt_from_raw_bytes_each_time(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    circuit = _fetch(client, circuit_doc)
    circuit.critical_circuit = True

    first = circuit.snapshot()
    second = circuit.snapshot()

    assert first is not second
    assert first.critical_circuit is False
    assert second.critical_circuit is False


def test_refresh_replaces_values_and_baseline(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    circuit = _fetch(client, circuit_doc)
    circuit.critical_circuit = True
    circuit.update()

    client.documents[CIRCUIT_URI] = {**circuit_doc, "CriticalCircuit": True, "Oem": {}}
    circuit.refresh()

    assert circuit.critical_circuit is True
    assert circuit.oem == {}
    circuit.update()
    assert len(client.requests("PATCH")) == 1


def test_transport_error_propagates(client: FakeClient, circuit_doc: dict[str, Any]) -> None:
    """A service refusing a value (HTTP 400) surfaces unchanged to the caller."""
    circuit = _fetch(client, circuit_doc)
    refusal = TransportError("PowerOnDelaySeconds out of range", uri=CIRCUIT_URI, status=400)
    client.patch_error = refusal
    circuit.power_on_delay_seconds = 99999

    with pytest.raises(TransportError) as info:
        circuit.update()

    assert info.value is refusal
    assert info.value.status == 400


def test_update_without_fetched_bytes_is_a_decode_error() -> None:
    circuit = Circuit(odata_id=CIRCUIT_URI, critical_circuit=True)

    with pytest.raises(DecodeError):
        circuit.update()


def test_corrupt_snapshot_is_a_decode_error(
    client: FakeClient, circuit_doc: dict[str, Any]
) -> None:
    circuit = _fetch(client, circuit_doc)
    circuit._raw = b"{not json"
    circuit.user_label = "x"

    with pytest.raises(DecodeError):
        circuit.update()
    assert client.requests("PATCH") == []


def test_empty_whitelist_is_rejected_at_class_definition() -> None:
    with pytest.raises(TypeError, match="read_write_fields"):

        class Broken(MutableEntity):
            label: str | None = None


def test_whitelist_must_name_declared_fields() -> None:
    with pytest.raises(TypeError, match="unknown fields"):

        class Misspelled(MutableEntity):
            label: str | None = None

            read_write_fields = ("lable",)


def test_patch_body_is_json(client: FakeClient, circuit_doc: dict[str, Any]) -> None:
    circuit = _fetch(client, circuit_doc)
    circuit.user_label = "ü-label"

    circuit.update()

    verb, uri, body = client.calls[-1]
    assert (verb, uri) == ("PATCH", CIRCUIT_URI)
    assert body is not None
    assert json.loads(body) == {"UserLabel": "ü-label"}
