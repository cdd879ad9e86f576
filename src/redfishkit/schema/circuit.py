"""Circuit: an electrical circuit of a PDU, switchgear or other power equipment."""

from __future__ import annotations

from pydantic import Field

from redfishkit.core.entity import MutableEntity
from redfishkit.core.odata import RedfishEnum
from redfishkit.transport.base import Response

from .common import PowerRestorePolicy, PowerState, Status
from .sensor import SensorExcerpt


class CircuitType(RedfishEnum):
    MAINS = "Mains"
    BRANCH = "Branch"
    SUBFEED = "Subfeed"
    FEEDER = "Feeder"
    BUS = "Bus"


class VoltageType(RedfishEnum):
    AC = "AC"
    DC = "DC"


class BreakerState(RedfishEnum):
    NORMAL = "Normal"
    TRIPPED = "Tripped"
    OFF = "Off"


class PowerControlState(RedfishEnum):
    """Target state for the PowerControl action of circuits and outlets."""

    ON = "On"
    OFF = "Off"
    POWER_CYCLE = "PowerCycle"


class Circuit(MutableEntity):
    """An electrical circuit.

    ``RatedCurrentAmps`` and the sensor readings are read-only; only the
    properties in ``read_write_fields`` are ever sent by ``update()``.
    """

    breaker_state: BreakerState | None = None
    circuit_type: CircuitType | None = None
    configuration_locked: bool | None = None
    critical_circuit: bool | None = None
    current_amps: SensorExcerpt | None = None
    electrical_consumer_names: list[str] | None = None
    electrical_context: str | None = None
    electrical_source_manager_uri: str | None = Field(
        default=None, alias="ElectricalSourceManagerURI"
    )
    electrical_source_name: str | None = None
    energy_kwh: SensorExcerpt | None = Field(default=None, alias="EnergykWh")
    frequency_hz: SensorExcerpt | None = None
    location_indicator_active: bool | None = None
    nominal_voltage: str | None = None
    phase_wiring_type: str | None = None
    plug_type: str | None = None
    power_control_locked: bool | None = None
    power_cycle_delay_seconds: float | None = None
    power_enabled: bool | None = None
    power_load_percent: SensorExcerpt | None = None
    power_off_delay_seconds: float | None = None
    power_on_delay_seconds: float | None = None
    power_restore_delay_seconds: float | None = None
    power_restore_policy: PowerRestorePolicy | None = None
    power_state: PowerState | None = None
    power_state_in_transition: bool | None = None
    power_watts: SensorExcerpt | None = None
    rated_current_amps: float | None = None
    status: Status | None = None
    unbalanced_current_percent: SensorExcerpt | None = None
    unbalanced_voltage_percent: SensorExcerpt | None = None
    user_label: str | None = None
    voltage: SensorExcerpt | None = None
    voltage_type: VoltageType | None = None

    read_write_fields = (
        "configuration_locked",
        "critical_circuit",
        "electrical_consumer_names",
        "electrical_source_manager_uri",
        "electrical_source_name",
        "location_indicator_active",
        "power_control_locked",
        "power_cycle_delay_seconds",
        "power_off_delay_seconds",
        "power_on_delay_seconds",
        "power_restore_delay_seconds",
        "power_restore_policy",
        "user_label",
    )

    def power_control(self, state: PowerControlState) -> Response:
        """Switch the circuit on, off, or power-cycle it."""
        return self.perform_action("#Circuit.PowerControl", PowerState=state)


__all__ = ["Circuit", "CircuitType", "VoltageType", "BreakerState", "PowerControlState"]
