"""Outlet: an electrical outlet of a PDU."""

from __future__ import annotations

from pydantic import Field

from redfishkit.core.entity import MutableEntity
from redfishkit.transport.base import Response

from .circuit import PowerControlState, VoltageType
from .common import PowerRestorePolicy, PowerState, Status
from .sensor import SensorExcerpt


class Outlet(MutableEntity):
    configuration_locked: bool | None = None
    current_amps: SensorExcerpt | None = None
    electrical_consumer_names: list[str] | None = None
    electrical_context: str | None = None
    energy_kwh: SensorExcerpt | None = Field(default=None, alias="EnergykWh")
    frequency_hz: SensorExcerpt | None = None
    location_indicator_active: bool | None = None
    nominal_voltage: str | None = None
    outlet_type: str | None = None
    phase_wiring_type: str | None = None
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
    user_label: str | None = None
    voltage: SensorExcerpt | None = None
    voltage_type: VoltageType | None = None

    read_write_fields = (
        "configuration_locked",
        "electrical_consumer_names",
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
        """Switch the outlet on, off, or power-cycle it."""
        return self.perform_action("#Outlet.PowerControl", PowerState=state)


__all__ = ["Outlet"]
