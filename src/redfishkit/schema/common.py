"""Types shared across many Redfish resources: status, power state, reset types."""

from __future__ import annotations

from redfishkit.core.odata import RedfishEnum, RedfishModel


class Health(RedfishEnum):
    OK = "OK"
    WARNING = "Warning"
    CRITICAL = "Critical"


class State(RedfishEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"
    STANDBY_OFFLINE = "StandbyOffline"
    STANDBY_SPARE = "StandbySpare"
    IN_TEST = "InTest"
    STARTING = "Starting"
    ABSENT = "Absent"
    UNAVAILABLE_OFFLINE = "UnavailableOffline"
    DEFERRING = "Deferring"
    QUIESCED = "Quiesced"
    UPDATING = "Updating"
    QUALIFIED = "Qualified"
    DEGRADED = "Degraded"


class Status(RedfishModel):
    """The ``Status`` object carried by most resources."""

    state: State | None = None
    health: Health | None = None
    health_rollup: Health | None = None


class PowerState(RedfishEnum):
    ON = "On"
    OFF = "Off"
    POWERING_ON = "PoweringOn"
    POWERING_OFF = "PoweringOff"
    PAUSED = "Paused"


class IndicatorLED(RedfishEnum):
    UNKNOWN = "Unknown"
    LIT = "Lit"
    BLINKING = "Blinking"
    OFF = "Off"


class PowerRestorePolicy(RedfishEnum):
    """Desired power state when power is applied."""

    ALWAYS_ON = "AlwaysOn"
    ALWAYS_OFF = "AlwaysOff"
    LAST_STATE = "LastState"


class ResetType(RedfishEnum):
    ON = "On"
    FORCE_OFF = "ForceOff"
    GRACEFUL_SHUTDOWN = "GracefulShutdown"
    GRACEFUL_RESTART = "GracefulRestart"
    FORCE_RESTART = "ForceRestart"
    NMI = "Nmi"
    FORCE_ON = "ForceOn"
    PUSH_POWER_BUTTON = "PushPowerButton"
    POWER_CYCLE = "PowerCycle"
    SUSPEND = "Suspend"
    PAUSE = "Pause"
    RESUME = "Resume"
    FULL_POWER_CYCLE = "FullPowerCycle"


__all__ = [
    "Health",
    "State",
    "Status",
    "PowerState",
    "IndicatorLED",
    "PowerRestorePolicy",
    "ResetType",
]
