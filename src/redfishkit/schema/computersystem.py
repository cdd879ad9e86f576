"""ComputerSystem: a server, partition or virtual machine, plus its boot settings."""

from __future__ import annotations

from pydantic import Field

from redfishkit.core.entity import MutableEntity, encode
from redfishkit.core.odata import RedfishEnum, RedfishModel
from redfishkit.core.settings import get_logger
from redfishkit.transport.base import Response

from .common import IndicatorLED, PowerRestorePolicy, PowerState, ResetType, Status

logger = get_logger(__name__)


class BootSourceOverrideEnabled(RedfishEnum):
    DISABLED = "Disabled"
    ONCE = "Once"
    CONTINUOUS = "Continuous"


class BootSourceOverrideMode(RedfishEnum):
    LEGACY = "Legacy"
    UEFI = "UEFI"


class BootSourceOverrideTarget(RedfishEnum):
    NONE = "None"
    PXE = "Pxe"
    FLOPPY = "Floppy"
    CD = "Cd"
    USB = "Usb"
    HDD = "Hdd"
    BIOS_SETUP = "BiosSetup"
    UTILITIES = "Utilities"
    DIAGS = "Diags"
    UEFI_SHELL = "UefiShell"
    UEFI_TARGET = "UefiTarget"
    SD_CARD = "SDCard"
    UEFI_HTTP = "UefiHttp"
    REMOTE_DRIVE = "RemoteDrive"
    UEFI_BOOT_NEXT = "UefiBootNext"
    RECOVERY = "Recovery"


class PowerMode(RedfishEnum):
    MAXIMUM_PERFORMANCE = "MaximumPerformance"
    BALANCED_PERFORMANCE = "BalancedPerformance"
    POWER_SAVING = "PowerSaving"
    STATIC = "Static"
    OS_CONTROLLED = "OSControlled"
    OEM = "OEM"


class SystemType(RedfishEnum):
    PHYSICAL = "Physical"
    VIRTUAL = "Virtual"
    OS = "OS"
    PHYSICALLY_PARTITIONED = "PhysicallyPartitioned"
    VIRTUALLY_PARTITIONED = "VirtuallyPartitioned"
    COMPOSED = "Composed"
    DPU = "DPU"


class Boot(RedfishModel):
    """Boot source override settings of a system."""

    boot_next: str | None = None
    boot_order: list[str] | None = None
    boot_source_override_enabled: BootSourceOverrideEnabled | None = None
    boot_source_override_mode: BootSourceOverrideMode | None = None
    boot_source_override_target: BootSourceOverrideTarget | None = None
    uefi_target_boot_source_override: str | None = None


class ComputerSystem(MutableEntity):
    """A computer system as seen by the Redfish service."""

    asset_tag: str | None = None
    bios_version: str | None = None
    boot: Boot | None = None
    host_name: str | None = None
    indicator_led: IndicatorLED | None = Field(default=None, alias="IndicatorLED")
    location_indicator_active: bool | None = None
    manufacturer: str | None = None
    model: str | None = None
    part_number: str | None = None
    power_cycle_delay_seconds: float | None = None
    power_mode: PowerMode | None = None
    power_off_delay_seconds: float | None = None
    power_on_delay_seconds: float | None = None
    power_restore_policy: PowerRestorePolicy | None = None
    power_state: PowerState | None = None
    serial_number: str | None = None
    sku: str | None = Field(default=None, alias="SKU")
    status: Status | None = None
    system_type: SystemType | None = None
    uuid: str | None = Field(default=None, alias="UUID")

    read_write_fields = (
        "asset_tag",
        "host_name",
        "location_indicator_active",
        "power_cycle_delay_seconds",
        "power_mode",
        "power_off_delay_seconds",
        "power_on_delay_seconds",
        "power_restore_policy",
    )

    def reset(self, reset_type: ResetType = ResetType.GRACEFUL_RESTART) -> Response:
        """Reset the system through its ``#ComputerSystem.Reset`` action."""
        return self.perform_action("#ComputerSystem.Reset", ResetType=reset_type)

    def set_boot(self, boot: Boot) -> Response:
        """PATCH the boot override settings that were set on ``boot``.

        Only the properties explicitly set on ``boot`` are sent, so
        ``Boot(boot_source_override_target=BootSourceOverrideTarget.PXE)``
        leaves the other boot settings untouched. The local ``boot`` value is
        merged afterwards; the stored snapshot is not.
        """
        changes = boot.model_dump(mode="json", by_alias=True, exclude_unset=True)
        logger.info("PATCH %s Boot=%s", self.odata_id, changes)
        response = self.client.patch(self.odata_id, encode({"Boot": changes}))
        current = self.boot or Boot()
        self.boot = current.model_copy(update=boot.model_dump(exclude_unset=True))
        return response


__all__ = [
    "Boot",
    "BootSourceOverrideEnabled",
    "BootSourceOverrideMode",
    "BootSourceOverrideTarget",
    "ComputerSystem",
    "PowerMode",
    "SystemType",
]
