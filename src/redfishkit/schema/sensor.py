"""Sensor resource and the sensor excerpts embedded in power equipment."""

from __future__ import annotations

from redfishkit.core.entity import MutableEntity
from redfishkit.core.odata import RedfishEnum, RedfishModel

from .common import Status


class ReadingType(RedfishEnum):
    TEMPERATURE = "Temperature"
    HUMIDITY = "Humidity"
    POWER = "Power"
    ENERGY_KWH = "EnergykWh"
    ENERGY_JOULES = "EnergyJoules"
    ENERGY_WH = "EnergyWh"
    CHARGE_AH = "ChargeAh"
    VOLTAGE = "Voltage"
    CURRENT = "Current"
    FREQUENCY = "Frequency"
    PRESSURE = "Pressure"
    PRESSURE_KPA = "PressurekPa"
    LIQUID_LEVEL = "LiquidLevel"
    ROTATIONAL = "Rotational"
    AIR_FLOW = "AirFlow"
    LIQUID_FLOW = "LiquidFlow"
    BAROMETRIC = "Barometric"
    ALTITUDE = "Altitude"
    PERCENT = "Percent"
    ABSOLUTE_HUMIDITY = "AbsoluteHumidity"


class SensorExcerpt(RedfishModel):
    """Reading copied from a Sensor into the resource that owns it.

    Excerpts for power, energy, current and voltage add more properties
    (``ApparentVA``, ``LifetimeReading``...); those are kept as extras.
    """

    data_source_uri: str | None = None
    reading: float | None = None


class Sensor(MutableEntity):
    """A single sensor reading and its calibration."""

    reading: float | None = None
    reading_type: ReadingType | None = None
    reading_units: str | None = None
    reading_range_max: float | None = None
    reading_range_min: float | None = None
    precision: float | None = None
    accuracy: float | None = None
    physical_context: str | None = None
    averaging_interval: str | None = None
    calibration: float | None = None
    calibration_time: str | None = None
    peak_reading: float | None = None
    status: Status | None = None

    read_write_fields = (
        "averaging_interval",
        "calibration",
        "calibration_time",
    )


__all__ = ["ReadingType", "SensorExcerpt", "Sensor"]
