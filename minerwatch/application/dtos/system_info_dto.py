"""DTO for the telemetry returned by the device's system info endpoint."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


def _round(value: Optional[float], digits: int, divisor: float = 1.0) -> Optional[float]:
    if value is None:
        return None
    return round(value / divisor, digits)


class SystemInfoDTO(BaseModel):
    """
    Device telemetry, minus the history fragment.

    Field names follow the device's camelCase keys through aliases. Unknown
    keys are kept so newer firmware fields reach consumers unchanged.
    """

    power: Optional[float] = Field(default=None, description="Power draw in W")
    voltage: Optional[float] = Field(default=None, description="Input voltage")
    current: Optional[float] = Field(default=None, description="Input current")
    temp: Optional[float] = Field(default=None, description="ASIC temperature in C")
    vr_temp: Optional[float] = Field(
        default=None, alias="vrTemp", description="Voltage regulator temperature"
    )
    core_voltage: Optional[float] = Field(
        default=None, alias="coreVoltage", description="Requested core voltage"
    )
    core_voltage_actual: Optional[float] = Field(
        default=None, alias="coreVoltageActual", description="Measured core voltage"
    )
    frequency: Optional[float] = Field(default=None, description="ASIC frequency MHz")
    asic_count: Optional[int] = Field(default=None, alias="asicCount")
    small_core_count: Optional[int] = Field(default=None, alias="smallCoreCount")
    hash_rate: Optional[float] = Field(default=None, alias="hashRate")
    hash_rate_timestamp: Optional[int] = Field(default=None, alias="hashRateTimestamp")
    hash_rate_10m: Optional[float] = Field(default=None, alias="hashRate_10m")
    hash_rate_1h: Optional[float] = Field(default=None, alias="hashRate_1h")
    hash_rate_1d: Optional[float] = Field(default=None, alias="hashRate_1d")
    best_diff: Optional[str] = Field(default=None, alias="bestDiff")
    best_session_diff: Optional[str] = Field(default=None, alias="bestSessionDiff")
    shares_accepted: Optional[int] = Field(default=None, alias="sharesAccepted")
    shares_rejected: Optional[int] = Field(default=None, alias="sharesRejected")
    uptime_seconds: Optional[int] = Field(default=None, alias="uptimeSeconds")
    hostname: Optional[str] = None
    version: Optional[str] = None
    board_version: Optional[str] = Field(default=None, alias="boardVersion")
    stratum_url: Optional[str] = Field(default=None, alias="stratumURL")
    stratum_user: Optional[str] = Field(default=None, alias="stratumUser")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SystemInfoDTO":
        return cls.model_validate(payload)

    def normalized(self) -> "SystemInfoDTO":
        """
        Copy with values converted to display units.

        voltage and current arrive in milli-units, core voltages in mV.
        """
        return self.model_copy(
            update={
                "power": _round(self.power, 1),
                "voltage": _round(self.voltage, 1, 1000.0),
                "current": _round(self.current, 1, 1000.0),
                "core_voltage_actual": _round(self.core_voltage_actual, 2, 1000.0),
                "core_voltage": _round(self.core_voltage, 2, 1000.0),
                "temp": _round(self.temp, 1),
                "vr_temp": _round(self.vr_temp, 1),
            }
        )

    @computed_field(alias="expectedHashRate")
    @property
    def expected_hashrate(self) -> Optional[int]:
        """Theoretical hashrate in GH/s from frequency and core count."""
        if None in (self.frequency, self.small_core_count, self.asic_count):
            return None
        cores = self.small_core_count * self.asic_count
        return math.floor(self.frequency * (cores / 1000))
