from __future__ import annotations

from minerwatch.application.dtos.system_info_dto import SystemInfoDTO


def _payload() -> dict:
    return {
        "power": 14.2345,
        "voltage": 5123.0,
        "current": 2841.0,
        "temp": 58.66,
        "vrTemp": 47.04,
        "coreVoltage": 1200,
        "coreVoltageActual": 1187,
        "frequency": 485,
        "asicCount": 1,
        "smallCoreCount": 894,
        "hostname": "bitaxe",
        "fanrpm": 4100,
    }


def test_normalized_converts_display_units() -> None:
    info = SystemInfoDTO.from_payload(_payload()).normalized()

    assert info.power == 14.2
    assert info.voltage == 5.1
    assert info.current == 2.8
    assert info.temp == 58.7
    assert info.vr_temp == 47.0
    assert info.core_voltage == 1.2
    assert info.core_voltage_actual == 1.19


def test_normalized_tolerates_missing_fields() -> None:
    info = SystemInfoDTO.from_payload({"hostname": "bitaxe"}).normalized()
    assert info.power is None
    assert info.voltage is None
    assert info.hostname == "bitaxe"


def test_unknown_fields_are_kept() -> None:
    info = SystemInfoDTO.from_payload(_payload())
    dumped = info.model_dump(by_alias=True)
    assert dumped["fanrpm"] == 4100
    assert dumped["vrTemp"] == 47.04


def test_expected_hashrate() -> None:
    info = SystemInfoDTO.from_payload(_payload())
    assert info.expected_hashrate == 433  # floor(485 * 894 / 1000)


def test_expected_hashrate_unknown_without_core_counts() -> None:
    assert SystemInfoDTO.from_payload({"frequency": 485}).expected_hashrate is None


def test_expected_hashrate_is_serialized() -> None:
    info = SystemInfoDTO.from_payload(
        {"frequency": 485, "smallCoreCount": 894, "asicCount": 1}
    ).normalized()

    assert info.model_dump(by_alias=True)["expectedHashRate"] == 433
    assert info.model_dump()["expected_hashrate"] == 433
