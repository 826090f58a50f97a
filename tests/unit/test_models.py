"""
Unit tests for domain models (simple_nem12.models).
"""

from __future__ import annotations

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from simple_nem12.models import EnergyUnit, MeterRead, MeterVolume, Quality


def _volume(value: str, quality: Quality = Quality.A) -> MeterVolume:
    return MeterVolume(volume=Decimal(value), quality=quality)


class TestMeterVolume:
    def test_is_immutable(self):
        mv = _volume("1.00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            mv.volume = Decimal("2.00")  # type: ignore[misc]

    def test_equality_by_value(self):
        assert _volume("1.00") == _volume("1.00")
        assert _volume("1.00") != _volume("1.00", Quality.E)


class TestMeterRead:
    """Tests for MeterRead volume handling and derived values."""

    def test_append_keeps_insertion_order(self):
        mr = MeterRead("1234567890", EnergyUnit.KWH)
        mr.append_volume(date(2023, 1, 2), _volume("2.00"))
        mr.append_volume(date(2023, 1, 1), _volume("1.00"))
        assert list(mr.volumes) == [date(2023, 1, 2), date(2023, 1, 1)]

    def test_same_date_overwrites(self):
        mr = MeterRead("1234567890", EnergyUnit.KWH)
        mr.append_volume(date(2023, 1, 1), _volume("1.00"))
        mr.append_volume(date(2023, 1, 1), _volume("9.00", Quality.E))
        assert len(mr.volumes) == 1
        assert mr.volumes[date(2023, 1, 1)] == _volume("9.00", Quality.E)

    def test_total_volume(self):
        mr = MeterRead("1234567890", EnergyUnit.KWH)
        mr.append_volume(date(2016, 11, 13), _volume("-50.80"))
        mr.append_volume(date(2016, 11, 14), _volume("-50.80"))
        mr.append_volume(date(2016, 11, 15), _volume("100.00"))
        assert mr.total_volume == Decimal("-1.60")

    def test_empty_meter_read(self):
        mr = MeterRead("1234567890", EnergyUnit.KWH)
        assert mr.total_volume == Decimal("0.00")
        assert mr.start_date is None
        assert mr.end_date is None

    def test_date_span_ignores_insertion_order(self):
        mr = MeterRead("1234567890", EnergyUnit.KWH)
        mr.append_volume(date(2023, 1, 5), _volume("1.00"))
        mr.append_volume(date(2023, 1, 1), _volume("1.00"))
        mr.append_volume(date(2023, 1, 3), _volume("1.00"))
        assert mr.start_date == date(2023, 1, 1)
        assert mr.end_date == date(2023, 1, 5)

    def test_instances_do_not_share_volumes(self):
        a = MeterRead("1234567890", EnergyUnit.KWH)
        b = MeterRead("0987654321", EnergyUnit.KWH)
        a.append_volume(date(2023, 1, 1), _volume("1.00"))
        assert b.volumes == {}


class TestEnums:
    def test_energy_unit_value(self):
        assert EnergyUnit("KWH") is EnergyUnit.KWH

    def test_quality_members(self):
        assert {q.value for q in Quality} == {"A", "E"}
