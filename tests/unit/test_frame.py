"""
Unit tests for pandas views (simple_nem12.frame).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pandas as pd

from simple_nem12.frame import SUMMARY_COLUMNS, VOLUME_COLUMNS, summarize, to_frame
from simple_nem12.models import EnergyUnit, MeterRead, MeterVolume, Quality


def _meter_reads() -> list[MeterRead]:
    first = MeterRead("6123456789", EnergyUnit.KWH)
    first.append_volume(date(2016, 11, 13), MeterVolume(Decimal("-50.80"), Quality.A))
    first.append_volume(date(2016, 11, 14), MeterVolume(Decimal("-50.80"), Quality.E))
    second = MeterRead("6987654321", EnergyUnit.KWH)
    second.append_volume(date(2016, 11, 13), MeterVolume(Decimal("2.12"), Quality.A))
    empty = MeterRead("1111111111", EnergyUnit.KWH)
    return [first, second, empty]


class TestToFrame:
    def test_one_row_per_volume(self):
        df = to_frame(_meter_reads())
        assert list(df.columns) == VOLUME_COLUMNS
        assert len(df) == 3
        assert list(df["nmi"]) == ["6123456789", "6123456789", "6987654321"]

    def test_values_keep_decimal_and_enum_strings(self):
        row = to_frame(_meter_reads()).iloc[1]
        assert row["date"] == date(2016, 11, 14)
        assert row["volume"] == Decimal("-50.80")
        assert isinstance(row["volume"], Decimal)
        assert row["quality"] == "E"
        assert row["energy_unit"] == "KWH"

    def test_empty_input(self):
        df = to_frame([])
        assert df.empty
        assert list(df.columns) == VOLUME_COLUMNS


class TestSummarize:
    def test_one_row_per_meter(self):
        df = summarize(_meter_reads())
        assert list(df.columns) == SUMMARY_COLUMNS
        assert list(df["nmi"]) == ["6123456789", "6987654321", "1111111111"]

    def test_totals_and_span(self):
        first = summarize(_meter_reads()).iloc[0]
        assert first["total_volume"] == Decimal("-101.60")
        assert first["start_date"] == date(2016, 11, 13)
        assert first["end_date"] == date(2016, 11, 14)
        assert first["days"] == 2

    def test_meter_without_volumes(self):
        last = summarize(_meter_reads()).iloc[2]
        assert last["days"] == 0
        assert last["total_volume"] == Decimal("0.00")
        assert pd.isna(last["start_date"])
