"""Model validation tests — Report ordering, result bounds, percentage primitive."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from station_uptime.models import (
    Report,
    ReportDataSet,
    StationResult,
    uptime_percentage,
)
from station_uptime.models.report import UINT64_MAX


# ═══════════════════════════════════════════════════════════════════════════
# Report
# ═══════════════════════════════════════════════════════════════════════════

class TestReportValidation:
    def test_valid(self):
        r = Report(start=0, end=10, up=True)
        assert r.duration == 10

    def test_zero_length_valid(self):
        assert Report(start=5, end=5, up=False).duration == 0

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            Report(start=10, end=5, up=True)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Report(start=-1, end=5, up=True)

    def test_above_uint64_rejected(self):
        with pytest.raises(ValidationError):
            Report(start=0, end=UINT64_MAX + 1, up=True)

    def test_frozen(self):
        r = Report(start=0, end=10, up=True)
        with pytest.raises(ValidationError):
            r.end = 20


class TestReportDataSet:
    def test_empty_defaults(self):
        ds = ReportDataSet()
        assert ds.num_stations == 0
        assert ds.num_chargers == 0
        assert ds.num_reports == 0


# ═══════════════════════════════════════════════════════════════════════════
# StationResult
# ═══════════════════════════════════════════════════════════════════════════

class TestStationResult:
    def test_render(self):
        assert StationResult(station_id=12, uptime_pct=75).render() == "12 75"

    @pytest.mark.parametrize("pct", [-1, 101])
    def test_out_of_bounds_rejected(self, pct):
        with pytest.raises(ValidationError):
            StationResult(station_id=0, uptime_pct=pct)

    def test_bounds_accepted(self):
        assert StationResult(station_id=0, uptime_pct=0).uptime_pct == 0
        assert StationResult(station_id=0, uptime_pct=100).uptime_pct == 100


# ═══════════════════════════════════════════════════════════════════════════
# Percentage primitive
# ═══════════════════════════════════════════════════════════════════════════

class TestUptimePercentage:
    def test_half(self):
        assert uptime_percentage(50, 100) == 50

    def test_floors(self):
        assert uptime_percentage(1, 3) == 33
        assert uptime_percentage(999, 1000) == 99

    def test_zero_window(self):
        assert uptime_percentage(0, 0) == 0

    def test_exact_near_uint64_max(self):
        assert uptime_percentage(UINT64_MAX - 1, UINT64_MAX) == 99
        assert uptime_percentage(UINT64_MAX, UINT64_MAX) == 100
