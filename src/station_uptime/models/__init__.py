"""Data models — ingested reports, uptime results, arithmetic primitive."""

from station_uptime.models.report import Report, ReportDataSet
from station_uptime.models.results import FleetSummary, StationResult, uptime_percentage

__all__ = [
    "FleetSummary",
    "Report",
    "ReportDataSet",
    "StationResult",
    "uptime_percentage",
]
