"""Charging-station uptime calculator."""

from station_uptime.errors import MalformedInputError
from station_uptime.engine import (
    compute_all_station_uptimes,
    compute_dataset_uptimes,
    ingest_file,
    ingest_text,
    parse_lines,
    summarize_results,
)
from station_uptime.models import FleetSummary, Report, ReportDataSet, StationResult

__version__ = "1.0.0"

__all__ = [
    "MalformedInputError",
    "Report",
    "ReportDataSet",
    "StationResult",
    "FleetSummary",
    "parse_lines",
    "ingest_text",
    "ingest_file",
    "compute_all_station_uptimes",
    "compute_dataset_uptimes",
    "summarize_results",
]
