"""Engine — ingestion, per-station uptime computation and fleet summary."""

from station_uptime.engine.ingest import ingest_file, ingest_text, parse_lines
from station_uptime.engine.uptime import (
    compute_all_station_uptimes,
    compute_dataset_uptimes,
    compute_station_uptime,
    merge_up_intervals,
    station_window,
    total_up_time,
)
from station_uptime.engine.summary import summarize_results

__all__ = [
    "parse_lines",
    "ingest_text",
    "ingest_file",
    "compute_all_station_uptimes",
    "compute_dataset_uptimes",
    "compute_station_uptime",
    "merge_up_intervals",
    "station_window",
    "total_up_time",
    "summarize_results",
]
