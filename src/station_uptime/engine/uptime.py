"""Uptime engine — per-station window, merged up-time and percentage.

For each station:
  1. Pool the reports of every charger the station owns.
  2. Window = [min start, max end] over all pooled reports (up and down).
  3. Merge the up intervals (sorted by start, then end; touching spans merge).
  4. uptime = floor(100 × merged up-time / window length), clamped to 100.

A station whose chargers produced no reports at all is a failure, not 0%.
A window of zero length (every report at one instant) yields 0%.

Entry point: ``compute_all_station_uptimes(station_chargers, charger_reports)``
returns one StationResult per station in ascending station-id order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from station_uptime.errors import MalformedInputError
from station_uptime.models.report import Report, ReportDataSet
from station_uptime.models.results import StationResult, uptime_percentage

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Fleet-wide entry points
# ═══════════════════════════════════════════════════════════════════════════

def compute_all_station_uptimes(
    station_chargers: Mapping[int, Sequence[int]],
    charger_reports: Mapping[int, Sequence[Report]],
) -> list[StationResult]:
    """Compute every station's uptime, sorted ascending by station id.

    Raises
    ------
    MalformedInputError
        If any station has no reports; no partial results are returned.
    """
    results: list[StationResult] = []
    for station_id in sorted(station_chargers):
        pct = compute_station_uptime(station_id, station_chargers[station_id], charger_reports)
        results.append(StationResult(station_id=station_id, uptime_pct=pct))
    return results


def compute_dataset_uptimes(dataset: ReportDataSet) -> list[StationResult]:
    """``compute_all_station_uptimes`` over an ingested dataset."""
    return compute_all_station_uptimes(dataset.station_chargers, dataset.charger_reports)


# ═══════════════════════════════════════════════════════════════════════════
# Single station
# ═══════════════════════════════════════════════════════════════════════════

def compute_station_uptime(
    station_id: int,
    charger_ids: Iterable[int],
    charger_reports: Mapping[int, Sequence[Report]],
) -> int:
    """Uptime percentage in [0, 100] for one station.

    Parameters
    ----------
    station_id : int
        Used for diagnostics only.
    charger_ids : Iterable[int]
        Chargers owned by the station.
    charger_reports : Mapping[int, Sequence[Report]]
        Report table; not modified.
    """
    pooled = [r for cid in charger_ids for r in charger_reports.get(cid, ())]
    if not pooled:
        logger.debug("Station %d has no reports", station_id)
        raise MalformedInputError(f"station {station_id} has no reports")

    min_start, max_end = station_window(pooled)
    window = max_end - min_start
    if window == 0:
        logger.debug("Station %d: zero-length window at %d", station_id, min_start)
        return 0

    total_up = total_up_time(pooled)
    pct = min(uptime_percentage(total_up, window), 100)
    logger.debug(
        "Station %d: up %d of %d ns → %d%%", station_id, total_up, window, pct,
    )
    return pct


def station_window(reports: Sequence[Report]) -> tuple[int, int]:
    """(earliest start, latest end) across all reports, up and down alike."""
    if not reports:
        raise MalformedInputError("cannot derive a window from zero reports")
    return min(r.start for r in reports), max(r.end for r in reports)


def merge_up_intervals(reports: Iterable[Report]) -> list[tuple[int, int]]:
    """Merge the up reports into disjoint ``(start, end)`` spans.

    Intervals are ordered by (start, end).  A span absorbs the next interval
    when ``next.start <= cur_end``, so touching intervals join.
    """
    ups = sorted((r.start, r.end) for r in reports if r.up)
    if not ups:
        return []

    merged: list[tuple[int, int]] = []
    cur_start, cur_end = ups[0]
    for start, end in ups[1:]:
        if start <= cur_end:
            if end > cur_end:
                cur_end = end
        else:
            merged.append((cur_start, cur_end))
            cur_start, cur_end = start, end
    merged.append((cur_start, cur_end))
    return merged


def total_up_time(reports: Iterable[Report]) -> int:
    """Sum of merged up-span lengths (ns)."""
    return sum(end - start for start, end in merge_up_intervals(reports))
