"""Fleet summary — aggregate statistics over per-station uptimes.

Mirrors the percentile summary used for Monte-Carlo runs: collect the
uptimes into an array, then report P10/P50/P90 alongside mean/min/max.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from station_uptime.errors import MalformedInputError
from station_uptime.models.results import FleetSummary, StationResult


def summarize_results(results: Sequence[StationResult]) -> FleetSummary:
    """Summarise station uptimes.

    Raises
    ------
    MalformedInputError
        If ``results`` is empty.
    """
    if not results:
        raise MalformedInputError("cannot summarise zero stations")

    pcts = np.array([r.uptime_pct for r in results], dtype=np.int64)

    return FleetSummary(
        num_stations=len(results),
        mean_uptime_pct=round(float(pcts.mean()), 4),
        min_uptime_pct=int(pcts.min()),
        max_uptime_pct=int(pcts.max()),
        uptime_p10=float(np.percentile(pcts, 10)),
        uptime_p50=float(np.percentile(pcts, 50)),
        uptime_p90=float(np.percentile(pcts, 90)),
        stations_fully_up=int(np.count_nonzero(pcts == 100)),
        stations_fully_down=int(np.count_nonzero(pcts == 0)),
    )
