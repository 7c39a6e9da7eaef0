"""Uptime result types and the percentage arithmetic primitive."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def uptime_percentage(total_up: int, total_window: int) -> int:
    """Return ``floor(100 * total_up / total_window)``.

    Python ints are arbitrary precision, so the ``total_up * 100`` intermediate
    is exact even when both operands sit near 2**64.  A zero window yields 0.
    """
    if total_window == 0:
        return 0
    return (total_up * 100) // total_window


class StationResult(BaseModel):
    """Final uptime for one station."""

    model_config = ConfigDict(frozen=True)

    station_id: int = Field(ge=0)
    uptime_pct: int = Field(ge=0, le=100)
    """Integer uptime percentage, floor-divided."""

    def render(self) -> str:
        """Output line ``<station-id> <uptime-percent>`` (no newline)."""
        return f"{self.station_id} {self.uptime_pct}"


class FleetSummary(BaseModel):
    """Aggregate statistics across all station results.

    Percentiles use linear interpolation over the integer uptimes, so they
    may be fractional.
    """

    num_stations: int
    """Number of stations summarised."""

    mean_uptime_pct: float
    min_uptime_pct: int
    max_uptime_pct: int

    # --- Uptime percentiles ---
    uptime_p10: float
    """10th percentile uptime (worst-performing stations)."""
    uptime_p50: float
    """Median uptime."""
    uptime_p90: float
    """90th percentile uptime."""

    stations_fully_up: int
    """Stations at 100%."""
    stations_fully_down: int
    """Stations at 0%."""
