"""Ingested report types — one availability record and the validated dataset.

Models for:
  - A single charger availability record (``Report``)
  - The three structures produced by ingestion (``ReportDataSet``):
    station → chargers, charger → station, charger → reports
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1


# ═══════════════════════════════════════════════════════════════════════════
# Availability record
# ═══════════════════════════════════════════════════════════════════════════

class Report(BaseModel):
    """One availability record: the charger was up (or down) over [start, end].

    Timestamps are unsigned 64-bit nanosecond values.
    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, le=UINT64_MAX)
    """Interval start (ns)."""

    end: int = Field(ge=0, le=UINT64_MAX)
    """Interval end (ns).  Equal to ``start`` for a zero-length record."""

    up: bool
    """True if the charger was operational throughout the interval."""

    @model_validator(mode="after")
    def _check_ordered(self) -> Report:
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) precedes start ({self.start})")
        return self

    @property
    def duration(self) -> int:
        return self.end - self.start


# ═══════════════════════════════════════════════════════════════════════════
# Validated dataset
# ═══════════════════════════════════════════════════════════════════════════

class ReportDataSet(BaseModel):
    """Container for everything ingestion derives from one input.

    ``charger_station`` is the inverse of ``station_chargers`` and is kept as
    its own lookup so ownership checks stay O(1) per charger.
    """

    station_chargers: dict[int, list[int]] = Field(default_factory=dict)
    """Station id → charger ids in declaration order."""

    charger_station: dict[int, int] = Field(default_factory=dict)
    """Charger id → owning station id."""

    charger_reports: dict[int, list[Report]] = Field(default_factory=dict)
    """Charger id → reports in input order.  Chargers without reports are absent."""

    @property
    def num_stations(self) -> int:
        return len(self.station_chargers)

    @property
    def num_chargers(self) -> int:
        return len(self.charger_station)

    @property
    def num_reports(self) -> int:
        return sum(len(reps) for reps in self.charger_reports.values())
