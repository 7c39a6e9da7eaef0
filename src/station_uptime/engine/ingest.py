"""Report ingestion — two-section grammar and structural validation.

Input layout::

    [Stations]
    <station-id> <charger-id> [<charger-id> ...]
    ...
    [Charger Availability Reports]
    <charger-id> <start-ns> <end-ns> <true|false>
    ...

Entry points:
  1. ``parse_lines``  — validate an iterable of raw lines into a ReportDataSet
  2. ``ingest_text``  — same, from one string
  3. ``ingest_file``  — same, from a file path or open text stream

The first violation raises ``MalformedInputError``; nothing partial is returned.
"""

from __future__ import annotations

import enum
import io
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from station_uptime.config.parser import ParserConfig
from station_uptime.errors import MalformedInputError
from station_uptime.models.report import UINT32_MAX, UINT64_MAX, Report, ReportDataSet

logger = logging.getLogger(__name__)


class _Section(enum.Enum):
    INIT = "init"
    STATIONS = "stations"
    REPORTS = "reports"


# ═══════════════════════════════════════════════════════════════════════════
# Public entry points
# ═══════════════════════════════════════════════════════════════════════════

def parse_lines(
    lines: Iterable[str],
    config: ParserConfig | None = None,
) -> ReportDataSet:
    """Parse and validate raw input lines.

    Parameters
    ----------
    lines : Iterable[str]
        Raw lines (trailing newlines allowed).
    config : ParserConfig | None
        Section header literals.  Defaults to the standard headers.

    Returns
    -------
    ReportDataSet
        Station → chargers, charger → station and charger → reports.

    Raises
    ------
    MalformedInputError
        On the first grammar, referential, cardinality or ordering violation.
    """
    cfg = config or ParserConfig()

    station_chargers: dict[int, list[int]] = {}
    charger_station: dict[int, int] = {}
    charger_reports: dict[int, list[Report]] = {}

    section = _Section.INIT
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        try:
            if line == cfg.stations_header:
                if section is not _Section.INIT:
                    raise MalformedInputError("unexpected stations header")
                section = _Section.STATIONS
            elif line == cfg.reports_header:
                if section is not _Section.STATIONS:
                    raise MalformedInputError("unexpected reports header")
                section = _Section.REPORTS
            elif section is _Section.STATIONS:
                _parse_station_line(line, station_chargers, charger_station)
            elif section is _Section.REPORTS:
                _parse_report_line(line, charger_station, charger_reports)
            else:
                raise MalformedInputError("data line before any section header")
        except MalformedInputError as exc:
            logger.debug("Rejecting input at line %d: %s", line_number, exc.reason)
            raise MalformedInputError(exc.reason, line_number) from None

    if not station_chargers:
        logger.debug("Rejecting input: no stations declared")
        raise MalformedInputError("no stations declared")

    dataset = ReportDataSet(
        station_chargers=station_chargers,
        charger_station=charger_station,
        charger_reports=charger_reports,
    )
    logger.info(
        "Ingested %d stations, %d chargers, %d reports",
        dataset.num_stations, dataset.num_chargers, dataset.num_reports,
    )
    return dataset


def ingest_text(text: str, config: ParserConfig | None = None) -> ReportDataSet:
    """Parse a whole input document held in memory.

    Lines end only at a line feed; a trailing carriage return is removed by
    the per-line strip.
    """
    return parse_lines(text.split("\n"), config)


def ingest_file(
    source: str | Path | io.TextIOBase,
    config: ParserConfig | None = None,
) -> ReportDataSet:
    """Parse an input file.

    Parameters
    ----------
    source : str | Path | io.TextIOBase
        File path, or an already-open text stream (e.g. ``io.StringIO``).

    Raises
    ------
    MalformedInputError
        On any violation.  I/O and decoding errors propagate unchanged.
    """
    if isinstance(source, io.TextIOBase):
        if source.seekable():
            source.seek(0)
        return parse_lines(source, config)
    path = Path(source)
    with path.open(newline="\n", encoding="utf-8") as f:
        return parse_lines(f, config)


# ═══════════════════════════════════════════════════════════════════════════
# Line parsers
# ═══════════════════════════════════════════════════════════════════════════

def _parse_station_line(
    line: str,
    station_chargers: dict[int, list[int]],
    charger_station: dict[int, int],
) -> None:
    """``<station-id> <charger-id>+`` — register one station and its chargers."""
    parts = line.split()
    if len(parts) < 2:
        raise MalformedInputError("station declared without chargers")

    station_id = parse_uint(parts[0], UINT32_MAX)
    if station_id in station_chargers:
        raise MalformedInputError(f"station {station_id} declared twice")

    chargers: list[int] = []
    for token in parts[1:]:
        charger_id = parse_uint(token, UINT32_MAX)
        if charger_id in charger_station:
            raise MalformedInputError(
                f"charger {charger_id} already assigned to station "
                f"{charger_station[charger_id]}"
            )
        chargers.append(charger_id)
        charger_station[charger_id] = station_id

    station_chargers[station_id] = chargers


def _parse_report_line(
    line: str,
    charger_station: dict[int, int],
    charger_reports: dict[int, list[Report]],
) -> None:
    """``<charger-id> <start> <end> <true|false>`` — append one report."""
    parts = line.split()
    if len(parts) != 4:
        raise MalformedInputError(f"expected 4 report fields, got {len(parts)}")

    charger_id = parse_uint(parts[0], UINT32_MAX)
    start = parse_uint(parts[1], UINT64_MAX)
    end = parse_uint(parts[2], UINT64_MAX)
    if end < start:
        raise MalformedInputError(f"report ends ({end}) before it starts ({start})")
    up = parse_bool(parts[3])

    if charger_id not in charger_station:
        raise MalformedInputError(f"report for undeclared charger {charger_id}")

    try:
        report = Report(start=start, end=end, up=up)
    except ValidationError as exc:
        raise MalformedInputError(f"invalid report: {exc}") from exc
    charger_reports.setdefault(charger_id, []).append(report)


# ═══════════════════════════════════════════════════════════════════════════
# Token parsers
# ═══════════════════════════════════════════════════════════════════════════

def parse_uint(token: str, max_value: int) -> int:
    """Parse an unsigned decimal integer in ``[0, max_value]``.

    Only ASCII digits are accepted: no sign, underscores or non-ASCII digits,
    all of which ``int()`` would otherwise tolerate.
    """
    if not (token.isascii() and token.isdigit()):
        raise MalformedInputError(f"not an unsigned integer: {token!r}")
    value = int(token)
    if value > max_value:
        raise MalformedInputError(f"integer out of range: {token}")
    return value


def parse_bool(token: str) -> bool:
    """Case-insensitive ``true`` / ``false``; anything else is rejected."""
    lowered = token.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise MalformedInputError(f"not a boolean: {token!r}")
