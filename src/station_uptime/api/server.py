"""FastAPI server — HTTP access to the uptime calculator.

Run with:
    uvicorn station_uptime.api.server:app --port 8000

Endpoints:
    GET  /health          — liveness probe
    GET  /                — name, version and endpoint pointers
    POST /uptime          — per-station uptimes for one report document
    POST /uptime/summary  — same, plus fleet-level statistics

Malformed input is answered with HTTP 422 and ``{"detail": "ERROR"}``,
whatever the underlying violation.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from station_uptime import __version__
from station_uptime.engine.ingest import ingest_text
from station_uptime.engine.summary import summarize_results
from station_uptime.engine.uptime import compute_dataset_uptimes
from station_uptime.errors import FAILURE_TOKEN, MalformedInputError
from station_uptime.models.results import FleetSummary, StationResult

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Station Uptime API",
    version=__version__,
    description=(
        "Compute the share of time each charging station had at least one "
        "operational charger, from a stations / availability report document."
    ),
)


@app.exception_handler(MalformedInputError)
async def _malformed_input_handler(request: Request, exc: MalformedInputError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": FAILURE_TOKEN})


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class UptimeRequest(BaseModel):
    """Request body for /uptime and /uptime/summary."""
    report: str = Field(
        description="Full input document: a [Stations] section followed by a "
                    "[Charger Availability Reports] section.",
    )


class UptimeResponse(BaseModel):
    results: list[StationResult]
    lines: list[str] = Field(description="Rendered '<station-id> <uptime-percent>' lines")


class UptimeSummaryResponse(UptimeResponse):
    summary: FleetSummary


def _compute(req: UptimeRequest) -> UptimeResponse:
    results = compute_dataset_uptimes(ingest_text(req.report))
    return UptimeResponse(results=results, lines=[r.render() for r in results])


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Station Uptime API",
        "version": __version__,
        "endpoints": ["POST /uptime", "POST /uptime/summary"],
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.post("/uptime", response_model=UptimeResponse)
def uptime(req: UptimeRequest):
    """Per-station uptime percentages, ascending by station id."""
    return _compute(req)


@app.post("/uptime/summary", response_model=UptimeSummaryResponse)
def uptime_summary(req: UptimeRequest):
    """Per-station uptimes plus mean / min / max and P10/P50/P90."""
    base = _compute(req)
    return UptimeSummaryResponse(
        results=base.results,
        lines=base.lines,
        summary=summarize_results(base.results),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Entrypoint
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "station_uptime.api.server:app",
        host="0.0.0.0",
        port=8000,
    )


if __name__ == "__main__":
    main()
