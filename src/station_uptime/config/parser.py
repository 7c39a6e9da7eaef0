"""Input grammar settings — section header literals."""

from pydantic import BaseModel, ConfigDict, Field


class ParserConfig(BaseModel):
    """Section headers for the two-section report format.

    Headers are matched literally (case-sensitive) against trimmed lines.
    """

    model_config = ConfigDict(frozen=True)

    stations_header: str = Field(
        default="[Stations]",
        min_length=1,
        description="Header opening the station → charger declarations",
    )
    reports_header: str = Field(
        default="[Charger Availability Reports]",
        min_length=1,
        description="Header opening the per-charger availability reports",
    )
