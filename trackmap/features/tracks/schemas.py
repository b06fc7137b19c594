"""
Track-related schemas.

Pydantic models for what a loaded track reports to its consumers.
"""

from pydantic import BaseModel
from typing import Optional


class TrackSummary(BaseModel):
    """One row of the per-load report."""

    name: str
    date: Optional[str] = None

    # Metrics
    elevation_gain_m: float = 0.0
    distance_km: float = 0.0
    total_time_s: Optional[float] = None

    # Source
    filename: str = ""
    url: Optional[str] = None
    points_count: int = 0

    def to_csv_row(self) -> str:
        """Report line: '"name";"date";"elev";"distance";"url"'."""
        values = [
            self.name,
            self.date if self.date is not None else "",
            _number(self.elevation_gain_m),
            f"{self.distance_km:.1f}",
            self.url if self.url is not None else "",
        ]
        return ";".join(f'"{v}"' for v in values)


def _number(value: float) -> str:
    """1200.0 -> '1200', 12.5 -> '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
