"""Plain-text trip writer adapter.

Renders each planned trip as turn-by-turn directions with per-leg and
total distance, or driving time for time-optimized trips.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, TextIO

from ...domain.models import TripMetric, TripResult


def format_duration(hours: float) -> str:
    """Format a duration as hours, minutes and seconds.

    Leading zero units are dropped: ``1 hrs 2 mins 3.0 secs``,
    ``2 mins 3.0 secs`` or ``3.0 secs``.
    """
    total_seconds = round(hours * 3600.0, 1)
    whole_hours = int(total_seconds // 3600)
    minutes = int((total_seconds - whole_hours * 3600) // 60)
    seconds = total_seconds - whole_hours * 3600 - minutes * 60

    if whole_hours > 0:
        return f"{whole_hours} hrs {minutes} mins {seconds:.1f} secs"
    if minutes > 0:
        return f"{minutes} mins {seconds:.1f} secs"
    return f"{seconds:.1f} secs"


@dataclass
class TextTripWriter:
    """Trip writer producing plain-text directions.

    This adapter implements TripWriterPort.
    """

    indent: str = "  "
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def format(self, result: TripResult) -> str:
        """Render a single trip result."""
        if result.trip.metric is TripMetric.TIME:
            lines = self._format_time(result)
        else:
            lines = self._format_distance(result)
        return "\n".join(lines)

    def write(self, results: Sequence[TripResult], stream: TextIO) -> None:
        """Write every trip, separated by blank lines."""
        for index, result in enumerate(results):
            if index:
                stream.write("\n")
            stream.write(self.format(result))
            stream.write("\n")
        self._logger.debug("Trips written", extra={"trips": len(results)})

    def _format_distance(self, result: TripResult) -> List[str]:
        lines = [
            f"Shortest distance from {result.origin} to {result.destination}",
            f"{self.indent}Begin at {result.origin}",
        ]
        for leg in result.legs:
            lines.append(f"{self.indent}Continue to {leg.location} ({leg.miles:.1f} miles)")
        lines.append(f"Total distance: {result.total_miles:.1f} miles")
        return lines

    def _format_time(self, result: TripResult) -> List[str]:
        lines = [
            f"Shortest driving time from {result.origin} to {result.destination}",
            f"{self.indent}Begin at {result.origin}",
        ]
        for leg in result.legs:
            lines.append(
                f"{self.indent}Continue to {leg.location} "
                f"({leg.miles:.1f} miles @ {leg.miles_per_hour:.1f}mph = "
                f"{format_duration(leg.hours)})"
            )
        lines.append(f"Total time: {format_duration(result.total_hours)}")
        return lines
