"""Rendering port - Abstraction for presenting planned trips.

This protocol defines the contract for turning trip results into
human-readable output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, TextIO

if TYPE_CHECKING:
    from ..domain.models import TripResult


class TripWriterPort(Protocol):
    """Port for trip output.

    Implementation: adapters/rendering/text_writer.py
    """

    def format(self, result: TripResult) -> str:
        """Render a single trip result."""
        ...

    def write(self, results: Sequence[TripResult], stream: TextIO) -> None:
        """Render every trip result to stream.

        Args:
            results: Planned trips in request order.
            stream: Destination text stream.
        """
        ...
