"""Rendering adapters - Implementations of the trip writer port."""

from .text_writer import TextTripWriter, format_duration

__all__ = ["TextTripWriter", "format_duration"]
