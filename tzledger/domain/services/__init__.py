"""Domain services for the timestamp ledger."""

from .zone_conversion import ParsedTimestamp, ZoneConversionService, format_offset

__all__ = ["ParsedTimestamp", "ZoneConversionService", "format_offset"]
