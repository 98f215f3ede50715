"""storm-impact: human and economic impact of NOAA storm events."""

__version__ = "0.1.0"
