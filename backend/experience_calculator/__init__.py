"""Experience calculator: per-stint durations, overall experience and document export."""

__version__ = "0.1.0"
