"""FinTrack: personal finance tracking dashboard."""

__version__ = "0.1.0"
