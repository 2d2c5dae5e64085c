"""Government agency content portal API."""

__version__ = "1.0.0"
