"""Control logic for a small differential-drive rover, simulated in software."""

__version__ = "0.1.0"