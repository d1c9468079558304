"""Release packaging helper for the Terra-Link binary."""

__version__ = "0.1.0"
