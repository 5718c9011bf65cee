"""Golden Raspberry producer award intervals."""

__version__ = "0.1.0"
