"""servicectl: a minimal local service manager."""

__version__ = '0.1.0'
