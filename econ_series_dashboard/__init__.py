"""Economic series overlay dashboard built on FRED data."""

__version__ = "0.1.0"
