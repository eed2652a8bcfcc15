"""FBA unit economics calculator."""

__version__ = "1.0.0"
