"""TOC/TOD flight profile calculator."""

__version__ = "0.1.0"
