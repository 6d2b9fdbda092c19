"""numcheck: validation and formatting of checksummed identifier numbers."""

__version__ = "0.1.0"
