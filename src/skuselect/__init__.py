"""Prime-encoded variant selection engine."""

__version__ = "0.1.0"
