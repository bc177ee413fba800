"""Document to JSON conversion API."""

__version__ = "0.1.0"
