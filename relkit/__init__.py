"""relkit: tag and publish GitHub patch releases."""

__version__ = "0.1.0"
