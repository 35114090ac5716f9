"""healthrank: demographic-adjusted health percentiles and risk scoring."""

__version__ = "0.1.0"
