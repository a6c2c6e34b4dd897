"""Interpolation, polynomial fitting and forecasts for yearly population and internet-usage data."""

__version__ = "0.1.0"
__all__ = ["csvdata", "interpolation", "polyfit", "regression"]